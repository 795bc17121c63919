# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Proof-of-concept exploit models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from bountyagent.core.constants import Severity


class ExploitGenerator(StrEnum):
    TEMPLATE = "template"
    AI = "ai"


class Exploit(BaseModel):
    """A synthesized proof-of-concept tied to one finding."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Report-unique id, e.g. exp-1")
    finding_id: str
    title: str
    severity: Severity
    exploit_code: str
    expected_result: str
    demo_steps: list[str] = Field(default_factory=list)
    generator: ExploitGenerator = ExploitGenerator.TEMPLATE
