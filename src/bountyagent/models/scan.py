# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Per-adapter outcome model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from bountyagent.core.constants import AdapterStatus
from bountyagent.models.finding import Finding


class AdapterOutcome(BaseModel):
    """What one adapter contributed to a scan."""

    model_config = ConfigDict(frozen=True)

    name: str
    status: AdapterStatus
    findings: tuple[Finding, ...] = Field(default=(), exclude=True)
    error: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def finding_count(self) -> int:
        return len(self.findings)

    @property
    def produced_output(self) -> bool:
        return self.status == AdapterStatus.OK
