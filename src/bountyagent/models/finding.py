# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Normalized vulnerability finding models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bountyagent.core.constants import DEFAULT_REMEDIATION, Severity


def coerce_severity(value: object) -> Severity:
    """Lower-case a tool severity and fall back to MEDIUM when unrecognized."""
    if isinstance(value, Severity):
        return value
    try:
        return Severity(str(value).strip().lower())
    except ValueError:
        return Severity.MEDIUM


class AIAnnotation(BaseModel):
    """Enhancement attached to a finding by the prioritizer."""

    model_config = ConfigDict(frozen=True)

    priority_score: int = Field(ge=0, le=100)
    reasoning: str = ""
    risk_narrative: str = ""
    immediate_action: str = ""


class Finding(BaseModel):
    """A single normalized issue reported by one adapter."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Run-unique id, e.g. semgrep-3")
    file: str = Field(min_length=1, description="Path relative to the scan root")
    line: int = Field(default=0, ge=0)
    severity: Severity
    category: str
    description: str
    source: str
    remediation: str = DEFAULT_REMEDIATION
    ai_annotation: AIAnnotation | None = None

    @field_validator("severity", mode="before")
    @classmethod
    def _coerce_severity(cls, v: object) -> Severity:
        return coerce_severity(v)

    @field_validator("remediation", mode="before")
    @classmethod
    def _default_remediation(cls, v: object) -> str:
        if v is None or not str(v).strip():
            return DEFAULT_REMEDIATION
        return str(v)

    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}" if self.line else self.file

    def annotate(self, annotation: AIAnnotation) -> Finding:
        """Return a copy carrying *annotation*; identity fields are unchanged."""
        return self.model_copy(update={"ai_annotation": annotation})
