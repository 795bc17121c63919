# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Risk summary and deployment decision models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from bountyagent.core.constants import RISK_SCORE_CAP, DecisionAction


class RiskSummary(BaseModel):
    """Severity histogram plus one bounded aggregate score."""

    model_config = ConfigDict(frozen=True)

    critical: int = Field(default=0, ge=0)
    high: int = Field(default=0, ge=0)
    medium: int = Field(default=0, ge=0)
    low: int = Field(default=0, ge=0)
    risk_score: float = Field(default=0.0, ge=0.0, le=RISK_SCORE_CAP)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_findings(self) -> int:
        return self.critical + self.high + self.medium + self.low


class Decision(BaseModel):
    """Policy verdict with a human-readable rationale."""

    model_config = ConfigDict(frozen=True)

    action: DecisionAction
    reasoning: str
