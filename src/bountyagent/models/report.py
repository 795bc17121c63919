# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""The immutable scan report artifact."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from bountyagent.core.constants import Severity
from bountyagent.models.exploit import Exploit
from bountyagent.models.finding import Finding
from bountyagent.models.risk import Decision, RiskSummary
from bountyagent.models.scan import AdapterOutcome


class TopVulnerability(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    severity: Severity
    impact: str
    priority: str = "immediate"
    requires_notification: bool = True


class AIAnalysis(BaseModel):
    """Decision-engine output, shaped the way dashboards consume it."""

    model_config = ConfigDict(frozen=True)

    overall_risk_score: float
    executive_summary: str
    decision: Decision
    top_vulnerabilities: tuple[TopVulnerability, ...] = ()
    recommended_actions: tuple[str, ...] = ()


class Report(BaseModel):
    """Complete output of one scan run. Never mutated once built."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    target: str
    summary: RiskSummary
    findings: tuple[Finding, ...] = ()
    exploits: tuple[Exploit, ...] = ()
    ai_analysis: AIAnalysis | None = None
    scan_output: str = ""
    adapters: tuple[AdapterOutcome, ...] = Field(default=())

    @property
    def decision(self) -> Decision | None:
        return self.ai_analysis.decision if self.ai_analysis else None

    def to_document(self) -> dict[str, Any]:
        """Return the JSON-ready document persisted by callers."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(indent=indent, exclude_none=True)
