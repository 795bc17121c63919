# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for bountyagent."""

from bountyagent.models.exploit import Exploit, ExploitGenerator
from bountyagent.models.finding import AIAnnotation, Finding
from bountyagent.models.report import AIAnalysis, Report, TopVulnerability
from bountyagent.models.risk import Decision, RiskSummary
from bountyagent.models.scan import AdapterOutcome

__all__ = [
    "AIAnalysis",
    "AIAnnotation",
    "AdapterOutcome",
    "Decision",
    "Exploit",
    "ExploitGenerator",
    "Finding",
    "Report",
    "RiskSummary",
    "TopVulnerability",
]
