# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Severity histogram and bounded risk score computation."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from bountyagent.core.constants import RISK_SCORE_CAP, SEVERITY_WEIGHTS, Severity
from bountyagent.models.finding import Finding
from bountyagent.models.risk import RiskSummary


def compute_risk_score(counts: Counter[Severity]) -> float:
    """Weighted severity sum (3/2/1/0.5), capped at 10."""
    weighted = sum(SEVERITY_WEIGHTS[sev] * counts.get(sev, 0) for sev in Severity)
    return min(RISK_SCORE_CAP, weighted)


def score(findings: Iterable[Finding]) -> RiskSummary:
    """Count findings per severity and derive the aggregate score.

    Only the counts matter, so any permutation of *findings* yields the
    same summary.
    """
    counts: Counter[Severity] = Counter(f.severity for f in findings)
    return RiskSummary(
        critical=counts.get(Severity.CRITICAL, 0),
        high=counts.get(Severity.HIGH, 0),
        medium=counts.get(Severity.MEDIUM, 0),
        low=counts.get(Severity.LOW, 0),
        risk_score=compute_risk_score(counts),
    )
