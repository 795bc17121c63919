# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Deployment decision and the analysis block derived from it."""

from __future__ import annotations

from collections.abc import Iterable

from bountyagent.core.constants import (
    HIGH_WARN_THRESHOLD,
    STANDING_RECOMMENDATIONS,
    DecisionAction,
    Severity,
)
from bountyagent.models.finding import Finding
from bountyagent.models.report import AIAnalysis, TopVulnerability
from bountyagent.models.risk import Decision, RiskSummary

TOP_VULNERABILITY_LIMIT = 3


def decide(summary: RiskSummary) -> Decision:
    """Map a severity histogram to a policy verdict. First matching rule wins."""
    if summary.critical > 0:
        return Decision(
            action=DecisionAction.BLOCK_DEPLOYMENT,
            reasoning=(
                f"Blocking deployment due to {summary.critical} critical "
                "vulnerabilities that could lead to data breach or system compromise."
            ),
        )
    if summary.high > HIGH_WARN_THRESHOLD:
        return Decision(
            action=DecisionAction.WARN_AND_CONTINUE,
            reasoning=(
                f"Warning: {summary.high} high-severity issues detected. "
                "Review before production deployment."
            ),
        )
    return Decision(
        action=DecisionAction.APPROVE,
        reasoning="No critical security issues detected. Safe to proceed with deployment.",
    )


def recommended_actions(summary: RiskSummary) -> list[str]:
    actions: list[str] = []
    if summary.critical > 0:
        actions.append("IMMEDIATE: Address all critical vulnerabilities before deployment")
    if summary.high > 0:
        actions.append("Review and fix high-severity issues within 48 hours")
    actions.extend(STANDING_RECOMMENDATIONS)
    return actions


def executive_summary(summary: RiskSummary) -> str:
    tail = (
        "Critical vulnerabilities require immediate attention."
        if summary.critical > 0
        else "No critical issues detected."
    )
    return (
        f"Found {summary.total_findings} security issues across {summary.critical} "
        f"critical, {summary.high} high, {summary.medium} medium, and {summary.low} "
        f"low severity findings. {tail}"
    )


def top_vulnerabilities(findings: Iterable[Finding]) -> list[TopVulnerability]:
    """The first few critical findings, in the order they were aggregated."""
    top: list[TopVulnerability] = []
    for finding in findings:
        if finding.severity != Severity.CRITICAL:
            continue
        top.append(
            TopVulnerability(
                title=f"{finding.category} in {finding.file}",
                severity=finding.severity,
                impact=finding.description,
            )
        )
        if len(top) >= TOP_VULNERABILITY_LIMIT:
            break
    return top


def analyze(summary: RiskSummary, findings: Iterable[Finding]) -> AIAnalysis:
    """Assemble the full analysis block for a report."""
    return AIAnalysis(
        overall_risk_score=summary.risk_score,
        executive_summary=executive_summary(summary),
        decision=decide(summary),
        top_vulnerabilities=tuple(top_vulnerabilities(findings)),
        recommended_actions=tuple(recommended_actions(summary)),
    )
