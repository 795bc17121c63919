# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF 2.1.0 output formatter."""

from __future__ import annotations

import json
import re
from typing import Any

from bountyagent import __version__
from bountyagent.core.constants import UNKNOWN_FILE, Severity
from bountyagent.models.report import Report

SEVERITY_TO_SARIF_LEVEL = {
    Severity.CRITICAL: "error",
    Severity.HIGH: "error",
    Severity.MEDIUM: "warning",
    Severity.LOW: "note",
}

_SLUG_RE = re.compile(r"[^a-z0-9]+")


def rule_id_for(category: str) -> str:
    return _SLUG_RE.sub("-", category.lower()).strip("-") or "security-issue"


def report_to_sarif(report: Report) -> dict[str, Any]:
    """Convert a Report to SARIF 2.1.0 format. One rule per finding category."""
    rules: list[dict[str, Any]] = []
    seen_rules: set[str] = set()
    results: list[dict[str, Any]] = []

    for finding in report.findings:
        rule_id = rule_id_for(finding.category)
        level = SEVERITY_TO_SARIF_LEVEL.get(finding.severity, "warning")
        if rule_id not in seen_rules:
            seen_rules.add(rule_id)
            rules.append({
                "id": rule_id,
                "name": finding.category,
                "shortDescription": {"text": finding.category},
                "help": {"text": finding.remediation},
                "defaultConfiguration": {"level": level},
            })

        sarif_result: dict[str, Any] = {
            "ruleId": rule_id,
            "level": level,
            "message": {"text": finding.description},
            "properties": {
                "findingId": finding.id,
                "severity": finding.severity.value,
                "source": finding.source,
            },
        }
        if finding.file != UNKNOWN_FILE:
            region: dict[str, Any] = {}
            if finding.line:
                region["startLine"] = finding.line
            physical: dict[str, Any] = {"artifactLocation": {"uri": finding.file}}
            if region:
                physical["region"] = region
            sarif_result["locations"] = [{"physicalLocation": physical}]

        results.append(sarif_result)

    return {
        "$schema": "https://json.schemastore.org/sarif-2.1.0.json",
        "version": "2.1.0",
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": "bountyagent",
                        "version": __version__,
                        "rules": rules,
                    }
                },
                "results": results,
            }
        ],
    }


def format_sarif(report: Report) -> str:
    """Return SARIF JSON string."""
    return json.dumps(report_to_sarif(report), indent=2)
