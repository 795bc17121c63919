# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Assembly and persistence of the scan report."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path

from bountyagent.models.exploit import Exploit
from bountyagent.models.finding import Finding
from bountyagent.models.report import AIAnalysis, Report
from bountyagent.models.risk import RiskSummary
from bountyagent.models.scan import AdapterOutcome
from bountyagent.scanner.scoring import score

logger = logging.getLogger("bountyagent.report.builder")


def build_report(
    findings: Sequence[Finding],
    target: str,
    timestamp: datetime | None = None,
    *,
    summary: RiskSummary | None = None,
    exploits: Sequence[Exploit] = (),
    ai_analysis: AIAnalysis | None = None,
    scan_output: str = "",
    adapters: Sequence[AdapterOutcome] = (),
) -> Report:
    """Assemble an immutable :class:`Report`.

    Only *findings* and *target* are required. A missing summary is scored
    from *findings*; every other optional stage defaults to skipped.
    """
    summary = summary if summary is not None else score(findings)
    return Report(
        timestamp=timestamp or datetime.now(UTC),
        target=target,
        summary=summary,
        findings=tuple(findings),
        exploits=tuple(exploits),
        ai_analysis=ai_analysis,
        scan_output=scan_output,
        adapters=tuple(adapters),
    )


def write_report(report: Report, path: Path | str) -> Path:
    """Write *report* as JSON to *path*, creating parent directories."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(report.to_json(indent=2) + "\n", encoding="utf-8")
    logger.info("Report written to %s", out)
    return out
