# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""JSON output formatter."""

from __future__ import annotations

from bountyagent.models.report import Report


def format_json(report: Report) -> str:
    """Return the report document as a formatted JSON string."""
    return report.to_json(indent=2)

