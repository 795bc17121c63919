# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Report assembly and persistence."""

from bountyagent.report.builder import build_report, write_report

__all__ = ["build_report", "write_report"]
