# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""bountyagent - Security scan aggregation, risk scoring, and deployment gating."""

__version__ = "0.1.0"

from bountyagent.core.exceptions import BountyAgentError, ScanError
from bountyagent.models.report import Report
from bountyagent.sdk import scan, scan_sync

__all__ = [
    "BountyAgentError",
    "Report",
    "ScanError",
    "__version__",
    "scan",
    "scan_sync",
]
