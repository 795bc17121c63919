# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Standardized exit codes for CI/CD pipeline integrations.

Exit codes:
    0  APPROVE (deployment may proceed)
    1  BLOCK_DEPLOYMENT (critical findings present)
    2  ERROR (scan could not complete)
    3  WARN_AND_CONTINUE (too many high-severity findings)
"""

from __future__ import annotations

from enum import IntEnum

from bountyagent.core.constants import DecisionAction


class CIExitCode(IntEnum):
    """Exit codes used by bountyagent in CI mode."""

    APPROVE = 0
    BLOCK = 1
    SCAN_ERROR = 2
    WARN = 3


_ACTION_MAP: dict[str, CIExitCode] = {
    DecisionAction.APPROVE: CIExitCode.APPROVE,
    DecisionAction.BLOCK_DEPLOYMENT: CIExitCode.BLOCK,
    DecisionAction.WARN_AND_CONTINUE: CIExitCode.WARN,
}


def action_to_exit_code(action: str) -> CIExitCode:
    """Convert a decision action to a CI exit code.

    Raises:
        ValueError: If the action string is not recognized.
    """
    normalized = action.upper().strip()
    if normalized not in _ACTION_MAP:
        msg = f"Unknown decision action: {action!r}. Expected one of: {', '.join(_ACTION_MAP)}"
        raise ValueError(msg)
    return _ACTION_MAP[normalized]
