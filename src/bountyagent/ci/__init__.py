# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CI/CD integration: exit codes for pipeline gating."""

from bountyagent.ci.exit_codes import CIExitCode, action_to_exit_code

__all__ = ["CIExitCode", "action_to_exit_code"]
