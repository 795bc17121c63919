# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for CI exit codes."""

from __future__ import annotations

import pytest

from bountyagent.ci.exit_codes import CIExitCode, action_to_exit_code
from bountyagent.core.constants import DecisionAction


class TestCIExitCode:
    def test_values(self) -> None:
        assert CIExitCode.APPROVE == 0
        assert CIExitCode.BLOCK == 1
        assert CIExitCode.SCAN_ERROR == 2
        assert CIExitCode.WARN == 3


class TestActionToExitCode:
    @pytest.mark.parametrize(
        ("action", "expected"),
        [
            (DecisionAction.APPROVE, CIExitCode.APPROVE),
            (DecisionAction.BLOCK_DEPLOYMENT, CIExitCode.BLOCK),
            (DecisionAction.WARN_AND_CONTINUE, CIExitCode.WARN),
            (" approve ", CIExitCode.APPROVE),
        ],
    )
    def test_mapping(self, action, expected) -> None:
        assert action_to_exit_code(action) == expected

    def test_unknown_action(self) -> None:
        with pytest.raises(ValueError, match="Unknown decision action"):
            action_to_exit_code("SHIP_IT")
