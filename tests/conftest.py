# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

import logging
import os
from pathlib import Path

import pytest

from bountyagent.core.config import Settings
from bountyagent.models.finding import Finding
from bountyagent.scanner.context import ScanContext

FIXTURES_DIR = Path(__file__).parent / "fixtures"
TOOLS_DIR = FIXTURES_DIR / "tools"
VULNERABLE_APP = FIXTURES_DIR / "repos" / "vulnerable_app"


def load_tool_output(name: str) -> str:
    return (TOOLS_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def tool_output():
    """Loader for recorded analyzer output under fixtures/tools."""
    return load_tool_output


@pytest.fixture
def make_finding():
    """Factory for findings with sensible defaults; override any field."""

    def _make(**overrides) -> Finding:
        fields = {
            "id": "semgrep-1",
            "file": "app.js",
            "line": 1,
            "severity": "medium",
            "category": "SQL Injection",
            "description": "Security issue detected",
            "source": "semgrep",
        }
        fields.update(overrides)
        return Finding(**fields)

    return _make


@pytest.fixture
def vulnerable_app() -> Path:
    return VULNERABLE_APP


@pytest.fixture
def context(tmp_path: Path) -> ScanContext:
    return ScanContext(target="test-repo", scan_root=tmp_path, scan_id="test")


@pytest.fixture
def repo_context() -> ScanContext:
    return ScanContext(target="vulnerable-app", scan_root=VULNERABLE_APP, scan_id="test")


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Offline settings: no AI, no subprocesses, no workflow trigger."""
    return Settings(
        _env_file=None,
        ai_enabled=False,
        tools_enabled=False,
        workflow_host="",
        adapter_timeout=5.0,
        scan_timeout=30.0,
        report_path=tmp_path / "scan-report.json",
    )


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep developer BOUNTYAGENT_* variables from leaking into tests."""
    for key in list(os.environ):
        if key.startswith("BOUNTYAGENT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo setup_logging() calls made by the CLI or logging tests."""
    yield
    root = logging.getLogger("bountyagent")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
