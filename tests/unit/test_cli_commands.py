# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for the CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from bountyagent import __version__
from bountyagent.cli.app import app

runner = CliRunner()

SEMGREP_FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "tools" / "semgrep.json"


@pytest.fixture(autouse=True)
def _offline(monkeypatch, tmp_path):
    """Keep the CLI away from AI backends, analyzers, and the working directory."""
    monkeypatch.setenv("BOUNTYAGENT_AI_ENABLED", "false")
    monkeypatch.setenv("BOUNTYAGENT_TOOLS_ENABLED", "false")
    monkeypatch.setenv("BOUNTYAGENT_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("BOUNTYAGENT_REPORT_PATH", str(tmp_path / "scan-report.json"))


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert f"bountyagent v{__version__}" in result.output


# ---------------------------------------------------------------------------
# scan
# ---------------------------------------------------------------------------


class TestScanCommand:
    """Test the scan CLI command against the bundled vulnerable app."""

    def test_json_output(self, vulnerable_app, tmp_path):
        out = tmp_path / "report.json"
        result = runner.invoke(
            app,
            ["scan", str(vulnerable_app), "--no-ai", "--format", "json", "--output", str(out)],
        )
        assert result.exit_code == 0, result.output

        document = json.loads(out.read_text())
        assert document["summary"]["critical"] == 2
        assert document["summary"]["risk_score"] == 8.0
        assert document["ai_analysis"]["decision"]["action"] == "BLOCK_DEPLOYMENT"
        assert [e["finding_id"] for e in document["exploits"]] == [
            "pattern-analysis-2",
            "pattern-analysis-3",
        ]

    def test_name_labels_target(self, vulnerable_app, tmp_path):
        out = tmp_path / "report.json"
        result = runner.invoke(
            app,
            ["scan", str(vulnerable_app), "--name", "acme/shop", "-f", "json", "-o", str(out)],
        )
        assert result.exit_code == 0, result.output
        assert json.loads(out.read_text())["target"] == "acme/shop"

    def test_sarif_output(self, vulnerable_app, tmp_path):
        out = tmp_path / "report.sarif"
        result = runner.invoke(
            app, ["scan", str(vulnerable_app), "--format", "sarif", "--output", str(out)]
        )
        assert result.exit_code == 0, result.output

        sarif = json.loads(out.read_text())
        results = sarif["runs"][0]["results"]
        assert len(results) == 3
        assert {r["ruleId"] for r in results} == {
            "cors-misconfiguration",
            "sql-injection",
            "weak-password-hashing",
        }
        location = results[1]["locations"][0]["physicalLocation"]
        assert location["artifactLocation"]["uri"] == "server.js"
        assert location["region"]["startLine"] == 10

    def test_console_writes_report_file(self, vulnerable_app, tmp_path):
        result = runner.invoke(app, ["scan", str(vulnerable_app), "--no-tools"])
        assert result.exit_code == 0, result.output
        assert "Report written to" in result.output

        document = json.loads((tmp_path / "scan-report.json").read_text())
        assert document["summary"]["total_findings"] == 3

    def test_raw_output_is_merged(self, vulnerable_app, tmp_path):
        out = tmp_path / "report.json"
        result = runner.invoke(
            app,
            [
                "scan", str(vulnerable_app),
                "--raw", f"semgrep={SEMGREP_FIXTURE}",
                "-f", "json", "-o", str(out),
            ],
        )
        assert result.exit_code == 0, result.output

        document = json.loads(out.read_text())
        assert [f["id"] for f in document["findings"]] == [
            "pattern-analysis-1",
            "pattern-analysis-2",
            "pattern-analysis-3",
            "semgrep-1",
            "semgrep-2",
        ]
        assert document["summary"]["risk_score"] == 10.0

    def test_raw_bad_format(self, vulnerable_app):
        result = runner.invoke(app, ["scan", str(vulnerable_app), "--raw", "semgrep"])
        assert result.exit_code == 2

    def test_raw_unknown_adapter(self, vulnerable_app, tmp_path):
        raw = tmp_path / "out.json"
        raw.write_text("{}")
        result = runner.invoke(app, ["scan", str(vulnerable_app), "--raw", f"sonar={raw}"])
        assert result.exit_code == 2

    def test_missing_directory_fails(self, tmp_path):
        result = runner.invoke(app, ["scan", str(tmp_path / "nope")])
        assert result.exit_code == 1
        assert "Scan failed" in result.output


# ---------------------------------------------------------------------------
# CI mode
# ---------------------------------------------------------------------------


class TestCIMode:
    def test_block_exits_one(self, vulnerable_app, tmp_path):
        result = runner.invoke(
            app,
            ["scan", str(vulnerable_app), "--ci-mode", "-f", "json", "-o", str(tmp_path / "r.json")],
        )
        assert result.exit_code == 1

    def test_clean_repo_exits_zero(self, tmp_path):
        repo = tmp_path / "repo"
        repo.mkdir()
        (repo / "main.py").write_text("print('hello')\n")
        result = runner.invoke(
            app, ["scan", str(repo), "--ci-mode", "-f", "json", "-o", str(tmp_path / "r.json")]
        )
        assert result.exit_code == 0

    def test_warn_exits_three(self, tmp_path):
        repo = tmp_path / "repo"
        repo.mkdir()
        (repo / "a.js").write_text(
            "\n".join(f"app{i}.use(cors({{ origin: '*' }}));" for i in range(3)) + "\n"
        )
        result = runner.invoke(
            app, ["scan", str(repo), "--ci-mode", "-f", "json", "-o", str(tmp_path / "r.json")]
        )
        assert result.exit_code == 3

    def test_scan_error_exits_two(self, tmp_path):
        result = runner.invoke(app, ["scan", str(tmp_path / "nope"), "--ci-mode"])
        assert result.exit_code == 2
