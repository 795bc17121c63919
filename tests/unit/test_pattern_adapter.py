# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for the baseline pattern analysis adapter and its rules."""

from __future__ import annotations

from pathlib import Path

import pytest

from bountyagent.adapters.pattern import PatternAdapter, iter_source_files
from bountyagent.adapters.pattern_rules import (
    RuleRegistry,
    UnparameterizedQuery,
    WeakPasswordHash,
    WildcardCors,
)
from bountyagent.core.constants import AdapterStatus, Category, Severity
from bountyagent.scanner.context import ScanContext

# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


class TestRules:
    def test_registry_order(self) -> None:
        ids = [r.rule_id for r in RuleRegistry.get_enabled()]
        assert ids[:3] == ["PATTERN-SQLI-001", "PATTERN-HASH-001", "PATTERN-CORS-001"]
        assert UnparameterizedQuery in RuleRegistry.get_all()

    @pytest.mark.parametrize(
        "line",
        [
            "db.query(\"SELECT * FROM t WHERE id=\" + id)",
            "conn.query(`SELECT * FROM t WHERE id=${id}`)",
        ],
    )
    def test_sql_concatenation(self, line: str) -> None:
        assert UnparameterizedQuery().check(line)

    def test_parameterized_query_is_clean(self) -> None:
        assert not UnparameterizedQuery().check('db.query("SELECT * FROM t WHERE id=?", [id])')

    def test_weak_hash_requires_password_context(self) -> None:
        rule = WeakPasswordHash()
        assert rule.check("hashlib.md5(password.encode())")
        assert rule.check("const h = SHA1(user.pwd)")
        assert not rule.check("etag = hashlib.md5(body).hexdigest()")

    def test_wildcard_cors(self) -> None:
        rule = WildcardCors()
        assert rule.check("app.use(cors({ origin: '*' }))")
        assert not rule.check("app.use(cors({ origin: 'https://example.com' }))")


# ---------------------------------------------------------------------------
# File walking
# ---------------------------------------------------------------------------


class TestIterSourceFiles:
    def test_skips_vendor_dirs_and_other_suffixes(self, tmp_path: Path) -> None:
        (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
        (tmp_path / "node_modules" / "pkg" / "index.js").write_text("x")
        (tmp_path / ".git").mkdir()
        (tmp_path / ".git" / "hook.py").write_text("x")
        (tmp_path / "README.md").write_text("x")
        (tmp_path / "b.py").write_text("x")
        (tmp_path / "a.ts").write_text("x")

        found = [p.name for p in iter_source_files(tmp_path, max_files=100)]
        assert found == ["a.ts", "b.py"]

    def test_bounded(self, tmp_path: Path) -> None:
        for i in range(5):
            (tmp_path / f"f{i}.js").write_text("x")
        assert len(list(iter_source_files(tmp_path, max_files=2))) == 2


# ---------------------------------------------------------------------------
# Adapter
# ---------------------------------------------------------------------------


class TestPatternAdapter:
    def test_vulnerable_app(self, repo_context, vulnerable_app) -> None:
        findings = PatternAdapter().parse(str(vulnerable_app), repo_context)

        assert [(f.id, f.file, f.line, f.category, f.severity) for f in findings] == [
            ("pattern-analysis-1", "server.js", 7, Category.CORS_MISCONFIGURATION, Severity.HIGH),
            ("pattern-analysis-2", "server.js", 10, Category.SQL_INJECTION, Severity.CRITICAL),
            (
                "pattern-analysis-3",
                "server.js",
                16,
                Category.WEAK_PASSWORD_HASHING,
                Severity.CRITICAL,
            ),
        ]
        assert all(f.source == "pattern-analysis" for f in findings)
        assert findings[2].remediation == "Use bcrypt with salt rounds >= 12"

    def test_deterministic(self, vulnerable_app) -> None:
        def run() -> list[tuple[str, str, int]]:
            ctx = ScanContext(target="t", scan_root=vulnerable_app, scan_id="x")
            return [(f.id, f.file, f.line) for f in PatternAdapter().parse(str(vulnerable_app), ctx)]

        assert run() == run()

    def test_clean_tree_is_ok_with_no_findings(self, context, tmp_path: Path) -> None:
        (tmp_path / "ok.py").write_text("def add(a, b):\n    return a + b\n")
        outcome = PatternAdapter().evaluate(str(tmp_path), context)
        assert outcome.status == AdapterStatus.OK
        assert outcome.findings == ()

    def test_not_a_directory_fails(self, context, tmp_path: Path) -> None:
        outcome = PatternAdapter().evaluate(str(tmp_path / "missing"), context)
        assert outcome.status == AdapterStatus.FAILED
        assert context.errors

    def test_oversized_files_are_skipped(self, context, tmp_path: Path) -> None:
        (tmp_path / "big.js").write_text("app.use(cors({ origin: '*' }))\n" + "x" * 200)
        outcome = PatternAdapter(max_file_bytes=50).evaluate(str(tmp_path), context)
        assert outcome.status == AdapterStatus.OK
        assert outcome.findings == ()

    def test_custom_rule_set(self, context, tmp_path: Path) -> None:
        (tmp_path / "a.js").write_text("app.use(cors({ origin: '*' }))\n")
        findings = PatternAdapter(rules=[WeakPasswordHash()]).parse(str(tmp_path), context)
        assert findings == []
