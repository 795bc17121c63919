# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Baseline pattern analysis that needs no external tool."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from bountyagent.adapters.base import RawFinding, ToolAdapter
from bountyagent.adapters.pattern_rules import BaseRule, RuleRegistry
from bountyagent.core.constants import AdapterName, Severity
from bountyagent.core.exceptions import AdapterError
from bountyagent.scanner.context import ScanContext

logger = logging.getLogger("bountyagent.adapters.pattern")

SOURCE_SUFFIXES = frozenset({".js", ".jsx", ".ts", ".tsx", ".py"})
SKIP_DIRS = frozenset(
    {".git", "node_modules", "__pycache__", ".venv", "venv", ".tox", "dist", "build"}
)


def iter_source_files(root: Path, *, max_files: int) -> Iterator[Path]:
    """Yield source files under *root* in a stable, sorted order."""
    yielded = 0
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in SKIP_DIRS)
        for filename in sorted(filenames):
            if Path(filename).suffix not in SOURCE_SUFFIXES:
                continue
            if yielded >= max_files:
                return
            yielded += 1
            yield Path(dirpath) / filename


class PatternAdapter(ToolAdapter):
    """Scans the repository text directly with the registered baseline rules.

    Its raw output is the scan root path handed over by the collector.
    """

    SEVERITY_MAP = {s.value: s for s in Severity}

    def __init__(
        self,
        max_files: int = 2000,
        max_file_bytes: int = 1_048_576,
        rules: list[BaseRule] | None = None,
    ) -> None:
        self._max_files = max_files
        self._max_file_bytes = max_file_bytes
        self._rules = rules if rules is not None else RuleRegistry.get_enabled()

    @property
    def name(self) -> str:
        return AdapterName.PATTERN

    @property
    def order(self) -> int:
        return 10

    def _records(self, raw_output: str, context: ScanContext) -> Iterable[Any]:
        root = Path(raw_output.strip())
        if not root.is_dir():
            raise AdapterError(f"scan root is not a directory: {root}")

        matches: list[tuple[Path, int, BaseRule]] = []
        scanned = 0
        for path in iter_source_files(root, max_files=self._max_files):
            try:
                if path.stat().st_size > self._max_file_bytes:
                    logger.debug("Skipping oversized file %s", path)
                    continue
                content = path.read_text(encoding="utf-8", errors="replace")
            except OSError as exc:
                context.note(f"pattern-analysis: could not read {path}: {exc}")
                continue
            scanned += 1
            for line_num, line in enumerate(content.splitlines(), 1):
                for rule_instance in self._rules:
                    if rule_instance.check(line):
                        matches.append((path, line_num, rule_instance))

        logger.info("Pattern analysis scanned %d files under %s", scanned, root)
        return matches

    def _convert(self, record: Any, context: ScanContext) -> RawFinding:
        path, line_num, rule_instance = record
        return RawFinding(
            file=str(path),
            line=line_num,
            severity=rule_instance.severity.value,
            category=rule_instance.category.value,
            description=rule_instance.description,
            remediation=rule_instance.remediation,
        )
