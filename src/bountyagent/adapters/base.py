# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Abstract base adapter interface for all tool output parsers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, ClassVar

from bountyagent.adapters.categories import normalize_category
from bountyagent.core.constants import (
    DEFAULT_DESCRIPTION,
    DEFAULT_REMEDIATION,
    UNKNOWN_FILE,
    AdapterStatus,
    Severity,
)
from bountyagent.models.finding import Finding
from bountyagent.models.scan import AdapterOutcome
from bountyagent.scanner.context import ScanContext

logger = logging.getLogger("bountyagent.adapters")


@dataclass
class RawFinding:
    """Tool-native values extracted from one output record, before normalization."""

    file: str | None
    line: Any
    severity: Any
    category: str | None
    description: str | None = None
    remediation: str | None = None
    category_hints: tuple[str, ...] = field(default_factory=tuple)


def normalize_path(path: str | None, scan_root: Path) -> str:
    """Express *path* relative to *scan_root* using POSIX separators."""
    if path is None or not str(path).strip():
        return UNKNOWN_FILE

    candidate = PurePosixPath(str(path).strip().replace("\\", "/"))
    roots = [PurePosixPath(scan_root.as_posix())]
    try:
        roots.append(PurePosixPath(scan_root.resolve().as_posix()))
    except OSError:
        pass

    relative = candidate
    for root in roots:
        try:
            relative = candidate.relative_to(root)
            break
        except ValueError:
            continue

    text = relative.as_posix()
    if text in ("", "."):
        return UNKNOWN_FILE
    return text


def normalize_line(value: Any) -> int:
    """Return a 1-based line number; anything missing or invalid becomes 1."""
    if isinstance(value, bool):
        return 1
    try:
        line = int(value)
    except (TypeError, ValueError):
        return 1
    return line if line >= 1 else 1


class ToolAdapter(ABC):
    """All tool adapters must implement this interface.

    ``parse`` is a template method: subclasses decode the raw output into
    records and convert each record into a :class:`RawFinding`. Every
    failure is contained here so one broken tool never aborts a scan.
    """

    # Lower-cased tool vocabulary -> Severity. Unknown values map to MEDIUM.
    SEVERITY_MAP: ClassVar[dict[str, Severity]] = {}

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique adapter name, also used as the Finding ``source``."""
        ...

    @property
    @abstractmethod
    def order(self) -> int:
        """Invocation order (lower first); defines aggregation order."""
        ...

    @abstractmethod
    def _records(self, raw_output: str, context: ScanContext) -> Iterable[Any]:
        """Decode *raw_output* into tool-native records."""
        ...

    @abstractmethod
    def _convert(self, record: Any, context: ScanContext) -> RawFinding | None:
        """Convert one record, or return None to skip it."""
        ...

    def map_severity(self, value: Any) -> Severity:
        key = str(value).strip().lower() if value is not None else ""
        return self.SEVERITY_MAP.get(key, Severity.MEDIUM)

    def parse(self, raw_output: str | None, context: ScanContext) -> list[Finding]:
        """Translate *raw_output* into Findings. Never raises."""
        return list(self.evaluate(raw_output, context).findings)

    def evaluate(self, raw_output: str | None, context: ScanContext) -> AdapterOutcome:
        """Like :meth:`parse`, but also reports whether the tool contributed."""
        if raw_output is None:
            return AdapterOutcome(name=self.name, status=AdapterStatus.UNAVAILABLE)
        if not raw_output.strip():
            return AdapterOutcome(
                name=self.name, status=AdapterStatus.FAILED, error="empty output"
            )

        try:
            records = list(self._records(raw_output, context))
        except Exception as exc:
            context.error(f"{self.name}: could not parse output ({exc})")
            return AdapterOutcome(name=self.name, status=AdapterStatus.FAILED, error=str(exc))

        findings: list[Finding] = []
        skipped = 0
        for record in records:
            try:
                raw = self._convert(record, context)
                if raw is None:
                    continue
                findings.append(self._build(raw, context))
            except Exception as exc:
                skipped += 1
                logger.debug("%s: skipping malformed record: %s", self.name, exc)

        if skipped:
            context.error(f"{self.name}: skipped {skipped} malformed record(s)")
        return AdapterOutcome(name=self.name, status=AdapterStatus.OK, findings=tuple(findings))

    def _build(self, raw: RawFinding, context: ScanContext) -> Finding:
        # Normalize everything before drawing an id so skipped records leave no gaps.
        fields = {
            "file": normalize_path(raw.file, context.scan_root),
            "line": normalize_line(raw.line),
            "severity": self.map_severity(raw.severity),
            "category": normalize_category(raw.category, *raw.category_hints),
            "description": (raw.description or "").strip() or DEFAULT_DESCRIPTION,
            "remediation": (raw.remediation or "").strip() or DEFAULT_REMEDIATION,
        }
        return Finding(id=context.next_id(self.name), source=self.name, **fields)
