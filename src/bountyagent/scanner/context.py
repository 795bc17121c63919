# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Per-run scan context passed through the pipeline."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger("bountyagent.scanner.context")


class IdSequence:
    """Run-scoped id generator producing ``<source>-<n>`` per source.

    Each source has its own counter, so ids depend only on the order in
    which one adapter emits its findings, never on adapter completion order.
    """

    def __init__(self) -> None:
        self._counters: dict[str, Iterator[int]] = {}

    def next(self, source: str) -> str:
        counter = self._counters.setdefault(source, itertools.count(1))
        return f"{source}-{next(counter)}"


@dataclass
class ScanContext:
    """State owned by exactly one scan invocation."""

    target: str
    scan_root: Path
    scan_id: str
    ids: IdSequence = field(default_factory=IdSequence)
    output: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def fork(self) -> ScanContext:
        """Return a child context with an empty run log that shares the id sequence."""
        return ScanContext(
            target=self.target, scan_root=self.scan_root, scan_id=self.scan_id, ids=self.ids
        )

    def merge(self, child: ScanContext) -> None:
        """Adopt the run log of a child created by :meth:`fork`."""
        self.output.extend(child.output)
        self.errors.extend(child.errors)

    def next_id(self, source: str) -> str:
        return self.ids.next(source)

    def note(self, message: str, *, level: int = logging.INFO) -> None:
        """Append *message* to the run log and emit it on the module logger."""
        self.output.append(message)
        logger.log(level, message, extra={"scan_id": self.scan_id})

    def error(self, message: str) -> None:
        self.errors.append(message)
        self.note(message, level=logging.WARNING)

    @property
    def scan_output(self) -> str:
        return "\n".join(self.output)
