# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Merge per-adapter finding sequences into one ordered collection."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from bountyagent.models.finding import Finding


def aggregate(batches: Iterable[Sequence[Finding]]) -> tuple[Finding, ...]:
    """Concatenate *batches* in adapter-invocation order.

    Order within and across batches is preserved. Nothing is deduplicated:
    two tools flagging the same line stay two independent findings.
    """
    merged: list[Finding] = []
    for batch in batches:
        merged.extend(batch)
    return tuple(merged)


def group_by_location(
    findings: Iterable[Finding],
) -> dict[tuple[str, int, str], list[Finding]]:
    """Group findings that share ``(file, line, category)``.

    Groups keep first-seen order. The aggregate itself is untouched; this is
    for consumers that want to see where tools corroborate each other.
    """
    groups: dict[tuple[str, int, str], list[Finding]] = defaultdict(list)
    for finding in findings:
        groups[(finding.file, finding.line, finding.category)].append(finding)
    return dict(groups)
