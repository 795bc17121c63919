# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tool adapters: one parser per external analyzer plus the baseline pattern scan."""

from __future__ import annotations

from bountyagent.adapters.bandit import BanditAdapter
from bountyagent.adapters.base import RawFinding, ToolAdapter, normalize_line, normalize_path
from bountyagent.adapters.eslint import EslintAdapter
from bountyagent.adapters.explorer import ExplorationAdapter
from bountyagent.adapters.pattern import PatternAdapter
from bountyagent.adapters.semgrep import SemgrepAdapter
from bountyagent.core.config import Settings


def default_adapters(settings: Settings) -> list[ToolAdapter]:
    """Every adapter enabled in *settings*, in invocation order."""
    adapters: list[ToolAdapter] = [
        PatternAdapter(
            max_files=settings.pattern_max_files,
            max_file_bytes=settings.pattern_max_file_bytes,
        ),
        SemgrepAdapter(),
        BanditAdapter(),
        EslintAdapter(),
        ExplorationAdapter(),
    ]
    enabled = set(settings.enabled_adapters)
    return sorted((a for a in adapters if a.name in enabled), key=lambda a: a.order)


__all__ = [
    "BanditAdapter",
    "EslintAdapter",
    "ExplorationAdapter",
    "PatternAdapter",
    "RawFinding",
    "SemgrepAdapter",
    "ToolAdapter",
    "default_adapters",
    "normalize_line",
    "normalize_path",
]
