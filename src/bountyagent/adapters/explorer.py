# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Adapter for autonomous exploration output (AI model or exploration CLI)."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from bountyagent.adapters.base import RawFinding, ToolAdapter
from bountyagent.ai.parser import extract_json
from bountyagent.core.constants import AdapterName, Severity
from bountyagent.core.exceptions import AdapterError
from bountyagent.scanner.context import ScanContext


class ExplorationAdapter(ToolAdapter):
    """Accepts ``{"findings": [...]}`` or a bare JSON array.

    Items may use either the exploration CLI keys (``type``, ``line``,
    ``fix``) or the model prompt keys (``vulnerability_type``,
    ``line_number``, ``fix``).
    """

    SEVERITY_MAP = {
        "critical": Severity.CRITICAL,
        "high": Severity.HIGH,
        "medium": Severity.MEDIUM,
        "low": Severity.LOW,
    }

    @property
    def name(self) -> str:
        return AdapterName.AI_EXPLORATION

    @property
    def order(self) -> int:
        return 50

    def _records(self, raw_output: str, context: ScanContext) -> Iterable[Any]:
        data = extract_json(raw_output)
        if isinstance(data, dict):
            data = data.get("findings", data.get("vulnerabilities"))
        if not isinstance(data, list):
            raise AdapterError("expected a findings array")
        return data

    def _convert(self, record: Any, context: ScanContext) -> RawFinding:
        return RawFinding(
            file=record.get("file") or record.get("path"),
            line=record.get("line", record.get("line_number")),
            severity=record.get("severity"),
            category=record.get("type") or record.get("vulnerability_type"),
            description=record.get("description"),
            remediation=record.get("fix") or record.get("remediation"),
        )
