# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Semgrep ``--json`` output adapter."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from bountyagent.adapters.base import RawFinding, ToolAdapter
from bountyagent.core.constants import AdapterName, Severity
from bountyagent.core.exceptions import AdapterError
from bountyagent.scanner.context import ScanContext


class SemgrepAdapter(ToolAdapter):
    SEVERITY_MAP = {
        "error": Severity.HIGH,
        "warning": Severity.MEDIUM,
        "info": Severity.LOW,
        "critical": Severity.CRITICAL,
        "high": Severity.HIGH,
        "medium": Severity.MEDIUM,
        "low": Severity.LOW,
    }

    @property
    def name(self) -> str:
        return AdapterName.SEMGREP

    @property
    def order(self) -> int:
        return 20

    def _records(self, raw_output: str, context: ScanContext) -> Iterable[Any]:
        data = json.loads(raw_output)
        if not isinstance(data, dict):
            raise AdapterError("expected a JSON object with a 'results' list")
        results = data.get("results", [])
        if not isinstance(results, list):
            raise AdapterError("'results' is not a list")
        return results

    def _convert(self, record: Any, context: ScanContext) -> RawFinding:
        extra = record.get("extra") or {}
        metadata = extra.get("metadata") or {}
        start = record.get("start") or {}
        check_id = str(record.get("check_id") or "")
        return RawFinding(
            file=record.get("path"),
            line=start.get("line"),
            severity=extra.get("severity"),
            category=check_id,
            description=extra.get("message"),
            remediation=metadata.get("fix") or extra.get("fix"),
            category_hints=tuple(str(c) for c in metadata.get("cwe", []) or []),
        )
