# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Bandit ``-f json`` output adapter."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from bountyagent.adapters.base import RawFinding, ToolAdapter
from bountyagent.core.constants import AdapterName, Severity
from bountyagent.core.exceptions import AdapterError
from bountyagent.scanner.context import ScanContext

_DEFAULT_FIX = "Apply Python security best practices"


class BanditAdapter(ToolAdapter):
    SEVERITY_MAP = {
        "high": Severity.HIGH,
        "medium": Severity.MEDIUM,
        "low": Severity.LOW,
        "undefined": Severity.LOW,
    }

    @property
    def name(self) -> str:
        return AdapterName.BANDIT

    @property
    def order(self) -> int:
        return 30

    def _records(self, raw_output: str, context: ScanContext) -> Iterable[Any]:
        data = json.loads(raw_output)
        if not isinstance(data, dict):
            raise AdapterError("expected a JSON object with a 'results' list")
        results = data.get("results", [])
        if not isinstance(results, list):
            raise AdapterError("'results' is not a list")
        for error in data.get("errors", []) or []:
            if isinstance(error, dict) and error.get("filename"):
                context.note(f"bandit: could not analyse {error['filename']}")
        return results

    def _convert(self, record: Any, context: ScanContext) -> RawFinding:
        more_info = record.get("more_info")
        remediation = f"{_DEFAULT_FIX} (see {more_info})" if more_info else _DEFAULT_FIX
        return RawFinding(
            file=record.get("filename"),
            line=record.get("line_number"),
            severity=record.get("issue_severity"),
            category=record.get("test_name"),
            description=record.get("issue_text"),
            remediation=remediation,
            category_hints=(str(record.get("test_id") or ""),),
        )
