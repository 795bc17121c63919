# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""ESLint ``--format json`` output adapter."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from bountyagent.adapters.base import RawFinding, ToolAdapter
from bountyagent.core.constants import AdapterName, Severity
from bountyagent.core.exceptions import AdapterError
from bountyagent.scanner.context import ScanContext

_ERROR = 2


def _is_security_rule(rule_id: str) -> bool:
    plugin = rule_id.split("/")[0] if "/" in rule_id else ""
    return "security" in plugin


class EslintAdapter(ToolAdapter):
    """Keeps lint errors plus every message from a security plugin rule."""

    # Security plugin rules sit one level above the plain lint severity.
    SEVERITY_MAP = {
        "2": Severity.MEDIUM,
        "1": Severity.LOW,
        "security:2": Severity.HIGH,
        "security:1": Severity.MEDIUM,
    }

    @property
    def name(self) -> str:
        return AdapterName.ESLINT

    @property
    def order(self) -> int:
        return 40

    def _records(self, raw_output: str, context: ScanContext) -> Iterable[Any]:
        data = json.loads(raw_output)
        if not isinstance(data, list):
            raise AdapterError("expected a JSON array of file results")
        records: list[tuple[Any, dict[str, Any]]] = []
        for file_result in data:
            if not isinstance(file_result, dict):
                continue
            for message in file_result.get("messages") or []:
                records.append((file_result.get("filePath"), message))
        return records

    def _convert(self, record: Any, context: ScanContext) -> RawFinding | None:
        file_path, message = record
        rule_id = str(message.get("ruleId") or "")
        security_rule = _is_security_rule(rule_id)
        if message.get("severity") != _ERROR and not security_rule:
            return None

        severity_key = str(message.get("severity"))
        if security_rule:
            severity_key = f"security:{severity_key}"

        return RawFinding(
            file=file_path,
            line=message.get("line"),
            severity=severity_key,
            category=rule_id or "ESLint Error",
            description=message.get("message"),
            remediation=None if security_rule else "Fix linting error",
        )
