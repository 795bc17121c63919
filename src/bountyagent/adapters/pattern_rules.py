# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Baseline source-pattern rules and their registry."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TypeVar

from bountyagent.core.constants import Category, Severity


class BaseRule(ABC):
    """All baseline rules must inherit from this class."""

    rule_id: str
    category: Category
    severity: Severity
    description: str
    remediation: str
    enabled: bool = True

    @abstractmethod
    def check(self, line: str) -> bool:
        """Return True when *line* exhibits the pattern."""
        ...


T = TypeVar("T", bound=BaseRule)


class RuleRegistry:
    """Central registry for baseline rules."""

    _rules: dict[str, type[BaseRule]] = {}

    @classmethod
    def register(cls, rule_class: type[T]) -> type[T]:
        cls._rules[rule_class.rule_id] = rule_class
        return rule_class

    @classmethod
    def get_all(cls) -> list[type[BaseRule]]:
        return list(cls._rules.values())

    @classmethod
    def get_enabled(cls) -> list[BaseRule]:
        return [r() for r in cls._rules.values() if r.enabled]


def rule(cls: type[T]) -> type[T]:
    """Decorator to register a rule class."""
    return RuleRegistry.register(cls)


@rule
class UnparameterizedQuery(BaseRule):
    rule_id = "PATTERN-SQLI-001"
    category = Category.SQL_INJECTION
    severity = Severity.CRITICAL
    description = "Possible SQL injection - user input in query without parameterization"
    remediation = "Use parameterized queries or prepared statements"

    _CONCAT_MARKERS = ("+", "${", "`")

    def check(self, line: str) -> bool:
        return "query(" in line and any(m in line for m in self._CONCAT_MARKERS)


@rule
class WeakPasswordHash(BaseRule):
    rule_id = "PATTERN-HASH-001"
    category = Category.WEAK_PASSWORD_HASHING
    severity = Severity.CRITICAL
    description = "Weak hashing algorithm (MD5/SHA1) used for passwords"
    remediation = "Use bcrypt with salt rounds >= 12"

    _ALGORITHM = re.compile(r"md5|sha1", re.IGNORECASE)
    _PASSWORD_FIELD = re.compile(r"password|pwd|pass", re.IGNORECASE)

    def check(self, line: str) -> bool:
        return bool(self._ALGORITHM.search(line) and self._PASSWORD_FIELD.search(line))


@rule
class WildcardCors(BaseRule):
    rule_id = "PATTERN-CORS-001"
    category = Category.CORS_MISCONFIGURATION
    severity = Severity.HIGH
    description = "Wildcard CORS origin allows requests from any domain"
    remediation = "Specify allowed origins explicitly"

    _PATTERN = re.compile(r"cors.*origin.*\*", re.IGNORECASE)

    def check(self, line: str) -> bool:
        return bool(self._PATTERN.search(line))
