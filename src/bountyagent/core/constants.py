# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations, severity weights, and threshold constants."""

from enum import StrEnum


class Severity(StrEnum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DecisionAction(StrEnum):
    BLOCK_DEPLOYMENT = "BLOCK_DEPLOYMENT"
    WARN_AND_CONTINUE = "WARN_AND_CONTINUE"
    APPROVE = "APPROVE"


class AdapterStatus(StrEnum):
    OK = "ok"
    UNAVAILABLE = "unavailable"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


class AdapterName(StrEnum):
    PATTERN = "pattern-analysis"
    SEMGREP = "semgrep"
    BANDIT = "bandit"
    ESLINT = "eslint"
    AI_EXPLORATION = "ai-exploration"


class Category(StrEnum):
    SQL_INJECTION = "SQL Injection"
    WEAK_PASSWORD_HASHING = "Weak Password Hashing"
    CORS_MISCONFIGURATION = "CORS Misconfiguration"
    XSS = "Cross-Site Scripting"
    COMMAND_INJECTION = "Command Injection"
    CODE_INJECTION = "Code Injection"
    PATH_TRAVERSAL = "Path Traversal"
    HARDCODED_SECRET = "Hardcoded Secret"
    INSECURE_DESERIALIZATION = "Insecure Deserialization"
    OPEN_REDIRECT = "Open Redirect"
    SSRF = "Server-Side Request Forgery"


SEVERITY_WEIGHTS: dict[Severity, float] = {
    Severity.CRITICAL: 3.0,
    Severity.HIGH: 2.0,
    Severity.MEDIUM: 1.0,
    Severity.LOW: 0.5,
}

SEVERITY_ORDER: list[Severity] = [
    Severity.CRITICAL,
    Severity.HIGH,
    Severity.MEDIUM,
    Severity.LOW,
]

RISK_SCORE_CAP = 10.0

# More than this many highs (with no criticals) downgrades APPROVE to a warning
HIGH_WARN_THRESHOLD = 2

MAX_EXPLOITS = 3

DEFAULT_REMEDIATION = "Review and fix based on security best practices"
DEFAULT_DESCRIPTION = "Security issue detected"
UNKNOWN_FILE = "<unknown>"

STANDING_RECOMMENDATIONS: tuple[str, ...] = (
    "Implement automated security testing in CI/CD pipeline",
    "Schedule regular security audits",
    "Enable real-time security monitoring",
)
