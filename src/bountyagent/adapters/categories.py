# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Controlled category vocabulary shared by every adapter."""

from __future__ import annotations

import re

from bountyagent.core.constants import Category

# Order matters: the first matching pattern wins.
_KEYWORD_TABLE: list[tuple[re.Pattern[str], Category]] = [
    (re.compile(r"sqli|sql|b608"), Category.SQL_INJECTION),
    (
        re.compile(r"md5|sha1|weak[-_ ]?(?:password[-_ ]?)?hash|insecure[-_ ]hash|b303|b324"),
        Category.WEAK_PASSWORD_HASHING,
    ),
    (re.compile(r"cors"), Category.CORS_MISCONFIGURATION),
    (
        re.compile(r"xss|cross[-_ ]site[-_ ]scripting|innerhtml|mark[-_]safe|b308|b703"),
        Category.XSS,
    ),
    (re.compile(r"eval|exec[-_]used|code[-_ ]injection|b102|b307"), Category.CODE_INJECTION),
    (
        re.compile(r"command[-_ ]injection|subprocess|shell|child[-_]process|os[-_.]system|b60[2-7]"),
        Category.COMMAND_INJECTION,
    ),
    (
        re.compile(r"path[-_ ]traversal|directory[-_ ]traversal|non[-_]literal[-_]fs"),
        Category.PATH_TRAVERSAL,
    ),
    (
        re.compile(r"hardcoded|hard[-_ ]coded|secret|api[-_ ]?key|b10[5-7]"),
        Category.HARDCODED_SECRET,
    ),
    (
        re.compile(r"pickle|deserializ|yaml[-_.]load|marshal|b301|b506"),
        Category.INSECURE_DESERIALIZATION,
    ),
    (re.compile(r"open[-_ ]redirect"), Category.OPEN_REDIRECT),
    (re.compile(r"ssrf|server[-_ ]side[-_ ]request"), Category.SSRF),
]

_VOCABULARY = {c.value.lower(): c for c in Category}


def match_category(raw: str) -> Category | None:
    """Return the vocabulary entry for *raw*, or None when nothing matches."""
    text = raw.strip().lower()
    if not text:
        return None
    if text in _VOCABULARY:
        return _VOCABULARY[text]
    for pattern, category in _KEYWORD_TABLE:
        if pattern.search(text):
            return category
    return None


def humanize(raw: str) -> str:
    """``a.b.detect-non-literal-regexp`` -> ``detect non literal regexp``."""
    last = re.split(r"[./]", raw.strip().rstrip("./"))[-1]
    return re.sub(r"[-_]+", " ", last).strip()


def normalize_category(*candidates: str | None) -> str:
    """Map the first matching candidate into the vocabulary.

    Falls back to a humanized form of the first non-empty candidate.
    """
    present = [c for c in candidates if c and str(c).strip()]
    for candidate in present:
        category = match_category(str(candidate))
        if category is not None:
            return category.value
    if present:
        return humanize(str(present[0])) or "Security Issue"
    return "Security Issue"
