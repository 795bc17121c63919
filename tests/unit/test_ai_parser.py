# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for AI response parsing."""

from __future__ import annotations

import pytest

from bountyagent.ai.parser import extract_json, parse_exploit_draft, parse_priorities
from bountyagent.core.exceptions import AIResponseError


class TestExtractJson:
    def test_raw_object(self) -> None:
        assert extract_json('{"a": 1}') == {"a": 1}

    def test_fenced(self) -> None:
        assert extract_json('Sure!\n```json\n{"a": [1, 2]}\n```\nDone.') == {"a": [1, 2]}

    def test_think_preamble(self) -> None:
        text = '<think>the {braces} here are not json</think>\n[{"id": "x"}]'
        assert extract_json(text) == [{"id": "x"}]

    def test_prose_around_json(self) -> None:
        assert extract_json('Result: {"ok": true} hope that helps') == {"ok": True}

    @pytest.mark.parametrize("text", ["no json here", "{broken", '{"a": }'])
    def test_unusable(self, text: str) -> None:
        with pytest.raises(AIResponseError):
            extract_json(text)


class TestParseExploitDraft:
    def test_valid(self) -> None:
        draft = parse_exploit_draft(
            '{"exploit_code": "curl x", "expected_result": "leak", "demo_steps": "one\\ntwo"}'
        )
        assert draft.demo_steps == ["one", "two"]

    def test_missing_field(self) -> None:
        with pytest.raises(AIResponseError):
            parse_exploit_draft('{"exploit_code": "curl x"}')

    def test_array_rejected(self) -> None:
        with pytest.raises(AIResponseError):
            parse_exploit_draft("[1, 2]")


class TestParsePriorities:
    def test_wrapped_object(self) -> None:
        entries = parse_priorities(
            '{"findings": [{"id": "semgrep-1", "priority_score": 87.6, "reasoning": "r"}]}'
        )
        assert len(entries) == 1
        assert entries[0].priority_score == 88
        assert entries[0].reasoning == "r"

    def test_invalid_entries_dropped(self) -> None:
        entries = parse_priorities(
            '[{"id": "a", "priority_score": 10}, {"id": "b", "priority_score": 500},'
            ' {"priority_score": 5}, "junk"]'
        )
        assert [e.id for e in entries] == ["a"]

    def test_not_a_list(self) -> None:
        with pytest.raises(AIResponseError):
            parse_priorities('{"summary": "all good"}')
