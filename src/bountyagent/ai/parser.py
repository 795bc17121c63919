# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Parse AI response text into structured data."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

from bountyagent.core.exceptions import AIResponseError

logger = logging.getLogger("bountyagent.ai.parser")

_JSON_FENCE_RE = re.compile(r"```(?:json)?\s*\n?(.*?)\n?```", re.DOTALL)
# Reasoning models wrap their chain of thought in <think> tags before answering.
_THINK_RE = re.compile(r"<think>.*?</think>", re.DOTALL | re.IGNORECASE)

_OPENERS = {"{": "}", "[": "]"}


def extract_json(response_text: str) -> Any:
    """Extract the first JSON object or array from *response_text*.

    Handles:
    - Raw JSON
    - JSON wrapped in markdown code fences (```json ... ```)
    - Leading or trailing prose around the JSON
    - ``<think>...</think>`` preambles
    """
    text = _THINK_RE.sub("", response_text).strip()

    fence_match = _JSON_FENCE_RE.search(text)
    if fence_match:
        text = fence_match.group(1).strip()

    starts = [i for i in (text.find("{"), text.find("[")) if i != -1]
    if not starts:
        raise AIResponseError(f"No JSON found in AI response: {response_text[:200]}")
    start = min(starts)
    closer = _OPENERS[text[start]]

    end = text.rfind(closer)
    if end < start:
        raise AIResponseError(f"No closing {closer!r} found in AI response: {response_text[:200]}")

    try:
        return json.loads(text[start : end + 1])
    except json.JSONDecodeError as exc:
        raise AIResponseError(f"Invalid JSON in AI response: {exc}") from exc


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class ExploitDraft(BaseModel):
    """Exploit fields returned by the AI exploit generator."""

    exploit_code: str = Field(min_length=1)
    expected_result: str = Field(min_length=1)
    demo_steps: list[str] = Field(min_length=1)

    @field_validator("demo_steps", mode="before")
    @classmethod
    def _coerce_steps(cls, v: object) -> object:
        if isinstance(v, str):
            return [s.strip() for s in v.splitlines() if s.strip()]
        if isinstance(v, list):
            return [str(s) for s in v if str(s).strip()]
        return v


class PriorityEntry(BaseModel):
    """One ranked finding returned by the AI prioritizer."""

    id: str
    priority_score: int = Field(ge=0, le=100)
    reasoning: str = ""
    risk_narrative: str = ""
    immediate_action: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, v: object) -> object:
        return str(v) if isinstance(v, int) else v

    @field_validator("priority_score", mode="before")
    @classmethod
    def _round_score(cls, v: object) -> object:
        if isinstance(v, float):
            return round(v)
        return v


def parse_exploit_draft(response_text: str) -> ExploitDraft:
    data = extract_json(response_text)
    if not isinstance(data, dict):
        raise AIResponseError("Exploit response is not a JSON object")
    try:
        return ExploitDraft.model_validate(data)
    except Exception as exc:
        raise AIResponseError(f"Exploit response does not match expected schema: {exc}") from exc


def parse_priorities(response_text: str) -> list[PriorityEntry]:
    """Parse a prioritization response, dropping entries that fail validation."""
    data = extract_json(response_text)
    if isinstance(data, dict):
        data = data.get("findings", data.get("priorities"))
    if not isinstance(data, list):
        raise AIResponseError("Prioritization response is not a JSON array")

    entries: list[PriorityEntry] = []
    for item in data:
        try:
            entries.append(PriorityEntry.model_validate(item))
        except Exception as exc:
            logger.debug("Dropping invalid priority entry %r: %s", item, exc)
    return entries
