# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""AI re-ordering and annotation of aggregated findings."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from bountyagent.ai.completion import CompletionService
from bountyagent.ai.parser import PriorityEntry, parse_priorities
from bountyagent.ai.prompts import SYSTEM_PROMPT, build_prioritization_prompt
from bountyagent.core.exceptions import AIResponseError
from bountyagent.models.finding import AIAnnotation, Finding

logger = logging.getLogger("bountyagent.ai.prioritizer")


class Prioritizer:
    """Annotates findings with an AI priority and sorts by it.

    The result is always a permutation of the input. Any failure returns the
    input unchanged, so severity counts and the decision never depend on it.
    """

    def __init__(self, service: CompletionService, max_findings: int = 20) -> None:
        self._service = service
        self._max_findings = max_findings

    async def prioritize(self, findings: Sequence[Finding]) -> tuple[Finding, ...]:
        original = tuple(findings)
        if not original or self._max_findings <= 0:
            return original

        sent = original[: self._max_findings]
        outcome = await self._service.complete(
            build_prioritization_prompt(sent), system=SYSTEM_PROMPT
        )
        if not outcome.ok:
            logger.warning("Prioritization skipped: %s", outcome.error)
            return original

        try:
            entries = parse_priorities(outcome.text or "")
        except AIResponseError as exc:
            logger.warning("Prioritization response unusable: %s", exc)
            return original

        annotations = self._match(entries, {f.id for f in sent})
        if not annotations:
            logger.warning("Prioritization produced no usable annotations")
            return original

        annotated = [f.annotate(annotations[f.id]) for f in original if f.id in annotations]
        # list.sort is stable, so equal scores keep aggregation order
        annotated.sort(
            key=lambda f: f.ai_annotation.priority_score,  # type: ignore[union-attr]
            reverse=True,
        )
        rest = [f for f in original if f.id not in annotations]

        logger.info("Prioritized %d of %d findings", len(annotated), len(original))
        return tuple(annotated + rest)

    @staticmethod
    def _match(entries: list[PriorityEntry], known_ids: set[str]) -> dict[str, AIAnnotation]:
        annotations: dict[str, AIAnnotation] = {}
        for entry in entries:
            if entry.id not in known_ids:
                logger.debug("Ignoring priority for unknown finding id %r", entry.id)
                continue
            if entry.id in annotations:
                continue
            annotations[entry.id] = AIAnnotation(
                priority_score=entry.priority_score,
                reasoning=entry.reasoning,
                risk_narrative=entry.risk_narrative,
                immediate_action=entry.immediate_action,
            )
        return annotations
