# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Proof-of-concept synthesis for the most severe findings."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from bountyagent.ai.completion import CompletionService
from bountyagent.ai.parser import parse_exploit_draft
from bountyagent.ai.prompts import SYSTEM_PROMPT, build_exploit_prompt
from bountyagent.core.constants import MAX_EXPLOITS, Severity
from bountyagent.core.exceptions import AIResponseError
from bountyagent.exploits.templates import template_for
from bountyagent.models.exploit import Exploit, ExploitGenerator
from bountyagent.models.finding import Finding

logger = logging.getLogger("bountyagent.exploits.synthesizer")


class ExploitSynthesizer:
    """Builds at most ``max_exploits`` exploits in aggregation order.

    Deterministic mode only considers critical findings with a template.
    AI-assisted mode also admits high findings and drafts an exploit for
    categories without a template; a failed draft drops only that exploit.
    """

    def __init__(
        self,
        service: CompletionService | None = None,
        max_exploits: int = MAX_EXPLOITS,
        ai_assisted: bool = False,
    ) -> None:
        self._service = service
        self._max_exploits = max(0, min(max_exploits, MAX_EXPLOITS))
        self._ai_assisted = ai_assisted and service is not None

    @property
    def ai_assisted(self) -> bool:
        return self._ai_assisted

    @property
    def eligible_severities(self) -> frozenset[Severity]:
        if self._ai_assisted:
            return frozenset({Severity.CRITICAL, Severity.HIGH})
        return frozenset({Severity.CRITICAL})

    def select(self, findings: Sequence[Finding]) -> list[Finding]:
        """Pick the candidate findings, in order, capped at ``max_exploits``."""
        eligible = self.eligible_severities
        candidates: list[Finding] = []
        for finding in findings:
            if len(candidates) >= self._max_exploits:
                break
            if finding.severity not in eligible:
                continue
            if template_for(finding) is None and not self._ai_assisted:
                continue
            candidates.append(finding)
        return candidates

    async def synthesize(self, findings: Sequence[Finding]) -> list[Exploit]:
        candidates = self.select(findings)
        if not candidates:
            return []

        drafts = await asyncio.gather(*(self._draft(f) for f in candidates))

        exploits: list[Exploit] = []
        for finding, draft in zip(candidates, drafts, strict=True):
            if draft is None:
                continue
            exploits.append(
                Exploit(
                    id=f"exp-{len(exploits) + 1}",
                    finding_id=finding.id,
                    severity=finding.severity,
                    **draft,
                )
            )
            logger.info("Generated exploit for %s (%s)", finding.category, finding.location)

        logger.info("Generated %d exploits from %d candidates", len(exploits), len(candidates))
        return exploits

    async def _draft(self, finding: Finding) -> dict[str, object] | None:
        template = template_for(finding)
        if template is not None:
            return {**template.render(finding), "generator": ExploitGenerator.TEMPLATE}
        if self._service is None:
            return None

        outcome = await self._service.complete(build_exploit_prompt(finding), system=SYSTEM_PROMPT)
        if not outcome.ok:
            logger.warning("No exploit for %s: %s", finding.id, outcome.error)
            return None
        try:
            parsed = parse_exploit_draft(outcome.text or "")
        except AIResponseError as exc:
            logger.warning("No exploit for %s: %s", finding.id, exc)
            return None

        return {
            "title": f"{finding.category} in {finding.file}",
            "exploit_code": parsed.exploit_code,
            "expected_result": parsed.expected_result,
            "demo_steps": parsed.demo_steps,
            "generator": ExploitGenerator.AI,
        }
