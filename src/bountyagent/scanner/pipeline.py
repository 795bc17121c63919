# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Scanner pipeline orchestrator: collect, parse, aggregate, score, decide."""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from collections.abc import Mapping
from datetime import UTC, datetime
from pathlib import Path

from bountyagent.adapters.base import ToolAdapter
from bountyagent.ai.prioritizer import Prioritizer
from bountyagent.core.config import Settings, get_settings
from bountyagent.core.constants import AdapterName, AdapterStatus
from bountyagent.core.exceptions import ScanError
from bountyagent.exploits.synthesizer import ExploitSynthesizer
from bountyagent.integrations.workflow import WorkflowTrigger
from bountyagent.models.report import Report
from bountyagent.models.scan import AdapterOutcome
from bountyagent.report.builder import build_report
from bountyagent.scanner.aggregator import aggregate
from bountyagent.scanner.collectors import Collector, ScanRootCollector, StaticCollector
from bountyagent.scanner.context import ScanContext
from bountyagent.scanner.decision import analyze
from bountyagent.scanner.scoring import score

logger = logging.getLogger("bountyagent.scanner.pipeline")


class ScanPipeline:
    """Runs every registered adapter concurrently and builds one Report.

    Adapters execute in parallel, but their findings are aggregated in
    adapter order, so the report never depends on which tool finished first.
    Optional stages (prioritizer, AI exploits, workflow trigger) only add
    to the report; none of them can change the summary or the decision.
    """

    def __init__(
        self,
        adapters: list[ToolAdapter] | None = None,
        settings: Settings | None = None,
        *,
        collectors: Mapping[str, Collector] | None = None,
        prioritizer: Prioritizer | None = None,
        synthesizer: ExploitSynthesizer | None = None,
        workflow: WorkflowTrigger | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._adapters: list[ToolAdapter] = []
        if adapters:
            self._adapters = sorted(adapters, key=lambda a: a.order)
        self._collectors: dict[str, Collector] = dict(collectors or {})
        self._prioritizer = prioritizer
        self._synthesizer = synthesizer or ExploitSynthesizer(
            max_exploits=self._settings.max_exploits
        )
        self._workflow = workflow

    @property
    def adapters(self) -> list[ToolAdapter]:
        return list(self._adapters)

    def register_adapter(self, adapter: ToolAdapter, collector: Collector | None = None) -> None:
        self._adapters.append(adapter)
        self._adapters.sort(key=lambda a: a.order)
        if collector is not None:
            self._collectors[adapter.name] = collector

    def _collector_for(
        self, name: str, raw_outputs: Mapping[str, str | None] | None
    ) -> Collector:
        if raw_outputs is not None and name in raw_outputs:
            return StaticCollector(raw_outputs[name])
        if name in self._collectors:
            return self._collectors[name]
        if name == AdapterName.PATTERN:
            return ScanRootCollector()
        return StaticCollector(None)

    async def _run_adapter(
        self, adapter: ToolAdapter, collector: Collector, context: ScanContext
    ) -> AdapterOutcome:
        # The parse thread cannot be cancelled, so a timed-out adapter keeps
        # writing to its own scratch context, which is then dropped.
        scratch = context.fork()

        async def collect_and_parse() -> AdapterOutcome:
            raw = await collector.collect(scratch)
            if raw is None:
                return AdapterOutcome(name=adapter.name, status=AdapterStatus.UNAVAILABLE)
            return await asyncio.to_thread(adapter.evaluate, raw, scratch)

        try:
            outcome = await asyncio.wait_for(
                collect_and_parse(), timeout=self._settings.adapter_timeout
            )
        except TimeoutError:
            context.error(f"{adapter.name}: timed out after {self._settings.adapter_timeout}s")
            return AdapterOutcome(
                name=adapter.name, status=AdapterStatus.TIMED_OUT, error="timed out"
            )
        except Exception as exc:
            context.merge(scratch)
            context.error(f"{adapter.name}: failed ({exc})")
            return AdapterOutcome(name=adapter.name, status=AdapterStatus.FAILED, error=str(exc))

        context.merge(scratch)
        if outcome.status == AdapterStatus.OK:
            context.note(f"{adapter.name}: {outcome.finding_count} potential issues found")
        elif outcome.status == AdapterStatus.UNAVAILABLE:
            context.note(f"{adapter.name}: not available")
        else:
            context.note(f"{adapter.name}: could not parse results", level=logging.WARNING)
        return outcome

    async def scan(
        self,
        target: str,
        scan_root: Path | str,
        raw_outputs: Mapping[str, str | None] | None = None,
    ) -> Report:
        """Scan *scan_root* and return the assembled report.

        Args:
            target: Repository identifier shown in the report.
            scan_root: Local directory the tools analysed; paths are made
                relative to it.
            raw_outputs: Optional adapter name -> raw tool output. ``None``
                marks a tool as unavailable. Adapters missing from the
                mapping use the pipeline's collectors.

        Raises:
            ScanError: When no adapter produced output and the baseline
                pattern scan could not run either.
        """
        scan_id = uuid.uuid4().hex[:12]
        context = ScanContext(target=target, scan_root=Path(scan_root), scan_id=scan_id)
        timestamp = datetime.now(UTC)
        start_time = time.monotonic()

        context.note(f"Scanning {target} ({len(self._adapters)} adapters)")
        outcomes: list[AdapterOutcome] = list(
            await asyncio.gather(
                *(
                    self._run_adapter(
                        adapter, self._collector_for(adapter.name, raw_outputs), context
                    )
                    for adapter in self._adapters
                )
            )
        )

        self._check_total_failure(outcomes)

        findings = aggregate(o.findings for o in outcomes)
        summary = score(findings)
        analysis = analyze(summary, findings)
        context.note(
            f"Aggregated {summary.total_findings} findings "
            f"(critical={summary.critical}, high={summary.high}, "
            f"medium={summary.medium}, low={summary.low}); "
            f"risk score {summary.risk_score:.1f}/10"
        )

        ordered = findings
        if self._prioritizer is not None:
            ordered = await self._prioritizer.prioritize(findings)

        exploits = await self._synthesizer.synthesize(findings)
        context.note(f"Generated {len(exploits)} exploits")
        context.note(f"Decision: {analysis.decision.action}")

        if self._workflow is not None:
            triggered = await self._workflow.trigger(target, str(context.scan_root))
            context.note(f"Workflow trigger: {'sent' if triggered else 'failed'}")

        report = build_report(
            ordered,
            target,
            timestamp,
            summary=summary,
            exploits=exploits,
            ai_analysis=analysis,
            scan_output=context.scan_output,
            adapters=outcomes,
        )

        elapsed_ms = int((time.monotonic() - start_time) * 1000)
        logger.info(
            "Scan %s complete: decision=%s risk=%.1f findings=%d duration=%dms",
            scan_id,
            analysis.decision.action,
            summary.risk_score,
            summary.total_findings,
            elapsed_ms,
        )
        return report

    @staticmethod
    def _check_total_failure(outcomes: list[AdapterOutcome]) -> None:
        if any(o.produced_output for o in outcomes):
            return
        pattern = next((o for o in outcomes if o.name == AdapterName.PATTERN), None)
        reason = pattern.error if pattern and pattern.error else "pattern analysis could not run"
        raise ScanError(f"No adapter produced output ({reason})")
