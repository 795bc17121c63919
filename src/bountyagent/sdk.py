# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Public SDK interface for embedding bountyagent in other tools.

Usage::

    from bountyagent import scan, scan_sync

    # Synchronous (blocking)
    report = scan_sync("./checkout", target="github.com/acme/shop")
    print(report.decision.action, report.summary.risk_score)

    # Async, with tool output the caller already collected
    report = await scan("./checkout", raw_outputs={"semgrep": semgrep_json})
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from pathlib import Path

from bountyagent.adapters import default_adapters
from bountyagent.ai.completion import build_completion_service
from bountyagent.ai.prioritizer import Prioritizer
from bountyagent.core.config import Settings, get_settings
from bountyagent.core.constants import AdapterName
from bountyagent.core.exceptions import ScanError
from bountyagent.exploits.synthesizer import ExploitSynthesizer
from bountyagent.integrations.workflow import WorkflowTrigger
from bountyagent.models.report import Report
from bountyagent.scanner.collectors import (
    AIExplorationCollector,
    Collector,
    default_command_collectors,
)
from bountyagent.scanner.pipeline import ScanPipeline

logger = logging.getLogger("bountyagent.sdk")


def _build_pipeline(
    *,
    settings: Settings | None = None,
    use_ai: bool = True,
    use_tools: bool = True,
) -> ScanPipeline:
    """Construct a fully-wired scan pipeline.

    Parameters
    ----------
    settings:
        Optional ``Settings`` override; falls back to ``get_settings()``.
    use_ai:
        Whether the optional AI stages may run (exploration, prioritizer,
        AI-assisted exploits). They still need a configured backend.
    use_tools:
        Whether external analyzers are invoked as subprocesses.
    """
    settings = settings or get_settings()
    service = build_completion_service(settings) if use_ai else None

    collectors: dict[str, Collector] = {}
    if use_tools and settings.tools_enabled:
        collectors.update(default_command_collectors())
    if service is not None and settings.exploration_enabled:
        collectors[AdapterName.AI_EXPLORATION] = AIExplorationCollector(
            service,
            max_files=settings.exploration_max_files,
            max_chars=settings.exploration_max_chars,
        )

    prioritizer = None
    if service is not None and settings.prioritizer_enabled:
        prioritizer = Prioritizer(service, max_findings=settings.prioritizer_max_findings)

    synthesizer = ExploitSynthesizer(
        service=service,
        max_exploits=settings.max_exploits,
        ai_assisted=settings.ai_exploits_enabled,
    )

    return ScanPipeline(
        default_adapters(settings),
        settings=settings,
        collectors=collectors,
        prioritizer=prioritizer,
        synthesizer=synthesizer,
        workflow=WorkflowTrigger.from_settings(settings),
    )


# ---------------------------------------------------------------------------
# Public async API
# ---------------------------------------------------------------------------


async def scan(
    scan_root: str | Path,
    *,
    target: str | None = None,
    raw_outputs: Mapping[str, str | None] | None = None,
    use_ai: bool = True,
    use_tools: bool = True,
    settings: Settings | None = None,
) -> Report:
    """Scan a local repository checkout and return its :class:`Report`.

    Parameters
    ----------
    scan_root:
        Local directory to analyse.
    target:
        Label used as the report ``target``; defaults to *scan_root*.
    raw_outputs:
        Adapter name -> raw tool output the caller already has. ``None``
        values mark a tool as unavailable.
    use_ai:
        Set ``False`` to skip every AI stage.
    use_tools:
        Set ``False`` to skip external analyzer subprocesses.

    Raises
    ------
    ScanError
        If nothing could be analysed or the scan exceeded ``scan_timeout``.
    """
    settings = settings or get_settings()
    pipeline = _build_pipeline(settings=settings, use_ai=use_ai, use_tools=use_tools)
    label = target or str(scan_root)

    try:
        return await asyncio.wait_for(
            pipeline.scan(label, scan_root, raw_outputs=raw_outputs),
            timeout=settings.scan_timeout,
        )
    except TimeoutError as exc:
        raise ScanError(f"Scan of {label} exceeded {settings.scan_timeout}s") from exc


# ---------------------------------------------------------------------------
# Public sync wrappers
# ---------------------------------------------------------------------------


def scan_sync(
    scan_root: str | Path,
    *,
    target: str | None = None,
    raw_outputs: Mapping[str, str | None] | None = None,
    use_ai: bool = True,
    use_tools: bool = True,
    settings: Settings | None = None,
) -> Report:
    """Synchronous wrapper around :func:`scan`.

    Calls ``asyncio.run()`` internally, so it must **not** be called from
    within an already-running event loop.
    """
    return asyncio.run(
        scan(
            scan_root,
            target=target,
            raw_outputs=raw_outputs,
            use_ai=use_ai,
            use_tools=use_tools,
            settings=settings,
        )
    )
