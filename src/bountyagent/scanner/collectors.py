# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Sources of raw tool output, one per adapter.

A collector returns the text its adapter parses, or None when the tool is
unavailable. Collectors never decide what the text means.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import shutil
from abc import ABC, abstractmethod
from collections.abc import Sequence

from bountyagent.adapters.pattern import iter_source_files
from bountyagent.ai.completion import CompletionService
from bountyagent.ai.prompts import SYSTEM_PROMPT, build_exploration_prompt
from bountyagent.core.constants import AdapterName
from bountyagent.scanner.context import ScanContext

logger = logging.getLogger("bountyagent.scanner.collectors")

ROOT_PLACEHOLDER = "{root}"

DEFAULT_COMMANDS: dict[str, tuple[str, ...]] = {
    AdapterName.SEMGREP: ("semgrep", "--config=auto", "--json", "--quiet", ROOT_PLACEHOLDER),
    AdapterName.BANDIT: ("bandit", "-r", ROOT_PLACEHOLDER, "-f", "json", "-q"),
    AdapterName.ESLINT: ("npx", "--no-install", "eslint", ROOT_PLACEHOLDER, "--format", "json"),
}


class Collector(ABC):
    @abstractmethod
    async def collect(self, context: ScanContext) -> str | None:
        """Return raw tool output, or None if the tool could not run."""
        ...


class StaticCollector(Collector):
    """Hands over text the caller already has (or None for "unavailable")."""

    def __init__(self, text: str | None) -> None:
        self._text = text

    async def collect(self, context: ScanContext) -> str | None:
        return self._text


class ScanRootCollector(Collector):
    """Feeds the scan root path to the pattern adapter."""

    async def collect(self, context: ScanContext) -> str | None:
        if not context.scan_root.is_dir():
            context.error(f"scan root is not a readable directory: {context.scan_root}")
            return None
        return str(context.scan_root)


class CommandCollector(Collector):
    """Runs an external analyzer and returns its stdout.

    Analyzers commonly exit non-zero when they report findings, so a
    non-zero exit with non-empty stdout still counts as output. The child
    process is killed if the collection is cancelled or times out.
    """

    def __init__(self, argv: Sequence[str], timeout: float | None = None) -> None:
        if not argv:
            raise ValueError("argv must not be empty")
        self._argv = tuple(argv)
        self._timeout = timeout

    @property
    def executable(self) -> str:
        return self._argv[0]

    async def collect(self, context: ScanContext) -> str | None:
        argv = [arg.replace(ROOT_PLACEHOLDER, str(context.scan_root)) for arg in self._argv]
        if shutil.which(argv[0]) is None:
            context.note(f"{argv[0]}: not installed, skipping")
            return None

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=str(context.scan_root),
            )
        except (FileNotFoundError, PermissionError) as exc:
            context.note(f"{argv[0]}: could not start ({exc})")
            return None

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self._timeout)
        except BaseException:
            # Timeout or cancellation: never leave the analyzer running
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            raise

        text = stdout.decode("utf-8", errors="replace")
        if process.returncode != 0 and not text.strip():
            detail = stderr.decode("utf-8", errors="replace").strip().splitlines()
            context.note(
                f"{argv[0]}: exited with {process.returncode}"
                + (f" ({detail[-1]})" if detail else "")
            )
            return None
        return text


class AIExplorationCollector(Collector):
    """Prompts the completion service with a sample of source files."""

    def __init__(
        self,
        service: CompletionService,
        *,
        max_files: int = 10,
        max_chars: int = 2000,
    ) -> None:
        self._service = service
        self._max_files = max_files
        self._max_chars = max_chars

    def _sample(self, context: ScanContext) -> dict[str, str]:
        contents: dict[str, str] = {}
        root = context.scan_root
        for path in iter_source_files(root, max_files=self._max_files):
            try:
                text = path.read_text(encoding="utf-8", errors="replace")
            except OSError:
                continue
            contents[path.relative_to(root).as_posix()] = text[: self._max_chars]
        return contents

    async def collect(self, context: ScanContext) -> str | None:
        if not context.scan_root.is_dir():
            return None
        contents = await asyncio.to_thread(self._sample, context)
        if not contents:
            context.note("ai-exploration: no source files to explore")
            return None

        context.note(f"ai-exploration: exploring {len(contents)} files")
        outcome = await self._service.complete(
            build_exploration_prompt(contents), system=SYSTEM_PROMPT
        )
        if not outcome.ok:
            context.note(f"ai-exploration: unavailable ({outcome.error})")
            return None
        return outcome.text


def default_command_collectors(timeout: float | None = None) -> dict[str, Collector]:
    return {name: CommandCollector(argv, timeout=timeout) for name, argv in DEFAULT_COMMANDS.items()}
