# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import asyncio
import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from bountyagent.core.constants import AdapterName
from bountyagent.models.report import Report

app = typer.Typer(
    name="bountyagent",
    help="Aggregate security tool output into one scored, explainable deployment decision",
    no_args_is_help=True,
)


class OutputFormat(StrEnum):
    CONSOLE = "console"
    JSON = "json"
    SARIF = "sarif"


def _parse_raw_outputs(raw: list[str] | None) -> dict[str, str | None] | None:
    """Turn ``NAME=FILE`` pairs into an adapter -> text mapping."""
    if not raw:
        return None

    known = {a.value for a in AdapterName}
    outputs: dict[str, str | None] = {}
    for item in raw:
        name, sep, file_name = item.partition("=")
        name = name.strip()
        if not sep or not name or not file_name.strip():
            raise typer.BadParameter(f"expected NAME=FILE, got {item!r}", param_hint="--raw")
        if name not in known:
            raise typer.BadParameter(
                f"unknown adapter {name!r}; expected one of: {', '.join(sorted(known))}",
                param_hint="--raw",
            )
        path = Path(file_name.strip())
        try:
            outputs[name] = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise typer.BadParameter(f"cannot read {path}: {exc}", param_hint="--raw") from exc
    return outputs


@app.command()
def scan(
    target: Annotated[
        Path, typer.Argument(help="Local repository directory to scan")
    ],
    raw: Annotated[
        list[str] | None,
        typer.Option(
            "--raw",
            help="Use pre-collected tool output, as NAME=FILE (repeatable)",
        ),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option("--name", help="Target label shown in the report"),
    ] = None,
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.CONSOLE,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
    no_ai: Annotated[
        bool, typer.Option("--no-ai", help="Skip every AI-assisted stage")
    ] = False,
    no_tools: Annotated[
        bool, typer.Option("--no-tools", help="Do not run external analyzers")
    ] = False,
    ci_mode: Annotated[
        bool,
        typer.Option("--ci-mode", help="Enable CI mode with standardized exit codes"),
    ] = False,
) -> None:
    """Scan a repository checkout and report a deployment decision."""
    raw_outputs = _parse_raw_outputs(raw)
    exit_code = asyncio.run(
        _async_scan(
            target,
            raw_outputs,
            name,
            fmt,
            output,
            use_ai=not no_ai,
            use_tools=not no_tools,
            ci_mode=ci_mode,
        )
    )
    if ci_mode and exit_code is not None:
        raise typer.Exit(exit_code)


async def _async_scan(
    target: Path,
    raw_outputs: dict[str, str | None] | None,
    name: str | None,
    fmt: OutputFormat,
    output: Path | None,
    *,
    use_ai: bool,
    use_tools: bool,
    ci_mode: bool = False,
) -> int | None:
    from bountyagent.ci.exit_codes import CIExitCode, action_to_exit_code
    from bountyagent.core.config import get_settings
    from bountyagent.core.exceptions import ScanError
    from bountyagent.core.logging import setup_logging
    from bountyagent.sdk import scan as sdk_scan

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    try:
        report = await sdk_scan(
            target,
            target=name,
            raw_outputs=raw_outputs,
            use_ai=use_ai,
            use_tools=use_tools,
            settings=settings,
        )
    except ScanError as exc:
        typer.echo(f"Scan failed: {exc}", err=True)
        if ci_mode:
            return int(CIExitCode.SCAN_ERROR)
        raise typer.Exit(1) from exc

    _output_report(report, fmt, output, settings.report_path)

    if ci_mode:
        decision = report.decision
        if decision is None:
            return int(CIExitCode.SCAN_ERROR)
        return int(action_to_exit_code(decision.action))
    return None


def _output_report(
    report: Report, fmt: OutputFormat, output: Path | None, report_path: Path
) -> None:
    if fmt == OutputFormat.CONSOLE:
        from bountyagent.cli.formatters.console import format_report
        from bountyagent.report.builder import write_report

        format_report(report)
        # Console runs always persist the full report document
        written = write_report(report, output or report_path)
        typer.echo(f"Report written to {written}")
    elif fmt == OutputFormat.JSON:
        from bountyagent.cli.formatters.json_fmt import format_json

        _write_output(format_json(report), output)
    elif fmt == OutputFormat.SARIF:
        from bountyagent.cli.formatters.sarif import format_sarif

        _write_output(format_sarif(report), output)


def _write_output(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text)
        typer.echo(f"Output written to {output}")
    else:
        sys.stdout.write(text + "\n")


@app.command()
def version() -> None:
    """Show version information."""
    from bountyagent import __version__

    typer.echo(f"bountyagent v{__version__}")


if __name__ == "__main__":
    app()
