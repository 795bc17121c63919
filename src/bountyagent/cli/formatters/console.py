# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output formatter for scan reports."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from bountyagent import __version__
from bountyagent.core.constants import SEVERITY_ORDER, AdapterStatus, DecisionAction, Severity
from bountyagent.models.report import Report

console = Console()

SEVERITY_COLORS = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "cyan",
}

DECISION_COLORS = {
    DecisionAction.BLOCK_DEPLOYMENT: "bold red",
    DecisionAction.WARN_AND_CONTINUE: "yellow",
    DecisionAction.APPROVE: "bold green",
}

ADAPTER_STATUS_STYLES = {
    AdapterStatus.OK: "green",
    AdapterStatus.UNAVAILABLE: "dim",
    AdapterStatus.FAILED: "red",
    AdapterStatus.TIMED_OUT: "red",
}


def format_report(report: Report) -> None:
    """Print a scan report to the console with Rich formatting."""
    console.print()
    console.print(f"[bold]bountyagent v{__version__}[/bold] - Security Scan Aggregator")
    console.print()

    info_table = Table(show_header=False, box=None, padding=(0, 2))
    info_table.add_column("key", style="dim")
    info_table.add_column("value")
    info_table.add_row("Target:", Text(report.target))
    info_table.add_row("Scanned:", report.timestamp.isoformat())
    console.print(info_table)
    console.print()

    decision = report.decision
    if decision is not None:
        color = DECISION_COLORS.get(decision.action, "white")
        console.print(
            Panel(
                f"[{color}]DECISION: {decision.action}[/{color}]"
                f"  (risk score: {report.summary.risk_score:.1f}/10)\n"
                f"{escape(decision.reasoning)}",
                style=color,
            )
        )
        console.print()

    if report.findings:
        # Preserve report order within each severity band
        for finding in sorted(report.findings, key=lambda f: SEVERITY_ORDER.index(f.severity)):
            sev_color = SEVERITY_COLORS.get(finding.severity, "white")
            console.print(Text(finding.severity.upper().ljust(9), style=sev_color), end="")
            console.print(f"  [bold]{escape(finding.category)}[/bold]  {escape(finding.location)}")
            console.print(Text(f"          {finding.description[:160]}", style="dim"))
            console.print(f"          Source: {finding.source}", style="dim")
            if finding.ai_annotation is not None:
                console.print(
                    f"          AI priority: {finding.ai_annotation.priority_score}"
                    f"  {escape(finding.ai_annotation.immediate_action)}",
                    style="dim italic",
                )
            console.print()
    else:
        console.print("  No vulnerabilities detected.", style="bold green")
        console.print()

    if report.exploits:
        console.print("  [bold]Proof-of-concept exploits[/bold]")
        for exploit in report.exploits:
            console.print(Text(f"    {exploit.id}  {exploit.title}  ({exploit.generator})"))
        console.print()

    summary = report.summary
    console.print(
        f"  Summary: {summary.total_findings} findings "
        f"({summary.critical} critical, {summary.high} high, "
        f"{summary.medium} medium, {summary.low} low)"
    )
    if report.adapters:
        parts = []
        for outcome in report.adapters:
            style = ADAPTER_STATUS_STYLES.get(outcome.status, "white")
            parts.append(f"[{style}]{outcome.name}={outcome.status}[/{style}]")
        console.print(f"  Adapters: {', '.join(parts)}")
    if report.ai_analysis is not None:
        console.print()
        for action in report.ai_analysis.recommended_actions:
            console.print(Text(f"  - {action}"))
    console.print()
