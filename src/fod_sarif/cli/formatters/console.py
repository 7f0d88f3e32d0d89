# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output for export summaries."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from fod_sarif import __version__
from fod_sarif.core.constants import SEVERITY_ORDER, Severity
from fod_sarif.export.pipeline import ExportSummary

# stdout stays free for callers that pipe the tool
console = Console(stderr=True)

SEVERITY_COLORS = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "cyan",
}


def format_export_summary(summary: ExportSummary) -> None:
    """Print an export summary with Rich formatting."""
    console.print()
    console.print(f"[bold]fod-sarif v{__version__}[/bold] - Fortify on Demand SARIF export")
    console.print()

    info_table = Table(show_header=False, box=None, padding=(0, 2))
    info_table.add_column("key", style="dim")
    info_table.add_column("value")
    release = summary.release_id
    if summary.application or summary.release_name:
        release = f"{release} ({summary.application} / {summary.release_name})"
    info_table.add_row("Release:", release)
    info_table.add_row("Output:", str(summary.output))
    if summary.selection is not None:
        selected = [
            f"[{SEVERITY_COLORS[s]}]{s}[/{SEVERITY_COLORS[s]}]"
            for s in SEVERITY_ORDER
            if s in summary.selection.severities
        ]
        info_table.add_row("Severities:", ", ".join(selected) or "none")
    info_table.add_row("Duration:", f"{summary.duration_ms / 1000:.1f}s")
    console.print(info_table)
    console.print()

    if summary.reason:
        console.print(Panel(f"[yellow]{summary.reason}[/yellow]", style="yellow"))
        console.print()

    stats = summary.stats
    table = Table(title="Export")
    table.add_column("Pages", justify="right")
    table.add_column("Vulnerabilities", justify="right")
    table.add_column("Exported", justify="right", style="green")
    table.add_column("Skipped", justify="right", style="dim")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Invalid", justify="right", style="red")
    table.add_column("Rules", justify="right")
    table.add_row(
        str(stats.pages),
        str(stats.items),
        str(stats.exported),
        str(stats.skipped),
        str(stats.failed),
        str(stats.invalid),
        str(summary.rules),
    )
    console.print(table)
