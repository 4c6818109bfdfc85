"""Rich terminal report for analysis results."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from depcheck_lite.models.results import AnalysisResult, ScanStats


def display_result(result: AnalysisResult, console: Console) -> None:
    """Print the unused dependencies, or a success line if there are none."""
    if not result.unused:
        console.print("[bold green]✓[/] No unused dependencies found!")
        return

    console.print(f"Found [bold red]{len(result.unused)}[/] unused dependencies:\n")
    for name in result.unused:
        console.print(f"  - [red]{name}[/]")
    console.print(f"\nTotal: {len(result.unused)}/{result.total}")


def build_summary_table(result: AnalysisResult, stats: ScanStats) -> Table:
    """Build a key/value table summarizing a run."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    table.add_row("Files scanned", str(stats.files_scanned))
    table.add_row("References found", str(stats.references_found))
    table.add_row("Declared dependencies", str(result.total))
    table.add_row("  used", f"[green]{len(result.used)}[/]")
    table.add_row("  unused", f"[red]{len(result.unused)}[/]")

    if stats.skipped_dirs:
        table.add_row("", "")
        table.add_row("Unreadable directories", str(len(stats.skipped_dirs)))
        for path in stats.skipped_dirs:
            table.add_row("", f"[dim]{path}[/]")

    return table


def display_summary(result: AnalysisResult, stats: ScanStats, console: Console) -> None:
    """Print the summary table inside a panel."""
    table = build_summary_table(result, stats)
    console.print(Panel(table, title="[bold]Dependency Summary[/]", border_style="blue"))
