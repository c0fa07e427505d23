"""Terminal rendering of change-frequency rankings."""

from rich.console import Console
from rich.table import Table

from complexity_radar.types.files import RankedResult


def render_report(ranked: RankedResult, title: str | None = None) -> Table:
    """Build a table of file name -> change count, in ranking order."""
    table = Table(title=title)
    table.add_column("File", style="cyan", no_wrap=True)
    table.add_column("Changes", justify="right", style="magenta")

    for row in ranked:
        table.add_row(row.name, str(row.change_count))

    return table


def print_report(
    ranked: RankedResult,
    console: Console | None = None,
    title: str | None = None,
) -> None:
    """Print a ranking, or a notice when nothing changed in the window."""
    console = console or Console()
    if not ranked:
        console.print("No changed files in the analysis window.")
        return
    console.print(render_report(ranked, title=title))
