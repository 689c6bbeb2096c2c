"""Output helpers for the CLI."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..version import Version

console = Console()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗ Error:[/red] {escape(message)}", highlight=False)


def version_table(version: Version, title: str) -> Table:
    """Build a table describing the fields of a version.

    Args:
        version: Version to describe.
        title: Table title.

    Returns:
        Rich table with one row per field.
    """
    table = Table(title=title)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("major", str(version.major))
    table.add_row("minor", str(version.minor))
    table.add_row("patch", str(version.patch))
    table.add_row("stability", version.stability.name.lower())
    table.add_row("metaver", str(version.metaver))
    table.add_row("canonical", str(version))
    return table


def print_candidates(candidates: list[Version], prefix: str = "") -> None:
    """Print a numbered list of candidate versions."""
    for index, candidate in enumerate(candidates, start=1):
        console.print(f"  {index}. {prefix}{candidate}", highlight=False)
