"""Rich-based output utilities for the ef80escape CLI.

Stdout carries the converted data, so messages go to stderr.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ef80escape.core.codec import EncodeReport

# Shared console instance
console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message in red.

    Args:
        message: The error message to display.
    """
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_info(message: str) -> None:
    """Print an informational message.

    Args:
        message: The info message to display.
    """
    console.print(f"[dim]{escape(message)}[/dim]")


def print_report(source: str, report: EncodeReport, round_trip_ok: bool) -> None:
    """Print the result of a round-trip check as a table."""
    table = Table(title=f"ef80escape check: {escape(source)}", show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    table.add_row("bytes", str(report.byte_count))
    table.add_row("characters", str(report.char_count))
    table.add_row("valid UTF-8", "yes" if report.is_utf8 else "no")
    table.add_row("raw bytes escaped", str(report.raw_bytes))
    table.add_row("conflicts prefixed", str(report.escaped_conflicts))
    table.add_row(
        "round trip",
        "[green]ok[/green]" if round_trip_ok else "[bold red]MISMATCH[/bold red]",
    )
    console.print(table)
