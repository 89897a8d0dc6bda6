"""src/playmeta/ui/cli/display/result.py
What: Render parsed records as compact Rich tables.
Why: Keep console output formatting consistent across subcommands.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console()

    def show_fields(self, title: str, rows: Sequence[tuple[str, object]]) -> None:
        """Print a two-column field/value table.

        Args:
            title: Table caption.
            rows: Field names paired with values; None renders as a dim dash.
        """
        table = Table(
            title=title,
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Field", style="bold")
        table.add_column("Value")

        for name, value in rows:
            table.add_row(name, self._format_value(value))

        self.console.print(table)

    def show_unrecognised(self, what: str) -> None:
        """Report input that no normalizer recognised."""

        self.console.print(f"[yellow]{what} not recognised.[/yellow]")

    @staticmethod
    def _format_value(value: object) -> Text:
        if value is None:
            return Text("—", style="dim")
        return Text(str(value))
