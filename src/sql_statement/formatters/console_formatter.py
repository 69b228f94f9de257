"""Rich console output formatter."""

from typing import Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text


class ConsoleFormatter:
    """Formats statements for rich console output."""

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize console formatter.

        Args:
            console: Rich console instance (creates new one if None)
        """
        self.console = console or Console()

    def format(self, statement) -> None:
        """
        Print a statement with its bound values.

        Args:
            statement: DatabaseStatement to print
        """
        self.console.print()
        self._print_sql(statement)
        self._print_values(statement)
        self.console.print(f"[dim]Hash: {statement.compute_hash()}[/dim]")

    def format_compact(self, statement) -> None:
        """Print the single-line SQL followed by the values."""
        self.console.print(statement.generate_sql(), markup=False, highlight=False, soft_wrap=True)
        self.console.print(repr(statement.get_values()), markup=False, highlight=False, soft_wrap=True)

    def _print_sql(self, statement) -> None:
        title = Text("Generated SQL", style="bold blue")
        syntax = Syntax(statement.generate_formatted_sql(), "sql", word_wrap=True)
        self.console.print(Panel(syntax, title=title, border_style="blue"))

    def _print_values(self, statement) -> None:
        values = statement.get_values()
        if not values:
            self.console.print("  [dim]No bound values[/dim]")
            return

        table = Table(title="Bound Values")
        table.add_column("Placeholder", style="cyan")
        table.add_column("Value", style="green")
        table.add_column("Type", style="dim")

        items = values.items() if isinstance(values, dict) else enumerate(values, start=1)
        for placeholder, value in items:
            table.add_row(str(placeholder), repr(value), type(value).__name__)

        self.console.print(table)
