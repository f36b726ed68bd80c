"""Console output for the command-line interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from path_controller.controller import PathController


class ConsoleOutput:
    """Non-interactive terminal output for pathctl."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Rich console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_path_info(self, controller: PathController) -> None:
        """Display a table describing a path.

        Args:
            controller: Path to describe.
        """
        if controller.is_directory:
            kind = "directory"
        elif controller.is_file:
            kind = "file"
        elif controller.exists:
            kind = "other"
        else:
            kind = "-"

        table = Table(title="Path", show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Path", escape(controller.path) or "''")
        table.add_row("Absolute", controller.display_path)
        table.add_row("Exists", "[green]yes[/green]" if controller.exists else "[red]no[/red]")
        table.add_row("Type", kind)
        table.add_row("Extension", escape(controller.extension) or "-")
        table.add_row("Basename", escape(controller.basename))
        table.add_row("Parent", escape(controller.parent_directory or "-"))
        self.console.print(table)

    def show_lines(self, lines: list[str]) -> None:
        """Print one entry per line without markup processing."""
        for line in lines:
            self.console.print(line, markup=False, highlight=False)

    def show_content(self, content: str) -> None:
        """Print file content verbatim."""
        self.console.print(content, markup=False, highlight=False, end="")

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {message}")
