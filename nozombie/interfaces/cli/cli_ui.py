#!/usr/bin/env python3
"""
Rich UI components for CLI - consistent interface across all commands.

Also provides the rich-backed implementations of the pipeline's prompting
and progress capabilities.
"""

from __future__ import annotations

from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm
from rich.status import Status
from rich.syntax import Syntax
from rich.table import Table

from nozombie.helpers.dto.component_dto import Component, DeletionSummary

console = Console()

# Color scheme constants
COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"


class TableDisplay:
    """
    Formatted tables for component lists and summaries.
    """

    @staticmethod
    def show_components(components: list[Component], title: str = "Unused components"):
        """Display a table of components."""
        table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold")
        table.add_column("#", style=COLOR_INFO, width=5)
        table.add_column("Component", style="bold")
        table.add_column("Path", overflow="fold")

        for index, component in enumerate(components, 1):
            table.add_row(str(index), escape(component.name), escape(component.path))

        console.print(table)

    @staticmethod
    def show_summary(title: str, data: dict[str, Any], border_style: str = COLOR_INFO):
        """Display a summary table."""
        table = Table(title=title, box=box.ROUNDED, show_header=False, border_style=border_style)
        table.add_column("Metric", style="bold")
        table.add_column("Value")

        for key, value in data.items():
            table.add_row(key, str(value))

        console.print(table)


class RichProgressReporter:
    """ProgressReporter backed by a console status spinner."""

    def __init__(self) -> None:
        self._status: Status | None = None

    def start(self, text: str) -> None:
        self._status = console.status(f"[bold {COLOR_INFO}]{escape(text)}[/bold {COLOR_INFO}]")
        self._status.start()

    def stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def log(self, text: str) -> None:
        console.print(f"\n{escape(text)}")


class RichConfirmer:
    """Confirmer backed by rich.prompt.Confirm; answers default to no."""

    def ask(self, message: str) -> bool:
        return Confirm.ask(escape(message), console=console, default=False)


def show_component_content(component: Component) -> None:
    """Print a component's source with highlighting, framed by its path."""
    lexer = Syntax.guess_lexer(component.path, component.content)
    syntax = Syntax(component.content, lexer, line_numbers=True, word_wrap=True)
    console.print(Panel(syntax, title=f"[bold]{escape(component.name)}[/bold]", subtitle=escape(component.path)))


def show_deletion_summary(summary: DeletionSummary) -> None:
    """Counts plus one line per failed delete."""
    TableDisplay.show_summary(
        "Deletion summary",
        {"Deleted": len(summary.deleted), "Skipped": len(summary.skipped), "Failed": len(summary.failed)},
        COLOR_SUCCESS if summary.ok else COLOR_ERROR,
    )
    for path, reason in summary.failed:
        print_error(f"Could not delete {path}: {reason}")


def print_success(message: str):
    """Print a success message."""
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {escape(message)}")


def print_error(message: str):
    """Print an error message."""
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {escape(message)}")


def print_warning(message: str):
    """Print a warning message."""
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {escape(message)}")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[{COLOR_INFO}]ℹ[/{COLOR_INFO}] {escape(message)}")
