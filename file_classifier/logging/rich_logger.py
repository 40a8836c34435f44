"""Rich-based progress reporter implementation."""
from __future__ import annotations

import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from ..core.models import ProcessingStats


class RichProgressReporter:
    """Progress reporter using Rich for terminal output.

    Implements the ProgressReporter protocol. Everything goes to stderr
    so stdout stays clean.
    """

    def __init__(
        self,
        verbose: bool = False,
        console: Optional[Console] = None,
    ):
        """Initialize the reporter.

        Args:
            verbose: Enable verbose output.
            console: Console to print to (defaults to stderr).
        """
        self._console = console or Console(stderr=True)
        self._verbose = verbose
        self._progress: Optional[Progress] = None
        self._current_task_id: Optional[TaskID] = None

    # --- Phase Management ---

    def start_phase(self, name: str, total: int) -> None:
        """Start a new processing phase with progress bar."""
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(bar_width=40),
            MofNCompleteColumn(),
            TextColumn("[cyan]•"),
            TimeElapsedColumn(),
            console=self._console,
            transient=False,
        )
        self._progress.start()
        self._current_task_id = self._progress.add_task(name, total=total)

    def advance_phase(self, amount: int = 1) -> None:
        """Advance the current phase by amount."""
        if self._progress and self._current_task_id is not None:
            self._progress.advance(self._current_task_id, amount)

    def end_phase(self) -> None:
        """End the current phase."""
        if self._progress:
            self._progress.stop()
            self._progress = None
            self._current_task_id = None

    # --- Logging Methods ---

    def info(self, message: str) -> None:
        self._console.print(f"[blue]ℹ[/blue] {escape(message)}")

    def success(self, message: str) -> None:
        self._console.print(f"[green]✓[/green] {escape(message)}")

    def warning(self, message: str) -> None:
        """Log a warning message. Always shown."""
        self._console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        """Log an error message. Always shown."""
        self._console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def debug(self, message: str) -> None:
        """Log a debug message (only in verbose mode)."""
        if self._verbose:
            self._console.print(f"[dim]  {escape(message)}[/dim]")

    # --- Specialized Output ---

    def print_header(self, title: str) -> None:
        text = Text(title, style="bold cyan")
        self._console.print(Panel(text, border_style="cyan"))

    def print_config(self, config_items: dict) -> None:
        """Print configuration as a table."""
        table = Table(title="Configuration", show_header=True, header_style="bold")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="white")

        for key, value in config_items.items():
            table.add_row(key, escape(str(value)))

        self._console.print(table)

    def print_stats(self, stats: ProcessingStats, report: Optional[str] = None) -> None:
        """Print processing statistics."""
        table = Table(title="Classification Complete", show_header=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Count", style="green", justify="right")

        table.add_row("Files Scanned", str(stats.total_files))
        table.add_row("Files Copied", str(stats.copied))
        table.add_row("Renamed On Collision", str(stats.renamed))
        table.add_row("Duplicates Skipped", str(stats.skipped_duplicate))
        table.add_row("Small Files Skipped", str(stats.skipped_small))

        if stats.per_category:
            table.add_row("", "")
            for category, count in sorted(stats.per_category.items()):
                table.add_row(f"  {escape(category)}", str(count))

        if stats.elapsed_seconds > 0:
            table.add_row("", "")
            table.add_row("Time Elapsed", f"{stats.elapsed_seconds:.1f}s")

        self._console.print(table)

        if report:
            self.warning(f"Duplicates listed in {report}")


class QuietProgressReporter:
    """Minimal progress reporter that only shows warnings and errors."""

    def start_phase(self, name: str, total: int) -> None:
        pass

    def advance_phase(self, amount: int = 1) -> None:
        pass

    def end_phase(self) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        print(f"WARNING: {message}", file=sys.stderr)

    def error(self, message: str) -> None:
        print(f"ERROR: {message}", file=sys.stderr)

    def debug(self, message: str) -> None:
        pass

    def print_header(self, title: str) -> None:
        pass

    def print_config(self, config_items: dict) -> None:
        pass

    def print_stats(self, stats: ProcessingStats, report: Optional[str] = None) -> None:
        pass
