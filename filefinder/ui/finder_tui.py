"""Terminal User Interface for File Finder.

This module provides the FinderTUI class, a Rich-based TUI for showing
search results, asking for deletion confirmation and reporting what was
deleted.

Example:
    from filefinder.ui import FinderTUI

    tui = FinderTUI()
    with tui.search_progress(root_directory):
        result = engine.search(criteria)
    tui.display_results(result, summaries)
    if tui.confirm_deletion(result.total_count):
        tui.display_deletion_summary(planner.delete(result))
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Confirm
from rich.table import Table

from filefinder.models import (
    DeletionResult,
    DetailedResult,
    DirectorySummary,
    SearchResult,
)
from filefinder.utils import format_size


class FinderTUI:
    """Rich-based Terminal User Interface for File Finder.

    Provides display and prompt methods for the find workflow:
    - Application banner
    - Spinner while the search runs
    - Grouped or detailed result tables with totals
    - Deletion confirmation and summary

    Args:
        console: Optional Rich Console instance for output. If None, creates
            a new Console. Pass a custom Console for testing (e.g., with
            StringIO file for output capture).

    Attributes:
        console: The Rich Console instance used for all output.
    """

    MAX_DISPLAYED_ERRORS = 10

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize FinderTUI with optional custom console.

        Args:
            console: Optional Rich Console for output. Defaults to new Console().
        """
        self.console = console or Console()

    def display_banner(self, version: str) -> None:
        """Display the application banner.

        Args:
            version: Application version string.
        """
        banner_text = (
            f"[bold]File Finder[/bold] v{version}\n"
            "Find files by type, name and size"
        )
        self.console.print(Panel(banner_text, border_style="blue"))

    @contextmanager
    def search_progress(self, root_directory: Path) -> Iterator[None]:
        """Show a transient spinner while a search is running.

        Args:
            root_directory: Directory being searched (for display).
        """
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
        ) as progress:
            progress.add_task(f"Searching {escape(str(root_directory))}...", total=None)
            yield

    def display_results(
        self,
        result: SearchResult,
        summaries: Optional[List[DirectorySummary]] = None,
    ) -> None:
        """Display search results as a table.

        Detailed results are listed per file; grouped results are listed per
        directory using ``summaries``.

        Args:
            result: The search result.
            summaries: Per-directory rows for grouped results.
        """
        if result.total_count == 0:
            self.console.print(
                f"[blue]INFO:[/blue] {result.total_count} results found matching criteria"
            )
            return

        if isinstance(result, DetailedResult):
            table = self._build_detailed_table(result)
        else:
            table = self._build_grouped_table(result, summaries or [])

        self.console.print(table)

    def confirm_deletion(self, file_count: int) -> bool:
        """Ask the user to confirm deletion of the matched files.

        Args:
            file_count: Number of files that would be deleted.

        Returns:
            True if the user confirmed.
        """
        return Confirm.ask(
            f"Are you sure you want to delete these {file_count:,} files?",
            console=self.console,
            default=False,
        )

    def display_deletion_summary(self, result: DeletionResult) -> None:
        """Display the outcome of a deletion run.

        Args:
            result: DeletionResult from the DeletionPlanner.
        """
        if result.cancelled:
            self.console.print("[blue]INFO:[/blue] Deletion cancelled.")
            return

        message = (
            f"Deleted {result.files_deleted} files and "
            f"{result.directories_deleted} directories."
        )
        if result.errors:
            self.console.print(f"[yellow]{message}[/yellow]")
            self._display_errors(result.errors)
        else:
            self.console.print(f"[green]SUCCESS:[/green] {message}")

    def display_error(self, message: str) -> None:
        """Display a fatal error message."""
        self.console.print(f"[red]Error:[/red] {escape(message)}")

    def _build_grouped_table(
        self, result: SearchResult, summaries: List[DirectorySummary]
    ) -> Table:
        table = Table(show_header=True, header_style="bold", show_footer=True)
        table.add_column("Directory", style="green", footer="Total")
        table.add_column("Count", justify="right", footer=f"{result.total_count:,}")

        for summary in summaries:
            table.add_row(
                self._format_link(summary.directory, str(summary.directory)),
                f"{summary.count:,}",
            )
        return table

    def _build_detailed_table(self, result: DetailedResult) -> Table:
        table = Table(show_header=True, header_style="bold", show_footer=True)
        table.add_column("Directory", style="green", footer="Total")
        table.add_column("File Name", style="green", footer=f"{result.total_count:,}")
        table.add_column("File Size", justify="right", footer=format_size(result.total_bytes))

        for entry in result.entries:
            table.add_row(
                self._format_link(entry.directory, str(entry.directory)),
                self._format_link(entry.path, entry.file_name),
                format_size(entry.size_bytes),
            )
        return table

    def _display_errors(self, errors: List[str]) -> None:
        """Display error messages in a red panel.

        Args:
            errors: List of error messages to display.
        """
        displayed_errors = errors[: self.MAX_DISPLAYED_ERRORS]
        remaining = len(errors) - self.MAX_DISPLAYED_ERRORS

        error_text = "\n".join(f"- {escape(e)}" for e in displayed_errors)
        if remaining > 0:
            error_text += f"\n\n... and {remaining} more errors"

        self.console.print(
            Panel(error_text, title=f"Errors ({len(errors)})", border_style="red")
        )

    def _format_link(self, path: Path, text: str) -> str:
        """Wrap ``text`` in a Rich hyperlink to ``path``."""
        try:
            uri = Path(path).absolute().as_uri()
        except ValueError:
            return escape(text)
        return f"[link={uri}]{escape(text)}[/link]"
