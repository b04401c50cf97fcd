"""FinderOrchestrator for coordinating the find and delete workflow.

This module provides the FinderOrchestrator class that runs a complete File
Finder workflow. It coordinates TraversalEngine, ResultAggregator, FinderTUI,
DeletionPlanner and FinderLogger.

Example:
    from filefinder.models import FileType, SearchCriteria
    from filefinder.orchestration import FinderOrchestrator
    from pathlib import Path

    orchestrator = FinderOrchestrator(
        criteria=SearchCriteria(Path("/data"), file_type=FileType.VIDEO),
        remove_files=False,
    )
    summary = orchestrator.run()
"""

import sys
import time
from pathlib import Path
from typing import List, Optional

from rich.markup import escape

from filefinder.models import (
    DeletionResult,
    DirectorySummary,
    FinderSummary,
    GroupedResult,
    SearchCriteria,
    SearchResult,
)
from filefinder.operations import DeletionPlanner
from filefinder.orchestration.finder_logger import FinderLogger
from filefinder.scanning import ResultAggregator, TraversalEngine
from filefinder.ui import FinderTUI


class FinderOrchestrator:
    """Orchestrates the search, display and optional deletion workflow.

    The workflow has four phases:
    1. Search - Walk the root directory with TraversalEngine
    2. Display - Summarize grouped results and render the result table
    3. Deletion - Confirm and delete matched files (only with remove_files)
    4. Summary - Aggregate statistics and write the run log

    The search phase raises DirectoryUnreadableError when the root cannot be
    listed; nothing is displayed or deleted in that case.

    Attributes:
        criteria: Search parameters for this run.
        remove_files: Whether matched files are deleted after display.
        assume_yes: Skip the confirmation prompt before deleting.
        log_file_path: Optional path for the run log.
        verbose: Whether to display verbose output.
    """

    def __init__(
        self,
        criteria: SearchCriteria,
        remove_files: bool = False,
        assume_yes: bool = False,
        max_workers: Optional[int] = None,
        log_file_path: Optional[Path] = None,
        verbose: bool = False,
        tui: Optional[FinderTUI] = None,
    ) -> None:
        """Initialize the FinderOrchestrator.

        Args:
            criteria: Search parameters for this run.
            remove_files: If True, delete matched files after displaying them.
            assume_yes: If True, delete without asking for confirmation.
            max_workers: Size of the traversal concurrency gate. Defaults to
                the number of CPUs.
            log_file_path: Optional path for the run log. No log is written
                when omitted.
            verbose: If True, display search warnings.
            tui: Optional FinderTUI instance (useful for captured output in
                tests).
        """
        self.criteria = criteria
        self.remove_files = remove_files
        self.assume_yes = assume_yes
        self.log_file_path = log_file_path
        self.verbose = verbose

        self._engine = TraversalEngine(max_workers=max_workers)
        self._tui = tui or FinderTUI()

    def run(self) -> FinderSummary:
        """Execute the workflow.

        Returns:
            FinderSummary with match totals and deletion statistics.

        Raises:
            DirectoryUnreadableError: If the root directory cannot be read.
        """
        start_time = time.time()

        # Phase 1: Search
        with self._tui.search_progress(self.criteria.root_directory):
            result = self._engine.search(self.criteria)

        # Phase 2: Display
        summaries: Optional[List[DirectorySummary]] = None
        if isinstance(result, GroupedResult):
            summaries = ResultAggregator.sorted_summaries(result)
        self._tui.display_results(result, summaries)

        if self.verbose and self._engine.get_errors():
            self._tui.console.print("[yellow]Search warnings:[/yellow]")
            for error in self._engine.get_errors():
                self._tui.console.print(f"  [dim]- {escape(error)}[/dim]")

        summary = FinderSummary(
            total_count=result.total_count,
            total_bytes=result.total_bytes,
        )

        # Phase 3: Deletion
        deletion: Optional[DeletionResult] = None
        if self.remove_files and result.total_count > 0:
            deletion = self._execute_deletion(result)
            summary.files_deleted = deletion.files_deleted
            summary.directories_deleted = deletion.directories_deleted
            summary.errors.extend(deletion.errors)
            summary.cancelled = deletion.cancelled

        # Phase 4: Summary
        summary.duration_seconds = time.time() - start_time
        if self.log_file_path is not None:
            self._write_log(result, summaries, deletion, summary)

        return summary

    def _execute_deletion(self, result: SearchResult) -> DeletionResult:
        """Confirm and delete the matched files, then display the outcome."""
        confirm = None if self.assume_yes else self._tui.confirm_deletion
        planner = DeletionPlanner(confirm=confirm)

        deletion = planner.delete(result)
        self._tui.display_deletion_summary(deletion)
        return deletion

    def _write_log(
        self,
        result: SearchResult,
        summaries: Optional[List[DirectorySummary]],
        deletion: Optional[DeletionResult],
        summary: FinderSummary,
    ) -> None:
        """Write the run log; failures to write it are not fatal."""
        try:
            with FinderLogger(
                log_file_path=self.log_file_path,
                remove_files=self.remove_files,
            ) as logger:
                logger.log_header()
                logger.log_search_phase(self.criteria, result, summaries)
                if deletion is not None:
                    logger.log_deletion_phase(deletion)
                logger.log_summary(summary)

                if self.verbose:
                    self._tui.console.print(
                        f"[dim]Log file: {escape(str(logger.get_log_path()))}[/dim]"
                    )
        except OSError as e:
            print(f"Warning: Could not create log file: {e}", file=sys.stderr)
