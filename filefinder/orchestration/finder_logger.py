"""FinderLogger for writing a structured run log.

This module provides the FinderLogger class that writes a plain-text log of a
File Finder run: the criteria used, what matched, what was deleted and how
long it took.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, TextIO

from filefinder.models import (
    DeletionResult,
    DetailedResult,
    DirectorySummary,
    FinderSummary,
    SearchCriteria,
    SearchResult,
)
from filefinder.utils import format_size


class FinderLogger:
    """Logger for File Finder runs with structured output format.

    Generates log files with sections for header, search phase, deletion
    phase and summary.

    Usage:
        with FinderLogger(log_path, remove_files=True) as logger:
            logger.log_header()
            logger.log_search_phase(criteria, result, summaries)
            logger.log_deletion_phase(deletion_result)
            logger.log_summary(summary)

    Attributes:
        SEPARATOR: The 65-character separator line used between sections.
    """

    SEPARATOR = "=" * 65

    def __init__(
        self,
        log_file_path: Optional[Path] = None,
        remove_files: bool = False,
    ) -> None:
        """Initialize the FinderLogger.

        Args:
            log_file_path: Optional path for the log file. If not provided,
                generates a timestamped filename in the current directory.
            remove_files: Whether matched files will be deleted in this run.

        Raises:
            OSError: If the log file path is not writable.
        """
        self._remove_files = remove_files
        self._start_timestamp = datetime.now()
        self._file_handle: Optional[TextIO] = None

        if log_file_path is None:
            timestamp_str = self._start_timestamp.strftime("%Y-%m-%d_%H-%M-%S")
            self._log_file_path = Path.cwd() / f"file_finder_{timestamp_str}.log"
        else:
            self._log_file_path = Path(log_file_path)

        self._validate_path()

    def _validate_path(self) -> None:
        """Validate that the log file path is writable.

        Raises:
            OSError: If the parent directory doesn't exist or is not writable.
        """
        parent = self._log_file_path.parent
        if not parent.exists():
            raise OSError(f"Parent directory does not exist: {parent}")
        if not parent.is_dir():
            raise OSError(f"Parent path is not a directory: {parent}")
        try:
            test_file = parent / f".file_finder_test_{id(self)}"
            test_file.touch()
            test_file.unlink()
        except PermissionError:
            raise OSError(f"Permission denied: cannot write to {parent}")

    def __enter__(self) -> "FinderLogger":
        """Enter the context manager, opening the log file.

        Raises:
            OSError: If the file cannot be opened for writing.
        """
        try:
            self._file_handle = open(self._log_file_path, "w", encoding="utf-8")
        except OSError as e:
            raise OSError(f"Cannot open log file for writing: {e}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit the context manager, closing the log file."""
        if self._file_handle is not None:
            try:
                self._file_handle.close()
            except OSError as e:
                print(f"Warning: Error closing log file: {e}", file=sys.stderr)
            finally:
                self._file_handle = None

    def get_log_path(self) -> Path:
        """Get the path to the log file."""
        return self._log_file_path

    def log_header(self) -> None:
        """Write the header section: title, timestamp and mode."""
        self._write_separator()
        self._write_line("File Finder - Run Log")
        self._write_separator()
        self._write_line(f"Timestamp: {self._format_timestamp(self._start_timestamp)}")
        mode = "REMOVE FILES" if self._remove_files else "SEARCH ONLY"
        self._write_line(f"Mode: {mode}")
        self._write_line("")

    def log_search_phase(
        self,
        criteria: SearchCriteria,
        result: SearchResult,
        summaries: Optional[List[DirectorySummary]] = None,
    ) -> None:
        """Write the search phase section.

        Args:
            criteria: Criteria used for the search.
            result: The search result.
            summaries: Per-directory rows (grouped results only).
        """
        self._write_separator()
        self._write_line("SEARCH PHASE")
        self._write_separator()
        self._write_line(f"Root Directory: {criteria.root_directory}")
        self._write_line(f"File Type: {criteria.file_type.label}")
        self._write_line(f"Name Filter: {criteria.name_filter or '-'}")
        if criteria.size_filter is None:
            self._write_line("Size Filter: -")
        else:
            self._write_line(
                f"Size Filter: {criteria.operator.value} {format_size(criteria.size_filter)} "
                f"(tolerance {criteria.tolerance:.0%})"
            )
        self._write_line(f"Files matched: {result.total_count:,}")
        self._write_line(f"Total size: {format_size(result.total_bytes)}")
        self._write_line("")

        if result.total_count == 0:
            return

        self._write_line("Matches:")
        if isinstance(result, DetailedResult):
            for entry in result.entries:
                self._write_line(f"- {entry.path} ({format_size(entry.size_bytes)})", indent=2)
        else:
            for summary in summaries or []:
                self._write_line(f"- {summary.directory}: {summary.count}", indent=2)
        self._write_line("")

    def log_deletion_phase(self, result: DeletionResult) -> None:
        """Write the deletion phase section.

        Args:
            result: The DeletionResult from the DeletionPlanner.
        """
        self._write_separator()
        self._write_line("DELETION PHASE")
        self._write_separator()

        if result.cancelled:
            self._write_line("Deletion cancelled by user.")
            self._write_line("")
            return

        self._write_line(f"Files deleted: {result.files_deleted:,}")
        self._write_line(f"Empty directories removed: {result.directories_deleted:,}")
        if result.errors:
            self._write_line("Errors:")
            for error in result.errors:
                self._write_line(f"- {error}", indent=2)
        self._write_line("")

    def log_summary(self, summary: FinderSummary) -> None:
        """Write the summary section.

        Args:
            summary: The FinderSummary for the run.
        """
        self._write_separator()
        self._write_line("SUMMARY")
        self._write_separator()
        self._write_line(f"Files matched: {summary.total_count:,}")
        self._write_line(f"Total size: {format_size(summary.total_bytes)}")
        if self._remove_files:
            self._write_line(f"Files deleted: {summary.files_deleted:,}")
            self._write_line(f"Empty directories removed: {summary.directories_deleted:,}")

        if summary.errors:
            self._write_line(f"Total errors: {len(summary.errors)}")

        self._write_line(f"Duration: {self._format_duration(summary.duration_seconds)}")
        self._write_line("")
        self._write_line(f"Log file: {self._log_file_path}")
        self._write_separator()

    def _format_duration(self, seconds: float) -> str:
        """Format duration like "45s", "5m 23s" or "1h 5m 30s"."""
        total_seconds = int(seconds)

        if total_seconds < 60:
            return f"{total_seconds}s"

        hours = total_seconds // 3600
        minutes = (total_seconds % 3600) // 60
        secs = total_seconds % 60

        if hours > 0:
            return f"{hours}h {minutes}m {secs}s"
        else:
            return f"{minutes}m {secs}s"

    def _format_timestamp(self, dt: datetime) -> str:
        return dt.strftime("%Y-%m-%d %H:%M:%S")

    def _write_separator(self) -> None:
        self._write_line(self.SEPARATOR)

    def _write_line(self, text: str, indent: int = 0) -> None:
        """Write a line to the log file with optional indentation.

        Args:
            text: The text to write.
            indent: Number of spaces to indent the line.
        """
        if self._file_handle is None:
            print(
                f"Warning: Attempted to write to closed log file: {text}",
                file=sys.stderr,
            )
            return

        try:
            self._file_handle.write(" " * indent + text + "\n")
        except OSError as e:
            print(f"Warning: Error writing to log file: {e}", file=sys.stderr)
