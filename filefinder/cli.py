"""
File Finder - CLI Interface.

A command-line interface for finding files of a given type, name and size
beneath a root directory, and optionally deleting them. Every option can also
be set through an environment variable with the ``FF_`` prefix; values given
on the command line take precedence.

Usage Examples:
    # Count video files per directory
    file-finder /path/to/media -t video

    # List PDFs around 2 MB (5% tolerance) with their sizes
    file-finder /path/to/docs -t documents -f .pdf -s "2 MB" -d

    # Images larger than 10 MB, with a 10% tolerance
    file-finder /path/to/photos -t image -o gt -s 10MB -l 0.1

    # Delete matching archives after confirmation, writing a run log
    file-finder /path/to/downloads -t archive -s "1 GB" -o gte -d -r --log-file run.log

    # Same criteria from the environment
    FF_FILE_TYPE_FILTER=video FF_FILE_SIZE_FILTER="700 MB" file-finder /media
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from filefinder.exceptions import (
    DirectoryUnreadableError,
    InvalidFilterValueError,
    SizeParseError,
)
from filefinder.models import FileType, OperatorType, SearchCriteria
from filefinder.orchestration import FinderOrchestrator
from filefinder.ui import FinderTUI
from filefinder.utils import parse_size

__version__ = "1.0.0"

ENV_PREFIX = "FF_"

# Initialize Typer app
app = typer.Typer(
    name="file-finder",
    help="File Finder - Find files by type, name and size, and optionally remove them.",
    add_completion=True,
)

# Rich console for consistent output formatting
console = Console()


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"File Finder v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route filefinder logging through Rich on stderr.

    Args:
        verbose: DEBUG level when True, WARNING otherwise.
    """
    package_logger = logging.getLogger("filefinder")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_criteria(
    root_directory: Path,
    file_type_filter: str,
    file_name_filter: Optional[str],
    file_size_filter: Optional[str],
    operator_type: str,
    tolerance_size: float,
    detailed: bool,
) -> SearchCriteria:
    """
    Convert raw option values into SearchCriteria.

    Args:
        root_directory: Directory to search.
        file_type_filter: File type string (Any, Video, Image, Archive, Documents).
        file_name_filter: Optional case-insensitive substring.
        file_size_filter: Optional size string such as "2 MB".
        operator_type: Operator alias such as "gt" or ">=".
        tolerance_size: Tolerance fraction.
        detailed: Whether to produce detailed results.

    Returns:
        Validated SearchCriteria.

    Raises:
        InvalidFilterValueError: If the type or operator string is unknown.
        SizeParseError: If the size string cannot be parsed.
    """
    return SearchCriteria(
        root_directory=root_directory,
        file_type=FileType.from_string(file_type_filter),
        name_filter=file_name_filter or None,
        size_filter=parse_size(file_size_filter),
        operator=OperatorType.from_string(operator_type),
        tolerance=tolerance_size,
        detailed=detailed,
    )


@app.command(no_args_is_help=True)
def main(
    root_directory: Path = typer.Argument(
        ...,
        help="Root directory to search.",
        exists=False,  # The traversal engine reports unreadable roots
    ),
    file_type_filter: str = typer.Option(
        FileType.ANY.label,
        "--file-type-filter",
        "-t",
        envvar=f"{ENV_PREFIX}FILE_TYPE_FILTER",
        help="File type to search for (Any, Archive, Documents, Image, Video).",
    ),
    file_name_filter: Optional[str] = typer.Option(
        None,
        "--file-name-filter",
        "-f",
        envvar=f"{ENV_PREFIX}FILE_NAME_FILTER",
        help="Name to filter results by (case-insensitive substring).",
    ),
    file_size_filter: Optional[str] = typer.Option(
        None,
        "--file-size-filter",
        "-s",
        envvar=f"{ENV_PREFIX}FILE_SIZE_FILTER",
        help="File size to search for (1 KB, 1 MB, 1 GB).",
    ),
    operator_type: str = typer.Option(
        OperatorType.EQUAL_TO.value,
        "--operator-type",
        "-o",
        envvar=f"{ENV_PREFIX}OPERATOR_TYPE",
        help=(
            "Operator to apply on file size: equal to (et, ==), greater than (gt, >), "
            "greater than or equal to (gte, >=), less than (lt, <), "
            "less than or equal to (lte, <=)."
        ),
    ),
    tolerance_size: float = typer.Option(
        0.05,
        "--tolerance-size",
        "-l",
        min=0.0,
        envvar=f"{ENV_PREFIX}TOLERANCE_SIZE",
        help="File size tolerance as a fraction (0.05 = 5%).",
    ),
    display_detailed_results: bool = typer.Option(
        False,
        "--display-detailed-results",
        "-d",
        envvar=f"{ENV_PREFIX}DISPLAY_DETAILED_RESULTS",
        help="Display one row per file instead of per-directory counts.",
    ),
    remove_files: bool = typer.Option(
        False,
        "--remove-files",
        "-r",
        envvar=f"{ENV_PREFIX}REMOVE_FILES",
        help="Remove found files, then any directories left empty.",
    ),
    assume_yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        envvar=f"{ENV_PREFIX}ASSUME_YES",
        help="Do not ask for confirmation before removing files.",
    ),
    display_app_banner: bool = typer.Option(
        False,
        "--display-app-banner",
        "-b",
        envvar=f"{ENV_PREFIX}DISPLAY_APP_BANNER",
        help="Whether or not to display the application banner.",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        envvar=f"{ENV_PREFIX}LOG_FILE",
        help="Path for a run log file.",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        min=1,
        envvar=f"{ENV_PREFIX}WORKERS",
        help="Maximum directories searched in parallel (default: CPU count).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        envvar=f"{ENV_PREFIX}VERBOSE",
        help="Enable verbose output.",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """
    Find files of a specified type, name and size.

    Searches ROOT_DIRECTORY recursively and displays either per-directory
    counts or, with --display-detailed-results, one row per file. With
    --remove-files the matches are deleted after confirmation and any
    directories left empty are pruned.
    """
    configure_logging(verbose)
    tui = FinderTUI(console=console)

    try:
        criteria = build_criteria(
            root_directory=root_directory,
            file_type_filter=file_type_filter,
            file_name_filter=file_name_filter,
            file_size_filter=file_size_filter,
            operator_type=operator_type,
            tolerance_size=tolerance_size,
            detailed=display_detailed_results,
        )
    except (InvalidFilterValueError, SizeParseError) as e:
        tui.display_error(str(e))
        raise typer.Exit(1)

    if display_app_banner:
        tui.display_banner(__version__)

    try:
        orchestrator = FinderOrchestrator(
            criteria=criteria,
            remove_files=remove_files,
            assume_yes=assume_yes,
            max_workers=workers,
            log_file_path=log_file,
            verbose=verbose,
            tui=tui,
        )
        summary = orchestrator.run()

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user.[/yellow]")
        raise typer.Exit(130)

    except DirectoryUnreadableError as e:
        tui.display_error(f"error finding files: {e}")
        raise typer.Exit(1)

    if summary.errors:
        console.print(
            f"\n[yellow]Completed with {len(summary.errors)} error(s).[/yellow]"
        )
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
