"""File Finder - Find files by type, name and size.

A Python application for locating files beneath a root directory that match
a type, name and size filter, displaying them per directory or per file, and
optionally deleting them along with any directories left empty.
"""

__version__ = "1.0.0"

from .models import (
    DeletionResult,
    DetailedEntry,
    DetailedResult,
    DirectorySummary,
    FileType,
    FinderSummary,
    GroupedResult,
    OperatorType,
    SearchCriteria,
)

__all__ = [
    "__version__",
    "DeletionResult",
    "DetailedEntry",
    "DetailedResult",
    "DirectorySummary",
    "FileType",
    "FinderSummary",
    "GroupedResult",
    "OperatorType",
    "SearchCriteria",
]


def main() -> None:
    """Entry point for the File Finder CLI application.

    This function is called when the `file-finder` command is invoked after
    package installation via pip. It imports and runs the Typer app
    from the filefinder.cli module.
    """
    from filefinder.cli import app
    app()
