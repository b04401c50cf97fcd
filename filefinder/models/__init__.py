"""
Models package for File Finder.

This package provides convenient imports for all data models:
- FileType: Enum for the type filter categories
- OperatorType: Enum for size filter operators
- SearchCriteria: Immutable search parameters
- DetailedEntry: A single matched file
- GroupedResult / DetailedResult: The two SearchResult variants
- DirectorySummary: Per-directory match count
- DeletionResult: Outcome of a deletion run
- FinderSummary: Summary of a complete run
"""

from .file_type import FILE_EXTENSIONS, FileType
from .operator_type import OPERATOR_ALIASES, OperatorType
from .data_models import (
    DeletionResult,
    DetailedEntry,
    DetailedResult,
    DirectorySummary,
    FinderSummary,
    GroupedResult,
    SearchCriteria,
    SearchResult,
    empty_result,
)

__all__ = [
    "FILE_EXTENSIONS",
    "FileType",
    "OPERATOR_ALIASES",
    "OperatorType",
    "SearchCriteria",
    "DetailedEntry",
    "GroupedResult",
    "DetailedResult",
    "SearchResult",
    "empty_result",
    "DirectorySummary",
    "DeletionResult",
    "FinderSummary",
]
