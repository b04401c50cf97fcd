"""
Core data models for File Finder.

This module contains the following dataclasses:
- SearchCriteria: Immutable description of one search
- DetailedEntry: A single matched file (directory, name, size)
- GroupedResult: Search result keyed by containing directory
- DetailedResult: Search result as a flat list of DetailedEntry records
- DirectorySummary: Per-directory match count derived from a GroupedResult
- DeletionResult: Outcome of deleting matched files and pruning directories
- FinderSummary: Summary of a complete run returned by FinderOrchestrator
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, List, Optional, Union

from .file_type import FileType
from .operator_type import OperatorType


@dataclass(frozen=True)
class SearchCriteria:
    """Immutable search parameters shared by every level of a traversal."""
    root_directory: Path                          # Directory listed by this (sub)search
    file_type: FileType = FileType.ANY            # Type filter
    name_filter: Optional[str] = None             # Case-insensitive substring
    size_filter: Optional[int] = None             # Target size in bytes (None = no size filter)
    operator: OperatorType = OperatorType.EQUAL_TO
    tolerance: float = 0.05                       # Fraction, 0.05 = 5%
    detailed: bool = False                        # Selects DetailedResult over GroupedResult

    def __post_init__(self) -> None:
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be >= 0, got {self.tolerance}")
        object.__setattr__(self, "root_directory", Path(self.root_directory))

    def with_root(self, root_directory: Path) -> "SearchCriteria":
        """Return a copy of these criteria rooted at ``root_directory``."""
        return replace(self, root_directory=Path(root_directory))


@dataclass(frozen=True)
class DetailedEntry:
    """A matched file in detailed mode."""
    directory: Path                   # Immediate containing directory
    file_name: str
    size_bytes: int

    @property
    def path(self) -> Path:
        """Full path of the matched file."""
        return self.directory / self.file_name


@dataclass
class GroupedResult:
    """Search result grouped by the immediate containing directory."""
    files: Dict[Path, List[Path]] = field(default_factory=dict)
    total_count: int = 0
    total_bytes: int = 0

    def add(self, directory: Path, file_path: Path, size_bytes: int) -> None:
        """Record one matching file."""
        self.files.setdefault(directory, []).append(file_path)
        self.total_count += 1
        self.total_bytes += size_bytes

    def merge(self, *others: "SearchResult") -> "GroupedResult":
        """Return a new GroupedResult combining this result with ``others``.

        Raises:
            TypeError: If any of ``others`` is not a GroupedResult.
        """
        merged = GroupedResult(
            files={directory: list(paths) for directory, paths in self.files.items()},
            total_count=self.total_count,
            total_bytes=self.total_bytes,
        )
        for other in others:
            if not isinstance(other, GroupedResult):
                raise TypeError(
                    f"cannot merge GroupedResult with {type(other).__name__}"
                )
            for directory, paths in other.files.items():
                merged.files.setdefault(directory, []).extend(paths)
            merged.total_count += other.total_count
            merged.total_bytes += other.total_bytes
        return merged

    def file_paths(self) -> List[Path]:
        """All matched file paths."""
        return [path for paths in self.files.values() for path in paths]

    @property
    def detailed(self) -> bool:
        return False


@dataclass
class DetailedResult:
    """Search result as a flat list of per-file records."""
    entries: List[DetailedEntry] = field(default_factory=list)
    total_count: int = 0
    total_bytes: int = 0

    def add(self, directory: Path, file_path: Path, size_bytes: int) -> None:
        """Record one matching file."""
        self.entries.append(
            DetailedEntry(directory=directory, file_name=file_path.name, size_bytes=size_bytes)
        )
        self.total_count += 1
        self.total_bytes += size_bytes

    def merge(self, *others: "SearchResult") -> "DetailedResult":
        """Return a new DetailedResult combining this result with ``others``.

        Raises:
            TypeError: If any of ``others`` is not a DetailedResult.
        """
        merged = DetailedResult(
            entries=list(self.entries),
            total_count=self.total_count,
            total_bytes=self.total_bytes,
        )
        for other in others:
            if not isinstance(other, DetailedResult):
                raise TypeError(
                    f"cannot merge DetailedResult with {type(other).__name__}"
                )
            merged.entries.extend(other.entries)
            merged.total_count += other.total_count
            merged.total_bytes += other.total_bytes
        return merged

    def file_paths(self) -> List[Path]:
        """All matched file paths."""
        return [entry.path for entry in self.entries]

    @property
    def detailed(self) -> bool:
        return True


# Exactly one variant is produced per search, chosen by SearchCriteria.detailed
SearchResult = Union[GroupedResult, DetailedResult]


def empty_result(detailed: bool) -> SearchResult:
    """Create an empty result of the variant selected by ``detailed``."""
    return DetailedResult() if detailed else GroupedResult()


@dataclass(frozen=True)
class DirectorySummary:
    """Number of matches in one directory."""
    directory: Path
    count: int


@dataclass
class DeletionResult:
    """Outcome of a DeletionPlanner run."""
    files_deleted: int = 0
    directories_deleted: int = 0
    errors: List[str] = field(default_factory=list)  # One message per failed file/directory
    cancelled: bool = False                          # Confirmation was declined


@dataclass
class FinderSummary:
    """Summary of a complete run returned by FinderOrchestrator."""
    total_count: int = 0              # Matched files
    total_bytes: int = 0              # Combined size of matched files
    files_deleted: int = 0
    directories_deleted: int = 0
    errors: List[str] = field(default_factory=list)
    duration_seconds: float = 0.0
    cancelled: bool = False           # Deletion was requested but declined
