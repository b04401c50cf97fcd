"""Concurrent recursive search over a directory tree.

This module provides the TraversalEngine class, which lists a directory,
evaluates its files against SearchCriteria and hands each subdirectory to a
worker pool. Every directory expansion returns its own SearchResult together
with the subdirectories it found; the thread that called search() submits
those subdirectories and merges the per-directory results, so no accumulator
is shared between threads.

Example:
    >>> from filefinder.models import FileType, SearchCriteria
    >>> from filefinder.scanning import TraversalEngine
    >>> engine = TraversalEngine()
    >>> result = engine.search(SearchCriteria(Path("/data"), file_type=FileType.VIDEO))
    >>> print(f"{result.total_count} files, {result.total_bytes} bytes")
"""

import logging
import os
import threading
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from pathlib import Path
from typing import List, Optional, Set, Tuple

from filefinder.exceptions import DirectoryUnreadableError
from filefinder.matching import is_allowed, size_matches
from filefinder.models import SearchCriteria, SearchResult, empty_result

logger = logging.getLogger(__name__)

Expansion = Tuple[SearchResult, List[Path]]


class TraversalEngine:
    """Searches a directory tree for files matching SearchCriteria.

    Each search() runs one worker pool of ``max_workers`` threads. A pool
    task lists a single directory, evaluates its files and returns the
    subdirectories it found without waiting on them, so the number of
    threads stays at ``max_workers`` however deep or wide the tree is. A
    bounded semaphore owned by the engine (the concurrency gate) limits how
    many directories are being listed and evaluated at the same time.

    Only a failure to list the search root is fatal. A subdirectory that
    cannot be listed contributes no matches and is recorded in
    ``get_errors()``; a file that cannot be stat'ed is skipped.

    Attributes:
        _max_workers: Size of the worker pool and of the concurrency gate.
        _gate: Semaphore bounding simultaneous directory expansions.
        _errors: Subtree failures recorded during searches.

    Example:
        >>> engine = TraversalEngine(max_workers=4)
        >>> result = engine.search(criteria)
        >>> for message in engine.get_errors():
        ...     print(message)
    """

    def __init__(self, max_workers: Optional[int] = None) -> None:
        """Initialize the TraversalEngine.

        Args:
            max_workers: Maximum number of directory expansions in flight.
                Defaults to the number of available CPUs.

        Raises:
            ValueError: If max_workers is less than 1.
        """
        if max_workers is None:
            max_workers = os.cpu_count() or 1
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")

        self._max_workers = max_workers
        self._gate = threading.BoundedSemaphore(max_workers)
        self._errors: List[str] = []
        self._errors_lock = threading.Lock()

    @property
    def max_workers(self) -> int:
        """Size of the worker pool and of the concurrency gate."""
        return self._max_workers

    def search(self, criteria: SearchCriteria) -> SearchResult:
        """Search ``criteria.root_directory`` recursively.

        The root is expanded in the calling thread; every subdirectory below
        it is expanded by the worker pool. Per-directory results are merged
        once all of them are in.

        Args:
            criteria: Search parameters. ``criteria.detailed`` selects the
                result variant for the whole search.

        Returns:
            GroupedResult or DetailedResult with exact totals.

        Raises:
            DirectoryUnreadableError: If the root directory cannot be listed.
        """
        logger.debug("Searching %s", criteria.root_directory)
        root_result, subdirectories = self._expand_directory(criteria, is_root=True)
        if not subdirectories:
            return root_result

        child_results: List[SearchResult] = []
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            pending: Set[Future] = {
                executor.submit(self._expand_directory, criteria.with_root(subdirectory))
                for subdirectory in subdirectories
            }
            while pending:
                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    result, found = future.result()
                    child_results.append(result)
                    pending.update(
                        executor.submit(self._expand_directory, criteria.with_root(subdirectory))
                        for subdirectory in found
                    )

        return root_result.merge(*child_results)

    def _expand_directory(self, criteria: SearchCriteria, is_root: bool = False) -> Expansion:
        """List one directory and evaluate the files directly inside it.

        Args:
            criteria: Criteria rooted at the directory to expand.
            is_root: Whether this is the top-level directory of a search.

        Returns:
            Tuple of (matches in this directory only, its subdirectories).
            An unreadable non-root directory yields an empty result and no
            subdirectories.
        """
        directory = criteria.root_directory
        result = empty_result(criteria.detailed)
        subdirectories: List[Path] = []

        with self._gate:
            try:
                with os.scandir(directory) as iterator:
                    entries = list(iterator)
            except OSError as e:
                if is_root:
                    raise DirectoryUnreadableError(
                        f"Cannot read directory {directory}: {e}"
                    ) from e
                message = f"Skipping unreadable directory {directory}: {e}"
                logger.warning(message)
                self._record_error(message)
                return result, subdirectories

            for entry in entries:
                try:
                    is_directory = entry.is_dir(follow_symlinks=False)
                    is_linked_directory = not is_directory and entry.is_symlink() and entry.is_dir()
                except OSError as e:
                    logger.debug("Cannot inspect %s: %s", entry.path, e)
                    continue

                if is_directory:
                    subdirectories.append(directory / entry.name)
                elif is_linked_directory:
                    logger.debug("Not following directory link %s", entry.path)
                else:
                    self._evaluate_file(criteria, entry, result)

        return result, subdirectories

    def _evaluate_file(
        self,
        criteria: SearchCriteria,
        entry: os.DirEntry,
        result: SearchResult,
    ) -> None:
        """Add ``entry`` to ``result`` if it satisfies every filter.

        The type filter is checked first, then the name filter, then the
        size filter, so files rejected by name or type are never stat'ed.
        """
        if not is_allowed(criteria.file_type, entry.name):
            return

        if criteria.name_filter and criteria.name_filter.lower() not in entry.name.lower():
            return

        try:
            size = entry.stat().st_size
        except OSError as e:
            logger.debug("Cannot stat %s: %s", entry.path, e)
            return

        if criteria.size_filter is not None and not size_matches(
            criteria.operator, criteria.size_filter, criteria.tolerance, size
        ):
            return

        result.add(criteria.root_directory, criteria.root_directory / entry.name, size)

    def _record_error(self, message: str) -> None:
        with self._errors_lock:
            self._errors.append(message)

    def get_errors(self) -> List[str]:
        """Get list of subtree errors encountered during searches.

        Returns:
            List of error message strings.
        """
        with self._errors_lock:
            return self._errors.copy()

    def clear_errors(self) -> None:
        """Clear the list of accumulated errors."""
        with self._errors_lock:
            self._errors.clear()
