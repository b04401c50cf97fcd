"""
Deletion of matched files for File Finder.

This module contains the DeletionPlanner class, which removes matched files
and then prunes directories that were left empty by those removals.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set, Union

from filefinder.models import DeletionResult, DetailedEntry, DetailedResult, GroupedResult

logger = logging.getLogger(__name__)

DeletionInput = Union[GroupedResult, DetailedResult, Iterable[Union[DetailedEntry, Path, str]]]


class DeletionPlanner:
    """
    Deletes matched files, then removes the directories they leave empty.

    The run goes through these steps in order: confirm, delete files, collect
    touched directories, sort them deepest first, prune the empty ones. Both
    deletion steps are best effort: a failure is recorded on the result and
    the batch continues.

    A directory is only removed when it is observed empty at the moment it
    is checked, so files outside the matched set always keep their
    directories alive.
    """

    def __init__(self, confirm: Optional[Callable[[int], bool]] = None) -> None:
        """
        Create a DeletionPlanner.

        Parameters:
            confirm (Callable[[int], bool] | None): Called with the number of files about to be
                deleted; returning False cancels the run. When None, deletion proceeds without asking.
        """
        self.confirm = confirm

    def delete(self, matches: DeletionInput) -> DeletionResult:
        """
        Delete every matched file and prune directories left empty.

        Parameters:
            matches: A GroupedResult, a DetailedResult, or an iterable of DetailedEntry records or paths.

        Returns:
            DeletionResult: Counts of deleted files and directories, error messages for items that
                could not be removed, and whether the run was cancelled at confirmation.
        """
        result = DeletionResult()
        files = self._resolve_files(matches)

        if not files:
            return result

        if self.confirm is not None and not self.confirm(len(files)):
            logger.info("Deletion cancelled.")
            result.cancelled = True
            return result

        deleted = self._delete_files(files, result)
        candidates = self.sort_deepest_first(self.collect_touched_directories(deleted))
        self._prune_empty(candidates, result)

        logger.info(
            f"Deleted {result.files_deleted} files and {result.directories_deleted} directories."
        )
        return result

    @staticmethod
    def collect_touched_directories(files: Iterable[Path]) -> Set[Path]:
        """
        Collect the directories of ``files`` and all of their ancestors.

        Paths are made absolute first. The filesystem root itself is never included.

        Parameters:
            files (Iterable[Path]): Deleted file paths.

        Returns:
            Set[Path]: Deduplicated candidate directories for pruning.
        """
        directories: Set[Path] = set()
        for file_path in files:
            directory = Path(os.path.abspath(file_path)).parent
            while directory != directory.parent and directory not in directories:
                directories.add(directory)
                directory = directory.parent
        return directories

    @staticmethod
    def sort_deepest_first(directories: Iterable[Path]) -> List[Path]:
        """
        Order directories so that children always come before their parents.

        Sorts by number of path components, then by path length, both descending.
        """
        return sorted(
            directories,
            key=lambda directory: (len(directory.parts), len(str(directory)), str(directory)),
            reverse=True,
        )

    @staticmethod
    def _resolve_files(matches: DeletionInput) -> List[Path]:
        if isinstance(matches, (GroupedResult, DetailedResult)):
            return matches.file_paths()

        files: List[Path] = []
        for item in matches:
            if isinstance(item, DetailedEntry):
                files.append(item.path)
            else:
                files.append(Path(item))
        return files

    def _delete_files(self, files: List[Path], result: DeletionResult) -> List[Path]:
        """
        Remove each file, recording failures without stopping the batch.

        Returns:
            List[Path]: Files that were actually removed.
        """
        deleted: List[Path] = []
        for file_path in files:
            try:
                file_path.unlink()
            except OSError as e:
                error_msg = f"Error deleting {file_path}: {e}"
                logger.warning(error_msg)
                result.errors.append(error_msg)
                continue

            deleted.append(file_path)
            result.files_deleted += 1
            logger.debug(f"Deleted file: {file_path}")
        return deleted

    def _prune_empty(self, directories: List[Path], result: DeletionResult) -> None:
        """
        Remove each directory in ``directories`` that is currently empty.

        Directories that no longer exist are skipped silently. Any other failure is recorded and
        pruning continues with the next candidate.
        """
        for directory in directories:
            try:
                with os.scandir(directory) as iterator:
                    is_empty = next(iterator, None) is None
            except FileNotFoundError:
                continue
            except OSError as e:
                error_msg = f"Error checking if directory is empty {directory}: {e}"
                logger.warning(error_msg)
                result.errors.append(error_msg)
                continue

            if not is_empty:
                continue

            try:
                directory.rmdir()
            except FileNotFoundError:
                continue
            except OSError as e:
                error_msg = f"Error deleting directory {directory}: {e}"
                logger.warning(error_msg)
                result.errors.append(error_msg)
                continue

            result.directories_deleted += 1
            logger.debug(f"Removed empty directory: {directory}")
