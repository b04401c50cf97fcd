"""File operations package for File Finder.

This package provides the DeletionPlanner class for removing matched files
and pruning the directories they leave empty.

Example:
    >>> from filefinder.operations import DeletionPlanner
    >>> planner = DeletionPlanner(confirm=lambda count: True)
    >>> result = planner.delete(search_result)
    >>> print(f"Deleted: {result.files_deleted}, Directories: {result.directories_deleted}")
"""

from .deletion_planner import DeletionPlanner

__all__ = ["DeletionPlanner"]
