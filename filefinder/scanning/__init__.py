"""File scanning package for File Finder.

This package provides the search side of File Finder. It contains two main
classes:

- TraversalEngine: Recursively and concurrently walks a directory tree and
  returns the files matching a SearchCriteria.
- ResultAggregator: Turns grouped results into per-directory counts.

Example:
    >>> from filefinder.models import SearchCriteria
    >>> from filefinder.scanning import ResultAggregator, TraversalEngine
    >>> from pathlib import Path
    >>>
    >>> engine = TraversalEngine()
    >>> result = engine.search(SearchCriteria(Path("/data")))
    >>> for summary in ResultAggregator.sorted_summaries(result):
    ...     print(f"{summary.directory}: {summary.count}")
"""

from .result_aggregator import ResultAggregator
from .traversal_engine import TraversalEngine

__all__ = ["ResultAggregator", "TraversalEngine"]
