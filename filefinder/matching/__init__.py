"""File matching package for File Finder.

This package contains the pure predicates applied to every file during a
search:

- size_matches: size filter with operator and tolerance band
- is_allowed: type filter based on the file extension

Example:
    >>> from filefinder.matching import is_allowed, size_matches
    >>> from filefinder.models import FileType, OperatorType
    >>> is_allowed(FileType.VIDEO, "holiday.MP4")
    True
    >>> size_matches(OperatorType.LESS_THAN, 100, 0.0, 99)
    True
"""

from .extension_classifier import get_extension, is_allowed
from .size_matcher import size_matches, tolerance_bounds

__all__ = [
    "get_extension",
    "is_allowed",
    "size_matches",
    "tolerance_bounds",
]
