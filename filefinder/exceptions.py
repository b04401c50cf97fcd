"""
Exception types raised by File Finder.

Fatal errors abort a run before or during the search. Per-item deletion
failures are not raised; they are collected on DeletionResult.errors.
"""


class FileFinderError(Exception):
    """Base class for all File Finder errors."""


class DirectoryUnreadableError(FileFinderError, OSError):
    """The search root could not be listed (missing, not a directory, or denied)."""


class SizeParseError(FileFinderError, ValueError):
    """A size filter string could not be converted to bytes."""


class InvalidFilterValueError(FileFinderError, ValueError):
    """A file type or operator string is not recognised."""
