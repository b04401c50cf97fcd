"""Terminal UI package for File Finder."""

from .finder_tui import FinderTUI

__all__ = ["FinderTUI"]
