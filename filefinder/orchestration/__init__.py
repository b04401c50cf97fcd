"""Workflow orchestration package for File Finder.

This package contains orchestration components for running a find workflow:
- FinderLogger: Structured logging of a run to a plain-text log file.
- FinderOrchestrator: Central coordinator for search, display and deletion.
"""

from filefinder.orchestration.finder_logger import FinderLogger
from filefinder.orchestration.finder_orchestrator import FinderOrchestrator

__all__ = ["FinderLogger", "FinderOrchestrator"]
