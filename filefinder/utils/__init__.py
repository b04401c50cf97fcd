"""Utility helpers for File Finder."""

from .size_utils import format_size, parse_size

__all__ = ["format_size", "parse_size"]
