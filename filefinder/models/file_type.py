"""
FileType enum and the fixed extension sets used by the type filter.

The type filter recognises five categories:
1. Any - every file matches, regardless of extension
2. Video - common video container extensions
3. Image - common raster and vector image extensions
4. Archive - compressed archives and disk images
5. Documents - office documents, text and spreadsheets
"""

from enum import Enum
from typing import Dict, FrozenSet

from filefinder.exceptions import InvalidFilterValueError


class FileType(Enum):
    """File categories accepted by the type filter."""
    ANY = "any"                # Wildcard: every extension allowed
    VIDEO = "video"
    IMAGE = "image"
    ARCHIVE = "archive"
    DOCUMENTS = "documents"

    @property
    def label(self) -> str:
        """Display name used in help text and logs (e.g. ``Video``)."""
        return self.value.capitalize()

    @classmethod
    def from_string(cls, value: str) -> "FileType":
        """Parse a configuration string into a FileType.

        Matching is case-insensitive and ignores surrounding whitespace.

        Args:
            value: String such as ``"Any"``, ``"video"`` or ``"DOCUMENTS"``.

        Returns:
            The matching FileType member.

        Raises:
            InvalidFilterValueError: If the string names no known file type.
        """
        normalized = (value or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise InvalidFilterValueError(f"invalid file type: {value}")


FILE_EXTENSIONS: Dict[FileType, FrozenSet[str]] = {
    FileType.VIDEO: frozenset({
        ".mp4", ".avi", ".mkv", ".mov", ".wmv", ".flv", ".webm", ".m4v",
        ".mpg", ".mpeg", ".ts",
    }),
    FileType.IMAGE: frozenset({
        ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".webp", ".svg",
        ".raw", ".heic", ".ico",
    }),
    FileType.ARCHIVE: frozenset({
        ".zip", ".rar", ".7z", ".tar", ".gz", ".bz2", ".xz", ".iso", ".tgz",
        ".tbz2",
    }),
    FileType.DOCUMENTS: frozenset({
        ".docx", ".doc", ".pdf", ".txt", ".rtf", ".odt", ".xlsx", ".xls",
        ".pptx", ".ppt", ".csv", ".md", ".pages",
    }),
}
