"""Type filter membership based on file extensions."""

import os
from pathlib import Path
from typing import Union

from filefinder.models import FILE_EXTENSIONS, FileType


def get_extension(path: Union[str, Path]) -> str:
    """Return the lower-cased extension of ``path`` including the dot.

    The extension runs from the last dot of the file name, so a file named
    ``.mp4`` has extension ``.mp4``. Names without a dot yield ``""``.
    """
    name = os.path.basename(os.fspath(path))
    dot = name.rfind(".")
    if dot == -1:
        return ""
    return name[dot:].lower()


def is_allowed(file_type: FileType, path: Union[str, Path]) -> bool:
    """Check whether ``path`` belongs to the ``file_type`` category.

    FileType.ANY allows every path, including ones without an extension.
    Unknown extensions never match a specific category.
    """
    if file_type is FileType.ANY:
        return True
    return get_extension(path) in FILE_EXTENSIONS.get(file_type, frozenset())
