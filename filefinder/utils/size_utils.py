"""Human-readable size strings.

Sizes use 1024-based units: ``"1 KB"`` is 1024 bytes and ``"2 MB"`` is
2097152 bytes. Units are case-insensitive and the space between number and
unit is optional.
"""

import re
from typing import Optional

from filefinder.exceptions import SizeParseError

SIZE_PATTERN = re.compile(r"^(\d+(?:\.\d+)?|\.\d+)\s*([KMGT]?B?)$")

UNIT_MULTIPLIERS = {
    "B": 1,
    "KB": 1024,
    "MB": 1024 ** 2,
    "GB": 1024 ** 3,
    "TB": 1024 ** 4,
}


def parse_size(size_str: Optional[str]) -> Optional[int]:
    """Parse a size string like ``"2 MB"`` or ``"1.5GB"`` into bytes.

    Args:
        size_str: Size string. Empty or None means no size filter.

    Returns:
        Size in bytes, or None when ``size_str`` is empty.

    Raises:
        SizeParseError: If the string is not a number with an optional unit.
    """
    if size_str is None or not size_str.strip():
        return None

    match = SIZE_PATTERN.match(size_str.strip().upper())
    if not match:
        raise SizeParseError(f"invalid size format: {size_str}")

    number = float(match.group(1))
    unit = match.group(2) or "B"
    if len(unit) == 1 and unit in "KMGT":
        unit += "B"

    return int(number * UNIT_MULTIPLIERS[unit])


def format_size(size_bytes: int) -> str:
    """Convert bytes to human-readable format.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Human-readable size string (e.g., "512 B", "10.5 MB", "1.2 GB").
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 ** 2:
        return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024 ** 3:
        return f"{size_bytes / 1024 ** 2:.1f} MB"
    elif size_bytes < 1024 ** 4:
        return f"{size_bytes / 1024 ** 3:.1f} GB"
    else:
        return f"{size_bytes / 1024 ** 4:.1f} TB"
