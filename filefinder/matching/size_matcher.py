"""Size filter predicate with a tolerance band.

The tolerance band around a target size is::

    lower = max(0, target * (1 - tolerance))
    upper = target * (1 + tolerance)

EQUAL_TO matches anything inside the inclusive band. The inequality operators
match when the comparison holds against either the nominal target or the
band edge on the side the operator cares about, so GREATER_THAN accepts
``actual > target or actual > lower`` and LESS_THAN accepts
``actual < target or actual < upper``.

Example:
    >>> from filefinder.matching import size_matches
    >>> from filefinder.models import OperatorType
    >>> size_matches(OperatorType.EQUAL_TO, 1000, 0.05, 1040)
    True
"""

from typing import Tuple

from filefinder.models import OperatorType


def tolerance_bounds(target_bytes: int, tolerance: float) -> Tuple[float, float]:
    """Compute the (lower, upper) tolerance band for a target size.

    Args:
        target_bytes: Target size in bytes.
        tolerance: Relative slack, e.g. 0.05 for 5%.

    Returns:
        Tuple of (lower, upper) bounds; lower is clamped to 0.
    """
    lower = max(0.0, target_bytes * (1 - tolerance))
    upper = target_bytes * (1 + tolerance)
    return lower, upper


def size_matches(
    operator: OperatorType,
    target_bytes: int,
    tolerance: float,
    actual_bytes: int,
) -> bool:
    """Check whether a file size satisfies the size filter.

    Args:
        operator: Relational operator to apply.
        target_bytes: Target size from the size filter.
        tolerance: Relative slack applied to the target.
        actual_bytes: Size of the file being evaluated.

    Returns:
        True if the file size matches. Unknown operators are treated as
        EQUAL_TO; this function never raises.
    """
    # Exact sizes compared as ints; the float band can round above 2**53
    if actual_bytes == target_bytes and operator not in (
        OperatorType.GREATER_THAN,
        OperatorType.LESS_THAN,
    ):
        return True

    lower, upper = tolerance_bounds(target_bytes, tolerance)

    if operator is OperatorType.GREATER_THAN:
        return actual_bytes > target_bytes or actual_bytes > lower
    if operator is OperatorType.GREATER_THAN_OR_EQUAL:
        return actual_bytes >= target_bytes or actual_bytes >= lower
    if operator is OperatorType.LESS_THAN:
        return actual_bytes < target_bytes or actual_bytes < upper
    if operator is OperatorType.LESS_THAN_OR_EQUAL:
        return actual_bytes <= target_bytes or actual_bytes <= upper

    return lower <= actual_bytes <= upper
