"""
OperatorType enum for the file size filter.

Each operator accepts several spellings on the command line and in the
environment, e.g. ``gt``, ``greater than`` and ``>`` all select GREATER_THAN.
"""

from enum import Enum
from typing import Dict

from filefinder.exceptions import InvalidFilterValueError


class OperatorType(Enum):
    """Relational operators applied to the file size filter."""
    EQUAL_TO = "equal to"
    GREATER_THAN = "greater than"
    GREATER_THAN_OR_EQUAL = "greater than or equal to"
    LESS_THAN = "less than"
    LESS_THAN_OR_EQUAL = "less than or equal to"

    @classmethod
    def from_string(cls, value: str) -> "OperatorType":
        """Parse an operator alias into an OperatorType.

        Args:
            value: Alias such as ``"et"``, ``"Greater Than"`` or ``"<="``.

        Returns:
            The matching OperatorType member.

        Raises:
            InvalidFilterValueError: If the alias is not recognised.
        """
        normalized = (value or "").strip().lower()
        try:
            return OPERATOR_ALIASES[normalized]
        except KeyError:
            raise InvalidFilterValueError(f"invalid operator type: {value}") from None


OPERATOR_ALIASES: Dict[str, OperatorType] = {
    # EqualTo
    "et": OperatorType.EQUAL_TO,
    "equal to": OperatorType.EQUAL_TO,
    "equalto": OperatorType.EQUAL_TO,
    "equal": OperatorType.EQUAL_TO,
    "==": OperatorType.EQUAL_TO,
    # GreaterThan
    "gt": OperatorType.GREATER_THAN,
    "greater": OperatorType.GREATER_THAN,
    "greater than": OperatorType.GREATER_THAN,
    "greaterthan": OperatorType.GREATER_THAN,
    ">": OperatorType.GREATER_THAN,
    # GreaterThanOrEqual
    "gte": OperatorType.GREATER_THAN_OR_EQUAL,
    "greater than or equal to": OperatorType.GREATER_THAN_OR_EQUAL,
    "greaterthanorequalto": OperatorType.GREATER_THAN_OR_EQUAL,
    "greaterthanequalto": OperatorType.GREATER_THAN_OR_EQUAL,
    ">=": OperatorType.GREATER_THAN_OR_EQUAL,
    # LessThan
    "lt": OperatorType.LESS_THAN,
    "less": OperatorType.LESS_THAN,
    "less than": OperatorType.LESS_THAN,
    "lessthan": OperatorType.LESS_THAN,
    "<": OperatorType.LESS_THAN,
    # LessThanOrEqual
    "lte": OperatorType.LESS_THAN_OR_EQUAL,
    "less than or equal to": OperatorType.LESS_THAN_OR_EQUAL,
    "lessthanorequalto": OperatorType.LESS_THAN_OR_EQUAL,
    "lessthanequalto": OperatorType.LESS_THAN_OR_EQUAL,
    "<=": OperatorType.LESS_THAN_OR_EQUAL,
}
