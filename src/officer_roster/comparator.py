"""
Token Comparator

Compares two roster tokens under one of six relational operators.

Rules:
    - If both sides parse as numbers, they compare numerically
      ("2" < "10", "10" == "10.0")
    - Otherwise they compare as text (exact equality, ordinal ordering)
    - KEY_NOT_FOUND on either side never satisfies any operator
"""

import operator
from enum import Enum
from typing import Callable, Dict, Union

from officer_roster.tokens import KEY_NOT_FOUND, parse_number, to_token


class Comparator(Enum):
    """
    Relational operators usable for filtering role dictionaries.

    Values are the conventional operator symbols, so a comparator can be
    spelled in configuration or on a command line.
    """

    EQUAL_TO = "=="
    NOT_EQUAL_TO = "!="
    GREATER_THAN = ">"
    LESS_THAN = "<"
    GREATER_THAN_OR_EQUAL_TO = ">="
    LESS_THAN_OR_EQUAL_TO = "<="


_OPERATIONS: Dict[Comparator, Callable] = {
    Comparator.EQUAL_TO: operator.eq,
    Comparator.NOT_EQUAL_TO: operator.ne,
    Comparator.GREATER_THAN: operator.gt,
    Comparator.LESS_THAN: operator.lt,
    Comparator.GREATER_THAN_OR_EQUAL_TO: operator.ge,
    Comparator.LESS_THAN_OR_EQUAL_TO: operator.le,
}


def compare(a, b, comparator: Union[Comparator, str]) -> bool:
    """
    Evaluate ``a <comparator> b``.

    Args:
        a: Stored token (usually the record's value)
        b: Comparison operand (str, bool, int or float)
        comparator: Comparator member or its symbol (e.g. ">=")

    Returns:
        True if the relation holds, False otherwise (including when
        either side is KEY_NOT_FOUND)
    """
    comparator = Comparator(comparator)
    left = to_token(a)
    right = to_token(b)
    if left is KEY_NOT_FOUND or right is KEY_NOT_FOUND:
        return False

    op = _OPERATIONS[comparator]

    left_num = parse_number(left)
    right_num = parse_number(right)
    if left_num is not None and right_num is not None:
        return op(left_num, right_num)

    return op(left, right)


__all__ = ["Comparator", "compare"]
