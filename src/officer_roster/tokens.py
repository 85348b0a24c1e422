"""
Scalar token conversion for roster values.

Every roster value is stored as the raw text of its cell. Interpretation as
bool, int or float happens on read and never mutates storage.

This is the ONE place where:
    - literal parsing rules live
    - type defaults for failed lookups are defined
    - the "key not found" sentinel is defined
"""

import math
import re
from typing import Optional, Union


class KeyNotFound:
    """
    Sentinel returned when a record or role does not exist.

    There is exactly one instance, KEY_NOT_FOUND. It is falsy and is
    never equal to any stored value.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "KEY_NOT_FOUND"


KEY_NOT_FOUND = KeyNotFound()

# Returned by the typed accessors when a lookup or parse fails
TYPE_DEFAULTS = {
    str: "",
    bool: False,
    int: 0,
    float: 0.0,
}

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_FLOAT_RE = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?$")

Token = Union[str, KeyNotFound]


def parse_bool(text: str) -> Optional[bool]:
    """
    Parse a boolean literal.

    Accepts "true"/"false" in any case, ignoring surrounding whitespace.

    Returns:
        True/False, or None if the text is not a boolean literal
    """
    if not isinstance(text, str):
        return None
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def parse_int(text: str) -> Optional[int]:
    """Parse an integer literal, or None."""
    if not isinstance(text, str):
        return None
    stripped = text.strip()
    if not _INT_RE.match(stripped):
        return None
    return int(stripped)


def parse_float(text: str) -> Optional[float]:
    """Parse a finite floating-point literal, or None."""
    if not isinstance(text, str):
        return None
    stripped = text.strip()
    if not _FLOAT_RE.match(stripped):
        return None
    value = float(stripped)
    if not math.isfinite(value):
        return None
    return value


def parse_number(text: str) -> Optional[Union[int, float]]:
    """
    Numeric interpretation used for ordering and equality.

    Integer literals stay int so long IDs compare exactly; anything else
    numeric becomes float. Python compares int and float by exact value,
    so "10" == "10.0" and "2" sorts before "10".
    """
    value = parse_int(text)
    if value is not None:
        return value
    return parse_float(text)


def to_token(value: Union[str, bool, int, float, KeyNotFound, None]) -> Token:
    """
    Normalise a caller-supplied comparison operand to token text.

    bool becomes "True"/"False" (the form roster files use), numbers
    become their text, strings pass through. None maps to KEY_NOT_FOUND.
    """
    if value is None or value is KEY_NOT_FOUND:
        return KEY_NOT_FOUND
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, (int, float)):
        return repr(value) if isinstance(value, float) else str(value)
    return str(value)


__all__ = [
    "KEY_NOT_FOUND",
    "KeyNotFound",
    "TYPE_DEFAULTS",
    "Token",
    "parse_bool",
    "parse_int",
    "parse_float",
    "parse_number",
    "to_token",
]
