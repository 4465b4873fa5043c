"""Literal validators for amount strings."""
from __future__ import annotations

import re

_INTEGER_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"-?(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)")


def string_is_integer(value: str, positive_numbers_only: bool = True) -> bool:
    """Return True if ``value`` is a plain base-10 integer literal.

    Accepts an optional leading ``-`` followed by one or more digits. No
    decimal point, exponent, whitespace or thousands separators.

    With ``positive_numbers_only`` a negative value is rejected; ``-0`` is
    zero, not negative, and passes.
    """
    if not isinstance(value, str) or not _INTEGER_RE.fullmatch(value):
        return False
    if positive_numbers_only and value.startswith("-"):
        return value.lstrip("-").strip("0") == ""
    return True


def string_is_float(value: str) -> bool:
    """Return True if ``value`` is a plain decimal literal such as ``1.25``."""
    return isinstance(value, str) and _FLOAT_RE.fullmatch(value) is not None


def is_non_negative_integer(value: object) -> bool:
    """Return True for ``int`` values >= 0 (``bool`` excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0
