"""Convert human-readable amounts back to smallest-unit integer strings."""
from __future__ import annotations

import decimal
from decimal import ROUND_HALF_UP, Decimal

from .constants import DECIMALS, ZERO
from .errors import InvalidInputError
from .validation import is_non_negative_integer, string_is_float


def parse_amount(amount: str, num_decimals: int = DECIMALS) -> str:
    """Convert a decimal amount such as ``"1.5"`` to its smallest-unit integer.

    Digits beyond ``num_decimals`` are rounded half away from zero. The
    result is always plain integer notation, never ``1e+21``.

    Raises:
        InvalidInputError: If ``amount`` is not a plain decimal literal or
            ``num_decimals`` is negative.
    """
    if not string_is_float(amount):
        raise InvalidInputError()
    if not is_non_negative_integer(num_decimals):
        raise InvalidInputError("num_decimals must be a non-negative integer")

    with decimal.localcontext() as ctx:
        ctx.prec = len(amount) + 1
        ctx.Emax = decimal.MAX_EMAX
        ctx.Emin = decimal.MIN_EMIN
        atomic = Decimal(amount).scaleb(num_decimals).to_integral_value(
            rounding=ROUND_HALF_UP
        )

    if atomic.is_zero():
        return ZERO
    return format(atomic, "f")
