"""Token amount formatting.

Converts raw on-chain amounts (integer strings in the token's smallest unit)
into human-readable decimal strings. This is the single implementation used
for balances, transaction values and fees. Do not duplicate it.
"""
from __future__ import annotations

import dataclasses
import decimal
from dataclasses import dataclass
from decimal import Decimal

from .constants import DECIMALS, DIGITS, ZERO
from .errors import InvalidInputError
from .validation import is_non_negative_integer, string_is_integer


@dataclass(frozen=True)
class FormatAmountOptions:
    """Options for :func:`format_amount`.

    Attributes:
        input: Raw amount in the smallest unit, e.g. ``"1500000000000000000"``
            for 1.5 of an 18-decimals token. Optional leading ``-``.
        decimals: Number of smallest-unit digits in one whole unit
            (18 for EGLD/ETH, 6 for USDC).
        digits: Display precision. ``None`` means no precision was requested:
            truncation and the sub-precision check use ``DIGITS`` but the
            fraction is not padded to a minimum width. Passing ``digits=4``
            explicitly pads (``"1.1000"``) where the default does not
            (``"1.1"``).
        add_commas: Group the integer part with thousands separators.
        show_is_less_than_decimals_label: Render ``<0.0001`` instead of an
            all-zero fraction for amounts below the displayed precision.
        show_last_non_zero_decimal: ``True`` shows every significant decimal
            (padded to ``digits`` when shorter). ``False`` truncates or pads
            to exactly ``digits`` decimals.
    """
    input: str
    decimals: int = DECIMALS
    digits: int | None = None
    add_commas: bool = False
    show_is_less_than_decimals_label: bool = False
    show_last_non_zero_decimal: bool = True


def format_amount(input: str | FormatAmountOptions, **options) -> str:
    """Format a smallest-unit integer amount as a display string.

    Accepts either a :class:`FormatAmountOptions` or the raw ``input`` plus
    the same fields as keyword arguments.

    Rules:
    1. Zero (including ``-0``) is always ``"0"``
    2. Whole amounts have no decimal point: ``"1000000000000000000"`` -> ``"1"``
    3. Fractions are truncated toward zero, never rounded up
    4. Amounts whose first ``digits`` decimals are all zero render as
       ``X.0000``, ``<0.0001``, ``0.0000`` or the full fraction, depending
       on the options
    5. Thousands separators only touch the integer part
    6. The minus sign is applied to the final string

    Raises:
        InvalidInputError: If ``input`` is not an integer literal, or
            ``decimals``/``digits`` is negative.

    Example::

        format_amount("1500000000000000000")  # "1.5"
        format_amount("1123456789000000000", digits=4,
                      show_last_non_zero_decimal=False)  # "1.1234"
        format_amount("1", digits=4, show_is_less_than_decimals_label=True)  # "<0.0001"
    """
    if isinstance(input, FormatAmountOptions):
        opts = dataclasses.replace(input, **options)
    else:
        opts = FormatAmountOptions(input, **options)

    if not string_is_integer(opts.input, positive_numbers_only=False):
        raise InvalidInputError()
    if not is_non_negative_integer(opts.decimals):
        raise InvalidInputError("decimals must be a non-negative integer")
    digits = DIGITS if opts.digits is None else opts.digits
    if not is_non_negative_integer(digits):
        raise InvalidInputError("digits must be a non-negative integer")

    is_negative = opts.input.startswith("-")
    magnitude = opts.input[1:] if is_negative else opts.input

    value = _shift_left(magnitude, opts.decimals)
    if value.is_zero():
        return ZERO

    integer_part, _, decimal_part = format(value, "f").partition(".")
    grouped = _group(integer_part) if opts.add_commas else integer_part

    if not decimal_part.strip("0"):
        return f"-{grouped}" if is_negative else grouped

    shown = decimal_part[:digits]
    below_precision = 1 <= digits <= len(decimal_part) and not shown.strip("0")
    significant = decimal_part.rstrip("0")

    if below_precision:
        if integer_part.strip("0"):
            formatted = f"{grouped}.{'0' * digits}"
        elif opts.show_is_less_than_decimals_label:
            formatted = f"<0.{'0' * (digits - 1)}1"
        elif not opts.show_last_non_zero_decimal:
            formatted = f"0.{'0' * digits}"
        else:
            formatted = f"0.{significant.ljust(digits, '0')}"
    elif opts.show_last_non_zero_decimal:
        min_width = 0 if opts.digits is None else digits
        formatted = f"{grouped}.{significant.ljust(min_width, '0')}"
    else:
        fraction = shown.ljust(digits, "0")
        formatted = f"{grouped}.{fraction}" if fraction else grouped

    return f"-{formatted}" if is_negative else formatted


def _shift_left(magnitude: str, places: int) -> Decimal:
    """Move the decimal point of ``magnitude`` ``places`` digits to the left.

    Runs in a private context sized to the input so the shift is exact; any
    rounding would trap instead of silently losing digits.
    """
    with decimal.localcontext() as ctx:
        ctx.prec = len(magnitude)
        ctx.Emax = decimal.MAX_EMAX
        ctx.Emin = decimal.MIN_EMIN
        ctx.traps[decimal.Inexact] = True
        ctx.traps[decimal.Rounded] = True
        return Decimal(magnitude).scaleb(-places)


def _group(integer_part: str) -> str:
    """Insert thousands separators: ``"1234567"`` -> ``"1,234,567"``."""
    return format(Decimal(integer_part), ",f")
