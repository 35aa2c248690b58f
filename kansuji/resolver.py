"""
Conversions between ParsedNumber and Python numbers.

Each target type has its own named function with its own failure modes;
nothing here guesses.  Floats are read through their shortest decimal
representation (``Decimal(str(value))``) so that 1.234 means 1.234, not
1.23399999999999998578915.
"""

from __future__ import annotations

import math
import struct
from decimal import ROUND_HALF_EVEN, Decimal

from .exceptions import NonIntegerConversion, OutOfRange
from .models import ParsedNumber
from .symbols import MAX_INTEGER

_THOUSANDTH = Decimal("0.001")

# At and above 2**53 every double is a whole number
_EXACT_INTEGER_LIMIT = 2**53


# ─── ParsedNumber → number ──────────────────────────────────────────


def to_unsigned_integer(number: ParsedNumber) -> int:
    """Return the integer magnitude.

    Raises:
        NonIntegerConversion: If the value has a nonzero fractional part.
    """
    if not number.is_integer:
        raise NonIntegerConversion(number.fraction)
    return number.integer


def to_double(number: ParsedNumber) -> float:
    """Integer and fraction as a double; rounds normally beyond 2**53."""
    return float(number.integer) + number.fraction


def to_single(number: ParsedNumber) -> float:
    """The double value narrowed to IEEE-754 single precision."""
    return _narrow_to_single(to_double(number))


# ─── number → ParsedNumber ──────────────────────────────────────────


def from_unsigned_integer(value: int) -> ParsedNumber:
    """Build a ParsedNumber with an exactly zero fraction.

    Raises:
        OutOfRange: If ``value`` is not an int, is negative, or is larger than
            the notation can express (10**24 - 1).
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise OutOfRange(value, "not an integer")
    if value < 0:
        raise OutOfRange(value, "negative")
    if value > MAX_INTEGER:
        raise OutOfRange(value, f"larger than {MAX_INTEGER}")
    return ParsedNumber(integer=value)


def from_double(value: float) -> ParsedNumber:
    """Build a ParsedNumber, quantizing the fraction to the nearest 10^-3.

    Digits finer than 毛 (10^-3) are lost, ties round half-even. A fraction
    that rounds up to a whole unit carries into the integer part.

    Raises:
        OutOfRange: If ``value`` is negative, non-finite, or its integer part
            is larger than the notation can express.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise OutOfRange(value, "not a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise OutOfRange(value, "not finite")
    if value < 0:
        raise OutOfRange(value, "negative")
    if value > MAX_INTEGER:
        raise OutOfRange(value, f"larger than {MAX_INTEGER}")

    # The integer part is taken exactly; only the remainder is quantized.
    integer = int(value)
    thousandths = 0
    if value < _EXACT_INTEGER_LIMIT:
        remainder = Decimal(str(value)) - integer
        thousandths = int(remainder.quantize(_THOUSANDTH, rounding=ROUND_HALF_EVEN) * 1000)
    if thousandths == 1000:
        integer, thousandths = integer + 1, 0
    if integer > MAX_INTEGER:
        raise OutOfRange(value, f"larger than {MAX_INTEGER}")
    return ParsedNumber(integer=integer, fraction=thousandths / 1000)


def from_single(value: float) -> ParsedNumber:
    """Like from_double, after narrowing ``value`` to single precision."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise OutOfRange(value, "not a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise OutOfRange(value, "not finite")
    try:
        narrowed = _narrow_to_single(value)
    except OverflowError:
        raise OutOfRange(value, "outside single precision range") from None
    return from_double(narrowed)


def _narrow_to_single(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]
