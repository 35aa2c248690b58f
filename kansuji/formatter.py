"""
Render a ParsedNumber as canonical kansuji.

Canonical form:
    - zero groups are omitted together with their large unit
    - the digit 一 is elided before 千, 百 and 十 (千万, not 一千万)
    - zero fractional places are omitted
    - an integer part of zero is written 零 (零五分 for 0.5)

    123000005400002 → "百二十三兆五百四十万二"
    10000           → "一万"
    1.234           → "一二分三厘四毛"
"""

from __future__ import annotations

from .exceptions import Overflow
from .models import ParsedNumber
from .symbols import (
    DIGIT_CHARS,
    GROUP_BASE,
    MAX_INTEGER,
    ZERO_CHAR,
    IntraUnit,
    LargeUnit,
    SmallUnit,
)


def format_number(number: ParsedNumber) -> str:
    """Return the canonical kansuji string for ``number``.

    Raises:
        Overflow: If the integer part needs a unit above 垓. This cannot happen
            for values built through the resolver.
    """
    if number.integer > MAX_INTEGER:
        raise Overflow(MAX_INTEGER)
    return _format_integer(number.integer) + _format_fraction(number.fraction_digits)


def _format_integer(integer: int) -> str:
    if integer == 0:
        return ZERO_CHAR

    parts: list[str] = []
    for unit in LargeUnit:
        group = (integer // 10**unit.exponent) % GROUP_BASE
        if group:
            parts.append(format_group(group))
            parts.append(unit.char)
    return "".join(parts)


def format_group(value: int) -> str:
    """Render 1-9999 with 千/百/十, eliding 一 before each of them."""
    parts: list[str] = []
    for unit in IntraUnit:
        digit = (value // 10**unit.exponent) % 10
        if digit > 1:
            parts.append(DIGIT_CHARS[digit])
        if digit:
            parts.append(unit.char)
    ones = value % 10
    if ones:
        parts.append(DIGIT_CHARS[ones])
    return "".join(parts)


def _format_fraction(digits: tuple[int, ...]) -> str:
    return "".join(
        DIGIT_CHARS[digit] + unit.char
        for unit, digit in zip(SmallUnit, digits)
        if digit
    )
