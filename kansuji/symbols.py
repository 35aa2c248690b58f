"""
Symbol table: every character the notation knows, and what it means.

Supported range is 垓 (10^20) down to 毛 (10^-3). Large units group the
integer part by powers of 10,000; 十/百/千 multiply inside one such group;
分/厘/毛 are the three fractional places.

The table is built once at import time and never mutated, so it can be
shared freely between threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

# ─── Limits ──────────────────────────────────────────────────────────

U128_MAX: Final[int] = 2**128 - 1

# Largest magnitude expressible with groups up to 垓: 九千九百九十九垓...九
MAX_INTEGER: Final[int] = 10**24 - 1

GROUP_BASE: Final[int] = 10_000

FRACTION_LEVELS: Final[int] = 3

ZERO_CHAR: Final[str] = "零"

# Index is the digit value; index 0 is never emitted inside a group.
DIGIT_CHARS: Final[str] = "〇一二三四五六七八九"


# ─── Units ───────────────────────────────────────────────────────────


class TokenKind(str, Enum):
    """Classification of a single numeral character."""

    ZERO = "ZERO"
    DIGIT = "DIGIT"  # 一..九
    INTRA_UNIT = "INTRA_UNIT"  # 十 百 千
    LARGE_UNIT = "LARGE_UNIT"  # 万 億 兆 京 垓
    SMALL_UNIT = "SMALL_UNIT"  # 分 厘 毛


class _Unit(Enum):
    """A unit member whose value is ``(exponent, char)``."""

    @property
    def exponent(self) -> int:
        return self.value[0]

    @property
    def char(self) -> str:
        return self.value[1]


class LargeUnit(_Unit):
    """Power-of-10,000 grouping levels, highest first."""

    GAI = (20, "垓")
    KEI = (16, "京")
    CHOU = (12, "兆")
    OKU = (8, "億")
    MAN = (4, "万")
    ONE = (0, "")  # implicit, never written


class IntraUnit(_Unit):
    """Multipliers inside one 10^4 group, highest first."""

    SEN = (3, "千")
    HYAKU = (2, "百")
    JUU = (1, "十")


class SmallUnit(_Unit):
    """Fractional places, highest first."""

    BU = (-1, "分")
    RIN = (-2, "厘")
    MOU = (-3, "毛")


# ─── Lookup Table ────────────────────────────────────────────────────


@dataclass(frozen=True)
class Symbol:
    """What one character means: a digit value or a unit exponent."""

    kind: TokenKind
    value: int


def _build_table() -> Mapping[str, Symbol]:
    table: dict[str, Symbol] = {
        ZERO_CHAR: Symbol(TokenKind.ZERO, 0),
        "〇": Symbol(TokenKind.ZERO, 0),
    }
    for value, char in enumerate(DIGIT_CHARS[1:], start=1):
        table[char] = Symbol(TokenKind.DIGIT, value)
    for unit in IntraUnit:
        table[unit.char] = Symbol(TokenKind.INTRA_UNIT, unit.exponent)
    for unit in LargeUnit:
        if unit.char:
            table[unit.char] = Symbol(TokenKind.LARGE_UNIT, unit.exponent)
    for unit in SmallUnit:
        table[unit.char] = Symbol(TokenKind.SMALL_UNIT, unit.exponent)
    return MappingProxyType(table)


SYMBOLS: Final[Mapping[str, Symbol]] = _build_table()


def classify(char: str) -> Symbol | None:
    """Return the meaning of ``char``, or None if it is not a numeral symbol."""
    return SYMBOLS.get(char)
