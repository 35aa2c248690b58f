"""
Grammar validation and accumulation: tokens in, ParsedNumber out.

Grammar:
    numeral         := zero-symbol fractional-part? | integer-part fractional-part?
    integer-part    := group (large-unit group)*
    group           := (digit intra-unit?)+
    fractional-part := (digit small-unit)+

Supported patterns:
    "百二十三兆五百四十万二"  → 123000005400002
    "千万"                    → 10000000   (one elided before 千)
    "一二分三厘四毛"          → 1.234
    "零五分"                  → 0.5

A leading zero symbol may carry a fractional part (零五分). The formatter
writes zero-integer fractions that way; the bare form 五分 is also accepted.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from .exceptions import DuplicateUnit, EmptyInput, MalformedGroup, Overflow, UnitOutOfOrder
from .models import NumeralToken, ParsedNumber
from .symbols import U128_MAX, TokenKind

# "Last exponent seen" before any unit of a level has appeared
_LARGE_START = 24
_INTRA_START = 4
_SMALL_START = 0


# ─── Main Accumulator ────────────────────────────────────────────────


def accumulate(tokens: Sequence[NumeralToken]) -> ParsedNumber:
    """Fold a token sequence into a ParsedNumber.

    Raises:
        EmptyInput: If there are no tokens.
        UnitOutOfOrder: If any unit exponent increases within its level.
        DuplicateUnit: If any unit exponent repeats within its level.
        MalformedGroup: If a digit and unit are not paired as the grammar requires.
        Overflow: If the integer magnitude exceeds the 128-bit unsigned range.

    Algorithm:
        The integer region runs up to the digit that precedes the first small
        unit; everything from there on is the fractional region.

        The integer region is one pass over explicit state:
        - `last_large`: exponent of the last 万/億/兆/京/垓 seen
        - `last_intra`: exponent of the last 十/百/千 seen in the current group
        - `pending`:    a digit waiting for its unit (or for the group's end)

        A large unit flushes the current group (an empty group counts as 1),
        multiplied by its power of ten, into `total`.
    """
    if not tokens:
        raise EmptyInput()

    if tokens[0].kind is TokenKind.ZERO:
        return ParsedNumber(integer=0, fraction=_accumulate_fraction(tokens[1:]))

    split = _fraction_start(tokens)
    return ParsedNumber(
        integer=_accumulate_integer(tokens[:split]),
        fraction=_accumulate_fraction(tokens[split:]),
    )


def _fraction_start(tokens: Sequence[NumeralToken]) -> int:
    for index, token in enumerate(tokens):
        if token.kind is TokenKind.SMALL_UNIT:
            if index > 0 and tokens[index - 1].kind is TokenKind.DIGIT:
                return index - 1
            return index
    return len(tokens)


# ─── Integer Region ──────────────────────────────────────────────────


def _accumulate_integer(tokens: Sequence[NumeralToken]) -> int:
    total = 0
    last_large = _LARGE_START

    group = 0
    group_open = False
    last_intra = _INTRA_START
    pending: NumeralToken | None = None

    for token in tokens:
        if token.kind is TokenKind.DIGIT:
            if pending is not None:
                raise MalformedGroup(token.position, token.char, "Digit follows a digit")
            pending = token
            group_open = True

        elif token.kind is TokenKind.INTRA_UNIT:
            _check_descending(token, last_intra)
            digit = pending.value if pending is not None else 1
            group += digit * 10**token.value
            last_intra = token.value
            pending = None
            group_open = True

        elif token.kind is TokenKind.LARGE_UNIT:
            _check_descending(token, last_large)
            if pending is not None:
                group += pending.value
            if not group_open:
                group = 1
            total = _checked(total + _checked(group * 10**token.value))
            last_large = token.value
            group, group_open, last_intra, pending = 0, False, _INTRA_START, None

        elif token.kind is TokenKind.ZERO:
            raise MalformedGroup(token.position, token.char, "Zero symbol inside a numeral")

        else:
            raise UnitOutOfOrder(token.position, token.char)

    if pending is not None:
        group += pending.value
    return _checked(total + group)


# Unreachable from text: the largest spellable value is 10**24 - 1.
def _checked(value: int) -> int:
    if value > U128_MAX:
        raise Overflow(U128_MAX)
    return value


# ─── Fractional Region ───────────────────────────────────────────────


def _accumulate_fraction(tokens: Sequence[NumeralToken]) -> float:
    fraction = Decimal(0)
    last_small = _SMALL_START
    pending: NumeralToken | None = None

    for token in tokens:
        if token.kind is TokenKind.DIGIT:
            if pending is not None:
                raise MalformedGroup(token.position, token.char, "Digit follows a digit")
            pending = token

        elif token.kind is TokenKind.SMALL_UNIT:
            if pending is None:
                raise MalformedGroup(
                    token.position, token.char, "Fractional unit needs a digit"
                )
            _check_descending(token, last_small)
            fraction += Decimal(pending.value).scaleb(token.value)
            last_small = token.value
            pending = None

        elif token.kind is TokenKind.ZERO:
            raise MalformedGroup(token.position, token.char, "Zero symbol inside a numeral")

        else:
            raise UnitOutOfOrder(token.position, token.char)

    if pending is not None:
        raise MalformedGroup(
            pending.position, pending.char, "Digit after the fractional part"
        )
    return float(fraction)


# ─── Ordering ────────────────────────────────────────────────────────


def _check_descending(token: NumeralToken, last_exponent: int) -> None:
    """Units of one level must appear in strictly decreasing exponent order."""
    if token.value == last_exponent:
        raise DuplicateUnit(token.position, token.char)
    if token.value > last_exponent:
        raise UnitOutOfOrder(token.position, token.char)
