"""
The public Kansuji value type, plus decode / encode helpers.

Flow:
    decode:  text → tokenize → accumulate → Kansuji
    encode:  int | float → resolver → Kansuji → format_number → text

Usage:
    value = Kansuji.decode("百二十三兆五百四十万二")
    value.to_int()                      # 123000005400002
    Kansuji.from_float(1.234).encode()  # "一二分三厘四毛"
"""

from __future__ import annotations

import logging
from typing import Union

from pydantic import BaseModel, ConfigDict, field_validator

from . import resolver
from .accumulator import accumulate
from .exceptions import KansujiError, OutOfRange
from .formatter import format_number
from .models import ParsedNumber
from .symbols import MAX_INTEGER
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class Kansuji(BaseModel):
    """An immutable number in the range 0 to 10**24 - 1 with up to three
    fractional places.

    Build one with ``decode``, ``from_int``, ``from_float`` or
    ``from_single``; it never changes afterwards. Two values are equal when
    their magnitudes are equal, however they were spelled.
    """

    model_config = ConfigDict(frozen=True)

    number: ParsedNumber

    @field_validator("number")
    @classmethod
    def _expressible(cls, number: ParsedNumber) -> ParsedNumber:
        if number.integer > MAX_INTEGER:
            raise OutOfRange(number.integer, f"larger than {MAX_INTEGER}")
        return number

    # ─── Construction ───────────────────────────────────────────────

    @classmethod
    def decode(cls, text: str) -> Kansuji:
        """Parse kansuji text.

        Raises:
            KansujiError: EmptyInput, InvalidCharacter, UnitOutOfOrder,
                DuplicateUnit, MalformedGroup or Overflow.
        """
        try:
            number = accumulate(tokenize(text))
        except KansujiError as e:
            logger.info("Rejected kansuji %r: [%s] %s", text, e.code, e)
            raise
        logger.debug("Decoded %r → %s", text, number)
        return cls(number=number)

    @classmethod
    def from_int(cls, value: int) -> Kansuji:
        """Raises OutOfRange for negatives and values above 10**24 - 1."""
        return cls(number=resolver.from_unsigned_integer(value))

    @classmethod
    def from_float(cls, value: float) -> Kansuji:
        """Raises OutOfRange for negative, non-finite or too-large values.

        The fraction is rounded to the nearest 毛 (0.001).
        """
        return cls(number=resolver.from_double(value))

    @classmethod
    def from_single(cls, value: float) -> Kansuji:
        """Like ``from_float`` after narrowing to single precision."""
        return cls(number=resolver.from_single(value))

    # ─── Conversion ─────────────────────────────────────────────────

    def to_int(self) -> int:
        """Raises NonIntegerConversion if there is a fractional part."""
        return resolver.to_unsigned_integer(self.number)

    def to_float(self) -> float:
        return resolver.to_double(self.number)

    def to_single(self) -> float:
        return resolver.to_single(self.number)

    def encode(self) -> str:
        text = format_number(self.number)
        logger.debug("Encoded %s → %r", self.number, text)
        return text

    @property
    def integer(self) -> int:
        return self.number.integer

    @property
    def fraction(self) -> float:
        return self.number.fraction

    @property
    def is_integer(self) -> bool:
        return self.number.is_integer

    def __str__(self) -> str:
        return self.encode()


Number = Union[Kansuji, int, float]


# ─── Module-level helpers ────────────────────────────────────────────


def decode(text: str) -> Kansuji:
    """Shorthand for ``Kansuji.decode``."""
    return Kansuji.decode(text)


def encode(value: Number) -> str:
    """Canonical kansuji for a Kansuji, an int or a float."""
    if isinstance(value, Kansuji):
        return value.encode()
    if isinstance(value, int) and not isinstance(value, bool):
        return Kansuji.from_int(value).encode()
    return Kansuji.from_float(value).encode()


def normalize(text: str) -> str:
    """Re-spell any accepted kansuji in canonical form (一千万 → 千万)."""
    return decode(text).encode()
