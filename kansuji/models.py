"""
Typed values that flow between the tokenizer, accumulator and formatter.

ParsedNumber is a frozen pydantic model: if a value does not fit the
supported range it fails loudly at construction, not later in formatting.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .symbols import FRACTION_LEVELS, U128_MAX, TokenKind


# ─── Tokens ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class NumeralToken:
    """One classified character of the input.

    ``value`` is the digit (0-9) for ZERO/DIGIT tokens and the unit exponent
    for unit tokens.
    """

    kind: TokenKind
    value: int
    char: str
    position: int  # 0-based character index in the source text


# ─── Parsed Number ───────────────────────────────────────────────────


class ParsedNumber(BaseModel):
    """Integer magnitude plus a fraction on the 10^-3 grid."""

    model_config = ConfigDict(frozen=True)

    integer: int = Field(default=0, ge=0, strict=True)
    fraction: float = Field(default=0.0, ge=0.0, lt=1.0, allow_inf_nan=False)

    @field_validator("integer")
    @classmethod
    def _fits_u128(cls, value: int) -> int:
        if value > U128_MAX:
            raise ValueError(f"integer {value} exceeds {U128_MAX}")
        return value

    @field_validator("fraction")
    @classmethod
    def _snap_to_thousandths(cls, value: float) -> float:
        thousandths = round(value * 1000)
        if thousandths >= 1000:
            raise ValueError(f"fraction {value} rounds up to a whole unit")
        return thousandths / 1000

    @property
    def thousandths(self) -> int:
        return round(self.fraction * 1000)

    @property
    def fraction_digits(self) -> tuple[int, ...]:
        """Digits for 分, 厘, 毛 in that order."""
        n = self.thousandths
        return tuple((n // 10**place) % 10 for place in reversed(range(FRACTION_LEVELS)))

    @property
    def is_integer(self) -> bool:
        return self.fraction == 0
