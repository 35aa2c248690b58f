"""
Custom exception hierarchy for kansuji decoding and conversion.

Each exception type maps to one category of failure, so callers can catch
exactly the condition they care about, or ``KansujiError`` for all of them.
Every error carries a machine-readable ``code`` and a ``details`` dict.
"""

from __future__ import annotations


class KansujiError(ValueError):
    """Base exception for all kansuji failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class PositionalError(KansujiError):
    """A failure tied to one character of the input text."""

    def __init__(self, code: str, message: str, position: int, char: str):
        self.position = position
        self.char = char
        super().__init__(
            code,
            f"{message} at position {position} ({char!r})",
            {"position": position, "char": char},
        )


class EmptyInput(KansujiError):
    """Nothing to decode."""

    def __init__(self, message: str = "Empty text cannot be decoded"):
        super().__init__("EMPTY_INPUT", message)


class InvalidCharacter(PositionalError):
    """The character is not a kansuji digit or unit."""

    def __init__(self, position: int, char: str):
        super().__init__("INVALID_CHARACTER", "Unrecognized character", position, char)


class UnitOutOfOrder(PositionalError):
    """A unit appears after a smaller unit of the same level."""

    def __init__(self, position: int, char: str):
        super().__init__("UNIT_OUT_OF_ORDER", "Unit out of order", position, char)


class DuplicateUnit(PositionalError):
    """The same unit appears twice at the same level."""

    def __init__(self, position: int, char: str):
        super().__init__("DUPLICATE_UNIT", "Duplicate unit", position, char)


class MalformedGroup(PositionalError):
    """A digit is not paired with a unit where one is required."""

    def __init__(self, position: int, char: str, reason: str = "Malformed group"):
        super().__init__("MALFORMED_GROUP", reason, position, char)


class Overflow(KansujiError):
    """The integer magnitude does not fit the supported range."""

    def __init__(self, limit: int):
        super().__init__(
            "OVERFLOW",
            f"Integer magnitude exceeds {limit}",
            {"limit": limit},
        )


class OutOfRange(KansujiError):
    """A numeric value cannot be represented as kansuji."""

    def __init__(self, value: object, reason: str):
        super().__init__(
            "OUT_OF_RANGE",
            f"{value!r} cannot be represented: {reason}",
            {"value": repr(value), "reason": reason},
        )


class NonIntegerConversion(KansujiError):
    """An integer was requested from a value with a fractional part."""

    def __init__(self, fraction: float):
        super().__init__(
            "NON_INTEGER_CONVERSION",
            f"Value has a fractional part ({fraction}) and is not an integer",
            {"fraction": fraction},
        )
