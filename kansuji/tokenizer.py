"""Turn text into classified numeral tokens. Ordering is not checked here."""

from __future__ import annotations

from .exceptions import EmptyInput, InvalidCharacter
from .models import NumeralToken
from .symbols import classify


def tokenize(text: str) -> list[NumeralToken]:
    """Classify every character of ``text``.

    Raises:
        EmptyInput: If ``text`` is empty.
        InvalidCharacter: On the first character absent from the symbol table.
    """
    if not text:
        raise EmptyInput()

    tokens: list[NumeralToken] = []
    for position, char in enumerate(text):
        symbol = classify(char)
        if symbol is None:
            raise InvalidCharacter(position, char)
        tokens.append(NumeralToken(symbol.kind, symbol.value, char, position))
    return tokens
