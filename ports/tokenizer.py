"""
Port: Tokenizer
Odpowiedzialność: podział surowego tekstu wyrażenia na tokeny.
"""
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Tokenizer(Protocol):
    def tokenize(self, text: str) -> list[Token]:
        """
        Scans an infix expression into Number, Operator and Paren tokens.
        Whitespace is skipped; '*' and '/' are normalized to '×' and '÷'.
        Numerals are not validated here (e.g. "1..2" is one Number token).
        Returns an empty list for empty input.
        Raises InvalidCharacterError on any unrecognized character.
        """
        ...
