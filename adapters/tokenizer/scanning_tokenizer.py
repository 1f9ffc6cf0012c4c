"""
Adapter: ScanningTokenizer
Implementuje port Tokenizer — jednoprzebiegowy skaner znak po znaku.

  liczba    = [0-9.]+          (bez walidacji, np. "1..2" przechodzi dalej)
  operator  = + - * / × ÷ %    ('*' → '×', '/' → '÷')
  nawias    = ( )
  spacje    — pomijane, także wewnątrz liczby
"""
from __future__ import annotations

from contracts import InvalidCharacterError, Token

_DIGITS = frozenset("0123456789.")

# Mapowanie symboli wejściowych na kanoniczne operatory
_OP_MAP = {"+": "+", "-": "-", "*": "×", "/": "÷", "×": "×", "÷": "÷", "%": "%"}


def tokenize(text: str) -> list[Token]:
    """Tokenizuje wyrażenie; rzuca InvalidCharacterError na nieznany znak."""
    tokens: list[Token] = []
    buf: list[str] = []

    def flush() -> None:
        if buf:
            tokens.append(Token.number("".join(buf)))
            buf.clear()

    for pos, ch in enumerate(text):
        if ch.isspace():
            # nie zamyka bieżącej liczby: "1 000" → "1000"
            continue
        if ch in _DIGITS:
            buf.append(ch)
            continue
        if ch in "()":
            flush()
            tokens.append(Token.paren(ch))
            continue
        op = _OP_MAP.get(ch)
        if op is None:
            raise InvalidCharacterError(ch, pos)
        flush()
        tokens.append(Token.operator(op))

    flush()
    return tokens


def detokenize(tokens: list[Token]) -> str:
    """Zapis tokenów z powrotem jako tekst; tokenize(detokenize(t)) == t."""
    return " ".join(t.value for t in tokens)


class ScanningTokenizer:
    """Bezstanowy tokenizer wyrażeń kalkulatora."""

    # -- Tokenizer protocol ------------------------------------------------

    def tokenize(self, text: str) -> list[Token]:
        return tokenize(text)
