"""
contracts.py — Jedyne źródło prawdy dla wszystkich typów danych w DeciCalc.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Tokens ──────────────────────────────────────

class TokenType(str, Enum):
    NUMBER = "num"       # surowy zapis liczby, np. "12.5"
    OPERATOR = "op"      # + - × ÷ %
    PAREN = "paren"      # ( )


OPERATORS: tuple[str, ...] = ("+", "-", "×", "÷", "%")
PARENS: tuple[str, ...] = ("(", ")")

# % wiąże mocniej niż × i ÷
PRECEDENCE: dict[str, int] = {"+": 1, "-": 1, "×": 2, "÷": 2, "%": 3}


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: TokenType
    value: str
    # tylko dla %: operator binarny, którego prawym operandem jest procent
    applies_to: Optional[str] = None

    @model_validator(mode="after")
    def _check_value(self) -> "Token":
        if self.type == TokenType.OPERATOR and self.value not in OPERATORS:
            raise ValueError(f"Unknown operator: {self.value!r}")
        if self.type == TokenType.PAREN and self.value not in PARENS:
            raise ValueError(f"Unknown parenthesis: {self.value!r}")
        if self.applies_to is not None and (
            self.value != "%" or self.applies_to not in ("+", "-", "×", "÷")
        ):
            raise ValueError(f"Invalid percent target: {self.applies_to!r}")
        return self

    @classmethod
    def number(cls, text: str) -> "Token":
        return cls(type=TokenType.NUMBER, value=text)

    @classmethod
    def operator(cls, symbol: str, applies_to: Optional[str] = None) -> "Token":
        return cls(type=TokenType.OPERATOR, value=symbol, applies_to=applies_to)

    @classmethod
    def paren(cls, symbol: str) -> "Token":
        return cls(type=TokenType.PAREN, value=symbol)

    @property
    def precedence(self) -> Optional[int]:
        if self.type != TokenType.OPERATOR:
            return None
        return PRECEDENCE[self.value]

    @property
    def is_number(self) -> bool:
        return self.type == TokenType.NUMBER

    def is_operator(self, *symbols: str) -> bool:
        if self.type != TokenType.OPERATOR:
            return False
        return not symbols or self.value in symbols

    def is_paren(self, symbol: Optional[str] = None) -> bool:
        if self.type != TokenType.PAREN:
            return False
        return symbol is None or self.value == symbol

    def __str__(self) -> str:
        return self.value


# ─────────────────────────── Errors ──────────────────────────────────────

class ErrorKind(str, Enum):
    INVALID_CHARACTER = "InvalidCharacter"
    MISMATCHED_PARENTHESES = "MismatchedParentheses"
    INVALID_NUMBER = "InvalidNumber"
    DIVISION_BY_ZERO = "DivisionByZero"
    MALFORMED_EXPRESSION = "MalformedExpression"


class CalculationError(Exception):
    """Bazowy wyjątek potoku tokenize → to_postfix → evaluate."""

    kind: ErrorKind = ErrorKind.MALFORMED_EXPRESSION


class InvalidCharacterError(CalculationError):
    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, character: str, position: int) -> None:
        super().__init__(f"Invalid character {character!r} at position {position}")
        self.character = character
        self.position = position


class MismatchedParenthesesError(CalculationError):
    kind = ErrorKind.MISMATCHED_PARENTHESES

    def __init__(self, message: str = "Mismatched parentheses") -> None:
        super().__init__(message)


class InvalidNumberError(CalculationError):
    kind = ErrorKind.INVALID_NUMBER

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid number: {text!r}")
        self.text = text


class DivisionByZeroError(CalculationError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self) -> None:
        super().__init__("Division by zero")


class MalformedExpressionError(CalculationError):
    kind = ErrorKind.MALFORMED_EXPRESSION

    def __init__(self, message: str = "Malformed expression") -> None:
        super().__init__(message)


# ─────────────────────────── Calculator ──────────────────────────────────

class EvalOutcome(BaseModel):
    expression: str                      # wyrażenie w postaci do historii (× ÷)
    display: str                         # wynik albo etykieta błędu
    is_error: bool = False
    error_kind: Optional[ErrorKind] = None


class PipelineTrace(BaseModel):
    expression: str
    tokens: list[Token] = Field(default_factory=list)
    postfix: list[Token] = Field(default_factory=list)
    value: Optional[str] = None          # Decimal jako tekst, pełna precyzja
    display: str = ""
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None
