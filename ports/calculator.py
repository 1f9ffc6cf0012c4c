"""
Port: Calculator
Odpowiedzialność: fasada potoku — podgląd na żywo i zatwierdzenie ("=").
"""
from typing import Protocol, runtime_checkable

from contracts import EvalOutcome


@runtime_checkable
class Calculator(Protocol):
    def preview(self, text: str) -> str:
        """
        Live-preview evaluation. Returns the formatted result, or "" for
        blank input and for any failure. Never raises.
        """
        ...

    def commit(self, text: str) -> EvalOutcome:
        """
        Explicit "=" evaluation. Never raises; failures are encoded in the
        returned EvalOutcome (is_error, error_kind and a display label that
        tells division by zero apart from every other failure).
        """
        ...

    def evaluate(self, text: str) -> tuple[str, bool]:
        """Returns (display, is_error) for the commit path."""
        ...
