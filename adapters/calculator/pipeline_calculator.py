"""
Adapter: PipelineCalculator
Implementuje port Calculator — fasada potoku:

  tekst → Tokenizer → PostfixConverter → Evaluator → format_display

preview()  — podgląd na żywo: każdy błąd zamienia się w "" (pusty wynik)
commit()   — "=": błąd zwracany w EvalOutcome; dzielenie przez zero ma
             własną etykietę, pozostałe błędy wspólną ("Malformed")

Fasada jest jedynym miejscem, które przechwytuje CalculationError.
Etapy wewnętrzne propagują pierwszy napotkany błąd.
"""
from __future__ import annotations

import functools
import logging

from adapters.evaluator.rpn_evaluator import DecimalRPNEvaluator
from adapters.formatting import canonical_expression, format_display
from adapters.postfix_converter.shunting_yard import ShuntingYardConverter
from adapters.tokenizer.scanning_tokenizer import ScanningTokenizer
from config import Settings
from contracts import (
    CalculationError,
    ErrorKind,
    EvalOutcome,
    MalformedExpressionError,
    PipelineTrace,
)
from ports.evaluator import Evaluator
from ports.postfix_converter import PostfixConverter
from ports.tokenizer import Tokenizer

logger = logging.getLogger("decicalc.calculator")


class PipelineCalculator:
    """Kalkulator wyrażeń o dowolnej precyzji (Decimal)."""

    def __init__(
        self,
        settings: Settings | None = None,
        tokenizer: Tokenizer | None = None,
        converter: PostfixConverter | None = None,
        evaluator: Evaluator | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._tokenizer = tokenizer or ScanningTokenizer()
        self._converter = converter or ShuntingYardConverter()
        self._evaluator = evaluator or DecimalRPNEvaluator(self._settings.precision)

    @property
    def settings(self) -> Settings:
        return self._settings

    # -- Calculator protocol -----------------------------------------------

    def preview(self, text: str) -> str:
        if not text.strip():
            return ""
        try:
            return self._compute(text)
        except CalculationError as exc:
            logger.debug("Preview failed for %r: %s", text, exc)
            return ""

    def commit(self, text: str) -> EvalOutcome:
        expression = canonical_expression(text)
        try:
            if not expression:
                raise MalformedExpressionError("Empty expression")
            display = self._compute(text)
        except CalculationError as exc:
            logger.info("Commit failed for %r: %s (%s)", text, exc, exc.kind.value)
            return EvalOutcome(
                expression=expression,
                display=self._error_label(exc.kind),
                is_error=True,
                error_kind=exc.kind,
            )
        return EvalOutcome(expression=expression, display=display)

    def evaluate(self, text: str) -> tuple[str, bool]:
        outcome = self.commit(text)
        return outcome.display, outcome.is_error

    # -- Introspekcja ------------------------------------------------------

    def trace(self, text: str) -> PipelineTrace:
        """Zwraca tokeny, RPN i wynik; zatrzymuje się na pierwszym błędzie."""
        trace = PipelineTrace(expression=canonical_expression(text))
        try:
            trace.tokens = self._tokenizer.tokenize(text)
            trace.postfix = self._converter.to_postfix(trace.tokens)
            value = self._evaluator.evaluate(trace.postfix)
        except CalculationError as exc:
            trace.error_kind = exc.kind
            trace.error_message = str(exc)
            return trace
        trace.value = f"{value:f}"
        trace.display = format_display(value, self._settings.display_digits)
        return trace

    # -- Prywatne ----------------------------------------------------------

    def _compute(self, text: str) -> str:
        tokens = self._tokenizer.tokenize(text)
        postfix = self._converter.to_postfix(tokens)
        value = self._evaluator.evaluate(postfix)
        return format_display(value, self._settings.display_digits)

    def _error_label(self, kind: ErrorKind) -> str:
        if kind == ErrorKind.DIVISION_BY_ZERO:
            return self._settings.division_by_zero_label
        return self._settings.malformed_label


@functools.lru_cache(maxsize=1)
def _calculator() -> PipelineCalculator:
    return PipelineCalculator()


def safe_evaluate(text: str) -> str:
    """Podgląd na żywo domyślnym kalkulatorem; nigdy nie rzuca."""
    return _calculator().preview(text)
