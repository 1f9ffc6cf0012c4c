"""
Adapter: DecimalRPNEvaluator
Implementuje port Evaluator — maszyna stosowa na decimal.Decimal.

Decimal z wysoką precyzją (domyślnie 80 cyfr, ROUND_HALF_UP) zapewnia
dokładną arytmetykę dla + - × i kontrolowane zaokrąglenie tylko przy
dzieleniu. Każde wywołanie liczy w kopii kontekstu (localcontext), więc
współdzielony kontekst nie jest modyfikowany.

Procent (%) ma arność zależną od kontekstu (znacznik applies_to ustawia
konwerter, gdy % dotyczy prawego operandu operatora binarnego):
  stos pusty po zdjęciu p          → p/100             (5%      = 0.05)
  applies_to to + lub -            → a, a·p/100        (200+10% = 220)
  applies_to to × lub ÷            → p/100             (50×10%  = 5)
  bez znacznika                    → a·p/100, a zdjęte (10%50   = 5)
"""
from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation, localcontext
from typing import Callable

from contracts import (
    DivisionByZeroError,
    InvalidNumberError,
    MalformedExpressionError,
    Token,
)

DEFAULT_PRECISION = 80

_NUMERAL_RE = re.compile(r"^\d*\.?\d*$", re.ASCII)
_HUNDRED = Decimal(100)


def parse_numeral(text: str) -> Decimal:
    """Surowy zapis liczby → Decimal; pusty zapis to zero."""
    if not _NUMERAL_RE.match(text):
        raise InvalidNumberError(text)
    try:
        return Decimal(text or "0")
    except InvalidOperation:
        # "." pasuje do wzorca, ale nie jest liczbą
        raise InvalidNumberError(text) from None


def _divide(a: Decimal, b: Decimal) -> Decimal:
    if b.is_zero():
        raise DivisionByZeroError()
    return a / b


_BINARY_FUNCS: dict[str, Callable[[Decimal, Decimal], Decimal]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "×": lambda a, b: a * b,
    "÷": _divide,
}


class DecimalRPNEvaluator:
    """Ewaluator RPN o stałej, wysokiej precyzji."""

    def __init__(self, precision: int = DEFAULT_PRECISION) -> None:
        self._context = Context(prec=precision, rounding=ROUND_HALF_UP)

    @property
    def precision(self) -> int:
        return self._context.prec

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, postfix: list[Token]) -> Decimal:
        with localcontext(self._context):
            return self._run(postfix)

    # -- Prywatne ----------------------------------------------------------

    def _run(self, postfix: list[Token]) -> Decimal:
        stack: list[Decimal] = []

        def pop() -> Decimal:
            if not stack:
                raise MalformedExpressionError("Operand stack underflow")
            return stack.pop()

        for tok in postfix:
            if tok.is_number:
                stack.append(parse_numeral(tok.value))
            elif tok.is_operator("%"):
                stack.append(self._percent(stack, pop(), tok.applies_to))
            elif tok.is_operator():
                right = pop()
                left = pop()
                stack.append(_BINARY_FUNCS[tok.value](left, right))
            else:
                raise MalformedExpressionError(f"Unexpected token in postfix: {tok.value!r}")

        if len(stack) != 1:
            raise MalformedExpressionError(
                f"Expected exactly one value, {len(stack)} left on the stack"
            )
        # unary plus zaokrągla wynik do precyzji kontekstu
        return +stack[0]

    @staticmethod
    def _percent(stack: list[Decimal], percent: Decimal, applies_to: str | None) -> Decimal:
        fraction = percent / _HUNDRED
        if not stack:
            return fraction
        if applies_to in ("+", "-"):
            # procent od bieżącej wartości, która zostaje na stosie
            return stack[-1] * fraction
        if applies_to in ("×", "÷"):
            return fraction
        return stack.pop() * fraction
