"""
Port: Evaluator
Odpowiedzialność: deterministyczne liczenie wyrażeń RPN bez błędów zmiennoprzecinkowych.
"""
from decimal import Decimal
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, postfix: list[Token]) -> Decimal:
        """
        Runs a postfix token sequence on a Decimal stack machine.
        Returns the single value left on the stack.
        Raises InvalidNumberError for malformed numerals,
        DivisionByZeroError when a divisor is exactly zero,
        MalformedExpressionError on operand underflow or when the final
        stack does not hold exactly one value.
        """
        ...
