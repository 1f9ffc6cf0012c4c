"""
Port: PostfixConverter
Odpowiedzialność: zamiana ciągu tokenów infiksowych na notację postfiksową (RPN).
"""
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class PostfixConverter(Protocol):
    def to_postfix(self, tokens: list[Token]) -> list[Token]:
        """
        Reorders infix tokens into evaluation (postfix) order.
        Parentheses never appear in the output. A unary minus is rewritten
        as a subtraction from a synthetic Number("0").
        Raises MismatchedParenthesesError on unbalanced nesting.
        """
        ...
