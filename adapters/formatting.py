"""
formatting.py - turn evaluation results and expressions into display text.

Display pipeline:
1) Round to N significant digits (ROUND_HALF_UP)
2) Render in plain notation, never exponent form
3) Strip trailing fractional zeros and a bare trailing point
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

DISPLAY_DIGITS = 15

_EXPR_SYMBOLS = str.maketrans({"*": "×", "/": "÷"})


def format_display(value: Decimal, significant_digits: int = DISPLAY_DIGITS) -> str:
    """Return the value rounded to significant digits, without trailing zeros."""
    with localcontext() as ctx:
        ctx.prec = significant_digits
        ctx.rounding = ROUND_HALF_UP
        rounded = ctx.plus(value)

    if rounded.is_zero():
        # also covers -0 from e.g. -5 × 0
        return "0"

    s = f"{rounded:f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def canonical_expression(text: str) -> str:
    """Expression as shown in history: ASCII '*' and '/' become '×' and '÷'."""
    return text.strip().translate(_EXPR_SYMBOLS)
