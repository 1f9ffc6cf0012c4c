"""
Adapter: ShuntingYardConverter
Implementuje port PostfixConverter — algorytm shunting-yard.

Priorytety (wszystkie operatory lewostronnie łączne):
  + -   → 1
  × ÷   → 2
  %     → 3
  -x    → 4   (unarny minus, przepisany na 0 - x)

Unarny minus: '-' na początku, po '(' albo po dowolnym operatorze
(także po %) emituje syntetyczne Number("0"). Na stosie ma priorytet
wyższy od wszystkich operatorów binarnych i przy wstawianiu niczego nie
zdejmuje, więc obejmuje tylko najbliższy operand: 2×-3 → 2 0 3 - ×.

Procent jako prawy operand: w "200+10%" % stoi tuż po liczbie, która
jest prawym operandem '+', i nic po nim nie następuje jako operand.
Taki token % dostaje applies_to="+" — ewaluator liczy wtedy procent
od bieżącej wartości. Każdy inny % (np. "1+2%3") zostaje bez znacznika.
"""
from __future__ import annotations

from contracts import MismatchedParenthesesError, Token

_UNARY_MINUS_BP = 4
_BINARY_OPS = ("+", "-", "×", "÷")


def _is_unary_minus(tok: Token, prev: Token | None) -> bool:
    if not tok.is_operator("-"):
        return False
    return prev is None or prev.is_paren("(") or prev.is_operator()


def _ends_operand(following: Token | None) -> bool:
    """True jeśli po % nie zaczyna się kolejny operand (liczba, '(' lub unarny '-')."""
    if following is None or following.is_paren(")"):
        return True
    return following.is_operator() and not following.is_operator("-")


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Infiks → RPN; rzuca MismatchedParenthesesError przy złych nawiasach."""
    output: list[Token] = []
    # (token, priorytet na stosie); nawias ma priorytet 0
    stack: list[tuple[Token, int]] = []
    prev: Token | None = None
    binary_before: str | None = None    # operator binarny tuż przed prev
    operand_of: str | None = None       # prawy operand którego operatora jest prev

    for i, tok in enumerate(tokens):
        following = tokens[i + 1] if i + 1 < len(tokens) else None

        if tok.is_number:
            output.append(tok)
            operand_of = binary_before
        elif tok.is_operator():
            if _is_unary_minus(tok, prev):
                output.append(Token.number("0"))
                stack.append((tok, _UNARY_MINUS_BP))
            else:
                if (
                    tok.is_operator("%")
                    and prev is not None
                    and prev.is_number
                    and operand_of is not None
                    and _ends_operand(following)
                ):
                    tok = Token.operator("%", applies_to=operand_of)
                bp = tok.precedence or 0
                while stack and stack[-1][0].is_operator() and stack[-1][1] >= bp:
                    output.append(stack.pop()[0])
                stack.append((tok, bp))
        elif tok.is_paren("("):
            stack.append((tok, 0))
        else:
            while stack and not stack[-1][0].is_paren("("):
                output.append(stack.pop()[0])
            if not stack:
                raise MismatchedParenthesesError("Unmatched ')'")
            stack.pop()

        is_binary = tok.is_operator(*_BINARY_OPS) and not _is_unary_minus(tok, prev)
        binary_before = tok.value if is_binary else None
        if not tok.is_number:
            operand_of = None
        prev = tok

    while stack:
        tok, _ = stack.pop()
        if tok.is_paren():
            raise MismatchedParenthesesError("Unmatched '('")
        output.append(tok)
    return output


class ShuntingYardConverter:
    """Bezstanowy konwerter infiks → postfiks."""

    # -- PostfixConverter protocol -----------------------------------------

    def to_postfix(self, tokens: list[Token]) -> list[Token]:
        return to_postfix(tokens)
