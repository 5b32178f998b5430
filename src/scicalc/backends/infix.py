"""
Canonical infix renderer for expression trees.

Every operator node is wrapped in parentheses, so the output never
depends on precedence:

    (+ 1 (* 2 3))      →  (1 + (2 * 3))
    (± (- 1.0) 2.0)    →  ((-1.0) ± 2.0)

Parsing the rendered text yields an equal tree.
"""

from scicalc.expressions import Atom, Expression, Group
from scicalc.tokens import TokenKind


OPERATOR_SYMBOLS = {
    TokenKind.ADD: "+",
    TokenKind.MINUS: "-",
    TokenKind.MUL: "*",
    TokenKind.DIV: "/",
    TokenKind.CARET: "^",
    TokenKind.PLUS_MINUS: "±",
}


def to_infix(expr: Expression) -> str:
    """Render ``expr`` as fully-parenthesized infix text."""
    if isinstance(expr, Atom):
        return str(expr.token)

    if isinstance(expr, Group):
        op_str = OPERATOR_SYMBOLS.get(expr.kind, expr.kind.value)
        operands = [to_infix(child) for child in expr.children]
        if len(operands) == 1:
            return f"({op_str}{operands[0]})"
        return "(" + f" {op_str} ".join(operands) + ")"

    raise TypeError(f"Unsupported Expression type: {type(expr)}")
