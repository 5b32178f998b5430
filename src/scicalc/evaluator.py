"""
Evaluator for scicalc (Layer 3: Expression Tree → Value).

Walks the tree children-first, producing a fresh Value at each node.

    NUMBER atom  → PosNumber(literal)
    e, π         → PosNumber(constant)
    (- x)        → negate
    (op x y)     → binary operation of the value algebra
"""

import logging
import math
from typing import Callable, Dict, List, Tuple

from .errors import ParseError
from .expressions import Atom, Expression, Group
from .parser import MAX_DEPTH, parse_expression
from .tokens import TokenKind
from . import values
from .values import PosNumber, Value

logger = logging.getLogger(__name__)


CONSTANTS: Dict[TokenKind, float] = {
    TokenKind.EULER: math.e,
    TokenKind.PI: math.pi,
}

BINARY_OPERATIONS: Dict[TokenKind, Callable[[Value, Value], Value]] = {
    TokenKind.ADD: values.add,
    TokenKind.MINUS: values.subtract,
    TokenKind.MUL: values.multiply,
    TokenKind.DIV: values.divide,
    TokenKind.CARET: values.power,
    TokenKind.PLUS_MINUS: values.plus_minus,
}


def evaluate(expr: Expression) -> Value:
    """
    Evaluate an expression tree.

    The walk uses an explicit post-order stack, so long operator chains
    such as ``1 + 1 + ... + 1`` are not limited by Python's recursion
    depth. Nesting limits are enforced by the parser.

    Args:
        expr: Root of the tree

    Returns:
        PosNumber, Number or Measurement

    Raises:
        ParseError: If an operator node has the wrong number of children
        DomainError: If an operation is undefined for its operands
    """
    stack: List[Tuple[Expression, bool]] = [(expr, False)]
    results: List[Value] = []

    while stack:
        node, children_done = stack.pop()

        if isinstance(node, Atom):
            results.append(_atom_value(node))
        elif isinstance(node, Group):
            if children_done:
                count = len(node.children)
                operands = results[len(results) - count:]
                del results[len(results) - count:]
                results.append(_apply(node, operands))
            else:
                stack.append((node, True))
                # Reversed so the first child is evaluated first
                for child in reversed(node.children):
                    stack.append((child, False))
        else:
            raise TypeError(f"Unsupported Expression type: {type(node)}")

    return results[0]


def _atom_value(node: Atom) -> Value:
    token = node.token
    if token.kind is TokenKind.NUMBER:
        return PosNumber(token.literal.to_float())
    if token.kind in CONSTANTS:
        return PosNumber(CONSTANTS[token.kind])
    raise ParseError(f"Token '{token}' is not a value")


def _apply(node: Group, operands: List[Value]) -> Value:
    if node.kind is TokenKind.MINUS and len(operands) == 1:
        return values.negate(operands[0])

    operation = BINARY_OPERATIONS.get(node.kind)
    if operation is None:
        raise ParseError(f"'{node.operator}' is not an operator")
    if len(operands) != 2:
        raise ParseError(
            f"Operator '{node.operator}' expects 2 operands, got {len(operands)}"
        )
    return operation(operands[0], operands[1])


def evaluate_expression(text: str, max_depth: int = MAX_DEPTH) -> Value:
    """
    Tokenize, parse and evaluate an expression string.

    Raises:
        DepthLimitError: If parentheses or prefix operators nest deeper
            than max_depth
    """
    expr = parse_expression(text, max_depth=max_depth)
    result = evaluate(expr)
    logger.debug("Evaluated %r to %s", text, result)
    return result


def calculate(text: str) -> str:
    """
    Evaluate an expression string and format the result.

    Example:
        >>> calculate("1 + 2")
        '3.0'
    """
    return str(evaluate_expression(text))


__all__ = [
    "calculate",
    "evaluate",
    "evaluate_expression",
]
