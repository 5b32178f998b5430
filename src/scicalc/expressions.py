"""
Expression Tree for scicalc

Parsed expressions are represented as S-expression trees.

    1 + 2 * 3   →   (+ 1 (* 2 3))

Two node types exist:
    - Atom:  a leaf holding a literal or constant token
    - Group: an operator token applied to ordered children

ARCHITECTURAL RULE:
    Trees are structure only.
    Evaluation belongs in the evaluator.
    Alternative renderings belong in backends.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Tuple

from .tokens import Token, TokenKind


class Expression(ABC):
    """
    Base class for expression tree nodes.

    This class is structure only. It exists to give the two node
    types a common type.
    """
    pass


@dataclass(frozen=True)
class Atom(Expression):
    """
    Leaf node: a numeric literal or a constant.

    Examples:
        - 2.5
        - e
        - π

    Properties:
        token: NUMBER, EULER or PI token
    """

    token: Token

    def __str__(self) -> str:
        return str(self.token)


@dataclass(frozen=True)
class Group(Expression):
    """
    Interior node: an operator applied to its operands.

    Example:
        -1.0 ± 2.0

    Becomes:
        Group(
            operator=Token(TokenKind.PLUS_MINUS),
            children=(
                Group(operator=Token(TokenKind.MINUS), children=(Atom(1.0),)),
                Atom(2.0),
            )
        )

    Properties:
        operator: Operator token
        children: Operands, in source order

    IMPORTANT:
        MINUS with one child is negation, with two children subtraction.
    """

    operator: Token
    children: Tuple[Expression, ...]

    @property
    def kind(self) -> TokenKind:
        return self.operator.kind

    def __str__(self) -> str:
        parts = [self.operator.kind.value] + [str(child) for child in self.children]
        return "(" + " ".join(parts) + ")"


def group(operator: Token, *children: Expression) -> Group:
    return Group(operator, tuple(children))
