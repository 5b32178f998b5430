"""
Parser for scicalc (Layer 2: Tokens → Expression Tree).

Operator-precedence (Pratt) parser.

Binding powers (left, right); higher binds tighter:

    +  -      (1, 2)   left associative
    *  /      (3, 4)   left associative
    ^         (6, 5)   right associative
    ±         (7, 8)   left associative
    prefix -  (-, 9)

So ``1 ± 2 * 3`` parses as ``(* (± 1 2) 3)``: the ± pair is formed first.
"""

import logging
from typing import Dict, Tuple

from .errors import DepthLimitError, ParseError
from .expressions import Atom, Expression, group
from .lexer import TokenStream
from .tokens import Token, TokenKind

logger = logging.getLogger(__name__)


MAX_DEPTH = 200

INFIX_BINDING_POWER: Dict[TokenKind, Tuple[int, int]] = {
    TokenKind.ADD: (1, 2),
    TokenKind.MINUS: (1, 2),
    TokenKind.MUL: (3, 4),
    TokenKind.DIV: (3, 4),
    TokenKind.CARET: (6, 5),
    TokenKind.PLUS_MINUS: (7, 8),
}

PREFIX_BINDING_POWER: Dict[TokenKind, int] = {
    TokenKind.MINUS: 9,
}


class _Parser:
    """Recursive Pratt parser over a single token stream."""

    def __init__(self, stream: TokenStream, max_depth: int):
        self.stream = stream
        self.max_depth = max_depth
        self.depth = 0

    def parse_expr(self, min_bp: int) -> Expression:
        self.depth += 1
        if self.depth > self.max_depth:
            raise DepthLimitError(self.max_depth)
        try:
            lhs = self._parse_prefix()
            while True:
                op = self.stream.peek()
                if op.kind is TokenKind.EOF:
                    break
                if op.kind is TokenKind.LEFT_PAREN:
                    raise ParseError(f"Missing operator before '(' at position {op.position}")
                if op.is_atom:
                    raise ParseError(_describe_unexpected(op))

                binding = INFIX_BINDING_POWER.get(op.kind)
                if binding is None:
                    # ')' ends the operand; the enclosing group checks for it
                    break
                left_bp, right_bp = binding
                if left_bp < min_bp:
                    break

                self.stream.next()
                rhs = self.parse_expr(right_bp)
                lhs = group(op, lhs, rhs)
            return lhs
        finally:
            self.depth -= 1

    def _parse_prefix(self) -> Expression:
        token = self.stream.next()

        if token.is_atom:
            return Atom(token)

        if token.kind is TokenKind.LEFT_PAREN:
            inner = self.parse_expr(0)
            closing = self.stream.next()
            if closing.kind is not TokenKind.RIGHT_PAREN:
                raise ParseError(
                    f"Missing closing parenthesis for '(' at position {token.position}, "
                    f"found {_token_name(closing)}"
                )
            return inner

        right_bp = PREFIX_BINDING_POWER.get(token.kind)
        if right_bp is not None:
            operand = self.parse_expr(right_bp)
            return group(token, operand)

        raise ParseError(_describe_unexpected(token))


def _token_name(token: Token) -> str:
    if token.kind is TokenKind.EOF:
        return "end of input"
    return f"'{token}'"


def _describe_unexpected(token: Token) -> str:
    if token.kind is TokenKind.EOF:
        return "Unexpected end of expression"
    return f"Unexpected token {_token_name(token)} at position {token.position}"


def parse(stream: TokenStream, max_depth: int = MAX_DEPTH) -> Expression:
    """
    Parse a whole token stream into one expression tree.

    Args:
        stream: Tokens to consume (must end with EOF)
        max_depth: Maximum nesting depth

    Returns:
        Root of the expression tree

    Raises:
        ParseError: On unexpected tokens or unbalanced parentheses
        DepthLimitError: If nesting exceeds max_depth
    """
    parser = _Parser(stream, max_depth)
    expr = parser.parse_expr(0)

    trailing = stream.peek()
    if trailing.kind is TokenKind.RIGHT_PAREN:
        raise ParseError(f"Unmatched ')' at position {trailing.position}")
    if trailing.kind is not TokenKind.EOF:
        raise ParseError(_describe_unexpected(trailing))

    logger.debug("Parsed %s expression tree", type(expr).__name__)
    return expr


def parse_expression(text: str, max_depth: int = MAX_DEPTH) -> Expression:
    """Tokenize and parse an expression string."""
    return parse(TokenStream.from_text(text), max_depth=max_depth)


__all__ = [
    "MAX_DEPTH",
    "parse",
    "parse_expression",
]
