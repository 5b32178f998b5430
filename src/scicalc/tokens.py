"""
Lexical units consumed by the parser.

The set of token kinds is closed. Every token the lexer produces
has one of the kinds below; the stream always ends with EOF.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .decimal_literal import DecimalLiteral


class TokenKind(Enum):
    """
    Kinds of tokens.

    Values are the source symbols, used when printing trees and errors.
    """

    # Literals and constants
    NUMBER = "number"
    EULER = "e"
    PI = "π"

    # Operators
    PLUS_MINUS = "±"
    ADD = "+"
    MINUS = "-"    # prefix negation or infix subtraction
    MUL = "*"
    DIV = "/"
    CARET = "^"

    # Grouping
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"

    EOF = "<eof>"


ATOM_KINDS = frozenset({TokenKind.NUMBER, TokenKind.EULER, TokenKind.PI})


@dataclass(frozen=True)
class Token:
    """
    A single token.

    Properties:
        kind: TokenKind
        literal: Source digits, set only for NUMBER tokens
        position: Character offset in the source (ignored by equality)
    """

    kind: TokenKind
    literal: Optional[DecimalLiteral] = None
    position: int = field(default=-1, compare=False)

    @classmethod
    def number(cls, text: str, position: int = -1) -> "Token":
        return cls(TokenKind.NUMBER, DecimalLiteral.parse(text), position)

    @property
    def is_atom(self) -> bool:
        return self.kind in ATOM_KINDS

    def __str__(self) -> str:
        if self.kind is TokenKind.NUMBER:
            return str(self.literal)
        return self.kind.value


EOF_TOKEN = Token(TokenKind.EOF)
