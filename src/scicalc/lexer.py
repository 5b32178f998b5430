"""
Lexer for scicalc (Layer 1: Source Text → Tokens).

Converts an expression string into a list of tokens, scanning one
character at a time with one character of lookahead.

Syntax Notes:
    - Whitespace (space, tab, newline) is skipped
    - ± and the digraph +- both produce PLUS_MINUS
    - e and π are constants, recognised as single characters
    - Numeric literals: digits with at most one decimal point (2, 2.5, .5)
    - A literal may not end in a decimal point ("23." is rejected)
"""

import logging
from typing import List, Optional

from .errors import LexicalError
from .tokens import EOF_TOKEN, Token, TokenKind

logger = logging.getLogger(__name__)


SINGLE_CHAR_TOKENS = {
    "-": TokenKind.MINUS,
    "*": TokenKind.MUL,
    "/": TokenKind.DIV,
    "^": TokenKind.CARET,
    "±": TokenKind.PLUS_MINUS,
    "e": TokenKind.EULER,
    "π": TokenKind.PI,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}

WHITESPACE = frozenset(" \t\n")
DIGITS = frozenset("0123456789")


class _Scanner:
    """Character cursor with one character of lookahead."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def next(self) -> Optional[str]:
        c = self.peek()
        if c is not None:
            self.pos += 1
        return c


def tokenize(text: str) -> List[Token]:
    """
    Tokenize an expression.

    Args:
        text: Expression source

    Returns:
        Tokens in source order, ending with exactly one EOF token

    Raises:
        LexicalError: On an unexpected character or a literal ending in '.'
    """
    scanner = _Scanner(text)
    tokens: List[Token] = []

    while True:
        start = scanner.pos
        c = scanner.next()
        if c is None:
            break

        if c in WHITESPACE:
            continue

        if c == "+":
            # Digraph '+-' is the ASCII spelling of '±'
            if scanner.peek() == "-":
                scanner.next()
                tokens.append(Token(TokenKind.PLUS_MINUS, position=start))
            else:
                tokens.append(Token(TokenKind.ADD, position=start))
        elif c in SINGLE_CHAR_TOKENS:
            tokens.append(Token(SINGLE_CHAR_TOKENS[c], position=start))
        elif c in DIGITS or c == ".":
            tokens.append(_scan_number(c, start, scanner))
        else:
            raise LexicalError(f"Unexpected character: '{c}'", position=start)

    tokens.append(Token(TokenKind.EOF, position=len(text)))
    logger.debug("Tokenized %r into %d tokens", text, len(tokens))
    return tokens


def _scan_number(first: str, start: int, scanner: _Scanner) -> Token:
    """Scan the rest of a numeric literal whose first character is ``first``."""
    chars = [first]
    found_period = first == "."

    while True:
        c = scanner.peek()
        if c is None:
            break
        if c in DIGITS:
            chars.append(c)
        elif c == "." and not found_period:
            found_period = True
            chars.append(c)
        else:
            # A second '.' or any other character ends the literal
            break
        scanner.next()

    text = "".join(chars)
    if text.endswith("."):
        raise LexicalError(
            f"Numeric literal cannot end in a period: \"{text}\"", position=start
        )
    return Token.number(text, position=start)


class TokenStream:
    """
    Tokens consumed front-to-back by the parser.

    Past the end of the tokens, both peek() and next() return EOF.
    """

    def __init__(self, tokens: List[Token]):
        self._tokens = list(tokens)
        self._index = 0

    @classmethod
    def from_text(cls, text: str) -> "TokenStream":
        return cls(tokenize(text))

    def peek(self) -> Token:
        """Return the next token without consuming it."""
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return EOF_TOKEN

    def next(self) -> Token:
        """Consume and return the next token."""
        token = self.peek()
        if self._index < len(self._tokens):
            self._index += 1
        return token


__all__ = [
    "tokenize",
    "TokenStream",
]
