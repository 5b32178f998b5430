"""
Error taxonomy for scicalc.

Every failure aborts the evaluation of the whole expression.
Callers distinguish failures by exception class or by ``kind``.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Category of a calculation failure."""
    LEXICAL = "lexical"
    SYNTAX = "syntax"
    DOMAIN = "domain"
    DEPTH = "depth"


class CalcError(Exception):
    """Base class for every error raised while evaluating an expression."""
    kind: ErrorKind


class LexicalError(CalcError):
    """Raised when the source text cannot be tokenized."""
    kind = ErrorKind.LEXICAL

    def __init__(self, message: str, position: Optional[int] = None):
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)
        self.position = position


class ParseError(CalcError):
    """Raised when the token stream does not form a valid expression."""
    kind = ErrorKind.SYNTAX


class DomainError(CalcError):
    """Raised when an operation is undefined for its operands."""
    kind = ErrorKind.DOMAIN


class DepthLimitError(CalcError):
    """Raised when an expression is nested deeper than allowed."""
    kind = ErrorKind.DEPTH

    def __init__(self, max_depth: int):
        super().__init__(f"Expression nesting exceeds the maximum depth of {max_depth}")
        self.max_depth = max_depth
