"""
Scientific Calculator (scicalc) Package

Evaluates arithmetic expressions over numbers that may carry a measurement
uncertainty, e.g. ``(1.0 ± 0.1) * (3.0 ± 0.1)``.

PIPELINE:
---------
    text → lexer (tokens) → parser (expression tree) → evaluator (Value)

Each stage is a pure function of its input.
No global state, no caching, no I/O.
"""

from .evaluator import calculate, evaluate, evaluate_expression
from .errors import CalcError, DepthLimitError, DomainError, ErrorKind, LexicalError, ParseError
from .measurement import Measurement

__version__ = "0.1.0"

__all__ = [
    "calculate",
    "evaluate",
    "evaluate_expression",
    "CalcError",
    "DepthLimitError",
    "DomainError",
    "ErrorKind",
    "LexicalError",
    "ParseError",
    "Measurement",
]
