"""
Command-line entry point.

Usage:
    scicalc "(1.0 ± 0.1) * (3.0 +- 0.1)"

Prints the result, or a generic error message on failure.
"""

import argparse
import logging
import sys
from typing import List, Optional

from scicalc.errors import CalcError
from scicalc.evaluator import calculate

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Error: could not evaluate the expression"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scicalc",
        description="Evaluate an arithmetic expression with propagated uncertainties",
    )
    parser.add_argument(
        "expression",
        help='Expression to evaluate, e.g. "(1.0 ± 0.1) * 3"; quote it as one argument',
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        result = calculate(args.expression)
    except CalcError as e:
        logger.warning("Failed to evaluate %r (%s error): %s", args.expression, e.kind.value, e)
        print(FAILURE_MESSAGE, file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    sys.exit(main())
