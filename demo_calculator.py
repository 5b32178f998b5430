#!/usr/bin/env python3
"""
Demo: Evaluate expressions with measurement uncertainty.

Shows the parsed tree, its canonical infix form and the result
for a few sample expressions.
"""

from scicalc.backends import to_infix
from scicalc.errors import CalcError
from scicalc.evaluator import evaluate
from scicalc.measurement import Measurement
from scicalc.parser import parse_expression


EXPRESSIONS = [
    "1 + 2 * 3",
    "(1.0 ± 0.1) * (3.0 ± 0.1)",
    "1.75 +- 0.01 - 0.5 +- 0.001",
    "2 * π * (0.30 ± 0.01)",
    "(4.0 ± 0.2) ^ 0.5",
    "2.0 ± -1.0",
]


def main():
    print("=" * 80)
    print("MEASUREMENT ARITHMETIC")
    print("=" * 80)

    height = Measurement(1.75, 0.01)
    increment = Measurement(0.5, 0.001)
    print(f"Height:     {height}")
    print(f"Increment:  {increment}")
    print(f"New height: {height + increment}")

    print("\n" + "=" * 80)
    print("EXPRESSION EVALUATION")
    print("=" * 80)

    for text in EXPRESSIONS:
        print(f"\n{text}")
        print("-" * 80)
        try:
            tree = parse_expression(text)
            print(f"  tree:   {tree}")
            print(f"  infix:  {to_infix(tree)}")
            print(f"  result: {evaluate(tree)}")
        except CalcError as e:
            print(f"  {e.kind.value} error: {e}")


if __name__ == "__main__":
    main()
