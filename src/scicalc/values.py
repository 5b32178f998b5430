"""
Value algebra for scicalc.

Evaluation produces one of three value types:

    PosNumber(x)          x is known non-negative by construction
                          (literals, e, π)
    Number(x)             x may be negative
    Measurement(m, s)     value with a propagated uncertainty

Coercion rules for the binary operations:

    PosNumber ⊕ PosNumber  → PosNumber   for +, *, /
    PosNumber - PosNumber  → Number      (subtraction can go negative)
    any plain ⊕ Number     → Number
    anything ⊕ Measurement → Measurement (plain side has zero uncertainty)

Only a PosNumber is accepted as the uncertainty of the ± operator,
so ``2 ± (1 - 0.5)`` is rejected while ``2 ± 0.5`` is not.
"""

import math
from dataclasses import dataclass
from typing import Union

from .errors import DomainError
from .measurement import Measurement, ieee_div, ieee_pow, pow_measurement


@dataclass(frozen=True)
class PosNumber:
    """A plain number known to be non-negative."""
    value: float

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Number:
    """A plain number of unknown sign."""
    value: float

    def __str__(self) -> str:
        return str(self.value)


Value = Union[PosNumber, Number, Measurement]
PlainNumber = Union[PosNumber, Number]


def negate(x: Value) -> Value:
    if isinstance(x, Measurement):
        return -x
    # A negated PosNumber is no longer known to be non-negative
    return Number(-x.value)


def add(lhs: Value, rhs: Value) -> Value:
    if isinstance(lhs, Measurement) or isinstance(rhs, Measurement):
        return _operand(lhs) + _operand(rhs)
    if isinstance(lhs, PosNumber) and isinstance(rhs, PosNumber):
        return PosNumber(lhs.value + rhs.value)
    return Number(lhs.value + rhs.value)


def subtract(lhs: Value, rhs: Value) -> Value:
    if isinstance(lhs, Measurement) or isinstance(rhs, Measurement):
        return _operand(lhs) - _operand(rhs)
    return Number(lhs.value - rhs.value)


def multiply(lhs: Value, rhs: Value) -> Value:
    if isinstance(lhs, Measurement) or isinstance(rhs, Measurement):
        return _operand(lhs) * _operand(rhs)
    if isinstance(lhs, PosNumber) and isinstance(rhs, PosNumber):
        return PosNumber(lhs.value * rhs.value)
    return Number(lhs.value * rhs.value)


def divide(lhs: Value, rhs: Value) -> Value:
    if isinstance(rhs, Measurement):
        if not isinstance(lhs, Measurement):
            lhs = Measurement.from_value(lhs.value)
        return lhs / rhs
    if isinstance(lhs, Measurement):
        return lhs / rhs.value
    if isinstance(lhs, PosNumber) and isinstance(rhs, PosNumber):
        return PosNumber(ieee_div(lhs.value, rhs.value))
    return Number(ieee_div(lhs.value, rhs.value))


def power(base: Value, exponent: Value) -> Value:
    """
    Raise ``base`` to ``exponent``.

    Raises:
        DomainError: If the base is negative and the exponent is fractional
            or a Measurement, or if the base is a Measurement whose lower
            bound (mean - sigma) is negative
    """
    if isinstance(base, Measurement):
        if base.lower_bound < 0:
            raise DomainError(
                f"Cannot raise {base} to a power: its lower bound {base.lower_bound} is negative"
            )
        return pow_measurement(base, _lift(exponent))

    x = base.value
    # nan follows IEEE pow rules instead of the negative-base checks
    if x >= 0 or math.isnan(x):
        if isinstance(exponent, Measurement):
            return pow_measurement(Measurement.from_value(x), exponent)
        result = ieee_pow(x, exponent.value)
        if isinstance(base, PosNumber):
            return PosNumber(result)
        return Number(result)

    if isinstance(exponent, Measurement):
        raise DomainError(f"Cannot raise negative number {x} to the uncertain power {exponent}")
    if not float(exponent.value).is_integer():
        raise DomainError(f"Cannot raise negative number {x} to the fractional power {exponent.value}")
    return Number(ieee_pow(x, exponent.value))


def plus_minus(mean: Value, sigma: Value) -> Measurement:
    """
    Build a measurement from ``mean ± sigma``.

    Raises:
        DomainError: If sigma is not a PosNumber, is nan, or mean is a
            Measurement
    """
    if not isinstance(sigma, PosNumber) or math.isnan(sigma.value):
        raise DomainError(
            f"Uncertainty after '±' must be a non-negative number, got {_describe(sigma)}"
        )
    if isinstance(mean, Measurement):
        raise DomainError(f"Value before '±' must be a plain number, got {_describe(mean)}")
    return Measurement(mean.value, sigma.value)


def _operand(x: Value) -> Union[Measurement, float]:
    # Plain numbers enter Measurement arithmetic as exact scalars
    if isinstance(x, Measurement):
        return x
    return x.value


def _lift(x: Value) -> Measurement:
    if isinstance(x, Measurement):
        return x
    return Measurement.from_value(x.value)


def _describe(x: Value) -> str:
    if isinstance(x, Measurement):
        return f"measurement {x}"
    if math.isnan(x.value):
        return f"undefined number {x}"
    if x.value >= 0:
        return f"computed number {x}"
    return f"negative number {x}"


__all__ = [
    "Number",
    "PlainNumber",
    "PosNumber",
    "Value",
    "add",
    "divide",
    "multiply",
    "negate",
    "plus_minus",
    "power",
    "subtract",
]
