"""
Measurements with propagated uncertainty.

A measurement ``x`` is written ``x = (mean ± sigma)`` where ``mean`` is the
central value and ``sigma`` the standard uncertainty.

Propagation assumes independent operands (first-order, linear):

    x ± y     mean: mx ± my      sigma: sqrt(sx² + sy²)
    x * / y   mean: mx * / my    sigma: sqrt((sx/mx)² + (sy/my)²) * |mean|
    x ^ y     mean: mx ^ my      sigma: sqrt((df/dx·sx)² + (df/dy·sy)²)

Plain floats act as zero-uncertainty measurements.

Float arithmetic follows IEEE-754: dividing by a zero mean yields
inf/nan instead of raising.
"""

import math
from dataclasses import dataclass
from typing import Union

Real = Union[int, float]


@dataclass(frozen=True)
class Margin:
    """
    Tolerance for approximate comparisons (see ``math.isclose``).

    Properties:
        rel_tol: Maximum relative difference
        abs_tol: Maximum absolute difference, for values near zero
    """

    rel_tol: float = 1e-9
    abs_tol: float = 1e-12

    def close(self, a: float, b: float) -> bool:
        return math.isclose(a, b, rel_tol=self.rel_tol, abs_tol=self.abs_tol)


DEFAULT_MARGIN = Margin()


def quadrature(x: float, y: float) -> float:
    """Sum of squares; the square root of this is the combined uncertainty."""
    return x * x + y * y


def ieee_div(x: float, y: float) -> float:
    """Divide, returning ±inf or nan for a zero divisor."""
    try:
        return x / y
    except ZeroDivisionError:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)


def ieee_pow(x: float, y: float) -> float:
    """Real power, returning inf/nan where ``**`` would raise."""
    try:
        result = x ** y
    except ZeroDivisionError:
        # 0 ** negative
        return math.inf
    except OverflowError:
        if x < 0 and float(y).is_integer() and y % 2 == 1:
            return -math.inf
        return math.inf
    if isinstance(result, complex):
        return math.nan
    return result


def ieee_log(x: float) -> float:
    """Natural logarithm, returning -inf for 0 and nan for negative input."""
    if x == 0:
        return -math.inf
    if x < 0:
        return math.nan
    return math.log(x)


def _relative(sigma: float, mean: float) -> float:
    # Exact values carry no relative uncertainty, even at a zero mean
    if sigma == 0:
        return 0.0
    return ieee_div(sigma, mean)


@dataclass(frozen=True)
class Measurement:
    """
    A value with an uncertainty.

    Properties:
        mean: Central value
        sigma: Standard uncertainty (error, standard deviation)

    IMPORTANT:
        Equality is exact on (mean, sigma).
        Use approx_eq() to compare computed results.
    """

    mean: float
    sigma: float = 0.0

    @classmethod
    def from_value(cls, x: Real) -> "Measurement":
        """An exact value as a zero-uncertainty measurement."""
        return cls(float(x), 0.0)

    @property
    def lower_bound(self) -> float:
        return self.mean - self.sigma

    def approx_eq(self, other: "Measurement", margin: Margin = DEFAULT_MARGIN) -> bool:
        """Mean and sigma are each within ``margin`` of the other's."""
        return margin.close(self.mean, other.mean) and margin.close(self.sigma, other.sigma)

    def __neg__(self) -> "Measurement":
        return Measurement(-self.mean, self.sigma)

    def __add__(self, other):
        if isinstance(other, Measurement):
            return Measurement(
                self.mean + other.mean,
                math.sqrt(quadrature(self.sigma, other.sigma)),
            )
        if isinstance(other, (int, float)):
            return Measurement(self.mean + other, self.sigma)
        return NotImplemented

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, Measurement):
            return Measurement(
                self.mean - other.mean,
                math.sqrt(quadrature(self.sigma, other.sigma)),
            )
        if isinstance(other, (int, float)):
            return Measurement(self.mean - other, self.sigma)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, (int, float)):
            return Measurement(other - self.mean, self.sigma)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Measurement):
            mean = self.mean * other.mean
            relative = quadrature(
                _relative(self.sigma, self.mean), _relative(other.sigma, other.mean)
            )
            return Measurement(mean, math.sqrt(relative) * abs(mean))
        if isinstance(other, (int, float)):
            return Measurement(self.mean * other, self.sigma * abs(other))
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, Measurement):
            mean = ieee_div(self.mean, other.mean)
            relative = quadrature(
                _relative(self.sigma, self.mean), _relative(other.sigma, other.mean)
            )
            return Measurement(mean, math.sqrt(relative) * abs(mean))
        if isinstance(other, (int, float)):
            return Measurement(ieee_div(self.mean, other), ieee_div(self.sigma, abs(other)))
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, (int, float)):
            return Measurement.from_value(other) / self
        return NotImplemented

    def __pow__(self, other):
        if isinstance(other, Measurement):
            return pow_measurement(self, other)
        if isinstance(other, (int, float)):
            return pow_measurement(self, Measurement.from_value(other))
        return NotImplemented

    def __rpow__(self, other):
        if isinstance(other, (int, float)):
            return pow_measurement(Measurement.from_value(other), self)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.mean} ± {self.sigma}"


def pow_measurement(x: Measurement, y: Measurement) -> Measurement:
    """
    Raise ``x`` to the power ``y`` with first-order error propagation.

        df/dx = y · x^(y-1)
        df/dy = ln(x) · x^y

    Domain checks (negative bases) belong to the caller.
    """
    mean = ieee_pow(x.mean, y.mean)

    dx_term = 0.0
    if x.sigma != 0:
        dx_term = y.mean * ieee_pow(x.mean, y.mean - 1.0) * x.sigma
    dy_term = 0.0
    if y.sigma != 0:
        dy_term = ieee_log(x.mean) * mean * y.sigma

    return Measurement(mean, math.sqrt(quadrature(dx_term, dy_term)))


__all__ = [
    "DEFAULT_MARGIN",
    "Margin",
    "Measurement",
    "pow_measurement",
    "quadrature",
]
