"""
Tests for measurements and uncertainty propagation.

These tests verify:
    - Propagation laws for +, -, *, / and ^
    - Mixed arithmetic with plain numbers
    - Exact and approximate equality
    - IEEE-754 behaviour for zero means
"""

import math

import pytest
from scicalc.measurement import (
    DEFAULT_MARGIN,
    Margin,
    Measurement,
    pow_measurement,
    quadrature,
)


X = Measurement(1.0, 0.01)
Y = Measurement(2.0, 0.01)


class TestBasicOperations:
    """Test measurement-measurement arithmetic."""

    def test_add(self):
        expected = Measurement(3.0, math.sqrt(0.0002))
        assert expected.approx_eq(X + Y)

    def test_sub(self):
        expected = Measurement(-1.0, math.sqrt(0.0002))
        assert expected.approx_eq(X - Y)

    def test_mul(self):
        expected = Measurement(2.0, 2.0 * math.sqrt(quadrature(0.01 / 1.0, 0.01 / 2.0)))
        assert expected.approx_eq(X * Y)

    def test_div(self):
        expected = Measurement(0.5, 0.5 * math.sqrt(quadrature(0.01 / 1.0, 0.01 / 2.0)))
        assert expected.approx_eq(X / Y)

    def test_neg_keeps_sigma(self):
        assert -Measurement(1.0, 0.1) == Measurement(-1.0, 0.1)

    def test_mul_sigma_non_negative_for_negative_result(self):
        result = Measurement(-2.0, 0.1) * Measurement(3.0, 0.1)
        assert result.mean == -6.0
        assert result.sigma > 0


class TestPropagationLaws:
    """Test the quadrature rules for independent operands."""

    @pytest.mark.parametrize(
        "a, b",
        [
            (Measurement(1.0, 0.1), Measurement(3.0, 0.1)),
            (Measurement(10.0, 0.5), Measurement(0.2, 0.01)),
            (Measurement(-4.0, 0.3), Measurement(7.5, 1.0)),
        ],
    )
    def test_add_sigma(self, a, b):
        assert (a + b).sigma == pytest.approx(math.sqrt(a.sigma ** 2 + b.sigma ** 2))

    @pytest.mark.parametrize(
        "a, b",
        [
            (Measurement(1.0, 0.1), Measurement(3.0, 0.1)),
            (Measurement(10.0, 0.5), Measurement(0.2, 0.01)),
        ],
    )
    def test_mul_relative_sigma(self, a, b):
        product = a * b
        relative = math.sqrt((a.sigma / a.mean) ** 2 + (b.sigma / b.mean) ** 2)
        assert product.sigma / product.mean == pytest.approx(relative)


class TestScalarOperations:
    """Test arithmetic with plain numbers (zero uncertainty)."""

    def test_add_scalar_keeps_sigma(self):
        assert Measurement(2.0, 0.1) + 1.0 == Measurement(3.0, 0.1)
        assert 1.0 + Measurement(2.0, 0.1) == Measurement(3.0, 0.1)

    def test_sub_scalar_keeps_sigma(self):
        assert Measurement(2.0, 0.1) - 1.0 == Measurement(1.0, 0.1)
        assert 1.0 - Measurement(2.0, 0.1) == Measurement(-1.0, 0.1)

    def test_mul_scalar_scales_sigma_by_magnitude(self):
        assert Measurement(2.0, 0.1) * -3.0 == Measurement(-6.0, 0.1 * 3.0)

    def test_mul_scalar_at_zero_mean(self):
        assert Measurement(0.0, 0.1) * 2.0 == Measurement(0.0, 0.2)

    def test_div_scalar(self):
        assert Measurement(4.0, 0.2) / 2.0 == Measurement(2.0, 0.1)

    def test_scalar_divided_by_measurement(self):
        assert Measurement(2.0, 0.1).approx_eq(4.0 / Measurement(2.0, 0.1))

    def test_zero_divided_by_measurement(self):
        assert 0.0 / Measurement(2.0, 0.1) == Measurement(0.0, 0.0)

    def test_from_value(self):
        assert Measurement.from_value(3) == Measurement(3.0, 0.0)


class TestZeroMean:
    """Test division by a zero mean."""

    def test_division_by_zero_mean_is_non_finite(self):
        result = Measurement(1.0, 0.1) / Measurement(0.0, 0.1)
        assert math.isinf(result.mean)
        assert not math.isfinite(result.sigma)

    def test_division_by_zero_scalar_does_not_raise(self):
        result = Measurement(1.0, 0.1) / 0.0
        assert math.isinf(result.mean)


class TestPow:
    """Test exponentiation through partial derivatives."""

    def test_simple_pow(self):
        assert pow_measurement(Measurement.from_value(2.0), Measurement.from_value(3.0)) == Measurement(8.0, 0.0)

    def test_negative_pow(self):
        assert pow_measurement(Measurement.from_value(2.0), Measurement.from_value(-3.0)) == Measurement(1.0 / 8.0, 0.0)

    def test_base_uncertainty(self):
        """d(x^3)/dx = 3x^2 = 12 at x = 2."""
        result = Measurement(2.0, 0.1) ** 3.0
        assert result.approx_eq(Measurement(8.0, 12.0 * 0.1))

    def test_exponent_uncertainty(self):
        """d(2^y)/dy = ln(2) * 2^y."""
        result = 2.0 ** Measurement(3.0, 0.1)
        assert result.approx_eq(Measurement(8.0, math.log(2.0) * 8.0 * 0.1))

    def test_both_uncertain(self):
        x = Measurement(4.0, 0.2)
        y = Measurement(0.5, 0.1)
        dfdx = 0.5 * 4.0 ** -0.5
        dfdy = math.log(4.0) * 2.0
        expected = Measurement(2.0, math.sqrt((dfdx * 0.2) ** 2 + (dfdy * 0.1) ** 2))
        assert (x ** y).approx_eq(expected)

    def test_exact_zero_base(self):
        """An exact zero base has no uncertainty to propagate."""
        assert Measurement(0.0, 0.0) ** 2.0 == Measurement(0.0, 0.0)


class TestEquality:
    """Test exact and approximate equality."""

    def test_exact_equality(self):
        assert Measurement(1.0, 0.01) == Measurement(1.0, 0.01)
        assert Measurement(1.0, 0.01) != Measurement(1.0, 0.02)

    def test_approximate_equality(self):
        x = Measurement(1.0, 0.01)
        y = Measurement(1.0, 0.001)
        x_prime = Measurement(1.0, 2.0 * 0.005)

        assert x.approx_eq(x)
        assert not x.approx_eq(y)
        assert x.approx_eq(x_prime)

    def test_floating_point_noise(self):
        assert Measurement(0.1 + 0.2, 0.1).approx_eq(Measurement(0.3, 0.1))

    def test_custom_margin(self):
        a = Measurement(1.0, 0.1)
        b = Measurement(1.05, 0.1)
        assert not a.approx_eq(b)
        assert a.approx_eq(b, Margin(rel_tol=0.1))

    def test_margin_checks_mean_and_sigma(self):
        margin = Margin(rel_tol=0.0, abs_tol=0.01)
        assert Measurement(1.0, 0.1).approx_eq(Measurement(1.005, 0.105), margin)
        assert not Measurement(1.0, 0.1).approx_eq(Measurement(1.0, 0.2), margin)

    def test_default_margin(self):
        assert DEFAULT_MARGIN == Margin()

    def test_immutable(self):
        with pytest.raises(AttributeError):
            X.mean = 3.0


class TestDisplay:
    def test_str(self):
        assert str(Measurement(1.0, 2.0)) == "1.0 ± 2.0"
