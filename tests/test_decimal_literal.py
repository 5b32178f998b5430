"""
Tests for decimal literals.

These tests verify:
    - Splitting source digits around the decimal point
    - Conversion to float
    - Significant-figure counting
"""

import pytest
from scicalc.decimal_literal import DecimalLiteral, significant_figures


class TestParse:
    """Test splitting literal text into integral and fractional digits."""

    def test_integral_and_fractional(self):
        """'1.23' splits into '1' and '23'."""
        d = DecimalLiteral.parse("1.23")
        assert d.integral == "1"
        assert d.fractional == "23"

    def test_no_decimal_point(self):
        """Without a point the fractional part is empty."""
        d = DecimalLiteral.parse("42")
        assert d.integral == "42"
        assert d.fractional == ""

    def test_leading_point_defaults_integral_to_zero(self):
        """'.23' has integral part '0'."""
        d = DecimalLiteral.parse(".23")
        assert d == DecimalLiteral("0", "23")

    def test_literal_immutable(self):
        """Literals should be immutable."""
        d = DecimalLiteral.parse("1.5")
        with pytest.raises(AttributeError):
            d.integral = "2"

    def test_str_reproduces_digits(self):
        assert str(DecimalLiteral.parse("0.30")) == "0.30"
        assert str(DecimalLiteral.parse(".5")) == "0.5"
        assert str(DecimalLiteral.parse("7")) == "7"


class TestToFloat:
    """Test float conversion."""

    @pytest.mark.parametrize("text", ["0", "7", "42", "8921801298"])
    def test_integer_literals_match_float(self, text):
        """Literals without a point convert exactly like float()."""
        assert DecimalLiteral.parse(text).to_float() == float(text)

    def test_fractional_literal(self):
        assert DecimalLiteral.parse("13.095").to_float() == 13.095

    def test_leading_point_literal(self):
        assert DecimalLiteral.parse(".095").to_float() == 0.095

    def test_invalid_digits_raise(self):
        """Digits that are not a float cannot be converted."""
        with pytest.raises(ValueError):
            DecimalLiteral("1x", "").to_float()


class TestSignificantFigures:
    """Test significant-figure counting."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("81", 2),
            ("81.3", 3),
            ("0.3", 1),
            ("0.30", 2),
            ("0.3000", 4),
            ("0.00001", 1),
            ("380.0", 4),
            ("78800", 3),
            ("78800.0", 6),
            ("101", 3),
        ],
    )
    def test_counts(self, text, expected):
        assert significant_figures(text) == expected

    def test_method_matches_function(self):
        assert DecimalLiteral.parse("380.0").significant_figures() == 4
