"""
Decimal literals as written in the source text.

A literal keeps its source digits, split around the decimal point:

    3.14159265  →  integral = "3", fractional = "14159265"
    .23         →  integral = "0", fractional = "23"
    42          →  integral = "42", fractional = ""

Keeping the digits (instead of converting straight to float) preserves
significant-figure information.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DecimalLiteral:
    """
    Integral and fractional digits of a numeric literal.

    Properties:
        integral: Digits before the decimal point (never empty)
        fractional: Digits after the decimal point ("" when there is no point)
    """

    integral: str
    fractional: str = ""

    @classmethod
    def parse(cls, text: str) -> "DecimalLiteral":
        """Split ``text`` on its first decimal point."""
        integral, point, fractional = text.partition(".")
        if not point:
            return cls(integral=integral, fractional="")
        return cls(integral=integral or "0", fractional=fractional)

    def to_float(self) -> float:
        """
        Convert to a float.

        Raises:
            ValueError: If the digits do not form a valid float
        """
        return float(str(self))

    def significant_figures(self) -> int:
        """
        Count significant figures.

        Leading zeros never count. Trailing zeros of the integral part
        count only when a decimal point is present:
            "78800"   → 3
            "78800.0" → 6
        """
        digits = self.integral.lstrip("0")
        if not self.fractional:
            return len(digits.rstrip("0"))
        if digits:
            return len(digits) + len(self.fractional)
        return len(self.fractional.lstrip("0"))

    def __str__(self) -> str:
        if self.fractional:
            return f"{self.integral}.{self.fractional}"
        return self.integral


def significant_figures(text: str) -> int:
    """Count the significant figures of a decimal literal given as text."""
    return DecimalLiteral.parse(text).significant_figures()
