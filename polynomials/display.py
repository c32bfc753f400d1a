"""Human-readable rendering of polynomials.

    >>> format_polynomial(Polynomial([12, -5, 2, 1]))
    '1x³ + 2x² - 5x + 12'
"""

from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from polynomials.polynomial import Polynomial

SUPERSCRIPT_DIGITS = {
    "0": "⁰",
    "1": "¹",
    "2": "²",
    "3": "³",
    "4": "⁴",
    "5": "⁵",
    "6": "⁶",
    "7": "⁷",
    "8": "⁸",
    "9": "⁹",
}


def power_to_superscript(power: int) -> str:
    """Render an exponent as superscript digits."""
    return "".join(SUPERSCRIPT_DIGITS[ch] for ch in str(power))


def _variable(power: int) -> str:
    if power == 0:
        return ""
    if power == 1:
        return "x"
    return "x" + power_to_superscript(power)


def format_polynomial(poly: "Polynomial") -> str:
    """Render terms in descending exponent order, skipping zero terms.

    The leading term keeps its own sign; later terms are joined with
    `` + `` or `` - `` and printed by magnitude.
    """
    if poly.degree == 0:
        return str(poly.get_coefficient(0))

    parts = []
    for power in range(poly.degree, -1, -1):
        coefficient: Decimal = poly.get_coefficient(power)
        if not parts:
            parts.append(f"{coefficient}{_variable(power)}")
        elif coefficient > 0:
            parts.append(f" + {coefficient}{_variable(power)}")
        elif coefficient < 0:
            parts.append(f" - {coefficient.copy_abs()}{_variable(power)}")

    return "".join(parts)
