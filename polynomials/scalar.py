"""Decimal scalars for polynomial coefficients.

Coefficients are ``decimal.Decimal`` values. A coefficient's *scale* is the
number of fractional digits it carries (``Decimal("1.50")`` has scale 2,
``Decimal("1E+2")`` has scale -2).

Addition, subtraction and multiplication of coefficients run inside
``exact_context()``, whose precision is large enough that no rounding ever
happens. Division is only performed through ``divide``, which rounds exactly
once to an explicit scale.
"""

import decimal
import math
import numbers
from decimal import Decimal, ROUND_HALF_EVEN
from fractions import Fraction
from typing import Union

from polynomials.errors import InvalidArgumentError

Number = Union[Decimal, int, float, str, numbers.Real]

ZERO = Decimal(0)
ONE = Decimal(1)

# --- Contexts ---

_EXACT = decimal.Context(
    prec=decimal.MAX_PREC,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
)


def exact_context():
    """Context manager under which add/sub/mul of finite decimals never round."""
    return decimal.localcontext(_EXACT)


def bounded_context(precision: int):
    """Context manager with ``precision`` significant digits."""
    assert precision > 0, "Precision must be positive"
    return decimal.localcontext(decimal.Context(prec=precision))


# --- Conversion ---

def to_decimal(value: Number) -> Decimal:
    """Convert a supported numeric value to a finite ``Decimal``.

    Floats go through their shortest repr, so ``0.1`` becomes ``Decimal("0.1")``
    and ``2.0`` becomes ``Decimal("2.0")``.

    Raises:
        InvalidArgumentError: ``value`` is None, NaN, infinite or not numeric.
    """
    if value is None:
        raise InvalidArgumentError("Expected a number, got None")
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Expected a number, got bool {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, numbers.Integral):
        result = Decimal(int(value))
    elif isinstance(value, numbers.Real):
        as_float = float(value)
        if math.isnan(as_float):
            raise InvalidArgumentError("Coefficient is NaN")
        if math.isinf(as_float):
            raise InvalidArgumentError(f"Coefficient is infinite: {as_float}")
        result = Decimal(repr(as_float))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except decimal.InvalidOperation as ex:
            raise InvalidArgumentError(f"Not a decimal literal: {value!r}") from ex
    else:
        raise InvalidArgumentError(f"Unsupported numeric type: {type(value).__name__}")

    if result.is_nan():
        raise InvalidArgumentError("Coefficient is NaN")
    if result.is_infinite():
        raise InvalidArgumentError(f"Coefficient is infinite: {result}")
    return result


# --- Scale ---

def scale_of(value: Decimal) -> int:
    """Number of fractional digits of ``value``."""
    return -value.as_tuple().exponent


def quantize(value: Decimal, scale: int, rounding: str = ROUND_HALF_EVEN) -> Decimal:
    """Re-express ``value`` with exactly ``scale`` fractional digits."""
    with exact_context():
        return value.quantize(ONE.scaleb(-scale), rounding=rounding)


def divide(
    dividend: Decimal,
    divisor: Union[Decimal, int],
    scale: int,
    rounding: str = ROUND_HALF_EVEN,
) -> Decimal:
    """Divide and round once to ``scale`` fractional digits.

    The exact quotient is truncated to ``scale + 1`` digits, with the last digit
    replaced by a sticky digit (0 exact, 5 exact half, 1 below half, 9 above
    half). Quantizing that value gives the same result as rounding the exact
    quotient directly, for every rounding mode.

    Raises:
        InvalidArgumentError: ``divisor`` is zero.
    """
    divisor = Fraction(divisor)
    if divisor == 0:
        raise InvalidArgumentError("Division by zero")

    exact = Fraction(dividend) / divisor * Fraction(10) ** scale
    negative = exact < 0
    numerator, denominator = abs(exact.numerator), exact.denominator
    quotient, remainder = divmod(numerator, denominator)

    if remainder == 0:
        sticky = 0
    elif 2 * remainder == denominator:
        sticky = 5
    elif 2 * remainder < denominator:
        sticky = 1
    else:
        sticky = 9

    with exact_context():
        digits = Decimal(quotient * 10 + sticky).scaleb(-(scale + 1))
        if negative:
            digits = -digits
    return quantize(digits, scale, rounding)
