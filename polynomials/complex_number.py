"""Complex numbers with decimal parts, used by the FFT multiplier."""

import math
from decimal import Decimal, ROUND_HALF_EVEN
from typing import Optional

from polynomials.errors import InvalidArgumentError
from polynomials.scalar import ONE, ZERO, Number, divide, to_decimal


class ComplexNumber:
    """Immutable ``real + imag·i`` with ``Decimal`` parts.

    Arithmetic follows the ambient ``decimal`` context. Equality is exact and
    component-wise; tolerance is left to the caller.
    """

    __slots__ = ("_real", "_imag")

    def __init__(self, real: Number = ONE, imag: Number = ZERO) -> None:
        self._real = to_decimal(real)
        self._imag = to_decimal(imag)

    @property
    def real(self) -> Decimal:
        return self._real

    @property
    def imag(self) -> Decimal:
        return self._imag

    def add(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(self._real + other._real, self._imag + other._imag)

    def subtract(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(self._real - other._real, self._imag - other._imag)

    def negate(self) -> "ComplexNumber":
        return ComplexNumber(-self._real, -self._imag)

    def multiply(self, other: "ComplexNumber") -> "ComplexNumber":
        real = self._real * other._real - self._imag * other._imag
        imag = self._real * other._imag + self._imag * other._real
        return ComplexNumber(real, imag)

    def conjugate(self) -> "ComplexNumber":
        return ComplexNumber(self._real, -self._imag)

    def divide(
        self,
        other: "ComplexNumber",
        scale: Optional[int] = None,
        rounding: str = ROUND_HALF_EVEN,
    ) -> "ComplexNumber":
        """Divide by ``other``.

        With ``scale`` set, both parts are rounded once to that many fractional
        digits. Otherwise the ambient context precision applies.

        Raises:
            InvalidArgumentError: ``other`` is zero.
        """
        norm = other._real * other._real + other._imag * other._imag
        if norm == 0:
            raise InvalidArgumentError("Complex division by zero")

        numerator = self.multiply(other.conjugate())
        if scale is None:
            return ComplexNumber(numerator._real / norm, numerator._imag / norm)
        return ComplexNumber(
            divide(numerator._real, norm, scale, rounding),
            divide(numerator._imag, norm, scale, rounding),
        )

    def scale_down(self, n: int) -> "ComplexNumber":
        """Divide both parts by the integer ``n``."""
        return ComplexNumber(self._real / n, self._imag / n)

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __neg__ = negate

    def __truediv__(self, other: "ComplexNumber") -> "ComplexNumber":
        return self.divide(other)

    def to_complex(self) -> complex:
        return complex(float(self._real), float(self._imag))

    @staticmethod
    def root_of_unity(n: int, k: int = 1) -> "ComplexNumber":
        """Return ``ω^k`` for the principal n-th root ``ω = (cos 2π/n, sin 2π/n)``.

        The trigonometric values are floats, so this is where exact decimals
        turn into approximations.
        """
        assert n > 0, "Root order must be positive"
        angle = 2.0 * math.pi * k / n
        return ComplexNumber(math.cos(angle), math.sin(angle))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self._real == other._real and self._imag == other._imag

    def __hash__(self) -> int:
        return hash((self._real, self._imag))

    def __repr__(self) -> str:
        return f"ComplexNumber({str(self._real)!r}, {str(self._imag)!r})"
