"""Polynomials with arbitrary-precision decimal coefficients.

A ``Polynomial`` is an immutable value holding ``Decimal`` coefficients keyed
by exponent. Exponents missing from the mapping are zero, so a polynomial such
as ``10x^5000 + 1`` stores two entries. Every operation returns a new
instance.

Invariants:
    - ``degree`` is the highest exponent with a non-zero coefficient
    - ``length == degree + 1``
    - the zero polynomial has ``degree == 0`` and reads 0 at index 0
"""

import numbers
from decimal import Decimal, ROUND_HALF_EVEN, ROUND_UP
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from polynomials.display import format_polynomial
from polynomials.errors import IndexOutOfRangeError, InvalidArgumentError
from polynomials.scalar import (
    ZERO,
    Number,
    divide,
    exact_context,
    quantize,
    scale_of,
    to_decimal,
)


class Polynomial:
    """Polynomial in coefficient form over ``Decimal``.

    ``Polynomial([3, -2, 1])`` is ``x² - 2x + 3``: index ``i`` of the input
    sequence is the coefficient of ``x^i``. An empty sequence gives the zero
    polynomial.
    """

    __slots__ = ("_terms", "_degree")

    def __init__(self, coefficients: Iterable[Number] = ()) -> None:
        terms = {i: to_decimal(c) for i, c in enumerate(coefficients)}
        self._init_terms(terms)

    @classmethod
    def _from_terms(cls, terms: Mapping[int, Decimal]) -> "Polynomial":
        """Wrap already-converted terms. ``terms`` must not be shared."""
        poly = cls.__new__(cls)
        poly._init_terms(terms)
        return poly

    def _init_terms(self, terms: Mapping[int, Decimal]) -> None:
        degree = max((e for e, c in terms.items() if c != 0), default=0)
        self._degree = degree
        self._terms: Dict[int, Decimal] = {e: c for e, c in terms.items() if e <= degree}

    # --- Accessors ---

    @property
    def degree(self) -> int:
        return self._degree

    @property
    def length(self) -> int:
        """Number of coefficients, ``degree + 1``."""
        return self._degree + 1

    def __len__(self) -> int:
        return self.length

    @property
    def coefficients(self) -> Tuple[Decimal, ...]:
        """Dense coefficients, constant term first."""
        return tuple(self._coefficient(i) for i in range(self.length))

    def __iter__(self) -> Iterator[Decimal]:
        return iter(self.coefficients)

    def get_coefficient(self, index: int) -> Decimal:
        """Return the coefficient of ``x^index``.

        Raises:
            IndexOutOfRangeError: ``index`` is negative or above ``degree``.
        """
        if index < 0 or index > self._degree:
            raise IndexOutOfRangeError(
                f"coefficient index {index} is out of valid bounds [0, {self._degree}]"
            )
        return self._coefficient(index)

    def _coefficient(self, index: int) -> Decimal:
        return self._terms.get(index, ZERO)

    @property
    def scale(self) -> int:
        """Scale of the constant coefficient."""
        return scale_of(self._coefficient(0))

    def is_uniformly_scaled(self) -> bool:
        """True if every stored non-zero coefficient has the constant term's scale."""
        scale = self.scale
        return all(scale_of(c) == scale for c in self._terms.values() if c != 0)

    # --- Evaluation ---

    def evaluate(self, x: Number) -> Decimal:
        """Evaluate at ``x`` with Horner's rule in exact decimal arithmetic.

        Raises:
            InvalidArgumentError: ``x`` is None or not a finite number.
        """
        if x is None:
            raise InvalidArgumentError("The x coordinate is None")
        x = to_decimal(x)

        with exact_context():
            value = self._coefficient(self._degree)
            for i in range(self._degree - 1, -1, -1):
                value = value * x + self._coefficient(i)
        return value

    # --- Arithmetic ---

    def sum(self, other: "Polynomial") -> "Polynomial":
        """Coefficient-wise sum; the shorter operand is zero-extended."""
        length = max(self.length, other.length)
        with exact_context():
            terms = {i: self._coefficient(i) + other._coefficient(i) for i in range(length)}
        return Polynomial._from_terms(terms)

    def negate(self) -> "Polynomial":
        with exact_context():
            terms = {e: -c for e, c in self._terms.items()}
        return Polynomial._from_terms(terms)

    def subtract(self, other: "Polynomial") -> "Polynomial":
        return self.sum(other.negate())

    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.sum(other)

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Polynomial":
        return self.negate()

    def shift(self, m: int) -> "Polynomial":
        """Multiply by ``x^m``.

        Raises:
            InvalidArgumentError: ``m`` is negative.
        """
        if m < 0:
            raise InvalidArgumentError(f"shift length must be non-negative, got {m}")
        if m == 0:
            return self
        terms = {e + m: c for e, c in self._terms.items()}
        return Polynomial._from_terms(terms)

    # --- Calculus ---

    def derivative(self) -> "Polynomial":
        """Coefficient of ``x^(p-1)`` becomes ``c_p * p``."""
        if self._degree == 0:
            return Polynomial()
        with exact_context():
            terms = {e - 1: c * e for e, c in self._terms.items() if e > 0}
        return Polynomial._from_terms(terms)

    def integral(self, constant: Number = ZERO, rounding: str = ROUND_UP) -> "Polynomial":
        """Antiderivative with integration constant ``constant``.

        The coefficient of ``x^(p+1)`` is ``c_p / (p + 1)``, rounded once to
        the scale of ``c_p`` using ``rounding``. The default, ``ROUND_UP``,
        rounds away from zero.

        Raises:
            InvalidArgumentError: ``constant`` is None or not a finite number.
        """
        if constant is None:
            raise InvalidArgumentError("The integration constant is None")
        terms = {0: to_decimal(constant)}
        for e, c in self._terms.items():
            terms[e + 1] = divide(c, e + 1, scale_of(c), rounding)
        return Polynomial._from_terms(terms)

    # --- Precision ---

    def set_scale(self, scale: int, rounding: str = ROUND_HALF_EVEN) -> "Polynomial":
        """Copy with every coefficient expressed at exactly ``scale`` fractional digits."""
        terms = {i: quantize(self._coefficient(i), scale, rounding) for i in range(self.length)}
        return Polynomial._from_terms(terms)

    def minimize_degree(self, epsilon: Number) -> "Polynomial":
        """Drop trailing coefficients whose magnitude is below ``epsilon``."""
        epsilon = to_decimal(epsilon)
        degree = self._degree
        while degree > 0 and self._coefficient(degree).copy_abs() < epsilon:
            degree -= 1
        if degree == self._degree:
            return self
        return Polynomial._from_terms({e: c for e, c in self._terms.items() if e <= degree})

    # --- Comparison ---

    def approximate_equals(self, other: Optional["Polynomial"], epsilon: Number) -> bool:
        """True iff every coefficient pair differs by less than ``epsilon``.

        Indices are compared over the union of both ranges, zero-extending the
        shorter polynomial.
        """
        if other is None:
            return False
        if other is self:
            return True
        epsilon = to_decimal(epsilon)
        length = max(self.length, other.length)
        with exact_context():
            return all(
                (self._coefficient(i) - other._coefficient(i)).copy_abs() < epsilon
                for i in range(length)
            )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._degree == other._degree and all(
            self._coefficient(i) == other._coefficient(i) for i in range(self.length)
        )

    def __hash__(self) -> int:
        return hash(self.coefficients)

    def __repr__(self) -> str:
        return f"Polynomial({[str(c) for c in self.coefficients]!r})"

    def __str__(self) -> str:
        return format_polynomial(self)


class PolynomialBuilder:
    """Accumulates ``(exponent, coefficient)`` pairs into a sparse polynomial.

    Coefficients may be ``Decimal``, ``int``, ``float`` (including numpy
    scalars) or decimal strings; they are converted to ``Decimal`` when added.
    Adding the same exponent twice keeps the last coefficient.

        >>> PolynomialBuilder().add(0, 3).add(2, 1.5).build()
        Polynomial(['3', '0', '1.5'])
    """

    def __init__(self) -> None:
        self._terms: Dict[int, Decimal] = {}
        self._max_exponent = 0

    @property
    def max_exponent(self) -> int:
        return self._max_exponent

    def add(self, exponent: int, coefficient: Number) -> "PolynomialBuilder":
        """Set the coefficient of ``x^exponent``.

        Raises:
            InvalidArgumentError: The exponent is negative or not an integer, or
                the coefficient is None, NaN or infinite.
        """
        if isinstance(exponent, bool) or not isinstance(exponent, numbers.Integral):
            raise InvalidArgumentError(f"exponent must be an integer, got {exponent!r}")
        exponent = int(exponent)
        if exponent < 0:
            raise InvalidArgumentError(f"exponent must be non-negative, got {exponent}")

        try:
            value = to_decimal(coefficient)
        except InvalidArgumentError as ex:
            raise InvalidArgumentError(f"{exponent}th coefficient: {ex}") from ex

        self._max_exponent = max(self._max_exponent, exponent)
        self._terms[exponent] = value
        return self

    def build(self) -> Polynomial:
        """Materialize the accumulated terms. An empty builder gives zero."""
        return Polynomial._from_terms(dict(self._terms))

    @classmethod
    def build_from(cls, *coefficients: Number) -> Polynomial:
        """Build from a dense argument list, constant term first."""
        builder = cls()
        for exponent, coefficient in enumerate(coefficients):
            builder.add(exponent, coefficient)
        return builder.build()
