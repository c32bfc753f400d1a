"""Polynomials over ``ComplexNumber``, the scratch representation of the FFT."""

from typing import Iterable, Iterator, Sequence, Tuple, overload

import numpy as np

from polynomials.complex_number import ComplexNumber
from polynomials.polynomial import Polynomial

_ZERO = ComplexNumber(0, 0)


class ComplexPolynomial:
    """Immutable sequence of complex coefficients, index = exponent.

    Unlike ``Polynomial`` the length is not trimmed to the degree: trailing
    zeros are kept so that transforms see the padded size.
    """

    __slots__ = ("_coefficients",)

    def __init__(self, coefficients: Iterable[ComplexNumber] = ()) -> None:
        self._coefficients: Tuple[ComplexNumber, ...] = tuple(coefficients)

    @classmethod
    def zeros(cls, length: int) -> "ComplexPolynomial":
        return cls([_ZERO] * length)

    @classmethod
    def from_polynomial(cls, poly: Polynomial) -> "ComplexPolynomial":
        """Lift real coefficients with zero imaginary parts."""
        return cls(ComplexNumber(c, 0) for c in poly.coefficients)

    @classmethod
    def from_numpy(cls, values: np.ndarray) -> "ComplexPolynomial":
        return cls(ComplexNumber(float(v.real), float(v.imag)) for v in np.asarray(values, dtype=np.complex128))

    # --- Sequence protocol ---

    def __len__(self) -> int:
        return len(self._coefficients)

    @overload
    def __getitem__(self, index: int) -> ComplexNumber: ...

    @overload
    def __getitem__(self, index: slice) -> "ComplexPolynomial": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ComplexPolynomial(self._coefficients[index])
        return self._coefficients[index]

    def __iter__(self) -> Iterator[ComplexNumber]:
        return iter(self._coefficients)

    # --- Padding ---

    def pad(self, length: int) -> "ComplexPolynomial":
        """Zero-extend to ``length`` coefficients. Never truncates."""
        if length <= len(self):
            return self
        return ComplexPolynomial(self._coefficients + (_ZERO,) * (length - len(self)))

    def grow_to_power_of_two(self) -> "ComplexPolynomial":
        n = 1
        while n < len(self):
            n *= 2
        return self.pad(n)

    # --- Decimation ---

    def split(self) -> Tuple["ComplexPolynomial", "ComplexPolynomial"]:
        """Split into (even-indexed, odd-indexed) coefficients."""
        return (
            ComplexPolynomial(self._coefficients[0::2]),
            ComplexPolynomial(self._coefficients[1::2]),
        )

    @classmethod
    def join(cls, even: "ComplexPolynomial", odd: "ComplexPolynomial") -> "ComplexPolynomial":
        """Interleave ``even`` and ``odd``; the inverse of ``split``."""
        assert len(even) - len(odd) in (0, 1), "even/odd lengths do not come from a split"
        merged = []
        for i, c in enumerate(even):
            merged.append(c)
            if i < len(odd):
                merged.append(odd[i])
        return cls(merged)

    # --- Conversion ---

    def to_polynomial(self) -> Polynomial:
        """Drop imaginary parts. The result's degree is recomputed."""
        return Polynomial(c.real for c in self._coefficients)

    def to_numpy(self) -> np.ndarray:
        return np.array([c.to_complex() for c in self._coefficients], dtype=np.complex128)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexPolynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __hash__(self) -> int:
        return hash(self._coefficients)

    def __repr__(self) -> str:
        return f"ComplexPolynomial({list(self._coefficients)!r})"


def pointwise_multiply(a: Sequence[ComplexNumber], b: Sequence[ComplexNumber]) -> ComplexPolynomial:
    """Element-wise complex product of two equal-length sequences."""
    if len(a) != len(b):
        raise ValueError(f"Length mismatch: {len(a)} vs {len(b)}")
    return ComplexPolynomial(x * y for x, y in zip(a, b))
