"""Polynomials - Decimal polynomial arithmetic and multiplication algorithms."""

from polynomials.complex_number import ComplexNumber
from polynomials.complex_polynomial import ComplexPolynomial, pointwise_multiply
from polynomials.config import DEFAULT_CONFIG, MultiplierConfig
from polynomials.display import format_polynomial, power_to_superscript
from polynomials.errors import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    PolynomialError,
)
from polynomials.fft import FFT, next_power_of_two
from polynomials.multiplier import (
    Strategy,
    multiply,
    multiply_fft,
    multiply_karatsuba,
    multiply_naive,
    normalize_product,
)
from polynomials.polynomial import Polynomial, PolynomialBuilder
from polynomials.sampling import random_coefficient, random_polynomial

__version__ = "1.0.0"

__all__ = [
    # Polynomial
    "Polynomial",
    "PolynomialBuilder",
    # Complex
    "ComplexNumber",
    "ComplexPolynomial",
    "pointwise_multiply",
    # FFT
    "FFT",
    "next_power_of_two",
    # Multiplication
    "Strategy",
    "multiply",
    "multiply_naive",
    "multiply_karatsuba",
    "multiply_fft",
    "normalize_product",
    # Configuration
    "MultiplierConfig",
    "DEFAULT_CONFIG",
    # Errors
    "PolynomialError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    # Presentation
    "format_polynomial",
    "power_to_superscript",
    # Sampling
    "random_polynomial",
    "random_coefficient",
]
