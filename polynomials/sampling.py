"""Random polynomials with bounded integer coefficients.

Used by the test suite and by ``profile_multiply.py``.
"""

from decimal import Decimal
from typing import Optional

import numpy as np

from polynomials.polynomial import Polynomial, PolynomialBuilder

POLYNOMIAL_LENGTH = 10
MIN_COEFFICIENT = -10
MAX_COEFFICIENT = 10


def random_coefficient(
    rng: np.random.Generator,
    min_coefficient: int = MIN_COEFFICIENT,
    max_coefficient: int = MAX_COEFFICIENT,
) -> Decimal:
    """Uniform integer coefficient in ``[min_coefficient, max_coefficient]``."""
    return Decimal(int(rng.integers(min_coefficient, max_coefficient, endpoint=True)))


def random_polynomial(
    rng: np.random.Generator,
    length: Optional[int] = POLYNOMIAL_LENGTH,
    min_coefficient: int = MIN_COEFFICIENT,
    max_coefficient: int = MAX_COEFFICIENT,
) -> Polynomial:
    """Polynomial with ``length`` random coefficients.

    With ``length=None`` the length itself is drawn from ``[1, POLYNOMIAL_LENGTH]``.
    The degree can come out lower than ``length - 1`` when the top
    coefficients happen to be zero.
    """
    if length is None:
        length = int(rng.integers(1, POLYNOMIAL_LENGTH, endpoint=True))

    builder = PolynomialBuilder()
    for exponent in range(length):
        builder.add(exponent, random_coefficient(rng, min_coefficient, max_coefficient))
    return builder.build()
