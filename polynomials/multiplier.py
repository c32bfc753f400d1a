"""Polynomial multiplication strategies.

Three algorithms computing the same product:

- ``multiply_naive``: schoolbook convolution, O(N·M), exact
- ``multiply_karatsuba``: divide and conquer with three sub-products,
  O(N^log2(3)), exact
- ``multiply_fft``: cyclic convolution through a complex FFT, O(N log N),
  approximate

The FFT product carries floating-point noise from the roots of unity. Callers
compare it with the exact strategies only after ``normalize_product``, which
rounds to ``config.scale`` digits and strips trailing coefficients below
``config.epsilon``. ``multiply(..., strategy=Strategy.FFT)`` applies that
step itself.
"""

import logging
from enum import Enum
from typing import List, Optional, Tuple, Union

from polynomials.complex_polynomial import ComplexPolynomial, pointwise_multiply
from polynomials.config import DEFAULT_CONFIG, MultiplierConfig
from polynomials.errors import InvalidArgumentError
from polynomials.fft import FFT, next_power_of_two
from polynomials.polynomial import Polynomial
from polynomials.scalar import ZERO, bounded_context, exact_context

logger = logging.getLogger(__name__)


class Strategy(Enum):
    NAIVE = "naive"
    KARATSUBA = "karatsuba"
    FFT = "fft"


# --- Naive ---

def multiply_naive(p1: Polynomial, p2: Polynomial) -> Polynomial:
    """Schoolbook product: ``result[i + j] += a[i] * b[j]``."""
    a = p1.coefficients
    b = p2.coefficients
    result = [ZERO] * (len(a) + len(b) - 1)

    with exact_context():
        for i, ai in enumerate(a):
            for j, bj in enumerate(b):
                result[i + j] += ai * bj

    return Polynomial(result)


# --- Karatsuba ---

def multiply_karatsuba(p1: Polynomial, p2: Polynomial) -> Polynomial:
    """Karatsuba product.

    Both operands are zero-extended to a common length ``n`` and split at
    ``m = ceil(n / 2)`` into ``p = p_low + x^m · p_high``. With

        r1 = p_low · q_low
        r2 = p_high · q_high
        r3 = (p_low + p_high) · (q_low + q_high)

    the product is ``r1 + x^m · (r3 - r1 - r2) + x^(2m) · r2``. Operands of
    degree at most 1 go to ``multiply_naive``.
    """
    if max(p1.degree, p2.degree) <= 1:
        return multiply_naive(p1, p2)

    n = max(p1.length, p2.length)
    m = (n + 1) // 2
    p_low, p_high, q_low, q_high = _split(p1, p2, n, m)

    r1 = multiply_karatsuba(p_low, q_low)
    r2 = multiply_karatsuba(p_high, q_high)
    r3 = multiply_karatsuba(p_low + p_high, q_low + q_high)
    cross = r3 - r1 - r2

    return r1 + cross.shift(m) + r2.shift(2 * m)


def _split(
    p1: Polynomial, p2: Polynomial, n: int, m: int
) -> Tuple[Polynomial, Polynomial, Polynomial, Polynomial]:
    """Return ``(p1_low, p1_high, p2_low, p2_high)`` split at exponent ``m``."""
    a = _zero_extend(p1, n)
    b = _zero_extend(p2, n)
    return Polynomial(a[:m]), Polynomial(a[m:]), Polynomial(b[:m]), Polynomial(b[m:])


def _zero_extend(poly: Polynomial, n: int) -> List:
    coefficients = list(poly.coefficients)
    return coefficients + [ZERO] * (n - len(coefficients))


# --- FFT ---

def multiply_fft(
    p1: Polynomial, p2: Polynomial, config: Optional[MultiplierConfig] = None
) -> Polynomial:
    """Product via forward FFT, pointwise multiplication and inverse FFT.

    Both operands are padded to the smallest power of two ``N >= n1 + n2 - 1``
    so the cyclic convolution does not wrap around. The transform works with
    ``config.fft_precision`` significant digits.

    The result is raw: imaginary parts are dropped but no rounding or
    trimming is applied. Pass it through ``normalize_product`` before
    comparing with the exact strategies.
    """
    config = config or DEFAULT_CONFIG
    n = next_power_of_two(p1.length + p2.length - 1)
    logger.debug("fft multiply: lengths %d x %d, domain %d", p1.length, p2.length, n)

    with bounded_context(config.fft_precision):
        engine = FFT(n)
        a = engine.fft(ComplexPolynomial.from_polynomial(p1).pad(n))
        b = engine.fft(ComplexPolynomial.from_polynomial(p2).pad(n))
        product = engine.ifft(pointwise_multiply(a, b))

    return product.to_polynomial()


def normalize_product(product: Polynomial, config: Optional[MultiplierConfig] = None) -> Polynomial:
    """Round to ``config.scale`` digits, then drop trailing terms below ``config.epsilon``."""
    config = config or DEFAULT_CONFIG
    return product.set_scale(config.scale, config.rounding).minimize_degree(config.epsilon)


# --- Dispatch ---

def multiply(
    p1: Polynomial,
    p2: Polynomial,
    strategy: Union[Strategy, str] = Strategy.NAIVE,
    config: Optional[MultiplierConfig] = None,
) -> Polynomial:
    """Multiply with the chosen strategy. FFT products come back normalized.

    Raises:
        InvalidArgumentError: ``strategy`` is not a known strategy name.
    """
    try:
        strategy = Strategy(strategy)
    except ValueError as ex:
        raise InvalidArgumentError(f"Unknown multiplication strategy: {strategy!r}") from ex

    logger.debug("multiply via %s", strategy.value)
    if strategy is Strategy.NAIVE:
        return multiply_naive(p1, p2)
    if strategy is Strategy.KARATSUBA:
        return multiply_karatsuba(p1, p2)
    return normalize_product(multiply_fft(p1, p2, config), config)
