"""Radix-2 Fast Fourier Transform over ``ComplexNumber`` sequences."""

import logging
from typing import List

from polynomials.complex_number import ComplexNumber
from polynomials.complex_polynomial import ComplexPolynomial

logger = logging.getLogger(__name__)

# --- FFT Engine ---

class FFT:
    """Recursive decimation-in-time FFT for a fixed power-of-two domain.

    The forward transform evaluates at powers of ``ω = (cos 2π/N, sin 2π/N)``;
    the inverse uses ``ω̄`` and divides by ``N``. Arithmetic follows the
    ambient ``decimal`` context, so callers choose the working precision.
    """

    def __init__(self, domain_size: int) -> None:
        """Initialize FFT engine for given domain size."""
        assert domain_size > 0, "Domain size must be positive"
        assert (domain_size & (domain_size - 1)) == 0, "Domain size must be power of 2"

        self.n = domain_size
        self.n_bits = _log2(domain_size)

        # Twiddle factors for the full domain; level L uses every (N/L)-th one
        self.roots = _precompute_roots(domain_size)
        self.roots_inv = [w.conjugate() for w in self.roots]

    def fft(self, coeffs: ComplexPolynomial) -> ComplexPolynomial:
        """Forward FFT: coefficients -> evaluations."""
        assert len(coeffs) == self.n, f"Length mismatch: {len(coeffs)} != {self.n}"
        logger.debug("forward transform, n=%d", self.n)
        return self._transform(coeffs, self.roots)

    def ifft(self, evals: ComplexPolynomial) -> ComplexPolynomial:
        """Inverse FFT: evaluations -> coefficients (divided by N)."""
        assert len(evals) == self.n, f"Length mismatch: {len(evals)} != {self.n}"
        logger.debug("inverse transform, n=%d", self.n)
        result = self._transform(evals, self.roots_inv)
        return ComplexPolynomial(c.scale_down(self.n) for c in result)

    def _transform(self, values: ComplexPolynomial, roots: List[ComplexNumber]) -> ComplexPolynomial:
        size = len(values)
        if size == 1:
            return values

        even, odd = values.split()
        even = self._transform(even, roots)
        odd = self._transform(odd, roots)

        half = size // 2
        stride = self.n // size
        result = [None] * size
        for k in range(half):
            t = roots[k * stride] * odd[k]
            result[k] = even[k] + t
            result[k + half] = even[k] - t
        return ComplexPolynomial(result)


# --- Helpers ---

def next_power_of_two(n: int) -> int:
    """Smallest power of two that is >= n (1 for n <= 1)."""
    m = 1
    while m < n:
        m *= 2
    return m


def _log2(size: int) -> int:
    """Compute log2 of size (must be power of 2)."""
    assert size != 0
    res = 0
    while size != 1:
        size >>= 1
        res += 1
    return res


def _precompute_roots(n_roots: int) -> List[ComplexNumber]:
    """Precompute roots of unity: roots[k] = ω^k for the principal n-th root."""
    return [ComplexNumber.root_of_unity(n_roots, k) for k in range(n_roots)]
