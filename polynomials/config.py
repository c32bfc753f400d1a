"""Multiplier configuration."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_EVEN


@dataclass(frozen=True)
class MultiplierConfig:
    """
    Tolerances and precision used when comparing or normalizing products.

    The FFT strategy computes through floating roots of unity, so its raw
    product carries noise. ``normalize_product`` rounds it to ``scale``
    fractional digits and strips trailing coefficients below ``epsilon``.
    """
    scale: int = 2  # Fractional digits kept after normalization
    epsilon: Decimal = Decimal("0.01")  # Agreement tolerance between strategies
    rounding: str = ROUND_HALF_EVEN  # decimal rounding mode for normalization
    fft_precision: int = 34  # Significant digits carried through the transform

    def __post_init__(self):
        if self.fft_precision <= 0:
            raise ValueError(f"fft_precision must be positive, got {self.fft_precision}")
        if Decimal(self.epsilon) <= 0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")


DEFAULT_CONFIG = MultiplierConfig()
