"""Exception hierarchy for polynomial operations."""


class PolynomialError(Exception):
    """Base class for errors raised by this package."""

    pass


class IndexOutOfRangeError(PolynomialError, IndexError):
    """Coefficient index outside ``[0, degree]``.

    Raised by the strict coefficient accessor. Gaps inside the range are
    not errors, they read as zero.
    """

    pass


class InvalidArgumentError(PolynomialError, ValueError):
    """Caller supplied an unusable value.

    Raised for a missing evaluation point or integration constant, NaN or
    infinite coefficients, invalid exponents and division by zero.
    """

    pass
