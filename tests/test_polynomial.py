"""Tests for the Polynomial value type and its builder."""

from decimal import Decimal, ROUND_DOWN, ROUND_HALF_UP

import numpy as np
import pytest

from polynomials.display import power_to_superscript
from polynomials.errors import IndexOutOfRangeError, InvalidArgumentError
from polynomials.polynomial import Polynomial, PolynomialBuilder
from polynomials.sampling import random_polynomial
from polynomials.scalar import exact_context

ZERO_POLY = Polynomial()


class TestConstruction:
    """Test construction and degree bookkeeping."""

    def test_zero_polynomial(self) -> None:
        """The empty polynomial is y = 0 with degree 0."""
        p = Polynomial()
        assert p.length == 1
        assert p.degree == 0
        assert p.get_coefficient(0) == 0
        assert p.evaluate(Decimal("4.0")) == 0
        assert p.evaluate(Decimal("-3.0")) == 0

    def test_trailing_zeros_do_not_count(self) -> None:
        """Degree is the highest exponent with a non-zero coefficient."""
        assert Polynomial([1, 2, 0, 0]).degree == 1
        assert Polynomial([0, 0]).degree == 0
        assert Polynomial([0, 0]) == ZERO_POLY

    def test_length(self) -> None:
        p = PolynomialBuilder.build_from(3, -2, -1, 4, 2)
        assert p.length == 5
        assert len(p) == 5

    def test_degree(self) -> None:
        assert PolynomialBuilder.build_from(1, -2, 3, -4).degree == 3

    def test_accepts_polynomial_as_sequence(self) -> None:
        p = Polynomial([1, "2.5", 3.0])
        assert Polynomial(p) == p


class TestCoefficientAccess:
    """Test the strict coefficient accessor."""

    def test_get_coefficient(self) -> None:
        p = PolynomialBuilder.build_from(1.0, 2.0, 3.0, 4.0)
        assert p.get_coefficient(0) == Decimal("1.0")
        assert p.get_coefficient(1) == Decimal("2.0")
        assert p.get_coefficient(2) == Decimal("3.0")
        assert p.get_coefficient(3) == Decimal("4.0")

    @pytest.mark.parametrize("index", [-1, 4, 100])
    def test_out_of_range(self, index: int) -> None:
        """Negative indices and indices above the degree raise."""
        p = Polynomial([1, 2, 3, 4])
        with pytest.raises(IndexOutOfRangeError):
            p.get_coefficient(index)

    def test_out_of_range_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            Polynomial([1]).get_coefficient(1)

    def test_sparse_gaps_read_as_zero(self) -> None:
        """Exponents never set inside [0, degree] read as zero."""
        p = PolynomialBuilder().add(10, Decimal(10)).add(5000, Decimal(5000)).build()
        assert p.degree == 5000
        assert p.get_coefficient(10) == Decimal(10)
        assert p.get_coefficient(5000) == Decimal(5000)
        assert p.get_coefficient(11) == 0
        assert p.get_coefficient(0) == 0


class TestEvaluate:
    """Test Horner evaluation."""

    def test_linear(self) -> None:
        """2x - 1 at x = 3 is 5."""
        p = PolynomialBuilder.build_from(-1, 2)
        assert p.evaluate(Decimal("3.0")).quantize(Decimal("0.1")) == Decimal("5.0")

    def test_quadratic(self) -> None:
        """2x² + 3x - 5 at x = 4 is 39."""
        p = PolynomialBuilder.build_from(-5.0, 3.0, 2.0)
        assert p.evaluate(4.0) == 39

    @pytest.mark.parametrize("x", ["0", "1", "1.5", "-2.25", "10", "0.001"])
    def test_matches_direct_sum(self, rng: np.random.Generator, x: str) -> None:
        """Horner's rule equals Σ c_i · x^i."""
        x = Decimal(x)
        for _ in range(20):
            p = random_polynomial(rng, length=None)
            expected, power = Decimal(0), Decimal(1)
            with exact_context():
                for c in p.coefficients:
                    expected += c * power
                    power *= x
            assert p.evaluate(x) == expected

    def test_evaluate_none(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Polynomial([1, 2]).evaluate(None)

    def test_evaluate_nan(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Polynomial([1, 2]).evaluate(float("nan"))


class TestArithmetic:
    """Test sum, negation, subtraction and shift."""

    def test_sum(self) -> None:
        p1 = PolynomialBuilder.build_from(3, -1, 2)
        p2 = PolynomialBuilder.build_from(5, 4)
        assert p1.sum(p2) == PolynomialBuilder.build_from(8, 3, 2)
        assert p1 + p2 == PolynomialBuilder.build_from(8, 3, 2)

    def test_sum_commutative_and_associative(self, rng: np.random.Generator) -> None:
        for _ in range(50):
            a = random_polynomial(rng, length=None)
            b = random_polynomial(rng, length=None)
            c = random_polynomial(rng, length=None)
            assert a + b == b + a
            assert (a + b) + c == a + (b + c)

    def test_sum_with_zero(self, rng: np.random.Generator) -> None:
        for _ in range(20):
            p = random_polynomial(rng, length=None)
            assert p + ZERO_POLY == p
            assert ZERO_POLY + p == p

    def test_sum_keeps_precision(self) -> None:
        tiny = "0." + "0" * 30 + "1"
        huge = "1" + "0" * 30
        total = Polynomial(["0.1", tiny]) + Polynomial(["0.2", huge])
        assert total.get_coefficient(0) == Decimal("0.3")
        assert str(total.get_coefficient(1)) == huge + tiny[1:]

    def test_cancelling_leading_terms_lower_degree(self) -> None:
        assert (Polynomial([1, 1]) + Polynomial([0, -1])).degree == 0

    def test_negate(self) -> None:
        p = PolynomialBuilder.build_from(2, -3, 4, -5)
        assert p.negate() == PolynomialBuilder.build_from(-2, 3, -4, 5)
        assert -p == p.negate()

    def test_subtract(self, rng: np.random.Generator) -> None:
        p = random_polynomial(rng)
        assert p - p == ZERO_POLY
        assert Polynomial([5, 3]) - Polynomial([1, 1, 1]) == Polynomial([4, 2, -1])

    def test_shift(self) -> None:
        """shift(m) multiplies by x^m."""
        p = PolynomialBuilder.build_from(2, -3, 4, -5)
        expected = PolynomialBuilder.build_from(0, 0, 2, -3, 4, -5)
        assert p.shift(2).set_scale(2) == expected.set_scale(2)
        assert p.shift(0) == p

    def test_shift_negative(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Polynomial([1]).shift(-1)

    def test_operations_do_not_mutate(self) -> None:
        """Every operation leaves its operands untouched."""
        p = Polynomial(["1.25", "-3", "0", "4.5"])
        before = p.coefficients
        p.sum(Polynomial([1, 1]))
        p.negate()
        p.derivative()
        p.integral(1)
        p.set_scale(0)
        p.minimize_degree(5)
        p.shift(3)
        assert p.coefficients == before
        assert [str(c) for c in p.coefficients] == ["1.25", "-3", "0", "4.5"]


class TestCalculus:
    """Test derivative and integral."""

    def test_derivative(self) -> None:
        p = PolynomialBuilder().add(0, Decimal(4)).add(1, Decimal(-3)).add(2, Decimal(5)).build()
        d = p.derivative()
        assert d.length == 2
        assert d == PolynomialBuilder().add(0, Decimal(-3)).add(1, Decimal(10)).build()

    def test_derivative_of_constant_is_zero(self) -> None:
        assert Polynomial([7]).derivative() == ZERO_POLY
        assert ZERO_POLY.derivative() == ZERO_POLY

    def test_integral(self) -> None:
        """∫(6x² + 8x + 4) with constant 16 is 2x³ + 4x² + 4x + 16."""
        p = PolynomialBuilder.build_from(4.0, 8.0, 6.0).set_scale(2)
        i = p.integral(Decimal("16.0")).set_scale(2)
        assert i.length == 4
        assert i == PolynomialBuilder.build_from(16.0, 4.0, 4.0, 2.0).set_scale(2)

    def test_integral_rounds_away_from_zero(self) -> None:
        """Non-terminating quotients round away from zero at the operand's scale."""
        p = Polynomial(["0", "0", "1.00", "0", "-1.00"])
        i = p.integral()
        assert i.get_coefficient(3) == Decimal("0.34")
        assert i.get_coefficient(5) == Decimal("-0.20")
        assert i.get_coefficient(0) == 0

    def test_integral_rounding_mode(self) -> None:
        p = Polynomial(["0", "0", "1.00"])
        assert p.integral(rounding=ROUND_DOWN).get_coefficient(3) == Decimal("0.33")

    def test_integral_keeps_operand_scale(self) -> None:
        p = Polynomial(["0", "1.0"])
        assert str(p.integral().get_coefficient(2)) == "0.5"

    def test_integral_none_constant(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Polynomial([1]).integral(None)

    @pytest.mark.parametrize("constant", [0, "2.5", -7])
    def test_integral_then_derivative(self, rng: np.random.Generator, constant) -> None:
        """d/dx ∫p equals p once both sides are brought to a common scale."""
        for _ in range(30):
            p = random_polynomial(rng, length=None).set_scale(6)
            roundtrip = p.integral(constant).derivative()
            assert roundtrip.set_scale(4) == p.set_scale(4)


class TestScale:
    """Test scale handling and trimming."""

    def test_set_scale(self) -> None:
        p = Polynomial(["1.005", "2"]).set_scale(2, ROUND_HALF_UP)
        assert [str(c) for c in p.coefficients] == ["1.01", "2.00"]
        assert p.scale == 2
        assert p.is_uniformly_scaled()

    def test_set_scale_fills_gaps(self) -> None:
        p = PolynomialBuilder().add(3, 1).build().set_scale(1)
        assert [str(c) for c in p.coefficients] == ["0.0", "0.0", "0.0", "1.0"]

    def test_set_scale_can_lower_degree(self) -> None:
        assert Polynomial(["1", "0.001"]).set_scale(2).degree == 0

    def test_mixed_scales(self) -> None:
        assert not Polynomial(["1.0", "2.00"]).is_uniformly_scaled()

    def test_minimize_degree(self) -> None:
        """Trailing coefficients below epsilon are dropped, inner ones kept."""
        p = Polynomial(["1", "0.001", "2", "0.004", "-0.003"])
        trimmed = p.minimize_degree(Decimal("0.01"))
        assert trimmed.degree == 2
        assert trimmed.get_coefficient(1) == Decimal("0.001")

    def test_minimize_degree_noop(self) -> None:
        p = Polynomial([1, 2, 3])
        assert p.minimize_degree("0.01") is p

    def test_minimize_degree_stops_at_constant(self) -> None:
        p = Polynomial(["0.001", "0.002"]).minimize_degree("0.01")
        assert p.degree == 0
        assert p.get_coefficient(0) == Decimal("0.001")


class TestEquality:
    """Test exact and approximate equality."""

    def test_equality_ignores_trailing_zeros(self) -> None:
        assert Polynomial(["2.0", "1"]) == Polynomial(["2.00", "1.000"])
        assert hash(Polynomial(["2.0", "1"])) == hash(Polynomial(["2.00", "1.000"]))

    def test_different_degree_not_equal(self) -> None:
        assert Polynomial([1, 2]) != Polynomial([1, 2, 3])
        assert Polynomial([1]) != "1"

    def test_approximate_equals(self) -> None:
        p = Polynomial(["1", "2"])
        q = Polynomial(["1.001", "2", "0.005"])
        assert p.approximate_equals(q, Decimal("0.01"))
        assert q.approximate_equals(p, "0.01")
        assert not p.approximate_equals(q, Decimal("0.001"))

    def test_approximate_equals_none(self) -> None:
        assert not Polynomial([1]).approximate_equals(None, "0.01")


class TestBuilder:
    """Test the sparse builder."""

    def test_mixed_representations(self) -> None:
        p = (PolynomialBuilder()
             .add(0, Decimal("1.5"))
             .add(1, 2)
             .add(2, 0.25)
             .add(3, "3.125")
             .add(4, np.float64(-1.0))
             .build())
        assert [str(c) for c in p.coefficients] == ["1.5", "2", "0.25", "3.125", "-1.0"]

    def test_duplicate_exponent_overwrites(self) -> None:
        p = PolynomialBuilder().add(1, 5).add(1, 7).build()
        assert p.get_coefficient(1) == 7

    def test_tracks_max_exponent(self) -> None:
        builder = PolynomialBuilder().add(0, 1).add(3, 0)
        assert builder.max_exponent == 3
        assert builder.build().degree == 0

    def test_empty_builder(self) -> None:
        assert PolynomialBuilder().build() == ZERO_POLY
        assert PolynomialBuilder.build_from() == ZERO_POLY

    def test_built_polynomial_is_independent(self) -> None:
        builder = PolynomialBuilder().add(0, 1)
        p = builder.build()
        builder.add(2, 9)
        assert p.degree == 0

    @pytest.mark.parametrize("coefficient", [float("nan"), float("inf"), float("-inf"), Decimal("Infinity"), None])
    def test_rejects_non_finite(self, coefficient) -> None:
        with pytest.raises(InvalidArgumentError):
            PolynomialBuilder().add(3, coefficient)

    @pytest.mark.parametrize("exponent", [-1, 1.5, "2", True])
    def test_rejects_bad_exponent(self, exponent) -> None:
        with pytest.raises(InvalidArgumentError):
            PolynomialBuilder().add(exponent, 1)


class TestDisplay:
    """Test string rendering."""

    def test_str(self) -> None:
        assert str(Polynomial([12, -5, 2, 1])) == "1x³ + 2x² - 5x + 12"
        assert str(Polynomial([3, 0, -1])) == "-1x² + 3"
        assert str(Polynomial([0, 1])) == "1x"

    def test_str_constant(self) -> None:
        assert str(Polynomial(["2.5"])) == "2.5"
        assert str(ZERO_POLY) == "0"

    def test_superscript(self) -> None:
        assert power_to_superscript(10) == "¹⁰"
        assert str(PolynomialBuilder().add(12, 1).build()) == "1x¹²"

    def test_repr(self) -> None:
        assert repr(Polynomial([1, "2.5"])) == "Polynomial(['1', '2.5'])"
