"""Tests for constant-product exchange-rate math."""

from decimal import Decimal
from fractions import Fraction

import pytest

from swaprouter.amm.constant_product import ConstantProductMath, constant_product, parse_fee_rate
from swaprouter.errors import (
    InsufficientInputAmountError,
    InsufficientLiquidityError,
    InsufficientReservesError,
    InvalidFeeRateError,
    QuoteError,
)

FEE = Fraction(3, 1000)


class TestParseFeeRate:
    """Tests for fee rate parsing."""

    @pytest.mark.parametrize(
        "value", [Fraction(3, 1000), "3/1000", "0.003", Decimal("0.003")]
    )
    def test_accepts_exact_rationals(self, value):
        assert parse_fee_rate(value) == Fraction(3, 1000)

    def test_zero_fee(self):
        assert parse_fee_rate(0) == 0

    @pytest.mark.parametrize("value", [1, Fraction(3, 2), Fraction(-1, 100), "-0.1"])
    def test_out_of_range(self, value):
        with pytest.raises(InvalidFeeRateError, match=r"\[0, 1\)"):
            parse_fee_rate(value)

    @pytest.mark.parametrize(
        "value",
        [0.003, "three", "1/0", None, Decimal("Infinity"), Decimal("-Infinity"), Decimal("NaN")],
    )
    def test_not_exact(self, value):
        """Floats and unparseable values are rejected, never approximated."""
        with pytest.raises(InvalidFeeRateError, match="Invalid fee rate"):
            parse_fee_rate(value)


class TestGetAmountOut:
    """Tests for exact-input quoting."""

    def test_reference_value(self):
        """1000/1100 reserves, 0.3% fee, 100 in -> 99 out."""
        assert constant_product.get_amount_out(100, 1000, 1100, FEE) == 99

    def test_matches_997_formula(self):
        """For a 3/1000 fee the result equals the classic 997/1000 formula."""
        amount_in, reserve_in, reserve_out = 10**18, 100 * 10**18, 250_000 * 10**6
        expected = (amount_in * 997 * reserve_out) // (reserve_in * 1000 + amount_in * 997)
        assert constant_product.get_amount_out(amount_in, reserve_in, reserve_out, FEE) == expected

    def test_zero_fee(self):
        """With no fee: floor(1000 * 100 / 1100) = 90."""
        assert constant_product.get_amount_out(100, 1000, 1000, 0) == 90

    def test_fee_given_as_string(self):
        assert constant_product.get_amount_out(100, 1000, 1100, "3/1000") == 99

    def test_zero_input(self):
        with pytest.raises(InsufficientInputAmountError):
            constant_product.get_amount_out(0, 1000, 1000, FEE)

    def test_input_too_small_for_one_unit(self):
        """1 in against 1000/1000 rounds to zero out."""
        with pytest.raises(InsufficientInputAmountError, match="too small"):
            constant_product.get_amount_out(1, 1000, 1000, FEE)

    @pytest.mark.parametrize("reserve_in,reserve_out", [(0, 1000), (1000, 0), (0, 0)])
    def test_empty_reserves(self, reserve_in, reserve_out):
        with pytest.raises(InsufficientLiquidityError):
            constant_product.get_amount_out(100, reserve_in, reserve_out, FEE)

    def test_invalid_fee_checked_first(self):
        with pytest.raises(InvalidFeeRateError):
            constant_product.get_amount_out(0, 0, 0, Fraction(1))

    @pytest.mark.parametrize("amount_in", [1, 10, 100, 10**6, 10**30])
    def test_output_below_reserve(self, amount_in):
        try:
            out = constant_product.get_amount_out(amount_in, 1000, 1000, FEE)
        except InsufficientInputAmountError:
            return
        assert out < 1000

    def test_monotonic_in_amount_in(self):
        outputs = [
            constant_product.get_amount_out(a, 10**6, 10**6, FEE) for a in range(10, 5000, 7)
        ]
        assert outputs == sorted(outputs)

    def test_monotonic_in_reserve_out(self):
        outputs = [
            constant_product.get_amount_out(1000, 10**6, r, FEE) for r in range(10**5, 10**7, 10**5)
        ]
        assert outputs == sorted(outputs)

    def test_higher_fee_never_gives_more(self):
        low = constant_product.get_amount_out(10**6, 10**9, 10**9, Fraction(1, 10000))
        high = constant_product.get_amount_out(10**6, 10**9, 10**9, Fraction(1, 100))
        assert high <= low


class TestGetAmountIn:
    """Tests for exact-output quoting."""

    def test_reference_value(self):
        """1000/1100 reserves, 0.3% fee, 100 out -> 101 in."""
        assert constant_product.get_amount_in(100, 1000, 1100, FEE) == 101

    def test_rounds_up(self):
        """1000 * 100 * 1000 / (800 * 997) = 125.37..., rounded up."""
        assert constant_product.get_amount_in(100, 1000, 900, FEE) == 126

    @pytest.mark.parametrize("amount_out", [0, 1100, 1200])
    def test_output_out_of_range(self, amount_out):
        with pytest.raises(InsufficientReservesError):
            constant_product.get_amount_in(amount_out, 1000, 1100, FEE)

    def test_empty_input_reserve(self):
        with pytest.raises(InsufficientReservesError):
            constant_product.get_amount_in(10, 0, 1100, FEE)

    def test_insufficient_reserves_is_liquidity_error(self):
        """Search code prunes on QuoteError; reserves errors must be caught too."""
        assert issubclass(InsufficientReservesError, InsufficientLiquidityError)
        assert issubclass(InsufficientReservesError, QuoteError)


class TestRoundingBounds:
    """Both directions round against the trader."""

    @pytest.mark.parametrize("amount_out", [1, 7, 99, 500, 1099])
    @pytest.mark.parametrize("fee", [Fraction(0), FEE, Fraction(1, 100)])
    def test_quoted_input_buys_requested_output(self, amount_out, fee):
        amount_in = constant_product.get_amount_in(amount_out, 1000, 1100, fee)
        assert constant_product.get_amount_out(amount_in, 1000, 1100, fee) >= amount_out

    @pytest.mark.parametrize("amount_in", [2, 13, 100, 999, 5000])
    @pytest.mark.parametrize("fee", [Fraction(0), FEE, Fraction(1, 100)])
    def test_input_for_quoted_output_never_exceeds_input(self, amount_in, fee):
        amount_out = constant_product.get_amount_out(amount_in, 1000, 1100, fee)
        assert constant_product.get_amount_in(amount_out, 1000, 1100, fee) <= amount_in


class TestConstantProductInstance:
    def test_singleton_type(self):
        assert isinstance(constant_product, ConstantProductMath)
