"""Constant-product (x * y = k) exchange-rate math.

The fee is an arbitrary exact rational f = n/d taken from the input amount
before the swap. With the complement c = d - n:

    amount_out = floor(reserve_out * amount_in * c / (reserve_in * d + amount_in * c))
    amount_in  = ceil(reserve_in * amount_out * d / ((reserve_out - amount_out) * c))

For f = 3/1000 this is the familiar 997/1000 formula. Both directions round
against the trader.
"""

from __future__ import annotations

from fractions import Fraction

from swaprouter.errors import (
    InsufficientInputAmountError,
    InsufficientLiquidityError,
    InsufficientReservesError,
    InvalidFeeRateError,
)
from swaprouter.models.types import RationalLike, as_fraction
from swaprouter.safe_int import S


def parse_fee_rate(fee_rate: RationalLike) -> Fraction:
    """Convert a fee rate to a Fraction and check it lies in [0, 1).

    Raises:
        InvalidFeeRateError: If the fee rate is out of range or not exact
    """
    try:
        fee = as_fraction(fee_rate)
    except (TypeError, ValueError, ZeroDivisionError) as err:
        raise InvalidFeeRateError(f"Invalid fee rate: {fee_rate!r}") from err
    if not 0 <= fee < 1:
        raise InvalidFeeRateError(f"Fee rate must be in [0, 1), got {fee}")
    return fee


class ConstantProductMath:
    """Exact quoting for constant-product pools with a per-call fee rate."""

    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        fee_rate: RationalLike,
    ) -> int:
        """Calculate output amount using the constant product formula.

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool
            fee_rate: Fraction of the input taken as fee, e.g. Fraction(3, 1000)

        Returns:
            Output token amount, rounded down

        Raises:
            InsufficientInputAmountError: If amount_in is zero or too small to
                buy a single unit of output
            InsufficientLiquidityError: If either reserve is empty
        """
        fee = parse_fee_rate(fee_rate)
        if amount_in <= 0:
            raise InsufficientInputAmountError(f"Input amount must be positive, got {amount_in}")
        if reserve_in <= 0 or reserve_out <= 0:
            raise InsufficientLiquidityError(
                f"Empty reserves: reserve_in={reserve_in}, reserve_out={reserve_out}"
            )

        fee_denominator = S(fee.denominator)
        fee_complement = fee_denominator - S(fee.numerator)

        amount_in_with_fee = S(amount_in) * fee_complement
        numerator = amount_in_with_fee * S(reserve_out)
        denominator = S(reserve_in) * fee_denominator + amount_in_with_fee

        amount_out = (numerator // denominator).value
        if amount_out == 0:
            raise InsufficientInputAmountError(
                f"Input {amount_in} too small for reserves {reserve_in}/{reserve_out}"
            )
        return amount_out

    def get_amount_in(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
        fee_rate: RationalLike,
    ) -> int:
        """Calculate the input required to receive a desired output.

        Args:
            amount_out: Desired output token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool
            fee_rate: Fraction of the input taken as fee

        Returns:
            Required input token amount, rounded up

        Raises:
            InsufficientReservesError: Unless 0 < amount_out < reserve_out and
                reserve_in > 0
        """
        fee = parse_fee_rate(fee_rate)
        if amount_out <= 0 or amount_out >= reserve_out or reserve_in <= 0:
            raise InsufficientReservesError(
                f"Cannot buy {amount_out} from reserves {reserve_in}/{reserve_out}"
            )

        fee_denominator = S(fee.denominator)
        fee_complement = fee_denominator - S(fee.numerator)

        numerator = S(reserve_in) * S(amount_out) * fee_denominator
        denominator = (S(reserve_out) - S(amount_out)) * fee_complement

        return numerator.ceiling_div(denominator).value


# Singleton instance
constant_product = ConstantProductMath()


__all__ = [
    "ConstantProductMath",
    "constant_product",
    "parse_fee_rate",
]
