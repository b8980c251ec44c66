"""Constant-product pair snapshots."""

from __future__ import annotations

from functools import cached_property

from swaprouter.amm.constant_product import ConstantProductMath, constant_product
from swaprouter.errors import DivideByZeroError, InvalidTokenError
from swaprouter.models.amounts import CurrencyAmount, Price
from swaprouter.models.currency import Currency, Token
from swaprouter.models.types import RationalLike


class Pair:
    """Immutable reserve snapshot of a two-token constant-product pool.

    Reserves are stored in canonical order: token0 sorts before token1 by
    address, so the same token set always yields comparable pairs regardless
    of the order the amounts were given in. Native amounts are stored as
    their wrapped token.

    Quoting never mutates a pair; it returns the post-trade snapshot instead,
    which multi-hop routing chains through sequential pools.
    """

    def __init__(
        self,
        amount_a: CurrencyAmount,
        amount_b: CurrencyAmount,
        math: ConstantProductMath = constant_product,
    ) -> None:
        """Create a pair from two reserve amounts in any order.

        Raises:
            InvalidTokenError: If both amounts are the same token or the tokens
                are on different chains
        """
        amount_a, amount_b = amount_a.wrapped, amount_b.wrapped
        if amount_a.currency.sorts_before(amount_b.currency):
            self._reserves = (amount_a, amount_b)
        else:
            self._reserves = (amount_b, amount_a)
        self._math = math

    @property
    def reserve0(self) -> CurrencyAmount:
        return self._reserves[0]

    @property
    def reserve1(self) -> CurrencyAmount:
        return self._reserves[1]

    @property
    def token0(self) -> Token:
        return self._reserves[0].currency

    @property
    def token1(self) -> Token:
        return self._reserves[1].currency

    @property
    def tokens(self) -> tuple[Token, Token]:
        return self.token0, self.token1

    @property
    def chain_id(self) -> int:
        return self.token0.chain_id

    @property
    def key(self) -> frozenset[Token]:
        """Order-independent identity of the pair's token set."""
        return frozenset(self.tokens)

    @property
    def is_empty(self) -> bool:
        return self.reserve0.raw == 0 or self.reserve1.raw == 0

    def involves_currency(self, currency: Currency) -> bool:
        """Whether the currency (or its wrapped token) is one of the pair's tokens."""
        token = currency.wrapped
        return token == self.token0 or token == self.token1

    def _index_of(self, currency: Currency) -> int:
        token = currency.wrapped
        if token == self.token0:
            return 0
        if token == self.token1:
            return 1
        raise InvalidTokenError(f"{currency} is not in pair {self.token0}/{self.token1}")

    def reserve_of(self, currency: Currency) -> CurrencyAmount:
        """Reserve held for the given currency.

        Raises:
            InvalidTokenError: If the currency is not in the pair
        """
        return self._reserves[self._index_of(currency)]

    def other_token(self, currency: Currency) -> Token:
        """The pair's token opposite the given currency.

        Raises:
            InvalidTokenError: If the currency is not in the pair
        """
        return self._reserves[1 - self._index_of(currency)].currency

    @cached_property
    def token0_price(self) -> Price:
        """Price of token0 in token1 (reserve1 / reserve0)."""
        return self._spot_price(0)

    @cached_property
    def token1_price(self) -> Price:
        """Price of token1 in token0 (reserve0 / reserve1)."""
        return self._spot_price(1)

    def _spot_price(self, index: int) -> Price:
        base, quote = self._reserves[index], self._reserves[1 - index]
        if base.raw == 0:
            raise DivideByZeroError(f"Spot price of {base.currency} undefined: reserve is zero")
        return Price.from_amounts(base, quote)

    def price_of(self, currency: Currency) -> Price:
        """Spot mid-price of `currency` expressed in the pair's other token.

        Raises:
            InvalidTokenError: If the currency is not in the pair
            DivideByZeroError: If the currency's reserve is zero
        """
        if self._index_of(currency) == 0:
            return self.token0_price
        return self.token1_price

    def output_amount_for(
        self, input_amount: CurrencyAmount, fee_rate: RationalLike
    ) -> tuple[CurrencyAmount, Pair]:
        """Quote an exact-input swap through this pair.

        Args:
            input_amount: Amount sold into the pair
            fee_rate: Fraction of the input taken as fee

        Returns:
            Tuple of (output amount, pair snapshot after the swap)

        Raises:
            InvalidTokenError: If the input currency is not in the pair
            InsufficientInputAmountError: If the input buys nothing
            InsufficientLiquidityError: If either reserve is empty
        """
        index = self._index_of(input_amount.currency)
        reserve_in, reserve_out = self._reserves[index], self._reserves[1 - index]
        amount_in = CurrencyAmount(reserve_in.currency, input_amount.raw)

        raw_out = self._math.get_amount_out(
            amount_in.raw, reserve_in.raw, reserve_out.raw, fee_rate
        )
        amount_out = CurrencyAmount(reserve_out.currency, raw_out)

        return amount_out, Pair(reserve_in + amount_in, reserve_out - amount_out, self._math)

    def input_amount_for(
        self, output_amount: CurrencyAmount, fee_rate: RationalLike
    ) -> tuple[CurrencyAmount, Pair]:
        """Quote an exact-output swap through this pair.

        Args:
            output_amount: Amount bought from the pair
            fee_rate: Fraction of the input taken as fee

        Returns:
            Tuple of (required input amount, pair snapshot after the swap)

        Raises:
            InvalidTokenError: If the output currency is not in the pair
            InsufficientReservesError: If the output is not strictly below the
                output reserve, or the input reserve is empty
        """
        index = self._index_of(output_amount.currency)
        reserve_out, reserve_in = self._reserves[index], self._reserves[1 - index]
        amount_out = CurrencyAmount(reserve_out.currency, output_amount.raw)

        raw_in = self._math.get_amount_in(
            amount_out.raw, reserve_in.raw, reserve_out.raw, fee_rate
        )
        amount_in = CurrencyAmount(reserve_in.currency, raw_in)

        return amount_in, Pair(reserve_in + amount_in, reserve_out - amount_out, self._math)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self._reserves == other._reserves

    def __hash__(self) -> int:
        return hash(self._reserves)

    def __repr__(self) -> str:
        return (
            f"Pair({self.token0}: {self.reserve0.raw}, {self.token1}: {self.reserve1.raw})"
        )


__all__ = ["Pair"]
