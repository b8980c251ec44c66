"""Trades: a route plus one exact side, with the other side derived."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from functools import cached_property

from swaprouter.amm.constant_product import parse_fee_rate
from swaprouter.amm.pair import Pair
from swaprouter.errors import InvalidEndpointError, InvalidSlippageToleranceError
from swaprouter.models.amounts import CurrencyAmount, Price
from swaprouter.models.currency import Token
from swaprouter.models.types import RationalLike, as_fraction
from swaprouter.routing.route import Route


class TradeType(str, Enum):
    """Which side of the trade the caller fixes."""

    EXACT_INPUT = "exact_input"
    EXACT_OUTPUT = "exact_output"


@dataclass(frozen=True)
class HopResult:
    """Result of a single hop in a trade."""

    pair: Pair  # Snapshot before the swap
    amount_in: CurrencyAmount
    amount_out: CurrencyAmount
    pair_after: Pair  # Snapshot after the swap

    @property
    def token_in(self) -> Token:
        return self.amount_in.currency.wrapped

    @property
    def token_out(self) -> Token:
        return self.amount_out.currency.wrapped


def _parse_slippage(slippage_tolerance: RationalLike) -> Fraction:
    try:
        slippage = as_fraction(slippage_tolerance)
    except (TypeError, ValueError, ZeroDivisionError) as err:
        raise InvalidSlippageToleranceError(
            f"Invalid slippage tolerance: {slippage_tolerance!r}"
        ) from err
    if slippage < 0:
        raise InvalidSlippageToleranceError(f"Slippage tolerance cannot be negative: {slippage}")
    return slippage


class Trade:
    """A priced swap along a route.

    Construction walks the route's pairs forward (EXACT_INPUT) or backward
    (EXACT_OUTPUT) and is all-or-nothing: a quote failure at any hop
    propagates unchanged.

    input_amount and output_amount are expressed in the route's declared
    currencies, so a trade starting from a native currency reports the native
    currency even though it routes through the wrapped token.
    """

    def __init__(
        self,
        route: Route,
        amount: CurrencyAmount,
        trade_type: TradeType,
        fee_rate: RationalLike,
    ) -> None:
        """Price a trade along `route`.

        Args:
            route: Route to trade along
            amount: The exact side; in the route's input currency for
                EXACT_INPUT, in its output currency for EXACT_OUTPUT
            trade_type: Which side `amount` fixes
            fee_rate: Fraction of each hop's input taken as fee

        Raises:
            InvalidEndpointError: If amount is in the wrong currency
            InvalidFeeRateError: If the fee rate is not in [0, 1)
            QuoteError: If any hop cannot be quoted
        """
        self.route = route
        self.trade_type = TradeType(trade_type)
        self.fee_rate = parse_fee_rate(fee_rate)

        if self.trade_type is TradeType.EXACT_INPUT:
            if amount.currency != route.input_currency:
                raise InvalidEndpointError(
                    f"Exact input is in {amount.currency}, route starts at {route.input_currency}"
                )
            hops = self._walk_forward(amount.wrapped)
            self.input_amount = amount
            self.output_amount = CurrencyAmount(route.output_currency, hops[-1].amount_out.raw)
        else:
            if amount.currency != route.output_currency:
                raise InvalidEndpointError(
                    f"Exact output is in {amount.currency}, route ends at {route.output_currency}"
                )
            hops = self._walk_backward(amount.wrapped)
            self.input_amount = CurrencyAmount(route.input_currency, hops[0].amount_in.raw)
            self.output_amount = amount

        self.hops: tuple[HopResult, ...] = hops

    @classmethod
    def exact_in(cls, route: Route, amount_in: CurrencyAmount, fee_rate: RationalLike) -> Trade:
        return cls(route, amount_in, TradeType.EXACT_INPUT, fee_rate)

    @classmethod
    def exact_out(cls, route: Route, amount_out: CurrencyAmount, fee_rate: RationalLike) -> Trade:
        return cls(route, amount_out, TradeType.EXACT_OUTPUT, fee_rate)

    def _walk_forward(self, amount_in: CurrencyAmount) -> tuple[HopResult, ...]:
        hops: list[HopResult] = []
        current = amount_in
        for pair in self.route.pairs:
            amount_out, pair_after = pair.output_amount_for(current, self.fee_rate)
            hops.append(HopResult(pair, current, amount_out, pair_after))
            current = amount_out
        return tuple(hops)

    def _walk_backward(self, amount_out: CurrencyAmount) -> tuple[HopResult, ...]:
        hops: list[HopResult] = []
        current = amount_out
        for pair in reversed(self.route.pairs):
            amount_in, pair_after = pair.input_amount_for(current, self.fee_rate)
            hops.append(HopResult(pair, amount_in, current, pair_after))
            current = amount_in
        return tuple(reversed(hops))

    @cached_property
    def execution_price(self) -> Price:
        """Average price paid: output per input, not slippage-adjusted."""
        return Price.from_amounts(self.input_amount, self.output_amount)

    @cached_property
    def price_impact(self) -> Fraction:
        """Shortfall of the output against a fee-free quote at the route mid-price."""
        quoted = self.route.mid_price.quote_exact(self.input_amount)
        return (quoted - self.output_amount.raw) / quoted

    @cached_property
    def next_mid_price(self) -> Price:
        """Route mid-price after this trade has moved every pair's reserves."""
        pairs_after = [hop.pair_after for hop in self.hops]
        route = Route(pairs_after, self.route.input_currency, self.route.output_currency)
        return route.mid_price

    def maximum_amount_in(self, slippage_tolerance: RationalLike) -> CurrencyAmount:
        """Most input to spend given the slippage tolerance.

        EXACT_INPUT trades spend exactly input_amount. EXACT_OUTPUT trades
        allow floor(input_amount * (1 + slippage_tolerance)).

        Raises:
            InvalidSlippageToleranceError: If slippage_tolerance is negative
        """
        slippage = _parse_slippage(slippage_tolerance)
        if self.trade_type is TradeType.EXACT_INPUT:
            return self.input_amount
        scaled = (1 + slippage) * self.input_amount.raw
        return CurrencyAmount(self.input_amount.currency, math.floor(scaled))

    def minimum_amount_out(self, slippage_tolerance: RationalLike) -> CurrencyAmount:
        """Least output to accept given the slippage tolerance.

        EXACT_OUTPUT trades receive exactly output_amount. EXACT_INPUT trades
        accept floor(output_amount / (1 + slippage_tolerance)).

        Raises:
            InvalidSlippageToleranceError: If slippage_tolerance is negative
        """
        slippage = _parse_slippage(slippage_tolerance)
        if self.trade_type is TradeType.EXACT_OUTPUT:
            return self.output_amount
        scaled = self.output_amount.raw / (1 + slippage)
        return CurrencyAmount(self.output_amount.currency, math.floor(scaled))

    def worst_execution_price(self, slippage_tolerance: RationalLike) -> Price:
        """Execution price at the edge of the slippage tolerance.

        Raises:
            InvalidSlippageToleranceError: If slippage_tolerance is negative
        """
        if self.trade_type is TradeType.EXACT_INPUT:
            return Price.from_amounts(
                self.input_amount, self.minimum_amount_out(slippage_tolerance)
            )
        return Price.from_amounts(self.maximum_amount_in(slippage_tolerance), self.output_amount)

    def __repr__(self) -> str:
        return (
            f"Trade({self.trade_type.value}, {self.route!r}, "
            f"in={self.input_amount.raw}, out={self.output_amount.raw})"
        )


__all__ = ["HopResult", "Trade", "TradeType"]
