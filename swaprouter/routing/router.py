"""SwapRouter facade: a pair set, a fee rate and search limits in one place."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from swaprouter.amm.constant_product import parse_fee_rate
from swaprouter.amm.pair import Pair
from swaprouter.constants import DEFAULT_MAX_HOPS, DEFAULT_MAX_NUM_RESULTS
from swaprouter.models.amounts import CurrencyAmount
from swaprouter.models.currency import Currency
from swaprouter.models.types import RationalLike
from swaprouter.routing.best_trade import best_trade_exact_in, best_trade_exact_out
from swaprouter.routing.pair_set import PairSet
from swaprouter.routing.trade import Trade, TradeType

logger = structlog.get_logger()


@dataclass(frozen=True)
class RouterConfig:
    """Search limits for a SwapRouter.

    Attributes:
        max_hops: Maximum number of pairs in a route (default: 3)
        max_num_results: Maximum number of trades returned (default: 3)
    """

    max_hops: int = DEFAULT_MAX_HOPS
    max_num_results: int = DEFAULT_MAX_NUM_RESULTS

    @classmethod
    def from_env(cls) -> RouterConfig:
        """Build a config from environment variables.

        - SWAPROUTER_MAX_HOPS: Maximum route length (default: 3)
        - SWAPROUTER_MAX_NUM_RESULTS: Maximum number of results (default: 3)

        Raises:
            ValueError: If a variable is set but is not an integer
        """
        return cls(
            max_hops=int(os.environ.get("SWAPROUTER_MAX_HOPS", DEFAULT_MAX_HOPS)),
            max_num_results=int(
                os.environ.get("SWAPROUTER_MAX_NUM_RESULTS", DEFAULT_MAX_NUM_RESULTS)
            ),
        )


# Default configuration instance
DEFAULT_ROUTER_CONFIG = RouterConfig()


class SwapRouter:
    """Quotes swaps against a fixed set of pair snapshots.

    Usage:
        router = SwapRouter(pairs, fee_rate=Fraction(3, 1000))
        trades = router.best_trade_exact_in(amount_in, currency_out)
    """

    def __init__(
        self,
        pairs: Iterable[Pair],
        fee_rate: RationalLike,
        config: RouterConfig | None = None,
    ) -> None:
        """Initialize the router.

        Args:
            pairs: Pair snapshots; later duplicates of a token set win
            fee_rate: Fraction of each hop's input taken as fee (no default)
            config: Search limits (default: DEFAULT_ROUTER_CONFIG)

        Raises:
            InvalidFeeRateError: If the fee rate is not in [0, 1)
        """
        self.pairs = PairSet(pairs)
        self.fee_rate = parse_fee_rate(fee_rate)
        self.config = config or DEFAULT_ROUTER_CONFIG

    def best_trade_exact_in(
        self, amount_in: CurrencyAmount, currency_out: Currency
    ) -> list[Trade]:
        return best_trade_exact_in(
            self.pairs,
            amount_in,
            currency_out,
            self.fee_rate,
            max_hops=self.config.max_hops,
            max_num_results=self.config.max_num_results,
        )

    def best_trade_exact_out(
        self, currency_in: Currency, amount_out: CurrencyAmount
    ) -> list[Trade]:
        return best_trade_exact_out(
            self.pairs,
            currency_in,
            amount_out,
            self.fee_rate,
            max_hops=self.config.max_hops,
            max_num_results=self.config.max_num_results,
        )

    def quote(
        self,
        amount: CurrencyAmount,
        other_currency: Currency,
        trade_type: TradeType = TradeType.EXACT_INPUT,
    ) -> Trade | None:
        """Best single trade, or None if no route exists.

        Args:
            amount: Exact amount to sell (EXACT_INPUT) or buy (EXACT_OUTPUT)
            other_currency: Currency to buy (EXACT_INPUT) or sell (EXACT_OUTPUT)
            trade_type: Which side `amount` fixes
        """
        if TradeType(trade_type) is TradeType.EXACT_INPUT:
            trades = self.best_trade_exact_in(amount, other_currency)
        else:
            trades = self.best_trade_exact_out(other_currency, amount)

        if not trades:
            logger.info(
                "no_route_found",
                trade_type=TradeType(trade_type).value,
                currency=str(amount.currency),
                other_currency=str(other_currency),
            )
            return None
        return trades[0]


__all__ = ["DEFAULT_ROUTER_CONFIG", "RouterConfig", "SwapRouter"]
