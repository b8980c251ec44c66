"""Best-trade search over a set of pairs.

Exhaustive, hop-bounded depth-first enumeration of simple routes (each pair
used at most once per route). Every branch carries its own remaining-pairs
tuple, accumulated pairs and running amount, so no state is shared between
branches; exploration yields candidate pair sequences and the top level
merges them into a bounded ranking.

Quote failures (empty reserves, input too small, output too large) prune the
branch they occur in. Finding no route is not an error: the result is empty.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from fractions import Fraction

import structlog

from swaprouter.amm.constant_product import parse_fee_rate
from swaprouter.amm.pair import Pair
from swaprouter.constants import DEFAULT_MAX_HOPS, DEFAULT_MAX_NUM_RESULTS
from swaprouter.errors import (
    EmptyPairSetError,
    InvalidMaxHopsError,
    InvalidMaxNumResultsError,
    QuoteError,
)
from swaprouter.models.amounts import CurrencyAmount
from swaprouter.models.currency import Currency, Token
from swaprouter.models.types import RationalLike
from swaprouter.routing.pair_set import PairSet
from swaprouter.routing.ranking import RankedTrades
from swaprouter.routing.route import Route
from swaprouter.routing.trade import Trade, TradeType

logger = structlog.get_logger()


def _prepare_search(
    pairs: Iterable[Pair],
    max_hops: int,
    max_num_results: int,
    fee_rate: RationalLike,
) -> tuple[tuple[Pair, ...], Fraction]:
    """Validate search arguments and deduplicate the pairs.

    Raises:
        EmptyPairSetError: If no pairs are given
        InvalidMaxHopsError: If max_hops < 1
        InvalidMaxNumResultsError: If max_num_results < 1
        InvalidFeeRateError: If the fee rate is not in [0, 1)
    """
    pair_set = pairs if isinstance(pairs, PairSet) else PairSet(tuple(pairs))
    if len(pair_set) == 0:
        raise EmptyPairSetError("Best-trade search requires at least one pair")
    if max_hops < 1:
        raise InvalidMaxHopsError(f"max_hops must be at least 1, got {max_hops}")
    if max_num_results < 1:
        raise InvalidMaxNumResultsError(
            f"max_num_results must be at least 1, got {max_num_results}"
        )
    return pair_set.as_tuple(), parse_fee_rate(fee_rate)


def _explore_exact_in(
    remaining: tuple[Pair, ...],
    current_pairs: tuple[Pair, ...],
    amount: CurrencyAmount,
    token_out: Token,
    hops_left: int,
    fee_rate: Fraction,
) -> Iterator[tuple[Pair, ...]]:
    """Yield pair sequences that carry `amount` forward to token_out."""
    for i, pair in enumerate(remaining):
        if not pair.involves_currency(amount.currency):
            continue
        try:
            amount_out, _ = pair.output_amount_for(amount, fee_rate)
        except QuoteError as err:
            logger.debug("branch_pruned", hop=len(current_pairs), reason=type(err).__name__)
            continue

        route_pairs = current_pairs + (pair,)
        if amount_out.currency == token_out:
            yield route_pairs

        if hops_left > 1 and len(remaining) > 1:
            yield from _explore_exact_in(
                remaining[:i] + remaining[i + 1 :],
                route_pairs,
                amount_out,
                token_out,
                hops_left - 1,
                fee_rate,
            )


def _explore_exact_out(
    remaining: tuple[Pair, ...],
    current_pairs: tuple[Pair, ...],
    amount: CurrencyAmount,
    token_in: Token,
    hops_left: int,
    fee_rate: Fraction,
) -> Iterator[tuple[Pair, ...]]:
    """Yield pair sequences that deliver `amount` when started from token_in."""
    for i, pair in enumerate(remaining):
        if not pair.involves_currency(amount.currency):
            continue
        try:
            amount_in, _ = pair.input_amount_for(amount, fee_rate)
        except QuoteError as err:
            logger.debug("branch_pruned", hop=len(current_pairs), reason=type(err).__name__)
            continue

        route_pairs = (pair,) + current_pairs
        if amount_in.currency == token_in:
            yield route_pairs

        if hops_left > 1 and len(remaining) > 1:
            yield from _explore_exact_out(
                remaining[:i] + remaining[i + 1 :],
                route_pairs,
                amount_in,
                token_in,
                hops_left - 1,
                fee_rate,
            )


def best_trade_exact_in(
    pairs: Iterable[Pair],
    amount_in: CurrencyAmount,
    currency_out: Currency,
    fee_rate: RationalLike,
    *,
    max_hops: int = DEFAULT_MAX_HOPS,
    max_num_results: int = DEFAULT_MAX_NUM_RESULTS,
) -> list[Trade]:
    """Find the best routes for selling an exact amount.

    Args:
        pairs: Pair snapshots to route through (one per token set; later
            duplicates replace earlier ones)
        amount_in: Exact amount to sell; may be a native currency
        currency_out: Currency to buy; may be a native currency
        fee_rate: Fraction of each hop's input taken as fee
        max_hops: Maximum number of pairs in a route
        max_num_results: Maximum number of trades returned

    Returns:
        Up to max_num_results trades, most output first (ties: fewer hops).
        Empty if no route exists.

    Raises:
        EmptyPairSetError: If pairs is empty
        InvalidMaxHopsError: If max_hops < 1
        InvalidMaxNumResultsError: If max_num_results < 1
        InvalidFeeRateError: If the fee rate is not in [0, 1)
    """
    candidates, fee = _prepare_search(pairs, max_hops, max_num_results, fee_rate)
    ranked = RankedTrades(max_num_results)

    explored = 0
    for route_pairs in _explore_exact_in(
        candidates, (), amount_in.wrapped, currency_out.wrapped, max_hops, fee
    ):
        explored += 1
        route = Route(route_pairs, amount_in.currency, currency_out)
        ranked.insert(Trade(route, amount_in, TradeType.EXACT_INPUT, fee))

    trades = ranked.trades
    logger.debug(
        "best_trade_search_complete",
        trade_type=TradeType.EXACT_INPUT.value,
        pairs=len(candidates),
        candidates=explored,
        results=len(trades),
        best_amount_out=trades[0].output_amount.raw if trades else None,
    )
    return trades


def best_trade_exact_out(
    pairs: Iterable[Pair],
    currency_in: Currency,
    amount_out: CurrencyAmount,
    fee_rate: RationalLike,
    *,
    max_hops: int = DEFAULT_MAX_HOPS,
    max_num_results: int = DEFAULT_MAX_NUM_RESULTS,
) -> list[Trade]:
    """Find the cheapest routes for buying an exact amount.

    Mirror image of best_trade_exact_in: explores backward from the output
    token.

    Returns:
        Up to max_num_results trades, least input first (ties: fewer hops).
        Empty if no route exists.

    Raises:
        EmptyPairSetError: If pairs is empty
        InvalidMaxHopsError: If max_hops < 1
        InvalidMaxNumResultsError: If max_num_results < 1
        InvalidFeeRateError: If the fee rate is not in [0, 1)
    """
    candidates, fee = _prepare_search(pairs, max_hops, max_num_results, fee_rate)
    ranked = RankedTrades(max_num_results)

    explored = 0
    for route_pairs in _explore_exact_out(
        candidates, (), amount_out.wrapped, currency_in.wrapped, max_hops, fee
    ):
        explored += 1
        route = Route(route_pairs, currency_in, amount_out.currency)
        ranked.insert(Trade(route, amount_out, TradeType.EXACT_OUTPUT, fee))

    trades = ranked.trades
    logger.debug(
        "best_trade_search_complete",
        trade_type=TradeType.EXACT_OUTPUT.value,
        pairs=len(candidates),
        candidates=explored,
        results=len(trades),
        best_amount_in=trades[0].input_amount.raw if trades else None,
    )
    return trades


__all__ = ["best_trade_exact_in", "best_trade_exact_out"]
