"""Deduplicated collections of pairs for routing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import structlog

from swaprouter.amm.pair import Pair
from swaprouter.models.currency import Currency, Token

logger = structlog.get_logger()


class PairSet:
    """Pairs keyed by their unordered token set.

    A route search needs at most one snapshot per token set. When two
    snapshots for the same tokens are added, the later one replaces the
    earlier one and keeps its position.
    """

    def __init__(self, pairs: Iterable[Pair] | None = None) -> None:
        self._pairs: dict[frozenset[Token], Pair] = {}
        if pairs:
            for pair in pairs:
                self.add(pair)

    def add(self, pair: Pair) -> None:
        """Add a pair, replacing any pair with the same token set."""
        if pair.key in self._pairs:
            logger.debug(
                "pair_replaced",
                token0=pair.token0.address[-8:],
                token1=pair.token1.address[-8:],
            )
        self._pairs[pair.key] = pair

    def get(self, currency_a: Currency, currency_b: Currency) -> Pair | None:
        """Get the pair for two currencies (order independent)."""
        return self._pairs.get(frozenset((currency_a.wrapped, currency_b.wrapped)))

    def pairs_involving(self, currency: Currency) -> list[Pair]:
        """All pairs that trade the given currency."""
        return [pair for pair in self._pairs.values() if pair.involves_currency(currency)]

    @property
    def tokens(self) -> set[Token]:
        """Every token appearing in at least one pair."""
        return {token for pair in self._pairs.values() for token in pair.tokens}

    def as_tuple(self) -> tuple[Pair, ...]:
        return tuple(self._pairs.values())

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._pairs.values())

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, pair: object) -> bool:
        return isinstance(pair, Pair) and self._pairs.get(pair.key) == pair


__all__ = ["PairSet"]
