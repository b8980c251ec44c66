"""Bounded best-N ranking of candidate trades."""

from __future__ import annotations

from bisect import bisect_right

from swaprouter.routing.trade import Trade


def trade_sort_key(trade: Trade) -> tuple[int, int, int]:
    """Sort key putting the best trade first.

    More output first, then less input, then fewer hops. Exact-input
    candidates share their input, so output decides; exact-output candidates
    share their output, so input decides.
    """
    return (-trade.output_amount.raw, trade.input_amount.raw, len(trade.route.pairs))


class RankedTrades:
    """Fixed-capacity list of trades kept in best-first order.

    Insertion is stable: a candidate that ties an existing entry goes after
    it, so earlier-found trades win exact ties.
    """

    def __init__(self, max_size: int) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.max_size = max_size
        self._trades: list[Trade] = []
        self._keys: list[tuple[int, int, int]] = []

    def insert(self, trade: Trade) -> Trade | None:
        """Insert a trade, returning whichever trade fell off the end (if any).

        When the list is full and the candidate is no better than the worst
        entry, the candidate itself is returned and the list is unchanged.
        """
        key = trade_sort_key(trade)
        is_full = len(self._trades) == self.max_size
        if is_full and self._keys[-1] <= key:
            return trade

        index = bisect_right(self._keys, key)
        self._keys.insert(index, key)
        self._trades.insert(index, trade)

        if is_full:
            self._keys.pop()
            return self._trades.pop()
        return None

    @property
    def trades(self) -> list[Trade]:
        return list(self._trades)

    def __len__(self) -> int:
        return len(self._trades)


__all__ = ["RankedTrades", "trade_sort_key"]
