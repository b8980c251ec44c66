"""Route and trade construction and best-trade search.

Module structure:
- route.py: Route (connected sequence of pairs)
- trade.py: TradeType, HopResult and Trade
- ranking.py: RankedTrades bounded best-first list
- pair_set.py: PairSet deduplicated pair collection
- best_trade.py: best_trade_exact_in / best_trade_exact_out search
- router.py: RouterConfig and the SwapRouter facade
"""

from swaprouter.routing.best_trade import best_trade_exact_in, best_trade_exact_out
from swaprouter.routing.pair_set import PairSet
from swaprouter.routing.ranking import RankedTrades
from swaprouter.routing.route import Route
from swaprouter.routing.router import DEFAULT_ROUTER_CONFIG, RouterConfig, SwapRouter
from swaprouter.routing.trade import HopResult, Trade, TradeType

__all__ = [
    "DEFAULT_ROUTER_CONFIG",
    "HopResult",
    "PairSet",
    "RankedTrades",
    "Route",
    "RouterConfig",
    "SwapRouter",
    "Trade",
    "TradeType",
    "best_trade_exact_in",
    "best_trade_exact_out",
]
