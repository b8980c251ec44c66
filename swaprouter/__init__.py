"""Constant-product swap router: exact quotes and best-route search."""

from swaprouter.amm import Pair, constant_product
from swaprouter.models import CurrencyAmount, NativeCurrency, Price, Token, native_currency
from swaprouter.routing import (
    Route,
    RouterConfig,
    SwapRouter,
    Trade,
    TradeType,
    best_trade_exact_in,
    best_trade_exact_out,
)

__version__ = "0.1.0"
__all__ = [
    "CurrencyAmount",
    "NativeCurrency",
    "Pair",
    "Price",
    "Route",
    "RouterConfig",
    "SwapRouter",
    "Token",
    "Trade",
    "TradeType",
    "best_trade_exact_in",
    "best_trade_exact_out",
    "constant_product",
    "native_currency",
    "__version__",
]
