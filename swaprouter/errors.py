"""Error types raised by pairs, routes, trades and the route search.

Quote errors (QuoteError subclasses) are terminal for a single pair or trade
but are pruned by the best-trade search. Everything else signals a caller
contract violation and always propagates.
"""


class SwapRouterError(Exception):
    """Base error for swaprouter operations."""

    pass


class InvalidTokenError(SwapRouterError):
    """Currency does not belong to the pair, or a pair's tokens are invalid."""

    pass


class CurrencyMismatchError(SwapRouterError):
    """Two amounts or prices were combined across different currencies."""

    pass


class InvalidFeeRateError(SwapRouterError):
    """Fee rate must be in range [0, 1)."""

    pass


class QuoteError(SwapRouterError):
    """A pair cannot service the requested quote."""

    pass


class InsufficientInputAmountError(QuoteError):
    """Input amount is zero or too small to buy a single unit of output."""

    pass


class InsufficientLiquidityError(QuoteError):
    """Pair has an empty reserve."""

    pass


class InsufficientReservesError(InsufficientLiquidityError):
    """Requested output meets or exceeds the output reserve."""

    pass


class RouteError(SwapRouterError):
    """Route construction invariant violated."""

    pass


class InvalidRouteError(RouteError):
    """Route is empty, spans chains, or consecutive pairs share no token."""

    pass


class InvalidEndpointError(RouteError):
    """Declared input or output currency does not match the route ends."""

    pass


class SearchError(SwapRouterError):
    """Best-trade search called with invalid arguments."""

    pass


class EmptyPairSetError(SearchError):
    """No pairs supplied to the search."""

    pass


class InvalidMaxHopsError(SearchError):
    """max_hops must be at least 1."""

    pass


class InvalidMaxNumResultsError(SearchError):
    """max_num_results must be at least 1."""

    pass


class InvalidSlippageToleranceError(SwapRouterError):
    """Slippage tolerance must not be negative."""

    pass


class DivideByZeroError(SwapRouterError, ZeroDivisionError):
    """Price requested against an empty reserve or a zero amount."""

    pass
