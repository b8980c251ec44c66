#!/usr/bin/env python3
"""Quote a swap against a JSON reserve snapshot.

Usage:
    # Sell exactly 100 raw units of token A for token C
    python scripts/quote_swap.py snapshot.json A C 100

    # Buy exactly 100 raw units of C, paying with the chain's native currency
    python scripts/quote_swap.py snapshot.json ETH C 100 --exact-out

Tokens are given by symbol or address as they appear in the snapshot. "ETH"
selects the native currency of the snapshot's chain.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import structlog
from pydantic import ValidationError

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from swaprouter.errors import SwapRouterError  # noqa: E402
from swaprouter.models.amounts import CurrencyAmount  # noqa: E402
from swaprouter.models.currency import Currency, Token, native_currency  # noqa: E402
from swaprouter.models.snapshot import MarketSnapshot  # noqa: E402
from swaprouter.routing.router import RouterConfig, SwapRouter  # noqa: E402
from swaprouter.routing.trade import Trade, TradeType  # noqa: E402

logger = structlog.get_logger()

NATIVE_SYMBOL = "ETH"


def resolve_currency(name: str, tokens: dict[str, Token], chain_id: int) -> Currency:
    """Look up a currency by symbol, address or the native symbol.

    Raises:
        KeyError: If the name matches nothing in the snapshot
    """
    if name.upper() == NATIVE_SYMBOL:
        return native_currency(chain_id)
    if name in tokens:
        return tokens[name]
    if name.lower() in tokens:
        return tokens[name.lower()]
    raise KeyError(name)


def format_trade(rank: int, trade: Trade, slippage: str) -> str:
    path = " -> ".join(str(token) for token in trade.route.path)
    lines = [
        f"#{rank} {path}",
        f"    input:          {trade.input_amount.raw} {trade.input_amount.currency}",
        f"    output:         {trade.output_amount.raw} {trade.output_amount.currency}",
        f"    execution:      {trade.execution_price.to_decimal(8)}",
        f"    price impact:   {float(trade.price_impact):.4%}",
    ]
    if trade.trade_type is TradeType.EXACT_INPUT:
        lines.append(f"    min out @{slippage}: {trade.minimum_amount_out(slippage).raw}")
    else:
        lines.append(f"    max in @{slippage}:  {trade.maximum_amount_in(slippage).raw}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the quote script."""
    parser = argparse.ArgumentParser(
        description="Find the best constant-product routes for a swap",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("snapshot", type=Path, help="Reserve snapshot JSON file")
    parser.add_argument("sell", help="Currency to sell (symbol, address or ETH)")
    parser.add_argument("buy", help="Currency to buy (symbol, address or ETH)")
    parser.add_argument("amount", type=int, help="Exact raw amount")
    parser.add_argument(
        "--exact-out",
        action="store_true",
        help="Treat amount as the exact output instead of the exact input",
    )
    parser.add_argument(
        "--slippage",
        type=str,
        default="1/200",
        help="Slippage tolerance as a fraction string (default: 1/200)",
    )
    parser.add_argument(
        "--max-hops",
        type=int,
        default=None,
        help="Maximum route length (default: SWAPROUTER_MAX_HOPS or 3)",
    )
    parser.add_argument(
        "--max-results",
        type=int,
        default=None,
        help="Maximum number of trades (default: SWAPROUTER_MAX_NUM_RESULTS or 3)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    if not args.snapshot.exists():
        logger.error("snapshot_not_found", path=str(args.snapshot))
        print(f"Error: Snapshot file not found: {args.snapshot}")
        return 1

    try:
        snapshot = MarketSnapshot.model_validate(json.loads(args.snapshot.read_text()))
    except (json.JSONDecodeError, ValidationError) as err:
        print(f"Error: Invalid snapshot: {err}")
        return 1

    if not snapshot.pairs:
        print("Error: Snapshot contains no pairs")
        return 1

    env_config = RouterConfig.from_env()
    config = RouterConfig(
        max_hops=args.max_hops if args.max_hops is not None else env_config.max_hops,
        max_num_results=(
            args.max_results if args.max_results is not None else env_config.max_num_results
        ),
    )

    try:
        pairs = snapshot.to_pairs()
        tokens = snapshot.tokens()
        chain_id = pairs[0].chain_id
        sell = resolve_currency(args.sell, tokens, chain_id)
        buy = resolve_currency(args.buy, tokens, chain_id)
    except KeyError as err:
        print(f"Error: Unknown currency {err}")
        return 1
    except (SwapRouterError, ValueError) as err:
        print(f"Error: {err}")
        return 1

    router = SwapRouter(pairs, snapshot.fee, config)
    try:
        if args.exact_out:
            trades = router.best_trade_exact_out(sell, CurrencyAmount(buy, args.amount))
        else:
            trades = router.best_trade_exact_in(CurrencyAmount(sell, args.amount), buy)
    except SwapRouterError as err:
        print(f"Error: {err}")
        return 1

    if not trades:
        print("No route found")
        return 0

    for rank, trade in enumerate(trades, start=1):
        print(format_trade(rank, trade, args.slippage))
    return 0


if __name__ == "__main__":
    sys.exit(main())
