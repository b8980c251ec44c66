"""Routing constants.

Centralizes search defaults and the canonical wrapped native tokens.
"""

from swaprouter.models.currency import Token
from swaprouter.models.types import is_valid_address

# Best-trade search defaults
DEFAULT_MAX_HOPS = 3
DEFAULT_MAX_NUM_RESULTS = 3


def _wrapped_native(chain_id: int, address: str, symbol: str, name: str) -> Token:
    """Build a wrapped native token, validating its address at import time.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {symbol} address on chain {chain_id}: {address}")
    return Token(chain_id=chain_id, address=address, decimals=18, symbol=symbol, name=name)


# Canonical wrapped native token per chain id (lowercase for consistency)
WETH9: dict[int, Token] = {
    1: _wrapped_native(1, "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2", "WETH", "Wrapped Ether"),
    5: _wrapped_native(5, "0xb4fbf271143f4fbf7b91a5ded31805e42b2208d6", "WETH", "Wrapped Ether"),
    10: _wrapped_native(10, "0x4200000000000000000000000000000000000006", "WETH", "Wrapped Ether"),
    8453: _wrapped_native(
        8453, "0x4200000000000000000000000000000000000006", "WETH", "Wrapped Ether"
    ),
    42161: _wrapped_native(
        42161, "0x82af49447d8a07e3bd95bd0d56f35241523fbab1", "WETH", "Wrapped Ether"
    ),
    11155111: _wrapped_native(
        11155111, "0xfff9976782d46cc05630d1f6ebab18b2324d6b14", "WETH", "Wrapped Ether"
    ),
}
