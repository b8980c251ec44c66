"""Test helpers module for shared test utilities.

- constants: Tokens, native currency and the standard fee rate
- factories: Pair and amount factory functions
"""

from tests.helpers.constants import (
    ETHER,
    FEE_RATE,
    TOKEN0,
    TOKEN1,
    TOKEN2,
    TOKEN3,
    USDC,
    USDC_ADDRESS_UPPER,
    WETH,
    WXDAI_GNOSIS,
)
from tests.helpers.factories import amount, make_pair

__all__ = [
    # Constants
    "TOKEN0",
    "TOKEN1",
    "TOKEN2",
    "TOKEN3",
    "WETH",
    "ETHER",
    "USDC",
    "USDC_ADDRESS_UPPER",
    "WXDAI_GNOSIS",
    "FEE_RATE",
    # Factories
    "amount",
    "make_pair",
]
