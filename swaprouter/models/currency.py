"""Currency identities.

A currency is either an ERC20-style Token (chain id + address) or the chain's
NativeCurrency. Routing always works on `currency.wrapped`, so a native
currency travels through pairs as its canonical wrapped token.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from swaprouter.errors import InvalidTokenError
from swaprouter.models.types import normalize_address


@dataclass(frozen=True)
class Token:
    """A token identified by chain id and address.

    Equality and hashing use only (chain_id, address); decimals, symbol and
    name are display metadata.
    """

    chain_id: int
    address: str
    decimals: int = field(default=18, compare=False)
    symbol: str | None = field(default=None, compare=False)
    name: str | None = field(default=None, compare=False)

    is_native: ClassVar[bool] = False

    def __post_init__(self) -> None:
        if self.chain_id <= 0:
            raise ValueError(f"Invalid chain id: {self.chain_id}")
        if not 0 <= self.decimals < 255:
            raise ValueError(f"Invalid decimals: {self.decimals}")
        object.__setattr__(self, "address", normalize_address(self.address, validate=True))

    @property
    def wrapped(self) -> Token:
        return self

    def sorts_before(self, other: Token) -> bool:
        """Whether this token is token0 in a pair with `other`.

        Raises:
            InvalidTokenError: If the tokens are on different chains or identical
        """
        if self.chain_id != other.chain_id:
            raise InvalidTokenError(
                f"Tokens on different chains: {self.chain_id} and {other.chain_id}"
            )
        if self.address == other.address:
            raise InvalidTokenError(f"Identical token addresses: {self.address}")
        # Same-length lowercase hex compares like the address bytes
        return self.address < other.address

    def __str__(self) -> str:
        return self.symbol or self.address


@dataclass(frozen=True)
class NativeCurrency:
    """The native asset of a chain (e.g. Ether on mainnet).

    Two native currencies are equal iff they are on the same chain.
    """

    chain_id: int
    wrapped: Token = field(compare=False)
    decimals: int = field(default=18, compare=False)
    symbol: str | None = field(default=None, compare=False)
    name: str | None = field(default=None, compare=False)

    is_native: ClassVar[bool] = True

    def __post_init__(self) -> None:
        if self.wrapped.chain_id != self.chain_id:
            raise InvalidTokenError(
                f"Wrapped token on chain {self.wrapped.chain_id}, "
                f"native currency on chain {self.chain_id}"
            )

    def __str__(self) -> str:
        return self.symbol or f"native:{self.chain_id}"


Currency = Token | NativeCurrency


def native_currency(chain_id: int) -> NativeCurrency:
    """Return the native currency for a chain with a known wrapped token.

    Raises:
        ValueError: If no wrapped native token is known for the chain
    """
    from swaprouter.constants import WETH9

    try:
        wrapped = WETH9[chain_id]
    except KeyError:
        raise ValueError(f"No wrapped native token known for chain {chain_id}") from None
    return NativeCurrency(
        chain_id=chain_id,
        wrapped=wrapped,
        decimals=18,
        symbol="ETH",
        name="Ether",
    )
