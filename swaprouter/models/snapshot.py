"""Pydantic models for caller-supplied reserve snapshots.

A snapshot is plain JSON-shaped data:

    {
      "feeRate": "3/1000",
      "pairs": [
        {"reserves": [
          {"token": {"chainId": 1, "address": "0x...", "decimals": 18, "symbol": "A"},
           "balance": "1000"},
          {"token": {"chainId": 1, "address": "0x...", "decimals": 6, "symbol": "B"},
           "balance": "2500"}
        ]}
      ]
    }

Validation happens here; `to_pairs()` turns the snapshot into Pair objects.
"""

from __future__ import annotations

from fractions import Fraction

import structlog
from pydantic import BaseModel, Field

from swaprouter.amm.pair import Pair
from swaprouter.models.amounts import CurrencyAmount
from swaprouter.models.currency import Token
from swaprouter.models.types import Address, FeeRate, Uint

logger = structlog.get_logger()


class TokenModel(BaseModel):
    """Token identity and display metadata."""

    chain_id: int = Field(alias="chainId", ge=1)
    address: Address
    decimals: int = Field(default=18, ge=0, le=254)
    symbol: str | None = None
    name: str | None = None

    model_config = {"populate_by_name": True}

    def to_token(self) -> Token:
        return Token(
            chain_id=self.chain_id,
            address=self.address,
            decimals=self.decimals,
            symbol=self.symbol,
            name=self.name,
        )


class ReserveModel(BaseModel):
    """One side of a pair: a token and its raw balance."""

    token: TokenModel
    balance: Uint

    def to_amount(self) -> CurrencyAmount:
        return CurrencyAmount(self.token.to_token(), int(self.balance))


class PairSnapshot(BaseModel):
    """Reserves of a single constant-product pair."""

    reserves: list[ReserveModel] = Field(min_length=2, max_length=2)

    def to_pair(self) -> Pair:
        """Build the Pair.

        Raises:
            InvalidTokenError: If both reserves are the same token or the
                tokens are on different chains
        """
        return Pair(self.reserves[0].to_amount(), self.reserves[1].to_amount())


class MarketSnapshot(BaseModel):
    """A set of pair snapshots sharing one fee rate."""

    fee_rate: FeeRate = Field(alias="feeRate")
    pairs: list[PairSnapshot]

    model_config = {"populate_by_name": True}

    @property
    def fee(self) -> Fraction:
        return Fraction(self.fee_rate)

    def to_pairs(self) -> list[Pair]:
        """Build a Pair for every pair snapshot, in order."""
        pairs = [snapshot.to_pair() for snapshot in self.pairs]
        logger.info("snapshot_loaded", pairs=len(pairs), fee_rate=self.fee_rate)
        return pairs

    def tokens(self) -> dict[str, Token]:
        """Tokens in the snapshot indexed by lowercase address and by symbol."""
        index: dict[str, Token] = {}
        for pair in self.pairs:
            for reserve in pair.reserves:
                token = reserve.token.to_token()
                index[token.address] = token
                if token.symbol:
                    index[token.symbol] = token
        return index


__all__ = ["MarketSnapshot", "PairSnapshot", "ReserveModel", "TokenModel"]
