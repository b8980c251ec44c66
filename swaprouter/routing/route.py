"""Routes: chains of pairs from an input currency to an output currency."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cached_property

from swaprouter.amm.pair import Pair
from swaprouter.errors import InvalidEndpointError, InvalidRouteError
from swaprouter.models.amounts import Price
from swaprouter.models.currency import Currency, Token


class Route:
    """An ordered, connected sequence of pairs.

    The declared input and output may be native currencies; the token path
    always holds wrapped tokens. path[0] is the input's wrapped token and
    path[-1] the output's.
    """

    def __init__(
        self, pairs: Sequence[Pair], input_currency: Currency, output_currency: Currency
    ) -> None:
        """Validate the pair chain and derive the token path.

        Raises:
            InvalidRouteError: If pairs is empty, spans chains, or two
                consecutive pairs share no token
            InvalidEndpointError: If the input is not in the first pair or the
                path does not end at the output
        """
        if not pairs:
            raise InvalidRouteError("Route requires at least one pair")

        chain_id = pairs[0].chain_id
        if any(pair.chain_id != chain_id for pair in pairs):
            raise InvalidRouteError("All pairs in a route must be on the same chain")

        if not pairs[0].involves_currency(input_currency):
            raise InvalidEndpointError(f"Input {input_currency} is not in the first pair")
        if not pairs[-1].involves_currency(output_currency):
            raise InvalidEndpointError(f"Output {output_currency} is not in the last pair")

        path: list[Token] = [input_currency.wrapped]
        for i, pair in enumerate(pairs):
            current = path[-1]
            if not pair.involves_currency(current):
                raise InvalidRouteError(f"Pair {i} does not connect to {current}")
            path.append(pair.other_token(current))

        if path[-1] != output_currency.wrapped:
            raise InvalidEndpointError(
                f"Route ends at {path[-1]}, not at output {output_currency}"
            )

        self.pairs: tuple[Pair, ...] = tuple(pairs)
        self.path: tuple[Token, ...] = tuple(path)
        self.input_currency = input_currency
        self.output_currency = output_currency

    @property
    def chain_id(self) -> int:
        return self.pairs[0].chain_id

    @cached_property
    def mid_price(self) -> Price:
        """Product of the hop spot prices, input as base and output as quote.

        Not fee-adjusted.

        Raises:
            DivideByZeroError: If any hop's input-side reserve is zero
        """
        price = self.pairs[0].price_of(self.path[0])
        for token, pair in zip(self.path[1:], self.pairs[1:]):
            price = price * pair.price_of(token)
        return Price(self.input_currency, self.output_currency, price.value)

    def __len__(self) -> int:
        return len(self.pairs)

    def __repr__(self) -> str:
        return "Route(" + " -> ".join(str(token) for token in self.path) + ")"


__all__ = ["Route"]
