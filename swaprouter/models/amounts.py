"""Currency amounts and prices.

Amounts are raw integers in the currency's smallest unit. Prices are exact
Fractions of raw quote units per raw base unit; nothing here touches floats.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

from swaprouter.errors import CurrencyMismatchError, DivideByZeroError
from swaprouter.models.currency import Currency


@dataclass(frozen=True)
class CurrencyAmount:
    """A non-negative raw amount of a currency (a reserve or a trade side)."""

    currency: Currency
    raw: int

    def __post_init__(self) -> None:
        if isinstance(self.raw, bool) or not isinstance(self.raw, int):
            raise ValueError(f"Amount must be an int, got {type(self.raw).__name__}")
        if self.raw < 0:
            raise ValueError(f"Amount cannot be negative: {self.raw}")

    @property
    def wrapped(self) -> CurrencyAmount:
        """The same amount expressed in the currency's wrapped token."""
        if not self.currency.is_native:
            return self
        return CurrencyAmount(self.currency.wrapped, self.raw)

    def _check_currency(self, other: CurrencyAmount) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(f"Cannot combine {self.currency} with {other.currency}")

    def __add__(self, other: CurrencyAmount) -> CurrencyAmount:
        self._check_currency(other)
        return CurrencyAmount(self.currency, self.raw + other.raw)

    def __sub__(self, other: CurrencyAmount) -> CurrencyAmount:
        self._check_currency(other)
        return CurrencyAmount(self.currency, self.raw - other.raw)

    def __lt__(self, other: CurrencyAmount) -> bool:
        self._check_currency(other)
        return self.raw < other.raw

    def __le__(self, other: CurrencyAmount) -> bool:
        self._check_currency(other)
        return self.raw <= other.raw

    def __gt__(self, other: CurrencyAmount) -> bool:
        self._check_currency(other)
        return self.raw > other.raw

    def __ge__(self, other: CurrencyAmount) -> bool:
        self._check_currency(other)
        return self.raw >= other.raw

    def to_decimal(self) -> Decimal:
        """Amount in whole units, e.g. 1.5 for 1.5 * 10**18 wei."""
        return Decimal(f"{self.raw}E-{self.currency.decimals}")

    def __str__(self) -> str:
        return f"{self.to_decimal()} {self.currency}"


@dataclass(frozen=True)
class Price:
    """How many raw units of `quote_currency` one raw unit of `base_currency` buys."""

    base_currency: Currency
    quote_currency: Currency
    value: Fraction

    @classmethod
    def from_amounts(cls, base_amount: CurrencyAmount, quote_amount: CurrencyAmount) -> Price:
        """Price implied by exchanging base_amount for quote_amount.

        Raises:
            DivideByZeroError: If base_amount is zero
        """
        if base_amount.raw == 0:
            raise DivideByZeroError(f"Price undefined for zero {base_amount.currency} amount")
        return cls(
            base_amount.currency,
            quote_amount.currency,
            Fraction(quote_amount.raw, base_amount.raw),
        )

    @property
    def numerator(self) -> int:
        return self.value.numerator

    @property
    def denominator(self) -> int:
        return self.value.denominator

    def invert(self) -> Price:
        """The same exchange rate seen from the quote side.

        Raises:
            DivideByZeroError: If the price is zero
        """
        if self.value == 0:
            raise DivideByZeroError("Cannot invert a zero price")
        return Price(self.quote_currency, self.base_currency, 1 / self.value)

    def __mul__(self, other: Price) -> Price:
        """Chain two prices: (A -> B) * (B -> C) = (A -> C).

        Raises:
            CurrencyMismatchError: If self's quote is not other's base
        """
        if self.quote_currency != other.base_currency:
            raise CurrencyMismatchError(
                f"Cannot chain price quoted in {self.quote_currency} "
                f"with price based in {other.base_currency}"
            )
        return Price(self.base_currency, other.quote_currency, self.value * other.value)

    def quote_exact(self, amount: CurrencyAmount) -> Fraction:
        """Exact (unrounded) quote-currency value of a base-currency amount.

        Raises:
            CurrencyMismatchError: If amount is not in the base currency
        """
        if amount.currency != self.base_currency:
            raise CurrencyMismatchError(
                f"Price based in {self.base_currency} cannot quote {amount.currency}"
            )
        return self.value * amount.raw

    def quote(self, amount: CurrencyAmount) -> CurrencyAmount:
        """Quote-currency amount for a base-currency amount, rounded down."""
        exact = self.quote_exact(amount)
        return CurrencyAmount(self.quote_currency, exact.numerator // exact.denominator)

    @property
    def adjusted(self) -> Fraction:
        """Price in whole units, correcting for the currencies' decimals."""
        scalar = Fraction(10**self.base_currency.decimals, 10**self.quote_currency.decimals)
        return self.value * scalar

    def to_decimal(self, places: int = 6) -> Decimal:
        """Decimal rendering of the adjusted price, truncated to `places`."""
        adjusted = self.adjusted
        truncated = adjusted.numerator * 10**places // adjusted.denominator
        return Decimal(f"{truncated}E-{places}")

    def __str__(self) -> str:
        return f"{self.to_decimal()} {self.quote_currency}/{self.base_currency}"
