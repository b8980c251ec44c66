"""Currency identities and the amount/price value types."""

from swaprouter.models.amounts import CurrencyAmount, Price
from swaprouter.models.currency import Currency, NativeCurrency, Token, native_currency

__all__ = [
    "Currency",
    "CurrencyAmount",
    "NativeCurrency",
    "Price",
    "Token",
    "native_currency",
]
