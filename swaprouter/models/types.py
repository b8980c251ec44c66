"""Shared validation helpers and annotated types.

Used by the currency model and by the pydantic snapshot models.
"""

from decimal import Decimal
from fractions import Fraction
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

# Accepted wherever an exact rational is expected (fee rates, slippage)
RationalLike = Fraction | int | Decimal | str


def validate_uint(value: Any) -> str:
    """Validate that a value is a non-negative integer amount.

    Args:
        value: Value to validate (string or int)

    Returns:
        The amount as a decimal string

    Raises:
        ValueError: If value is not a non-negative decimal integer
    """
    if isinstance(value, bool):
        raise ValueError("Amount must be an integer, got bool")

    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Amount cannot be negative: {value}")
        return str(value)

    if not isinstance(value, str):
        raise ValueError(f"Amount must be string or int, got {type(value).__name__}")

    try:
        int_value = int(value)
    except ValueError as err:
        raise ValueError(f"Amount must be a decimal integer string: '{value}'") from err

    if int_value < 0:
        raise ValueError(f"Amount cannot be negative: {value}")

    return value


def validate_fee_rate(value: Any) -> str:
    """Validate a fee rate given as "3/1000", "0.003" or an int.

    Returns:
        The fee rate as a string parseable by Fraction

    Raises:
        ValueError: If the value is not an exact rational in [0, 1)
    """
    if isinstance(value, float):
        raise ValueError(f"Fee rate must be exact, got float {value!r}; use '3/1000'")
    try:
        fee = as_fraction(value)
    except (TypeError, ValueError, ZeroDivisionError) as err:
        raise ValueError(f"Invalid fee rate: {value!r}") from err
    if not 0 <= fee < 1:
        raise ValueError(f"Fee rate must be in [0, 1): {value!r}")
    return str(fee)


# Ethereum address (40 hex chars after 0x prefix)
Address = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{40}$")]

# Unsigned integer amount as decimal string (validated)
Uint = Annotated[
    str,
    BeforeValidator(validate_uint),
    Field(description="Non-negative integer amount as decimal string"),
]

# Fee rate as a rational string (validated)
FeeRate = Annotated[
    str,
    BeforeValidator(validate_fee_rate),
    Field(description="Fee rate as a fraction string, e.g. '3/1000'"),
]


def as_fraction(value: RationalLike) -> Fraction:
    """Convert an exact rational value to a Fraction.

    Floats are rejected: 0.003 is not 3/1000 in binary floating point.

    Raises:
        TypeError: If value is a float or of an unsupported type
        ValueError: If a string cannot be parsed as a rational or a Decimal
            is not finite
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool) or isinstance(value, float):
        raise TypeError(f"Expected an exact rational, got {type(value).__name__}")
    if isinstance(value, Decimal) and not value.is_finite():
        raise ValueError(f"Expected a finite rational, got {value}")
    if isinstance(value, int | Decimal | str):
        return Fraction(value)
    raise TypeError(f"Expected an exact rational, got {type(value).__name__}")


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize an Ethereum address to lowercase with 0x prefix.

    Args:
        address: An Ethereum address (with or without 0x prefix)
        validate: If True, raises ValueError for invalid addresses

    Raises:
        ValueError: If validate=True and address is not a valid address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address (0x + 40 hex chars)."""
    if not isinstance(address, str):
        return False
    if not address.startswith("0x"):
        return False
    if len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False
