"""Constant-product AMM math and pair snapshots."""

from swaprouter.amm.constant_product import (
    ConstantProductMath,
    constant_product,
    parse_fee_rate,
)
from swaprouter.amm.pair import Pair

__all__ = [
    "ConstantProductMath",
    "Pair",
    "constant_product",
    "parse_fee_rate",
]
