"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest

from swaprouter.amm.pair import Pair
from tests.helpers import TOKEN0, TOKEN1, TOKEN2, TOKEN3, WETH, make_pair

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return FIXTURES_DIR


def load_snapshot_fixture(name: str) -> dict:
    """Load a snapshot fixture by name as raw JSON data.

    Args:
        name: Fixture name (e.g., "basic_market")
    """
    with open(FIXTURES_DIR / "snapshots" / f"{name}.json") as f:
        return json.load(f)


@pytest.fixture
def pair_0_1() -> Pair:
    return make_pair(TOKEN0, 1000, TOKEN1, 1000)


@pytest.fixture
def pair_0_2() -> Pair:
    return make_pair(TOKEN0, 1000, TOKEN2, 1100)


@pytest.fixture
def pair_0_3() -> Pair:
    return make_pair(TOKEN0, 1000, TOKEN3, 900)


@pytest.fixture
def pair_1_2() -> Pair:
    return make_pair(TOKEN1, 1200, TOKEN2, 1000)


@pytest.fixture
def pair_1_3() -> Pair:
    return make_pair(TOKEN1, 1200, TOKEN3, 1300)


@pytest.fixture
def pair_weth_0() -> Pair:
    return make_pair(WETH, 1000, TOKEN0, 1000)


@pytest.fixture
def empty_pair_0_1() -> Pair:
    return make_pair(TOKEN0, 0, TOKEN1, 0)


@pytest.fixture
def triangle_pairs(pair_0_1: Pair, pair_0_2: Pair, pair_1_2: Pair) -> list[Pair]:
    """Tokens 0, 1 and 2 fully connected."""
    return [pair_0_1, pair_0_2, pair_1_2]


@pytest.fixture
def ether_pairs(pair_weth_0: Pair, pair_0_1: Pair, pair_0_3: Pair, pair_1_3: Pair) -> list[Pair]:
    """WETH connected to token0, which reaches token3 directly or via token1."""
    return [pair_weth_0, pair_0_1, pair_0_3, pair_1_3]


@pytest.fixture
def no_path_pairs(pair_0_1: Pair, pair_0_3: Pair, pair_1_3: Pair) -> list[Pair]:
    """Pairs that never reach token2."""
    return [pair_0_1, pair_0_3, pair_1_3]
