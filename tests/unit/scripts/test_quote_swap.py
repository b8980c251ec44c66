"""Tests for the quote_swap command-line script."""

import importlib.util

import pytest
import structlog

from tests.conftest import FIXTURES_DIR

SCRIPT = FIXTURES_DIR.parents[1] / "scripts" / "quote_swap.py"
SNAPSHOT = FIXTURES_DIR / "snapshots" / "basic_market.json"


@pytest.fixture(scope="module")
def quote_swap():
    spec = importlib.util.spec_from_file_location("quote_swap", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def restore_structlog():
    yield
    structlog.reset_defaults()


class TestQuoteSwap:
    """Tests for argument handling and output."""

    def test_exact_input(self, quote_swap, capsys, monkeypatch):
        monkeypatch.delenv("SWAPROUTER_MAX_HOPS", raising=False)
        assert quote_swap.main([str(SNAPSHOT), "t0", "t2", "100"]) == 0
        out = capsys.readouterr().out
        assert "#1 t0 -> t2" in out
        assert "#2 t0 -> t1 -> t2" in out

    def test_exact_output(self, quote_swap, capsys):
        assert quote_swap.main([str(SNAPSHOT), "t0", "t2", "100", "--exact-out"]) == 0
        out = capsys.readouterr().out
        assert "input:          101 t0" in out

    def test_max_hops_flag(self, quote_swap, capsys):
        assert quote_swap.main([str(SNAPSHOT), "t0", "t2", "100", "--max-hops", "1"]) == 0
        out = capsys.readouterr().out
        assert "#1 t0 -> t2" in out
        assert "#2" not in out

    @pytest.mark.parametrize("flag", ["--max-hops", "--max-results"])
    def test_zero_limit_rejected(self, quote_swap, capsys, flag):
        assert quote_swap.main([str(SNAPSHOT), "t0", "t2", "100", flag, "0"]) == 1
        out = capsys.readouterr().out
        assert "must be at least 1" in out
        assert "#1" not in out

    def test_unknown_currency(self, quote_swap, capsys):
        assert quote_swap.main([str(SNAPSHOT), "t0", "nope", "100"]) == 1
        assert "Unknown currency" in capsys.readouterr().out

    def test_missing_snapshot(self, quote_swap, tmp_path, capsys):
        assert quote_swap.main([str(tmp_path / "missing.json"), "t0", "t2", "100"]) == 1
        assert "not found" in capsys.readouterr().out
