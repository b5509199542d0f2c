"""Tests for quote configuration."""

from decimal import Decimal

import pytest

from cpamm.errors import InvalidSlippage
from cpamm.quotes import DEFAULT_QUOTE_CONFIG, QuoteConfig


class TestQuoteConfig:
    """Tests for QuoteConfig defaults and validation."""

    def test_defaults(self):
        assert DEFAULT_QUOTE_CONFIG.default_slippage == Decimal("0.05")
        assert DEFAULT_QUOTE_CONFIG.check_invariant
        assert DEFAULT_QUOTE_CONFIG.enforce_min_lp_amount

    def test_string_slippage_is_normalized(self):
        assert QuoteConfig(default_slippage="0.02").default_slippage == Decimal("0.02")  # type: ignore[arg-type]

    def test_invalid_slippage(self):
        with pytest.raises(InvalidSlippage):
            QuoteConfig(default_slippage=Decimal("1"))


class TestQuoteConfigFromEnv:
    """Tests for environment-based configuration."""

    def test_defaults_without_env(self, monkeypatch):
        monkeypatch.delenv("CPAMM_DEFAULT_SLIPPAGE", raising=False)
        monkeypatch.delenv("CPAMM_CHECK_INVARIANT", raising=False)
        monkeypatch.delenv("CPAMM_ENFORCE_MIN_LP", raising=False)
        assert QuoteConfig.from_env() == QuoteConfig()

    def test_reads_env(self, monkeypatch):
        monkeypatch.setenv("CPAMM_DEFAULT_SLIPPAGE", "0.01")
        monkeypatch.setenv("CPAMM_CHECK_INVARIANT", "false")
        monkeypatch.setenv("CPAMM_ENFORCE_MIN_LP", "YES")
        config = QuoteConfig.from_env()
        assert config.default_slippage == Decimal("0.01")
        assert not config.check_invariant
        assert config.enforce_min_lp_amount

    def test_invalid_env_slippage(self, monkeypatch):
        monkeypatch.setenv("CPAMM_DEFAULT_SLIPPAGE", "2")
        with pytest.raises(InvalidSlippage):
            QuoteConfig.from_env()
