"""Pytest configuration and fixtures."""

import pytest

from cpamm.models import GlobalConfig, Pool


@pytest.fixture
def pool() -> Pool:
    """A pool holding 1M X and 2M Y with a 0.3% fee."""
    return Pool(
        id="0x" + "ab" * 32,
        bal_x=1_000_000,
        bal_y=2_000_000,
        lp_supply=1_000_000,
        fee_rate=30,
        min_liquidity=1000,
        min_add_liquidity_lp_amount=1000,
    )


@pytest.fixture
def small_pool() -> Pool:
    """A pool with reserves (1000, 2000) and 1000 LP shares."""
    return Pool(
        id="0x" + "cd" * 32,
        bal_x=1000,
        bal_y=2000,
        lp_supply=1000,
        fee_rate=30,
        min_add_liquidity_lp_amount=100,
    )


@pytest.fixture
def empty_pool() -> Pool:
    """A freshly created pool before its first deposit."""
    return Pool(
        id="0x" + "ef" * 32,
        bal_x=0,
        bal_y=0,
        lp_supply=0,
        fee_rate=30,
        min_liquidity=1000,
        min_add_liquidity_lp_amount=100,
    )


@pytest.fixture
def global_config() -> GlobalConfig:
    """Protocol running with team fees disabled."""
    return GlobalConfig(id="0x" + "01" * 32)


@pytest.fixture
def global_config_fee_on() -> GlobalConfig:
    """Protocol running with team fees enabled."""
    return GlobalConfig(id="0x" + "01" * 32, is_open_protocol_fee=True)


@pytest.fixture
def global_config_paused() -> GlobalConfig:
    """Paused protocol."""
    return GlobalConfig(id="0x" + "01" * 32, has_paused=True)
