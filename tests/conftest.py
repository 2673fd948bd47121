"""Pytest configuration and fixtures."""

import pytest

from lp_pool.config import LEGACY_POOL_CONFIG
from lp_pool.pool import LpPool
from lp_pool.units import TokenAmount
from tests.helpers import fx, make_pool


@pytest.fixture
def pool() -> LpPool:
    """Empty reference pool (price 1.5, fees 0.001-0.09, target 90)."""
    return make_pool()


@pytest.fixture
def funded_pool() -> LpPool:
    """Reference pool holding 90 base tokens and 90 LP tokens."""
    pool = make_pool()
    pool.add_liquidity(TokenAmount(fx("90.")))
    return pool


@pytest.fixture
def legacy_pool() -> LpPool:
    """Reference pool that does not burn redeemed LP tokens."""
    return make_pool(config=LEGACY_POOL_CONFIG)
