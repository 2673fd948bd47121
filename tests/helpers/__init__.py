"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Reference pool parameters and common amounts
- factories: Pool factory functions
"""

from tests.helpers.constants import (
    FEE_MAX,
    FEE_MIN,
    HUNDRED,
    LIQUIDITY_TARGET,
    ONE,
    PRICE,
)
from tests.helpers.factories import fx, make_pool

__all__ = [
    # Constants
    "PRICE",
    "FEE_MIN",
    "FEE_MAX",
    "LIQUIDITY_TARGET",
    "ONE",
    "HUNDRED",
    # Factories
    "fx",
    "make_pool",
]
