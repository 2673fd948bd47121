"""Staked-token liquidity pool on 6-decimal fixed-point arithmetic."""

from lp_pool.config import DEFAULT_POOL_CONFIG, LEGACY_POOL_CONFIG, PoolConfig
from lp_pool.errors import (
    CalculationError,
    ExchangePriceIsZero,
    FeeMaxLowerThanFeeMin,
    IncorrectFractionalPart,
    IncorrectIntegerPart,
    LpPoolError,
    MissingDelimiter,
    NegativeAmount,
    ParseError,
    ValueTooLarge,
)
from lp_pool.math import (
    FIXED_PRECISION,
    Percentage,
    format_fixed,
    multiply,
    parse_fixed,
    proportional,
)
from lp_pool.models import PoolParameters
from lp_pool.pool import LpPool, PoolSnapshot
from lp_pool.units import LpTokenAmount, Price, StakedTokenAmount, TokenAmount

__version__ = "0.1.0"
__all__ = [
    # Pool
    "LpPool",
    "PoolSnapshot",
    "PoolConfig",
    "PoolParameters",
    "DEFAULT_POOL_CONFIG",
    "LEGACY_POOL_CONFIG",
    # Amounts
    "TokenAmount",
    "StakedTokenAmount",
    "LpTokenAmount",
    "Price",
    "Percentage",
    # Fixed-point
    "FIXED_PRECISION",
    "parse_fixed",
    "format_fixed",
    "multiply",
    "proportional",
    # Errors
    "LpPoolError",
    "ParseError",
    "MissingDelimiter",
    "IncorrectIntegerPart",
    "IncorrectFractionalPart",
    "FeeMaxLowerThanFeeMin",
    "ExchangePriceIsZero",
    "ValueTooLarge",
    "NegativeAmount",
    "CalculationError",
    "__version__",
]
