"""Pydantic models for pool parameters given as decimal text.

Example:
    params = PoolParameters.model_validate(
        {"price": "1.5", "fee_min": "0.001", "fee_max": "0.09", "liquidity_target": "90."}
    )
    pool = params.build_pool()
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field

from lp_pool.config import PoolConfig
from lp_pool.math.fixed_point import U64_MAX, parse_fixed
from lp_pool.math.percentage import Percentage
from lp_pool.pool import LpPool
from lp_pool.units import Price, TokenAmount


def validate_fixed(value: Any) -> int:
    """Validate a fixed-point value given as decimal text or raw scaled int.

    Args:
        value: Decimal text such as "1.5" or "90.", or an already scaled int

    Returns:
        Raw scaled integer

    Raises:
        ValueError: If value is not parseable decimal text or a non-negative int
    """
    if isinstance(value, bool):
        raise ValueError("Fixed-point value cannot be a bool")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"Fixed-point value cannot be negative: {value}")
        return value
    if not isinstance(value, str):
        raise ValueError(f"Fixed-point value must be string or int, got {type(value).__name__}")
    # ParseError subclasses ValueError, so pydantic reports it as a validation error
    return parse_fixed(value)


# Unsigned 6-decimal fixed-point value
FixedDecimal = Annotated[
    int,
    BeforeValidator(validate_fixed),
    Field(ge=0, le=U64_MAX, description="6-decimal fixed-point value"),
]

# Fixed-point value bounded to 0-100%
PercentageDecimal = Annotated[
    int,
    BeforeValidator(validate_fixed),
    Field(ge=0, le=Percentage.MAX, description="6-decimal fixed-point percentage"),
]


class PoolParameters(BaseModel):
    """Construction parameters for an LpPool."""

    model_config = {"frozen": True, "extra": "forbid"}

    price: FixedDecimal
    fee_min: PercentageDecimal
    fee_max: PercentageDecimal
    liquidity_target: FixedDecimal
    burn_lp_on_withdraw: bool = True

    def build_pool(self) -> LpPool:
        """Create an empty pool from these parameters.

        Raises:
            FeeMaxLowerThanFeeMin: If fee_max < fee_min
            ExchangePriceIsZero: If price is zero
        """
        return LpPool(
            price=Price(self.price),
            fee_min=Percentage(self.fee_min),
            fee_max=Percentage(self.fee_max),
            liquidity_target=TokenAmount(self.liquidity_target),
            config=PoolConfig(burn_lp_on_withdraw=self.burn_lp_on_withdraw),
        )
