"""Behaviour configuration for LP pools."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PoolConfig:
    """Behaviour flags for an LpPool.

    Attributes:
        burn_lp_on_withdraw: If True, shares redeemed by remove_liquidity are
            subtracted from the outstanding supply. If False, the supply is left
            untouched, reproducing the legacy accounting where redeemed shares
            stay counted.
    """

    burn_lp_on_withdraw: bool = True


# Default configuration instance
DEFAULT_POOL_CONFIG = PoolConfig()

# Legacy accounting: redeemed shares are not burned
LEGACY_POOL_CONFIG = PoolConfig(burn_lp_on_withdraw=False)
