"""Nominal amount types used by the pool.

All four share the ScaledAmount representation but are not interchangeable.
"""

from lp_pool.math.scaled import ScaledAmount


class TokenAmount(ScaledAmount):
    """Base token units."""

    __slots__ = ()


class StakedTokenAmount(ScaledAmount):
    """Staked token units."""

    __slots__ = ()


class LpTokenAmount(ScaledAmount):
    """Pool share units."""

    __slots__ = ()


class Price(ScaledAmount):
    """Base tokens per staked token."""

    __slots__ = ()
