"""Percentage bounded to the 0-100% range."""

from __future__ import annotations

from typing import ClassVar

from lp_pool.math.fixed_point import FIXED_PRECISION
from lp_pool.math.scaled import ScaledAmount


class Percentage(ScaledAmount):
    """Scaled value representing 0% to 100%.

    The raw value must not exceed 100 * FIXED_PRECISION. The constructor is
    the only way to build one, so every holder may rely on the bound.
    """

    MAX: ClassVar[int] = 100 * FIXED_PRECISION

    __slots__ = ()
