"""Fixed-point primitives for pool calculations.

This package provides:
- parse_fixed / format_fixed: decimal text <-> 6-decimal scaled integers
- multiply / proportional: overflow-checked scaled arithmetic
- ScaledAmount: base class for unsigned scaled values
- Percentage: scaled value bounded to 0-100%
"""

from lp_pool.math.fixed_point import (
    FIXED_PRECISION,
    U64_MAX,
    format_fixed,
    multiply,
    parse_fixed,
    proportional,
    to_decimal,
)
from lp_pool.math.scaled import ScaledAmount
from lp_pool.math.percentage import Percentage

__all__ = [
    "FIXED_PRECISION",
    "U64_MAX",
    "Percentage",
    "ScaledAmount",
    "format_fixed",
    "multiply",
    "parse_fixed",
    "proportional",
    "to_decimal",
]
