"""Safe integer wrapper for arithmetic on scaled amounts.

This module provides SafeInt, a lightweight wrapper that makes arithmetic
operations safe by default:
- Subtraction underflow raises Underflow
- u64 overflow (or a negative value) is caught on conversion

Python ints are unbounded, so products never wrap; they act as the wide
intermediate and the u64 range is only enforced when leaving SafeInt.

Usage pattern:
    from lp_pool.safe_int import S

    def calculate(a: int, b: int, c: int) -> int:
        # Wrap at entry
        sa, sb, sc = S(a), S(b), S(c)

        # Natural arithmetic - automatically safe
        result = (sa * sb) // sc
        remainder = sa - sb       # Raises if sb > sa

        # Unwrap at exit, validating the u64 range
        return result.to_u64()
"""

from __future__ import annotations

from lp_pool.errors import CalculationError

U64_MAX = 2**64 - 1


class SafeIntError(CalculationError):
    """Base class for SafeInt arithmetic errors."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce negative result."""

    pass


class U64Overflow(SafeIntError):
    """Value is negative or exceeds u64 maximum."""

    pass


class SafeInt:
    """Integer with checked subtraction and u64 narrowing.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")
        self._value = value

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _extract_value(other))

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value // _extract_value(other))

    # --- Conversion ---

    def to_u64(self) -> int:
        """Convert to int, validating u64 bounds.

        Raises:
            U64Overflow: If value is negative or exceeds 2^64-1
        """
        if self._value < 0:
            raise U64Overflow(f"Negative value cannot be u64: {self._value}")
        if self._value > U64_MAX:
            raise U64Overflow(f"Value exceeds u64 max: {self._value}")
        return self._value


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
