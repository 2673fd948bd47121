"""Base class for values stored in the fixed scale."""

from __future__ import annotations

from decimal import Decimal
from typing import ClassVar, TypeVar

from lp_pool.errors import NegativeAmount, ValueTooLarge
from lp_pool.math.fixed_point import U64_MAX, format_fixed, parse_fixed, to_decimal

T = TypeVar("T", bound="ScaledAmount")


class ScaledAmount:
    """Unsigned 64-bit integer counting units of 1/FIXED_PRECISION.

    Subclasses are distinct nominal types: two values are only equal or
    ordered when they are of exactly the same class, so a TokenAmount can
    never stand in for a Price by accident.

    Example: TokenAmount(1_500_000) is 1.5 base tokens
    """

    MAX: ClassVar[int] = U64_MAX

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int) -> None:
        """Create from raw scaled value.

        Raises:
            TypeError: If value is not an int
            NegativeAmount: If value is negative
            ValueTooLarge: If value exceeds the class bound
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{type(self).__name__} requires int, got {type(value).__name__}")
        if value < 0:
            raise NegativeAmount(value)
        if value > self.MAX:
            raise ValueTooLarge(val=value, max=self.MAX)
        self._value = value

    @classmethod
    def from_str(cls: type[T], text: str) -> T:
        """Create from decimal text (see parse_fixed)."""
        return cls(parse_fixed(text))

    @classmethod
    def zero(cls: type[T]) -> T:
        return cls(0)

    @property
    def value(self) -> int:
        """Raw scaled value."""
        return self._value

    def to_decimal(self) -> Decimal:
        """Convert to Decimal for display."""
        return to_decimal(self._value)

    def _check_same_type(self, other: object) -> bool:
        return type(other) is type(self)

    def __eq__(self, other: object) -> bool:
        if not self._check_same_type(other):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __lt__(self: T, other: T) -> bool:
        if not self._check_same_type(other):
            return NotImplemented
        return self._value < other._value

    def __le__(self: T, other: T) -> bool:
        if not self._check_same_type(other):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self: T, other: T) -> bool:
        if not self._check_same_type(other):
            return NotImplemented
        return self._value > other._value

    def __ge__(self: T, other: T) -> bool:
        if not self._check_same_type(other):
            return NotImplemented
        return self._value >= other._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({format_fixed(self._value, pad=True)})"

    def __str__(self) -> str:
        return format_fixed(self._value, pad=True)
