"""LP pool error classes.

All errors raised by the pool and its arithmetic derive from LpPoolError.
Errors carry their context as attributes and compare equal by kind and
attributes, so callers can match on exact failures.
"""

from __future__ import annotations

from typing import Any


class LpPoolError(Exception):
    """Base error for LP pool operations."""

    def _fields(self) -> tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))


# =============================================================================
# Parsing errors
# =============================================================================


class ParseError(LpPoolError, ValueError):
    """Decimal text could not be parsed into a fixed-point value."""

    pass


class MissingDelimiter(ParseError):
    """Decimal text has no '.' separator."""

    def __init__(self, text: str = "") -> None:
        super().__init__(f"Missing '.' delimiter in {text!r}")


class IncorrectIntegerPart(ParseError):
    """Integer part is not a non-negative base-10 integer that fits the scale."""

    def __init__(self, text: str = "") -> None:
        super().__init__(f"Incorrect integer part in {text!r}")


class IncorrectFractionalPart(ParseError):
    """A fractional character is not a base-10 digit."""

    def __init__(self, position: int, char: str) -> None:
        super().__init__(f"Incorrect fractional digit {char!r} at position {position}")
        self.position = position
        self.char = char

    def _fields(self) -> tuple[Any, ...]:
        return (self.position, self.char)


# =============================================================================
# Pool construction errors
# =============================================================================


class FeeMaxLowerThanFeeMin(LpPoolError):
    """Maximum fee is lower than minimum fee."""

    def __init__(self, max: Any, min: Any) -> None:
        super().__init__(f"fee_max {max} is lower than fee_min {min}")
        self.max = max
        self.min = min

    def _fields(self) -> tuple[Any, ...]:
        return (self.max, self.min)


class ExchangePriceIsZero(LpPoolError):
    """Exchange price must be non-zero."""

    def __init__(self) -> None:
        super().__init__("Exchange price is zero")


# =============================================================================
# Range and arithmetic errors
# =============================================================================


class ValueTooLarge(LpPoolError, ValueError):
    """A requested quantity exceeds its bound."""

    def __init__(self, val: int, max: int) -> None:
        super().__init__(f"Value {val} exceeds maximum {max}")
        self.val = val
        self.max = max

    def _fields(self) -> tuple[Any, ...]:
        return (self.val, self.max)


class NegativeAmount(LpPoolError, ValueError):
    """Scaled amounts are unsigned."""

    def __init__(self, val: int) -> None:
        super().__init__(f"Scaled amount cannot be negative: {val}")
        self.val = val

    def _fields(self) -> tuple[Any, ...]:
        return (self.val,)


class CalculationError(LpPoolError, ArithmeticError):
    """Arithmetic overflow, underflow or range exhaustion.

    Subclasses give the specific cause, but all of them compare equal to a
    bare CalculationError so that callers can treat them as one kind.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalculationError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(CalculationError)
