"""Fixed-point decimal arithmetic on unsigned 64-bit scaled integers.

All monetary values are stored as integers counting units of 1/1,000,000.
Example: 1.5 is stored as 1_500_000

Products are formed on unbounded Python ints, which play the role of the
wide intermediate, and every result is range-checked back into u64.
"""

from __future__ import annotations

import re
from decimal import Decimal

from lp_pool.errors import (
    CalculationError,
    IncorrectFractionalPart,
    IncorrectIntegerPart,
    MissingDelimiter,
)
from lp_pool.safe_int import U64_MAX, S, U64Overflow

__all__ = [
    # Constants
    "FIXED_PRECISION",
    "FRACTIONAL_DIGITS",
    "U64_MAX",
    # Functions
    "parse_fixed",
    "multiply",
    "proportional",
    "format_fixed",
    "to_decimal",
]

# =============================================================================
# Constants
# =============================================================================

FIXED_PRECISION = 1_000_000
FRACTIONAL_DIGITS = 6

DELIMITER = "."

_INTEGER_PART = re.compile(r"\+?[0-9]+")


# =============================================================================
# Parsing and formatting
# =============================================================================


def parse_fixed(text: str) -> int:
    """Parse decimal text such as "90." or "0.9991" into a scaled integer.

    The text is split on its first '.'. Digits beyond the sixth fractional
    position are accepted but contribute nothing (truncation, not rounding).

    Args:
        text: Decimal text with exactly one '.' separator

    Returns:
        Value scaled by FIXED_PRECISION

    Raises:
        MissingDelimiter: If text contains no '.'
        IncorrectIntegerPart: If the integer part is not ASCII digits with an
            optional leading "+", or the value does not fit in u64
        IncorrectFractionalPart: If a fractional character is not a digit

    Examples:
        parse_fixed("9.") == 9_000_000
        parse_fixed("0.9991") == 999_100
        parse_fixed("0.99999999") == parse_fixed("0.999999")
    """
    integer_text, sep, fractional_text = text.partition(DELIMITER)
    if not sep:
        raise MissingDelimiter(text)
    if not _INTEGER_PART.fullmatch(integer_text):
        raise IncorrectIntegerPart(text)

    fractional = 0
    for position, char in enumerate(fractional_text):
        if not ("0" <= char <= "9"):
            raise IncorrectFractionalPart(position, char)
        fractional += int(char) * (FIXED_PRECISION // 10 ** (position + 1))

    value = int(integer_text) * FIXED_PRECISION + fractional
    if value > U64_MAX:
        raise IncorrectIntegerPart(text)
    return value


def format_fixed(value: int, pad: bool = False) -> str:
    """Render a scaled integer as "<integer>.<fractional>".

    By default the fractional remainder is printed as a plain integer, so
    9_000 renders as "0.9000" rather than "0.009000". Pass pad=True for the
    canonical six-digit width that parses back to the same value.
    """
    integer, fractional = divmod(value, FIXED_PRECISION)
    if pad:
        return f"{integer}.{fractional:0{FRACTIONAL_DIGITS}d}"
    return f"{integer}.{fractional}"


def to_decimal(value: int) -> Decimal:
    """Convert to Decimal for display."""
    return Decimal(value) / Decimal(FIXED_PRECISION)


# =============================================================================
# Arithmetic
# =============================================================================


def multiply(a: int, b: int) -> int:
    """Multiply two scaled values with floor rounding: (a * b) // 10^6

    Raises:
        TypeError: If an operand is not an int
        CalculationError: If an operand or the result is outside u64
    """
    a, b = _narrow(S(a)), _narrow(S(b))
    return _narrow((S(a) * b) // FIXED_PRECISION)


def proportional(amount: int, numerator: int, denominator: int) -> int:
    """Scale amount by numerator/denominator with floor rounding.

    A zero denominator returns amount unchanged instead of dividing.

    Args:
        amount: Value to scale
        numerator: Ratio numerator
        denominator: Ratio denominator

    Returns:
        (amount * numerator) // denominator, or amount if denominator == 0

    Raises:
        TypeError: If an argument is not an int
        CalculationError: If an argument or the result is outside u64
    """
    amount = _narrow(S(amount))
    numerator = _narrow(S(numerator))
    denominator = _narrow(S(denominator))
    if denominator == 0:
        return amount
    return _narrow((S(amount) * numerator) // denominator)


def _narrow(result: S) -> int:
    try:
        return result.to_u64()
    except U64Overflow as err:
        raise CalculationError(str(err)) from err
