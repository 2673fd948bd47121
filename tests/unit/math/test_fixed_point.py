"""Tests for 6-decimal fixed-point parsing, formatting and arithmetic."""

from decimal import Decimal

import pytest

from lp_pool.errors import (
    CalculationError,
    IncorrectFractionalPart,
    IncorrectIntegerPart,
    MissingDelimiter,
    ParseError,
)
from lp_pool.math.fixed_point import (
    FIXED_PRECISION,
    U64_MAX,
    format_fixed,
    multiply,
    parse_fixed,
    proportional,
    to_decimal,
)


class TestParseFixed:
    """Tests for parse_fixed()."""

    def test_integer_only(self):
        """Trailing '.' with no fraction parses as a whole number."""
        assert parse_fixed("9.") == 9 * FIXED_PRECISION
        assert parse_fixed("90.") == 90 * FIXED_PRECISION

    def test_single_fractional_digit(self):
        assert parse_fixed("0.9") == 9 * FIXED_PRECISION // 10

    def test_several_fractional_digits(self):
        assert parse_fixed("0.9991") == 9991 * FIXED_PRECISION // 10000
        assert parse_fixed("1.5") == 1_500_000
        assert parse_fixed("43.44237") == 43_442_370

    def test_zero(self):
        assert parse_fixed("0.") == 0
        assert parse_fixed("0.000000") == 0

    def test_digits_beyond_precision_are_truncated(self):
        """Digits past the sixth contribute nothing; no rounding up."""
        assert parse_fixed("0.99999999") == parse_fixed("0.999999")
        assert parse_fixed("1.0000009") == parse_fixed("1.")

    def test_very_long_fraction(self):
        """Long fractions are accepted and truncated."""
        assert parse_fixed("2." + "9" * 40) == parse_fixed("2.999999")

    def test_leading_plus_sign(self):
        """An explicit "+" on the integer part is accepted, as in "+1.5"."""
        assert parse_fixed("+1.5") == 1_500_000
        assert parse_fixed("+0.") == 0

    def test_missing_delimiter(self):
        with pytest.raises(MissingDelimiter):
            parse_fixed("90")

    def test_empty_string(self):
        with pytest.raises(MissingDelimiter):
            parse_fixed("")

    @pytest.mark.parametrize("text", [".5", "-1.5", "+.5", "++1.5", "1_0.5", " 1.5", "a.5", "١.5"])
    def test_incorrect_integer_part(self, text):
        """Only ASCII digits, optionally led by one "+", precede the separator."""
        with pytest.raises(IncorrectIntegerPart):
            parse_fixed(text)

    def test_incorrect_fractional_part_reports_position(self):
        with pytest.raises(IncorrectFractionalPart) as exc_info:
            parse_fixed("1.23x4")
        assert exc_info.value.position == 2
        assert exc_info.value.char == "x"

    def test_second_delimiter_is_a_fractional_error(self):
        """Text is split on the first '.', so a second one is a bad digit."""
        with pytest.raises(IncorrectFractionalPart) as exc_info:
            parse_fixed("1.2.3")
        assert exc_info.value == IncorrectFractionalPart(1, ".")

    def test_integer_part_too_large_for_u64(self):
        too_big = str(U64_MAX // FIXED_PRECISION + 1)
        with pytest.raises(IncorrectIntegerPart):
            parse_fixed(too_big + ".")

    def test_largest_representable(self):
        text = format_fixed(U64_MAX, pad=True)
        assert parse_fixed(text) == U64_MAX

    def test_parse_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_fixed("nope")
        assert issubclass(MissingDelimiter, ParseError)


class TestFormatFixed:
    """Tests for format_fixed()."""

    def test_whole_number(self):
        assert format_fixed(90 * FIXED_PRECISION) == "90.0"

    def test_fraction_is_not_padded_by_default(self):
        """The remainder prints as a plain integer."""
        assert format_fixed(9_000) == "0.9000"
        assert format_fixed(1_500_000) == "1.500000"

    def test_padded(self):
        assert format_fixed(9_000, pad=True) == "0.009000"
        assert format_fixed(90 * FIXED_PRECISION, pad=True) == "90.000000"

    @pytest.mark.parametrize(
        "text",
        ["0.1", "0.05", "1.5", "43.44237", "57.56663", "109.9991", "0.000001", "123456.654321"],
    )
    def test_padded_round_trip(self, text):
        """Padded output parses back to the same value."""
        value = parse_fixed(text)
        assert parse_fixed(format_fixed(value, pad=True)) == value

    def test_to_decimal(self):
        assert to_decimal(parse_fixed("57.56663")) == Decimal("57.56663")


class TestMultiply:
    """Tests for multiply()."""

    def test_basic(self):
        assert multiply(parse_fixed("0.1"), parse_fixed("0.1")) == parse_fixed("0.01")
        assert multiply(parse_fixed("6."), parse_fixed("1.5")) == parse_fixed("9.")

    def test_floor_rounding(self):
        """Sub-unit remainders are dropped."""
        assert multiply(1, parse_fixed("1.5")) == 1
        assert multiply(1, parse_fixed("0.5")) == 0

    @pytest.mark.parametrize("x", [0, 1, 999_999, parse_fixed("57.56663"), U64_MAX])
    def test_identity(self, x):
        """Multiplying by 1.0 returns the input unchanged."""
        assert multiply(parse_fixed("1."), x) == x
        assert multiply(x, parse_fixed("1.")) == x

    def test_wide_intermediate(self):
        """a * b may exceed u64 as long as the scaled result fits."""
        assert multiply(U64_MAX, 1) == U64_MAX // FIXED_PRECISION

    def test_overflow(self):
        with pytest.raises(CalculationError):
            multiply(U64_MAX, U64_MAX)

    def test_overflow_just_past_max(self):
        with pytest.raises(CalculationError):
            multiply(U64_MAX, FIXED_PRECISION + 1)

    @pytest.mark.parametrize("a,b", [(-1, -1), (-1, FIXED_PRECISION), (U64_MAX + 1, 0)])
    def test_operands_outside_u64(self, a, b):
        """Operands are range-checked even when the product would fit."""
        with pytest.raises(CalculationError):
            multiply(a, b)

    def test_non_int_operand(self):
        with pytest.raises(TypeError):
            multiply(1.5, FIXED_PRECISION)  # type: ignore[arg-type]


class TestProportional:
    """Tests for proportional()."""

    def test_basic(self):
        numerator = parse_fixed("10.")
        denominator = parse_fixed("90.009") + numerator
        amount = parse_fixed("100.")
        assert proportional(amount, numerator, denominator) == parse_fixed("9.9991")

    @pytest.mark.parametrize("x,n", [(0, 0), (1, 5), (parse_fixed("42.5"), U64_MAX), (U64_MAX, U64_MAX)])
    def test_zero_denominator_returns_amount(self, x, n):
        assert proportional(x, n, 0) == x

    @pytest.mark.parametrize(
        "x,n,d", [(-5, 1, 0), (5, -1, 1), (5, 1, -1), (U64_MAX + 1, 1, 0), (1, U64_MAX + 1, 2)]
    )
    def test_arguments_outside_u64(self, x, n, d):
        """Every argument is range-checked, including on the zero-denominator path."""
        with pytest.raises(CalculationError):
            proportional(x, n, d)

    def test_full_share(self):
        assert proportional(parse_fixed("36."), 7, 7) == parse_fixed("36.")

    def test_floor_rounding(self):
        assert proportional(10, 1, 3) == 3

    def test_overflow(self):
        with pytest.raises(CalculationError):
            proportional(U64_MAX, U64_MAX, parse_fixed("90.009"))

    def test_wide_intermediate(self):
        """amount * numerator may exceed u64 if the quotient fits."""
        assert proportional(U64_MAX, U64_MAX, U64_MAX) == U64_MAX
