"""
Tests for slot formatting: string padding and number formatting.
"""

from decimal import Decimal

import pytest

from fixed_length_builder.exceptions import (
    FormatError,
    InvalidSchemaError,
    NumericOverflowError,
)
from fixed_length_builder.formatting import (
    format_digits,
    format_number,
    pad_string,
    to_decimal,
)


class TestPadString:
    """Tests for pad_string."""

    def test_truncates_long_value(self):
        """Values longer than the width are cut."""
        assert pad_string("HELLOWORLD", 5) == "HELLO"

    def test_pads_short_value(self):
        """Values shorter than the width are space padded on the right."""
        assert pad_string("HI", 5) == "HI   "

    def test_exact_width(self):
        assert pad_string("ABCDE", 5) == "ABCDE"

    def test_zero_width(self):
        """A zero-width slot renders nothing."""
        assert pad_string("ABC", 0) == ""

    def test_empty_value(self):
        assert pad_string("", 3) == "   "


class TestToDecimal:
    """Tests for numeric value conversion."""

    def test_int(self):
        assert to_decimal(42) == Decimal("42")

    def test_float_keeps_short_repr(self):
        assert to_decimal(42.5) == Decimal("42.5")

    def test_numeric_string(self):
        assert to_decimal(" 12.30 ") == Decimal("12.30")

    def test_non_numeric_string(self):
        with pytest.raises(FormatError):
            to_decimal("abc")

    def test_bool_rejected(self):
        with pytest.raises(FormatError):
            to_decimal(True)

    def test_none_rejected(self):
        with pytest.raises(FormatError):
            to_decimal(None)

    def test_nan_rejected(self):
        with pytest.raises(FormatError):
            to_decimal(float("nan"))


class TestFormatDigits:
    """Tests for fixed decimal formatting."""

    def test_adds_decimals(self):
        assert format_digits(Decimal("1234.5"), 2) == "1234.50"

    def test_no_grouping_separators(self):
        """Large numbers are never grouped with commas."""
        assert format_digits(Decimal("1234567.891"), 2) == "1234567.89"

    def test_rounds_half_up(self):
        assert format_digits(Decimal("0.125"), 2) == "0.13"
        assert format_digits(Decimal("2.5"), 0) == "3"

    def test_absolute_value(self):
        assert format_digits(Decimal("-7.1"), 1) == "7.1"


class TestFormatNumber:
    """Tests for format_number."""

    def test_signed_negative_with_numeric_width(self):
        """The sign takes the first column of the numeric width."""
        result = format_number(-42.5, width=10, decimals=2, numeric_width=9)
        assert result == " -00042.50"
        assert len(result) == 10

    def test_signed_positive_with_numeric_width(self):
        """Positive numbers get a blank in the sign column."""
        assert format_number(42.5, width=10, decimals=2, numeric_width=9) == "  00042.50"

    def test_sign_column_fills_width(self):
        """A numeric width one short of the width leaves no outer padding."""
        assert format_number(-7, width=6, decimals=0, numeric_width=5) == " -0007"
        assert format_number(-7, width=6, decimals=0, numeric_width=6) == "000007"

    def test_unsigned_integer(self):
        assert format_number(42, width=6, decimals=0, numeric_width=None) == "000042"

    def test_numeric_width_equal_to_width(self):
        """Equal widths behave like no reservation."""
        assert format_number(42, width=6, decimals=0, numeric_width=6) == "000042"

    def test_negative_without_reservation_drops_sign(self):
        assert format_number(-42, width=6) == "000042"

    def test_zero_is_not_negative(self):
        assert format_number(0, width=5, decimals=1, numeric_width=4) == "  0.0"

    def test_decimal_and_string_values(self):
        assert format_number(Decimal("3.14159"), width=6, decimals=3) == "03.142"
        assert format_number("12", width=4) == "0012"

    def test_numeric_width_larger_than_width(self):
        with pytest.raises(InvalidSchemaError) as exc_info:
            format_number(1, width=10, decimals=0, numeric_width=11)
        assert exc_info.value.numeric_width == 11
        assert exc_info.value.width == 10

    def test_overflow_raises(self):
        """A number wider than its field is an error, never a wider line."""
        with pytest.raises(NumericOverflowError):
            format_number(123456, width=4)

    def test_overflow_in_sign_column(self):
        with pytest.raises(NumericOverflowError):
            format_number(-12345, width=5, numeric_width=4)

    def test_overflow_is_a_format_error(self):
        with pytest.raises(FormatError):
            format_number(99999.5, width=6, decimals=2)

    def test_non_numeric(self):
        with pytest.raises(FormatError):
            format_number("N/A", width=5)

    @pytest.mark.parametrize(
        "value,width,decimals,numeric_width",
        [
            (0, 1, 0, None),
            (-1.5, 8, 2, 7),
            (1e6, 12, 2, 10),
            ("0042", 4, 0, None),
        ],
    )
    def test_result_has_field_width(self, value, width, decimals, numeric_width):
        assert len(format_number(value, width, decimals, numeric_width)) == width
