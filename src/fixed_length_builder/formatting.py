"""
Slot formatting for fixed-length lines.

Two formatters turn a raw field value into a string of exactly the
field width:

- pad_string: left-aligned text, space padded, silently truncated
- format_number: right-aligned number, zero padded to a digit budget,
  optionally with one sign column ("-" or " ") in front of the digits

Numbers are never grouped with thousands separators: the digit string
must stay clean for zero padding.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from fixed_length_builder.exceptions import (
    FormatError,
    InvalidSchemaError,
    NumericOverflowError,
)

PAD_CHAR = " "
ZERO_CHAR = "0"


def pad_string(raw: str, width: int) -> str:
    """Pad a value with spaces to width, then cut it to exactly width.

    Padding happens before truncation; overflow is not an error.

    Args:
        raw: Unpadded value
        width: Field width

    Returns:
        String of exactly width characters
    """
    padded = raw.ljust(width, PAD_CHAR)
    return padded[:width]


def to_decimal(value: Any) -> Decimal:
    """Convert a record value to Decimal.

    Accepts int, float, Decimal and numeric strings (surrounding
    whitespace allowed).

    Raises:
        FormatError: If the value is not numeric
    """
    if isinstance(value, bool):
        raise FormatError(f"expected a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        # str() keeps the shortest repr, so 42.5 stays 42.5 and not 42.49999...
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise FormatError(f"expected a number, got {value!r}") from None
    else:
        raise FormatError(f"expected a number, got {value!r}")

    if not result.is_finite():
        raise FormatError(f"expected a finite number, got {value!r}")
    return result


def format_digits(value: Decimal, decimals: int) -> str:
    """Format an absolute value with exactly `decimals` places, no grouping.

    Rounds half up: 0.125 with 2 decimals gives "0.13".
    """
    quantum = Decimal(1).scaleb(-decimals)
    try:
        rounded = abs(value).quantize(quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise FormatError(f"cannot represent {value} with {decimals} decimals") from None
    return format(rounded, "f")


def format_number(
    value: Any,
    width: int,
    decimals: int = 0,
    numeric_width: Optional[int] = None,
) -> str:
    """Render a number right-aligned in a field of exactly width characters.

    Without a numeric width (or with numeric_width == width) the digits are
    zero padded to the full width and negative values carry no sign:
        format_number(42, 6) -> "000042"

    With numeric_width < width the signed block is numeric_width wide: one
    sign column ("-" or " ") followed by numeric_width - 1 zero padded
    digits, space padded on the left up to width:
        format_number(-42.5, 10, 2, 9) -> " -00042.50"

    Args:
        value: int, float, Decimal or numeric string
        width: Total field width
        decimals: Fixed number of decimal places
        numeric_width: Width of the signed block, at most width

    Returns:
        String of exactly width characters

    Raises:
        InvalidSchemaError: If numeric_width > width
        FormatError: If value is not numeric
        NumericOverflowError: If the digits do not fit in width
    """
    if numeric_width is not None and numeric_width > width:
        raise InvalidSchemaError(numeric_width=numeric_width, width=width)

    number = to_decimal(value)
    sign = "-" if number < 0 else ""
    digits = format_digits(number, decimals)

    if numeric_width is None or numeric_width == width:
        prefix = ""
        zero_width = width
    else:
        prefix = sign or PAD_CHAR
        zero_width = numeric_width - len(prefix)

    formatted = (prefix + digits.rjust(zero_width, ZERO_CHAR)).rjust(width, PAD_CHAR)
    if len(formatted) > width:
        raise NumericOverflowError(formatted, width)
    return formatted
