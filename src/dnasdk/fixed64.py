"""
Fixed-point amount handling.

Amounts travel as plain ints scaled by 10**8. Conversion from text goes
through Decimal so that no float rounding ever reaches a scaled value.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from dnasdk.constants import FIXED64_MAX, FIXED64_MIN, FIXED64_SCALE, PRECISION
from dnasdk.errors import InvalidAmount

DECIMAL_TEXT = re.compile(r"[+-]?\d+(\.\d+)?", re.ASCII)


def string_to_fixed64(text: str) -> int:
    """
    Parse a decimal string into a scaled fixed-point integer.

    Args:
        text: Decimal amount such as "12", "0.5" or "-3.25"

    Returns:
        Amount scaled by 10**8

    Raises:
        InvalidAmount: If the text is not a plain decimal number, has more
            than 8 fraction digits or does not fit a signed 64-bit integer
    """
    text = text.strip()
    if not DECIMAL_TEXT.fullmatch(text):
        raise InvalidAmount(f"Invalid amount: {text!r}")

    try:
        value = Decimal(text)
    except InvalidOperation as e:
        raise InvalidAmount(f"Invalid amount: {text!r}") from e

    return decimal_to_fixed64(value)


def decimal_to_fixed64(value: Decimal | float | int) -> int:
    """Scale a Decimal (or exact int/float) into a fixed-point integer."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))

    if not value.is_finite():
        raise InvalidAmount(f"Amount is not finite: {value}")

    exponent = value.as_tuple().exponent
    if isinstance(exponent, int) and exponent < -PRECISION:
        raise InvalidAmount(f"Unsupported precision, at most {PRECISION} decimals: {value}")

    scaled = int(value * FIXED64_SCALE)
    if scaled > FIXED64_MAX or scaled < FIXED64_MIN:
        raise InvalidAmount(f"Amount out of range: {value}")

    return scaled


def fixed64_to_string(value: int) -> str:
    """Format a fixed-point integer as decimal text without trailing zeros."""
    sign = "-" if value < 0 else ""
    whole, frac = divmod(abs(value), FIXED64_SCALE)
    if frac == 0:
        return f"{sign}{whole}"
    frac_text = f"{frac:0{PRECISION}d}".rstrip("0")
    return f"{sign}{whole}.{frac_text}"
