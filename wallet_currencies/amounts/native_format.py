"""
Exact string <-> fixed-point primitives for the native currency.

These follow the native wallet library's money parser and printer: amounts are
unsigned integers counted in atomic units of 10**-12.
"""

import re
from typing import Final

from ..shared.errors import ParseError, ParseErrorKind
from .currency import NATIVE_UNIT_PLACES

MAX_MAGNITUDE: Final[int] = 2**64 - 1

_DIGITS_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]+")


def parse_atomic_magnitude(text: str) -> int:
    """
    Parse an unsigned integer count of atomic units.

    Raises:
        ParseError: If the text is not made of ASCII digits or overflows 64 bits
    """
    if not _DIGITS_PATTERN.fullmatch(text):
        raise ParseError(ParseErrorKind.MALFORMED, text)

    magnitude = int(text)
    if magnitude > MAX_MAGNITUDE:
        raise ParseError(
            ParseErrorKind.MALFORMED,
            text,
            f"Amount {text!r} exceeds the maximum of {MAX_MAGNITUDE} atomic units",
        )
    return magnitude


def parse_fractional_amount(text: str, decimal_point: int = NATIVE_UNIT_PLACES) -> int:
    """
    Parse an unsigned decimal such as ``"1.5"`` into atomic units.

    Surrounding whitespace is ignored. Trailing zeros beyond ``decimal_point``
    fractional digits are tolerated; any other extra precision is rejected.

    Args:
        text: Decimal numeral without a sign
        decimal_point: Number of fractional digits in one whole unit

    Returns:
        Magnitude in atomic units

    Raises:
        ParseError: With kind MALFORMED on invalid syntax or overflow
    """
    stripped = text.strip()
    if not stripped:
        raise ParseError(ParseErrorKind.MALFORMED, text)

    integer_part, point, fraction = stripped.partition(".")

    if point:
        if len(fraction) > decimal_point:
            fraction = fraction.rstrip("0").ljust(decimal_point, "0")
        if len(fraction) > decimal_point:
            raise ParseError(
                ParseErrorKind.MALFORMED,
                text,
                f"Amount {text!r} has more than {decimal_point} fractional digits",
            )
        if not integer_part and not fraction:
            raise ParseError(ParseErrorKind.MALFORMED, text)

    digits = (integer_part or "0") + fraction.ljust(decimal_point, "0")
    try:
        return parse_atomic_magnitude(digits)
    except ParseError as e:
        raise ParseError(ParseErrorKind.MALFORMED, text) from e


def print_fixed_point_amount(magnitude: int, decimal_point: int = NATIVE_UNIT_PLACES) -> str:
    """Render atomic units with exactly ``decimal_point`` fractional digits."""
    whole, fraction = divmod(magnitude, 10**decimal_point)
    if decimal_point == 0:
        return str(whole)
    return f"{whole}.{fraction:0{decimal_point}d}"
