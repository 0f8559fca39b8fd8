"""
Parsing and locale-invariant formatting of native and fiat amounts.

The decimal separator is always ``.`` and digits are never grouped. Locale
separators are not supported for money: reading ``"1.234,56"`` where
``"1,234.56"`` was meant moves the wrong amount.
"""

import logging
import math
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from ..shared.errors import (
    InvalidArgumentError,
    InvariantViolationError,
    ParseError,
    ParseErrorKind,
)
from .currency import NATIVE_CURRENCY, Currency, display_precision, require_fiat
from .models import NativeAmount, split_sign
from .native_format import parse_fractional_amount

DECIMAL_SEPARATOR: Final[str] = "."

FractionalParser = Callable[[str], int]

logger = logging.getLogger(__name__)


def from_decimal_string(
    text: str, parse_fractional: FractionalParser = parse_fractional_amount
) -> NativeAmount:
    """
    Parse a decimal amount in whole native units, e.g. ``"-0.25"``.

    Args:
        text: Decimal numeral with an optional leading ``-``
        parse_fractional: Primitive turning an unsigned decimal into atomic units

    Returns:
        NativeAmount holding the exact atomic-unit magnitude

    Raises:
        ParseError: EMPTY, SIGN_ONLY, or MALFORMED when the primitive rejects the body
    """
    is_negative, body = split_sign(text)
    if is_negative and body != body.lstrip():
        raise ParseError(
            ParseErrorKind.MALFORMED, text, "Whitespace between sign and digits"
        )
    try:
        magnitude = parse_fractional(body)
    except ValueError as e:
        raise ParseError(ParseErrorKind.MALFORMED, text, str(e)) from e
    return NativeAmount.from_magnitude_and_sign(magnitude, is_negative)


def to_decimal_string(amount: NativeAmount) -> str:
    """Exact decimal string of ``amount`` with trailing zeros stripped."""
    return amount.to_decimal_string()


def amount_to_float(amount: NativeAmount) -> float:
    """Lossy float value; use only where float error is tolerable."""
    return amount.to_float()


def amount_from_float(value: float) -> NativeAmount:
    """
    Build an amount from a float using its shortest decimal representation.

    Raises:
        InvalidArgumentError: If value is NaN or infinite
        ParseError: If the value needs more than 12 fractional digits
    """
    if not math.isfinite(value):
        raise InvalidArgumentError(f"Cannot build an amount from {value!r}")
    return from_decimal_string(_positional(value))


def round_half_away_from_zero(value: float, places: int) -> float:
    """Round ``value`` to ``places`` decimals, ties going away from zero."""
    multiplier = 10.0**places
    scaled = abs(value) * multiplier
    if not math.isfinite(scaled):
        # no fractional digits left at this scale
        return value
    whole = Decimal(scaled).to_integral_value(rounding=ROUND_HALF_UP)
    rounded = float(whole) / multiplier
    if rounded == 0:
        return 0.0
    return math.copysign(rounded, value)


def two_decimal_string(value: float, places: int) -> str:
    """
    Render ``value`` rounded to ``places`` decimals without grouping.

    The result uses the shortest positional form, so ``3.5`` renders as
    ``"3.5"`` and ``4.0`` as ``"4.0"``; callers pad as needed.
    """
    if not math.isfinite(value):
        raise InvalidArgumentError(f"Cannot format non-finite value {value!r}")
    return _positional(round_half_away_from_zero(value, places))


def format_fiat_amount(value: float, currency: Currency) -> str:
    """
    Format a fiat amount for display, e.g. ``12.5`` in USD as ``"12.50"``.

    Zero renders as ``"0"``.

    Raises:
        InvalidArgumentError: If currency is the native currency or NONE
        InvariantViolationError: If rendering produced too many fractional digits
    """
    if currency is NATIVE_CURRENCY:
        raise InvalidArgumentError(
            "format_fiat_amount must not be called with the native currency"
        )
    require_fiat(currency, "format_fiat_amount")

    if value == 0:
        return "0"

    places = display_precision(currency)
    naive_string = two_decimal_string(value, places)
    components = naive_string.split(DECIMAL_SEPARATOR)

    if len(components) == 1:
        return f"{naive_string}{DECIMAL_SEPARATOR}{'0' * places}"
    if len(components) != 2:
        raise InvariantViolationError(
            f"Expected at most one decimal separator in {naive_string!r}"
        )

    whole, fraction = components
    if len(fraction) > places:
        logger.error(
            f"Formatted {value!r} as {naive_string!r}, more than {places} "
            f"fractional digits for {currency.name}"
        )
        raise InvariantViolationError(
            f"Expected at most {places} fractional digits in {naive_string!r}"
        )

    return f"{whole}{DECIMAL_SEPARATOR}{fraction.ljust(places, '0')}"


def _positional(value: float) -> str:
    """Shortest round-tripping decimal form of ``value``, never in exponent notation."""
    return format(Decimal(repr(value)), "f")
