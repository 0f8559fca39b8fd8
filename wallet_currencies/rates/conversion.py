"""
Conversion between native amounts and fiat display amounts.
"""

import logging
from typing import Final

from ..amounts.currency import NATIVE_CURRENCY, Currency, display_precision
from ..amounts.formatting import (
    format_fiat_amount,
    round_half_away_from_zero,
    to_decimal_string,
)
from ..amounts.models import NativeAmount, magnitude_to_float
from ..amounts.native_format import MAX_MAGNITUDE
from ..shared.errors import InvalidArgumentError
from .controller import ConversionRateCache

# Fiat -> native results are rounded to 4 places rather than 2: fiat amounts
# rarely exceed 10-100 native units, and low-rate currencies would otherwise
# round to 0. 5 places is excessive.
IMPLIED_NATIVE_AMOUNT_ROUNDING_PLACES: Final[int] = 4

logger = logging.getLogger(__name__)


def _require_currency(currency: Currency) -> None:
    if currency is Currency.NONE:
        raise InvalidArgumentError("Selected currency unexpectedly NONE")


def display_amount_in_currency(
    native_amount: NativeAmount | int,
    currency: Currency,
    cache: ConversionRateCache,
) -> float | None:
    """
    Value of a native amount in ``currency``, rounded for display.

    Args:
        native_amount: NativeAmount, or an unsigned atomic-unit magnitude
        currency: Target currency; the native currency needs no rate
        cache: Source of conversion rates

    Returns:
        Rounded amount, or None while the rate is unknown. Callers retry after
        the cache's next change notification.

    Raises:
        InvalidArgumentError: If currency is NONE or a raw magnitude is out of range
    """
    _require_currency(currency)

    if isinstance(native_amount, NativeAmount):
        native_value = native_amount.to_float()
    elif 0 <= native_amount <= MAX_MAGNITUDE:
        native_value = magnitude_to_float(native_amount)
    else:
        raise InvalidArgumentError(
            f"Atomic-unit magnitude must be in [0, {MAX_MAGNITUDE}], got {native_amount}"
        )

    if currency is NATIVE_CURRENCY:
        return native_value

    rate = cache.rate(currency)
    if rate is None:
        logger.debug(f"No {currency.name} rate yet, conversion deferred")
        return None

    return round_half_away_from_zero(native_value * rate, display_precision(currency))


def implied_native_amount(
    fiat_amount: float,
    currency: Currency,
    cache: ConversionRateCache,
) -> float | None:
    """
    Native amount corresponding to a fiat amount entered by the user.

    The result is rounded here rather than only at display time so the amount
    that gets sent matches the amount the user was shown.

    Returns:
        Amount in whole native units rounded to 4 places, or None while the
        rate is unknown

    Raises:
        InvalidArgumentError: If currency is NONE or the native currency
    """
    _require_currency(currency)

    rate = cache.rate(currency)
    if rate is None:
        logger.debug(f"No {currency.name} rate yet, conversion deferred")
        return None

    return round_half_away_from_zero(
        fiat_amount / rate, IMPLIED_NATIVE_AMOUNT_ROUNDING_PLACES
    )


def display_string_components(
    amount: NativeAmount,
    currency: Currency,
    cache: ConversionRateCache,
) -> tuple[str, Currency]:
    """
    Display string for ``amount`` in ``currency`` and the currency actually used.

    Falls back to the native amount and currency until the rate is known.
    """
    if currency is not NATIVE_CURRENCY:
        converted = display_amount_in_currency(amount, currency, cache)
        if converted is not None:
            return format_fiat_amount(converted, currency), currency

    return to_decimal_string(amount), NATIVE_CURRENCY
