"""
The closed set of currencies known to the wallet and their symbols.
"""

from enum import Enum
from typing import Final

from ..shared.errors import InvalidArgumentError

NATIVE_UNIT_PLACES: Final[int] = 12  # atomic unit is 10**-12 of the native currency
FIAT_UNIT_PLACES: Final[int] = 2


class Currency(Enum):
    """Native currency, supported fiat currencies and the ``NONE`` sentinel."""

    NONE = 0
    XWP = 1
    USD = 2
    AUD = 3
    BRL = 4
    CAD = 5
    CHF = 6
    CNY = 7
    EUR = 8
    GBP = 9
    HKD = 10
    INR = 11
    JPY = 12
    KRW = 13
    MXN = 14
    NOK = 15
    NZD = 16
    SEK = 17
    SGD = 18
    TRY = 19
    RUB = 20
    ZAR = 21


NATIVE_CURRENCY: Final[Currency] = Currency.XWP

_SYMBOLS_BY_CURRENCY: Final[dict[Currency, str]] = {
    Currency.NONE: "",
    Currency.XWP: "XWP",
    Currency.USD: "USD",
    Currency.AUD: "AUD",
    Currency.BRL: "BRL",
    Currency.CAD: "CAD",
    Currency.CHF: "CHF",
    Currency.CNY: "CNY",
    Currency.EUR: "EUR",
    Currency.GBP: "GBP",
    Currency.HKD: "HKD",
    Currency.INR: "INR",
    Currency.JPY: "JPY",
    Currency.KRW: "KRW",
    Currency.MXN: "MXN",
    Currency.NOK: "NOK",
    Currency.NZD: "NZD",
    Currency.SEK: "SEK",
    Currency.SGD: "SGD",
    Currency.TRY: "TRY",
    Currency.RUB: "RUB",
    Currency.ZAR: "ZAR",
}

_CURRENCIES_BY_SYMBOL: Final[dict[str, Currency]] = {
    symbol: currency for currency, symbol in _SYMBOLS_BY_CURRENCY.items()
}

FIAT_CURRENCIES: Final[tuple[Currency, ...]] = tuple(
    currency
    for currency in Currency
    if currency not in (Currency.NONE, NATIVE_CURRENCY)
)


def currency_symbol(currency: Currency) -> str:
    """Return the display symbol of a currency (``""`` for ``NONE``)."""
    return _SYMBOLS_BY_CURRENCY[currency]


def currency_uid(currency: Currency) -> str:
    """Return the unique identifier of a currency, which is its symbol."""
    return currency_symbol(currency)


def currency_from_symbol(symbol: str) -> Currency:
    """
    Look up a currency by its symbol.

    Raises:
        InvalidArgumentError: If the symbol does not name a known currency
    """
    try:
        return _CURRENCIES_BY_SYMBOL[symbol]
    except KeyError:
        raise InvalidArgumentError(f"Unrecognized currency symbol: {symbol!r}") from None


def is_fiat(currency: Currency) -> bool:
    return currency in FIAT_CURRENCIES


def display_precision(currency: Currency) -> int:
    """Number of fractional digits shown for amounts in ``currency``."""
    if currency is NATIVE_CURRENCY:
        return NATIVE_UNIT_PLACES
    return FIAT_UNIT_PLACES


def require_fiat(currency: Currency, operation: str) -> None:
    """Raise InvalidArgumentError unless ``currency`` is a fiat currency."""
    if not is_fiat(currency):
        raise InvalidArgumentError(
            f"{operation} requires a fiat currency, got {currency.name}"
        )
