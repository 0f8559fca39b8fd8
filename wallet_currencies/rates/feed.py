"""
Ingestion of rate payloads produced by an external rate source.

Fetching is the host's job; this module turns a ``{symbol: rate}`` payload
into a validated batch for the cache.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ..amounts.currency import Currency
from .controller import ConversionRateCache
from .models import RateQuote

logger = logging.getLogger(__name__)


def parse_rate_quote(symbol: str, rate: Any) -> RateQuote | None:
    """Validate one payload entry, returning None if it cannot be used."""
    try:
        return RateQuote(symbol=symbol, rate=rate)
    except ValidationError as e:
        logger.warning(
            f"Skipping rate entry {symbol!r}: {rate!r}, "
            f"{e.error_count()} validation error(s)"
        )
        return None


def parse_rate_payload(payload: Mapping[str, Any]) -> dict[Currency, float]:
    """
    Validate a ``{symbol: rate}`` payload.

    Unknown symbols, the native currency, and non-positive or non-numeric
    rates are skipped with a warning.

    Returns:
        Mapping of fiat currency to rate ready for ``set_batch``
    """
    quotes = [
        quote
        for symbol, rate in payload.items()
        if (quote := parse_rate_quote(symbol, rate))
    ]

    logger.debug(f"Parsed {len(quotes)} of {len(payload)} rate entries")
    return {quote.currency: quote.rate for quote in quotes}


def ingest_rate_payload(
    cache: ConversionRateCache, payload: Mapping[str, Any]
) -> bool:
    """
    Apply a rate payload to ``cache`` as a single batch.

    Returns:
        True if any rate changed, in which case listeners were notified once
    """
    rates_by_currency = parse_rate_payload(payload)
    if not rates_by_currency:
        logger.warning("Rate payload contained no usable entries")
        return False
    return cache.set_batch(rates_by_currency)
