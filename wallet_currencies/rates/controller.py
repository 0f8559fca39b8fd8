"""
Cache of the latest known exchange rates from the native currency to fiat.
"""

import logging
import math
import threading
from collections.abc import Mapping

from ..amounts.currency import Currency, require_fiat
from ..shared.errors import InvalidArgumentError
from .events import EventSubscribers, Listener

logger = logging.getLogger(__name__)


class ConversionRateCache:
    """
    Latest known native -> fiat rates, where ``fiat = native * rate``.

    A currency without an entry has no known rate yet; that is an expected
    state, not an error. Rates are replaced but never removed, so a currency
    that became ready stays ready. Listeners of
    ``did_update_availability_of_rates`` run after the internal lock has been
    released and may call back into the cache.
    """

    def __init__(self) -> None:
        self._rates: dict[Currency, float] = {}
        self._lock = threading.Lock()
        self.did_update_availability_of_rates = EventSubscribers(
            "did_update_availability_of_rates"
        )

    def subscribe(self, listener: Listener) -> int:
        """Shortcut for subscribing to rate change notifications."""
        return self.did_update_availability_of_rates.subscribe(listener)

    def unsubscribe(self, handle: int) -> bool:
        return self.did_update_availability_of_rates.unsubscribe(handle)

    def is_ready(self, currency: Currency) -> bool:
        """
        Whether a rate for ``currency`` is known.

        Raises:
            InvalidArgumentError: If currency is the native currency or NONE
        """
        require_fiat(currency, "is_ready")
        with self._lock:
            return currency in self._rates

    def rate(self, currency: Currency) -> float | None:
        """
        Latest rate for ``currency``, or None while it is not known.

        Raises:
            InvalidArgumentError: If currency is the native currency or NONE
        """
        require_fiat(currency, "rate")
        with self._lock:
            return self._rates.get(currency)

    def rates(self) -> dict[Currency, float]:
        """Snapshot of every known rate."""
        with self._lock:
            return dict(self._rates)

    def set_one(
        self, rate: float, currency: Currency, suppress_notify: bool = False
    ) -> bool:
        """
        Store the rate for one fiat currency.

        Listeners are notified only when the value changed.

        Args:
            rate: Fiat units per one native unit, finite and positive
            currency: Fiat currency the rate applies to
            suppress_notify: Skip the notification (used by set_batch)

        Returns:
            True if the stored value changed, including the first time it is set

        Raises:
            InvalidArgumentError: For non-fiat currencies or invalid rates
        """
        _validate_rate(rate, currency)

        with self._lock:
            previous = self._rates.get(currency)
            self._rates[currency] = rate

        was_changed = previous != rate
        if was_changed and not suppress_notify:
            self._notify_of_rate_update()
        return was_changed

    def set_batch(self, rates_by_currency: Mapping[Currency, float]) -> bool:
        """
        Store several rates and notify listeners at most once.

        Returns:
            True if any stored value changed; listeners were notified exactly then
        """
        for currency, rate in rates_by_currency.items():
            _validate_rate(rate, currency)

        changed = [
            currency
            for currency, rate in rates_by_currency.items()
            if self.set_one(rate, currency, suppress_notify=True)
        ]

        if not changed:
            logger.debug(
                f"Rate batch of {len(rates_by_currency)} entries changed nothing"
            )
            return False

        logger.debug(f"Received rate updates: {self.rates()}")
        logger.info(
            f"Updated {len(changed)} of {len(rates_by_currency)} conversion rates"
        )
        self._notify_of_rate_update()
        return True

    def _notify_of_rate_update(self) -> None:
        self.did_update_availability_of_rates.emit()


def _validate_rate(rate: float, currency: Currency) -> None:
    require_fiat(currency, "set_one")
    if not math.isfinite(rate) or rate <= 0:
        raise InvalidArgumentError(
            f"Rate for {currency.name} must be finite and positive, got {rate!r}"
        )
