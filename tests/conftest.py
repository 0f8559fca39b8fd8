"""
Test configuration for the wallet currencies tests.
"""

import sys
import threading
from pathlib import Path

import pytest

# Add project root to path before importing our modules
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Import our modules after path setup
from wallet_currencies.amounts.currency import Currency  # noqa: E402
from wallet_currencies.rates.controller import ConversionRateCache  # noqa: E402


class ListenerRecorder:
    """Zero-argument callback that counts how often it was invoked."""

    def __init__(self) -> None:
        self.calls = 0
        self._lock = threading.Lock()

    def __call__(self) -> None:
        with self._lock:
            self.calls += 1


@pytest.fixture
def rate_cache():
    """Provide an empty conversion rate cache."""
    return ConversionRateCache()


@pytest.fixture
def recorder(rate_cache):
    """Provide a listener already subscribed to the rate cache."""
    listener = ListenerRecorder()
    rate_cache.subscribe(listener)
    return listener


@pytest.fixture
def sample_rates():
    """Provide sample native -> fiat rates."""
    return {
        Currency.USD: 350.25,
        Currency.EUR: 320.5,
        Currency.GBP: 280.0,
        Currency.JPY: 52000.0,
    }
