"""
Logging setup shared by hosts of the wallet currencies package.
"""

import logging
import sys
from pathlib import Path

from .settings import CurrencySettings, currency_settings


def setup_logging(settings: CurrencySettings | None = None) -> None:
    """
    Set up consistent logging configuration for the host process.

    Args:
        settings: Settings to read from. Defaults to the global instance.
    """
    settings = settings or currency_settings

    numeric_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if settings.log_to_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    logging.basicConfig(
        level=numeric_level,
        format=settings.log_format,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )
