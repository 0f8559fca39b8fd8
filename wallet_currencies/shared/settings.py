"""
Package settings using Pydantic for environment-based configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CurrencySettings(BaseSettings):
    """Logging configuration for hosts embedding the currencies package."""

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format string passed to logging.basicConfig",
    )
    log_file: str = Field(
        default="wallet_currencies.log", description="Path of the optional log file"
    )
    log_to_file: bool = Field(
        default=False, description="Also write log records to log_file"
    )

    model_config = SettingsConfigDict(
        env_prefix="WALLET_CURRENCIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Create a global instance
currency_settings = CurrencySettings()
