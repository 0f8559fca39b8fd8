"""
Validation models for incoming conversion rates.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from ..amounts.currency import Currency, currency_from_symbol, is_fiat


class RateQuote(BaseModel):
    """One fiat rate as delivered by an external rate source."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        frozen=True,
    )

    symbol: Annotated[str, Field(min_length=3, description="Fiat currency symbol")]
    rate: Annotated[
        float,
        Field(gt=0, allow_inf_nan=False, description="Fiat units per native unit"),
    ]

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, value: str) -> str:
        """Normalize the symbol and require a supported fiat currency."""
        symbol = value.upper()
        if not is_fiat(currency_from_symbol(symbol)):
            raise ValueError(f"{symbol} is not a fiat currency")
        return symbol

    @computed_field
    @property
    def currency(self) -> Currency:
        return currency_from_symbol(self.symbol)
