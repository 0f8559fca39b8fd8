"""
Exact fixed-point amount of the native currency.
"""

from typing import Annotated, Any, Final

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..shared.errors import ParseError, ParseErrorKind
from .native_format import (
    MAX_MAGNITUDE,
    parse_atomic_magnitude,
    print_fixed_point_amount,
)

NEGATIVE_SIGN: Final[str] = "-"


def split_sign(text: str) -> tuple[bool, str]:
    """
    Split an optional leading minus sign from amount text.

    Returns:
        Tuple of (is_negative, remaining text)

    Raises:
        ParseError: EMPTY for empty text, SIGN_ONLY for a lone ``-``
    """
    if not text:
        raise ParseError(ParseErrorKind.EMPTY, text, "Amount text is empty")
    if text.startswith(NEGATIVE_SIGN):
        if len(text) == len(NEGATIVE_SIGN):
            raise ParseError(
                ParseErrorKind.SIGN_ONLY, text, "Amount text is only a '-' sign"
            )
        return True, text[len(NEGATIVE_SIGN) :]
    return False, text


def magnitude_to_float(magnitude: int) -> float:
    """Lossy float value, in whole native units, of an atomic-unit magnitude."""
    return float(print_fixed_point_amount(magnitude))


class NativeAmount(BaseModel):
    """
    Signed amount of the native currency counted in atomic units (10**-12).

    The sign is carried separately from the unsigned magnitude, so the value is
    ``(-1) ** is_negative * magnitude``. Instances are immutable and compare by
    both fields. A zero magnitude is always stored as non-negative.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    magnitude: Annotated[
        int, Field(ge=0, le=MAX_MAGNITUDE, description="Atomic units, unsigned")
    ]
    is_negative: Annotated[bool, Field(default=False, description="Sign flag")]

    @model_validator(mode="before")
    @classmethod
    def clear_sign_of_zero(cls, data: Any) -> Any:
        """Zero has a single representation: a zero magnitude is never negative."""
        if isinstance(data, dict) and data.get("magnitude") == 0:
            return {**data, "is_negative": False}
        return data

    @classmethod
    def from_magnitude_and_sign(
        cls, magnitude: int, is_negative: bool = False
    ) -> "NativeAmount":
        return cls(magnitude=magnitude, is_negative=is_negative)

    @classmethod
    def parse(cls, text: str) -> "NativeAmount":
        """
        Parse an integer count of atomic units, e.g. ``"-1500000000000"``.

        Raises:
            ParseError: If the text is empty, a lone sign, or not an integer
        """
        is_negative, body = split_sign(text)
        try:
            magnitude = parse_atomic_magnitude(body)
        except ParseError as e:
            raise ParseError(ParseErrorKind.MALFORMED, text, str(e)) from e
        return cls(magnitude=magnitude, is_negative=is_negative)

    def to_float(self) -> float:
        """Lossy float value in whole native units."""
        value = magnitude_to_float(self.magnitude)
        return -value if self.is_negative else value

    def to_decimal_string(self) -> str:
        """Exact decimal rendering in whole native units, trailing zeros stripped."""
        text = print_fixed_point_amount(self.magnitude).rstrip("0").rstrip(".")
        if self.magnitude == 0:
            return "0"
        if self.is_negative:
            return f"{NEGATIVE_SIGN}{text}"
        return text

    def __str__(self) -> str:
        return self.to_decimal_string()
