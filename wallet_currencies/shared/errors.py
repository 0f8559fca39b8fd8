"""
Error types for the wallet currencies package.
"""

from enum import Enum
from typing import Final

ERROR_PARSE_EMPTY: Final[str] = "empty"
ERROR_PARSE_SIGN_ONLY: Final[str] = "sign_only"
ERROR_PARSE_MALFORMED: Final[str] = "malformed"


class ParseErrorKind(str, Enum):
    """Why a numeric string could not be turned into an amount."""

    EMPTY = ERROR_PARSE_EMPTY
    SIGN_ONLY = ERROR_PARSE_SIGN_ONLY
    MALFORMED = ERROR_PARSE_MALFORMED


class CurrenciesError(Exception):
    """Base class for every error raised by this package."""


class ParseError(CurrenciesError, ValueError):
    """Raised when amount text is empty, a lone sign, or not a valid numeral."""

    def __init__(self, kind: ParseErrorKind, text: str, message: str | None = None):
        self.kind = kind
        self.text = text
        super().__init__(message or f"Cannot parse amount ({kind.value}): {text!r}")


class InvalidArgumentError(CurrenciesError, ValueError):
    """Raised when an operation is called with a currency it does not accept."""


class InvariantViolationError(CurrenciesError, RuntimeError):
    """Raised when the formatting pipeline produces output it must never produce."""
