"""
Tests for decimal parsing and locale-invariant formatting.
"""

import math

import pytest

from wallet_currencies.amounts import formatting
from wallet_currencies.amounts.currency import FIAT_CURRENCIES, Currency
from wallet_currencies.amounts.formatting import (
    amount_from_float,
    amount_to_float,
    format_fiat_amount,
    from_decimal_string,
    round_half_away_from_zero,
    to_decimal_string,
    two_decimal_string,
)
from wallet_currencies.amounts.models import NativeAmount
from wallet_currencies.shared.errors import (
    InvalidArgumentError,
    InvariantViolationError,
    ParseError,
    ParseErrorKind,
)


class TestFromDecimalString:
    """Test cases for parsing decimal native amounts."""

    def test_positive(self):
        """Test a positive decimal."""
        amount = from_decimal_string("1.5")
        assert amount == NativeAmount.from_magnitude_and_sign(1_500_000_000_000, False)

    def test_negative(self):
        """Test a negative decimal."""
        amount = from_decimal_string("-0.25")
        assert amount.magnitude == 250_000_000_000
        assert amount.is_negative is True

    @pytest.mark.parametrize(
        "text,kind",
        [
            ("", ParseErrorKind.EMPTY),
            ("-", ParseErrorKind.SIGN_ONLY),
            ("abc", ParseErrorKind.MALFORMED),
            ("--1", ParseErrorKind.MALFORMED),
            ("1.1234567890123", ParseErrorKind.MALFORMED),
        ],
    )
    def test_rejects(self, text, kind):
        """Test that bad input fails and never produces zero."""
        with pytest.raises(ParseError) as exc_info:
            from_decimal_string(text)
        assert exc_info.value.kind is kind

    @pytest.mark.parametrize("text", ["- 1", "-\t1", "- 0.5"])
    def test_whitespace_after_sign_rejected(self, text):
        """Test that the sign must be directly followed by the numeral."""
        with pytest.raises(ParseError) as exc_info:
            from_decimal_string(text)
        assert exc_info.value.kind is ParseErrorKind.MALFORMED

    def test_negative_zero_equals_zero(self):
        """Test that zero has a single representation."""
        amount = from_decimal_string("-0")
        assert amount == from_decimal_string("0")
        assert amount.is_negative is False

    def test_injected_primitive(self):
        """Test that magnitude parsing is delegated to the given primitive."""
        seen = []

        def parse_fractional(body):
            seen.append(body)
            return 7

        amount = from_decimal_string("-anything", parse_fractional=parse_fractional)
        assert seen == ["anything"]
        assert amount == NativeAmount.from_magnitude_and_sign(7, True)

    def test_injected_primitive_failure(self):
        """Test that primitive failures surface as malformed input."""

        def parse_fractional(body):
            raise ValueError("out of range")

        with pytest.raises(ParseError) as exc_info:
            from_decimal_string("1", parse_fractional=parse_fractional)
        assert exc_info.value.kind is ParseErrorKind.MALFORMED


class TestDecimalRoundTrip:
    """Test cases for parse/render round trips."""

    @pytest.mark.parametrize(
        "text",
        [
            "0",
            "1",
            "1.5",
            "-1.5",
            "0.000000000001",
            "-0.1",
            "123.456",
            "18446744.073709551615",
        ],
    )
    def test_canonical_round_trip(self, text):
        """Test that canonical strings survive a round trip unchanged."""
        assert to_decimal_string(from_decimal_string(text)) == text

    @pytest.mark.parametrize(
        "text,expected",
        [("1.50", "1.5"), ("0.0", "0"), ("-0", "0"), ("007", "7"), (".5", "0.5")],
    )
    def test_normalized_round_trip(self, text, expected):
        """Test that non-canonical strings come back normalized."""
        assert to_decimal_string(from_decimal_string(text)) == expected

    def test_amount_to_float(self):
        """Test lossy float conversion."""
        assert amount_to_float(from_decimal_string("-2.25")) == -2.25


class TestAmountFromFloat:
    """Test cases for building amounts from floats."""

    @pytest.mark.parametrize(
        "value,magnitude,is_negative",
        [
            (1.5, 1_500_000_000_000, False),
            (-0.25, 250_000_000_000, True),
            (1e-12, 1, False),
            (100.0, 100_000_000_000_000, False),
        ],
    )
    def test_from_float(self, value, magnitude, is_negative):
        """Test conversion via the shortest decimal form."""
        amount = amount_from_float(value)
        assert amount.magnitude == magnitude
        assert amount.is_negative is is_negative

    def test_too_precise(self):
        """Test that sub-atomic precision is rejected."""
        with pytest.raises(ParseError):
            amount_from_float(1e-13)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, value):
        """Test that non-finite floats are rejected."""
        with pytest.raises(InvalidArgumentError):
            amount_from_float(value)


class TestRounding:
    """Test cases for half-away-from-zero rounding."""

    @pytest.mark.parametrize(
        "value,places,expected",
        [
            (175.125, 2, 175.13),
            (-175.125, 2, -175.13),
            (2.5, 0, 3.0),
            (-2.5, 0, -3.0),
            (0.125, 2, 0.13),
            (1.23456, 4, 1.2346),
            (0.004, 2, 0.0),
            (-0.004, 2, 0.0),
        ],
    )
    def test_round_half_away_from_zero(self, value, places, expected):
        """Test rounding at a decimal scale."""
        assert round_half_away_from_zero(value, places) == expected

    @pytest.mark.parametrize(
        "value,places,expected",
        [
            (0.49999999999999994, 0, 0.0),
            (-0.49999999999999994, 0, 0.0),
            (4503599627370497.0, 0, 4503599627370497.0),
            (-4503599627370497.0, 0, -4503599627370497.0),
        ],
    )
    def test_no_spurious_round_up(self, value, places, expected):
        """Test values just below a tie and odd integers above 2**52."""
        assert round_half_away_from_zero(value, places) == expected

    @pytest.mark.parametrize("value", [1e307, -1e307, 1.7976931348623157e308])
    def test_huge_values_returned_unchanged(self, value):
        """Test that values overflowing at the rounding scale are kept."""
        assert round_half_away_from_zero(value, 2) == value

    def test_rounded_zero_is_positive(self):
        """Test that rounding never yields negative zero."""
        assert math.copysign(1.0, round_half_away_from_zero(-0.001, 2)) == 1.0

    @pytest.mark.parametrize(
        "value,expected",
        [(3.5, "3.5"), (4.0, "4.0"), (1e16, "10000000000000000"), (0.126, "0.13")],
    )
    def test_two_decimal_string(self, value, expected):
        """Test grouping-free positional rendering."""
        assert two_decimal_string(value, 2) == expected

    def test_two_decimal_string_non_finite(self):
        """Test that infinity cannot be rendered."""
        with pytest.raises(InvalidArgumentError):
            two_decimal_string(math.inf, 2)


class TestFormatFiatAmount:
    """Test cases for fiat display strings."""

    @pytest.mark.parametrize(
        "value,currency,expected",
        [
            (0.0, Currency.USD, "0"),
            (-0.0, Currency.USD, "0"),
            (12.5, Currency.USD, "12.50"),
            (4.0, Currency.EUR, "4.00"),
            (175.125, Currency.USD, "175.13"),
            (-3.456, Currency.GBP, "-3.46"),
            (1234567.891, Currency.JPY, "1234567.89"),
            (1e16, Currency.USD, "10000000000000000.00"),
            (0.001, Currency.CHF, "0.00"),
            (4503599627370497 / 100, Currency.USD, "45035996273704.97"),
            (1e307, Currency.USD, "1" + "0" * 307 + ".00"),
        ],
    )
    def test_format(self, value, currency, expected):
        """Test padding, rounding and the zero special case."""
        assert format_fiat_amount(value, currency) == expected

    @pytest.mark.parametrize("currency", FIAT_CURRENCIES)
    @pytest.mark.parametrize(
        "value", [0.1, 0.01, 0.005, 1 / 3, 2 / 3, 99.999, 123456.789, -0.015]
    )
    def test_never_more_than_two_places(self, value, currency):
        """Test that fiat strings always carry exactly two fractional digits."""
        text = format_fiat_amount(value, currency)
        whole, fraction = text.split(".")
        assert len(fraction) == 2
        assert "," not in whole

    @pytest.mark.parametrize("currency", [Currency.XWP, Currency.NONE])
    def test_rejects_non_fiat(self, currency):
        """Test that the native currency and NONE are rejected."""
        with pytest.raises(InvalidArgumentError):
            format_fiat_amount(1.0, currency)

    def test_rejects_nan(self):
        """Test that NaN is rejected."""
        with pytest.raises(InvalidArgumentError):
            format_fiat_amount(math.nan, Currency.USD)

    @pytest.mark.parametrize("rendered", ["1.234", "1.2.3"])
    def test_invariant_violation(self, monkeypatch, rendered):
        """Test that bad renderer output is never passed through."""
        monkeypatch.setattr(formatting, "two_decimal_string", lambda value, places: rendered)
        with pytest.raises(InvariantViolationError):
            format_fiat_amount(1.0, Currency.USD)
