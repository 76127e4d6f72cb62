"""Tests for currency formatting and parsing."""

from decimal import Decimal

import pytest

from childcare_core.exceptions import ValidationError
from childcare_core.formatting import (
    format_currency,
    format_number,
    format_percentage,
    parse_amount,
)


class TestFormatCurrency:
    """Test suite for format_currency."""

    def test_thousands_separator_and_cents(self):
        assert format_currency(Decimal("92000")) == "$92,000.00"

    def test_negative_amount(self):
        assert format_currency(Decimal("-1234.5")) == "-$1,234.50"

    def test_rounds_half_up(self):
        assert format_currency(Decimal("0.005")) == "$0.01"
        assert format_currency(Decimal("19099.6992")) == "$19,099.70"

    def test_zero(self):
        assert format_currency(0) == "$0.00"


class TestFormatNumber:
    """Test suite for plain number and percentage display."""

    def test_whole_numbers_drop_decimals(self):
        assert format_number(Decimal("5.00")) == "5"

    def test_fractions_are_kept(self):
        assert format_number(Decimal("0.50")) == "0.5"

    def test_percentage(self):
        assert format_percentage(Decimal("0.25")) == "25%"
        assert format_percentage(Decimal("0.692")) == "69.2%"


class TestParseAmount:
    """Test suite for parse_amount."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("$92,000", Decimal("92000")),
            ("18.75", Decimal("18.75")),
            (" 1 200 ", Decimal("1200")),
            ("", Decimal("0")),
            ("abc", Decimal("0")),
        ],
    )
    def test_strips_everything_but_digits_and_point(self, text: str, expected: Decimal):
        assert parse_amount(text) == expected

    def test_malformed_number_raises(self):
        with pytest.raises(ValidationError):
            parse_amount("1.2.3")
