"""Tests for income tax, Medicare levy and take-home pay."""

from decimal import Decimal

import pytest

from childcare_core import calculate_medicare_levy, calculate_take_home_pay, calculate_tax


class TestCalculateTax:
    """Test suite for the resident tax brackets."""

    @pytest.mark.parametrize("income", [Decimal("-5000"), Decimal("0"), Decimal("10000"), Decimal("18200")])
    def test_tax_free_threshold(self, income: Decimal):
        """Income up to $18,200 pays no tax."""
        assert calculate_tax(income) == 0

    @pytest.mark.parametrize(
        "income,expected",
        [
            (Decimal("45000"), Decimal("5092")),
            (Decimal("120000"), Decimal("29467")),
            (Decimal("180000"), Decimal("51667")),
        ],
    )
    def test_bracket_upper_bounds_are_inclusive(self, income: Decimal, expected: Decimal):
        """Tax at each bracket's upper bound equals the next bracket's base tax."""
        assert calculate_tax(income) == expected

    def test_second_bracket(self):
        """(30,000 - 18,200) * 19%."""
        assert calculate_tax(Decimal("30000")) == Decimal("2242")

    def test_third_bracket(self):
        """5,092 + (92,000 - 45,000) * 32.5%."""
        assert calculate_tax(Decimal("92000")) == Decimal("20367")

    def test_top_bracket(self):
        """51,667 + (200,000 - 180,000) * 45%."""
        assert calculate_tax(Decimal("200000")) == Decimal("60667")

    def test_accepts_plain_ints(self):
        assert calculate_tax(45000) == Decimal("5092")


class TestMedicareLevy:
    """Test suite for the flat Medicare levy."""

    def test_two_percent(self):
        assert calculate_medicare_levy(Decimal("100000")) == Decimal("2000")

    def test_no_low_income_exemption(self):
        """Even small incomes pay the levy."""
        assert calculate_medicare_levy(Decimal("10000")) == Decimal("200")


class TestTakeHomePay:
    """Test suite for take-home pay."""

    def test_zero_income(self):
        assert calculate_take_home_pay(Decimal("0")) == 0

    def test_typical_salary(self):
        """92,000 - 20,367 tax - 1,840 levy."""
        assert calculate_take_home_pay(Decimal("92000")) == Decimal("69793")

    def test_below_tax_free_threshold_only_pays_levy(self):
        assert calculate_take_home_pay(Decimal("10000")) == Decimal("9800")
