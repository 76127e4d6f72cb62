"""Tests for nannying income."""

from decimal import Decimal

import pytest

from childcare_core import calculate_nanny_rate, calculate_nannying_income


class TestNannyRate:
    """Test suite for the multi-child nanny rate."""

    @pytest.mark.parametrize(
        "children,expected",
        [(1, Decimal("100")), (2, Decimal("175")), (3, Decimal("250"))],
    )
    def test_linear_discount(self, children: int, expected: Decimal):
        """Each extra child adds 75% of the base rate; discounts do not compound."""
        assert calculate_nanny_rate(Decimal("100"), children) == expected

    def test_no_children_charges_base_rate(self):
        assert calculate_nanny_rate(Decimal("100"), 0) == Decimal("100")

    def test_fractional_children(self):
        """1.5 extra children at 75% of the base rate."""
        assert calculate_nanny_rate(Decimal("100"), Decimal("2.5")) == Decimal("212.5")

    def test_custom_discount(self):
        assert calculate_nanny_rate(Decimal("100"), 3, Decimal("0.5")) == Decimal("200")


class TestNannyingIncome:
    """Test suite for weekly nannying income."""

    def test_single_child(self):
        """35/h * 2 days * 8 h."""
        assert calculate_nannying_income(Decimal("35"), 1, Decimal("2")) == Decimal("560")

    def test_two_children(self):
        """(35 + 26.25)/h * 1 day * 8 h."""
        assert calculate_nannying_income(Decimal("35"), 2, Decimal("1")) == Decimal("490")

    def test_zero_days(self):
        assert calculate_nannying_income(Decimal("35"), 3, Decimal("0")) == 0

    def test_custom_hours_per_day(self):
        income = calculate_nannying_income(
            Decimal("30"), 1, Decimal("1"), hours_per_day=Decimal("6")
        )
        assert income == Decimal("180")
