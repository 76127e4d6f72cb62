"""Resident income tax, Medicare levy and take-home pay."""

from decimal import Decimal

from .rates import MEDICARE_LEVY_RATE, TAX_BRACKETS


def calculate_tax(income: Decimal) -> Decimal:
    """Calculate annual income tax on a pre-tax income.

    Brackets include their upper bound. Incomes at or below the
    tax-free threshold (including negative incomes) pay no tax.

    Args:
        income: Annual pre-tax income

    Returns:
        Annual income tax
    """
    for bracket in TAX_BRACKETS:
        if bracket.upper is None or income <= bracket.upper:
            return bracket.base_tax + (income - bracket.threshold) * bracket.rate
    # Unreachable: the top bracket has no upper bound
    raise AssertionError("tax brackets must end with an uncapped bracket")


def calculate_medicare_levy(income: Decimal) -> Decimal:
    """Flat Medicare levy; no low-income threshold is modelled."""
    return income * MEDICARE_LEVY_RATE


def calculate_take_home_pay(income: Decimal) -> Decimal:
    """Income after income tax and Medicare levy. Not floored at zero."""
    total_deductions = calculate_tax(income) + calculate_medicare_levy(income)
    return income - total_deductions


__all__ = [
    "calculate_tax",
    "calculate_medicare_levy",
    "calculate_take_home_pay",
]
