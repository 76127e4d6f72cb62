"""Employer-paid parental leave entitlement."""

from decimal import Decimal

from .rates import FULL_TIME_DAYS_PER_WEEK, WEEKS_PER_YEAR


def calculate_parental_leave_entitlement(
    days_working_per_week: Decimal,
    weeks_paid_leave: Decimal,
    pre_tax_income: Decimal,
) -> Decimal:
    """Cash value of a paid parental leave allotment.

    Leave is paid at the weekly rate of the pre-tax salary, pro-rated by
    the fraction of a five-day week the parent works.

    Args:
        days_working_per_week: Days the parent is employed per week
        weeks_paid_leave: Weeks of paid leave in the employment agreement
        pre_tax_income: Annual pre-tax salary, before any days-off adjustment

    Returns:
        Total leave payment before tax
    """
    weekly_rate = pre_tax_income / WEEKS_PER_YEAR
    return (days_working_per_week / FULL_TIME_DAYS_PER_WEEK) * weeks_paid_leave * weekly_rate


__all__ = ["calculate_parental_leave_entitlement"]
