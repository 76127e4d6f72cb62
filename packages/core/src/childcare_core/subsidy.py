"""Child Care Subsidy (CCS) calculations.

The subsidy depends on three things:
1. Family income, which sets the CCS percentage
2. Both parents' activity hours, which cap the subsidised hours per week
3. The type of care, which caps the hourly rate the percentage applies to

Callers must pass work days per week greater than zero; a zero-day week
raises ValidationError rather than dividing by zero.
"""

from decimal import Decimal
from typing import Optional, Union

import structlog

from .exceptions import ValidationError
from .models import ChildcareCategory, ChildcareSubsidy, FamilyChildcareNeeds
from .rates import (
    ACTIVITY_TEST_TIERS,
    CCS_LOWER_INCOME_THRESHOLD,
    CCS_MAX_PERCENTAGE,
    CCS_TAPER_RATE,
    CCS_TAPER_STEP,
    CCS_UPPER_INCOME_THRESHOLD,
    HOURLY_RATE_CAPS,
    MAX_SUBSIDIZED_HOURS_PER_WEEK,
    WEEKS_PER_YEAR,
)

logger = structlog.get_logger()


def require_working_days(work_days_per_week: Decimal, field: str = "work_days_per_week") -> None:
    """Raise ValidationError unless the week has at least some working days."""
    if work_days_per_week == 0:
        raise ValidationError(
            "Work days per week must be greater than zero to scale income by days worked",
            field=field,
            value=str(work_days_per_week),
            constraint="!= 0",
        )


def calculate_family_income_and_childcare(
    income_1: Decimal,
    income_2: Decimal,
    work_hours_per_day_1: Decimal,
    work_hours_per_day_2: Decimal,
    work_days_per_week_1: Decimal,
    work_days_per_week_2: Decimal,
    days_off_per_week_1: Decimal,
    days_off_per_week_2: Decimal,
) -> FamilyChildcareNeeds:
    """Derive family income and childcare hours from both work schedules.

    Each income is scaled by the share of the work week actually worked.
    Childcare is only needed while both parents are at work, so the
    required hours are the lesser of the two parents' replacement hours.
    Activity hours ignore days off: they measure the nominal schedule.

    Raises:
        ValidationError: If either parent's work days per week is zero
    """
    require_working_days(work_days_per_week_1, "work_days_per_week_1")
    require_working_days(work_days_per_week_2, "work_days_per_week_2")

    scaled_income_1 = (
        income_1 * max(Decimal("0"), work_days_per_week_1 - days_off_per_week_1)
    ) / work_days_per_week_1
    scaled_income_2 = (
        income_2 * max(Decimal("0"), work_days_per_week_2 - days_off_per_week_2)
    ) / work_days_per_week_2

    replacement_hours_1 = work_hours_per_day_1 * (work_days_per_week_1 - days_off_per_week_1)
    replacement_hours_2 = work_hours_per_day_2 * (work_days_per_week_2 - days_off_per_week_2)

    activity_hours_1 = work_hours_per_day_1 * work_days_per_week_1
    activity_hours_2 = work_hours_per_day_2 * work_days_per_week_2

    return FamilyChildcareNeeds(
        family_income=scaled_income_1 + scaled_income_2,
        required_childcare_hours_per_week=min(replacement_hours_1, replacement_hours_2),
        activity_hours_per_fortnight=2 * (activity_hours_1 + activity_hours_2),
    )


def calculate_ccs_percentage(family_income: Decimal) -> Decimal:
    """CCS percentage for a family income.

    90% up to $80,000, then one point less per $5,000 of income, reaching
    0% at $530,000.
    """
    if family_income <= CCS_LOWER_INCOME_THRESHOLD:
        return CCS_MAX_PERCENTAGE
    if family_income <= CCS_UPPER_INCOME_THRESHOLD:
        steps = (family_income - CCS_LOWER_INCOME_THRESHOLD) / CCS_TAPER_STEP
        return CCS_MAX_PERCENTAGE - steps * CCS_TAPER_RATE
    return Decimal("0")


def get_max_subsidized_hours_per_week(activity_hours_per_fortnight: Decimal) -> Decimal:
    """Subsidised hours per week allowed by the activity test."""
    for max_activity_hours, subsidized_hours in ACTIVITY_TEST_TIERS:
        if activity_hours_per_fortnight <= max_activity_hours:
            return subsidized_hours
    return MAX_SUBSIDIZED_HOURS_PER_WEEK


def get_hourly_rate_cap(
    childcare_type: Optional[Union[ChildcareCategory, str]],
) -> Decimal:
    """Hourly rate cap for a type of care.

    Nannying, a missing type and any unrecognised value have no cap,
    which means no subsidy.
    """
    try:
        category = ChildcareCategory(childcare_type) if childcare_type is not None else None
    except ValueError:
        logger.debug("unknown_childcare_category", value=childcare_type)
        return Decimal("0")
    return HOURLY_RATE_CAPS.get(category, Decimal("0"))


def calculate_ccs(
    income_1: Decimal,
    income_2: Decimal,
    work_hours_per_day_1: Decimal,
    work_hours_per_day_2: Decimal,
    work_days_per_week_1: Decimal,
    work_days_per_week_2: Decimal,
    days_off_per_week_1: Decimal,
    days_off_per_week_2: Decimal,
    hourly_childcare_rate: Decimal,
    childcare_type: Optional[Union[ChildcareCategory, str]],
    weeks_without_childcare: Decimal,
) -> ChildcareSubsidy:
    """Calculate the weekly subsidy and annual out-of-pocket cost for one child.

    Only the eligible hours (the lesser of required and subsidised hours)
    attract the subsidy, but the family pays for every required hour.

    Args:
        income_1: First parent's income (scaled again by days worked here)
        income_2: Second parent's income
        work_hours_per_day_1: First parent's hours per working day
        work_hours_per_day_2: Second parent's hours per working day
        work_days_per_week_1: First parent's working days per week
        work_days_per_week_2: Second parent's working days per week
        days_off_per_week_1: First parent's days off per week
        days_off_per_week_2: Second parent's days off per week
        hourly_childcare_rate: Hourly fee charged by the provider
        childcare_type: Type of care, selects the hourly rate cap
        weeks_without_childcare: Weeks per year with no care (holidays)

    Returns:
        ChildcareSubsidy with every intermediate figure

    Raises:
        ValidationError: If either parent's work days per week is zero
    """
    needs = calculate_family_income_and_childcare(
        income_1,
        income_2,
        work_hours_per_day_1,
        work_hours_per_day_2,
        work_days_per_week_1,
        work_days_per_week_2,
        days_off_per_week_1,
        days_off_per_week_2,
    )

    hourly_rate_cap = get_hourly_rate_cap(childcare_type)
    ccs_percentage = calculate_ccs_percentage(needs.family_income)
    max_subsidized_hours = get_max_subsidized_hours_per_week(needs.activity_hours_per_fortnight)

    eligible_hours = min(needs.required_childcare_hours_per_week, max_subsidized_hours)
    subsidized_rate = min(hourly_childcare_rate, hourly_rate_cap) * ccs_percentage
    weekly_subsidy = subsidized_rate * eligible_hours

    weekly_cost = hourly_childcare_rate * needs.required_childcare_hours_per_week - weekly_subsidy
    family_cost = weekly_cost * (WEEKS_PER_YEAR - weeks_without_childcare)

    logger.debug(
        "ccs_calculated",
        family_income=str(needs.family_income),
        ccs_percentage=str(ccs_percentage),
        eligible_hours=str(eligible_hours),
        weekly_subsidy=str(weekly_subsidy),
        family_cost=str(family_cost),
    )

    return ChildcareSubsidy(
        needs=needs,
        ccs_percentage=ccs_percentage,
        hourly_rate_cap=hourly_rate_cap,
        max_subsidized_hours_per_week=max_subsidized_hours,
        eligible_hours_per_week=eligible_hours,
        subsidized_hourly_rate=subsidized_rate,
        weekly_subsidy=weekly_subsidy,
        family_cost=family_cost,
    )


__all__ = [
    "require_working_days",
    "calculate_family_income_and_childcare",
    "calculate_ccs_percentage",
    "get_max_subsidized_hours_per_week",
    "get_hourly_rate_cap",
    "calculate_ccs",
]
