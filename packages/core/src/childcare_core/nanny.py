"""Income from nannying other families' children on days off work."""

from decimal import Decimal

from .rates import ASSUMED_NANNY_HOURS_PER_DAY, NANNY_DISCOUNT_ADDITIONAL_CHILD


def calculate_nanny_rate(
    base_rate: Decimal,
    number_of_children: Decimal,
    discount: Decimal = NANNY_DISCOUNT_ADDITIONAL_CHILD,
) -> Decimal:
    """Hourly rate for looking after several children at once.

    The first child is charged the full base rate; every additional
    child adds the base rate less the discount. Discounts do not
    compound.

    Args:
        base_rate: Hourly rate for a single child
        number_of_children: Children looked after together
        discount: Fractional discount for each child after the first

    Returns:
        Combined hourly rate
    """
    additional_children = max(0, number_of_children - 1)
    return base_rate + additional_children * base_rate * (1 - discount)


def calculate_nannying_income(
    nanny_rate: Decimal,
    number_of_children: Decimal,
    days_per_week: Decimal,
    *,
    discount: Decimal = NANNY_DISCOUNT_ADDITIONAL_CHILD,
    hours_per_day: Decimal = ASSUMED_NANNY_HOURS_PER_DAY,
) -> Decimal:
    """Weekly nannying income. Multiply by weeks worked to annualise."""
    discounted_rate = calculate_nanny_rate(nanny_rate, number_of_children, discount)
    return discounted_rate * days_per_week * hours_per_day


__all__ = [
    "calculate_nanny_rate",
    "calculate_nannying_income",
]
