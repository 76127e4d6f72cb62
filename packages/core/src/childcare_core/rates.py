"""Australian tax and Child Care Subsidy parameters for the modelled year.

Every constant used by the calculators lives here. Only one financial
year is modelled; there is no table of historical years.

Sources:
- Resident tax rates: https://www.ato.gov.au/tax-rates-and-codes/tax-rates-australian-residents
- Child Care Subsidy: https://www.servicesaustralia.gov.au/child-care-subsidy

Updated: 2023-24 (effective 1 July 2023 - 30 June 2024)
"""

from decimal import Decimal
from typing import NamedTuple, Optional

from .models import ChildcareCategory


# =============================================================================
# VERSION TRACKING
# =============================================================================

RATES_VERSION = "2023-24"


def get_rates_version() -> str:
    """Return the financial year the rate tables model."""
    return RATES_VERSION


# =============================================================================
# INCOME TAX AND MEDICARE LEVY
# =============================================================================

class TaxBracket(NamedTuple):
    """A resident income tax bracket.

    Tax for an income inside the bracket is
    ``base_tax + (income - threshold) * rate``.
    """

    threshold: Decimal
    upper: Optional[Decimal]  # inclusive; None = no cap
    base_tax: Decimal
    rate: Decimal


TAX_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(Decimal("0"), Decimal("18200"), Decimal("0"), Decimal("0")),
    TaxBracket(Decimal("18200"), Decimal("45000"), Decimal("0"), Decimal("0.19")),
    TaxBracket(Decimal("45000"), Decimal("120000"), Decimal("5092"), Decimal("0.325")),
    TaxBracket(Decimal("120000"), Decimal("180000"), Decimal("29467"), Decimal("0.37")),
    TaxBracket(Decimal("180000"), None, Decimal("51667"), Decimal("0.45")),
)

MEDICARE_LEVY_RATE = Decimal("0.02")


# =============================================================================
# CHILD CARE SUBSIDY
# =============================================================================

# Family income up to the lower threshold gets the maximum percentage; the
# percentage then drops one point per $5,000 until the upper threshold.
CCS_MAX_PERCENTAGE = Decimal("0.9")
CCS_LOWER_INCOME_THRESHOLD = Decimal("80000")
CCS_UPPER_INCOME_THRESHOLD = Decimal("530000")
CCS_TAPER_STEP = Decimal("5000")
CCS_TAPER_RATE = Decimal("0.01")

# Activity test: (max activity hours per fortnight, subsidised hours per week)
ACTIVITY_TEST_TIERS: tuple[tuple[Decimal, Decimal], ...] = (
    (Decimal("16"), Decimal("18")),
    (Decimal("48"), Decimal("36")),
)
MAX_SUBSIDIZED_HOURS_PER_WEEK = Decimal("50")

HOURLY_RATE_CAPS: dict[ChildcareCategory, Decimal] = {
    ChildcareCategory.CENTRE_BASED: Decimal("13.73"),
    ChildcareCategory.FAMILY_DAY_CARE: Decimal("12.72"),
    ChildcareCategory.OUTSIDE_SCHOOL_HOURS: Decimal("13.73"),
    # Per family, not per child. Applied like the others downstream.
    ChildcareCategory.IN_HOME_CARE: Decimal("37.78"),
}


# =============================================================================
# NANNYING AND PARENTAL LEAVE
# =============================================================================

NANNY_DISCOUNT_ADDITIONAL_CHILD = Decimal("0.25")
ASSUMED_NANNY_HOURS_PER_DAY = Decimal("8")

WEEKS_PER_YEAR = Decimal("52")
FULL_TIME_DAYS_PER_WEEK = Decimal("5")


__all__ = [
    "RATES_VERSION",
    "get_rates_version",
    "TaxBracket",
    "TAX_BRACKETS",
    "MEDICARE_LEVY_RATE",
    "CCS_MAX_PERCENTAGE",
    "CCS_LOWER_INCOME_THRESHOLD",
    "CCS_UPPER_INCOME_THRESHOLD",
    "CCS_TAPER_STEP",
    "CCS_TAPER_RATE",
    "ACTIVITY_TEST_TIERS",
    "MAX_SUBSIDIZED_HOURS_PER_WEEK",
    "HOURLY_RATE_CAPS",
    "NANNY_DISCOUNT_ADDITIONAL_CHILD",
    "ASSUMED_NANNY_HOURS_PER_DAY",
    "WEEKS_PER_YEAR",
    "FULL_TIME_DAYS_PER_WEEK",
]
