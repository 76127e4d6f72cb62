"""Household input models.

HouseholdParameters is the flat record every calculation starts from.
Field aliases are the camelCase keys the form and query-string layers
use, so a record can be rebuilt from (and flattened back into) a plain
mapping of field name to value.
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Optional

import structlog
from pydantic import BaseModel, Field, field_validator

logger = structlog.get_logger()


class ChildcareCategory(str, Enum):
    """Approved childcare service types."""
    CENTRE_BASED = "centre-based"
    FAMILY_DAY_CARE = "family-day-care"
    OUTSIDE_SCHOOL_HOURS = "outside-school-hours"
    IN_HOME_CARE = "in-home-care"
    NANNYING = "nannying"


class HouseholdParameters(BaseModel):
    """Everything needed to evaluate one what-if scenario.

    Defaults describe two full-time parents on $92,000 each with one
    child in family day care. Negative values are accepted; callers are
    responsible for keeping inputs in range.
    """

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "income1": "92000",
                    "income2": "92000",
                    "workDaysPerWeek1": "5",
                    "daysOffPerWeek1": "1",
                    "childcareType": "family-day-care",
                    "hourlyChildcareRate": "18.75",
                }
            ]
        },
    }

    # Parent 1
    income_1: Decimal = Field(
        default=Decimal("92000"),
        alias="income1",
        description="Annual pre-tax income of the first parent",
    )
    work_hours_per_day_1: Decimal = Field(default=Decimal("8"), alias="workHoursPerDay1")
    work_days_per_week_1: Decimal = Field(default=Decimal("5"), alias="workDaysPerWeek1")
    days_off_per_week_1: Decimal = Field(
        default=Decimal("0"),
        alias="daysOffPerWeek1",
        description="Working days per week the first parent takes off to look after the children",
    )
    days_nannying_per_week_1: Decimal = Field(
        default=Decimal("0"),
        alias="daysNannyingPerWeek1",
        description="Days per week the first parent nannies other children",
    )
    weeks_paid_parental_leave_1: Decimal = Field(
        default=Decimal("14"),
        alias="weeksPaidParentalLeave1",
    )

    # Parent 2
    income_2: Decimal = Field(
        default=Decimal("92000"),
        alias="income2",
        description="Annual pre-tax income of the second parent",
    )
    work_hours_per_day_2: Decimal = Field(default=Decimal("8"), alias="workHoursPerDay2")
    work_days_per_week_2: Decimal = Field(default=Decimal("5"), alias="workDaysPerWeek2")
    days_off_per_week_2: Decimal = Field(default=Decimal("0"), alias="daysOffPerWeek2")
    days_nannying_per_week_2: Decimal = Field(default=Decimal("0"), alias="daysNannyingPerWeek2")
    weeks_paid_parental_leave_2: Decimal = Field(
        default=Decimal("14"),
        alias="weeksPaidParentalLeave2",
    )

    # Shared
    hourly_childcare_rate: Decimal = Field(default=Decimal("18.75"), alias="hourlyChildcareRate")
    childcare_type: Optional[ChildcareCategory] = Field(
        default=ChildcareCategory.FAMILY_DAY_CARE,
        alias="childcareType",
        description="Service type; unknown values are treated as no category (no subsidy)",
    )
    nannying_rate: Decimal = Field(
        default=Decimal("35"),
        alias="nannyingRate",
        description="Hourly rate charged for the first nannied child",
    )
    number_of_children_to_nanny: Decimal = Field(
        default=Decimal("1"),
        alias="numberOfChildrenToNanny",
        description="Children looked after together on nannying days",
    )
    weeks_without_childcare: Decimal = Field(default=Decimal("4"), alias="weeksWithoutChildcare")
    number_of_children_in_childcare: Decimal = Field(
        default=Decimal("1"),
        alias="numberOfChildrenInChildcare",
        description="Children in paid childcare",
    )
    expecting_another_baby: bool = Field(default=True, alias="expectingAnotherBaby")

    @field_validator("childcare_type", mode="before")
    @classmethod
    def unknown_category_is_none(cls, v):
        """Map blank or unrecognised categories to None instead of failing."""
        if v is None or isinstance(v, ChildcareCategory):
            return v
        try:
            return ChildcareCategory(v)
        except ValueError:
            logger.debug("unknown_childcare_category", value=v)
            return None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "HouseholdParameters":
        """Build parameters from a flat mapping keyed by alias or field name.

        Missing keys take their defaults.
        """
        return cls.model_validate(dict(mapping))

    def to_mapping(self) -> dict[str, Any]:
        """Flatten to a JSON-ready mapping keyed by the camelCase aliases."""
        return self.model_dump(by_alias=True, mode="json")


__all__ = [
    "ChildcareCategory",
    "HouseholdParameters",
]
