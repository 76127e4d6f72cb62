"""Calculation result models.

Intermediate values are kept alongside the headline figures so a caller
can show how each number was reached. None of these models carry
timestamps: equal inputs must give equal results.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class FamilyChildcareNeeds(BaseModel):
    """Family income and childcare hours implied by both work schedules."""
    family_income: Decimal
    required_childcare_hours_per_week: Decimal
    activity_hours_per_fortnight: Decimal


class ChildcareSubsidy(BaseModel):
    """Child Care Subsidy outcome for one child."""
    needs: FamilyChildcareNeeds
    ccs_percentage: Decimal
    hourly_rate_cap: Decimal
    max_subsidized_hours_per_week: Decimal
    eligible_hours_per_week: Decimal
    subsidized_hourly_rate: Decimal
    weekly_subsidy: Decimal
    family_cost: Decimal = Field(
        description="Annual out-of-pocket cost after subsidy, for one child"
    )


class ParentFinancials(BaseModel):
    """Per-parent figures derived during a calculation."""
    adjusted_income: Decimal = Field(
        description="Pre-tax income scaled to the days actually worked"
    )
    nannying_income: Decimal = Field(description="Annual income from nannying")
    total_income: Decimal
    take_home_pay: Decimal
    parental_leave_entitlement: Decimal


class IntermediateFinancials(BaseModel):
    """Everything the orchestrator derives on the way to a result."""
    parent_1: ParentFinancials
    parent_2: ParentFinancials
    nanny_rate: Decimal = Field(description="Hourly nanny rate after multi-child discounts")
    family_income: Decimal = Field(description="Sum of both parents' total income")
    subsidy: ChildcareSubsidy
    total_take_home_pay: Decimal
    total_take_home_pay_with_leave: Decimal


class CalculationStep(BaseModel):
    """One line of the explanation shown to the user.

    Attributes:
        step: Machine-readable step name (e.g. "family_income")
        label: Heading shown before the formula
        formula: Formula with the values substituted in
        value: The value the step produced
    """
    step: str
    label: str
    formula: str
    value: Decimal


class ScenarioResult(BaseModel):
    """Outcome of one what-if scenario."""

    with_children: Decimal = Field(
        description="Household take-home pay after paying for childcare"
    )
    child_care_cost: Decimal = Field(
        description="Annual childcare cost after subsidy, for all children in care"
    )
    parental_leave_payment: Decimal = Field(
        description="Extra take-home pay from paid parental leave for a new baby"
    )
    explanation: str = Field(description="Numbered derivation, one step per line")
    steps: list[CalculationStep] = Field(default_factory=list)
    financials: IntermediateFinancials
    rates_version: str

    @property
    def explanation_lines(self) -> list[str]:
        """The explanation split into its numbered lines."""
        return self.explanation.splitlines()


__all__ = [
    "FamilyChildcareNeeds",
    "ChildcareSubsidy",
    "ParentFinancials",
    "IntermediateFinancials",
    "CalculationStep",
    "ScenarioResult",
]
