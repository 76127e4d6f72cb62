"""End-to-end what-if scenario calculation.

ScenarioCalculator combines the tax, subsidy, nanny and parental leave
calculators into one result: household take-home pay after childcare,
the annual childcare bill, and the value of paid parental leave for a
new baby, with a numbered explanation of every intermediate figure.
"""

from decimal import Decimal
from typing import Optional

import structlog

from .config import CalculatorSettings
from .explanation import ExplanationBuilder, MoneyFormatter
from .formatting import format_number, format_percentage
from .models import (
    HouseholdParameters,
    IntermediateFinancials,
    ParentFinancials,
    ScenarioResult,
)
from .nanny import calculate_nanny_rate, calculate_nannying_income
from .parental_leave import calculate_parental_leave_entitlement
from .rates import (
    ASSUMED_NANNY_HOURS_PER_DAY,
    NANNY_DISCOUNT_ADDITIONAL_CHILD,
    RATES_VERSION,
    WEEKS_PER_YEAR,
)
from .subsidy import calculate_ccs, require_working_days
from .tax import calculate_take_home_pay

logger = structlog.get_logger()


def adjust_income_for_days_off(
    income: Decimal,
    work_days_per_week: Decimal,
    days_off_per_week: Decimal,
    field: str = "work_days_per_week",
) -> Decimal:
    """Scale pay to the days actually worked.

    Unlike the subsidy calculator's family income, taking more days off
    than are worked is not clamped here.

    Raises:
        ValidationError: If work_days_per_week is zero
    """
    require_working_days(work_days_per_week, field)
    return income * ((work_days_per_week - days_off_per_week) / work_days_per_week)


class ScenarioCalculator:
    """
    Calculate household take-home pay for a childcare what-if scenario.

    The calculator holds configuration only; every call to calculate()
    is independent, so one instance can be shared freely.
    """

    def __init__(
        self,
        settings: Optional[CalculatorSettings] = None,
        money: Optional[MoneyFormatter] = None,
    ):
        """
        Initialize the calculator.

        Args:
            settings: Overrides for nanny assumptions (default: rate tables)
            money: Currency formatter for explanation text
        """
        if settings is not None:
            self.nanny_discount = settings.nanny_discount_additional_child
            self.nanny_hours_per_day = settings.assumed_nanny_hours_per_day
        else:
            self.nanny_discount = NANNY_DISCOUNT_ADDITIONAL_CHILD
            self.nanny_hours_per_day = ASSUMED_NANNY_HOURS_PER_DAY
        self.money = money

    def calculate(self, params: HouseholdParameters) -> ScenarioResult:
        """
        Run the full scenario.

        Args:
            params: Household schedules, incomes and childcare arrangements

        Returns:
            ScenarioResult with headline figures, intermediate financials
            and the numbered explanation

        Raises:
            ValidationError: If either parent's work days per week is zero
        """
        p = params
        explanation = ExplanationBuilder(self.money)
        money = explanation.money

        # Step 1: Pay for the days actually worked
        adjusted_income_1 = adjust_income_for_days_off(
            p.income_1, p.work_days_per_week_1, p.days_off_per_week_1, "work_days_per_week_1"
        )
        adjusted_income_2 = adjust_income_for_days_off(
            p.income_2, p.work_days_per_week_2, p.days_off_per_week_2, "work_days_per_week_2"
        )

        # Step 2: Annual nannying income, shared rate but each parent's own days
        nanny_rate = calculate_nanny_rate(
            p.nannying_rate, p.number_of_children_to_nanny, self.nanny_discount
        )
        nannying_income_1 = self._annual_nannying_income(p, p.days_nannying_per_week_1)
        nannying_income_2 = self._annual_nannying_income(p, p.days_nannying_per_week_2)

        # Step 3: Total income
        total_income_1 = adjusted_income_1 + nannying_income_1
        total_income_2 = adjusted_income_2 + nannying_income_2

        # Step 4: Childcare cost after subsidy, for one child
        subsidy = calculate_ccs(
            total_income_1,
            total_income_2,
            p.work_hours_per_day_1,
            p.work_hours_per_day_2,
            p.work_days_per_week_1,
            p.work_days_per_week_2,
            p.days_off_per_week_1,
            p.days_off_per_week_2,
            p.hourly_childcare_rate,
            p.childcare_type,
            p.weeks_without_childcare,
        )
        family_cost = subsidy.family_cost

        # Step 5: Parental leave from the unadjusted salary
        entitlement_1 = calculate_parental_leave_entitlement(
            p.work_days_per_week_1, p.weeks_paid_parental_leave_1, p.income_1
        )
        entitlement_2 = calculate_parental_leave_entitlement(
            p.work_days_per_week_2, p.weeks_paid_parental_leave_2, p.income_2
        )

        # Step 6: Take-home pay
        take_home_1 = calculate_take_home_pay(total_income_1)
        take_home_2 = calculate_take_home_pay(total_income_2)
        total_take_home_pay = take_home_1 + take_home_2

        # Step 7: Take-home pay if a new baby's leave is paid this year
        leave_1 = entitlement_1 if p.expecting_another_baby else Decimal("0")
        leave_2 = entitlement_2 if p.expecting_another_baby else Decimal("0")
        total_take_home_pay_with_leave = (
            calculate_take_home_pay(total_income_1 + leave_1)
            + calculate_take_home_pay(total_income_2 + leave_2)
        )

        # Step 8: Headline figures
        child_care_cost = family_cost * p.number_of_children_in_childcare
        with_children = total_take_home_pay - child_care_cost
        parental_leave_payment = total_take_home_pay_with_leave - total_take_home_pay
        family_income = total_income_1 + total_income_2

        # Step 9: Explanation
        for person, income, work_days, days_off, adjusted in (
            (1, p.income_1, p.work_days_per_week_1, p.days_off_per_week_1, adjusted_income_1),
            (2, p.income_2, p.work_days_per_week_2, p.days_off_per_week_2, adjusted_income_2),
        ):
            explanation.add_if(
                days_off > 0,
                f"adjusted_income_{person}",
                f"Adjusted Income for Person {person}",
                f"income({money(income)}) * ((work_days_per_week({format_number(work_days)})"
                f" - days_off_per_week({format_number(days_off)}))"
                f" / work_days_per_week({format_number(work_days)})) = {money(adjusted)}",
                adjusted,
            )

        explanation.add_if(
            p.days_nannying_per_week_1 + p.days_nannying_per_week_2 > 0,
            "nanny_rate",
            "Effective Nannying Rate",
            f"nanny_base_rate({money(p.nannying_rate)}) + discount of"
            f" {format_percentage(self.nanny_discount)} for each additional child"
            f" ({max(0, p.number_of_children_to_nanny - 1)}) = {money(nanny_rate)}",
            nanny_rate,
        )

        for person, days_nannying, nannying_income in (
            (1, p.days_nannying_per_week_1, nannying_income_1),
            (2, p.days_nannying_per_week_2, nannying_income_2),
        ):
            explanation.add_if(
                days_nannying > 0,
                f"nannying_income_{person}",
                f"Nannying Income for Person {person}",
                f"nanny_rate({money(nanny_rate)}) * days_nannying_per_week({format_number(days_nannying)})"
                f" * nanny_hours_per_day({format_number(self.nanny_hours_per_day)})"
                f" * {format_number(WEEKS_PER_YEAR)} weeks = {money(nannying_income)}",
                nannying_income,
            )

        for person, days_off, days_nannying, total_income in (
            (1, p.days_off_per_week_1, p.days_nannying_per_week_1, total_income_1),
            (2, p.days_off_per_week_2, p.days_nannying_per_week_2, total_income_2),
        ):
            sources = []
            if days_off > 0:
                sources.append("Adjusted Income")
            if days_nannying > 0:
                sources.append("Nannying Income")
            suffix = f" ({' + '.join(sources)})" if sources else ""
            explanation.add(
                f"total_income_{person}",
                f"Total Income for Person {person}",
                f"{money(total_income)}{suffix}",
                total_income,
            )

        explanation.add(
            "family_income",
            "Family Income",
            f"total_income_person_1({money(total_income_1)})"
            f" + total_income_person_2({money(total_income_2)}) = {money(family_income)}",
            family_income,
        )

        explanation.add(
            "family_childcare_cost",
            "Family Cost of Childcare after CCS",
            f"(hourly_childcare_rate({money(p.hourly_childcare_rate)})"
            f" * required_hours_per_week({format_number(subsidy.needs.required_childcare_hours_per_week)})"
            f" - weekly_subsidy({money(subsidy.weekly_subsidy)}))"
            f" * ({format_number(WEEKS_PER_YEAR)} - weeks_without_childcare({format_number(p.weeks_without_childcare)}))"
            f" = {money(family_cost)}",
            family_cost,
        )

        for person, take_home in ((1, take_home_1), (2, take_home_2)):
            explanation.add(
                f"take_home_pay_{person}",
                f"Total Take Home for Person {person} (Income After Tax)",
                money(take_home),
                take_home,
            )

        explanation.add(
            "family_take_home_pay",
            "Family Take Home",
            f"take_home_person_1({money(take_home_1)})"
            f" + take_home_person_2({money(take_home_2)}) = {money(total_take_home_pay)}",
            total_take_home_pay,
        )

        explanation.add(
            "family_take_home_after_childcare",
            "Family Take Home After Childcare",
            f"total_take_home_pay({money(total_take_home_pay)})"
            f" - family_cost_after_ccs({money(family_cost)})"
            f" * number_of_children_in_childcare({p.number_of_children_in_childcare})"
            f" = {money(with_children)}",
            with_children,
        )

        financials = IntermediateFinancials(
            parent_1=ParentFinancials(
                adjusted_income=adjusted_income_1,
                nannying_income=nannying_income_1,
                total_income=total_income_1,
                take_home_pay=take_home_1,
                parental_leave_entitlement=entitlement_1,
            ),
            parent_2=ParentFinancials(
                adjusted_income=adjusted_income_2,
                nannying_income=nannying_income_2,
                total_income=total_income_2,
                take_home_pay=take_home_2,
                parental_leave_entitlement=entitlement_2,
            ),
            nanny_rate=nanny_rate,
            family_income=family_income,
            subsidy=subsidy,
            total_take_home_pay=total_take_home_pay,
            total_take_home_pay_with_leave=total_take_home_pay_with_leave,
        )

        logger.info(
            "scenario_calculated",
            with_children=str(with_children),
            child_care_cost=str(child_care_cost),
            parental_leave_payment=str(parental_leave_payment),
            steps=len(explanation.steps),
        )

        return ScenarioResult(
            with_children=with_children,
            child_care_cost=child_care_cost,
            parental_leave_payment=parental_leave_payment,
            explanation=explanation.render(),
            steps=explanation.steps,
            financials=financials,
            rates_version=RATES_VERSION,
        )

    def _annual_nannying_income(self, params: HouseholdParameters, days_per_week: Decimal) -> Decimal:
        weekly = calculate_nannying_income(
            params.nannying_rate,
            params.number_of_children_to_nanny,
            days_per_week,
            discount=self.nanny_discount,
            hours_per_day=self.nanny_hours_per_day,
        )
        return weekly * WEEKS_PER_YEAR


def calculate_total_take_home_pay_with_childcare(
    params: HouseholdParameters,
    settings: Optional[CalculatorSettings] = None,
) -> ScenarioResult:
    """Calculate one scenario with a fresh ScenarioCalculator."""
    return ScenarioCalculator(settings=settings).calculate(params)


__all__ = [
    "adjust_income_for_days_off",
    "ScenarioCalculator",
    "calculate_total_take_home_pay_with_childcare",
]
