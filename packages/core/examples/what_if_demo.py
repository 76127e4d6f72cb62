#!/usr/bin/env python3
"""
Childcare What-If Demonstration

Compares a few ways a two-income household could cover childcare:
1. Both parents full time, child in family day care
2. One parent takes Fridays off
3. One parent takes Fridays off and nannies two other children that day

Run: python examples/what_if_demo.py
"""

from decimal import Decimal

from childcare_core import HouseholdParameters, ScenarioCalculator
from childcare_core.formatting import format_currency


def build_scenarios() -> dict[str, HouseholdParameters]:
    """Create the scenarios to compare."""
    full_time = HouseholdParameters(
        income_1=Decimal("92000"),
        income_2=Decimal("85000"),
        childcare_type="family-day-care",
        hourly_childcare_rate=Decimal("18.75"),
    )
    fridays_off = full_time.model_copy(update={"days_off_per_week_1": Decimal("1")})
    fridays_nannying = fridays_off.model_copy(
        update={
            "days_nannying_per_week_1": Decimal("1"),
            "number_of_children_to_nanny": 2,
        }
    )
    return {
        "Both full time": full_time,
        "Fridays at home": fridays_off,
        "Fridays nannying": fridays_nannying,
    }


def main():
    calculator = ScenarioCalculator()
    results = {name: calculator.calculate(params) for name, params in build_scenarios().items()}

    print("=" * 72)
    print(f"{'Scenario':<20}{'Take home':>18}{'Childcare':>16}{'Leave value':>18}")
    print("-" * 72)
    for name, result in results.items():
        print(
            f"{name:<20}"
            f"{format_currency(result.with_children):>18}"
            f"{format_currency(result.child_care_cost):>16}"
            f"{format_currency(result.parental_leave_payment):>18}"
        )
    print("=" * 72)

    name, result = list(results.items())[-1]
    print(f"\nHow '{name}' was calculated:\n")
    print(result.explanation)


if __name__ == "__main__":
    main()
