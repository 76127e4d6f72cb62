"""Data models for childcare-core.

- Household input parameters and childcare categories (household.py)
- Intermediate figures, explanation steps and results (results.py)
"""

from childcare_core.models.household import (
    ChildcareCategory,
    HouseholdParameters,
)
from childcare_core.models.results import (
    FamilyChildcareNeeds,
    ChildcareSubsidy,
    ParentFinancials,
    IntermediateFinancials,
    CalculationStep,
    ScenarioResult,
)

__all__ = [
    # Inputs
    "ChildcareCategory",
    "HouseholdParameters",
    # Results
    "FamilyChildcareNeeds",
    "ChildcareSubsidy",
    "ParentFinancials",
    "IntermediateFinancials",
    "CalculationStep",
    "ScenarioResult",
]
