"""Childcare Core - household take-home pay, childcare subsidy and parental leave."""

__version__ = "0.1.0"

from .calculator import (
    ScenarioCalculator,
    calculate_total_take_home_pay_with_childcare,
)
from .config import CalculatorSettings
from .exceptions import (
    ChildcareError,
    ConfigurationError,
    ScenarioNotFoundError,
    ValidationError,
)
from .models import (
    CalculationStep,
    ChildcareCategory,
    ChildcareSubsidy,
    FamilyChildcareNeeds,
    HouseholdParameters,
    IntermediateFinancials,
    ParentFinancials,
    ScenarioResult,
)
from .nanny import calculate_nanny_rate, calculate_nannying_income
from .parental_leave import calculate_parental_leave_entitlement
from .rates import RATES_VERSION, get_rates_version
from .subsidy import (
    calculate_ccs,
    calculate_ccs_percentage,
    calculate_family_income_and_childcare,
    get_hourly_rate_cap,
    get_max_subsidized_hours_per_week,
)
from .tax import calculate_medicare_levy, calculate_take_home_pay, calculate_tax

__all__ = [
    # Orchestrator
    "ScenarioCalculator",
    "calculate_total_take_home_pay_with_childcare",
    # Configuration
    "CalculatorSettings",
    # Exceptions
    "ChildcareError",
    "ConfigurationError",
    "ScenarioNotFoundError",
    "ValidationError",
    # Models
    "CalculationStep",
    "ChildcareCategory",
    "ChildcareSubsidy",
    "FamilyChildcareNeeds",
    "HouseholdParameters",
    "IntermediateFinancials",
    "ParentFinancials",
    "ScenarioResult",
    # Calculators
    "calculate_tax",
    "calculate_medicare_levy",
    "calculate_take_home_pay",
    "calculate_ccs",
    "calculate_ccs_percentage",
    "calculate_family_income_and_childcare",
    "get_hourly_rate_cap",
    "get_max_subsidized_hours_per_week",
    "calculate_nanny_rate",
    "calculate_nannying_income",
    "calculate_parental_leave_entitlement",
    # Rate tables
    "RATES_VERSION",
    "get_rates_version",
]
