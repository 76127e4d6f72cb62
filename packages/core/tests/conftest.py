"""Shared fixtures for childcare-core tests."""

from decimal import Decimal

import pytest
import structlog

from childcare_core import HouseholdParameters


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any logging configuration a test (or the CLI) applies."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no CHILDCARE_* variables and no .env file in the cwd."""
    for var in (
        "CHILDCARE_ENV",
        "CHILDCARE_LOG_LEVEL",
        "CHILDCARE_SCENARIO_STORE_PATH",
        "CHILDCARE_NANNY_DISCOUNT_ADDITIONAL_CHILD",
        "CHILDCARE_ASSUMED_NANNY_HOURS_PER_DAY",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def default_params() -> HouseholdParameters:
    """Two full-time parents on $92,000 with one child in family day care."""
    return HouseholdParameters(
        income_1=Decimal("92000"),
        income_2=Decimal("92000"),
        work_hours_per_day_1=Decimal("8"),
        work_hours_per_day_2=Decimal("8"),
        work_days_per_week_1=Decimal("5"),
        work_days_per_week_2=Decimal("5"),
        days_off_per_week_1=Decimal("0"),
        days_off_per_week_2=Decimal("0"),
        days_nannying_per_week_1=Decimal("0"),
        days_nannying_per_week_2=Decimal("0"),
        hourly_childcare_rate=Decimal("18.75"),
        childcare_type="family-day-care",
        weeks_without_childcare=Decimal("4"),
        number_of_children_in_childcare=1,
        weeks_paid_parental_leave_1=Decimal("14"),
        weeks_paid_parental_leave_2=Decimal("14"),
        expecting_another_baby=True,
    )


@pytest.fixture
def friday_at_home_params(default_params: HouseholdParameters) -> HouseholdParameters:
    """Parent 1 takes Fridays off and nannies one other child that day."""
    return default_params.model_copy(
        update={
            "days_off_per_week_1": Decimal("1"),
            "days_nannying_per_week_1": Decimal("1"),
            "nannying_rate": Decimal("35"),
            "number_of_children_to_nanny": 1,
        }
    )
