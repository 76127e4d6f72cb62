"""Configuration for the childcare calculator.

Pydantic Settings with environment variable and .env support. The
calculation engine never reads the environment itself: load settings
once at the edge (the CLI does) and pass them in.

Usage:
    from childcare_core.config import CalculatorSettings

    settings = CalculatorSettings()
    calculator = ScenarioCalculator(settings=settings)

Environment Variables:
    CHILDCARE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    CHILDCARE_SCENARIO_STORE_PATH: JSON file holding saved scenarios
    CHILDCARE_NANNY_DISCOUNT_ADDITIONAL_CHILD: Discount per extra nannied child
    CHILDCARE_ASSUMED_NANNY_HOURS_PER_DAY: Hours in a nannying day
"""

from decimal import Decimal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .rates import ASSUMED_NANNY_HOURS_PER_DAY, NANNY_DISCOUNT_ADDITIONAL_CHILD


class CalculatorSettings(BaseSettings):
    """Root configuration for the calculator and its CLI."""

    model_config = SettingsConfigDict(
        env_prefix="CHILDCARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )
    scenario_store_path: str = Field(
        default="./saved_scenarios.json",
        description="JSON file used to persist saved scenarios",
    )
    nanny_discount_additional_child: Decimal = Field(
        default=NANNY_DISCOUNT_ADDITIONAL_CHILD,
        ge=0,
        le=1,
        description="Fractional discount for each nannied child after the first",
    )
    assumed_nanny_hours_per_day: Decimal = Field(
        default=ASSUMED_NANNY_HOURS_PER_DAY,
        gt=0,
        le=24,
        description="Hours worked on a nannying day",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper().strip()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {valid_levels}")
        return v_upper
