"""Custom exceptions for the childcare calculator.

All exceptions inherit from ChildcareError, so callers can catch every
calculator-specific failure in one place.

Example:
    try:
        result = calculate_total_take_home_pay_with_childcare(params)
    except ValidationError as e:
        logger.warning("invalid_parameters", field=e.field)
    except ChildcareError as e:
        logger.error("calculation_failed", error=str(e))
"""

from typing import Any, Optional


class ChildcareError(Exception):
    """Base exception for all calculator errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
        recoverable: Whether the caller can fix the problem and retry.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"recoverable={self.recoverable!r})"
        )


class ValidationError(ChildcareError):
    """Error raised when a parameter makes a calculation undefined.

    The engine does not police the input domain in general (negative
    incomes simply flow through the arithmetic); this is raised only
    where a value would make a formula meaningless, such as a zero-day
    working week used as a divisor.

    Attributes:
        field: The field that failed validation.
        value: The offending value.
        constraint: The rule that was violated.

    Example:
        >>> raise ValidationError(
        ...     "Work days per week must be greater than zero",
        ...     field="work_days_per_week",
        ...     value=0,
        ...     constraint="> 0",
        ... )
        ValidationError: Work days per week must be greater than zero
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        """Initialize ValidationError.

        Args:
            message: Human-readable error description.
            field: The name of the field that failed validation.
            value: The invalid value.
            constraint: Description of the validation rule violated.
            details: Optional dictionary with additional context.
            recoverable: Defaults to True since the caller can correct
                the input and recalculate.
        """
        super().__init__(message, details=details, recoverable=recoverable)
        self.field = field
        self.value = value
        self.constraint = constraint

        if field:
            self.details["field"] = field
        if value is not None:
            self.details["value"] = value
        if constraint:
            self.details["constraint"] = constraint


class ConfigurationError(ChildcareError):
    """Error raised when configuration is invalid or missing.

    Attributes:
        config_key: The configuration key that is problematic.
        expected: Description of the expected value or format.
        actual: The actual value found (if any).
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message, details=details, recoverable=recoverable)
        self.config_key = config_key
        self.expected = expected
        self.actual = actual

        if config_key:
            self.details["config_key"] = config_key
        if expected:
            self.details["expected"] = expected
        if actual is not None:
            self.details["actual"] = actual


class ScenarioNotFoundError(ChildcareError):
    """Error raised when a saved scenario id is not in the store.

    Attributes:
        scenario_id: The id that was looked up.
    """

    def __init__(
        self,
        message: str,
        *,
        scenario_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(message, details=details, recoverable=recoverable)
        self.scenario_id = scenario_id

        if scenario_id:
            self.details["scenario_id"] = scenario_id


__all__ = [
    "ChildcareError",
    "ValidationError",
    "ConfigurationError",
    "ScenarioNotFoundError",
]
