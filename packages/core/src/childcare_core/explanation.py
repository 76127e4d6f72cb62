"""Numbered, human-readable derivation of a scenario result.

Steps are appended in the order the calculation performs them; optional
steps are skipped without disturbing the order of the ones that follow.
Numbering happens only when the explanation is rendered.
"""

from decimal import Decimal
from typing import Callable, Optional

import structlog

from .formatting import format_currency
from .models import CalculationStep

logger = structlog.get_logger()

MoneyFormatter = Callable[[Decimal], str]


class ExplanationBuilder:
    """Collect explanation steps and render them as numbered lines.

    Example:
        builder = ExplanationBuilder()
        builder.add("family_income", "Family Income", "...", Decimal("184000"))
        builder.add_if(days_off > 0, "adjusted_income_1", ...)
        text = builder.render()
    """

    def __init__(self, money: Optional[MoneyFormatter] = None):
        """
        Args:
            money: Formats amounts inside formulas (default: format_currency)
        """
        self.money: MoneyFormatter = money or format_currency
        self._steps: list[CalculationStep] = []

    def add(self, step: str, label: str, formula: str, value: Decimal) -> CalculationStep:
        """Append a step unconditionally."""
        entry = CalculationStep(step=step, label=label, formula=formula, value=value)
        self._steps.append(entry)
        logger.info(
            "scenario_calculation_step",
            step=step,
            formula=formula,
            value=str(value),
        )
        return entry

    def add_if(
        self,
        condition: bool,
        step: str,
        label: str,
        formula: str,
        value: Decimal,
    ) -> Optional[CalculationStep]:
        """Append a step only when condition holds."""
        if not condition:
            return None
        return self.add(step, label, formula, value)

    @property
    def steps(self) -> list[CalculationStep]:
        return list(self._steps)

    def render(self) -> str:
        """Number the steps from 1 and join them with newlines."""
        return "\n".join(
            f"{number}. {entry.label}: {entry.formula}"
            for number, entry in enumerate(self._steps, start=1)
        )


__all__ = [
    "MoneyFormatter",
    "ExplanationBuilder",
]
