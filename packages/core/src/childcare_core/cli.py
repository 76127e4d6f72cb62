"""Command-line interface for running what-if scenarios.

Examples:
  # Default household: two full-time parents on $92,000
  childcare-whatif

  # One parent takes Fridays off and nannies two other children on Friday
  childcare-whatif --days-off-per-week-1 1 --days-nannying-per-week-1 1 \\
      --number-of-children-to-nanny 2

  # Save the scenario, list saved ones and re-run one later
  childcare-whatif --days-off-per-week-1 1 --save "Fridays at home"
  childcare-whatif --list
  childcare-whatif --load 3f2a... --json
"""

import argparse
import logging
import sys
from typing import Any, Optional, Sequence

import structlog
from pydantic import ValidationError as PydanticValidationError

from .calculator import ScenarioCalculator
from .config import CalculatorSettings
from .exceptions import ChildcareError, ConfigurationError, ValidationError
from .formatting import format_currency, parse_amount
from .models import ChildcareCategory, HouseholdParameters, ScenarioResult
from .scenarios import JsonFileScenarioStore, SavedScenario

logger = structlog.get_logger()


def configure_logging(level: str) -> None:
    """Send structlog events at or above level to stderr."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def load_settings(log_level: Optional[str] = None) -> CalculatorSettings:
    """Load settings from the environment, optionally overriding the log level.

    Raises:
        ConfigurationError: If any setting fails validation
    """
    overrides: dict[str, Any] = {"log_level": log_level} if log_level else {}
    try:
        return CalculatorSettings(**overrides)
    except PydanticValidationError as e:
        first = e.errors()[0]
        config_key = ".".join(str(part) for part in first["loc"])
        raise ConfigurationError(
            f"Invalid configuration for {config_key}: {first['msg']}",
            config_key=config_key,
            actual=first.get("input"),
        ) from e


def _option_name(field_name: str) -> str:
    return "--" + field_name.replace("_", "-")


def _amount(text: str):
    try:
        return parse_amount(text)
    except ValidationError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser, one option per household parameter."""
    parser = argparse.ArgumentParser(
        prog="childcare-whatif",
        description="Estimate take-home pay, childcare cost and parental leave value",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1] if __doc__ else None,
    )

    household = parser.add_argument_group("household parameters")
    for name, field in HouseholdParameters.model_fields.items():
        option = _option_name(name)
        default = field.default.value if isinstance(field.default, ChildcareCategory) else field.default
        help_text = f"{field.description or name.replace('_', ' ')} (default: {default})"
        if field.annotation is bool:
            household.add_argument(
                option,
                dest=name,
                action=argparse.BooleanOptionalAction,
                default=None,
                help=help_text,
            )
        elif name == "childcare_type":
            household.add_argument(
                option,
                dest=name,
                choices=[c.value for c in ChildcareCategory],
                default=None,
                help=help_text,
            )
        else:
            household.add_argument(option, dest=name, type=_amount, default=None, help=help_text)

    saved = parser.add_argument_group("saved scenarios")
    saved.add_argument("--save", metavar="NAME", help="Save the parameters under NAME")
    saved.add_argument("--load", metavar="ID", help="Start from a saved scenario's parameters")
    saved.add_argument("--list", action="store_true", help="List saved scenarios and exit")
    saved.add_argument("--delete", metavar="ID", help="Delete a saved scenario and exit")
    saved.add_argument("--store", metavar="PATH", help="Scenario file (default: from settings)")

    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--log-level", help="Override CHILDCARE_LOG_LEVEL")
    return parser


def collect_parameters(
    args: argparse.Namespace,
    base: Optional[HouseholdParameters] = None,
) -> HouseholdParameters:
    """Overlay options given on the command line onto base parameters."""
    values: dict[str, Any] = base.model_dump() if base is not None else {}
    for name in HouseholdParameters.model_fields:
        value = getattr(args, name, None)
        if value is not None:
            values[name] = value
    return HouseholdParameters.model_validate(values)


def render_result(result: ScenarioResult) -> str:
    """Plain-text summary followed by the explanation."""
    lines = [
        f"Take home after childcare:  {format_currency(result.with_children)}",
        f"Annual childcare cost:      {format_currency(result.child_care_cost)}",
        f"Parental leave payment:     {format_currency(result.parental_leave_payment)}",
        f"Rates:                      {result.rates_version}",
        "",
        result.explanation,
    ]
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.log_level)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    configure_logging(settings.log_level)

    store = JsonFileScenarioStore(args.store or settings.scenario_store_path)

    try:
        if args.list:
            for scenario in store.get_all():
                print(f"{scenario.id}  {scenario.name}")
            return 0

        if args.delete:
            store.delete(args.delete)
            return 0

        base = store.get(args.load).parameters if args.load else None
        params = collect_parameters(args, base)

        if args.save:
            saved = store.put(SavedScenario(name=args.save, parameters=params))
            print(f"Saved scenario {saved.id}", file=sys.stderr)

        result = ScenarioCalculator(settings=settings).calculate(params)
    except ChildcareError as e:
        logger.error("scenario_failed", error=str(e), details=e.details)
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except PydanticValidationError as e:
        print(f"Invalid parameters: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(result.model_dump_json(indent=2))
    else:
        print(render_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
