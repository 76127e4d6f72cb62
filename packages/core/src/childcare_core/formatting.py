"""Currency display and lenient amount parsing.

format_currency renders amounts the way the explanation text shows them
("$92,000.00"); parse_amount accepts whatever a user typed into a money
field ("$92,000", "92k " etc.) and keeps only digits and the decimal point.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from .exceptions import ValidationError

_NON_NUMERIC = re.compile(r"[^0-9.]")
CENTS = Decimal("0.01")


def format_currency(value: Union[Decimal, int, float]) -> str:
    """Format an amount as dollars and cents with thousands separators.

    >>> format_currency(Decimal("92000"))
    '$92,000.00'
    >>> format_currency(Decimal("-1234.5"))
    '-$1,234.50'
    """
    amount = Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_number(value: Union[Decimal, int, float]) -> str:
    """Render a plain count or rate without trailing zeros ("5", "0.5")."""
    amount = Decimal(str(value))
    if amount == amount.to_integral_value():
        return str(amount.quantize(Decimal("1")))
    return format(amount.normalize(), "f")


def format_percentage(value: Union[Decimal, int, float]) -> str:
    """Render a fraction as a percentage ("0.692" -> "69.2%")."""
    return f"{format_number(Decimal(str(value)) * 100)}%"


def parse_amount(text: str) -> Decimal:
    """Parse a free-form currency string.

    Every character other than digits and "." is dropped. An empty result
    is zero.

    Raises:
        ValidationError: If what remains is not a number (e.g. "1.2.3")
    """
    cleaned = _NON_NUMERIC.sub("", text)
    if cleaned == "":
        return Decimal("0")
    try:
        return Decimal(cleaned)
    except InvalidOperation as e:
        raise ValidationError(
            f"Could not parse amount: {text!r}",
            field="amount",
            value=text,
            constraint="digits with at most one decimal point",
        ) from e


__all__ = [
    "format_currency",
    "format_number",
    "format_percentage",
    "parse_amount",
]
