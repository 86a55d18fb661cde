"""Display formatting for amounts, percentages and dates (French locale)."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from facturexl.calculators.rounding import round_to_denomination
from facturexl.config import settings

# fr-FR groups thousands with a narrow no-break space
_GROUP_SEPARATOR = "\u202f"

_SHORT_MONTHS = (
    "janv.", "févr.", "mars", "avr.", "mai", "juin",
    "juil.", "août", "sept.", "oct.", "nov.", "déc.",
)


def format_currency(value: Decimal | float | int | None) -> str:
    """Format as CFP, rounded to the 5-franc coin: 23976 -> "23 975 CFP"."""
    if value is None:
        return "-"
    amount = round_to_denomination(value)
    grouped = f"{amount:,}".replace(",", _GROUP_SEPARATOR)
    return f"{grouped} {settings.billing.currency_label}"


def format_percent(value: Decimal | float | int | None) -> str:
    """Format a line discount/tax rate: 10 -> "10%", 0 -> "-"."""
    if not value:
        return "-"
    d = Decimal(str(value))
    text = f"{d.normalize():f}"
    return f"{text}%"


def format_date(value: date | None) -> str:
    """Format as a short French date: 2026-10-19 -> "19 oct. 2026"."""
    if value is None:
        return "-"
    return f"{value.day} {_SHORT_MONTHS[value.month - 1]} {value.year}"
