"""Calendar month arithmetic."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta


def as_date(value: date) -> date:
    """Drop the time part of a datetime; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def add_months(value: date, months: int) -> date:
    """Move a date by a number of calendar months.

    Days past the end of the target month overflow into the following
    month: 2024-01-31 + 1 month is 2024-03-02, 2023-01-31 + 1 month is
    2023-03-03. Repeated additions therefore drift once they overflow.
    """
    index = value.month - 1 + months
    first = date(value.year + index // 12, index % 12 + 1, 1)
    return first + timedelta(days=value.day - 1)


def on_day(year: int, month: int, day: int) -> date:
    """Build a date, clamping ``day`` to the length of the month."""
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))
