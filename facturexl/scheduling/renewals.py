"""Subscription renewal schedule generator.

Two families of frequencies:

- Periodic (monthly, bimonthly, quarterly, semiannual): renewals every
  1, 2, 3 or 6 calendar months from the start date.
- Annual anchor (yearly, custom): one renewal per year, in the anchor
  month, on the start date's day (clamped to the month length). Yearly
  subscriptions without an explicit anchor renew in December.

Unknown frequencies fail closed (empty schedule, no next renewal),
while an anchor month outside 1–12 raises InvalidAnchorMonth.
"""

from __future__ import annotations

import logging
from datetime import date

from facturexl.config import settings
from facturexl.enums import Frequency
from facturexl.errors import InvalidAnchorMonth
from facturexl.scheduling.months import add_months, as_date, on_day
from facturexl.schemas.subscriptions import SubscriptionStatus, SubscriptionTerms

logger = logging.getLogger(__name__)

PERIOD_MONTHS: dict[Frequency, int] = {
    Frequency.MONTHLY: 1,
    Frequency.BIMONTHLY: 2,
    Frequency.QUARTERLY: 3,
    Frequency.SEMIANNUAL: 6,
}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_frequency(frequency: Frequency | str | None) -> Frequency | None:
    if frequency is None:
        return None
    try:
        return Frequency(frequency)
    except ValueError:
        logger.warning("Unknown renewal frequency %r, no schedule produced", frequency)
        return None


def _resolve_anchor(frequency: Frequency, anchor_month: int | None) -> int | None:
    """Return the renewal month for an annual-anchor frequency."""
    if anchor_month is not None:
        if not 1 <= anchor_month <= 12:
            raise InvalidAnchorMonth(anchor_month)
        return anchor_month
    if frequency is Frequency.YEARLY:
        return settings.renewal.default_yearly_anchor_month
    logger.warning("Custom frequency without anchor month, no schedule produced")
    return None


def _periodic_dates(start: date, end: date, step: int) -> list[date]:
    dates: list[date] = []
    current = start
    while current <= end:
        dates.append(current)
        current = add_months(current, step)
    return dates


def _anchor_dates(start: date, end: date, anchor: int) -> list[date]:
    dates: list[date] = []
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        if month == anchor:
            candidate = on_day(year, month, start.day)
            if start <= candidate <= end:
                dates.append(candidate)
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
    return dates


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def generate_renewal_dates(
    start_date: date,
    end_date: date,
    frequency: Frequency | str,
    anchor_month: int | None = None,
) -> list[date]:
    """List every renewal date of a subscription, ascending.

    Args:
        start_date: First day of the subscription (first periodic renewal).
        end_date: Last day of the subscription, inclusive.
        frequency: Renewal frequency; unknown values yield an empty list.
        anchor_month: Renewal month (1–12) for custom, optional for yearly.

    Returns:
        Renewal dates within [start_date, end_date].

    Raises:
        InvalidAnchorMonth: If anchor_month is given and outside 1–12.
    """
    start, end = as_date(start_date), as_date(end_date)
    if start > end:
        return []

    freq = _parse_frequency(frequency)
    if freq is None:
        return []

    if freq.is_annual_anchor:
        anchor = _resolve_anchor(freq, anchor_month)
        if anchor is None:
            return []
        return _anchor_dates(start, end, anchor)

    return _periodic_dates(start, end, PERIOD_MONTHS[freq])


def find_next_renewal(
    start_date: date,
    frequency: Frequency | str,
    now: date,
    end_date: date,
    anchor_month: int | None = None,
) -> date | None:
    """Find the first renewal strictly after ``now``.

    Periodic frequencies step from the start date; annual-anchor
    frequencies use this year's anchor date, or next year's once it has
    passed.

    Returns:
        The next renewal date, or None if it would fall outside the
        subscription period or the frequency is unknown.
    """
    start, end, today = as_date(start_date), as_date(end_date), as_date(now)

    freq = _parse_frequency(frequency)
    if freq is None:
        return None

    if freq.is_annual_anchor:
        anchor = _resolve_anchor(freq, anchor_month)
        if anchor is None:
            return None
        candidate = on_day(today.year, anchor, start.day)
        if candidate <= today:
            candidate = on_day(today.year + 1, anchor, start.day)
        if start <= candidate <= end:
            return candidate
        return None

    step = PERIOD_MONTHS[freq]
    current = start
    while current <= today and current <= end:
        current = add_months(current, step)
    if current <= end:
        return current
    return None


def is_renewal_approaching(
    end_date: date,
    start_date: date | None = None,
    frequency: Frequency | str | None = None,
    anchor_month: int | None = None,
    now: date | None = None,
    *,
    days_ahead: int | None = None,
    grace_days: int | None = None,
) -> bool:
    """Tell whether a subscription needs attention.

    True when the end date is 0 to ``days_ahead`` days away, or when the
    next renewal is between ``grace_days`` days overdue and ``days_ahead``
    days away. Without a start date and frequency only the end date counts.

    Args:
        end_date: Subscription end date.
        start_date: Subscription start date, if known.
        frequency: Renewal frequency, if known.
        anchor_month: Renewal month for custom/yearly.
        now: Reference date, today by default.
        days_ahead: Look-ahead window; defaults to settings.
        grace_days: Overdue window; defaults to settings.
    """
    today = as_date(now) if now is not None else date.today()
    ahead = settings.renewal.alert_days_ahead if days_ahead is None else days_ahead
    grace = settings.renewal.overdue_grace_days if grace_days is None else grace_days

    days_until_end = (as_date(end_date) - today).days
    if 0 <= days_until_end <= ahead:
        return True

    if start_date is None or frequency is None:
        return False

    next_renewal = find_next_renewal(start_date, frequency, today, end_date, anchor_month)
    if next_renewal is None:
        return False
    days_until_renewal = (next_renewal - today).days
    return -grace <= days_until_renewal <= ahead


def evaluate_subscription(terms: SubscriptionTerms, now: date | None = None) -> SubscriptionStatus:
    """Compute the schedule, next renewal and alert flag for a subscription."""
    today = as_date(now) if now is not None else date.today()

    renewal_dates = generate_renewal_dates(
        terms.start_date, terms.end_date, terms.frequency, terms.anchor_month
    )
    next_renewal = find_next_renewal(
        terms.start_date, terms.frequency, today, terms.end_date, terms.anchor_month
    )
    approaching = is_renewal_approaching(
        terms.end_date,
        terms.start_date,
        terms.frequency,
        terms.anchor_month,
        now=today,
    )

    logger.debug(
        "Subscription %s→%s (%s): %d renewals, next=%s, approaching=%s",
        terms.start_date,
        terms.end_date,
        terms.frequency,
        len(renewal_dates),
        next_renewal,
        approaching,
    )
    return SubscriptionStatus(
        renewal_dates=renewal_dates,
        next_renewal=next_renewal,
        renewal_approaching=approaching,
    )
