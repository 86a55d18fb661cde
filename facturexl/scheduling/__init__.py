"""Subscription renewal scheduling."""

from facturexl.scheduling.months import add_months
from facturexl.scheduling.renewals import (
    evaluate_subscription,
    find_next_renewal,
    generate_renewal_dates,
    is_renewal_approaching,
)

__all__ = [
    "add_months",
    "evaluate_subscription",
    "find_next_renewal",
    "generate_renewal_dates",
    "is_renewal_approaching",
]
