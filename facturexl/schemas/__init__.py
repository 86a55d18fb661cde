"""Pydantic schemas for the billing engine inputs and outputs."""

from facturexl.schemas.billing import LineItem, LineTotals, RoundedTotals, TotalsResult
from facturexl.schemas.subscriptions import SubscriptionStatus, SubscriptionTerms

__all__ = [
    "LineItem",
    "LineTotals",
    "RoundedTotals",
    "TotalsResult",
    "SubscriptionStatus",
    "SubscriptionTerms",
]
