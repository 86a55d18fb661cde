"""Pydantic schemas for subscription renewal scheduling."""

from __future__ import annotations

from datetime import date
from typing import Annotated

from pydantic import BaseModel, Field

from facturexl.enums import Frequency


class SubscriptionTerms(BaseModel):
    """Persisted inputs of a subscription invoice.

    ``frequency`` keeps unknown strings as-is so that legacy records
    evaluate to an empty schedule instead of failing validation.
    """

    start_date: date
    end_date: date
    frequency: Annotated[Frequency | str, Field(union_mode="left_to_right")]
    anchor_month: int | None = None    # 1–12, custom/yearly only


class SubscriptionStatus(BaseModel):
    """Derived renewal state shown on the subscriptions dashboard."""

    renewal_dates: list[date] = Field(default_factory=list)
    next_renewal: date | None = None
    renewal_approaching: bool = False
