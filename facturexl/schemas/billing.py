"""Pydantic schemas for invoice line items and totals.

Pure data classes — no business logic. Line items accept both the
snake_case field names and the camelCase keys sent by form/API payloads
(``unitPrice``, ``discountPercent``, ``taxPercent``).

Amounts are not range-checked and NaN/Infinity pass through, so that
malformed inputs surface as NaN totals instead of validation errors.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Amount = Annotated[Decimal, Field(allow_inf_nan=True)]


class LineItem(BaseModel):
    """A single invoice, credit note or quote line."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    quantity: Amount                   # fractional for hourly lines, e.g. 1.5
    unit_price: Amount
    discount_percent: Amount = Decimal("0")   # applied before tax
    tax_percent: Amount = Decimal("0")        # applied after discount

    # Descriptive fields carried through to PDF rendering
    product: str | None = None
    description: str | None = None
    unit: str | None = None            # e.g. "h", "forfait"
    intern_ref: str | None = None


class LineTotals(BaseModel):
    """Full-precision amounts for one line."""

    subtotal: Amount                   # quantity × unit_price
    discount_amount: Amount
    after_discount: Amount             # subtotal - discount_amount
    tax_amount: Amount
    line_total: Amount                 # after_discount + tax_amount


class TotalsResult(BaseModel):
    """Aggregate document totals, unrounded."""

    total_excl_tax: Amount             # HT
    total_tax: Amount                  # TVA / TGC
    total_incl_tax: Amount             # TTC
    lines: list[LineTotals] = Field(default_factory=list)


class RoundedTotals(BaseModel):
    """Aggregates snapped to the CFP denomination, for display and export."""

    total_excl_tax: int
    total_tax: int
    total_incl_tax: int
