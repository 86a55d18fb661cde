"""Invoice totals engine.

Pure Python, Decimal arithmetic. For each line, in order:
  subtotal       = quantity × unit_price
  discount       = subtotal × discount% / 100
  after_discount = subtotal - discount
  tax            = after_discount × tax% / 100
  line_total     = after_discount + tax

Document totals are summed in full precision; rounding to the CFP
denomination happens once per aggregate (round_totals), never per line.
Inputs are not validated here: negative or out-of-range percentages pass
straight through the arithmetic.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from facturexl.calculators.rounding import round_to_denomination
from facturexl.schemas.billing import LineItem, LineTotals, RoundedTotals, TotalsResult

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def _as_line(line: LineItem | Mapping[str, Any]) -> LineItem:
    if isinstance(line, LineItem):
        return line
    return LineItem.model_validate(line)


def compute_line_totals(line: LineItem | Mapping[str, Any]) -> LineTotals:
    """Compute discount, tax and total for a single line.

    Args:
        line: A LineItem, or a payload mapping with the same fields
            (snake_case or camelCase keys).

    Returns:
        LineTotals in full precision.
    """
    item = _as_line(line)

    subtotal = item.unit_price * item.quantity
    discount_amount = subtotal * (item.discount_percent / _HUNDRED)
    after_discount = subtotal - discount_amount
    tax_amount = after_discount * (item.tax_percent / _HUNDRED)

    return LineTotals(
        subtotal=subtotal,
        discount_amount=discount_amount,
        after_discount=after_discount,
        tax_amount=tax_amount,
        line_total=after_discount + tax_amount,
    )


def compute_totals(lines: Iterable[LineItem | Mapping[str, Any]]) -> TotalsResult:
    """Compute pre-tax, tax and tax-inclusive totals for a document.

    An empty iterable yields all-zero totals.

    Args:
        lines: Line items of an invoice, credit note or quote.

    Returns:
        TotalsResult with the per-line breakdown and unrounded aggregates.
    """
    breakdown = [compute_line_totals(line) for line in lines]

    total_excl_tax = sum((lt.after_discount for lt in breakdown), start=_ZERO)
    total_tax = sum((lt.tax_amount for lt in breakdown), start=_ZERO)

    return TotalsResult(
        total_excl_tax=total_excl_tax,
        total_tax=total_tax,
        total_incl_tax=total_excl_tax + total_tax,
        lines=breakdown,
    )


def round_totals(result: TotalsResult) -> RoundedTotals:
    """Snap each aggregate independently to the CFP denomination."""
    return RoundedTotals(
        total_excl_tax=round_to_denomination(result.total_excl_tax),
        total_tax=round_to_denomination(result.total_tax),
        total_incl_tax=round_to_denomination(result.total_incl_tax),
    )
