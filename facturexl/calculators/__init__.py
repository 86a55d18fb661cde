"""Monetary calculators — line/document totals and CFP rounding."""

from facturexl.calculators.rounding import round_to_denomination
from facturexl.calculators.totals import compute_line_totals, compute_totals, round_totals

__all__ = [
    "compute_line_totals",
    "compute_totals",
    "round_to_denomination",
    "round_totals",
]
