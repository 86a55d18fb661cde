"""CFP rounding to the smallest coin in circulation (5 francs).

The amount is first rounded to a whole franc (halves go up, towards
+infinity), then its units digit is snapped to 0 or 5:

  units 0, 5 → unchanged
  units 1, 2 → down to the 0 below
  units 3, 4 → up to the 5 above
  units 6, 7 → down to the 5 below
  units 8, 9 → up to the next 0

Negative amounts are snapped on their magnitude, so the rule is
symmetric around zero for whole-franc inputs.

This is a presentation transform: apply it to final amounts only.
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal

_HALF = Decimal("0.5")

# units digit → adjustment towards the nearest multiple of 5
_SNAP: dict[int, int] = {
    0: 0, 1: -1, 2: -2, 3: 2, 4: 1,
    5: 0, 6: -1, 7: -2, 8: 2, 9: 1,
}


def _to_decimal(amount: Decimal | float | int | str) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def round_to_franc(amount: Decimal | float | int | str) -> int:
    """Round to the nearest whole franc, halves towards +infinity."""
    return int((_to_decimal(amount) + _HALF).to_integral_value(rounding=ROUND_FLOOR))


def round_to_denomination(amount: Decimal | float | int | str) -> int:
    """Round an amount to the nearest 5 CFP.

    Args:
        amount: Amount in francs; fractional values are accepted.

    Returns:
        Whole-franc amount ending in 0 or 5.
    """
    rounded = round_to_franc(amount)
    if rounded < 0:
        magnitude = -rounded
        return -(magnitude + _SNAP[magnitude % 10])
    return rounded + _SNAP[rounded % 10]
