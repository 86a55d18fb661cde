"""Exceptions raised by the billing engine."""

from __future__ import annotations


class FactureXLError(Exception):
    """Base class for engine errors."""


class InvalidAnchorMonth(FactureXLError, ValueError):
    """Raised when a renewal anchor month is outside 1–12."""

    def __init__(self, month: int) -> None:
        self.month = month
        super().__init__(f"Anchor month must be between 1 and 12, got {month}")
