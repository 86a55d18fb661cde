"""Domain enums shared by schemas and calculators.

All enums use str mixin so persisted/JSON values map straight onto members.
"""

from __future__ import annotations

from enum import Enum


class Frequency(str, Enum):
    """Subscription renewal frequency."""

    MONTHLY = "monthly"
    BIMONTHLY = "bimonthly"
    QUARTERLY = "quarterly"
    SEMIANNUAL = "semiannual"
    YEARLY = "yearly"
    CUSTOM = "custom"  # yearly, in an explicit anchor month

    @property
    def is_annual_anchor(self) -> bool:
        """True for frequencies that renew once a year in a fixed month."""
        return self in (Frequency.YEARLY, Frequency.CUSTOM)


class DocumentType(str, Enum):
    """Kind of billing document."""

    INVOICE = "invoice"
    AVOIR = "avoir"    # credit note
    DEVIS = "devis"    # quote

    @property
    def prefix(self) -> str:
        """Reference prefix used for sequential document numbers."""
        return _DOCUMENT_PREFIXES[self]


_DOCUMENT_PREFIXES: dict[DocumentType, str] = {
    DocumentType.INVOICE: "FAC",
    DocumentType.AVOIR: "AVO",
    DocumentType.DEVIS: "DEV",
}
