"""Document reference numbers.

Two shapes are in use:
  generate_ref:  INV-202610-0427   (new documents, random suffix)
  document_ref:  FAC-2026-00012    (sequential numbering, per document type)
"""

from __future__ import annotations

import random
from datetime import date

from facturexl.config import settings
from facturexl.enums import DocumentType


def generate_ref(
    prefix: str | None = None,
    today: date | None = None,
    rng: random.Random | None = None,
) -> str:
    """Generate a reference for a new document.

    Args:
        prefix: Reference prefix; defaults to settings.billing.default_ref_prefix.
        today: Date used for the year/month part; defaults to today.
        rng: Random source for the 4-digit suffix.

    Returns:
        Reference such as ``INV-202610-0427``.
    """
    prefix = prefix or settings.billing.default_ref_prefix
    today = today or date.today()
    suffix = (rng or random).randrange(10000)
    return f"{prefix}-{today.year}{today.month:02d}-{suffix:04d}"


def document_ref(document_type: DocumentType | str, number: int, year: int | None = None) -> str:
    """Build a sequential reference, e.g. ``FAC-2026-00012``."""
    doc_type = DocumentType(document_type)
    ref_year = year if year is not None else date.today().year
    return f"{doc_type.prefix}-{ref_year}-{number:05d}"
