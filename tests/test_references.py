"""Tests for document reference generation."""

from __future__ import annotations

import random
import re
from datetime import date

import pytest

from facturexl.enums import DocumentType
from facturexl.references import document_ref, generate_ref


class _FixedRandom(random.Random):
    """Random source that always draws the same suffix."""

    def randrange(self, *args: int, **kwargs: int) -> int:  # type: ignore[override]
        return 42


class TestGenerateRef:
    """Test random-suffix references for new documents."""

    def test_default_prefix(self) -> None:
        ref = generate_ref(today=date(2026, 10, 19), rng=_FixedRandom())
        assert ref == "INV-202610-0042"

    def test_custom_prefix(self) -> None:
        ref = generate_ref("DEV", today=date(2026, 3, 1), rng=_FixedRandom())
        assert ref == "DEV-202603-0042"

    def test_shape(self) -> None:
        ref = generate_ref(today=date(2026, 10, 19))
        assert re.fullmatch(r"INV-202610-\d{4}", ref)


class TestDocumentRef:
    """Test sequential references per document type."""

    def test_invoice(self) -> None:
        assert document_ref(DocumentType.INVOICE, 12, year=2026) == "FAC-2026-00012"

    def test_credit_note_from_string(self) -> None:
        assert document_ref("avoir", 3, year=2025) == "AVO-2025-00003"

    def test_quote(self) -> None:
        assert document_ref(DocumentType.DEVIS, 1, year=2026) == "DEV-2026-00001"

    def test_current_year_by_default(self) -> None:
        assert document_ref(DocumentType.INVOICE, 7).startswith(f"FAC-{date.today().year}-")

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError):
            document_ref("bill", 1)
