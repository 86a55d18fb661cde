"""Tests for French-locale display formatters."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from facturexl.formatters import format_currency, format_date, format_percent

NNBSP = "\u202f"


class TestFormatCurrency:
    """Test CFP amount formatting."""

    def test_rounds_and_groups(self) -> None:
        assert format_currency(23976) == f"23{NNBSP}975 CFP"

    def test_millions(self) -> None:
        assert format_currency(Decimal("1234567")) == f"1{NNBSP}234{NNBSP}565 CFP"

    def test_small_amount(self) -> None:
        assert format_currency(Decimal("12.4")) == "10 CFP"

    def test_negative(self) -> None:
        assert format_currency(-1234) == f"-1{NNBSP}235 CFP"

    def test_none(self) -> None:
        assert format_currency(None) == "-"


class TestFormatPercent:
    """Test discount/tax rate formatting."""

    def test_whole(self) -> None:
        assert format_percent(10) == "10%"

    def test_fractional(self) -> None:
        assert format_percent(Decimal("5.50")) == "5.5%"

    def test_zero_is_dash(self) -> None:
        assert format_percent(Decimal("0")) == "-"
        assert format_percent(None) == "-"


class TestFormatDate:
    """Test short French dates."""

    def test_october(self) -> None:
        assert format_date(date(2026, 10, 19)) == "19 oct. 2026"

    def test_february(self) -> None:
        assert format_date(date(2026, 2, 1)) == "1 févr. 2026"

    def test_none(self) -> None:
        assert format_date(None) == "-"
