"""Tests for date normalisation of listing link text."""

from __future__ import annotations

import logging
from datetime import date

import pytest

from scrapesou.scraper.dates import normalize_date
from scrapesou.scraper.errors import DateParseError


class TestCanonicalPattern:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("January 8, 1790", date(1790, 1, 8)),
            ("December 3, 1861", date(1861, 12, 3)),
            ("January 27, 1998", date(1998, 1, 27)),
            ("  February 2, 2005 ", date(2005, 2, 2)),
        ],
    )
    def test_exact_date(self, text: str, expected: date) -> None:
        assert normalize_date(text) == expected

    def test_no_warning_for_canonical_text(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="scrapesou.scraper.dates"):
            normalize_date("January 8, 1790")
        assert caplog.records == []


class TestMonthYear:
    def test_day_defaults_to_first(self) -> None:
        assert normalize_date("May 1973") == date(1973, 5, 1)

    def test_comma_after_month(self) -> None:
        assert normalize_date("May, 1973") == date(1973, 5, 1)

    def test_fallback_is_logged(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="scrapesou.scraper.dates"):
            normalize_date("May 1973")
        assert any("no day" in r.getMessage() for r in caplog.records)


class TestOrdinalDay:
    @pytest.mark.parametrize(
        "text, canonical",
        [
            ("January 3rd, 2009", "January 3, 2009"),
            ("February 1st, 1973", "February 1, 1973"),
            ("January 22nd, 1800", "January 22, 1800"),
            ("March 4th 1933", "March 4, 1933"),
        ],
    )
    def test_suffix_is_stripped(self, text: str, canonical: str) -> None:
        assert normalize_date(text) == normalize_date(canonical)

    def test_ordinal_day_value(self) -> None:
        assert normalize_date("January 3rd, 2009").day == 3


class TestUnparseable:
    @pytest.mark.parametrize(
        "text",
        ["1973", "", "written sometime in 1800 or so", "the 3rd of May, 1973"],
    )
    def test_wrong_token_count_raises(self, text: str) -> None:
        with pytest.raises(DateParseError):
            normalize_date(text)

    def test_unknown_month_raises(self) -> None:
        with pytest.raises(DateParseError):
            normalize_date("Smarch 3rd, 2009")

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            normalize_date("1973")
