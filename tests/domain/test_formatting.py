"""Tests for layout formatting and parsing."""

from __future__ import annotations

import datetime

import pytest

from persiancal.domain.date import JalaliDate
from persiancal.domain.errors import InvalidDayError, InvalidMonthError, ParseError
from persiancal.domain.formatting import (
    LAYOUT_DOT,
    LAYOUT_ISO,
    LAYOUT_LONG,
    LAYOUT_LONG_ENGLISH,
    LAYOUT_SHORT,
    LAYOUT_SLASH,
    format_date,
    parse_date,
    parse_gregorian_input,
    parse_jalali_input,
)

ABAN_4 = JalaliDate(1404, 8, 4)


# ── format_date ───────────────────────────────────────────────────────


class TestFormatDate:
    @pytest.mark.parametrize(
        "layout,expected",
        [
            (LAYOUT_ISO, "1404-08-04"),
            (LAYOUT_SLASH, "1404/08/04"),
            (LAYOUT_DOT, "1404.08.04"),
            (LAYOUT_LONG, "04 آبان 1404"),
            (LAYOUT_LONG_ENGLISH, "04 Aban 1404"),
            (LAYOUT_SHORT, "04/08/04"),
            ("yy/M/d", "04/8/4"),
            ("MMM d", "Aban 4"),
        ],
    )
    def test_layouts(self, layout: str, expected: str) -> None:
        assert format_date(ABAN_4, layout) == expected

    def test_default_layout_is_iso(self) -> None:
        assert format_date(ABAN_4) == "1404-08-04"

    def test_persian_digits(self) -> None:
        assert format_date(ABAN_4, LAYOUT_SLASH, persian_digits=True) == "۱۴۰۴/۰۸/۰۴"

    def test_month_name_not_reinterpreted(self) -> None:
        # "Mordad" contains a "d" that must survive as a literal letter.
        assert format_date(JalaliDate(1404, 5, 9), "MMM d") == "Mordad 9"

    def test_literals_kept(self) -> None:
        assert format_date(ABAN_4, "[yyyy] #MM") == "[1404] #08"

    def test_small_year_padded(self) -> None:
        assert format_date(JalaliDate(5, 1, 1), LAYOUT_ISO) == "0005-01-01"


# ── parse_date ────────────────────────────────────────────────────────


class TestParseDate:
    @pytest.mark.parametrize(
        "layout,value",
        [
            (LAYOUT_ISO, "1404-08-04"),
            (LAYOUT_SLASH, "1404/08/04"),
            (LAYOUT_DOT, "1404.08.04"),
            (LAYOUT_LONG, "04 آبان 1404"),
            (LAYOUT_LONG_ENGLISH, "04 Aban 1404"),
            (LAYOUT_LONG_ENGLISH, "04 aban 1404"),
            ("yyyy/M/d", "1404/8/4"),
            (LAYOUT_SLASH, "۱۴۰۴/۰۸/۰۴"),
        ],
    )
    def test_parses(self, layout: str, value: str) -> None:
        assert parse_date(layout, value) == ABAN_4

    def test_two_digit_year(self) -> None:
        assert parse_date(LAYOUT_SHORT, "04/08/04") == JalaliDate(1304, 8, 4)
        assert parse_date(LAYOUT_SHORT, "99/01/01") == JalaliDate(1399, 1, 1)

    def test_format_then_parse(self) -> None:
        for layout in (LAYOUT_ISO, LAYOUT_LONG, LAYOUT_LONG_ENGLISH):
            for month in range(1, 13):
                d = JalaliDate(1404, month, 9)
                assert parse_date(layout, format_date(d, layout)) == d

    def test_literal_mismatch(self) -> None:
        with pytest.raises(ParseError, match="expected '-'"):
            parse_date(LAYOUT_ISO, "1404/08/04")

    def test_trailing_input(self) -> None:
        with pytest.raises(ParseError, match="trailing"):
            parse_date(LAYOUT_ISO, "1404-08-04x")

    def test_missing_digits(self) -> None:
        with pytest.raises(ParseError):
            parse_date(LAYOUT_ISO, "14-08-04")

    def test_month_name_without_day(self) -> None:
        with pytest.raises(ParseError, match="day"):
            parse_date("MMM yyyy", "Dey 1404")

    def test_short_month_name_before_literal(self) -> None:
        assert parse_date("dd MMM yyyy", "10 Dey 1404") == JalaliDate(1404, 10, 10)
        assert parse_date("dd MMMM yyyy", "10 دی 1404") == JalaliDate(1404, 10, 10)

    def test_month_name_whitespace_not_consumed(self) -> None:
        with pytest.raises(ParseError):
            parse_date("dd MMM yyyy", "10  Dey 1404")

    def test_unknown_month_name(self) -> None:
        with pytest.raises(ParseError, match="month name"):
            parse_date(LAYOUT_LONG_ENGLISH, "04 January 1404")

    def test_layout_without_day(self) -> None:
        with pytest.raises(ParseError, match="day"):
            parse_date("yyyy-MM", "1404-08")

    def test_invalid_month_value(self) -> None:
        with pytest.raises(InvalidMonthError):
            parse_date(LAYOUT_ISO, "1404-13-01")

    def test_invalid_day_value(self) -> None:
        with pytest.raises(InvalidDayError):
            parse_date(LAYOUT_ISO, "1403-12-30")


# ── Loose input readers ───────────────────────────────────────────────


class TestParseJalaliInput:
    @pytest.mark.parametrize(
        "text",
        ["1404-08-04", "1404/8/4", "1404.08.04", " 1404-08-04 ", "۱۴۰۴/۸/۴"],
    )
    def test_accepted(self, text: str) -> None:
        assert parse_jalali_input(text) == ABAN_4

    def test_negative_year(self) -> None:
        assert parse_jalali_input("-5-01-01") == JalaliDate(-5, 1, 1)

    @pytest.mark.parametrize("text", ["1404-08/04", "1404-08", "today", "", "1404-008-04"])
    def test_rejected(self, text: str) -> None:
        with pytest.raises(ParseError, match="unsupported date format"):
            parse_jalali_input(text)

    def test_invalid_date(self) -> None:
        with pytest.raises(InvalidMonthError):
            parse_jalali_input("1404-13-01")


class TestParseGregorianInput:
    @pytest.mark.parametrize(
        "text",
        ["2025-10-25", "2025/10/25", "2025.10.25", "25-10-2025", "25/10/2025", "۲۰۲۵-۱۰-۲۵"],
    )
    def test_accepted(self, text: str) -> None:
        assert parse_gregorian_input(text) == datetime.date(2025, 10, 25)

    @pytest.mark.parametrize("text", ["25-10-25", "2025-10", "2025/10-25", "yesterday"])
    def test_rejected(self, text: str) -> None:
        with pytest.raises(ParseError, match="unsupported date format"):
            parse_gregorian_input(text)

    def test_invalid_calendar_date(self) -> None:
        with pytest.raises(ParseError, match="invalid Gregorian date"):
            parse_gregorian_input("2025-02-29")
