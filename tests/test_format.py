"""Tests for ISO 8601 formatting and parsing."""

from __future__ import annotations

import pytest

from gregor import datetime_to_timestamp, timestamp_to_datetime
from gregor.core.datetime import (
    CalendarDate,
    DateTime,
    OrdinalDate,
    WeekDate,
)
from gregor.core.types import TimeOfDay
from gregor.errors import OutOfRangeError, ParseError
from gregor.format import format_iso8601, parse_iso8601


# ============================================================================
# Formatting
# ============================================================================


class TestFormatIso8601:
    """Tests for format_iso8601()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (DateTime.calendar(2024, 1, 15), "2024-01-15"),
            (DateTime.calendar(1, 1, 1, 0, 0, 0), "0001-01-01T00:00:00"),
            (DateTime.week_date(2004, 53, 5), "2004-W53-5"),
            (DateTime.week_date(2024, 3, 1, hour=9), "2024-W03-1T09:00"),
            (DateTime.ordinal(2024, 46, 23, 59, 59), "2024-046T23:59:59"),
            (DateTime.ordinal(5, 7), "0005-007"),
        ],
    )
    def test_date_forms(self, value: DateTime, expected: str) -> None:
        assert format_iso8601(value) == expected

    def test_hour_and_minute(self) -> None:
        assert format_iso8601(DateTime.calendar(2024, 1, 15, 14, 30)) == "2024-01-15T14:30"

    def test_time_only(self) -> None:
        assert format_iso8601(DateTime(time=TimeOfDay(7, 5))) == "T07:05"

    def test_empty(self) -> None:
        assert format_iso8601(DateTime()) == ""
        assert format_iso8601(DateTime(time=TimeOfDay())) == ""

    def test_time_of_day(self) -> None:
        assert format_iso8601(TimeOfDay(1, 2, 3)) == "T01:02:03"

    def test_resolved_renders_calendar_form(self) -> None:
        assert format_iso8601(timestamp_to_datetime(315537897600)) == "9999-12-31T23:59:59"

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match="expected DateTime"):
            format_iso8601("2024-01-15")  # type: ignore[arg-type]


# ============================================================================
# Parsing
# ============================================================================


class TestParseIso8601:
    """Tests for parse_iso8601()."""

    def test_calendar(self) -> None:
        assert parse_iso8601("2024-01-15") == DateTime(CalendarDate(2024, 1, 15))

    def test_calendar_with_time(self) -> None:
        assert parse_iso8601("2024-01-15T14:30:05") == DateTime.calendar(2024, 1, 15, 14, 30, 5)

    def test_week(self) -> None:
        assert parse_iso8601("2004-W53-5") == DateTime(WeekDate(2004, 53, 5))

    def test_ordinal(self) -> None:
        assert parse_iso8601("2024-046") == DateTime(OrdinalDate(2024, 46))

    def test_partial_times(self) -> None:
        assert parse_iso8601("2024-046T12").time == TimeOfDay(12, None, None)
        assert parse_iso8601("2024-046T12:15").time == TimeOfDay(12, 15, None)

    def test_time_only(self) -> None:
        assert parse_iso8601("T08:00") == DateTime(time=TimeOfDay(8, 0))

    def test_lowercase_designators(self) -> None:
        assert parse_iso8601("2004-w53-5t08:00") == DateTime.week_date(2004, 53, 5, 8, 0)

    def test_surrounding_whitespace(self) -> None:
        assert parse_iso8601("  2024-01-15\n") == DateTime.calendar(2024, 1, 15)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2024-01-15", "2024-01-15"),
            ("2024-01-15T14:30:05", "2024-01-15T14:30:05"),
            ("2004-W53-5T23:59", "2004-W53-5T23:59"),
            ("9999-365T23:59:59", "9999-365T23:59:59"),
            ("T12:00:00", "T12:00:00"),
            ("0001-001T00", "0001-001T00:00"),
        ],
    )
    def test_format_after_parse(self, text: str, expected: str) -> None:
        """Parsed text renders back unchanged; a bare hour gains its minutes."""
        assert format_iso8601(parse_iso8601(text)) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "2024", "2024-1-15", "24-01-15", "2024/01/15", "2024-01-15T", "2024-01-15T1", "hello"],
    )
    def test_malformed(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_iso8601(text)

    @pytest.mark.parametrize(
        "text",
        ["２０２４-01-15", "2024-０46", "2004-W5３-5", "2024-01-15T１2:00", "T０8"],
    )
    def test_non_ascii_digits(self, text: str) -> None:
        """Only ASCII digits are accepted."""
        with pytest.raises(ParseError):
            parse_iso8601(text)

    def test_empty_message(self) -> None:
        with pytest.raises(ParseError, match="empty string"):
            parse_iso8601("")

    @pytest.mark.parametrize(
        ("text", "field"),
        [
            ("2024-13-01", "month"),
            ("2023-02-29", "day"),
            ("0000-01-01", "year"),
            ("2023-366", "yearday"),
            ("2024-W00-1", "week"),
            ("2024-W01-8", "weekday"),
            ("2024-01-15T24:00", "hour"),
            ("2024-01-15T12:60", "minute"),
            ("2024-01-15T12:00:60", "second"),
        ],
    )
    def test_out_of_range(self, text: str, field: str) -> None:
        with pytest.raises(OutOfRangeError) as exc_info:
            parse_iso8601(text)
        assert exc_info.value.field == field

    def test_week_53_of_52_week_year(self) -> None:
        with pytest.raises(OutOfRangeError, match="week must be between 1 and 52, got 53"):
            parse_iso8601("2005-W53-1")

    def test_parsed_value_converts(self) -> None:
        """A parsed week date converts to the same instant as its calendar date."""
        week = datetime_to_timestamp(parse_iso8601("1999-W52-6T10:00"))
        calendar = datetime_to_timestamp(parse_iso8601("2000-01-01T10:00"))
        assert week == calendar
