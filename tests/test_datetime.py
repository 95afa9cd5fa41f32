"""Tests for the DateTime, ResolvedDateTime and TimeOfDay value types."""

from __future__ import annotations

import dataclasses

import pytest

from gregor import timestamp_to_datetime
from gregor.core.datetime import (
    CalendarDate,
    DateTime,
    OrdinalDate,
    ResolvedDateTime,
    WeekDate,
)
from gregor.core.types import MonthDay, TimeOfDay, YearDay
from gregor.errors import ParseError


def _resolved(**overrides) -> ResolvedDateTime:
    fields = dict(
        year=2000,
        is_leap_year=True,
        yearday=1,
        month=1,
        day=1,
        week=52,
        weekday=6,
        week_year=1999,
        hour=12,
        minute=30,
        second=45,
    )
    fields.update(overrides)
    return ResolvedDateTime(**fields)


# ============================================================================
# Intermediate types
# ============================================================================


class TestIntermediateTypes:
    """Tests for YearDay and MonthDay."""

    def test_yearday_fields(self) -> None:
        value = YearDay(2024, 60, True)
        assert value.year == 2024
        assert value.day == 60
        assert value.is_leap_year is True

    def test_yearday_unpacks(self) -> None:
        year, day, leap = YearDay(1, 1, False)
        assert (year, day, leap) == (1, 1, False)

    def test_monthday(self) -> None:
        assert MonthDay(2, 29) == (2, 29)
        assert MonthDay(2, 29).month == 2


class TestTimeOfDay:
    """Tests for TimeOfDay."""

    def test_defaults(self) -> None:
        time = TimeOfDay()
        assert time.hour is None
        assert time.minute is None
        assert time.second is None
        assert time.is_empty

    def test_not_empty(self) -> None:
        assert not TimeOfDay(0).is_empty

    def test_frozen(self) -> None:
        time = TimeOfDay(1, 2, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            time.hour = 4  # type: ignore[misc]

    def test_to_json_skips_missing(self) -> None:
        assert TimeOfDay(9, 30).to_json() == {"hour": 9, "minute": 30}
        assert TimeOfDay().to_json() == {}

    @pytest.mark.parametrize(
        ("time", "expected"),
        [
            (TimeOfDay(14, 30, 5), "T14:30:05"),
            (TimeOfDay(14, 30), "T14:30"),
            (TimeOfDay(14), "T14:00"),
            (TimeOfDay(0, 0, 0), "T00:00:00"),
            (TimeOfDay(), ""),
        ],
    )
    def test_str(self, time: TimeOfDay, expected: str) -> None:
        assert str(time) == expected


# ============================================================================
# DateTime
# ============================================================================


class TestDateTimeConstruction:
    """Tests for the DateTime constructors."""

    def test_calendar(self) -> None:
        value = DateTime.calendar(2024, 1, 15)
        assert value.date == CalendarDate(2024, 1, 15)
        assert value.time is None

    def test_ordinal_with_time(self) -> None:
        value = DateTime.ordinal(2024, 46, 8, 15, 0)
        assert value.date == OrdinalDate(2024, 46)
        assert value.time == TimeOfDay(8, 15, 0)

    def test_week_date_with_hour(self) -> None:
        value = DateTime.week_date(2004, 53, 5, hour=23)
        assert value.date == WeekDate(2004, 53, 5)
        assert value.time == TimeOfDay(23, None, None)

    def test_empty(self) -> None:
        value = DateTime()
        assert value.date is None
        assert value.time is None

    def test_time_accessors(self) -> None:
        value = DateTime.calendar(2024, 1, 15, 9, 30)
        assert (value.hour, value.minute, value.second) == (9, 30, None)

    def test_time_accessors_without_time(self) -> None:
        value = DateTime.calendar(2024, 1, 15)
        assert (value.hour, value.minute, value.second) == (None, None, None)

    def test_frozen(self) -> None:
        value = DateTime.calendar(2024, 1, 15)
        with pytest.raises(dataclasses.FrozenInstanceError):
            value.date = None  # type: ignore[misc]

    def test_equality(self) -> None:
        assert DateTime.calendar(2024, 1, 15) == DateTime(CalendarDate(2024, 1, 15))
        assert DateTime.calendar(2024, 1, 15) != DateTime.ordinal(2024, 15)


class TestDateTimeJson:
    """Tests for DateTime.to_json() and DateTime.from_json()."""

    def test_calendar_to_json(self) -> None:
        assert DateTime.calendar(2024, 1, 15, hour=9).to_json() == {
            "form": "calendar",
            "year": 2024,
            "month": 1,
            "day": 15,
            "hour": 9,
        }

    def test_week_to_json(self) -> None:
        assert DateTime.week_date(2004, 53, 5).to_json() == {
            "form": "week",
            "year": 2004,
            "week": 53,
            "weekday": 5,
        }

    def test_ordinal_to_json(self) -> None:
        assert DateTime.ordinal(2024, 46, 0, 0, 0).to_json() == {
            "form": "ordinal",
            "year": 2024,
            "yearday": 46,
            "hour": 0,
            "minute": 0,
            "second": 0,
        }

    def test_time_only_to_json(self) -> None:
        assert DateTime(time=TimeOfDay(7, 45)).to_json() == {"hour": 7, "minute": 45}

    @pytest.mark.parametrize(
        "value",
        [
            DateTime.calendar(2024, 2, 29, 23, 59, 59),
            DateTime.week_date(1999, 52, 6),
            DateTime.ordinal(1, 1, hour=0),
            DateTime(time=TimeOfDay(12)),
            DateTime(),
        ],
    )
    def test_from_json_restores(self, value: DateTime) -> None:
        assert DateTime.from_json(value.to_json()) == value

    def test_from_json_unknown_form(self) -> None:
        with pytest.raises(ParseError, match="unknown date form"):
            DateTime.from_json({"form": "julian", "year": 2024})

    def test_from_json_missing_field(self) -> None:
        with pytest.raises(ParseError, match="missing 'month' field"):
            DateTime.from_json({"form": "calendar", "year": 2024, "day": 1})

    def test_from_json_rejects_strings(self) -> None:
        with pytest.raises(ParseError, match="year must be an integer"):
            DateTime.from_json({"form": "ordinal", "year": "2024", "yearday": 1})

    def test_from_json_rejects_bool(self) -> None:
        with pytest.raises(ParseError, match="hour must be an integer"):
            DateTime.from_json({"hour": True})

    def test_from_json_rejects_non_dict(self) -> None:
        with pytest.raises(ParseError, match="expected dict"):
            DateTime.from_json([2024, 1, 1])  # type: ignore[arg-type]

    def test_from_json_does_not_range_check(self) -> None:
        """Range checks happen on conversion, not construction."""
        value = DateTime.from_json({"form": "calendar", "year": 2023, "month": 2, "day": 30})
        assert value.date == CalendarDate(2023, 2, 30)


# ============================================================================
# ResolvedDateTime
# ============================================================================


class TestResolvedDateTime:
    """Tests for ResolvedDateTime."""

    def test_forms(self) -> None:
        value = _resolved()
        assert value.calendar() == CalendarDate(2000, 1, 1)
        assert value.ordinal() == OrdinalDate(2000, 1)
        assert value.week_date() == WeekDate(1999, 52, 6)
        assert value.time == TimeOfDay(12, 30, 45)

    def test_week_form_uses_week_year(self) -> None:
        """The week form carries the ISO week-numbering year."""
        value = _resolved(
            year=2008, month=12, day=31, yearday=366, week=1, weekday=3, week_year=2009
        )
        assert value.week_date().year == 2009

    @pytest.mark.parametrize(
        ("form", "date"),
        [
            ("calendar", CalendarDate(2000, 1, 1)),
            ("week", WeekDate(1999, 52, 6)),
            ("ordinal", OrdinalDate(2000, 1)),
        ],
    )
    def test_to_datetime(self, form: str, date) -> None:
        value = _resolved().to_datetime(form)
        assert value == DateTime(date, TimeOfDay(12, 30, 45))

    def test_to_datetime_default_is_calendar(self) -> None:
        assert _resolved().to_datetime().date == CalendarDate(2000, 1, 1)

    def test_to_datetime_unknown_form(self) -> None:
        with pytest.raises(ValueError, match="form must be one of"):
            _resolved().to_datetime("julian")

    def test_to_json(self) -> None:
        data = _resolved().to_json()
        assert data["week_year"] == 1999
        assert data["is_leap_year"] is True
        assert set(data) == {
            "year",
            "is_leap_year",
            "yearday",
            "month",
            "day",
            "week",
            "weekday",
            "week_year",
            "hour",
            "minute",
            "second",
        }

    def test_str(self) -> None:
        assert str(_resolved()) == "2000-01-01T12:30:45"

    def test_from_engine(self) -> None:
        """The engine result for timestamp 1 renders as the epoch."""
        assert str(timestamp_to_datetime(1)) == "0001-01-01T00:00:00"
