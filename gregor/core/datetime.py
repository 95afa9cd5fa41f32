"""Date/time value types.

A DateTime pairs exactly one date form with an optional time of day.
The three date forms are separate classes, so a DateTime can never hold
two conflicting dates:

    OrdinalDate: (year, yearday), e.g. 2024-046
    CalendarDate: (year, month, day), e.g. 2024-02-15
    WeekDate: (ISO week-numbering year, week, weekday), e.g. 2024-W07-4

ResolvedDateTime is what the engine produces from a timestamp: every
field populated, from which each of the three forms can be taken.

These types only hold values. Ranges are checked by the engine when a
value is converted to a timestamp.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from gregor.core.types import TimeOfDay
from gregor.errors import ParseError


@dataclass(frozen=True, slots=True)
class OrdinalDate:
    """A date given as year and day of year."""

    year: int
    yearday: int


@dataclass(frozen=True, slots=True)
class CalendarDate:
    """A date given as year, month and day of month."""

    year: int
    month: int
    day: int


@dataclass(frozen=True, slots=True)
class WeekDate:
    """A date given as ISO week-numbering year, week and weekday.

    The year is the ISO week-numbering year, which differs from the
    calendar year for the few days around January 1 that belong to a
    week of the neighbouring year.
    """

    year: int
    week: int
    weekday: int


DateForm = Union[OrdinalDate, CalendarDate, WeekDate]


@dataclass(frozen=True, slots=True)
class DateTime:
    """A date in one of the three forms, optionally with a time of day.

    Either part may be missing; a DateTime without a date cannot be
    converted to a timestamp but can still be rendered.

    Attributes:
        date: The date form, or None.
        time: The time of day, or None.

    Examples:
        >>> str(DateTime.calendar(2024, 1, 15, hour=9, minute=30))
        '2024-01-15T09:30'
        >>> str(DateTime.week_date(2004, 53, 5))
        '2004-W53-5'
    """

    date: DateForm | None = None
    time: TimeOfDay | None = None

    @classmethod
    def ordinal(
        cls,
        year: int,
        yearday: int,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
    ) -> DateTime:
        """Create a DateTime in ordinal form."""
        return cls(OrdinalDate(year, yearday), _time_of_day(hour, minute, second))

    @classmethod
    def calendar(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
    ) -> DateTime:
        """Create a DateTime in calendar form."""
        return cls(CalendarDate(year, month, day), _time_of_day(hour, minute, second))

    @classmethod
    def week_date(
        cls,
        year: int,
        week: int,
        weekday: int,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
    ) -> DateTime:
        """Create a DateTime in ISO week form."""
        return cls(WeekDate(year, week, weekday), _time_of_day(hour, minute, second))

    @property
    def hour(self) -> int | None:
        return self.time.hour if self.time is not None else None

    @property
    def minute(self) -> int | None:
        return self.time.minute if self.time is not None else None

    @property
    def second(self) -> int | None:
        return self.time.second if self.time is not None else None

    def to_json(self) -> dict:
        """Return the populated fields as a dictionary.

        The date form is tagged with ``"form"`` so the dictionary can be
        turned back into the same DateTime.

        Examples:
            >>> DateTime.calendar(2024, 1, 15, hour=9).to_json()
            {'form': 'calendar', 'year': 2024, 'month': 1, 'day': 15, 'hour': 9}
        """
        data: dict = {}
        if isinstance(self.date, OrdinalDate):
            data = {"form": "ordinal", "year": self.date.year, "yearday": self.date.yearday}
        elif isinstance(self.date, CalendarDate):
            data = {
                "form": "calendar",
                "year": self.date.year,
                "month": self.date.month,
                "day": self.date.day,
            }
        elif isinstance(self.date, WeekDate):
            data = {
                "form": "week",
                "year": self.date.year,
                "week": self.date.week,
                "weekday": self.date.weekday,
            }
        if self.time is not None:
            data.update(self.time.to_json())
        return data

    @classmethod
    def from_json(cls, data: dict) -> DateTime:
        """Create a DateTime from a dictionary produced by to_json().

        Args:
            data: Dictionary with an optional ``form`` tag, the fields of
                that form and optional time fields.

        Returns:
            The DateTime; its fields are not range checked.

        Raises:
            ParseError: If the form is unknown, a field is missing or a
                field is not an integer.

        Examples:
            >>> DateTime.from_json({"form": "ordinal", "year": 2024, "yearday": 46})
            DateTime(date=OrdinalDate(year=2024, yearday=46), time=None)
        """
        if not isinstance(data, dict):
            raise ParseError(f"expected dict, got {type(data).__name__}")

        form = data.get("form")
        fields = {
            "ordinal": (OrdinalDate, ("year", "yearday")),
            "calendar": (CalendarDate, ("year", "month", "day")),
            "week": (WeekDate, ("year", "week", "weekday")),
        }
        date: DateForm | None = None
        if form is not None:
            if form not in fields:
                raise ParseError(f"unknown date form: {form!r}")
            date_cls, names = fields[form]
            date = date_cls(*(_int_field(data, name, required=True) for name in names))

        time = _time_of_day(
            _int_field(data, "hour"),
            _int_field(data, "minute"),
            _int_field(data, "second"),
        )
        return cls(date, time)

    def __str__(self) -> str:
        from gregor.format.iso8601 import format_iso8601

        return format_iso8601(self)


@dataclass(frozen=True, slots=True)
class ResolvedDateTime:
    """A fully populated date and time, as resolved from a timestamp.

    Attributes:
        year: The calendar year (1-9999).
        is_leap_year: Cached leap flag of ``year``; never used as input.
        yearday: The day of year.
        month: The month (1-12).
        day: The day of month.
        week: The ISO week number (1-53).
        weekday: The ISO weekday, Monday is 1 and Sunday is 7.
        week_year: The ISO week-numbering year ``week`` belongs to.
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
    """

    year: int
    is_leap_year: bool
    yearday: int
    month: int
    day: int
    week: int
    weekday: int
    week_year: int
    hour: int
    minute: int
    second: int

    @property
    def time(self) -> TimeOfDay:
        return TimeOfDay(self.hour, self.minute, self.second)

    def ordinal(self) -> OrdinalDate:
        return OrdinalDate(self.year, self.yearday)

    def calendar(self) -> CalendarDate:
        return CalendarDate(self.year, self.month, self.day)

    def week_date(self) -> WeekDate:
        return WeekDate(self.week_year, self.week, self.weekday)

    def to_datetime(self, form: str = "calendar") -> DateTime:
        """Return a DateTime holding one of the three date forms.

        Args:
            form: ``"calendar"``, ``"week"`` or ``"ordinal"``.

        Raises:
            ValueError: If form is not one of the three names.
        """
        forms = {
            "calendar": self.calendar,
            "week": self.week_date,
            "ordinal": self.ordinal,
        }
        if form not in forms:
            raise ValueError(
                f"form must be one of {', '.join(forms)}, got {form!r}"
            )
        return DateTime(forms[form](), self.time)

    def to_json(self) -> dict:
        return {
            "year": self.year,
            "is_leap_year": self.is_leap_year,
            "yearday": self.yearday,
            "month": self.month,
            "day": self.day,
            "week": self.week,
            "weekday": self.weekday,
            "week_year": self.week_year,
            "hour": self.hour,
            "minute": self.minute,
            "second": self.second,
        }

    def __str__(self) -> str:
        from gregor.format.iso8601 import format_iso8601

        return format_iso8601(self)


def _time_of_day(
    hour: int | None, minute: int | None, second: int | None
) -> TimeOfDay | None:
    if hour is None and minute is None and second is None:
        return None
    return TimeOfDay(hour, minute, second)


def _int_field(data: dict, name: str, required: bool = False) -> int | None:
    value = data.get(name)
    if value is None:
        if required:
            raise ParseError(f"missing {name!r} field")
        return None
    # bool is an int subclass but never a valid field
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParseError(f"{name} must be an integer, got {value!r}")
    return value


__all__ = [
    "OrdinalDate",
    "CalendarDate",
    "WeekDate",
    "DateForm",
    "DateTime",
    "ResolvedDateTime",
]
