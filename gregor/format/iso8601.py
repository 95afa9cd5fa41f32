"""ISO 8601 formatting and parsing.

This module provides functions for converting Gregor values to and from
ISO 8601 extended notation.

Functions:
    format_iso8601: Render a DateTime, ResolvedDateTime or TimeOfDay.
    parse_iso8601: Parse an ISO 8601 string into a DateTime.

Supported forms:

Dates:
    - YYYY-MM-DD (calendar date)
    - YYYY-Www-D (week date)
    - YYYY-DDD (ordinal date)

Times, appended to any date form or on their own:
    - THH:MM:SS
    - THH:MM
    - THH (rendered back as THH:00)

Years are always four digits; years outside 0001-9999 do not exist in
this calendar.

Examples:
    >>> from gregor import DateTime
    >>> from gregor.format import format_iso8601, parse_iso8601

    >>> format_iso8601(DateTime.calendar(2024, 1, 15, 14, 30))
    '2024-01-15T14:30'

    >>> parse_iso8601("2004-W53-5T08:00:00")
    DateTime(date=WeekDate(year=2004, week=53, weekday=5), time=TimeOfDay(hour=8, minute=0, second=0))
"""

from __future__ import annotations

import re
from typing import Union

from gregor._internal.validation import (
    check_day,
    check_hour,
    check_minute,
    check_second,
    check_week,
    check_weekday,
    check_year,
    check_yearday,
)
from gregor.calendar import is_leap_year, weeks_in_year
from gregor.core.datetime import (
    CalendarDate,
    DateTime,
    OrdinalDate,
    ResolvedDateTime,
    WeekDate,
)
from gregor.core.types import TimeOfDay
from gregor.errors import OutOfRangeError, ParseError

# Type alias for renderable values
FormattableType = Union[DateTime, ResolvedDateTime, TimeOfDay]

_TIME = r"(?:T(?P<hour>\d{2})(?::(?P<minute>\d{2})(?::(?P<second>\d{2}))?)?)?"

_CALENDAR_PATTERN = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})" + _TIME,
    re.ASCII,
)
_WEEK_PATTERN = re.compile(
    r"(?P<year>\d{4})-W(?P<week>\d{2})-(?P<weekday>\d)" + _TIME,
    re.ASCII,
)
_ORDINAL_PATTERN = re.compile(
    r"(?P<year>\d{4})-(?P<yearday>\d{3})" + _TIME,
    re.ASCII,
)
_TIME_PATTERN = re.compile(_TIME, re.ASCII)


def format_iso8601(value: FormattableType) -> str:
    """Format a value as an ISO 8601 string.

    A DateTime renders its date form followed by its time; a
    ResolvedDateTime renders as a calendar date with the full time; a
    TimeOfDay renders its time alone. Nothing populated renders as the
    empty string.

    Args:
        value: A DateTime, ResolvedDateTime or TimeOfDay.

    Returns:
        ISO 8601 formatted string.

    Raises:
        TypeError: If value is not one of the accepted types.

    Examples:
        >>> format_iso8601(DateTime.calendar(2024, 1, 15))
        '2024-01-15'

        >>> format_iso8601(DateTime.week_date(2024, 3, 1, hour=9))
        '2024-W03-1T09:00'

        >>> format_iso8601(DateTime.ordinal(2024, 46, 23, 59, 59))
        '2024-046T23:59:59'

        >>> format_iso8601(DateTime())
        ''
    """
    if isinstance(value, TimeOfDay):
        return _format_time(value)
    if isinstance(value, ResolvedDateTime):
        return _format_date(value.calendar()) + _format_time(value.time)
    if isinstance(value, DateTime):
        time = _format_time(value.time) if value.time is not None else ""
        if value.date is None:
            return time
        return _format_date(value.date) + time
    raise TypeError(
        f"expected DateTime, ResolvedDateTime or TimeOfDay, got {type(value).__name__}"
    )


def _format_date(date: CalendarDate | WeekDate | OrdinalDate) -> str:
    if isinstance(date, CalendarDate):
        return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"
    if isinstance(date, WeekDate):
        return f"{date.year:04d}-W{date.week:02d}-{date.weekday:01d}"
    return f"{date.year:04d}-{date.yearday:03d}"


def _format_time(time: TimeOfDay) -> str:
    if time.hour is None:
        return ""
    if time.minute is None:
        return f"T{time.hour:02d}:00"
    if time.second is None:
        return f"T{time.hour:02d}:{time.minute:02d}"
    return f"T{time.hour:02d}:{time.minute:02d}:{time.second:02d}"


def parse_iso8601(s: str) -> DateTime:
    """Parse an ISO 8601 string into a DateTime.

    The date form is detected from the text: ``-Www-`` selects the week
    form, three digits after the year the ordinal form, and month and
    day the calendar form. A string holding only a time (``THH:MM``)
    yields a DateTime without a date.

    Args:
        s: The ISO 8601 string to parse.

    Returns:
        A DateTime holding the parsed date form and time.

    Raises:
        ParseError: If the string is not one of the supported forms.
        OutOfRangeError: If a parsed field is out of range, such as
            February 30 or week 53 of a 52-week year.

    Examples:
        >>> parse_iso8601("2024-01-15")
        DateTime(date=CalendarDate(year=2024, month=1, day=15), time=None)

        >>> parse_iso8601("2024-046T12")
        DateTime(date=OrdinalDate(year=2024, yearday=46), time=TimeOfDay(hour=12, minute=None, second=None))

        >>> parse_iso8601("2024-13-01")
        Traceback (most recent call last):
        ...
        OutOfRangeError: month must be between 1 and 12, got 13
    """
    s = s.strip()
    if not s:
        raise ParseError("empty string")

    # Normalize lowercase designators
    s = s.replace("t", "T").replace("w", "W")

    if match := _WEEK_PATTERN.fullmatch(s):
        year = int(match["year"])
        week = int(match["week"])
        weekday = int(match["weekday"])
        check_year(year)
        check_week(week)
        check_weekday(weekday)
        weeks = weeks_in_year(year)
        if week > weeks:
            raise OutOfRangeError("week", week, 1, weeks)
        return DateTime(WeekDate(year, week, weekday), _parse_time(match))

    if match := _ORDINAL_PATTERN.fullmatch(s):
        year = int(match["year"])
        yearday = int(match["yearday"])
        check_yearday(yearday, is_leap_year(year))
        return DateTime(OrdinalDate(year, yearday), _parse_time(match))

    if match := _CALENDAR_PATTERN.fullmatch(s):
        year = int(match["year"])
        month = int(match["month"])
        day = int(match["day"])
        check_day(month, day, is_leap_year(year))
        return DateTime(CalendarDate(year, month, day), _parse_time(match))

    if s.startswith("T") and (match := _TIME_PATTERN.fullmatch(s)):
        return DateTime(None, _parse_time(match))

    raise ParseError(
        f"cannot determine ISO 8601 format for: {s!r}. "
        "Expected YYYY-MM-DD, YYYY-Www-D or YYYY-DDD, "
        "optionally followed by THH[:MM[:SS]]"
    )


def _parse_time(match: re.Match[str]) -> TimeOfDay | None:
    if match["hour"] is None:
        return None

    hour = int(match["hour"])
    check_hour(hour)
    minute = second = None
    if match["minute"] is not None:
        minute = int(match["minute"])
        check_minute(minute)
    if match["second"] is not None:
        second = int(match["second"])
        check_second(second)
    return TimeOfDay(hour, minute, second)


__all__ = ["format_iso8601", "parse_iso8601"]
