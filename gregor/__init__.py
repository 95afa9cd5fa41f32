"""Gregor: proleptic Gregorian calendar arithmetic.

Gregor converts between linear second and day counts and calendar,
ISO week and ordinal dates for years 1 through 9999, with closed-form
integer arithmetic over the 400/100/4-year leap cycles.

Representations:
    timestamp: Seconds since the epoch, 1 = 0001-01-01T00:00:00
    daystamp: Days since the epoch, 1 = 0001-01-01
    YearDay: (year, day of year, leap flag)
    DateTime: A calendar, ISO week or ordinal date with optional time

Core Types:
    DateTime: One date form plus an optional TimeOfDay
    ResolvedDateTime: Every field of a timestamp, all forms at once
    CalendarDate, WeekDate, OrdinalDate: The three date forms
    TimeOfDay: Possibly partial hour, minute and second
    YearDay, MonthDay: Intermediate engine results

Engine Functions:
    timestamp_to_datetime: Resolve a timestamp
    datetime_to_timestamp: Convert any date form to a timestamp
    unixtimestamp_to_timestamp, timestamp_to_unixtimestamp: Unix shift
    (see gregor.calendar for the full set)

Format Functions:
    parse_iso8601: Parse ISO 8601 extended notation
    format_iso8601: Render ISO 8601 extended notation

Exceptions:
    GregorError: Base exception
    OutOfRangeError: A value outside its legal interval
    IncompleteDateError: No date form to convert
    ParseError: Failed to parse string

Example:
    >>> from gregor import DateTime, datetime_to_timestamp, timestamp_to_datetime
    >>> ts = datetime_to_timestamp(DateTime.calendar(2004, 12, 31, 12))
    >>> str(timestamp_to_datetime(ts).to_datetime("week"))
    '2004-W53-5T12:00:00'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from gregor.core.datetime import (
    CalendarDate,
    DateTime,
    OrdinalDate,
    ResolvedDateTime,
    WeekDate,
)
from gregor.core.types import MonthDay, TimeOfDay, YearDay

# Engine
from gregor.calendar import (
    datetime_to_timestamp,
    daystamp_to_timestamp,
    daystamp_to_weekday,
    daystamp_to_yearday,
    is_leap_year,
    month_to_yearday,
    time_of_day_to_second_offset,
    timestamp_to_datetime,
    timestamp_to_daystamp,
    timestamp_to_time_of_day,
    timestamp_to_unixtimestamp,
    unixtimestamp_to_timestamp,
    week_to_yearday,
    weekday_of_jan4,
    weeknr,
    weeks_in_year,
    year_to_daystamp,
    yearday_to_monthday,
    yearday_to_timestamp,
)

# Exceptions
from gregor.errors import (
    GregorError,
    IncompleteDateError,
    OutOfRangeError,
    ParseError,
)

# Format functions
from gregor.format import format_iso8601, parse_iso8601

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDate",
    "DateTime",
    "MonthDay",
    "OrdinalDate",
    "ResolvedDateTime",
    "TimeOfDay",
    "WeekDate",
    "YearDay",
    # Engine
    "datetime_to_timestamp",
    "daystamp_to_timestamp",
    "daystamp_to_weekday",
    "daystamp_to_yearday",
    "is_leap_year",
    "month_to_yearday",
    "time_of_day_to_second_offset",
    "timestamp_to_datetime",
    "timestamp_to_daystamp",
    "timestamp_to_time_of_day",
    "timestamp_to_unixtimestamp",
    "unixtimestamp_to_timestamp",
    "week_to_yearday",
    "weekday_of_jan4",
    "weeknr",
    "weeks_in_year",
    "year_to_daystamp",
    "yearday_to_monthday",
    "yearday_to_timestamp",
    # Exceptions
    "GregorError",
    "OutOfRangeError",
    "IncompleteDateError",
    "ParseError",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
]
