"""Proleptic Gregorian calendar engine.

Conversions between the four time representations of Gregor, from
Mon, 01 Jan 0001 00:00:00 to Fri, 31 Dec 9999 23:59:59:

    timestamp <-> daystamp <-> (year, yearday) <-> (month, day)
                                (year, yearday) <-> (week, weekday)
    timestamp <-> time of day

Timestamps count seconds and daystamps count days, both starting at 1:

    - timestamp 1 = 0001-01-01T00:00:00
    - timestamp 315537897600 = 9999-12-31T23:59:59
    - daystamp 1 = 0001-01-01

Zero is left invalid in both so it can serve as an error sentinel. The
arithmetic works on the number of days (or seconds) elapsed before a
stamp, which is the stamp minus one.

Years are decomposed into 400, 100 and 4 year leap cycles of fixed day
counts, so every conversion is closed form; nothing steps day by day
except the month walk, which is bounded by twelve.

In accordance with ISO 8601, Monday is the first day of the week (1) and
Sunday the last (7); week 1 is the week containing January 4. Leap
seconds are ignored. Clocks drift and are resynchronised anyway.

Every function validates its raw integer inputs with the guards from
gregor._internal.validation and raises OutOfRangeError before computing
anything.

Examples:
    >>> from gregor.calendar import timestamp_to_datetime, datetime_to_timestamp
    >>> dt = timestamp_to_datetime(63082195201)
    >>> (dt.year, dt.month, dt.day, dt.week, dt.weekday)
    (1999, 12, 31, 52, 5)
    >>> datetime_to_timestamp(dt)
    63082195201
"""

from __future__ import annotations

from gregor import daycount, timecount
from gregor._internal.validation import (
    check_day,
    check_daystamp,
    check_hour,
    check_minute,
    check_month,
    check_second,
    check_timestamp,
    check_unixtimestamp,
    check_week,
    check_weekday,
    check_year,
    check_yearday,
    validate_range,
)
from gregor.core.datetime import (
    CalendarDate,
    DateTime,
    OrdinalDate,
    ResolvedDateTime,
    WeekDate,
)
from gregor.core.types import MonthDay, TimeOfDay, YearDay
from gregor.errors import IncompleteDateError, OutOfRangeError


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Args:
        year: The year to check (1-9999).

    Returns:
        True if the year is divisible by 4 and not by 100, or by 400.

    Raises:
        OutOfRangeError: If year is outside 1-9999.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
    """
    check_year(year)
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def year_to_daystamp(year: int) -> int:
    """Return the number of days elapsed before January 1 of a year.

    The daystamp of day ``yearday`` of ``year`` is
    ``year_to_daystamp(year) + yearday``.

    Args:
        year: The year (1-9999).

    Returns:
        Days in years 1 through ``year - 1``.

    Examples:
        >>> year_to_daystamp(1)
        0
        >>> year_to_daystamp(1970)
        719162
    """
    check_year(year)

    # Complete cycles first; the leftover 0-3 years always precede the
    # leap year of their 4-year group.
    cycles, years = divmod(year - 1, 400)
    centuries, years = divmod(years, 100)
    groups, years = divmod(years, 4)
    return (
        cycles * daycount.OF_400YRS
        + centuries * daycount.OF_100YRS
        + groups * daycount.OF_4YRS
        + years * daycount.OF_NORMAL_YEAR
    )


def daystamp_to_yearday(daystamp: int) -> YearDay:
    """Convert a daystamp to year and day of year.

    The tail year of each cycle is split off before descending into the
    next smaller cycle: the leap year ending a 400-year cycle, then the
    regular year ending a century, then the leap year ending a 4-year
    group. The order matters and must not be changed.

    Args:
        daystamp: The daystamp (1-3652059).

    Returns:
        YearDay with the year, the day of year and the leap flag.

    Raises:
        OutOfRangeError: If daystamp is out of range.

    Examples:
        >>> daystamp_to_yearday(1)
        YearDay(year=1, day=1, is_leap_year=False)
        >>> daystamp_to_yearday(146097)
        YearDay(year=400, day=366, is_leap_year=True)
    """
    check_daystamp(daystamp)

    days = daystamp - 1

    year = 1 + 400 * (days // daycount.OF_400YRS)
    days %= daycount.OF_400YRS
    if days >= daycount.OF_399YRS:
        return YearDay(year + 399, 1 + days - daycount.OF_399YRS, True)

    year += 100 * (days // daycount.OF_100YRS)
    days %= daycount.OF_100YRS
    if days >= daycount.OF_99YRS:
        return YearDay(year + 99, 1 + days - daycount.OF_99YRS, False)

    year += 4 * (days // daycount.OF_4YRS)
    days %= daycount.OF_4YRS
    if days >= daycount.OF_3YRS:
        return YearDay(year + 3, 1 + days - daycount.OF_3YRS, True)

    return YearDay(
        year + days // daycount.OF_NORMAL_YEAR,
        1 + days % daycount.OF_NORMAL_YEAR,
        False,
    )


def month_to_yearday(month: int, is_leap_year: bool) -> int:
    """Return the day of year of the first day of a month.

    Examples:
        >>> month_to_yearday(3, False)
        60
        >>> month_to_yearday(3, True)
        61
    """
    check_month(month)
    yearday = 1
    for m in range(1, month):
        yearday += daycount.days_in_month(m, is_leap_year)
    return yearday


def yearday_to_monthday(yearday: int, is_leap_year: bool) -> MonthDay:
    """Convert a day of year to month and day of month.

    Args:
        yearday: The day of year.
        is_leap_year: Whether the year has 366 days.

    Returns:
        MonthDay with the month and the day of month.

    Raises:
        OutOfRangeError: If yearday exceeds the length of the year.

    Examples:
        >>> yearday_to_monthday(60, True)
        MonthDay(month=2, day=29)
        >>> yearday_to_monthday(60, False)
        MonthDay(month=3, day=1)
    """
    check_yearday(yearday, is_leap_year)
    month = 1
    days = yearday - 1
    while days >= (length := daycount.days_in_month(month, is_leap_year)):
        days -= length
        month += 1
    return MonthDay(month, days + 1)


def daystamp_to_weekday(daystamp: int) -> int:
    """Return the ISO weekday of a daystamp.

    January 1 of year 1 is a Monday, so daystamp 1 is weekday 1.

    Examples:
        >>> daystamp_to_weekday(1)
        1
        >>> daystamp_to_weekday(7)
        7
    """
    check_daystamp(daystamp)
    return 1 + (daystamp - 1) % daycount.OF_WEEK


def weeknr(year: int, yearday: int, weekday: int) -> int:
    """Return the ISO 8601 week number of a day.

    ``(10 + yearday - weekday) // 7`` is the week number for every day
    except near the year boundaries:

    - 0 means the day belongs to the last week of the previous year,
      which is computed from December 31 of that year.
    - 53 is only a real week if January 1 of the next year falls on a
      Friday, Saturday or Sunday; otherwise the day is in week 1 of the
      next year.

    Args:
        year: The calendar year.
        yearday: The day of year.
        weekday: The ISO weekday of that day.

    Returns:
        The week number (1-53). It belongs to the previous year when the
        day is in January and the result is 52 or 53, and to the next
        year when the day is in December and the result is 1.

    Raises:
        OutOfRangeError: If any argument is out of range.

    Examples:
        >>> weeknr(2000, 1, 6)  # Saturday, January 1, 2000
        52
        >>> weeknr(2004, 366, 5)  # Friday, December 31, 2004
        53
    """
    leap = is_leap_year(year)
    check_yearday(yearday, leap)
    check_weekday(weekday)

    week = (10 + yearday - weekday) // 7
    if 0 < week < 53:
        return week

    if week == 0:
        days_of_last_year = daycount.days_in_year(is_leap_year(year - 1))
        dec31_of_last_year = daystamp_to_weekday(year_to_daystamp(year))
        return (10 + days_of_last_year - dec31_of_last_year) // 7

    # The weekday of January 1 next year follows December 31 of this
    # year; deriving it this way keeps year 9999 in range.
    dec31 = daystamp_to_weekday(year_to_daystamp(year) + daycount.days_in_year(leap))
    jan1_of_next_year = dec31 % daycount.OF_WEEK + 1
    if (10 + 1 - jan1_of_next_year) // 7:
        return 1
    return 53


@validate_range(week=(1, 53), weekday=(1, 7), weekday_of_jan4=(1, 7))
def week_to_yearday(week: int, weekday: int, weekday_of_jan4: int) -> int:
    """Convert an ISO week and weekday to a day of year.

    Week 1 is the week that contains January 4. The result is below 1
    for days of week 1 that fall in the previous year and above the
    length of the year for days of the last week that fall in the next
    year.

    Args:
        week: The ISO week (1-53).
        weekday: The ISO weekday (1-7).
        weekday_of_jan4: The weekday of January 4 of the week's year.

    Returns:
        The day of year, possibly outside the year.

    Examples:
        >>> week_to_yearday(1, 1, 4)  # January 4 is a Thursday
        1
        >>> week_to_yearday(1, 1, 6)  # January 4 is a Saturday
        -1
    """
    return week * 7 + weekday - (weekday_of_jan4 + 3)


def weekday_of_jan4(year: int) -> int:
    """Return the ISO weekday of January 4 of a year."""
    return daystamp_to_weekday(year_to_daystamp(year) + 4)


def weeks_in_year(year: int) -> int:
    """Return the number of ISO weeks (52 or 53) of a week-numbering year.

    December 28 always lies in the last week of its year.

    Examples:
        >>> weeks_in_year(2004)
        53
        >>> weeks_in_year(2005)
        52
    """
    leap = is_leap_year(year)
    yearday = daycount.days_in_year(leap) - 3
    weekday = daystamp_to_weekday(year_to_daystamp(year) + yearday)
    return weeknr(year, yearday, weekday)


def timestamp_to_daystamp(timestamp: int) -> int:
    """Return the daystamp of the day a timestamp falls in."""
    check_timestamp(timestamp)
    return 1 + (timestamp - 1) // timecount.OF_DAY


def daystamp_to_timestamp(daystamp: int) -> int:
    """Return the timestamp of midnight starting a daystamp."""
    check_daystamp(daystamp)
    return 1 + (daystamp - 1) * timecount.OF_DAY


def timestamp_to_time_of_day(timestamp: int) -> TimeOfDay:
    """Return the time of day of a timestamp.

    Examples:
        >>> timestamp_to_time_of_day(1)
        TimeOfDay(hour=0, minute=0, second=0)
        >>> timestamp_to_time_of_day(86400)
        TimeOfDay(hour=23, minute=59, second=59)
    """
    check_timestamp(timestamp)
    seconds = (timestamp - 1) % timecount.OF_DAY
    hour, seconds = divmod(seconds, timecount.OF_HOUR)
    minute, second = divmod(seconds, timecount.OF_MINUTE)
    return TimeOfDay(hour, minute, second)


def yearday_to_timestamp(year: int, yearday: int) -> int:
    """Return the timestamp of midnight starting a day of a year.

    Raises:
        OutOfRangeError: If year is outside 1-9999 or yearday outside
            the year.
    """
    check_yearday(yearday, is_leap_year(year))
    return 1 + (year_to_daystamp(year) + yearday - 1) * timecount.OF_DAY


def time_of_day_to_second_offset(hour: int, minute: int, second: int) -> int:
    """Return the number of seconds from midnight to a time of day.

    Examples:
        >>> time_of_day_to_second_offset(23, 59, 59)
        86399
    """
    check_hour(hour)
    check_minute(minute)
    check_second(second)
    return (
        hour * timecount.OF_HOUR
        + minute * timecount.OF_MINUTE
        + second * timecount.OF_SECOND
    )


def timestamp_to_datetime(timestamp: int) -> ResolvedDateTime:
    """Resolve a timestamp to a fully populated date and time.

    Args:
        timestamp: The timestamp (1-315537897600).

    Returns:
        ResolvedDateTime with calendar, ordinal and ISO week fields and
        the time of day.

    Raises:
        OutOfRangeError: If timestamp is out of range.

    Examples:
        >>> str(timestamp_to_datetime(1))
        '0001-01-01T00:00:00'
        >>> str(timestamp_to_datetime(315537897600))
        '9999-12-31T23:59:59'
    """
    check_timestamp(timestamp)

    time = timestamp_to_time_of_day(timestamp)
    daystamp = timestamp_to_daystamp(timestamp)
    yearday = daystamp_to_yearday(daystamp)
    monthday = yearday_to_monthday(yearday.day, yearday.is_leap_year)
    weekday = daystamp_to_weekday(daystamp)
    week = weeknr(yearday.year, yearday.day, weekday)

    week_year = yearday.year
    if week >= 52 and monthday.month == 1:
        week_year -= 1
    elif week == 1 and monthday.month == 12:
        week_year += 1

    return ResolvedDateTime(
        year=yearday.year,
        is_leap_year=yearday.is_leap_year,
        yearday=yearday.day,
        month=monthday.month,
        day=monthday.day,
        week=week,
        weekday=weekday,
        week_year=week_year,
        hour=time.hour,
        minute=time.minute,
        second=time.second,
    )


def datetime_to_timestamp(value: DateTime | ResolvedDateTime) -> int:
    """Convert a date and time to a timestamp.

    The date form decides the conversion path. A ResolvedDateTime
    carries all three forms and is converted through its ordinal form,
    which takes priority over the calendar form, which takes priority
    over the ISO week form. Missing time fields count as zero.

    Args:
        value: A DateTime holding a date form, or a ResolvedDateTime.

    Returns:
        The timestamp.

    Raises:
        IncompleteDateError: If value holds no date form.
        OutOfRangeError: If any field is out of range, including a week
            53 in a year with 52 weeks.
        TypeError: If value is not a DateTime or ResolvedDateTime.

    Examples:
        >>> datetime_to_timestamp(DateTime.calendar(1, 1, 1))
        1
        >>> datetime_to_timestamp(DateTime.week_date(1999, 52, 6))
        63082281601
    """
    if isinstance(value, ResolvedDateTime):
        date = value.ordinal()
        time: TimeOfDay | None = value.time
    elif isinstance(value, DateTime):
        date = value.date
        time = value.time
    else:
        raise TypeError(
            f"expected DateTime or ResolvedDateTime, got {type(value).__name__}"
        )

    offset = 0
    if time is not None:
        offset = time_of_day_to_second_offset(
            time.hour if time.hour is not None else 0,
            time.minute if time.minute is not None else 0,
            time.second if time.second is not None else 0,
        )

    if isinstance(date, OrdinalDate):
        return offset + yearday_to_timestamp(date.year, date.yearday)

    if isinstance(date, CalendarDate):
        leap = is_leap_year(date.year)
        check_day(date.month, date.day, leap)
        yearday = month_to_yearday(date.month, leap) + date.day - 1
        return offset + yearday_to_timestamp(date.year, yearday)

    if isinstance(date, WeekDate):
        return offset + _week_date_to_timestamp(date)

    raise IncompleteDateError(
        "a calendar, ISO week or ordinal date is required to compute a timestamp"
    )


def _week_date_to_timestamp(date: WeekDate) -> int:
    check_year(date.year)
    check_week(date.week)
    check_weekday(date.weekday)

    weeks = weeks_in_year(date.year)
    if date.week > weeks:
        raise OutOfRangeError("week", date.week, 1, weeks)

    yearday = week_to_yearday(date.week, date.weekday, weekday_of_jan4(date.year))
    # Days of week 1 or of the last week may lie in the neighbouring
    # calendar year; the daystamp absorbs that.
    return daystamp_to_timestamp(year_to_daystamp(date.year) + yearday)


def unixtimestamp_to_timestamp(unixtimestamp: int) -> int:
    """Convert seconds since 1970-01-01T00:00:00 to a timestamp.

    Examples:
        >>> unixtimestamp_to_timestamp(0)
        62135596801
    """
    check_unixtimestamp(unixtimestamp)
    return unixtimestamp + timecount.OF_1969YRS + 1


def timestamp_to_unixtimestamp(timestamp: int) -> int:
    """Convert a timestamp to seconds since 1970-01-01T00:00:00."""
    check_timestamp(timestamp)
    return timestamp - 1 - timecount.OF_1969YRS


__all__ = [
    "is_leap_year",
    "year_to_daystamp",
    "daystamp_to_yearday",
    "month_to_yearday",
    "yearday_to_monthday",
    "daystamp_to_weekday",
    "weeknr",
    "week_to_yearday",
    "weekday_of_jan4",
    "weeks_in_year",
    "timestamp_to_daystamp",
    "daystamp_to_timestamp",
    "timestamp_to_time_of_day",
    "yearday_to_timestamp",
    "time_of_day_to_second_offset",
    "timestamp_to_datetime",
    "datetime_to_timestamp",
    "unixtimestamp_to_timestamp",
    "timestamp_to_unixtimestamp",
]
