"""Validation guards for Gregor.

One guard per semantic quantity. Each guard is a pure check that raises
OutOfRangeError carrying the field name, the offending value and the
closed interval it had to fall in. Guards never return a value.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from gregor import daycount
from gregor._internal.constants import (
    MAX_DAYSTAMP,
    MAX_HOUR,
    MAX_MINUTE,
    MAX_MONTH,
    MAX_SECOND,
    MAX_TIMESTAMP,
    MAX_UNIXTIMESTAMP,
    MAX_WEEK,
    MAX_WEEKDAY,
    MAX_YEAR,
    MIN_DAYSTAMP,
    MIN_MONTH,
    MIN_TIMESTAMP,
    MIN_UNIXTIMESTAMP,
    MIN_WEEK,
    MIN_WEEKDAY,
    MIN_YEAR,
)
from gregor.errors import OutOfRangeError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    Named parameters are checked against closed ``(min, max)`` intervals
    before the wrapped function runs. ``None`` values are skipped.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(week=(1, 53), weekday=(1, 7))
        ... def first_day(week: int, weekday: int) -> int:
        ...     return week * 7 + weekday

        >>> first_day(54, 1)
        Traceback (most recent call last):
        ...
        OutOfRangeError: week must be between 1 and 53, got 54
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            for param_name, (min_val, max_val) in limits.items():
                value = bound.arguments.get(param_name)
                if value is not None and (value < min_val or value > max_val):
                    raise OutOfRangeError(param_name, value, min_val, max_val)

            return func(*args, **kwargs)

        return wrapper

    return decorator


def _check(field: str, value: int, lower: int, upper: int) -> None:
    if value < lower or value > upper:
        raise OutOfRangeError(field, value, lower, upper)


def check_year(year: int) -> None:
    """Validate that a year is within 1-9999."""
    _check("year", year, MIN_YEAR, MAX_YEAR)


def check_yearday(yearday: int, is_leap_year: bool) -> None:
    """Validate a day of year against the length of its year.

    Args:
        yearday: The 1-based day of year.
        is_leap_year: Whether the year has 366 days.

    Raises:
        OutOfRangeError: If yearday is outside 1-365 (1-366 for leap years).
    """
    _check("yearday", yearday, 1, daycount.days_in_year(is_leap_year))


def check_month(month: int) -> None:
    """Validate that a month is within 1-12."""
    _check("month", month, MIN_MONTH, MAX_MONTH)


def check_day(month: int, day: int, is_leap_year: bool) -> None:
    """Validate that a day exists in the given month.

    The month is validated first; the length of February depends on
    is_leap_year.

    Args:
        month: The month (1-12).
        day: The day of the month to validate.
        is_leap_year: Whether the month's year is a leap year.

    Raises:
        OutOfRangeError: If month is invalid or day is outside the month.
    """
    _check("day", day, 1, daycount.days_in_month(month, is_leap_year))


def check_week(week: int) -> None:
    """Validate that an ISO week number is within 1-53."""
    _check("week", week, MIN_WEEK, MAX_WEEK)


def check_weekday(weekday: int) -> None:
    """Validate that an ISO weekday is within 1-7."""
    _check("weekday", weekday, MIN_WEEKDAY, MAX_WEEKDAY)


def check_daystamp(daystamp: int) -> None:
    _check("daystamp", daystamp, MIN_DAYSTAMP, MAX_DAYSTAMP)


def check_timestamp(timestamp: int) -> None:
    _check("timestamp", timestamp, MIN_TIMESTAMP, MAX_TIMESTAMP)


def check_unixtimestamp(unixtimestamp: int) -> None:
    _check("unixtimestamp", unixtimestamp, MIN_UNIXTIMESTAMP, MAX_UNIXTIMESTAMP)


def check_hour(hour: int) -> None:
    _check("hour", hour, 0, MAX_HOUR)


def check_minute(minute: int) -> None:
    _check("minute", minute, 0, MAX_MINUTE)


def check_second(second: int) -> None:
    _check("second", second, 0, MAX_SECOND)


__all__ = [
    "validate_range",
    "check_year",
    "check_yearday",
    "check_month",
    "check_day",
    "check_week",
    "check_weekday",
    "check_daystamp",
    "check_timestamp",
    "check_unixtimestamp",
    "check_hour",
    "check_minute",
    "check_second",
]
