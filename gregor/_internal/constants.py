"""Internal constants for Gregor.

Limits of every quantity the validation guards check. This module is not
part of the public API.
"""

from __future__ import annotations

from gregor import daycount, timecount

# Year limits of the supported calendar span
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

MIN_MONTH: int = 1
MAX_MONTH: int = 12

MIN_WEEK: int = 1
MAX_WEEK: int = 53

# ISO 8601 weekdays: Monday is 1, Sunday is 7
MIN_WEEKDAY: int = 1
MAX_WEEKDAY: int = daycount.OF_WEEK

MAX_HOUR: int = 23
MAX_MINUTE: int = 59
MAX_SECOND: int = 59

MIN_DAYSTAMP: int = 1
MAX_DAYSTAMP: int = daycount.OF_9999YRS

# Timestamp 0 is left invalid on purpose
MIN_TIMESTAMP: int = 1
MAX_TIMESTAMP: int = timecount.OF_9999YRS

# Unix time 0 is timestamp OF_1969YRS + 1 (1970-01-01T00:00:00)
MIN_UNIXTIMESTAMP: int = MIN_TIMESTAMP - 1 - timecount.OF_1969YRS
MAX_UNIXTIMESTAMP: int = MAX_TIMESTAMP - 1 - timecount.OF_1969YRS


__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_MONTH",
    "MAX_MONTH",
    "MIN_WEEK",
    "MAX_WEEK",
    "MIN_WEEKDAY",
    "MAX_WEEKDAY",
    "MAX_HOUR",
    "MAX_MINUTE",
    "MAX_SECOND",
    "MIN_DAYSTAMP",
    "MAX_DAYSTAMP",
    "MIN_TIMESTAMP",
    "MAX_TIMESTAMP",
    "MIN_UNIXTIMESTAMP",
    "MAX_UNIXTIMESTAMP",
]
