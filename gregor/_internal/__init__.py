"""Internal utilities for Gregor.

This module contains private implementation details:
    - Range limits of every checked quantity
    - Validation guards and the @validate_range decorator

Note: This module is not part of the public API.
"""

from __future__ import annotations

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

__all__: list[str] = [
    "check_day",
    "check_daystamp",
    "check_hour",
    "check_minute",
    "check_month",
    "check_second",
    "check_timestamp",
    "check_unixtimestamp",
    "check_week",
    "check_weekday",
    "check_year",
    "check_yearday",
    "validate_range",
]
