"""Core value types for Gregor."""

from __future__ import annotations

from gregor.core.datetime import (
    CalendarDate,
    DateForm,
    DateTime,
    OrdinalDate,
    ResolvedDateTime,
    WeekDate,
)
from gregor.core.types import MonthDay, TimeOfDay, YearDay

__all__: list[str] = [
    "CalendarDate",
    "DateForm",
    "DateTime",
    "MonthDay",
    "OrdinalDate",
    "ResolvedDateTime",
    "TimeOfDay",
    "WeekDate",
    "YearDay",
]
