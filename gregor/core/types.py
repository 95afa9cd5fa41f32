"""Intermediate value types of the calendar engine.

YearDay and MonthDay are transient results passed from one engine call
to the next. TimeOfDay is also carried by DateTime and may be partial.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class YearDay(NamedTuple):
    """A day identified by its ordinal position within its year.

    Attributes:
        year: The year (1-9999).
        day: The day of year (1-365, or 1-366 in leap years).
        is_leap_year: Cached leap flag of ``year``, derived by the engine.
    """

    year: int
    day: int
    is_leap_year: bool


class MonthDay(NamedTuple):
    """A month and a day within that month."""

    month: int
    day: int


@dataclass(frozen=True, slots=True)
class TimeOfDay:
    """A possibly partial time of day.

    A later field is only present when every earlier field is present:
    a minute implies an hour and a second implies a minute. Rendering
    relies on this; it is not re-validated.

    Attributes:
        hour: The hour (0-23) or None.
        minute: The minute (0-59) or None.
        second: The second (0-59) or None.

    Examples:
        >>> str(TimeOfDay(14, 30, 5))
        'T14:30:05'
        >>> str(TimeOfDay(14))
        'T14:00'
        >>> str(TimeOfDay())
        ''
    """

    hour: int | None = None
    minute: int | None = None
    second: int | None = None

    @property
    def is_empty(self) -> bool:
        """Return True if no field is populated."""
        return self.hour is None and self.minute is None and self.second is None

    def to_json(self) -> dict:
        """Return the populated fields as a dictionary."""
        return {
            name: value
            for name, value in (
                ("hour", self.hour),
                ("minute", self.minute),
                ("second", self.second),
            )
            if value is not None
        }

    def __str__(self) -> str:
        from gregor.format.iso8601 import format_iso8601

        return format_iso8601(self)


__all__ = [
    "YearDay",
    "MonthDay",
    "TimeOfDay",
]
