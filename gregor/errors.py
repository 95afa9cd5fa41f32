"""Gregor exception hierarchy.

All Gregor-specific exceptions inherit from GregorError. The concrete
errors also inherit from ValueError so callers that only know the
standard library can still catch them.
"""

from __future__ import annotations


class GregorError(Exception):
    """Base exception for all Gregor errors."""

    pass


class OutOfRangeError(GregorError, ValueError):
    """A value fell outside its legal closed interval.

    Raised by every validation guard before any arithmetic trusts the
    value.

    Attributes:
        field: Name of the checked quantity (``"month"``, ``"timestamp"``...).
        value: The offending value.
        lower: Smallest legal value.
        upper: Largest legal value.

    Examples:
        - Month value outside 1-12
        - Day 29 of February in a regular year
        - Timestamp 0 (the reserved invalid sentinel)
    """

    def __init__(self, field: str, value: int, lower: int, upper: int) -> None:
        self.field = field
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"{field} must be between {lower} and {upper}, got {value}"
        )

    @property
    def bounds(self) -> tuple[int, int]:
        """Return the legal interval as ``(lower, upper)``."""
        return (self.lower, self.upper)


class IncompleteDateError(GregorError, ValueError):
    """No date form is populated.

    Raised when a value handed to the engine carries neither an ordinal,
    a calendar nor an ISO week date.
    """

    pass


class ParseError(GregorError, ValueError):
    """Failed to parse string representation.

    Raised when a string is not one of the accepted ISO 8601 forms.

    Examples:
        - Missing separators (``"20240115"``)
        - Unknown designator (``"2024-X01-1"``)
        - Trailing garbage after the time
    """

    pass


__all__ = [
    "GregorError",
    "OutOfRangeError",
    "IncompleteDateError",
    "ParseError",
]
