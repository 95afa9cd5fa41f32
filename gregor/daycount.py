"""Day counts of the proleptic Gregorian calendar.

Exact numbers of days in the fixed-length year groups the leap cycle is
built from. A 4-year group ends in its leap year, a 100-year group ends
in a regular century year and a 400-year group ends in a leap century
year, so every group is the previous one repeated plus a tail year.
"""

from __future__ import annotations

OF_WEEK: int = 7
OF_NORMAL_YEAR: int = 365
OF_LEAP_YEAR: int = 366
OF_3YRS: int = 3 * OF_NORMAL_YEAR
OF_4YRS: int = OF_3YRS + OF_LEAP_YEAR
OF_99YRS: int = 24 * OF_4YRS + OF_3YRS
OF_100YRS: int = OF_99YRS + OF_NORMAL_YEAR
OF_399YRS: int = 3 * OF_100YRS + OF_99YRS
OF_400YRS: int = OF_399YRS + OF_LEAP_YEAR  # 146_097

# Years 1-1969: 4 cycles, 3 centuries, 17 leap groups and 1 regular year.
OF_1969YRS: int = (
    4 * OF_400YRS
    + 3 * OF_100YRS
    + 17 * OF_4YRS
    + OF_NORMAL_YEAR
)

# Years 1-9999: 24 cycles, 3 centuries, 24 leap groups and 3 regular years.
OF_9999YRS: int = (
    24 * OF_400YRS
    + 3 * OF_100YRS
    + 24 * OF_4YRS
    + OF_3YRS
)


def days_in_month(month: int, is_leap_year: bool) -> int:
    """Return the number of days in a month.

    Months other than February alternate between 31 and 30 days, with the
    parity flipping at August. Bit 3 of the month number is set from
    August onwards, so ``(month & 8) >> 3`` XOR the low bit yields 1 for
    the 31-day months.

    Args:
        month: The month (1-12).
        is_leap_year: Whether the month's year is a leap year.

    Returns:
        28, 29, 30 or 31.

    Raises:
        OutOfRangeError: If month is not in 1-12.

    Examples:
        >>> days_in_month(2, True)
        29
        >>> days_in_month(8, False)
        31
        >>> days_in_month(9, False)
        30
    """
    from gregor._internal.validation import check_month

    check_month(month)

    if month == 2:
        return 29 if is_leap_year else 28
    return 30 + (((month & 8) >> 3) ^ (month & 1))


def days_in_year(is_leap_year: bool) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return OF_LEAP_YEAR if is_leap_year else OF_NORMAL_YEAR


__all__ = [
    "OF_WEEK",
    "OF_NORMAL_YEAR",
    "OF_LEAP_YEAR",
    "OF_3YRS",
    "OF_4YRS",
    "OF_99YRS",
    "OF_100YRS",
    "OF_399YRS",
    "OF_400YRS",
    "OF_1969YRS",
    "OF_9999YRS",
    "days_in_month",
    "days_in_year",
]
