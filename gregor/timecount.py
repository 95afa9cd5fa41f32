"""Second counts derived from the day counts.

Leap seconds are ignored: every day has exactly OF_DAY seconds.
"""

from __future__ import annotations

from gregor import daycount

OF_SECOND: int = 1
OF_MINUTE: int = 60 * OF_SECOND
OF_HOUR: int = 60 * OF_MINUTE
OF_DAY: int = 24 * OF_HOUR  # 86_400
OF_1969YRS: int = daycount.OF_1969YRS * OF_DAY
OF_9999YRS: int = daycount.OF_9999YRS * OF_DAY  # 315_537_897_600


__all__ = [
    "OF_SECOND",
    "OF_MINUTE",
    "OF_HOUR",
    "OF_DAY",
    "OF_1969YRS",
    "OF_9999YRS",
]
