"""Proleptic Gregorian calendar rules.

Leap years are divisible by 4, except centuries, which must also be
divisible by 400. Year 0000 is a leap year under this rule.
"""

from __future__ import annotations

# Index 0 is a placeholder so months index directly.
DAYS_IN_MONTH: tuple[int, ...] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Check whether *year* is a leap year in the proleptic Gregorian calendar."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in *month* of *year*.

    Raises:
        ValueError: If *month* is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Check whether the triple names a day that exists on the calendar."""
    if month < 1 or month > 12:
        return False
    return 1 <= day <= days_in_month(year, month)
