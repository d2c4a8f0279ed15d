"""Date utilities for gregcal.

Pure functions for Gregorian day counting and weekday lookup.
"""

from dataclasses import dataclass

from gregcal.domain.models import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_MONTH,
    DAYS_PER_WEEK,
    MONTHS_PER_YEAR,
    Day,
    MonthNumber,
    Year,
)


def is_leap_year(year: int) -> bool:
    """Determine if a year is a leap year.

    Args:
        year: Gregorian year.

    Returns:
        True if divisible by 4 and either not by 100 or by 400.
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Get the number of days in a month.

    Args:
        year: Gregorian year (decides February).
        month: Month number 1-12.

    Returns:
        28, 29, 30 or 31.

    Raises:
        ValueError: If month is outside 1-12.
    """
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


@dataclass(frozen=True, order=True)
class CalendarDate:
    """Immutable Gregorian date, ordered by (year, month, day)."""

    year: Year
    month: MonthNumber
    day: Day

    def __post_init__(self) -> None:
        if self.year < 1:
            raise ValueError(f"Year must be 1 or later, got {self.year}")
        last_day = days_in_month(self.year, self.month)
        if not 1 <= self.day <= last_day:
            raise ValueError(f"Day must be between 1 and {last_day}, got {self.day}")

    def ordinal(self) -> int:
        """Absolute day number, counting 0001-01-01 as day 1."""
        y = self.year - 1
        days_before_year = y * 365 + y // 4 - y // 100 + y // 400

        days_before_month = DAYS_BEFORE_MONTH[self.month]
        if self.month > 2 and is_leap_year(self.year):
            days_before_month += 1

        return days_before_year + days_before_month + self.day


# 1970-02-01 was a Sunday, so a difference divisible by 7 lands on column 0
ANCHOR_DATE = CalendarDate(Year(1970), MonthNumber(2), Day(1))


def days_between(a: CalendarDate, b: CalendarDate) -> int:
    """Calculate the number of days between two dates.

    Args:
        a: First date.
        b: Second date.

    Returns:
        Absolute day difference (order of arguments does not matter).
    """
    return abs(a.ordinal() - b.ordinal())


def weekday_column(date: CalendarDate) -> int:
    """Get the weekday column of a date, with Sunday as column 0.

    Args:
        date: Date to locate.

    Returns:
        Column 0-6 (Sunday-Saturday).
    """
    offset = days_between(date, ANCHOR_DATE)
    if date < ANCHOR_DATE:
        offset = -offset
    return offset % DAYS_PER_WEEK
