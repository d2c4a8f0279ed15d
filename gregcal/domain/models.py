"""Domain type definitions and lookup tables for gregcal.

These NewTypes provide semantic clarity and help with type checking:
- Year: Gregorian year, 1 or later
- MonthNumber: Month of the year, 1-12
- Day: Day of the month, 1-31
"""

from typing import NewType

Year = NewType("Year", int)

MonthNumber = NewType("MonthNumber", int)

Day = NewType("Day", int)

MONTHS_PER_YEAR = 12
DAYS_PER_WEEK = 7

# Index 0 is unused so tables can be indexed by month number directly
MONTH_NAMES = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Days before the first of each month in a common year
DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
