"""Month layout: turns one month into fixed-width text segments.

Every segment a layout produces is exactly LINE_WIDTH characters, so
segments from several months can be joined side by side on one line.
"""

from enum import Enum

from gregcal.dates import CalendarDate, days_in_month, weekday_column
from gregcal.domain.models import DAYS_PER_WEEK, MONTH_NAMES, Day, MonthNumber, Year

LINE_WIDTH = 22
CELL_WIDTH = 3
FIRST_DAY = 1

WEEK_HEADER = " Su Mo Tu We Th Fr Sa "
BLANK_CELL = " " * CELL_WIDTH
BLANK_LINE = " " * LINE_WIDTH


class LayoutState(Enum):
    """Where a month layout is in its output."""

    HEADER_PENDING = "header-pending"
    PRINTING_WEEKS = "printing-weeks"
    DONE = "done"


class MonthLayout:
    """Produces the name line, week header and week rows of one month.

    Rows are handed out one at a time by next_row(), which advances the
    next_day cursor until it passes last_day.
    """

    def __init__(self, year: int, month: int) -> None:
        self.year = Year(year)
        self.month = MonthNumber(month)
        self.first_day = Day(FIRST_DAY)
        self.last_day = Day(days_in_month(year, month))
        self._first_date = CalendarDate(self.year, self.month, self.first_day)
        self.next_day = self.first_day
        self._header_done = False

    @property
    def exhausted(self) -> bool:
        return self.next_day > self.last_day

    @property
    def state(self) -> LayoutState:
        if self.exhausted:
            return LayoutState.DONE
        if not self._header_done:
            return LayoutState.HEADER_PENDING
        return LayoutState.PRINTING_WEEKS

    def month_name_line(self) -> str:
        """Center the month name, giving any odd leftover space to the prefix."""
        name = MONTH_NAMES[self.month]
        spaces = LINE_WIDTH - len(name)
        suffix = spaces // 2
        prefix = spaces - suffix
        return " " * prefix + name + " " * suffix

    def week_header_line(self) -> str:
        self._header_done = True
        return WEEK_HEADER

    def next_row(self) -> tuple[str, bool]:
        """Produce the next week row of the month.

        Returns:
            Tuple of (row, printed) where row is always LINE_WIDTH wide and
            printed is False once every day has already been handed out.
        """
        if self.exhausted:
            return BLANK_LINE, False

        if self.next_day == self.first_day:
            leading = weekday_column(self._first_date)
            cells = [BLANK_CELL] * leading + self._take(DAYS_PER_WEEK - leading)
        elif self.next_day + DAYS_PER_WEEK - 1 <= self.last_day:
            cells = self._take(DAYS_PER_WEEK)
        else:
            cells = self._take(self.last_day - self.next_day + 1)
            cells += [BLANK_CELL] * (DAYS_PER_WEEK - len(cells))

        return "".join(cells) + " ", True

    def _take(self, count: int) -> list[str]:
        cells = [f"{day:>{CELL_WIDTH}}" for day in range(self.next_day, self.next_day + count)]
        self.next_day = Day(self.next_day + count)
        return cells
