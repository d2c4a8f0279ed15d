"""Pure functions for laying out several months side by side.

This module contains the functional core for whole-year output:
- No I/O operations (no console, no files)
- Returns plain lines, one string per output line
- Each group of months ends with an empty line
"""

from gregcal.domain.layout import MonthLayout
from gregcal.domain.models import MONTHS_PER_YEAR

DEFAULT_MONTHS_PER_ROW = 3


def group_months(months_per_row: int = DEFAULT_MONTHS_PER_ROW) -> list[list[int]]:
    """Split the months of a year into consecutive rows.

    Args:
        months_per_row: Months shown side by side (1-12).

    Returns:
        List of month-number groups, e.g. [[1, 2, 3], [4, 5, 6], ...].

    Raises:
        ValueError: If months_per_row is outside 1-12.
    """
    if not 1 <= months_per_row <= MONTHS_PER_YEAR:
        raise ValueError(f"Months per row must be between 1 and 12, got {months_per_row}")
    months = list(range(1, MONTHS_PER_YEAR + 1))
    return [months[i : i + months_per_row] for i in range(0, MONTHS_PER_YEAR, months_per_row)]


def render_months(year: int, months: list[int]) -> list[str]:
    """Render months side by side.

    Rows are pulled from every layout together until none of them has a
    day left; that final all-blank row is dropped.

    Args:
        year: Gregorian year.
        months: Month numbers to show, left to right.

    Returns:
        Output lines: names, week headers, week rows, then an empty line.
    """
    layouts = [MonthLayout(year, month) for month in months]

    lines = [
        "".join(layout.month_name_line() for layout in layouts),
        "".join(layout.week_header_line() for layout in layouts),
    ]

    while True:
        rows = [layout.next_row() for layout in layouts]
        if not any(printed for _, printed in rows):
            break
        lines.append("".join(row for row, _ in rows))

    lines.append("")
    return lines


def render_month(year: int, month: int) -> list[str]:
    """Render a single month."""
    return render_months(year, [month])


def render_year(year: int, months_per_row: int = DEFAULT_MONTHS_PER_ROW) -> list[str]:
    """Render all twelve months of a year.

    Args:
        year: Gregorian year.
        months_per_row: Months shown side by side.

    Returns:
        Output lines for every group, in order.
    """
    lines: list[str] = []
    for group in group_months(months_per_row):
        lines.extend(render_months(year, group))
    return lines
