"""Tests for gregcal.domain.layout month layouts."""

import pytest

from gregcal.domain.layout import BLANK_LINE, LINE_WIDTH, WEEK_HEADER, LayoutState, MonthLayout


def drain(layout: MonthLayout) -> list[str]:
    """Collect rows until the layout reports no output."""
    rows = []
    while True:
        row, printed = layout.next_row()
        if not printed:
            return rows
        rows.append(row)


class TestMonthLayoutConstruction:
    """Tests for MonthLayout day ranges."""

    @pytest.mark.parametrize(
        ("year", "month", "last_day"),
        [(2021, 1, 31), (2020, 2, 29), (2021, 2, 28), (2021, 4, 30), (1900, 2, 28), (2000, 2, 29)],
    )
    def test_last_day(self, year: int, month: int, last_day: int) -> None:
        """Should pick the last day from the month and leap-year rule."""
        layout = MonthLayout(year, month)

        assert layout.first_day == 1
        assert layout.last_day == last_day
        assert layout.next_day == 1

    def test_invalid_month_raises_valueerror(self) -> None:
        """Should reject month 13."""
        with pytest.raises(ValueError):
            MonthLayout(2021, 13)

    def test_year_zero_raises_valueerror(self) -> None:
        """Should reject years before 1."""
        with pytest.raises(ValueError):
            MonthLayout(0, 1)


class TestMonthNameLine:
    """Tests for month_name_line."""

    def test_odd_padding_favors_prefix(self) -> None:
        """Should put the extra space before the name when padding is odd."""
        # 22 - len("January") = 15 -> 8 before, 7 after
        assert MonthLayout(2021, 1).month_name_line() == " " * 8 + "January" + " " * 7

    def test_even_padding_is_symmetric(self) -> None:
        """Should split even padding equally."""
        # 22 - len("February") = 14 -> 7 either side
        assert MonthLayout(2021, 2).month_name_line() == " " * 7 + "February" + " " * 7

    def test_every_month_is_full_width(self) -> None:
        """Should always be exactly LINE_WIDTH characters."""
        for month in range(1, 13):
            line = MonthLayout(2021, month).month_name_line()
            assert len(line) == LINE_WIDTH
            assert line.strip()


class TestWeekHeaderLine:
    """Tests for week_header_line."""

    def test_header_text(self) -> None:
        """Should use two-letter weekday names starting on Sunday."""
        assert MonthLayout(2021, 1).week_header_line() == " Su Mo Tu We Th Fr Sa "
        assert len(WEEK_HEADER) == LINE_WIDTH


class TestNextRow:
    """Tests for next_row."""

    def test_first_row_january_2021(self) -> None:
        """Should start January 2021 after five blank cells (Friday)."""
        row, printed = MonthLayout(2021, 1).next_row()

        assert printed is True
        assert row == "   " * 5 + "  1  2 "

    def test_middle_row_is_seven_numbers(self) -> None:
        """Should fill middle rows with exactly seven days."""
        layout = MonthLayout(2021, 1)
        layout.next_row()
        row, printed = layout.next_row()

        assert printed is True
        assert row == "  3  4  5  6  7  8  9 "
        assert layout.next_day == 10

    def test_last_row_is_padded(self) -> None:
        """Should pad the last row with blank cells."""
        rows = drain(MonthLayout(2021, 1))

        assert len(rows) == 6
        assert rows[-1] == " 31" + "   " * 6 + " "

    def test_month_starting_on_sunday(self) -> None:
        """Should have no leading blanks when the first falls on Sunday."""
        # February 2015 starts on Sunday and fits exactly four rows
        rows = drain(MonthLayout(2015, 2))

        assert len(rows) == 4
        assert rows[0] == "  1  2  3  4  5  6  7 "
        assert rows[-1] == " 22 23 24 25 26 27 28 "

    def test_rows_cover_every_day_once(self) -> None:
        """Should hand out each day number exactly once, in order."""
        for month in range(1, 13):
            layout = MonthLayout(2024, month)
            numbers = [int(cell) for row in drain(layout) for cell in row.split()]
            assert numbers == list(range(1, layout.last_day + 1))

    def test_every_row_is_full_width(self) -> None:
        """Should keep every row exactly LINE_WIDTH characters."""
        for month in range(1, 13):
            layout = MonthLayout(2021, month)
            for row in drain(layout):
                assert len(row) == LINE_WIDTH

    def test_exhausted_layout_returns_blank_row(self) -> None:
        """Should keep returning a full-width blank row once all days are out."""
        layout = MonthLayout(2021, 2)
        drain(layout)

        for _ in range(2):
            row, printed = layout.next_row()
            assert printed is False
            assert row == BLANK_LINE
            assert len(row) == LINE_WIDTH


class TestLayoutState:
    """Tests for the layout state machine."""

    def test_state_progression(self) -> None:
        """Should move from header-pending to printing-weeks to done."""
        layout = MonthLayout(2021, 3)
        assert layout.state is LayoutState.HEADER_PENDING

        layout.month_name_line()
        assert layout.state is LayoutState.HEADER_PENDING

        layout.week_header_line()
        assert layout.state is LayoutState.PRINTING_WEEKS

        drain(layout)
        assert layout.state is LayoutState.DONE
        assert layout.exhausted

    def test_layouts_do_not_share_cursor(self) -> None:
        """Should keep each layout's cursor independent."""
        first = MonthLayout(2021, 1)
        second = MonthLayout(2021, 1)
        drain(first)

        assert first.exhausted
        assert second.next_day == 1
