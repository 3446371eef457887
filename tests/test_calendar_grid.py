# tests/test_calendar_grid.py

from __future__ import annotations

import pytest

from calendar_grid import (
    EMPTY, GRID_CELLS, MONDAY, SUNDAY, CalendarCell, build_grid, days_in_month, grid_rows,
    start_offset, weekday_names,
)

ALL_MONTHS = [(y, m) for y in (1999, 2000, 2023, 2024, 2025, 2026, 2100) for m in range(1, 13)]


def test_february_2024_example() -> None:
    cells = build_grid(2024, 2, 15)

    assert len(cells) == 42
    assert cells[:4] == [EMPTY] * 4
    assert [c.day for c in cells[4:33]] == list(range(1, 30))
    assert cells[33:] == [EMPTY] * 9
    assert cells[4 + 14] == CalendarCell(day=15, is_selected=True)
    assert [c.day for c in cells if c.is_selected] == [15]


@pytest.mark.parametrize("year,month,expected", [
    (2024, 2, 29),
    (2023, 2, 28),
    (2000, 2, 29),
    (1900, 2, 28),
    (2024, 4, 30),
    (2024, 12, 31),
])
def test_days_in_month(year: int, month: int, expected: int) -> None:
    assert days_in_month(year, month) == expected


@pytest.mark.parametrize("year,month", ALL_MONTHS)
def test_grid_shape_and_day_count(year: int, month: int) -> None:
    cells = build_grid(year, month, 1)

    assert len(cells) == GRID_CELLS
    days = [c.day for c in cells if not c.is_empty]
    assert days == list(range(1, days_in_month(year, month) + 1))
    # leading blanks line day 1 up with its weekday column
    assert all(c.is_empty for c in cells[:start_offset(year, month)])
    assert cells[start_offset(year, month)].day == 1


@pytest.mark.parametrize("selected", [0, 1, 15, 29, 30, 31, 32, -1])
def test_selection_marks_at_most_one_cell(selected: int) -> None:
    cells = build_grid(2024, 2, selected)
    chosen = [c for c in cells if c.is_selected]

    if 1 <= selected <= 29:
        assert [c.day for c in chosen] == [selected]
    else:
        assert chosen == []


def test_empty_cells_are_never_selected() -> None:
    cells = build_grid(2024, 2, 0)
    assert not any(c.is_selected for c in cells if c.is_empty)


def test_start_offset_sunday_first() -> None:
    # 2024-09-01 is a Sunday, 2023-07-01 a Saturday
    assert start_offset(2024, 9) == 0
    assert start_offset(2023, 7) == 6
    assert start_offset(2024, 2) == 4


def test_thirty_one_day_month_starting_saturday_needs_six_rows() -> None:
    cells = build_grid(2023, 7, 31)

    assert len(cells) == 42
    rows = grid_rows(cells)
    assert len(rows) == 6
    assert [c.day for c in rows[5][:2]] == [30, 31]
    assert rows[5][1].is_selected


def test_four_week_february_is_padded_to_42() -> None:
    # 2015-02-01 is a Sunday: the month fills exactly four rows
    cells = build_grid(2015, 2, 1)

    assert start_offset(2015, 2) == 0
    assert len(cells) == 42
    assert cells[28:] == [EMPTY] * 14


def test_monday_first_week() -> None:
    cells = build_grid(2024, 2, 1, firstweekday=MONDAY)

    assert start_offset(2024, 2, firstweekday=MONDAY) == 3
    assert cells[:3] == [EMPTY] * 3
    assert cells[3].day == 1
    assert len(cells) == 42


def test_grid_rows_splits_into_weeks() -> None:
    rows = grid_rows(build_grid(2024, 2, 15))
    assert len(rows) == 6
    assert all(len(r) == 7 for r in rows)


def test_weekday_names_follow_first_weekday() -> None:
    assert len(weekday_names(SUNDAY)) == 7
    assert weekday_names(SUNDAY)[1] == weekday_names(MONDAY)[0]
