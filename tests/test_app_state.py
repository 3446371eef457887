# tests/test_app_state.py

from __future__ import annotations

from datetime import date

import pytest

from app_state import (
    GREEN, RED, AppState, clean_task_name, format_time, next_month, prev_month, select_color,
    select_day, selected_date, task_count_text,
)


def test_for_date_selects_that_day() -> None:
    st = AppState.for_date(date(2024, 3, 5))
    assert (st.year, st.month, st.selected_day) == (2024, 3, 5)
    assert st.selected_color == RED
    assert selected_date(st) == date(2024, 3, 5)


def test_month_navigation_resets_selected_day() -> None:
    st = AppState(year=2024, month=1, selected_day=31)

    nxt = next_month(st)
    assert (nxt.year, nxt.month, nxt.selected_day) == (2024, 2, 1)

    back = prev_month(nxt)
    assert (back.year, back.month, back.selected_day) == (2024, 1, 1)


def test_month_navigation_wraps_years() -> None:
    dec = AppState(year=2024, month=12, selected_day=20)
    assert (next_month(dec).year, next_month(dec).month) == (2025, 1)

    jan = AppState(year=2024, month=1, selected_day=20)
    assert (prev_month(jan).year, prev_month(jan).month) == (2023, 12)


def test_state_is_not_mutated() -> None:
    st = AppState(year=2024, month=5, selected_day=9)
    select_day(st, 12)
    select_color(st, GREEN)
    next_month(st)

    assert st == AppState(year=2024, month=5, selected_day=9)
    assert select_day(st, 12).selected_day == 12
    assert select_color(st, GREEN).selected_color == GREEN


@pytest.mark.parametrize("hour,minute,meridiem,expected", [
    ("12", "00", "PM", "12:00 PM"),
    ("2", "30", "PM", "2:30 PM"),
    ("02", "15", "am", "2:15 AM"),
    (11, 45, "AM", "11:45 AM"),
    (1, 0, "PM", "1:00 PM"),
])
def test_format_time(hour, minute, meridiem, expected) -> None:
    assert format_time(hour, minute, meridiem) == expected


@pytest.mark.parametrize("hour,minute,meridiem", [
    (0, 0, "AM"),
    (13, 0, "PM"),
    (1, 10, "PM"),
    (1, 60, "PM"),
    (1, 0, "XM"),
])
def test_format_time_rejects_out_of_range(hour, minute, meridiem) -> None:
    with pytest.raises(ValueError):
        format_time(hour, minute, meridiem)


def test_clean_task_name() -> None:
    assert clean_task_name("  Dentist  ") == "Dentist"
    assert clean_task_name("") is None
    assert clean_task_name("   ") is None
    assert clean_task_name(None) is None
    assert clean_task_name("a|b") is None
    assert clean_task_name("two\nlines") is None


def test_task_count_text() -> None:
    assert task_count_text(0) == "0 tasks"
    assert task_count_text(1) == "1 task"
    assert task_count_text(3) == "3 tasks"
