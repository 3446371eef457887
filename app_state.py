from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from task_store import FIELD_SEP

# -----------------------------
# Color tags and time selectors
# -----------------------------
RED = "#ea4335"
ORANGE = "#fa7b17"
GREEN = "#34a853"
PALETTE = [RED, ORANGE, GREEN]

HOURS = [str(h) for h in range(1, 13)]
MINUTES = ["00", "15", "30", "45"]
MERIDIEMS = ["AM", "PM"]
DEFAULT_TIME = ("12", "00", "PM")


@dataclass(frozen=True)
class AppState:
    """What the window shows: visible month, selected day, color for the next task."""
    year: int
    month: int
    selected_day: int = 1
    selected_color: str = RED

    @classmethod
    def for_date(cls, d: date) -> "AppState":
        return cls(year=d.year, month=d.month, selected_day=d.day)


def selected_date(state: AppState) -> date:
    return date(state.year, state.month, state.selected_day)


def prev_month(state: AppState) -> AppState:
    if state.month == 1:
        return replace(state, year=state.year - 1, month=12, selected_day=1)
    return replace(state, month=state.month - 1, selected_day=1)


def next_month(state: AppState) -> AppState:
    if state.month == 12:
        return replace(state, year=state.year + 1, month=1, selected_day=1)
    return replace(state, month=state.month + 1, selected_day=1)


def select_day(state: AppState, day: int) -> AppState:
    return replace(state, selected_day=day)


def select_color(state: AppState, color: str) -> AppState:
    return replace(state, selected_color=color)


def format_time(hour, minute, meridiem: str) -> str:
    h = int(hour)
    m = int(minute)
    mer = meridiem.strip().upper()
    if not 1 <= h <= 12:
        raise ValueError(f"hour out of range: {hour}")
    if f"{m:02d}" not in MINUTES:
        raise ValueError(f"minute must be one of {', '.join(MINUTES)}: {minute}")
    if mer not in MERIDIEMS:
        raise ValueError(f"meridiem must be AM or PM: {meridiem}")
    return f"{h}:{m:02d} {mer}"


def clean_task_name(raw: Optional[str]) -> Optional[str]:
    """Trimmed name, or None if it is blank or would break the task file line."""
    name = (raw or "").strip()
    if not name:
        return None
    if FIELD_SEP in name or "\n" in name or "\r" in name:
        return None
    return name


def task_count_text(n: int) -> str:
    return f"{n} task{'' if n == 1 else 's'}"
