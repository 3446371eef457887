import calendar
from dataclasses import dataclass
from typing import List, Optional

GRID_ROWS = 6
GRID_COLS = 7
GRID_CELLS = GRID_ROWS * GRID_COLS

# calendar module numbering: Monday=0 ... Sunday=6
SUNDAY = calendar.SUNDAY
MONDAY = calendar.MONDAY


@dataclass(frozen=True)
class CalendarCell:
    day: Optional[int] = None
    is_selected: bool = False

    @property
    def is_empty(self) -> bool:
        return self.day is None


EMPTY = CalendarCell()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def start_offset(year: int, month: int, firstweekday: int = SUNDAY) -> int:
    """Blank cells before day 1 when weeks start on ``firstweekday``."""
    weekday = calendar.weekday(year, month, 1)
    return (weekday - firstweekday) % 7


def build_grid(year: int, month: int, selected_day: int, firstweekday: int = SUNDAY) -> List[CalendarCell]:
    """
    Month as a fixed 6x7 grid: leading blanks, one cell per day, trailing
    blanks. Always GRID_CELLS long regardless of how many weeks the month spans.
    """
    cal = calendar.Calendar(firstweekday=firstweekday)
    cells: List[CalendarCell] = []
    for n in cal.itermonthdays(year, month):
        if n == 0:
            cells.append(EMPTY)
        else:
            cells.append(CalendarCell(day=n, is_selected=(n == selected_day)))

    # itermonthdays pads to whole weeks only; a 4 or 5 week month needs more
    while len(cells) < GRID_CELLS:
        cells.append(EMPTY)
    return cells


def grid_rows(cells: List[CalendarCell]) -> List[List[CalendarCell]]:
    return [cells[r * GRID_COLS:(r + 1) * GRID_COLS] for r in range(len(cells) // GRID_COLS)]


def weekday_names(firstweekday: int = SUNDAY) -> List[str]:
    return [calendar.day_abbr[(firstweekday + i) % 7] for i in range(7)]
