import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Set

logger = logging.getLogger(__name__)

FIELD_SEP = "|"
DATE_KEY_FORMAT = "%Y-%m-%d"
APP_DIR_NAME = "CalendarTaskApp"
TASKS_FILE_NAME = "tasks.txt"

WarnFn = Callable[[str], None]


# -----------------------------
# Data structures
# -----------------------------
@dataclass(frozen=True)
class TaskItem:
    name: str
    color: str
    time: str

    def to_fields(self) -> List[str]:
        return [self.name, self.color, self.time]


def date_key(d: date) -> str:
    return d.strftime(DATE_KEY_FORMAT)


def parse_date_key(s: str) -> date:
    return datetime.strptime(s.strip(), DATE_KEY_FORMAT).date()


def default_data_path() -> Path:
    if os.name == "nt":
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home()
        return base / APP_DIR_NAME / TASKS_FILE_NAME
    xdg = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg) if xdg else Path.home() / ".local" / "share"
    return base / "calendar-task-app" / TASKS_FILE_NAME


# -----------------------------
# Task store: date -> ordered tasks
# -----------------------------
class TaskStore:
    """
    Date-keyed, append-only task store.

    Keys are ``datetime.date``; the ``YYYY-MM-DD`` string form only exists in
    the persisted file. Dates iterate in insertion order and tasks within a
    date keep the order they were added in.
    """

    def __init__(self):
        self._tasks: Dict[date, List[TaskItem]] = {}

    def __len__(self) -> int:
        return sum(len(items) for items in self._tasks.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskStore):
            return NotImplemented
        return self._tasks == other._tasks

    def dates(self) -> List[date]:
        return list(self._tasks)

    def add_task(self, day: date, item: TaskItem) -> None:
        self._tasks.setdefault(day, []).append(item)

    def tasks_for(self, day: date) -> List[TaskItem]:
        return list(self._tasks.get(day, []))

    def task_count(self, day: date) -> int:
        return len(self._tasks.get(day, []))

    def days_with_tasks(self, year: int, month: int) -> Set[int]:
        return {d.day for d, items in self._tasks.items()
                if items and d.year == year and d.month == month}

    # -----------------------------
    # Line format: YYYY-MM-DD|name|color|time
    # -----------------------------
    def iter_lines(self) -> Iterable[str]:
        for d, items in self._tasks.items():
            key = date_key(d)
            for item in items:
                yield FIELD_SEP.join([key] + item.to_fields())

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "TaskStore":
        store = cls()
        for lineno, line in enumerate(lines, 1):
            if not line.strip():
                continue
            parts = line.split(FIELD_SEP)
            if len(parts) != 4:
                logger.debug("skip line %d: %d fields", lineno, len(parts))
                continue
            key, name, color, time = parts
            try:
                d = parse_date_key(key)
            except ValueError:
                logger.debug("skip line %d: bad date %r", lineno, key)
                continue
            store.add_task(d, TaskItem(name=name, color=color, time=time))
        return store

    # -----------------------------
    # Persistence
    # -----------------------------
    @classmethod
    def load(cls, path: Path, warn: Optional[WarnFn] = None) -> "TaskStore":
        """Read ``path``; any read error yields an empty store plus a warning."""
        path = Path(path)
        try:
            if not path.exists():
                logger.info("no task file at %s, starting empty", path)
                return cls()
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as ex:
            msg = f"Error loading tasks: {ex}"
            logger.warning("%s (path=%s)", msg, path)
            if warn is not None:
                warn(msg)
            return cls()

        store = cls.from_lines(line.rstrip("\r") for line in text.split("\n"))
        logger.info("loaded %d tasks over %d dates from %s", len(store), len(store.dates()), path)
        return store

    def save(self, path: Path, warn: Optional[WarnFn] = None) -> bool:
        path = Path(path)
        payload = "".join(line + "\n" for line in self.iter_lines())
        tmp_name: Optional[str] = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=".tasks-", suffix=".txt", dir=str(path.parent))
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            if path.exists():
                # mkstemp files are 0600; keep the mode the user had
                os.chmod(tmp_name, stat.S_IMODE(path.stat().st_mode))
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as ex:
            msg = f"Error saving tasks: {ex}"
            logger.warning("%s (path=%s)", msg, path)
            if warn is not None:
                warn(msg)
            return False
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                try:
                    os.remove(tmp_name)
                except OSError:
                    logger.debug("could not remove temp file %s", tmp_name)

        logger.debug("saved %d tasks to %s", len(self), path)
        return True


def commit_task(store: TaskStore, path: Path, day: date, item: TaskItem,
                warn: Optional[WarnFn] = None) -> bool:
    """Append ``item`` and flush the whole store to ``path`` right away."""
    store.add_task(day, item)
    logger.info("task added on %s: %s at %s", date_key(day), item.name, item.time)
    return store.save(path, warn=warn)
