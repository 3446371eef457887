import argparse
import logging
import tkinter as tk
from tkinter import ttk, messagebox
from datetime import date
from pathlib import Path
from typing import Optional

from app_state import (
    AppState, PALETTE, HOURS, MINUTES, MERIDIEMS, DEFAULT_TIME, RED,
    clean_task_name, format_time, next_month, prev_month, select_color, select_day,
    selected_date, task_count_text,
)
from calendar_grid import SUNDAY, MONDAY, build_grid, grid_rows
from logging_setup import setup_logging
from task_store import TaskItem, TaskStore, commit_task, default_data_path
import ui_beauty
from ui_beauty import (
    active_bg, build_main_ui, center_window, day_cell_colors, setup_task_tags,
    setup_theme, swatch_border, zebra_tag,
)

logger = logging.getLogger(__name__)


# -----------------------------
# Add-task dialog
# -----------------------------
class AddTaskDialog(tk.Toplevel):
    def __init__(self, parent: tk.Tk, day: date, color: str = RED):
        super().__init__(parent)
        self.parent = parent
        self.result: Optional[TaskItem] = None
        self.color = color
        theme = ui_beauty.THEME

        self.title("Add task")
        self.resizable(False, False)
        self.transient(parent)
        self.configure(bg=theme.card_bg)

        wrap = ttk.Frame(self, padding=16, style="Card.TFrame")
        wrap.pack(fill="both", expand=True)

        ttk.Label(wrap, text=day.strftime("%A, %B %d").replace(" 0", " "),
                  style="SubTitle.TLabel").grid(row=0, column=0, columnspan=4, sticky="w", pady=(0, 10))

        ttk.Label(wrap, text="Name", style="FieldLabel.TLabel").grid(row=1, column=0, sticky="w", pady=4)
        self.name_var = tk.StringVar()
        self.name_entry = ttk.Entry(wrap, textvariable=self.name_var, width=36)
        self.name_entry.grid(row=1, column=1, columnspan=3, sticky="ew", pady=4)

        ttk.Label(wrap, text="Time", style="FieldLabel.TLabel").grid(row=2, column=0, sticky="w", pady=4)
        hour, minute, meridiem = DEFAULT_TIME
        self.hour_var = tk.StringVar(value=hour)
        self.minute_var = tk.StringVar(value=minute)
        self.meridiem_var = tk.StringVar(value=meridiem)
        ttk.Combobox(wrap, textvariable=self.hour_var, values=HOURS, width=4,
                     state="readonly").grid(row=2, column=1, sticky="w", pady=4)
        ttk.Combobox(wrap, textvariable=self.minute_var, values=MINUTES, width=4,
                     state="readonly").grid(row=2, column=2, sticky="w", pady=4, padx=6)
        ttk.Combobox(wrap, textvariable=self.meridiem_var, values=MERIDIEMS, width=4,
                     state="readonly").grid(row=2, column=3, sticky="w", pady=4)

        ttk.Label(wrap, text="Color", style="FieldLabel.TLabel").grid(row=3, column=0, sticky="w", pady=4)
        swatches = tk.Frame(wrap, bg=theme.card_bg)
        swatches.grid(row=3, column=1, columnspan=3, sticky="w", pady=6)
        self._swatches = {}
        for c in PALETTE:
            sw = tk.Frame(swatches, bg=c, width=26, height=26, cursor="hand2",
                          highlightthickness=0, highlightbackground=theme.card_bg)
            sw.pack(side="left", padx=(0, 10))
            sw.bind("<Button-1>", lambda e, cc=c: self._choose_color(cc))
            self._swatches[c] = sw
        self._choose_color(color)

        btns = ttk.Frame(wrap, style="Card.TFrame")
        btns.grid(row=4, column=0, columnspan=4, sticky="e", pady=(14, 0))
        ttk.Button(btns, text="Cancel", style="Ghost.TButton", command=self._cancel).pack(side="right", padx=(6, 0))
        ttk.Button(btns, text="Save", style="Accent.TButton", command=self._ok).pack(side="right")

        wrap.columnconfigure(3, weight=1)

        self.bind("<Escape>", lambda e: self._cancel())
        self.bind("<Return>", lambda e: self._ok())

        center_window(self, parent=parent)
        self.wait_visibility()
        self.grab_set()
        self.name_entry.focus_set()

    def _choose_color(self, color: str):
        self.color = color
        for c, sw in self._swatches.items():
            thickness, border = swatch_border(c == color)
            sw.configure(highlightthickness=thickness, highlightbackground=border, highlightcolor=border)

    def _cancel(self):
        self.result = None
        self.destroy()

    def _ok(self):
        raw = self.name_var.get()
        if not raw.strip():
            # blank name: stay open
            return
        name = clean_task_name(raw)
        if name is None:
            messagebox.showerror("Invalid name", "Task names cannot contain '|' or line breaks.", parent=self)
            return

        time = format_time(self.hour_var.get(), self.minute_var.get(), self.meridiem_var.get())
        self.result = TaskItem(name=name, color=self.color, time=time)
        self.destroy()


# -----------------------------
# Main window: month grid + tasks of the selected day
# -----------------------------
class CalendarApp:
    def __init__(self, root: tk.Tk, data_file: Path, firstweekday: int = SUNDAY):
        self.root = root
        self.data_file = data_file
        self.firstweekday = firstweekday

        self.today = date.today()
        self.state = AppState.for_date(self.today)
        self.store = TaskStore.load(self.data_file, warn=self._warn)

        self.selected_date_var = tk.StringVar(value="")
        self.task_count_var = tk.StringVar(value="")

        build_main_ui(self)
        setup_task_tags(self.task_tree, PALETTE)
        self.refresh()

    def _warn(self, msg: str):
        messagebox.showwarning("Warning", msg, parent=self.root)

    def refresh(self):
        self._render_calendar()
        self._refresh_tasks()

    # -----------------------------
    # Navigation / selection
    # -----------------------------
    def prev_month(self):
        self.state = prev_month(self.state)
        self.refresh()

    def next_month(self):
        self.state = next_month(self.state)
        self.refresh()

    def select_day(self, day: int):
        self.state = select_day(self.state, day)
        self.refresh()

    # -----------------------------
    # Tasks
    # -----------------------------
    def open_add_task(self):
        # the form always opens on red
        self.state = select_color(self.state, RED)
        d = selected_date(self.state)
        dlg = AddTaskDialog(self.root, d, color=self.state.selected_color)
        self.root.wait_window(dlg)
        if dlg.result is None:
            return
        self.state = select_color(self.state, dlg.result.color)
        self.add_task(d, dlg.result)

    def add_task(self, d: date, item: TaskItem):
        commit_task(self.store, self.data_file, d, item, warn=self._warn)
        self.refresh()

    def on_close(self):
        self.store.save(self.data_file, warn=self._warn)
        self.root.destroy()

    # -----------------------------
    # Rendering
    # -----------------------------
    def _render_calendar(self):
        theme = ui_beauty.THEME
        st = self.state
        self.title_label.config(text=date(st.year, st.month, 1).strftime("%B %Y"))

        for w in self.grid_frame.winfo_children():
            w.destroy()

        marked = self.store.days_with_tasks(st.year, st.month)
        weekend_cols = {c for c in range(7) if (self.firstweekday + c) % 7 in (5, 6)}

        for r, row in enumerate(grid_rows(build_grid(st.year, st.month, st.selected_day, self.firstweekday))):
            self.grid_frame.grid_rowconfigure(r, weight=1, uniform="week")
            for c, cell in enumerate(row):
                if cell.is_empty:
                    blank = tk.Frame(self.grid_frame, bg=theme.blank_bg, highlightthickness=0, bd=0)
                    blank.grid(row=r, column=c, sticky="nsew", padx=2, pady=2)
                    continue

                is_today = date(st.year, st.month, cell.day) == self.today
                bg, fg, font = day_cell_colors(c in weekend_cols, is_today, cell.is_selected)
                text = f"{cell.day}\n•" if cell.day in marked else f"{cell.day}\n "

                btn = tk.Button(
                    self.grid_frame,
                    text=text,
                    bg=bg,
                    fg=fg,
                    bd=0,
                    relief="flat",
                    activebackground=active_bg(bg),
                    activeforeground=fg,
                    font=font,
                    command=lambda n=cell.day: self.select_day(n),
                )
                btn.grid(row=r, column=c, sticky="nsew", padx=2, pady=2)

                if is_today and not cell.is_selected:
                    btn.configure(highlightthickness=2, highlightbackground=theme.accent, highlightcolor=theme.accent)
                else:
                    btn.configure(highlightthickness=0)

    def _refresh_tasks(self):
        d = selected_date(self.state)
        self.selected_date_var.set(f"{d.strftime('%A')} {d.day}")

        self.task_count_var.set(task_count_text(self.store.task_count(d)))
        tasks = self.store.tasks_for(d)

        for i in self.task_tree.get_children():
            self.task_tree.delete(i)
        for i, t in enumerate(tasks):
            tags = [zebra_tag(i)]
            if self._ensure_color_tag(t.color):
                tags.append(t.color)
            self.task_tree.insert("", "end", values=(f"●  {t.name}", t.time), tags=tuple(tags))

    def _ensure_color_tag(self, color: str) -> bool:
        # colors read from the file may be anything
        try:
            self.task_tree.tag_configure(color, foreground=color)
        except tk.TclError:
            logger.debug("unknown task color %r", color)
            return False
        return True


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Desktop calendar with per-day tasks.")
    p.add_argument("--data-file", type=Path, default=None,
                   help=f"task file (default: {default_data_path()})")
    p.add_argument("--theme", choices=["dark", "light"], default="dark")
    p.add_argument("--week-start", choices=["sunday", "monday"], default="sunday")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    data_file: Path = args.data_file or default_data_path()

    log_file = setup_logging(log_dir=data_file.parent, console_level=getattr(logging, args.log_level))
    logger.info("starting, data=%s log=%s", data_file, log_file)

    root = tk.Tk()
    try:
        root.tk.call("tk", "scaling", 1.2)
    except tk.TclError:
        pass
    setup_theme(root, mode=args.theme)

    firstweekday = MONDAY if args.week_start == "monday" else SUNDAY
    app = CalendarApp(root, data_file, firstweekday=firstweekday)
    root.protocol("WM_DELETE_WINDOW", app.on_close)
    root.mainloop()


if __name__ == "__main__":
    main()
