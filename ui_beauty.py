import tkinter as tk
from tkinter import ttk
import tkinter.font as tkfont
from dataclasses import dataclass
from typing import Tuple, Optional

from calendar_grid import weekday_names

# -----------------------------
# Dark theme (default)
# -----------------------------
DARK = {
    "app_bg": "#0B1220",
    "card_bg": "#0F172A",
    "text_fg": "#E5E7EB",
    "muted_fg": "#94A3B8",
    "accent": "#60A5FA",
    "accent_hover": "#3B82F6",
    "weekend_fg": "#FCA5A5",
    "today_fg": "#93C5FD",
    "header_bg": "#111C2D",
    "blank_bg": "#0D1526",
}

LIGHT = {
    "app_bg": "#F7F8FA",
    "card_bg": "#FFFFFF",
    "text_fg": "#111827",
    "muted_fg": "#6B7280",
    "accent": "#3B82F6",
    "accent_hover": "#2563EB",
    "weekend_fg": "#DC2626",
    "today_fg": "#1D4ED8",
    "header_bg": "#F3F4F6",
    "blank_bg": "#F6F6F6",
}


@dataclass(frozen=True)
class Theme:
    mode: str
    font_family: str
    app_bg: str
    card_bg: str
    text_fg: str
    muted_fg: str
    accent: str
    accent_hover: str
    weekend_fg: str
    today_fg: str
    header_bg: str
    blank_bg: str


THEME: Theme = Theme(
    mode="dark",
    font_family="TkDefaultFont",
    **DARK
)


def _pick_font_family() -> str:
    candidates = [
        "Segoe UI",
        "SF Pro Text", "Helvetica Neue",
        "Noto Sans", "DejaVu Sans",
        "Arial",
        "TkDefaultFont",
    ]
    try:
        fams = set(tkfont.families())
    except tk.TclError:
        return "TkDefaultFont"
    for f in candidates:
        if f in fams:
            return f
    return "TkDefaultFont"


def setup_theme(root: tk.Tk, mode: str = "dark") -> Theme:
    """
    Dark or light theme, mode in {"dark", "light"}.
    Call once right after Tk().
    """
    global THEME
    palette = DARK if mode.lower() == "dark" else LIGHT
    font_family = _pick_font_family()

    THEME = Theme(mode=mode.lower(), font_family=font_family, **palette)

    try:
        tkfont.nametofont("TkDefaultFont").configure(family=font_family, size=10)
        tkfont.nametofont("TkTextFont").configure(family=font_family, size=10)
        tkfont.nametofont("TkMenuFont").configure(family=font_family, size=10)
    except tk.TclError:
        pass

    root.configure(bg=THEME.app_bg)

    style = ttk.Style(root)
    try:
        style.theme_use("clam")
    except tk.TclError:
        pass

    style.configure("App.TFrame", background=THEME.app_bg)
    style.configure("Card.TFrame", background=THEME.card_bg)

    style.configure("Title.TLabel",
                    background=THEME.card_bg,
                    foreground=THEME.accent,
                    font=(THEME.font_family, 20, "bold"))
    style.configure("SubTitle.TLabel",
                    background=THEME.card_bg,
                    foreground=THEME.muted_fg,
                    font=(THEME.font_family, 10))
    style.configure("Hint.TLabel",
                    background=THEME.app_bg,
                    foreground=THEME.muted_fg,
                    font=(THEME.font_family, 9))
    style.configure("FieldLabel.TLabel",
                    background=THEME.card_bg,
                    foreground=THEME.muted_fg,
                    font=(THEME.font_family, 10))

    style.configure("Accent.TButton",
                    background=THEME.accent,
                    foreground="white",
                    padding=(14, 8),
                    relief="flat",
                    borderwidth=0,
                    font=(THEME.font_family, 10, "bold"))
    style.map("Accent.TButton",
              background=[("active", THEME.accent_hover), ("pressed", THEME.accent_hover)])

    # flat card-colored buttons: Cancel in dialogs, month arrows
    flat_buttons = {
        "Ghost.TButton": ((12, 8), (THEME.font_family, 10)),
        "Nav.TButton": ((10, 6), (THEME.font_family, 12, "bold")),
    }
    for name, (padding, font) in flat_buttons.items():
        style.configure(name, background=THEME.card_bg, foreground=THEME.text_fg,
                        padding=padding, relief="flat", borderwidth=0, font=font)
        style.map(name, background=[("active", active_bg(THEME.card_bg)),
                                    ("pressed", _mix(THEME.card_bg, "#FFFFFF", 0.12))])

    # task list of the selected day
    style.configure("Treeview",
                    background=THEME.card_bg,
                    fieldbackground=THEME.card_bg,
                    foreground=THEME.text_fg,
                    rowheight=32,
                    borderwidth=0,
                    font=(THEME.font_family, 11))
    style.map("Treeview",
              background=[("selected", _mix(THEME.card_bg, THEME.accent, 0.35))])
    style.configure("Treeview.Heading",
                    background=THEME.header_bg,
                    foreground=THEME.text_fg,
                    relief="flat",
                    font=(THEME.font_family, 10, "bold"))

    style.configure("TCombobox", padding=4)

    return THEME


# -----------------------------
# Helpers: color mixing / centering
# -----------------------------
def _hex_to_rgb(h: str) -> Tuple[int, int, int]:
    h = h.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02X}{g:02X}{b:02X}"


def _mix(a: str, b: str, t: float) -> str:
    ar, ag, ab = _hex_to_rgb(a)
    br, bg, bb = _hex_to_rgb(b)
    r = int(ar + (br - ar) * t)
    g = int(ag + (bg - ag) * t)
    b2 = int(ab + (bb - ab) * t)
    return _rgb_to_hex(r, g, b2)


def center_window(win: tk.Toplevel, width: Optional[int] = None, height: Optional[int] = None,
                  parent: Optional[tk.Widget] = None) -> None:
    """
    Center a Toplevel over ``parent``, or over the screen without one.
    """
    win.update_idletasks()
    w = width or win.winfo_reqwidth()
    h = height or win.winfo_reqheight()

    margin = 16
    sw = win.winfo_screenwidth()
    sh = win.winfo_screenheight()

    if parent is not None and parent.winfo_exists():
        parent.update_idletasks()
        px = parent.winfo_rootx()
        py = parent.winfo_rooty()
        pw = parent.winfo_width()
        ph = parent.winfo_height()
        x = px + (pw - w) // 2
        y = py + (ph - h) // 2
    else:
        x = (sw - w) // 2
        y = (sh - h) // 2

    x = max(margin, min(x, sw - w - margin))
    y = max(margin, min(y, sh - h - margin))
    win.geometry(f"{w}x{h}+{x}+{y}")


# -----------------------------
# Main window layout (cards)
# -----------------------------
def build_main_ui(app) -> None:
    """
    app must provide: root, data_file, firstweekday, prev_month/next_month/open_add_task,
    selected_date_var/task_count_var.
    Creates: title_label, grid_frame, task_tree.
    """
    root = app.root
    root.title("Task Calendar")
    root.geometry("1040x680")
    root.minsize(880, 560)

    container = ttk.Frame(root, style="App.TFrame")
    container.pack(fill="both", expand=True)

    body = ttk.Frame(container, style="App.TFrame")
    body.pack(fill="both", expand=True, padx=14, pady=(14, 6))
    body.columnconfigure(0, weight=3)
    body.columnconfigure(1, weight=2)
    body.rowconfigure(0, weight=1)

    # calendar card
    cal_card = ttk.Frame(body, style="Card.TFrame", padding=(16, 14))
    cal_card.grid(row=0, column=0, sticky="nsew", padx=(0, 12))

    top = ttk.Frame(cal_card, style="Card.TFrame")
    top.pack(fill="x", pady=(0, 10))

    app.title_label = ttk.Label(top, text="", style="Title.TLabel")
    app.title_label.pack(side="left")

    nav = ttk.Frame(top, style="Card.TFrame")
    nav.pack(side="right")
    ttk.Button(nav, text="◀", style="Nav.TButton", command=app.prev_month).pack(side="left", padx=(0, 6))
    ttk.Button(nav, text="▶", style="Nav.TButton", command=app.next_month).pack(side="left")

    # weekday header (tk.Label keeps the background consistent)
    header = tk.Frame(cal_card, bg=THEME.card_bg)
    header.pack(fill="x")
    for i, w in enumerate(weekday_names(app.firstweekday)):
        header.grid_columnconfigure(i, weight=1, uniform="wd")
        tk.Label(header,
                 text=w,
                 bg=THEME.header_bg,
                 fg=THEME.text_fg,
                 font=(THEME.font_family, 10, "bold"),
                 padx=8, pady=8).grid(row=0, column=i, sticky="ew", padx=1, pady=(0, 6))

    app.grid_frame = tk.Frame(cal_card, bg=THEME.card_bg)
    app.grid_frame.pack(fill="both", expand=True)
    for c in range(7):
        app.grid_frame.grid_columnconfigure(c, weight=1, uniform="day")

    # tasks card
    task_card = ttk.Frame(body, style="Card.TFrame", padding=(16, 14))
    task_card.grid(row=0, column=1, sticky="nsew")

    ttk.Label(task_card, textvariable=app.selected_date_var, style="Title.TLabel").pack(anchor="w")
    ttk.Label(task_card, textvariable=app.task_count_var, style="SubTitle.TLabel").pack(anchor="w", pady=(2, 10))

    tree_wrap = ttk.Frame(task_card, style="Card.TFrame")
    tree_wrap.pack(fill="both", expand=True)

    app.task_tree = ttk.Treeview(tree_wrap, columns=("name", "time"), show="headings", selectmode="browse")
    app.task_tree.heading("name", text="Task")
    app.task_tree.heading("time", text="Time")
    app.task_tree.column("name", width=220, anchor="w")
    app.task_tree.column("time", width=90, anchor="e", stretch=False)
    app.task_tree.pack(side="left", fill="both", expand=True)

    ybar = ttk.Scrollbar(tree_wrap, orient="vertical", command=app.task_tree.yview)
    app.task_tree.configure(yscrollcommand=ybar.set)
    ybar.pack(side="right", fill="y")

    ttk.Button(task_card, text="+ Add task", style="Accent.TButton",
               command=app.open_add_task).pack(fill="x", pady=(12, 0))

    hint = f"Data file: {app.data_file}"
    ttk.Label(container, text=hint, style="Hint.TLabel", padding=(14, 0, 14, 10)).pack(fill="x")


# -----------------------------
# Widget styling: day cells / task rows / color swatches
# -----------------------------
def day_cell_colors(is_weekend: bool, is_today: bool, is_selected: bool) -> Tuple[str, str, tuple]:
    """(bg, fg, font) of a day button."""
    bg = THEME.card_bg
    fg = THEME.weekend_fg if is_weekend else THEME.text_fg
    font = (THEME.font_family, 11)
    if is_today:
        fg = THEME.today_fg
        font = (THEME.font_family, 11, "bold")
    if is_selected:
        bg = THEME.accent
        fg = "white"
        font = (THEME.font_family, 11, "bold")
    return bg, fg, font


def active_bg(bg: str) -> str:
    if THEME.mode == "dark":
        return _mix(bg, "#FFFFFF", 0.08)
    return _mix(bg, "#000000", 0.08)


def setup_task_tags(tree: ttk.Treeview, colors) -> None:
    tree.tag_configure("even", background=THEME.card_bg)
    tree.tag_configure("odd", background=_mix(THEME.card_bg, "#FFFFFF", 0.04))
    for c in colors:
        tree.tag_configure(c, foreground=c)


def zebra_tag(i: int) -> str:
    return "even" if i % 2 == 0 else "odd"


def swatch_border(selected: bool) -> Tuple[int, str]:
    # (thickness, color) around a color option
    if selected:
        return 3, "white" if THEME.mode == "dark" else THEME.text_fg
    return 0, THEME.card_bg
