"""Month calendar window (tkinter): grid view and day-detail view."""

from datetime import date
from tkinter import font as tkfont
import tkinter as tk

import structlog
from PIL import ImageTk

from calendar_logic import (
    WEEKDAY_ABBR,
    build_grid,
    compute_facts,
    format_detail_date,
    grid_weeks,
    month_label,
)
from calendar_state import (
    ApplicationState,
    BackToCalendar,
    Clock,
    DateSelected,
    Event,
    NextMonth,
    PreviousMonth,
    apply_event,
    initial_state,
)
from icon_gen import create_icon_image

log = structlog.get_logger("month_calendar.window")

# Colours keyed by the dark_mode setting
_PALETTES = {
    False: {
        "bg": "white", "fg": "#333333", "muted": "#AAAAAA",
        "accent": "#0078D4", "cell_bg": "#F3F3F3", "weekend": "#CC0000",
    },
    True: {
        "bg": "#202020", "fg": "#E0E0E0", "muted": "#666666",
        "accent": "#4CA3FF", "cell_bg": "#2D2D2D", "weekend": "#FF6B6B",
    },
}


class CalendarWindow:
    """Single-month calendar driven by :func:`calendar_state.apply_event`."""

    def __init__(self, settings: dict, clock: Clock = date.today) -> None:
        self.root = tk.Tk()
        self.root.title("Calendar")
        self.colors = _PALETTES[bool(settings["dark_mode"])]
        self.root.configure(bg=self.colors["bg"])
        self.fatal_error: BaseException | None = None

        self._setup_fonts()
        # The clock is read once; "today" highlighting does not roll over
        self._today = clock()
        self.state: ApplicationState = initial_state(lambda: self._today)

        # Keep a reference or Tk drops the image
        self._icon = ImageTk.PhotoImage(
            create_icon_image(self._today, dark=bool(settings["dark_mode"])))
        self.root.iconphoto(True, self._icon)

        width, height = settings["window_width"], settings["window_height"]
        if width and height:
            self.root.geometry(f"{width}x{height}")

        self._content: tk.Frame | None = None
        self.render()

        self.root.bind("<Left>", lambda _e: self.dispatch(PreviousMonth()))
        self.root.bind("<Right>", lambda _e: self.dispatch(NextMonth()))
        self.root.bind("<Escape>", lambda _e: self.dispatch(BackToCalendar()))
        self.root.report_callback_exception = self._on_callback_error

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=10)
        self.font_bold = tkfont.Font(family=base, size=10, weight="bold")
        self.font_header = tkfont.Font(family=base, size=14, weight="bold")
        self.font_title = tkfont.Font(family=base, size=18, weight="bold")

    # ------------------------------------------------------------------
    # Event dispatch
    # ------------------------------------------------------------------
    def dispatch(self, event: Event) -> None:
        self.state = apply_event(self.state, event)
        self.render()

    def _on_callback_error(self, exc_type, exc, tb) -> None:
        # Callback errors are fatal; main() re-raises them after mainloop
        log.error("fatal_callback_error", exc_info=(exc_type, exc, tb))
        self.fatal_error = exc
        self.root.destroy()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self) -> None:
        if self._content is not None:
            self._content.destroy()
        self._content = tk.Frame(self.root, bg=self.colors["bg"])
        self._content.pack(expand=True, padx=12, pady=12)

        if self.state.selected_date is None:
            self._render_grid(self._content)
        else:
            self._render_detail(self._content, self.state.selected_date)

    def _nav_button(self, parent: tk.Frame, text: str, event: Event) -> tk.Button:
        return tk.Button(
            parent, text=text, font=self.font_bold, width=3,
            command=lambda: self.dispatch(event),
        )

    def _render_grid(self, parent: tk.Frame) -> None:
        colors = self.colors
        anchor = self.state.month_anchor

        # Header: <  Month Year  >
        header = tk.Frame(parent, bg=colors["bg"])
        header.grid(row=0, column=0, columnspan=7, sticky="we", pady=(0, 8))
        header.columnconfigure(1, weight=1)
        self._nav_button(header, "<", PreviousMonth()).grid(row=0, column=0)
        tk.Label(
            header, text=month_label(anchor), font=self.font_header,
            bg=colors["bg"], fg=colors["fg"],
        ).grid(row=0, column=1, sticky="we")
        self._nav_button(header, ">", NextMonth()).grid(row=0, column=2)

        for col, abbr in enumerate(WEEKDAY_ABBR):
            fg = colors["weekend"] if col in (0, 6) else colors["fg"]
            tk.Label(
                parent, text=abbr, font=self.font_bold, width=4,
                bg=colors["bg"], fg=fg,
            ).grid(row=1, column=col)

        for r, week in enumerate(grid_weeks(build_grid(anchor))):
            for c, cell in enumerate(week):
                is_today = cell.date == self._today
                if is_today:
                    bg, fg = colors["accent"], "white"
                elif cell.in_current_month:
                    bg, fg = colors["cell_bg"], colors["fg"]
                else:
                    bg, fg = colors["bg"], colors["muted"]
                tk.Button(
                    parent, text=str(cell.date.day), width=4, relief="flat",
                    font=self.font_bold if is_today else self.font_normal,
                    bg=bg, fg=fg, cursor="hand2",
                    command=lambda d=cell.date: self.dispatch(DateSelected(d)),
                ).grid(row=r + 2, column=c, padx=1, pady=1)

    def _render_detail(self, parent: tk.Frame, day: date) -> None:
        colors = self.colors
        facts = compute_facts(day)

        tk.Button(
            parent, text="Back to Calendar", font=self.font_normal,
            command=lambda: self.dispatch(BackToCalendar()),
        ).pack(anchor="w", pady=(0, 16))

        tk.Label(
            parent, text=f"Date: {format_detail_date(day)}", font=self.font_title,
            bg=colors["bg"], fg=colors["fg"],
        ).pack(anchor="w", pady=(0, 16))

        for line in (
            f"Day of the year: {facts.day_of_year}",
            f"Week number: {facts.iso_week}",
            f"Zodiac sign: {facts.zodiac_sign}",
        ):
            tk.Label(
                parent, text=line, font=self.font_normal,
                bg=colors["bg"], fg=colors["fg"],
            ).pack(anchor="w", pady=(0, 8))
