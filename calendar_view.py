"""Single-month calendar view (tkinter) with busy-day circles."""

import logging
import tkinter as tk
from datetime import date, datetime, time
from tkinter import font as tkfont
from typing import Callable

from calendar_logic import (
    MAX_WEEKS,
    DayCell,
    build_month_grid,
    grid_end,
    grid_fits,
    grid_rows,
    grid_start,
    next_month,
    prev_month,
)
from clock import Clock, SystemClock
from configuration import SelectorConfiguration
from data_source import event_counts
from date_utils import (
    DateFormat,
    abbreviated_weekday_labels,
    formatted_as,
    is_same_month,
    set_time_as,
)
from day_style import ACCENT, RING_THICKNESS, CellStyle, cell_style, palette_for

logger = logging.getLogger(__name__)


class CalendarView(tk.Frame):
    """Month grid with navigation, a "Today" action and a selection ring."""

    def __init__(
        self,
        parent: tk.Misc,
        selected: datetime,
        configuration: SelectorConfiguration,
        clock: Clock | None = None,
        dark_mode: bool = False,
        on_select: Callable[[datetime], None] | None = None,
        cell_size: int = 40,
    ) -> None:
        self.palette = palette_for(dark_mode)
        super().__init__(parent, bg=self.palette.background)
        self.configuration = configuration
        self.clock = clock or SystemClock()
        self.on_select = on_select
        self.cell_size = cell_size

        self.selected: datetime = selected
        self.navigation: datetime = selected
        self.cells: list[DayCell] = []

        # Widget-to-cell mapping (filled during rebuild)
        self._widget_cells: dict[int, DayCell] = {}

        self._setup_fonts()
        self._build_shell()
        self.rebuild()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_header = tkfont.Font(family=base, size=12, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_today = tkfont.Font(family=base, size=10)
        self.font_weekday = tkfont.Font(family=base, size=9, weight="bold")
        self._day_fonts = {
            "light": tkfont.Font(family=base, size=12),
            "medium": tkfont.Font(family=base, size=12, weight="bold"),
            "black": tkfont.Font(family=base, size=13, weight="bold"),
        }

    # ------------------------------------------------------------------
    # Build the widget shell once; rebuild() reuses its pooled cells
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        bg = self.palette.background

        # Navigation row: ◀  Month Year / Today  ▶
        nav = tk.Frame(self, bg=bg)
        nav.pack(fill="x", pady=(8, 4))

        btn_prev = tk.Label(
            nav, text="\u25C0", font=self.font_nav, bg=bg, fg=ACCENT, cursor="hand2",
        )
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self.navigate(-1))

        btn_next = tk.Label(
            nav, text="\u25B6", font=self.font_nav, bg=bg, fg=ACCENT, cursor="hand2",
        )
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self.navigate(1))

        center = tk.Frame(nav, bg=bg)
        center.pack(expand=True)
        self._month_label = tk.Label(
            center, font=self.font_header, bg=bg, fg=self.palette.text,
        )
        self._month_label.pack()
        self._today_label = tk.Label(
            center, font=self.font_today, bg=bg, cursor="hand2",
        )
        self._today_label.pack()
        self._today_label.bind("<Button-1>", lambda _e: self.go_today())

        grid = tk.Frame(self, bg=bg)
        grid.pack(padx=8, pady=(0, 8))

        for col, abbr in enumerate(abbreviated_weekday_labels(self.configuration.first_weekday)):
            tk.Label(
                grid, text=abbr.upper(), font=self.font_weekday, bg=bg,
                fg=self.palette.text, width=4,
            ).grid(row=0, column=col)

        self._day_cells: list[list[tk.Canvas]] = []
        for r in range(MAX_WEEKS):
            row_cells: list[tk.Canvas] = []
            for c in range(7):
                cell = tk.Canvas(
                    grid, width=self.cell_size, height=self.cell_size,
                    bg=bg, highlightthickness=0, borderwidth=0,
                )
                cell.grid(row=r + 1, column=c)
                cell.bind("<ButtonPress-1>", self._on_press)
                row_cells.append(cell)
            self._day_cells.append(row_cells)

    # ------------------------------------------------------------------
    # Cell data
    # ------------------------------------------------------------------
    def generate_cells(self) -> list[DayCell]:
        """Build the cells for the month being shown, counting every visible day."""
        year, month = self.navigation.year, self.navigation.month
        first_weekday = self.configuration.first_weekday
        fixed = self.configuration.fixed_height_grid
        start = datetime.combine(grid_start(year, month, first_weekday), time.min)
        end = datetime.combine(grid_end(year, month, first_weekday, fixed), time(23, 59, 59))
        counts = event_counts(self.configuration.data_source, start, end)
        return build_month_grid(year, month, first_weekday, counts, fixed)

    # ------------------------------------------------------------------
    # Rebuild grid using pooled canvases
    # ------------------------------------------------------------------
    def rebuild(self) -> None:
        # Compute the full cell list before touching any widget
        cells = self.generate_cells()
        self.cells = cells
        self._widget_cells.clear()

        today = self.clock.now().date()
        selected_day = self.selected.date()
        rows = grid_rows(cells)

        for r, row in enumerate(rows):
            for c, cell in enumerate(row):
                canvas = self._day_cells[r][c]
                canvas.grid()
                style = cell_style(cell, selected_day, today, self.configuration, self.palette)
                self._draw_cell(canvas, style)
                self._widget_cells[id(canvas)] = cell

        # Hide rows the month does not need
        for r in range(len(rows), MAX_WEEKS):
            for canvas in self._day_cells[r]:
                canvas.grid_remove()

        self._month_label.configure(text=formatted_as(self.navigation, DateFormat.MONTH_AND_YEAR))
        active = self.select_today_active
        self._today_label.configure(
            text="Select Today" if active else "Today",
            fg=ACCENT if active else self.palette.text,
        )

    def _draw_cell(self, canvas: tk.Canvas, style: CellStyle) -> None:
        canvas.delete("all")
        size = self.cell_size
        ring = max(size - RING_THICKNESS, 1)
        mid = size / 2

        if style.fill_fraction > 0:
            r = ring * style.fill_fraction / 2
            canvas.create_oval(mid - r, mid - r, mid + r, mid + r,
                               fill=style.fill_color, outline="")
        if style.text:
            canvas.create_text(mid, mid, text=style.text, fill=style.text_color,
                               font=self._day_fonts[style.weight])
        if style.selected:
            r = ring / 2
            canvas.create_oval(mid - r, mid - r, mid + r, mid + r,
                               outline=ACCENT, width=RING_THICKNESS)
        canvas.configure(cursor="hand2" if style.text else "")

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    @property
    def select_today_active(self) -> bool:
        """False only while today is selected and this month is shown."""
        now = self.clock.now()
        return not (self.selected.date() == now.date() and is_same_month(self.navigation, now))

    def _on_press(self, event: tk.Event) -> None:
        cell = self._widget_cells.get(id(event.widget))
        if cell is not None and cell.in_month:
            self.select(cell.date)

    def select(self, day: date) -> None:
        """Select day, keeping the currently selected time of day."""
        self.selected = set_time_as(datetime.combine(day, time.min), self.selected)
        self.navigation = self.selected
        logger.debug("Selected %s", self.selected)
        self.rebuild()
        if self.on_select is not None:
            self.on_select(self.selected)

    def set_selected(self, selected: datetime) -> None:
        """Update the selection from outside without notifying on_select."""
        self.selected = selected
        self.rebuild()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def navigate(self, direction: int) -> None:
        """Step direction months; stays put where the grid would leave the date range."""
        step = prev_month if direction < 0 else next_month
        year, month = self.navigation.year, self.navigation.month
        for _ in range(abs(direction)):
            year, month = step(year, month)
        if not grid_fits(year, month, self.configuration.first_weekday,
                         self.configuration.fixed_height_grid):
            logger.debug("Not navigating to %04d-%02d: outside the date range", year, month)
            return
        self.navigation = self.navigation.replace(year=year, month=month, day=1)
        self.rebuild()

    def go_today(self) -> None:
        if self.select_today_active:
            self.select(self.clock.now().date())
