"""Date & time selector widget (tkinter).

By default the selector is a row of buttons: the date button opens a calendar
popover and the time button opens a time popover. An expanded configuration
shows the calendar inline instead. Which parts appear follows
``configuration.components``.
"""

import logging
import tkinter as tk
from datetime import datetime
from tkinter import font as tkfont
from typing import Callable

from calendar_view import CalendarView
from clock import Clock, SystemClock
from configuration import SelectorConfiguration
from date_utils import DateFormat, formatted_as, from_twelve_hour, set_time, to_twelve_hour
from day_style import ACCENT, palette_for

logger = logging.getLogger(__name__)

BUTTON_BG = {False: "#F2F2F2", True: "#0D0D0D"}
HOUR_CHOICES = [str(h) for h in range(1, 13)]
MINUTE_CHOICES = [f"{m:02d}" for m in range(60)]
MERIDIEM_CHOICES = ["AM", "PM"]


def time_from_fields(selected: datetime, hour: str, minute: str, meridiem: str) -> datetime:
    """Apply the 12-hour picker fields to selected. Raises ValueError on bad input."""
    if meridiem not in MERIDIEM_CHOICES:
        raise ValueError(f"meridiem must be AM or PM, got {meridiem!r}")
    minutes = int(minute)
    if not 0 <= minutes <= 59:
        raise ValueError(f"minute must be in 0..59, got {minute!r}")
    hours = from_twelve_hour(int(hour), meridiem == "PM")
    return set_time(selected, hours=hours, minutes=minutes)


class TimePicker(tk.Frame):
    """Hour, minute and AM/PM spinners that report each change."""

    def __init__(self, parent: tk.Misc, selected: datetime,
                 on_change: Callable[[datetime], None],
                 dark_mode: bool = False) -> None:
        palette = palette_for(dark_mode)
        super().__init__(parent, bg=palette.background, padx=12, pady=12)
        self.selected = selected
        self.on_change = on_change

        hour12, is_pm = to_twelve_hour(selected.hour)
        self.hour_var = tk.StringVar(value=str(hour12))
        self.minute_var = tk.StringVar(value=f"{selected.minute:02d}")
        self.meridiem_var = tk.StringVar(value="PM" if is_pm else "AM")

        font = tkfont.Font(family="TkDefaultFont", size=14)
        for col, (var, values) in enumerate((
            (self.hour_var, HOUR_CHOICES),
            (self.minute_var, MINUTE_CHOICES),
            (self.meridiem_var, MERIDIEM_CHOICES),
        )):
            spin = tk.Spinbox(
                self, values=values, textvariable=var, width=3, wrap=True,
                font=font, justify="center", command=self._on_spin,
            )
            spin.grid(row=0, column=col * 2, padx=2)
            spin.bind("<Return>", lambda _e: self._on_spin())
            if col == 0:
                tk.Label(self, text=":", font=font, bg=palette.background,
                         fg=palette.text).grid(row=0, column=1)
        # Spinbox(values=...) resets its variable to the first value
        self.hour_var.set(str(hour12))
        self.minute_var.set(f"{selected.minute:02d}")
        self.meridiem_var.set("PM" if is_pm else "AM")

    def _on_spin(self) -> None:
        try:
            new = time_from_fields(self.selected, self.hour_var.get(),
                                   self.minute_var.get(), self.meridiem_var.get())
        except ValueError:
            logger.debug("Ignoring incomplete time entry")
            return
        self.selected = new
        self.on_change(new)


class DateAndTimeSelector(tk.Frame):
    """A configurable, data-driven widget for picking a date and a time."""

    def __init__(
        self,
        parent: tk.Misc,
        selected: datetime,
        configuration: SelectorConfiguration | None = None,
        clock: Clock | None = None,
        dark_mode: bool = False,
        on_change: Callable[[datetime], None] | None = None,
    ) -> None:
        self.palette = palette_for(dark_mode)
        super().__init__(parent, bg=self.palette.background)
        self.configuration = configuration or SelectorConfiguration()
        self.clock = clock or SystemClock()
        self.dark_mode = dark_mode
        self.on_change = on_change
        self.selected = selected

        self.calendar_view: CalendarView | None = None
        self._date_button: tk.Label | None = None
        self._time_button: tk.Label | None = None
        self._popover: tk.Toplevel | None = None

        if self.configuration.is_expanded:
            self._build_expanded()
        else:
            self._build_buttons()

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def _build_expanded(self) -> None:
        components = self.configuration.components
        if components.has_date:
            self.calendar_view = CalendarView(
                self, self.selected, self.configuration, self.clock,
                dark_mode=self.dark_mode, on_select=self._on_calendar_select,
            )
            self.calendar_view.pack(fill="both", expand=True)
        if components.has_time:
            row = tk.Frame(self, bg=self.palette.background)
            row.pack(pady=4)
            self._time_button = self._make_button(row, self.open_time_popover)
        self._refresh_labels()

    def _build_buttons(self) -> None:
        components = self.configuration.components
        if components.has_date:
            self._date_button = self._make_button(self, self.open_calendar_popover)
        if components.has_time:
            self._time_button = self._make_button(self, self.open_time_popover)
        self._refresh_labels()

    def _make_button(self, parent: tk.Misc, command: Callable[[], None]) -> tk.Label:
        btn = tk.Label(
            parent, bg=BUTTON_BG[self.dark_mode], fg=ACCENT,
            padx=13, pady=5, cursor="hand2",
        )
        btn.pack(side="left", padx=2)
        btn.bind("<Button-1>", lambda _e: command())
        return btn

    def _refresh_labels(self) -> None:
        if self._date_button is not None:
            self._date_button.configure(
                text=formatted_as(self.selected, DateFormat.ABBREVIATED_MONTH_DAY_YEAR))
        if self._time_button is not None:
            self._time_button.configure(
                text=formatted_as(self.selected, DateFormat.HOUR_MINUTES))

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def set_selected(self, selected: datetime) -> None:
        """Change the selection, update every part of the widget and notify."""
        self.selected = selected
        self._refresh_labels()
        if self.calendar_view is not None:
            self.calendar_view.set_selected(selected)
        logger.info("Selection changed to %s", formatted_as(selected))
        if self.on_change is not None:
            self.on_change(selected)

    def _on_calendar_select(self, selected: datetime) -> None:
        self.set_selected(selected)
        if self.configuration.should_dismiss_on_selection:
            self.dismiss()

    def dismiss(self) -> None:
        """Close the popover window holding this selector, if there is one."""
        top = self.winfo_toplevel()
        if isinstance(top, tk.Toplevel):
            top.destroy()

    # ------------------------------------------------------------------
    # Popovers
    # ------------------------------------------------------------------
    def _open_popover(self, title: str) -> tk.Toplevel:
        self.close_popover()
        pop = tk.Toplevel(self)
        pop.title(title)
        pop.resizable(False, False)
        pop.configure(bg=self.palette.background)
        pop.transient(self.winfo_toplevel())
        x = self.winfo_rootx()
        y = self.winfo_rooty() + self.winfo_height() + 4
        pop.geometry(f"+{x}+{y}")
        pop.bind("<Escape>", lambda _e: pop.destroy())
        self._popover = pop
        return pop

    def close_popover(self) -> None:
        if self._popover is not None and self._popover.winfo_exists():
            self._popover.destroy()
        self._popover = None

    def open_calendar_popover(self) -> None:
        pop = self._open_popover("Select Date")
        inner = DateAndTimeSelector(
            pop, self.selected,
            self.configuration.date_only().expanded().dismiss_on_selection(),
            self.clock, dark_mode=self.dark_mode, on_change=self.set_selected,
        )
        inner.pack(fill="both", expand=True)

    def open_time_popover(self) -> None:
        pop = self._open_popover("Select Time")
        TimePicker(pop, self.selected, self.set_selected, dark_mode=self.dark_mode).pack()
