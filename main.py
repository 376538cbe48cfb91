"""Demo app: pystray on a daemon thread, the tkinter selectors on the main thread."""

import ctypes
import logging
import sys
import threading
import tkinter as tk
from datetime import datetime

from PIL import ImageTk

from clock import Clock, SimulatedClock
from configuration import SelectorConfiguration
from day_style import palette_for
from icon_gen import create_icon_image
from sample_data import SampleDataSource
from selector import DateAndTimeSelector
from settings import configuration_from_settings, load_settings, save_settings
from tray_icon import create_tray

logger = logging.getLogger(__name__)


class DemoWindow:
    """One window showing the selector in each of its presentations."""

    def __init__(self, clock: Clock, settings: dict) -> None:
        self.clock = clock
        self.settings = settings
        self.data_source = SampleDataSource(clock)

        self.root = tk.Tk()
        self.root.title("Date & Time Selector Demo")
        self.root.minsize(480, 640)
        self._icon = ImageTk.PhotoImage(create_icon_image(clock.now().date()))
        self.root.iconphoto(True, self._icon)

        now = clock.now()
        self.dates: dict[str, datetime] = {
            key: now for key, _title, _config in self._sections()
        }
        self._content: tk.Frame | None = None
        self._build()

        self.root.protocol("WM_DELETE_WINDOW", self.hide)

    def _sections(self) -> list[tuple[str, str, SelectorConfiguration]]:
        configured = configuration_from_settings(self.settings, self.data_source)
        base = (SelectorConfiguration()
                .with_first_weekday(configured.first_weekday)
                .with_full_day_count(configured.full_day_count))
        src = self.data_source
        return [
            # Drop .date_only() to get a time button under the calendar
            ("expanded", "Expanded Date & Time Selector:",
             base.date_only().expanded().with_data_source(src)),
            ("date_and_time", "Date & Time Selector as Button:",
             base.with_data_source(src)),
            ("date_only", "Date Only Selector as Button:",
             base.date_only().with_data_source(src)),
            ("time_only", "Time Only Selector as Button:",
             base.time_only()),
            ("configured", "Selector from Settings:", configured),
        ]

    def _build(self) -> None:
        if self._content is not None:
            self._content.destroy()
        dark = self.settings["dark_mode"]
        palette = palette_for(dark)
        self.root.configure(bg=palette.background)

        self._content = tk.Frame(self.root, bg=palette.background, padx=12, pady=8)
        self._content.pack(fill="both", expand=True)

        for key, title, config in self._sections():
            tk.Label(
                self._content, text=title.upper(), bg=palette.background,
                fg=palette.past_text,
            ).pack(pady=(16, 4))

            def _remember(selected: datetime, k=key) -> None:
                self.dates[k] = selected

            DateAndTimeSelector(
                self._content, self.dates[key], config, self.clock,
                dark_mode=dark, on_change=_remember,
            ).pack()

    def toggle_dark_mode(self) -> None:
        self.settings["dark_mode"] = not self.settings["dark_mode"]
        save_settings(self.settings)
        self._build()

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.root.deiconify()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self.root.withdraw()


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # DPI awareness so fonts are crisp on Hi-DPI monitors
    if sys.platform == "win32":
        try:
            ctypes.windll.shcore.SetProcessDpiAwareness(1)
        except (AttributeError, OSError):
            logger.debug("DPI awareness not available")

    # Simulate "today" as September 7th, 2023 so the sample data lines up
    clock = SimulatedClock(year=2023, month=9, day=7)
    demo = DemoWindow(clock, load_settings())

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        demo.root.after(0, demo.toggle)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            demo.root.destroy()
        demo.root.after(0, _quit)

    def on_toggle_dark() -> None:
        demo.root.after(0, demo.toggle_dark_mode)

    tray = create_tray(create_icon_image(clock.now().date()), clock.now().date(),
                       on_show, on_exit, on_toggle_dark=on_toggle_dark)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    # tkinter main loop on the main thread
    demo.root.mainloop()


if __name__ == "__main__":
    main()
