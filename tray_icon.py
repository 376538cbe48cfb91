"""System-tray icon for the demo app via pystray."""

from datetime import date
from typing import Callable

import pystray
from PIL import Image
from pystray import Menu, MenuItem

from date_utils import DateFormat, formatted_as


def create_tray(
    icon_image: Image.Image,
    today: date,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_toggle_dark: Callable[[], None] | None = None,
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    items: list[MenuItem | Menu] = [
        MenuItem("Show Selectors", lambda _icon, _item: on_show(), default=True),
    ]
    if on_toggle_dark is not None:
        items.append(MenuItem("Toggle Dark Mode", lambda _icon, _item: on_toggle_dark()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    title = f"Date & Time Selector – {formatted_as(today, DateFormat.ABBREVIATED_MONTH_DAY_YEAR)}"
    return pystray.Icon("date-time-selector", icon_image, title, Menu(*items))
