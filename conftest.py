"""Shared fixtures: a hidden Tk root and a clock fixed on September 7th, 2023."""

from datetime import datetime

import pytest

from clock import FixedClock


@pytest.fixture
def clock():
    return FixedClock(datetime(2023, 9, 7, 10, 30))


@pytest.fixture
def root():
    """Hidden Tk root; skips the test where no display is available."""
    tk = pytest.importorskip("tkinter")
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available for tkinter")
    root.withdraw()
    yield root
    root.destroy()
