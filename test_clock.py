from datetime import datetime

import pytest

from clock import FixedClock, SimulatedClock, SystemClock


def test_system_clock_is_close_to_now():
    before = datetime.now()
    now = SystemClock().now()
    assert before <= now <= datetime.now()


def test_fixed_clock():
    instant = datetime(2023, 9, 7, 8, 30)
    clock = FixedClock(instant)
    assert clock.now() == instant
    assert clock.now() == instant


def test_simulated_clock_overrides_selected_components():
    base = FixedClock(datetime(2026, 10, 19, 14, 15, 16))
    clock = SimulatedClock(year=2023, month=9, day=7, base=base)
    assert clock.now() == datetime(2023, 9, 7, 14, 15, 16)


def test_simulated_clock_time_override():
    base = FixedClock(datetime(2026, 10, 19, 14, 15, 16))
    assert SimulatedClock(hour=9, minute=0, base=base).now() == datetime(2026, 10, 19, 9, 0, 16)


def test_simulated_clock_without_overrides_is_real_time():
    base = FixedClock(datetime(2026, 10, 19, 14, 15, 16))
    assert SimulatedClock(base=base).now() == base.now()


def test_simulated_month_clamps_real_day():
    base = FixedClock(datetime(2024, 1, 31, 10))
    assert SimulatedClock(month=2, base=base).now() == datetime(2024, 2, 29, 10)


def test_simulated_clock_rejects_impossible_date():
    base = FixedClock(datetime(2024, 1, 10))
    with pytest.raises(ValueError):
        SimulatedClock(month=2, day=30, base=base)
