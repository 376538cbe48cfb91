import calendar
from datetime import date, datetime, timedelta

import pytest

from calendar_logic import (
    MAX_WEEKS,
    build_grid,
    build_month_grid,
    grid_end,
    grid_fits,
    grid_rows,
    grid_start,
    next_month,
    prev_month,
    weeks_in_month,
)

ALL_MONTHS = [(y, m) for y in (2023, 2024) for m in range(1, 13)]


def test_september_2023_sunday_start():
    cells = build_month_grid(2023, 9, calendar.SUNDAY)
    assert cells[0].date == date(2023, 8, 27)
    assert cells[0].date.weekday() == calendar.SUNDAY
    # Sep 30 2023 is a Saturday, so five rows cover the month
    assert cells[-1].date == date(2023, 9, 30)
    assert len(cells) == 35
    sep7 = next(c for c in cells if c.date == date(2023, 9, 7))
    assert sep7.in_month


def test_september_2023_fixed_height_runs_to_october_7():
    cells = build_month_grid(2023, 9, calendar.SUNDAY, fixed_height=True)
    assert len(cells) == 42
    assert cells[0].date == date(2023, 8, 27)
    assert cells[-1].date == date(2023, 10, 7)
    assert not cells[-1].in_month


def test_september_2023_monday_start():
    cells = build_month_grid(2023, 9, calendar.MONDAY)
    assert cells[0].date == date(2023, 8, 28)
    assert cells[-1].date == date(2023, 10, 1)
    assert len(cells) == 35


def test_six_week_month():
    # Dec 1 2023 is a Friday and the month has 31 days
    cells = build_month_grid(2023, 12, calendar.SUNDAY)
    assert len(cells) == 42
    assert cells[0].date == date(2023, 11, 26)
    assert cells[-1].date == date(2024, 1, 6)


def test_four_week_month_gets_no_overflow_week():
    # Feb 1 2015 is a Sunday and the month has 28 days
    cells = build_month_grid(2015, 2, calendar.SUNDAY)
    assert len(cells) == 28
    assert all(c.in_month for c in cells)
    assert cells[0].date == date(2015, 2, 1)


@pytest.mark.parametrize("year,month", ALL_MONTHS)
@pytest.mark.parametrize("first_weekday", range(7))
def test_grid_shape(year, month, first_weekday):
    cells = build_month_grid(year, month, first_weekday)

    assert len(cells) % 7 == 0
    assert len(cells) == 7 * weeks_in_month(year, month, first_weekday)
    assert 4 <= len(cells) // 7 <= MAX_WEEKS
    assert cells[0].date.weekday() == first_weekday
    assert cells[0].date <= date(year, month, 1)
    assert cells[0].date > date(year, month, 1) - timedelta(days=7)
    for a, b in zip(cells, cells[1:]):
        assert b.date - a.date == timedelta(days=1)
    assert cells[0].date == grid_start(year, month, first_weekday)
    assert cells[-1].date == grid_end(year, month, first_weekday)


@pytest.mark.parametrize("year,month", ALL_MONTHS)
def test_in_month_flags(year, month):
    cells = build_month_grid(year, month)
    in_month = [c.date for c in cells if c.in_month]
    days = calendar.monthrange(year, month)[1]
    assert in_month == [date(year, month, d) for d in range(1, days + 1)]
    for c in cells:
        assert c.in_month == ((c.date.year, c.date.month) == (year, month))


def test_grid_spans_daylight_saving_change():
    # US and EU clocks change in March 2024; dates must still be contiguous
    cells = build_month_grid(2024, 3)
    assert [c.date.day for c in cells if c.in_month] == list(range(1, 32))


def test_build_grid_uses_only_year_and_month():
    a = build_grid(datetime(2024, 2, 17, 15, 30))
    b = build_month_grid(2024, 2)
    assert a == b


def test_event_counts_from_mapping():
    counts = {date(2023, 9, 7): 8, date(2023, 8, 30): 2, date(2030, 1, 1): 99}
    cells = build_month_grid(2023, 9, event_counts=counts)
    by_date = {c.date: c.event_count for c in cells}
    assert by_date[date(2023, 9, 7)] == 8
    assert by_date[date(2023, 8, 30)] == 2
    assert by_date[date(2023, 9, 8)] == 0


def test_event_counts_from_callable():
    def lookup(d):
        return 3 if d.day == 15 else None

    cells = build_month_grid(2023, 9, event_counts=lookup)
    assert {c.date for c in cells if c.event_count == 3} == {date(2023, 9, 15)}


def test_negative_event_count_rejected():
    with pytest.raises(ValueError):
        build_month_grid(2023, 9, event_counts={date(2023, 9, 1): -1})


@pytest.mark.parametrize("year,month", [(2023, 0), (2023, 13), (0, 5), (10000, 1)])
def test_invalid_month_rejected(year, month):
    with pytest.raises(ValueError):
        build_month_grid(year, month)


@pytest.mark.parametrize("year,month", [(1, 1), (9999, 12)])
def test_grid_past_date_range_rejected(year, month):
    # Sunday-start grids for these months need days before 0001-01-01 or after 9999-12-31
    assert not grid_fits(year, month)
    with pytest.raises(ValueError):
        build_month_grid(year, month)
    with pytest.raises(ValueError):
        build_month_grid(year, month, fixed_height=True)


def test_grid_at_date_range_edges_when_weeks_line_up():
    first = build_month_grid(1, 1, date.min.weekday())
    assert first[0].date == date.min
    assert grid_fits(1, 1, date.min.weekday())

    last_weekday = (date.max.weekday() + 1) % 7
    last = build_month_grid(9999, 12, last_weekday)
    assert last[-1].date == date.max
    assert grid_end(9999, 12, last_weekday) == date.max


@pytest.mark.parametrize("weekday", [-1, 7])
def test_invalid_first_weekday_rejected(weekday):
    with pytest.raises(ValueError):
        build_month_grid(2023, 9, weekday)


def test_grid_rows():
    rows = grid_rows(build_month_grid(2023, 12))
    assert len(rows) == 6
    assert all(len(r) == 7 for r in rows)


def test_month_stepping():
    assert prev_month(2024, 1) == (2023, 12)
    assert prev_month(2024, 5) == (2024, 4)
    assert next_month(2023, 12) == (2024, 1)
    assert next_month(2024, 5) == (2024, 6)
