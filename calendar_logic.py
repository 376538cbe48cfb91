"""Pure calendar calculations, no UI dependencies."""

from __future__ import annotations

import calendar
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import Union

# Week starts on Sunday unless configured otherwise
DEFAULT_FIRST_WEEKDAY = calendar.SUNDAY

# A month never spans more than six week rows
MAX_WEEKS = 6

EventCounts = Union[Mapping[date, int], Callable[[date], "int | None"], None]


@dataclass(frozen=True)
class DayCell:
    """One square of the month grid."""

    date: date
    in_month: bool
    event_count: int = 0


def check_month(year: int, month: int) -> None:
    """Raise ValueError unless (year, month) names a real calendar month."""
    if not MINYEAR <= year <= MAXYEAR:
        raise ValueError(f"year must be in {MINYEAR}..{MAXYEAR}, got {year!r}")
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month!r}")


def check_weekday(weekday: int) -> None:
    """Raise ValueError unless weekday is 0 (Monday) .. 6 (Sunday)."""
    if weekday not in range(7):
        raise ValueError(f"first weekday must be in 0..6, got {weekday!r}")


def _leading_days(year: int, month: int, first_weekday: int) -> int:
    """Number of overflow days from the previous month in the first row."""
    return (date(year, month, 1).weekday() - first_weekday) % 7


def weeks_in_month(year: int, month: int,
                   first_weekday: int = DEFAULT_FIRST_WEEKDAY) -> int:
    """Return how many week rows (4–6) the month spans."""
    check_month(year, month)
    check_weekday(first_weekday)
    days = calendar.monthrange(year, month)[1]
    return (_leading_days(year, month, first_weekday) + days + 6) // 7


def grid_start(year: int, month: int,
               first_weekday: int = DEFAULT_FIRST_WEEKDAY) -> date:
    """Return the first_weekday on or before the first of the month.

    Raises ValueError when that day falls before date.min.
    """
    check_month(year, month)
    check_weekday(first_weekday)
    try:
        return date(year, month, 1) - timedelta(days=_leading_days(year, month, first_weekday))
    except OverflowError:
        raise ValueError(f"grid for {year:04d}-{month:02d} starts before {date.min}") from None


def grid_weeks(year: int, month: int,
               first_weekday: int = DEFAULT_FIRST_WEEKDAY,
               fixed_height: bool = False) -> int:
    """Number of rows the grid shows."""
    if fixed_height:
        check_month(year, month)
        check_weekday(first_weekday)
        return MAX_WEEKS
    return weeks_in_month(year, month, first_weekday)


def grid_end(year: int, month: int,
             first_weekday: int = DEFAULT_FIRST_WEEKDAY,
             fixed_height: bool = False) -> date:
    """Return the last date shown in the month's grid.

    Raises ValueError when that day falls after date.max.
    """
    weeks = grid_weeks(year, month, first_weekday, fixed_height)
    try:
        return grid_start(year, month, first_weekday) + timedelta(days=weeks * 7 - 1)
    except OverflowError:
        raise ValueError(f"grid for {year:04d}-{month:02d} ends after {date.max}") from None


def grid_fits(year: int, month: int,
              first_weekday: int = DEFAULT_FIRST_WEEKDAY,
              fixed_height: bool = False) -> bool:
    """True if every day of the month's grid is a representable date."""
    try:
        grid_end(year, month, first_weekday, fixed_height)
    except ValueError:
        return False
    return True


def _as_lookup(event_counts: EventCounts) -> Callable[[date], int]:
    if event_counts is None:
        return lambda _d: 0
    if isinstance(event_counts, Mapping):
        return lambda d: event_counts.get(d, 0)
    return lambda d: event_counts(d) or 0


def build_month_grid(
    year: int,
    month: int,
    first_weekday: int = DEFAULT_FIRST_WEEKDAY,
    event_counts: EventCounts = None,
    fixed_height: bool = False,
) -> list[DayCell]:
    """Return every cell of the month grid, row by row.

    The grid covers exactly the weeks the month touches, starting on
    first_weekday, so its length is always 7 × weeks_in_month. With
    fixed_height the grid is padded with trailing days to MAX_WEEKS rows so
    the calendar height stays constant. Days are advanced as calendar dates,
    never as 24-hour offsets. Raises ValueError when the grid would reach
    past date.min or date.max, as in January of year 1 with a Sunday start.

    event_counts is a mapping or a callable keyed by date; dates it does not
    know about count as zero events.
    """
    start = grid_start(year, month, first_weekday)
    grid_end(year, month, first_weekday, fixed_height)  # range check
    total = grid_weeks(year, month, first_weekday, fixed_height) * 7
    lookup = _as_lookup(event_counts)

    cells: list[DayCell] = []
    for offset in range(total):
        d = start + timedelta(days=offset)
        count = lookup(d)
        if count < 0:
            raise ValueError(f"event count for {d} must not be negative, got {count!r}")
        cells.append(DayCell(
            date=d,
            in_month=(d.year == year and d.month == month),
            event_count=count,
        ))
    return cells


def build_grid(
    reference: date,
    first_weekday: int = DEFAULT_FIRST_WEEKDAY,
    event_counts: EventCounts = None,
    fixed_height: bool = False,
) -> list[DayCell]:
    """Grid for the month containing reference (a date or datetime)."""
    return build_month_grid(reference.year, reference.month, first_weekday,
                            event_counts, fixed_height)


def grid_rows(cells: list[DayCell]) -> list[list[DayCell]]:
    """Split a flat grid into rows of seven."""
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        return year + 1, 1
    return year, month + 1
