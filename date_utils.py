"""Date arithmetic helpers used by the selector widgets.

Functions take and return naive local ``datetime`` objects unless noted.
Anything that needs "now" takes a clock instead of reading the system time.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from enum import Enum

from calendar_logic import DEFAULT_FIRST_WEEKDAY, check_weekday
from calendar_logic import weeks_in_month as _weeks_in_month
from clock import Clock


class DateFormat(Enum):
    UTC = "%Y-%m-%dT%H:%M:%SZ"
    MONTH_AND_YEAR = "%B %Y"
    YEAR_MONTH_DAY = "%Y-%m-%d"
    YEAR_MONTH_DAY_SHORT = "%y%m%d"
    MONTH_DAY_YEAR = "%B {day}, %Y"
    ABBREVIATED_MONTH_DAY_YEAR = "%b {day}, %Y"
    WEEK_DAY = "%A"
    ABBREVIATED_WEEK_DAY = "%a"
    MONTH_AND_DAY_OF_MONTH = "%B {day}"
    ABBREVIATED_MONTH_AND_DAY_OF_MONTH = "%b {day}"
    HOUR_MINUTES = "{hour}:%M %p"
    HOUR_MINUTES_SECONDS = "%I:%M:%S %p"
    DATE_AND_TIME = "%b {day}, %Y %I:%M:%S %p"


def formatted_as(d: datetime, fmt: DateFormat = DateFormat.DATE_AND_TIME) -> str:
    """Format with one of the common DateFormat patterns.

    Day of month and 12-hour clock hour are written without padding
    ("Sep 7, 2023", "9:05 AM").
    """
    hour12, _is_pm = to_twelve_hour(getattr(d, "hour", 0))
    pattern = fmt.value.replace("{day}", str(d.day)).replace("{hour}", str(hour12))
    return d.strftime(pattern)


# ------------------------------------------------------------------
# Day / week / month boundaries
# ------------------------------------------------------------------
def beginning_of_day(d: datetime) -> datetime:
    return datetime.combine(_as_date(d), time.min)


def end_of_day(d: datetime) -> datetime:
    return datetime.combine(_as_date(d), time(23, 59, 59))


def beginning_of_week(d: datetime, first_weekday: int = DEFAULT_FIRST_WEEKDAY) -> datetime:
    """Midnight of the first_weekday on or before d."""
    check_weekday(first_weekday)
    day = _as_date(d)
    back = (day.weekday() - first_weekday) % 7
    return datetime.combine(day - timedelta(days=back), time.min)


def beginning_of_month(d: datetime) -> datetime:
    return datetime(d.year, d.month, 1)


def end_of_month(d: datetime) -> datetime:
    last = calendar.monthrange(d.year, d.month)[1]
    return datetime(d.year, d.month, last, 23, 59, 59)


def weeks_in_month(d: datetime, first_weekday: int = DEFAULT_FIRST_WEEKDAY) -> int:
    return _weeks_in_month(d.year, d.month, first_weekday)


def is_same_month(a: datetime, b: datetime) -> bool:
    return (a.year, a.month) == (b.year, b.month)


# ------------------------------------------------------------------
# Relative to the clock
# ------------------------------------------------------------------
def today(clock: Clock) -> datetime:
    """Midnight of the clock's current day."""
    return beginning_of_day(clock.now())


def is_today(d: datetime, clock: Clock) -> bool:
    return _as_date(d) == clock.now().date()


def is_this_month(d: datetime, clock: Clock) -> bool:
    return is_same_month(d, clock.now())


def is_in_the_past(d: datetime, clock: Clock) -> bool:
    """True for any day before today; earlier today does not count."""
    return _as_date(d) < clock.now().date()


# ------------------------------------------------------------------
# Arithmetic
# ------------------------------------------------------------------
def within(
    d: datetime,
    years: int = 0,
    months: int = 0,
    weeks: int = 0,
    days: int = 0,
    hours: int = 0,
    minutes: int = 0,
    seconds: int = 0,
) -> datetime:
    """Shift d by the given amounts (any of which may be negative).

    Years and months move the calendar month and clamp the day to the length
    of the target month (Jan 31 + 1 month is Feb 28/29). The rest are
    calendar-day and clock offsets.
    """
    if years or months:
        total = d.year * 12 + (d.month - 1) + years * 12 + months
        year, month = divmod(total, 12)
        month += 1
        last = calendar.monthrange(year, month)[1]
        d = d.replace(year=year, month=month, day=min(d.day, last))
    return d + timedelta(weeks=weeks, days=days, hours=hours,
                         minutes=minutes, seconds=seconds)


def set_time(
    d: datetime,
    hours: int | None = None,
    minutes: int | None = None,
    seconds: int | None = None,
) -> datetime:
    """Replace the given time components, keeping the others."""
    return d.replace(
        hour=d.hour if hours is None else hours,
        minute=d.minute if minutes is None else minutes,
        second=d.second if seconds is None else seconds,
    )


def set_time_as(d: datetime, other: datetime) -> datetime:
    """d's calendar day at other's time of day."""
    return datetime.combine(_as_date(d), time(other.hour, other.minute, other.second))


# ------------------------------------------------------------------
# 12-hour clock
# ------------------------------------------------------------------
def to_twelve_hour(hour: int) -> tuple[int, bool]:
    """Return (1..12, is_pm) for a 0..23 hour. Midnight is 12 AM."""
    if not 0 <= hour <= 23:
        raise ValueError(f"hour must be in 0..23, got {hour!r}")
    hour12 = hour % 12 or 12
    return hour12, hour >= 12


def from_twelve_hour(hour12: int, is_pm: bool) -> int:
    """Inverse of to_twelve_hour."""
    if not 1 <= hour12 <= 12:
        raise ValueError(f"hour must be in 1..12, got {hour12!r}")
    return hour12 % 12 + (12 if is_pm else 0)


# ------------------------------------------------------------------
# Labels
# ------------------------------------------------------------------
def abbreviated_weekday_labels(first_weekday: int = DEFAULT_FIRST_WEEKDAY) -> list[str]:
    """Localized short weekday names ("Sun", "Mon", …) starting at first_weekday."""
    check_weekday(first_weekday)
    return [calendar.day_abbr[(first_weekday + i) % 7] for i in range(7)]


def _as_date(d: date) -> date:
    return d.date() if isinstance(d, datetime) else d
