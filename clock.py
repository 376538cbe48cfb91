"""Clock capability: the single source of "now" for the selector."""

from __future__ import annotations

import calendar
from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        """Return the current local date and time."""


class SystemClock:
    """The device's actual date and time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """Always returns the same instant. Handy for tests."""

    __slots__ = ("_instant",)

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant


class SimulatedClock:
    """Real time with selected components overridden.

    ``SimulatedClock(year=2023, month=9, day=7)`` keeps ticking through the
    day but always reports September 7th, 2023. Components left as None come
    from the wrapped clock.
    """

    _FIELDS = ("year", "month", "day", "hour", "minute", "second")

    def __init__(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        base: Clock | None = None,
    ) -> None:
        self._overrides = {
            k: v for k, v in zip(self._FIELDS, (year, month, day, hour, minute, second))
            if v is not None
        }
        self._base = base or SystemClock()
        # Validate eagerly so a bad override fails at construction
        self.now()

    def now(self) -> datetime:
        real = self._base.now()
        if not self._overrides:
            return real
        moved = real.replace(day=1, **{k: v for k, v in self._overrides.items() if k != "day"})
        if "day" in self._overrides:
            return moved.replace(day=self._overrides["day"])
        # The real day may not exist in the overridden month
        last = calendar.monthrange(moved.year, moved.month)[1]
        return moved.replace(day=min(real.day, last))
