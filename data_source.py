"""Event data that the selector visualizes as busy-day circles."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectorEvent:
    """A single event on a day. Carries its time for future visualizations."""

    when: datetime | None = None


@dataclass
class SelectorEvents:
    """Events grouped by calendar day."""

    events: dict[date, list[SelectorEvent]] = field(default_factory=dict)

    def add(self, when: datetime) -> None:
        """Record one event at the given date/time."""
        day = when.date() if isinstance(when, datetime) else when
        self.events.setdefault(day, []).append(SelectorEvent(when))

    def count_for(self, day: date) -> int:
        return len(self.events.get(day, ()))

    def counts(self) -> dict[date, int]:
        return {d: len(items) for d, items in self.events.items()}


class DataSource(Protocol):
    def get_date_and_time_data(self, starting: datetime, ending: datetime) -> SelectorEvents:
        """Return the events on and between the starting and ending dates."""


def event_counts(source: DataSource | None, starting: datetime,
                 ending: datetime) -> dict[date, int]:
    """Ask source for a date range and count events per day.

    Days outside [starting, ending] are dropped; days with no events are
    simply absent from the result.
    """
    if source is None:
        return {}
    first = starting.date() if isinstance(starting, datetime) else starting
    last = ending.date() if isinstance(ending, datetime) else ending

    data = source.get_date_and_time_data(starting, ending)
    counts: dict[date, int] = {}
    for day, n in data.counts().items():
        if first <= day <= last:
            counts[day] = n
        else:
            logger.debug("Ignoring %d event(s) on %s outside %s..%s", n, day, first, last)
    return counts
