"""Sample event data for the demo app."""

from datetime import datetime

from clock import Clock
from data_source import SelectorEvents
from date_utils import within

# (events, days from today)
SAMPLE_DAYS: list[tuple[int, int]] = [
    (5, -3),
    (7, -2),
    (8, 0),
    (1, 1),
    (16, 4),   # extremely busy
    (11, 5),   # overly busy
    (10, 8),   # full day
    (7, 10),
]


class SampleDataSource:
    """Fixed set of events around the clock's "today", built on first use."""

    def __init__(self, clock: Clock) -> None:
        self.clock = clock
        self._data: SelectorEvents | None = None

    def _build(self) -> SelectorEvents:
        data = SelectorEvents()
        now = self.clock.now()
        for count, offset in SAMPLE_DAYS:
            for _ in range(count):
                data.add(within(now, days=offset))
        return data

    def get_date_and_time_data(self, starting: datetime, ending: datetime) -> SelectorEvents:
        if self._data is None:
            self._data = self._build()
        in_range = SelectorEvents()
        for day, items in self._data.events.items():
            if starting.date() <= day <= ending.date():
                in_range.events[day] = list(items)
        return in_range
