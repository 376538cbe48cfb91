"""Immutable selector configuration.

Each builder method returns a modified copy, so configurations can be shared
between selectors and chained::

    config = SelectorConfiguration().date_only().expanded().with_data_source(src)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from calendar_logic import DEFAULT_FIRST_WEEKDAY, check_weekday
from data_source import DataSource
from density import DEFAULT_FULL_DAY_COUNT


class Components(Enum):
    DATE_AND_TIME = "date_and_time"
    DATE = "date"
    TIME = "time"

    @property
    def has_date(self) -> bool:
        return self is not Components.TIME

    @property
    def has_time(self) -> bool:
        return self is not Components.DATE


@dataclass(frozen=True)
class SelectorConfiguration:
    components: Components = Components.DATE_AND_TIME
    is_expanded: bool = False
    data_source: DataSource | None = None
    full_day_count: int = DEFAULT_FULL_DAY_COUNT
    should_dismiss_on_selection: bool = False
    first_weekday: int = DEFAULT_FIRST_WEEKDAY
    fixed_height_grid: bool = False

    def __post_init__(self) -> None:
        if self.full_day_count <= 0:
            raise ValueError(f"full day count must be positive, got {self.full_day_count!r}")
        check_weekday(self.first_weekday)

    def date_only(self) -> SelectorConfiguration:
        return replace(self, components=Components.DATE)

    def time_only(self) -> SelectorConfiguration:
        return replace(self, components=Components.TIME)

    def expanded(self) -> SelectorConfiguration:
        return replace(self, is_expanded=True)

    def with_data_source(self, data_source: DataSource | None) -> SelectorConfiguration:
        return replace(self, data_source=data_source)

    def with_full_day_count(self, count: int) -> SelectorConfiguration:
        """How many events make a day "full" (circle at max size)."""
        return replace(self, full_day_count=count)

    def dismiss_on_selection(self) -> SelectorConfiguration:
        return replace(self, should_dismiss_on_selection=True)

    def with_first_weekday(self, weekday: int) -> SelectorConfiguration:
        return replace(self, first_weekday=weekday)

    def fixed_height(self) -> SelectorConfiguration:
        """Always show six week rows so the calendar height never changes."""
        return replace(self, fixed_height_grid=True)
