"""Busy-day density: how full a day is relative to a "full day" event count."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

DEFAULT_FULL_DAY_COUNT = 10

# Smallest circle drawn for a day with at least one event (fraction of max)
MIN_FILL_FRACTION = 0.1
MAX_FILL_FRACTION = 1.0

OVERLY_FULL_PERCENT = 1.0
EXTREMELY_FULL_PERCENT = 1.5


class DensityTier(Enum):
    NORMAL = "normal"
    OVERLY_FULL = "overly_full"
    EXTREMELY_FULL = "extremely_full"


@dataclass(frozen=True)
class DensityDescriptor:
    percent: float
    fill_fraction: float
    tier: DensityTier

    @property
    def is_empty(self) -> bool:
        return self.fill_fraction == 0


def tier_for(percent: float) -> DensityTier:
    """Map a count/full-day ratio to its tier. Exactly 1.0 is still normal."""
    if percent > EXTREMELY_FULL_PERCENT:
        return DensityTier.EXTREMELY_FULL
    if percent > OVERLY_FULL_PERCENT:
        return DensityTier.OVERLY_FULL
    return DensityTier.NORMAL


@lru_cache(maxsize=512)
def classify(event_count: int,
             full_day_count: int = DEFAULT_FULL_DAY_COUNT) -> DensityDescriptor:
    """Return fill fraction and tier for a day with event_count events.

    The fill grows linearly from MIN_FILL_FRACTION towards MAX_FILL_FRACTION,
    reaching it at full_day_count and never growing past it. Busier days are
    told apart by tier instead.
    """
    if full_day_count <= 0:
        raise ValueError(f"full day count must be positive, got {full_day_count!r}")
    if event_count < 0:
        raise ValueError(f"event count must not be negative, got {event_count!r}")

    percent = event_count / full_day_count
    if event_count == 0:
        fill = 0.0
    else:
        fill = MIN_FILL_FRACTION + (MAX_FILL_FRACTION - MIN_FILL_FRACTION) * percent
        fill = min(fill, MAX_FILL_FRACTION)
    return DensityDescriptor(percent=percent, fill_fraction=fill, tier=tier_for(percent))
