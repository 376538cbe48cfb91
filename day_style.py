"""Colours and per-day styling for the calendar grid, no UI dependencies."""

from dataclasses import dataclass
from datetime import date

from calendar_logic import DayCell
from configuration import SelectorConfiguration
from density import DensityTier, classify

# Colours
ACCENT = "#0078D4"
RING_THICKNESS = 3


@dataclass(frozen=True)
class Palette:
    background: str
    text: str
    past_text: str
    fill: str
    past_fill: str
    overly_full_fill: str
    extremely_full_fill: str


LIGHT = Palette(
    background="white",
    text="black",
    past_text="#BFBFBF",
    fill="#D9D9D9",
    past_fill="#F4F4F4",
    overly_full_fill="#FFD17A",
    extremely_full_fill="#FF7D73",
)

DARK = Palette(
    background="black",
    text="white",
    past_text="#2E2E2E",
    fill="#4D4D4D",
    past_fill="#1A1A1A",
    overly_full_fill="#A68038",
    extremely_full_fill="#B33B33",
)


def palette_for(dark_mode: bool) -> Palette:
    return DARK if dark_mode else LIGHT


@dataclass(frozen=True)
class CellStyle:
    text: str
    text_color: str
    weight: str  # "light", "medium" or "black"
    fill_color: str
    fill_fraction: float
    selected: bool


def cell_style(cell: DayCell, selected_day: date, today: date,
               configuration: SelectorConfiguration, palette: Palette) -> CellStyle:
    """Decide how a day cell looks. Overflow days render blank."""
    if not cell.in_month:
        return CellStyle("", palette.text, "light", palette.fill, 0.0, False)

    is_today = cell.date == today
    weight = "black" if is_today else "light"
    fill_color = palette.fill
    fill_fraction = 0.0
    if configuration.data_source is not None and cell.event_count > 0:
        if not is_today:
            weight = "medium"
        density = classify(cell.event_count, configuration.full_day_count)
        fill_fraction = density.fill_fraction
        if density.tier is DensityTier.OVERLY_FULL:
            fill_color = palette.overly_full_fill
        elif density.tier is DensityTier.EXTREMELY_FULL:
            fill_color = palette.extremely_full_fill

    text_color = palette.text
    if cell.date < today:
        fill_color = palette.past_fill
        text_color = palette.past_text

    return CellStyle(
        text=str(cell.date.day),
        text_color=text_color,
        weight=weight,
        fill_color=fill_color,
        fill_fraction=fill_fraction,
        selected=cell.date == selected_day,
    )

