"""Cell styling rules for the calendar grid."""

from datetime import date

from calendar_logic import DayCell
from configuration import SelectorConfiguration
from day_style import DARK, LIGHT, cell_style

TODAY = date(2023, 9, 7)
WITH_DATA = SelectorConfiguration(data_source=object())


def _style(day, count=0, config=WITH_DATA, selected=date(2023, 9, 1), in_month=True,
           palette=LIGHT):
    return cell_style(DayCell(day, in_month, count), selected, TODAY, config, palette)


def test_overflow_day_is_blank():
    style = _style(date(2023, 8, 30), count=20, in_month=False)
    assert style.text == ""
    assert style.fill_fraction == 0
    assert not style.selected


def test_quiet_future_day():
    style = _style(date(2023, 9, 20))
    assert style.text == "20"
    assert style.weight == "light"
    assert style.fill_fraction == 0
    assert style.text_color == LIGHT.text


def test_busy_days_by_tier():
    normal = _style(date(2023, 9, 15), count=8)
    overly = _style(date(2023, 9, 12), count=11)
    extreme = _style(date(2023, 9, 11), count=16)

    assert normal.weight == "medium"
    assert normal.fill_color == LIGHT.fill
    assert 0.1 < normal.fill_fraction < 1.0
    assert overly.fill_color == LIGHT.overly_full_fill
    assert extreme.fill_color == LIGHT.extremely_full_fill
    assert extreme.fill_fraction == 1.0


def test_today_stays_bold_when_busy():
    assert _style(TODAY).weight == "black"
    assert _style(TODAY, count=8).weight == "black"


def test_past_days_are_muted():
    style = _style(date(2023, 9, 4), count=16, palette=DARK)
    assert style.fill_color == DARK.past_fill
    assert style.text_color == DARK.past_text
    assert style.fill_fraction == 1.0


def test_no_data_source_means_no_circles():
    style = _style(date(2023, 9, 20), count=16, config=SelectorConfiguration())
    assert style.fill_fraction == 0
    assert style.weight == "light"


def test_full_day_count_scales_fill():
    config = WITH_DATA.with_full_day_count(2)
    assert _style(date(2023, 9, 20), count=4, config=config).fill_color == LIGHT.extremely_full_fill


def test_selected_day_gets_ring():
    assert _style(date(2023, 9, 20), selected=date(2023, 9, 20)).selected

