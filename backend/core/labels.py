"""
Display labels for the overview screens (English / Japanese).

Pure formatting helpers for chart axes, weekly list rows and volume values.
Week labels always use the start returned by the app calendar so the labels
agree with the aggregation buckets.
"""
from datetime import date
from typing import Tuple

from domain.calendar import ChartPeriod
from domain.units import WeightUnit, format_weight, unit_label

_MONTHS_EN = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def axis_label(day: date, period: ChartPeriod, is_japanese: bool) -> str:
    """Short label for a chart bucket."""
    if period == ChartPeriod.DAY:
        return f"{day.month}/{day.day}"
    if period == ChartPeriod.WEEK:
        if is_japanese:
            return f"{day.month}/{day.day}週"
        return f"{_MONTHS_EN[day.month - 1]} {day.day} W"
    if is_japanese:
        return f"{day.month}月"
    return _MONTHS_EN[day.month - 1]


def week_range_label(week_start: date, is_japanese: bool) -> str:
    """Row title for one week in the weekly list."""
    if is_japanese:
        return f"{week_start.year}年{week_start.month:02d}月{week_start.day:02d}日週"
    return f"Week of {_MONTHS_EN[week_start.month - 1]} {week_start.day}, {week_start.year}"


def volume_label(unit: WeightUnit, is_japanese: bool) -> str:
    if is_japanese:
        return f"ボリューム({unit_label(unit)})"
    return f"Volume ({unit_label(unit)})"


def volume_parts(volume_kg: float, unit: WeightUnit, locale: str) -> Tuple[str, str]:
    """Volume as (localized number text, unit label)."""
    return format_weight(volume_kg, unit, locale, max_fraction_digits=1), unit_label(unit)
