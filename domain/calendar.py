"""
Calendar normalization for cache keys and aggregation buckets.

All date comparisons in the application go through a single AppCalendar so the
draft cache, the persisted store and the chart buckets agree on what "the same
day" and "the same week" mean, independent of the host's local timezone.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Union
from zoneinfo import ZoneInfo

DateLike = Union[date, datetime]

WEEKDAY_NAMES = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


class ChartPeriod(str, Enum):
    """Bucket size for volume aggregation."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class AppCalendar:
    """
    The application's fixed calendar.

    Attributes:
        timezone: IANA zone used to project aware datetimes onto a day
        first_weekday: 0 = Monday ... 6 = Sunday
    """

    timezone: str = "UTC"
    first_weekday: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.first_weekday <= 6:
            raise ValueError(f"first_weekday must be in 0..6, got {self.first_weekday}")
        ZoneInfo(self.timezone)

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    def normalize(self, value: DateLike) -> date:
        """
        Start-of-day for a date or datetime.

        Aware datetimes are converted into the calendar's zone first; naive
        datetimes are taken as already local to the calendar.
        """
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone(self.tzinfo)
            return value.date()
        return value

    def today(self) -> date:
        return datetime.now(self.tzinfo).date()

    def start_of_week(self, value: DateLike) -> date:
        day = self.normalize(value)
        offset = (day.weekday() - self.first_weekday) % 7
        return day - timedelta(days=offset)

    def start_of_month(self, value: DateLike) -> date:
        return self.normalize(value).replace(day=1)

    def bucket_start(self, value: DateLike, period: ChartPeriod) -> date:
        if period == ChartPeriod.WEEK:
            return self.start_of_week(value)
        if period == ChartPeriod.MONTH:
            return self.start_of_month(value)
        return self.normalize(value)

    def shift(self, start: date, period: ChartPeriod, count: int) -> date:
        """Move a bucket start by ``count`` periods (negative goes back)."""
        if period == ChartPeriod.DAY:
            return start + timedelta(days=count)
        if period == ChartPeriod.WEEK:
            return start + timedelta(weeks=count)
        months = start.year * 12 + (start.month - 1) + count
        return date(months // 12, months % 12 + 1, 1)


def weekday_index(name: str) -> int:
    """Map a weekday name ("monday") to its index (0)."""
    key = name.strip().lower()
    if key not in WEEKDAY_NAMES:
        raise ValueError(f"Unknown weekday '{name}'. Must be one of: {WEEKDAY_NAMES}")
    return WEEKDAY_NAMES.index(key)
