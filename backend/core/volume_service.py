"""
Volume Aggregation for Exercise Charts.

This module reduces the full workout history into per-exercise volume series:
- Chart series over a fixed day/week/month lookback window
- Weekly totals over the entire history (scrollable list)
- Per-day breakdown of a single week (week detail)

Volume is sum(weight x reps) in kilograms. Unit conversion happens only when
the result is displayed, so totals do not depend on the unit preference.
"""
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from domain.calendar import AppCalendar, ChartPeriod
from domain.models import SetRecord, WorkoutRecord


DEFAULT_BUCKET_COUNTS: Dict[ChartPeriod, int] = {
    ChartPeriod.DAY: 7,
    ChartPeriod.WEEK: 8,
    ChartPeriod.MONTH: 6,
}


# =============================================================================
# Response DTOs
# =============================================================================


@dataclass(frozen=True)
class VolumePoint:
    """Total volume for one bucket."""
    date: date  # Bucket start
    volume: float  # kg x reps


@dataclass
class DayDetail:
    """Matching sets logged on one day."""
    date: date
    sets: List[SetRecord] = field(default_factory=list)

    @property
    def volume(self) -> float:
        return sum(s.volume for s in self.sets)


# =============================================================================
# Matching
# =============================================================================


def matches(set_record: SetRecord, exercise_id: str) -> bool:
    """Exact identifier equality. Aliases never take part in aggregation."""
    return set_record.exercise_id == exercise_id


def has_any_history(exercise_id: str, history: Iterable[WorkoutRecord]) -> bool:
    return any(matches(s, exercise_id) for record in history for s in record.sets)


def _bucket_volumes(
    exercise_id: str,
    history: Iterable[WorkoutRecord],
    period: ChartPeriod,
    calendar: AppCalendar,
) -> Dict[date, float]:
    totals: Dict[date, float] = defaultdict(float)
    for record in history:
        matching = [s for s in record.sets if matches(s, exercise_id)]
        if not matching:
            continue
        totals[calendar.bucket_start(record.date, period)] += sum(s.volume for s in matching)
    return totals


# =============================================================================
# Series
# =============================================================================


def exercise_chart_series(
    exercise_id: str,
    history: Iterable[WorkoutRecord],
    period: ChartPeriod,
    calendar: AppCalendar,
    *,
    end: Optional[date] = None,
    bucket_count: Optional[int] = None,
) -> List[VolumePoint]:
    """
    Volume per bucket over a fixed lookback window.

    The window is the ``bucket_count`` consecutive buckets ending with the
    bucket that contains ``end``. Every bucket in the window is returned,
    with 0 for buckets without matching sets, so chart axes stay evenly
    spaced. Records outside the window are ignored.

    Args:
        exercise_id: Canonical exercise identifier
        history: Full persisted history, in any order
        period: Bucket size
        calendar: App calendar providing bucket boundaries
        end: Last day of the window (defaults to today)
        bucket_count: Number of buckets (defaults per period: 7 / 8 / 6)

    Returns:
        VolumePoints sorted ascending by bucket start
    """
    count = bucket_count if bucket_count is not None else DEFAULT_BUCKET_COUNTS[period]
    if count <= 0:
        return []

    last = calendar.bucket_start(end if end is not None else calendar.today(), period)
    starts = [calendar.shift(last, period, offset) for offset in range(-(count - 1), 1)]
    totals = _bucket_volumes(exercise_id, history, period, calendar)
    return [VolumePoint(date=start, volume=totals.get(start, 0.0)) for start in starts]


def weekly_exercise_volumes_all(
    exercise_id: str,
    history: Iterable[WorkoutRecord],
    calendar: AppCalendar,
) -> List[VolumePoint]:
    """
    Weekly volume over the entire history.

    Unlike the chart series there is no window, and weeks whose volume is 0
    are omitted: this feeds a list, not an axis.

    Returns:
        VolumePoints keyed by week start, ascending
    """
    totals = _bucket_volumes(exercise_id, history, ChartPeriod.WEEK, calendar)
    return [
        VolumePoint(date=start, volume=volume)
        for start, volume in sorted(totals.items())
        if volume != 0
    ]


def exercise_week_detail(
    exercise_id: str,
    week_start: date,
    history: Iterable[WorkoutRecord],
    calendar: AppCalendar,
) -> List[DayDetail]:
    """
    Matching sets for each day of one week.

    Args:
        exercise_id: Canonical exercise identifier
        week_start: Any day of the week; snapped to its start
        history: Full persisted history
        calendar: App calendar

    Returns:
        DayDetails for days with matching sets, ascending by date
    """
    start = calendar.start_of_week(week_start)
    end = start + timedelta(days=7)
    days: Dict[date, DayDetail] = {}
    for record in history:
        day = calendar.normalize(record.date)
        if not start <= day < end:
            continue
        matching = [s for s in record.sets if matches(s, exercise_id)]
        if not matching:
            continue
        days.setdefault(day, DayDetail(date=day)).sets.extend(matching)
    return [days[day] for day in sorted(days)]
