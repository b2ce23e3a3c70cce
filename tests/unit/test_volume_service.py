"""
Unit tests for backend/core/volume_service.py
"""

from datetime import date

import pytest

from backend.core.volume_service import (
    exercise_chart_series,
    exercise_week_detail,
    has_any_history,
    matches,
    weekly_exercise_volumes_all,
)
from domain.calendar import AppCalendar, ChartPeriod
from domain.models import SetRecord

from tests.fakes import make_record


@pytest.fixture
def history():
    return [
        make_record(date(2024, 1, 1), [("A", 100, 5)]),
        make_record(date(2024, 1, 8), [("A", 110, 5)]),
    ]


@pytest.mark.unit
class TestWeeklyVolumes:
    def test_two_weeks_two_buckets(self, history, calendar):
        points = weekly_exercise_volumes_all("A", history, calendar)
        assert [(p.date, p.volume) for p in points] == [
            (date(2024, 1, 1), 500.0),
            (date(2024, 1, 8), 550.0),
        ]

    def test_unknown_exercise_is_empty(self, history, calendar):
        assert weekly_exercise_volumes_all("B", history, calendar) == []

    def test_same_week_sums(self, calendar):
        history = [
            make_record(date(2024, 1, 3), [("A", 100, 5), ("B", 50, 10)]),
            make_record(date(2024, 1, 7), [("A", 50, 2)]),
        ]
        points = weekly_exercise_volumes_all("A", history, calendar)
        assert [(p.date, p.volume) for p in points] == [(date(2024, 1, 1), 600.0)]

    def test_history_order_does_not_matter(self, history, calendar):
        assert weekly_exercise_volumes_all("A", list(reversed(history)), calendar) == (
            weekly_exercise_volumes_all("A", history, calendar)
        )

    def test_week_start_follows_calendar(self, calendar):
        sunday_calendar = AppCalendar(first_weekday=6)
        history = [make_record(date(2024, 1, 7), [("A", 100, 1)])]  # a Sunday
        assert weekly_exercise_volumes_all("A", history, calendar)[0].date == date(2024, 1, 1)
        assert weekly_exercise_volumes_all("A", history, sunday_calendar)[0].date == date(2024, 1, 7)


@pytest.mark.unit
class TestChartSeries:
    def test_day_window_fills_zero_buckets(self, calendar):
        history = [
            make_record(date(2024, 1, 3), [("A", 100, 5)]),
            make_record(date(2024, 1, 6), [("A", 60, 10)]),
            make_record(date(2023, 12, 1), [("A", 999, 1)]),  # outside the window
        ]
        points = exercise_chart_series(
            "A", history, ChartPeriod.DAY, calendar, end=date(2024, 1, 7), bucket_count=7
        )
        assert [p.date for p in points] == [date(2024, 1, d) for d in range(1, 8)]
        assert [p.volume for p in points] == [0.0, 0.0, 500.0, 0.0, 0.0, 600.0, 0.0]
        assert sum(1 for p in points if p.volume == 0) == 5

    def test_default_bucket_counts(self, calendar):
        end = date(2024, 6, 15)
        assert len(exercise_chart_series("A", [], ChartPeriod.DAY, calendar, end=end)) == 7
        assert len(exercise_chart_series("A", [], ChartPeriod.WEEK, calendar, end=end)) == 8
        assert len(exercise_chart_series("A", [], ChartPeriod.MONTH, calendar, end=end)) == 6

    def test_month_window(self, calendar):
        history = [
            make_record(date(2024, 1, 15), [("A", 100, 5)]),
            make_record(date(2024, 3, 2), [("A", 100, 1)]),
        ]
        points = exercise_chart_series(
            "A", history, ChartPeriod.MONTH, calendar, end=date(2024, 3, 31), bucket_count=3
        )
        assert [(p.date, p.volume) for p in points] == [
            (date(2024, 1, 1), 500.0),
            (date(2024, 2, 1), 0.0),
            (date(2024, 3, 1), 100.0),
        ]

    def test_week_window_ends_with_current_week(self, history, calendar):
        points = exercise_chart_series(
            "A", history, ChartPeriod.WEEK, calendar, end=date(2024, 1, 10), bucket_count=2
        )
        assert [(p.date, p.volume) for p in points] == [
            (date(2024, 1, 1), 500.0),
            (date(2024, 1, 8), 550.0),
        ]

    def test_zero_buckets_is_empty(self, history, calendar):
        assert exercise_chart_series("A", history, ChartPeriod.DAY, calendar, bucket_count=0) == []


@pytest.mark.unit
class TestWeekDetail:
    def test_days_with_matching_sets(self, calendar):
        history = [
            make_record(date(2024, 1, 2), [("A", 100, 5), ("B", 20, 10), ("A", 90, 5)]),
            make_record(date(2024, 1, 4), [("B", 20, 10)]),
            make_record(date(2024, 1, 9), [("A", 100, 5)]),
        ]
        days = exercise_week_detail("A", date(2024, 1, 3), history, calendar)
        assert [d.date for d in days] == [date(2024, 1, 2)]
        assert days[0].volume == 950.0
        assert len(days[0].sets) == 2


@pytest.mark.unit
class TestMatching:
    def test_matches_is_exact(self):
        record = SetRecord(exercise_id="bench_press", weight=1, reps=1)
        assert matches(record, "bench_press")
        assert not matches(record, "Bench Press")

    def test_has_any_history(self, history):
        assert has_any_history("A", history)
        assert not has_any_history("B", history)
