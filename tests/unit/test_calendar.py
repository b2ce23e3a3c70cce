"""
Unit tests for domain/calendar.py
"""

from datetime import date, datetime, timezone

import pytest

from domain.calendar import AppCalendar, ChartPeriod, weekday_index


@pytest.mark.unit
class TestNormalize:
    def test_date_is_unchanged(self):
        assert AppCalendar().normalize(date(2024, 1, 10)) == date(2024, 1, 10)

    def test_naive_datetime_keeps_its_day(self):
        assert AppCalendar().normalize(datetime(2024, 1, 10, 23, 59)) == date(2024, 1, 10)

    def test_aware_datetime_is_projected_into_zone(self):
        calendar = AppCalendar(timezone="Asia/Tokyo")
        moment = datetime(2024, 1, 10, 16, 0, tzinfo=timezone.utc)  # 01:00 next day in Tokyo
        assert calendar.normalize(moment) == date(2024, 1, 11)

    def test_same_day_different_times_share_a_key(self):
        calendar = AppCalendar()
        assert calendar.normalize(datetime(2024, 3, 5, 0, 1)) == calendar.normalize(
            datetime(2024, 3, 5, 22, 30)
        )


@pytest.mark.unit
class TestBuckets:
    def test_week_starts_on_monday_by_default(self):
        # 2024-01-10 is a Wednesday
        assert AppCalendar().start_of_week(date(2024, 1, 10)) == date(2024, 1, 8)

    def test_week_start_is_configurable(self):
        calendar = AppCalendar(first_weekday=weekday_index("sunday"))
        assert calendar.start_of_week(date(2024, 1, 10)) == date(2024, 1, 7)
        assert calendar.start_of_week(date(2024, 1, 7)) == date(2024, 1, 7)

    def test_month_bucket(self):
        assert AppCalendar().bucket_start(date(2024, 2, 29), ChartPeriod.MONTH) == date(2024, 2, 1)

    def test_day_bucket(self):
        assert AppCalendar().bucket_start(date(2024, 2, 29), ChartPeriod.DAY) == date(2024, 2, 29)

    def test_shift_months_across_year(self):
        calendar = AppCalendar()
        assert calendar.shift(date(2024, 1, 1), ChartPeriod.MONTH, -2) == date(2023, 11, 1)
        assert calendar.shift(date(2023, 12, 1), ChartPeriod.MONTH, 1) == date(2024, 1, 1)

    def test_shift_weeks_and_days(self):
        calendar = AppCalendar()
        assert calendar.shift(date(2024, 1, 8), ChartPeriod.WEEK, -1) == date(2024, 1, 1)
        assert calendar.shift(date(2024, 1, 1), ChartPeriod.DAY, -1) == date(2023, 12, 31)


@pytest.mark.unit
class TestValidation:
    def test_invalid_weekday_raises(self):
        with pytest.raises(ValueError):
            AppCalendar(first_weekday=7)

    def test_unknown_weekday_name_raises(self):
        with pytest.raises(ValueError):
            weekday_index("someday")

    def test_weekday_name_is_case_insensitive(self):
        assert weekday_index(" Monday ") == 0
