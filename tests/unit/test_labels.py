"""
Unit tests for backend/core/labels.py
"""

from datetime import date

import pytest

from backend.core.labels import axis_label, volume_label, volume_parts, week_range_label
from domain.calendar import ChartPeriod
from domain.units import WeightUnit


@pytest.mark.unit
class TestAxisLabel:
    def test_day(self):
        assert axis_label(date(2024, 3, 5), ChartPeriod.DAY, is_japanese=False) == "3/5"

    def test_week(self):
        assert axis_label(date(2024, 3, 4), ChartPeriod.WEEK, is_japanese=False) == "Mar 4 W"
        assert axis_label(date(2024, 3, 4), ChartPeriod.WEEK, is_japanese=True) == "3/4週"

    def test_month(self):
        assert axis_label(date(2024, 3, 1), ChartPeriod.MONTH, is_japanese=False) == "Mar"
        assert axis_label(date(2024, 3, 1), ChartPeriod.MONTH, is_japanese=True) == "3月"


@pytest.mark.unit
class TestListLabels:
    def test_week_range(self):
        assert week_range_label(date(2024, 1, 8), is_japanese=False) == "Week of Jan 8, 2024"
        assert week_range_label(date(2024, 1, 8), is_japanese=True) == "2024年01月08日週"

    def test_volume_label(self):
        assert volume_label(WeightUnit.KG, is_japanese=False) == "Volume (kg)"
        assert volume_label(WeightUnit.LB, is_japanese=True) == "ボリューム(lb)"

    def test_volume_parts(self):
        assert volume_parts(1250.0, WeightUnit.KG, "en") == ("1,250", "kg")
        assert volume_parts(100.0, WeightUnit.LB, "de") == ("220,5", "lb")
