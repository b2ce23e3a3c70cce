"""
Overview router for per-exercise volume charts.

This router provides endpoints for:
- A day / week / month volume chart over a fixed lookback window
- Weekly volume totals over the whole history
- The sets behind one week's total
"""
import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from api.deps import (
    get_calendar,
    get_catalog_loader,
    get_is_japanese,
    get_locale,
    get_settings,
    get_weight_unit,
    get_workout_store,
)
from application.exceptions import StoreError
from application.ports import WorkoutStore
from backend.core.catalog import CatalogLoader
from backend.core.labels import axis_label, volume_label, volume_parts, week_range_label
from backend.core.volume_service import (
    exercise_chart_series,
    exercise_week_detail,
    has_any_history,
    weekly_exercise_volumes_all,
)
from backend.settings import Settings
from domain.calendar import AppCalendar, ChartPeriod
from domain.models import WorkoutRecord
from domain.units import WeightUnit, to_display

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/overview",
    tags=["Overview"],
)


# =============================================================================
# Response Models
# =============================================================================


class ChartPointResponse(BaseModel):
    start: date = Field(..., description="Bucket start")
    label: str
    volume: float = Field(..., description="Volume in the display unit")
    volume_text: str


class ChartResponse(BaseModel):
    exercise_id: str
    name: str
    period: ChartPeriod
    unit: WeightUnit
    volume_label: str
    has_history: bool
    points: List[ChartPointResponse]


class WeekResponse(BaseModel):
    week_start: date
    label: str
    volume: float
    volume_text: str


class WeekListResponse(BaseModel):
    exercise_id: str
    name: str
    unit: WeightUnit
    weeks: List[WeekResponse]


class SetResponse(BaseModel):
    weight: float = Field(..., description="Weight in the display unit")
    reps: int


class DayResponse(BaseModel):
    day: date
    volume: float
    volume_text: str
    sets: List[SetResponse]


class WeekDetailResponse(BaseModel):
    exercise_id: str
    name: str
    week_start: date
    label: str
    unit: WeightUnit
    days: List[DayResponse]


def _history(store: WorkoutStore) -> List[WorkoutRecord]:
    try:
        return store.all_records()
    except StoreError as e:
        logger.exception(f"Failed to read workout history: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Workout store unavailable: {e}",
        )


# =============================================================================
# Chart Endpoints
# =============================================================================


@router.get("/exercises/{exercise_id}/chart", response_model=ChartResponse)
async def exercise_chart(
    exercise_id: str,
    period: ChartPeriod = Query(ChartPeriod.WEEK, description="Bucket size"),
    end: Optional[date] = Query(None, description="Last day of the window (defaults to today)"),
    store: WorkoutStore = Depends(get_workout_store),
    catalog: CatalogLoader = Depends(get_catalog_loader),
    calendar: AppCalendar = Depends(get_calendar),
    settings: Settings = Depends(get_settings),
    unit: WeightUnit = Depends(get_weight_unit),
    locale: str = Depends(get_locale),
    is_japanese: bool = Depends(get_is_japanese),
) -> ChartResponse:
    """
    Volume chart for one exercise.

    Every bucket of the window is returned, with 0 where nothing was logged.
    """
    history = _history(store)
    series = exercise_chart_series(
        exercise_id,
        history,
        period,
        calendar,
        end=end,
        bucket_count=settings.chart_buckets(period),
    )
    points = []
    for point in series:
        text, _ = volume_parts(point.volume, unit, locale)
        points.append(
            ChartPointResponse(
                start=point.date,
                label=axis_label(point.date, period, is_japanese),
                volume=to_display(point.volume, unit),
                volume_text=text,
            )
        )
    return ChartResponse(
        exercise_id=exercise_id,
        name=catalog.display_name(exercise_id, is_japanese),
        period=period,
        unit=unit,
        volume_label=volume_label(unit, is_japanese),
        has_history=has_any_history(exercise_id, history),
        points=points,
    )


@router.get("/exercises/{exercise_id}/weeks", response_model=WeekListResponse)
async def exercise_weeks(
    exercise_id: str,
    store: WorkoutStore = Depends(get_workout_store),
    catalog: CatalogLoader = Depends(get_catalog_loader),
    calendar: AppCalendar = Depends(get_calendar),
    unit: WeightUnit = Depends(get_weight_unit),
    locale: str = Depends(get_locale),
    is_japanese: bool = Depends(get_is_japanese),
) -> WeekListResponse:
    """Weekly totals over the whole history, oldest first. Empty weeks are left out."""
    weeks = []
    for point in weekly_exercise_volumes_all(exercise_id, _history(store), calendar):
        text, _ = volume_parts(point.volume, unit, locale)
        weeks.append(
            WeekResponse(
                week_start=point.date,
                label=week_range_label(point.date, is_japanese),
                volume=to_display(point.volume, unit),
                volume_text=text,
            )
        )
    return WeekListResponse(
        exercise_id=exercise_id,
        name=catalog.display_name(exercise_id, is_japanese),
        unit=unit,
        weeks=weeks,
    )


@router.get("/exercises/{exercise_id}/weeks/{week_start}", response_model=WeekDetailResponse)
async def exercise_week(
    exercise_id: str,
    week_start: date,
    store: WorkoutStore = Depends(get_workout_store),
    catalog: CatalogLoader = Depends(get_catalog_loader),
    calendar: AppCalendar = Depends(get_calendar),
    unit: WeightUnit = Depends(get_weight_unit),
    locale: str = Depends(get_locale),
    is_japanese: bool = Depends(get_is_japanese),
) -> WeekDetailResponse:
    """Sets logged for the exercise on each day of the week containing ``week_start``."""
    start = calendar.start_of_week(week_start)
    days = []
    for detail in exercise_week_detail(exercise_id, start, _history(store), calendar):
        text, _ = volume_parts(detail.volume, unit, locale)
        days.append(
            DayResponse(
                day=detail.date,
                volume=to_display(detail.volume, unit),
                volume_text=text,
                sets=[SetResponse(weight=to_display(s.weight, unit), reps=s.reps) for s in detail.sets],
            )
        )
    return WeekDetailResponse(
        exercise_id=exercise_id,
        name=catalog.display_name(exercise_id, is_japanese),
        week_start=start,
        label=week_range_label(start, is_japanese),
        unit=unit,
        days=days,
    )
