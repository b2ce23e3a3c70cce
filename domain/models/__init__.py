"""
Domain models for TrainLog.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core concepts:
- WorkoutRecord: All sets logged for one calendar day (persisted)
- SetRecord: One completed set, weight in kilograms (persisted)
- DraftExerciseEntry / DraftSetRow: Transient editor rows holding raw text
- CatalogExercise: Static display metadata for one exercise

Usage:
    >>> from domain.models import WorkoutRecord, SetRecord
    >>> from datetime import date

    >>> record = WorkoutRecord(
    ...     date=date(2024, 1, 1),
    ...     sets=[SetRecord(exercise_id="bench_press", weight=100, reps=5)],
    ... )
    >>> record.model_dump_json()
    '{"date":"2024-01-01","sets":[{"exercise_id":"bench_press","weight":100.0,"reps":5}]}'
"""

from domain.models.draft import (
    DraftExerciseEntry,
    DraftSetRow,
    parse_reps_text,
    parse_weight_text,
)
from domain.models.exercise import CatalogExercise
from domain.models.workout import MAX_REPS, SetRecord, WorkoutRecord

__all__ = [
    # Persisted
    "WorkoutRecord",
    "SetRecord",
    "MAX_REPS",
    # Draft
    "DraftExerciseEntry",
    "DraftSetRow",
    "parse_weight_text",
    "parse_reps_text",
    # Catalog
    "CatalogExercise",
]
