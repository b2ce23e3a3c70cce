"""
Fake Port Implementations for Testing.

This package provides in-memory fake implementations of the application ports
for fast, isolated testing. No database or files required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Failure injection for error paths

Usage:
    from tests.fakes import FakeWorkoutStore, make_record

    store = FakeWorkoutStore()
    store.seed([make_record(date(2024, 1, 1), [("bench_press", 100, 5)])])
"""
from datetime import date
from typing import Iterable, Tuple

from domain.models import SetRecord, WorkoutRecord

from tests.fakes.workout_store import FakeWorkoutStore
from tests.fakes.catalog_source import FakeExerciseCatalogSource, SAMPLE_CATALOG


# =============================================================================
# Factory Functions
# =============================================================================


def make_record(day: date, sets: Iterable[Tuple[str, float, int]]) -> WorkoutRecord:
    """Build a WorkoutRecord from (exercise_id, weight_kg, reps) tuples."""
    return WorkoutRecord(
        date=day,
        sets=[SetRecord(exercise_id=e, weight=w, reps=r) for e, w, r in sets],
    )


__all__ = [
    "FakeWorkoutStore",
    "FakeExerciseCatalogSource",
    "SAMPLE_CATALOG",
    "make_record",
]
