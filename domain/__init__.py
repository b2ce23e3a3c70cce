"""
Domain layer for TrainLog.

Pure models and functions with no I/O: persisted workout records, draft
editor state and its reducer, unit conversion and calendar bucketing.
"""

from domain.models import (
    CatalogExercise,
    DraftExerciseEntry,
    DraftSetRow,
    SetRecord,
    WorkoutRecord,
)

__all__ = [
    "CatalogExercise",
    "DraftExerciseEntry",
    "DraftSetRow",
    "SetRecord",
    "WorkoutRecord",
]
