"""
Store and Source Interfaces (Ports) for TrainLog.

This package defines abstract interfaces that decouple the draft and
aggregation logic from infrastructure (SQLite, bundled files). Implementations
are provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the core needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutStore

    class DraftSession:
        def commit(self, store: WorkoutStore, unit: WeightUnit):
            existing = store.find_by_date(day)
            ...
"""

# Workout history persistence
from application.ports.workout_store import WorkoutStore

# Bundled exercise catalog
from application.ports.exercise_catalog_source import (
    ExerciseCatalogSource,
    ExerciseNameLookup,
)

__all__ = [
    "WorkoutStore",
    "ExerciseCatalogSource",
    "ExerciseNameLookup",
]
