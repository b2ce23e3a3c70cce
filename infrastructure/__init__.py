"""
Infrastructure Layer for TrainLog.

This package contains concrete implementations of the application ports:
- db/: SQLite workout store
- catalog/: Bundled YAML exercise catalog
"""

# Re-export adapters for convenient access
from infrastructure.db import SqliteWorkoutStore, open_workout_store
from infrastructure.catalog import YamlExerciseCatalogSource

__all__ = [
    "SqliteWorkoutStore",
    "open_workout_store",
    "YamlExerciseCatalogSource",
]
