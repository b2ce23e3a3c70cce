"""
Infrastructure Database Layer.

This package provides the SQLite-backed implementation of the WorkoutStore
interface defined in application.ports.

Usage:
    from infrastructure.db import open_workout_store

    store = open_workout_store("data/trainlog.sqlite3")
    record = store.find_by_date(date(2024, 1, 1))
"""

from infrastructure.db.sqlite_workout_store import SqliteWorkoutStore, open_workout_store

__all__ = [
    "SqliteWorkoutStore",
    "open_workout_store",
]
