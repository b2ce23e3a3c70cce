"""
SQLite implementation of WorkoutStore.

The workout history lives in a single local database file. Writes are staged
in the connection's open transaction and become durable on ``save``;
``rollback`` discards them. Every sqlite3 error (and a value SQLite cannot
bind) is re-raised as StoreError.
"""
import logging
import sqlite3
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Union

from application.exceptions import StoreError
from domain.models import SetRecord, WorkoutRecord

logger = logging.getLogger(__name__)

# Side files SQLite may leave next to the database
_SIDE_SUFFIXES = ("-wal", "-shm", "-journal")

# sqlite3 raises OverflowError, not sqlite3.Error, for integers beyond 64 bits
_WRITE_ERRORS = (sqlite3.Error, OverflowError)


class SqliteWorkoutStore:
    """
    SQLite implementation of WorkoutStore protocol.

    All SQL for workouts is encapsulated here. One row per day in
    ``workouts``; its sets live in ``exercise_sets`` ordered by ``position``.
    """

    _SCHEMA = (
        """CREATE TABLE IF NOT EXISTS workouts (
                date TEXT PRIMARY KEY
            );""",
        """CREATE TABLE IF NOT EXISTS exercise_sets (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                workout_date TEXT NOT NULL
                    REFERENCES workouts(date) ON DELETE CASCADE,
                position INTEGER NOT NULL,
                exercise_id TEXT NOT NULL,
                weight REAL NOT NULL,
                reps INTEGER NOT NULL
            );""",
        """CREATE INDEX IF NOT EXISTS idx_exercise_sets_workout
                ON exercise_sets (workout_date, position);""",
    )

    def __init__(self, path: Union[str, Path] = ":memory:"):
        """
        Open (and create if needed) the database.

        Args:
            path: Database file path, or ":memory:"

        Raises:
            StoreError: If the file cannot be opened or is not a database
        """
        self._path = str(path)
        try:
            self._conn = sqlite3.connect(self._path, check_same_thread=False)
        except sqlite3.Error as e:
            raise StoreError(f"Cannot open workout store at {self._path}: {e}") from e
        try:
            self._conn.execute("PRAGMA foreign_keys = ON")
            for statement in self._SCHEMA:
                self._conn.execute(statement)
            self._conn.commit()
        except sqlite3.Error as e:
            self._conn.close()
            raise StoreError(f"Cannot initialize workout store at {self._path}: {e}") from e

    @property
    def path(self) -> str:
        return self._path

    def close(self) -> None:
        self._conn.close()

    # =========================================================================
    # WorkoutStore Protocol Methods
    # =========================================================================

    def find_by_date(self, day: date) -> Optional[WorkoutRecord]:
        try:
            row = self._conn.execute(
                "SELECT date FROM workouts WHERE date = ?", (day.isoformat(),)
            ).fetchone()
            if row is None:
                return None
            sets = self._conn.execute(
                "SELECT exercise_id, weight, reps FROM exercise_sets "
                "WHERE workout_date = ? ORDER BY position",
                (day.isoformat(),),
            ).fetchall()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to read workout for {day}: {e}") from e
        return WorkoutRecord(date=day, sets=[self._to_set(s) for s in sets])

    def insert(self, record: WorkoutRecord) -> None:
        try:
            self._conn.execute("INSERT INTO workouts (date) VALUES (?)", (record.date.isoformat(),))
            self._insert_sets(record)
        except _WRITE_ERRORS as e:
            raise StoreError(f"Failed to insert workout for {record.date}: {e}") from e

    def update(self, record: WorkoutRecord) -> None:
        key = record.date.isoformat()
        try:
            exists = self._conn.execute("SELECT 1 FROM workouts WHERE date = ?", (key,)).fetchone()
            if exists is None:
                raise StoreError(f"No workout stored for {record.date}")
            self._conn.execute("DELETE FROM exercise_sets WHERE workout_date = ?", (key,))
            self._insert_sets(record)
        except _WRITE_ERRORS as e:
            raise StoreError(f"Failed to update workout for {record.date}: {e}") from e

    def delete(self, record: WorkoutRecord) -> None:
        try:
            self._conn.execute("DELETE FROM workouts WHERE date = ?", (record.date.isoformat(),))
        except _WRITE_ERRORS as e:
            raise StoreError(f"Failed to delete workout for {record.date}: {e}") from e

    def save(self) -> None:
        try:
            self._conn.commit()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to save workout store: {e}") from e

    def rollback(self) -> None:
        try:
            self._conn.rollback()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to roll back workout store: {e}") from e

    def all_records(self) -> List[WorkoutRecord]:
        try:
            days = self._conn.execute("SELECT date FROM workouts ORDER BY date").fetchall()
            rows = self._conn.execute(
                "SELECT workout_date, exercise_id, weight, reps FROM exercise_sets "
                "ORDER BY workout_date, position"
            ).fetchall()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to read workout history: {e}") from e

        sets: Dict[str, List[SetRecord]] = {}
        for workout_date, *values in rows:
            sets.setdefault(workout_date, []).append(self._to_set(values))
        return [
            WorkoutRecord(date=date.fromisoformat(day), sets=sets.get(day, []))
            for (day,) in days
        ]

    # =========================================================================
    # Helpers
    # =========================================================================

    def _insert_sets(self, record: WorkoutRecord) -> None:
        self._conn.executemany(
            "INSERT INTO exercise_sets (workout_date, position, exercise_id, weight, reps) "
            "VALUES (?, ?, ?, ?, ?)",
            [
                (record.date.isoformat(), position, s.exercise_id, s.weight, s.reps)
                for position, s in enumerate(record.sets)
            ],
        )

    @staticmethod
    def _to_set(values) -> SetRecord:
        exercise_id, weight, reps = values
        return SetRecord(exercise_id=exercise_id, weight=weight, reps=reps)


def open_workout_store(path: Union[str, Path]) -> SqliteWorkoutStore:
    """
    Open the workout store, recreating it if the file is unusable.

    A database that cannot be opened is deleted together with its side files
    and a fresh, empty store is created in its place.

    Raises:
        StoreError: If even a fresh store cannot be created
    """
    if str(path) == ":memory:":
        return SqliteWorkoutStore(path)

    db_path = Path(path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        return SqliteWorkoutStore(db_path)
    except StoreError as e:
        logger.warning(f"Workout store at {db_path} is unusable, recreating it: {e}")

    for candidate in [db_path] + [Path(f"{db_path}{suffix}") for suffix in _SIDE_SUFFIXES]:
        candidate.unlink(missing_ok=True)
    return SqliteWorkoutStore(db_path)
