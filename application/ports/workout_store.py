"""
Workout Store Interface (Port).

This module defines the abstract interface for the persisted workout history.
Implementations may use SQLite, in-memory storage, or other backends.
"""
from datetime import date
from typing import List, Optional, Protocol

from domain.models import WorkoutRecord


class WorkoutStore(Protocol):
    """
    Abstract interface for workout persistence.

    Writes are staged: ``insert``, ``update`` and ``delete`` take effect only
    when ``save`` succeeds, and ``rollback`` discards whatever was staged since
    the last save. All lookups are by exact normalized date.

    Every method may raise ``application.exceptions.StoreError``.
    """

    def find_by_date(self, day: date) -> Optional[WorkoutRecord]:
        """
        Get the record logged for a normalized date.

        Args:
            day: Normalized calendar day

        Returns:
            The WorkoutRecord for that day, or None if nothing was logged
        """
        ...

    def insert(self, record: WorkoutRecord) -> None:
        """
        Stage a new record. The store must not already hold one for its date.

        Args:
            record: Record to insert
        """
        ...

    def update(self, record: WorkoutRecord) -> None:
        """
        Stage replacing the sets of the stored record with the same date.

        Args:
            record: Record carrying the new sets
        """
        ...

    def delete(self, record: WorkoutRecord) -> None:
        """
        Stage removing the record for ``record.date``.

        Args:
            record: Record to delete
        """
        ...

    def save(self) -> None:
        """
        Make all staged writes durable.

        Raises:
            StoreError: If the underlying storage fails; nothing is written
        """
        ...

    def rollback(self) -> None:
        """Discard writes staged since the last successful save."""
        ...

    def all_records(self) -> List[WorkoutRecord]:
        """
        Get the full persisted history.

        Returns:
            All records, ordered by date ascending
        """
        ...
