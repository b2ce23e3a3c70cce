"""
Fake Workout Store for testing.

This module provides an in-memory implementation of WorkoutStore
for fast, isolated testing without database dependencies.
"""
from datetime import date
from typing import Dict, List, Optional, Set

from application.exceptions import StoreError
from domain.models import WorkoutRecord


class FakeWorkoutStore:
    """
    In-memory fake implementation of WorkoutStore for testing.

    Committed records live in a dict keyed by date. Writes go to a staged copy
    until save(); rollback() drops the staged copy. Any protocol method can be
    made to fail with StoreError via ``fail_on``.

    Usage:
        store = FakeWorkoutStore()
        store.seed([WorkoutRecord(date=date(2024, 1, 1), sets=[...])])
        store.fail_on.add("save")
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._records: Dict[date, WorkoutRecord] = {}
        self._staged: Optional[Dict[date, WorkoutRecord]] = None
        self.fail_on: Set[str] = set()
        self.calls: List[str] = []
        self.save_count = 0
        self.rollback_count = 0

    def reset(self) -> None:
        """Clear all stored records and failure switches."""
        self._records.clear()
        self._staged = None
        self.fail_on.clear()
        self.calls.clear()
        self.save_count = 0
        self.rollback_count = 0

    def seed(self, records: List[WorkoutRecord]) -> None:
        """Store records as already committed."""
        for record in records:
            self._records[record.date] = record

    def committed(self) -> Dict[date, WorkoutRecord]:
        """Committed records (test helper)."""
        return dict(self._records)

    @property
    def has_pending_writes(self) -> bool:
        return self._staged is not None

    def _check(self, method: str) -> None:
        self.calls.append(method)
        if method in self.fail_on:
            raise StoreError(f"Injected failure in {method}")

    def _view(self) -> Dict[date, WorkoutRecord]:
        return self._staged if self._staged is not None else self._records

    def _stage(self) -> Dict[date, WorkoutRecord]:
        if self._staged is None:
            self._staged = dict(self._records)
        return self._staged

    # =========================================================================
    # WorkoutStore Protocol Methods
    # =========================================================================

    def find_by_date(self, day: date) -> Optional[WorkoutRecord]:
        self._check("find_by_date")
        return self._view().get(day)

    def insert(self, record: WorkoutRecord) -> None:
        self._check("insert")
        staged = self._stage()
        if record.date in staged:
            raise StoreError(f"Workout already stored for {record.date}")
        staged[record.date] = record

    def update(self, record: WorkoutRecord) -> None:
        self._check("update")
        staged = self._stage()
        if record.date not in staged:
            raise StoreError(f"No workout stored for {record.date}")
        staged[record.date] = record

    def delete(self, record: WorkoutRecord) -> None:
        self._check("delete")
        self._stage().pop(record.date, None)

    def save(self) -> None:
        self._check("save")
        if self._staged is not None:
            self._records = self._staged
            self._staged = None
        self.save_count += 1

    def rollback(self) -> None:
        self.rollback_count += 1
        self._check("rollback")
        self._staged = None

    def all_records(self) -> List[WorkoutRecord]:
        self._check("all_records")
        return [self._records[day] for day in sorted(self._records)]
