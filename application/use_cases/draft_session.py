"""
DraftSession Use Case.

Reconciles the per-date draft editor with the persisted workout history.

The session owns three things:
- the active DraftState for the selected date,
- a DraftCache of buffers for dates already visited this session,
- the date the active buffer was last synced for.

Reads are cache-then-store: once a date has been visited its cached buffer is
authoritative, so partial edits survive switching dates. Commits materialize
the valid rows and replace, insert or delete the day's record through the
store, all-or-nothing.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Sequence

from application.exceptions import StoreError
from application.ports import ExerciseNameLookup, WorkoutStore
from domain.calendar import AppCalendar, DateLike
from domain.draft_cache import DraftBuffer, DraftCache
from domain.draft_state import (
    AddSetRow,
    AppendExercise,
    ClearDraft,
    DraftAction,
    DraftState,
    MoveExercises,
    RemoveExercise,
    RemoveExercisesAt,
    RemoveSetRow,
    UpdateSetRow,
    reduce,
)
from domain.models import DraftExerciseEntry, DraftSetRow, SetRecord, WorkoutRecord
from domain.units import WeightUnit, weight_input_text

logger = logging.getLogger(__name__)


class SyncSource(str, Enum):
    """Where a synced buffer came from."""

    CACHE = "cache"
    STORE = "store"
    EMPTY = "empty"


class CommitOutcome(str, Enum):
    """What a commit did to the store."""

    INSERTED = "inserted"
    UPDATED = "updated"
    DELETED = "deleted"
    NOOP = "noop"


@dataclass
class SyncResult:
    """Result of DraftSession.sync."""

    success: bool
    day: date
    source: Optional[SyncSource] = None
    error: Optional[str] = None


@dataclass
class CommitResult:
    """Result of DraftSession.commit."""

    success: bool
    day: date
    outcome: Optional[CommitOutcome] = None
    set_count: int = 0
    error: Optional[str] = None


class DraftSession:
    """
    Draft reconciliation engine for one app session.

    Dependencies are injected via constructor for testability. The store and
    the unit preference are passed per call so the session has no hidden
    inputs.

    Usage:
        >>> session = DraftSession(calendar=AppCalendar(), names=catalog_index)
        >>> session.select_date(date(2024, 1, 1))
        >>> session.sync(date(2024, 1, 1), store, WeightUnit.KG)
        >>> entry = session.append_exercise("bench_press")
        >>> session.update_set_row(entry.id, entry.sets[0].id, "100", "5")
        >>> result = session.commit(store, WeightUnit.KG)
    """

    def __init__(
        self,
        calendar: AppCalendar,
        names: Optional[ExerciseNameLookup] = None,
        *,
        initial_date: Optional[DateLike] = None,
    ) -> None:
        """
        Initialize an empty session.

        Args:
            calendar: Calendar used to normalize every date key
            names: Catalog lookup for display-name ordering; None sorts by id
            initial_date: Selected date at start (defaults to today)
        """
        self._calendar = calendar
        self._names = names
        start = calendar.normalize(initial_date) if initial_date is not None else calendar.today()
        self._state = DraftState(selected_date=start)
        self._cache = DraftCache()
        self._last_synced_date: Optional[date] = None
        self.is_syncing = False

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def state(self) -> DraftState:
        return self._state

    @property
    def selected_date(self) -> date:
        return self._state.selected_date

    @property
    def draft_exercises(self) -> DraftBuffer:
        return self._state.exercises

    @property
    def revision(self) -> int:
        return self._state.revision

    @property
    def last_synced_date(self) -> Optional[date]:
        return self._last_synced_date

    @property
    def cache(self) -> DraftCache:
        return self._cache

    @property
    def has_committable_content(self) -> bool:
        return self._state.has_committable_content

    def set_names(self, names: Optional[ExerciseNameLookup]) -> None:
        """Swap the catalog lookup, e.g. once the catalog finished loading."""
        self._names = names

    def display_name(self, exercise_id: str, is_japanese: bool) -> str:
        if self._names is None:
            return exercise_id
        return self._names.display_name(exercise_id, is_japanese)

    def draft_entry(self, entry_id: str) -> Optional[DraftExerciseEntry]:
        return self._state.entry(entry_id)

    def weight_text(self, entry_id: str, row_id: str) -> str:
        row = self._row(entry_id, row_id)
        return row.weight_text if row else ""

    def reps_text(self, entry_id: str, row_id: str) -> str:
        row = self._row(entry_id, row_id)
        return row.reps_text if row else ""

    def _row(self, entry_id: str, row_id: str) -> Optional[DraftSetRow]:
        entry = self._state.entry(entry_id)
        return entry.row(row_id) if entry else None

    # -------------------------------------------------------------------------
    # Navigation and sync
    # -------------------------------------------------------------------------

    def select_date(self, new_date: DateLike) -> None:
        """Change the selected date. Data moves only on the next sync."""
        self._state = replace(self._state, selected_date=self._calendar.normalize(new_date))

    def evict(self, day: DateLike) -> None:
        """Drop a cached buffer so the next sync for that date reads the store."""
        self._cache.evict(self._calendar.normalize(day))

    def clear_cache(self) -> None:
        self._cache.clear()

    def sync(
        self,
        day: DateLike,
        store: WorkoutStore,
        unit: WeightUnit,
        *,
        is_japanese: bool = False,
    ) -> SyncResult:
        """
        Load the draft buffer for ``day``.

        The buffer being left is first saved into the cache under the last
        synced date. The new buffer comes from the cache when present,
        otherwise from the stored record (one entry per exercise, sorted by
        display name), otherwise it is empty.

        A store failure leaves the buffer, the cache and the last synced date
        unchanged.

        Args:
            day: Date to load
            store: Persisted workout store
            unit: Display unit for weight text built from stored kilograms
            is_japanese: Sort entries by Japanese rather than English names

        Returns:
            SyncResult describing where the buffer came from
        """
        target = self._calendar.normalize(day)
        self.is_syncing = True
        try:
            if target == self._last_synced_date:
                buffer, source = self._state.exercises, SyncSource.CACHE
            elif target in self._cache:
                buffer, source = self._cache.get(target), SyncSource.CACHE
            else:
                try:
                    record = store.find_by_date(target)
                except StoreError as e:
                    logger.exception(f"Draft sync failed for {target}: {e}")
                    return SyncResult(success=False, day=target, error=str(e))
                if record is None:
                    buffer, source = (), SyncSource.EMPTY
                else:
                    buffer = self._entries_from_record(record, unit, is_japanese)
                    source = SyncSource.STORE

            if self._last_synced_date is not None:
                self._cache.put(self._last_synced_date, self._state.exercises)

            self._state = replace(self._state, exercises=tuple(buffer))
            self._last_synced_date = target
            logger.debug(f"Synced draft for {target} from {source.value}")
            return SyncResult(success=True, day=target, source=source)
        finally:
            self.is_syncing = False

    def _entries_from_record(
        self, record: WorkoutRecord, unit: WeightUnit, is_japanese: bool
    ) -> DraftBuffer:
        grouped: Dict[str, List[SetRecord]] = {}
        for set_record in record.sets:
            grouped.setdefault(set_record.exercise_id, []).append(set_record)

        entries = [
            DraftExerciseEntry(
                exercise_id=exercise_id,
                sets=[
                    DraftSetRow(
                        weight_text=weight_input_text(s.weight, unit),
                        reps_text=str(s.reps),
                    )
                    for s in sets
                ],
            )
            for exercise_id, sets in grouped.items()
        ]
        entries.sort(key=lambda e: (self.display_name(e.exercise_id, is_japanese), e.exercise_id))
        return tuple(entries)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def dispatch(self, action: DraftAction) -> DraftState:
        """Apply a draft action to the active buffer."""
        self._state = reduce(self._state, action)
        return self._state

    def append_exercise(self, exercise_id: str, initial_set_count: int = 2) -> DraftExerciseEntry:
        self.dispatch(AppendExercise(exercise_id, initial_set_count))
        return self._state.exercises[-1]

    def remove_exercise(self, entry_id: str) -> DraftState:
        return self.dispatch(RemoveExercise(entry_id))

    def remove_exercises_at(self, offsets: Sequence[int]) -> DraftState:
        return self.dispatch(RemoveExercisesAt(tuple(offsets)))

    def move_exercises(self, offsets: Sequence[int], destination: int) -> DraftState:
        return self.dispatch(MoveExercises(tuple(offsets), destination))

    def add_set_row(self, entry_id: str) -> DraftState:
        return self.dispatch(AddSetRow(entry_id))

    def remove_set_row(self, entry_id: str, row_id: str) -> DraftState:
        return self.dispatch(RemoveSetRow(entry_id, row_id))

    def update_set_row(
        self, entry_id: str, row_id: str, weight_text: str, reps_text: str
    ) -> DraftState:
        return self.dispatch(UpdateSetRow(entry_id, row_id, weight_text, reps_text))

    def start_new_workout(self) -> DraftState:
        """Empty the draft for the selected date."""
        return self.dispatch(ClearDraft())

    # -------------------------------------------------------------------------
    # Commit
    # -------------------------------------------------------------------------

    def commit(self, store: WorkoutStore, unit: WeightUnit) -> CommitResult:
        """
        Persist the active draft for the selected date.

        Valid rows become SetRecords in entry then row order; invalid rows are
        left out. With no valid rows, an existing record for the date is
        deleted (otherwise nothing happens). With valid rows, the existing
        record's sets are replaced or a new record is inserted. On success the
        buffer is copied into the cache for the date.

        A StoreError rolls the store back and leaves buffer and cache as they
        were.

        Args:
            store: Persisted workout store
            unit: Unit the draft weight text was entered in

        Returns:
            CommitResult with the outcome or the error
        """
        day = self._calendar.normalize(self._state.selected_date)
        buffer = self._state.exercises
        sets = self._state.materialize(unit)

        try:
            existing = store.find_by_date(day)

            if not sets:
                if existing is None:
                    return CommitResult(success=True, day=day, outcome=CommitOutcome.NOOP)
                store.delete(existing)
                store.save()
                outcome = CommitOutcome.DELETED
            elif existing is not None:
                store.update(existing.with_sets(sets))
                store.save()
                outcome = CommitOutcome.UPDATED
            else:
                store.insert(WorkoutRecord(date=day, sets=sets))
                store.save()
                outcome = CommitOutcome.INSERTED

        except StoreError as e:
            logger.exception(f"Workout commit failed for {day}: {e}")
            self._rollback(store)
            return CommitResult(success=False, day=day, error=str(e))

        self._cache.put(day, buffer)
        logger.info(f"Committed workout for {day} ({outcome.value}, {len(sets)} sets)")
        return CommitResult(success=True, day=day, outcome=outcome, set_count=len(sets))

    @staticmethod
    def _rollback(store: WorkoutStore) -> None:
        try:
            store.rollback()
        except StoreError as e:
            logger.error(f"Store rollback failed: {e}")
