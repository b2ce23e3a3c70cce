"""
Draft editor state and its reducer.

The draft for the selected date is an immutable DraftState value. Every edit
is an action applied by ``reduce``, which returns a new state and bumps
``revision`` when something actually changed, so observers can compare
revisions instead of watching a mutable object.

Usage:
    state = DraftState(selected_date=date(2024, 1, 1))
    state = reduce(state, AppendExercise(exercise_id="bench_press"))
    entry_id = state.exercises[0].id
    row_id = state.exercises[0].sets[0].id
    state = reduce(state, UpdateSetRow(entry_id, row_id, "100", "5"))
"""

from dataclasses import dataclass, replace
from datetime import date
from typing import List, Optional, Sequence, Tuple, Union

from domain.models.draft import DraftExerciseEntry, DraftSetRow
from domain.models.workout import SetRecord
from domain.units import WeightUnit


@dataclass(frozen=True)
class DraftState:
    """Active draft buffer for ``selected_date``."""

    selected_date: date
    exercises: Tuple[DraftExerciseEntry, ...] = ()
    revision: int = 0

    def entry(self, entry_id: str) -> Optional[DraftExerciseEntry]:
        return next((e for e in self.exercises if e.id == entry_id), None)

    @property
    def has_committable_content(self) -> bool:
        """True iff at least one entry has at least one valid row."""
        return any(row.is_valid for entry in self.exercises for row in entry.sets)

    def materialize(self, unit: WeightUnit) -> List[SetRecord]:
        """Valid rows as SetRecords, in entry then row order."""
        records: List[SetRecord] = []
        for entry in self.exercises:
            records.extend(entry.set_records(unit))
        return records


# =============================================================================
# Actions
# =============================================================================


@dataclass(frozen=True)
class AppendExercise:
    exercise_id: str
    initial_set_count: int = 2


@dataclass(frozen=True)
class RemoveExercise:
    entry_id: str


@dataclass(frozen=True)
class RemoveExercisesAt:
    offsets: Tuple[int, ...]


@dataclass(frozen=True)
class MoveExercises:
    """Move the entries at ``offsets`` so they land before ``destination``."""

    offsets: Tuple[int, ...]
    destination: int


@dataclass(frozen=True)
class AddSetRow:
    entry_id: str


@dataclass(frozen=True)
class RemoveSetRow:
    entry_id: str
    row_id: str


@dataclass(frozen=True)
class UpdateSetRow:
    entry_id: str
    row_id: str
    weight_text: str
    reps_text: str


@dataclass(frozen=True)
class ClearDraft:
    """Start a new, empty workout for the selected date."""


DraftAction = Union[
    AppendExercise,
    RemoveExercise,
    RemoveExercisesAt,
    MoveExercises,
    AddSetRow,
    RemoveSetRow,
    UpdateSetRow,
    ClearDraft,
]


# =============================================================================
# Reducer
# =============================================================================


def move_items(items: Sequence, offsets: Sequence[int], destination: int) -> list:
    """
    List move with offsets/destination semantics.

    ``destination`` is an index into the original list; the moved items keep
    their relative order and are inserted before the item that was at
    ``destination``.
    """
    picked = sorted({i for i in offsets if 0 <= i < len(items)})
    moving = [items[i] for i in picked]
    remaining = [item for i, item in enumerate(items) if i not in picked]
    destination = max(0, min(destination, len(items)))
    insert_at = destination - sum(1 for i in picked if i < destination)
    return remaining[:insert_at] + moving + remaining[insert_at:]


def _replace_entry(
    state: DraftState, entry_id: str, entry: DraftExerciseEntry
) -> Tuple[DraftExerciseEntry, ...]:
    return tuple(entry if e.id == entry_id else e for e in state.exercises)


def _bump(state: DraftState, exercises) -> DraftState:
    return replace(state, exercises=tuple(exercises), revision=state.revision + 1)


def _reorder(state: DraftState, exercises) -> DraftState:
    """Bump only if entries were dropped or moved."""
    if [e.id for e in exercises] == [e.id for e in state.exercises]:
        return state
    return _bump(state, exercises)


def reduce(state: DraftState, action: DraftAction) -> DraftState:
    """
    Apply ``action`` to ``state`` and return the new state.

    Actions that address an entry or row that is not in the draft, and
    offset-based removes or moves that leave the order as it was, return
    ``state`` unchanged (same revision).
    """
    if isinstance(action, AppendExercise):
        entry = DraftExerciseEntry.blank(action.exercise_id, action.initial_set_count)
        return _bump(state, state.exercises + (entry,))

    if isinstance(action, RemoveExercise):
        if state.entry(action.entry_id) is None:
            return state
        return _bump(state, [e for e in state.exercises if e.id != action.entry_id])

    if isinstance(action, RemoveExercisesAt):
        drop = set(action.offsets)
        return _reorder(state, [e for i, e in enumerate(state.exercises) if i not in drop])

    if isinstance(action, MoveExercises):
        return _reorder(state, move_items(state.exercises, action.offsets, action.destination))

    if isinstance(action, ClearDraft):
        return _bump(state, ())

    if not isinstance(action, (AddSetRow, RemoveSetRow, UpdateSetRow)):
        raise TypeError(f"Unknown draft action: {action!r}")

    entry = state.entry(action.entry_id)
    if entry is None:
        return state

    if isinstance(action, AddSetRow):
        updated = entry.model_copy(update={"sets": entry.sets + [DraftSetRow()]})
        return _bump(state, _replace_entry(state, entry.id, updated))

    if isinstance(action, RemoveSetRow):
        if entry.row(action.row_id) is None:
            return state
        rows = [r for r in entry.sets if r.id != action.row_id]
        return _bump(state, _replace_entry(state, entry.id, entry.model_copy(update={"sets": rows})))

    # UpdateSetRow
    if entry.row(action.row_id) is None:
        return state
    rows = [
        r.model_copy(update={"weight_text": action.weight_text, "reps_text": action.reps_text})
        if r.id == action.row_id
        else r
        for r in entry.sets
    ]
    return _bump(state, _replace_entry(state, entry.id, entry.model_copy(update={"sets": rows})))
