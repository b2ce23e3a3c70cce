"""
Workout log router.

Drives the draft editor for the selected date:
- Selecting a date (select + sync)
- Editing exercises and set rows
- Committing the draft to the workout store

Handlers are ``async def`` so they run one at a time on the event loop; the
draft session is never touched concurrently.
"""
import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from api.deps import get_draft_session, get_is_japanese, get_weight_unit, get_workout_store
from application.ports import WorkoutStore
from application.use_cases import DraftSession
from domain.models import DraftExerciseEntry
from domain.units import WeightUnit

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/log",
    tags=["Log"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class SelectDateRequest(BaseModel):
    day: date = Field(..., description="Date to open in the editor")


class AppendExerciseRequest(BaseModel):
    exercise_id: str = Field(..., min_length=1, description="Catalog exercise identifier")
    initial_set_count: int = Field(2, ge=0, le=20, description="Blank rows to start with")


class MoveExercisesRequest(BaseModel):
    offsets: List[int] = Field(..., min_length=1, description="Positions of the entries to move")
    destination: int = Field(..., ge=0, description="Position in the original list to move before")


class UpdateSetRowRequest(BaseModel):
    weight_text: str = Field("", max_length=32)
    reps_text: str = Field("", max_length=32)


class SetRowResponse(BaseModel):
    id: str
    weight_text: str
    reps_text: str
    is_valid: bool


class DraftEntryResponse(BaseModel):
    id: str
    exercise_id: str
    name: str
    completed_set_count: int
    sets: List[SetRowResponse]


class DraftResponse(BaseModel):
    """Snapshot of the active draft."""
    selected_date: date
    last_synced_date: Optional[date] = None
    revision: int
    has_committable_content: bool
    exercises: List[DraftEntryResponse]


class SelectDateResponse(BaseModel):
    source: str = Field(..., description="cache, store or empty")
    draft: DraftResponse


class CommitResponse(BaseModel):
    success: bool
    day: date
    outcome: str = Field(..., description="inserted, updated, deleted or noop")
    set_count: int


def _entry_response(
    session: DraftSession, entry: DraftExerciseEntry, is_japanese: bool
) -> DraftEntryResponse:
    return DraftEntryResponse(
        id=entry.id,
        exercise_id=entry.exercise_id,
        name=session.display_name(entry.exercise_id, is_japanese),
        completed_set_count=entry.completed_set_count,
        sets=[
            SetRowResponse(
                id=row.id,
                weight_text=row.weight_text,
                reps_text=row.reps_text,
                is_valid=row.is_valid,
            )
            for row in entry.sets
        ],
    )


def _draft_response(session: DraftSession, is_japanese: bool) -> DraftResponse:
    return DraftResponse(
        selected_date=session.selected_date,
        last_synced_date=session.last_synced_date,
        revision=session.revision,
        has_committable_content=session.has_committable_content,
        exercises=[_entry_response(session, e, is_japanese) for e in session.draft_exercises],
    )


def _require_entry(session: DraftSession, entry_id: str) -> DraftExerciseEntry:
    entry = session.draft_entry(entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Draft entry not found: {entry_id}")
    return entry


def _require_row(session: DraftSession, entry_id: str, row_id: str) -> None:
    entry = _require_entry(session, entry_id)
    if entry.row(row_id) is None:
        raise HTTPException(status_code=404, detail=f"Set row not found: {row_id}")


# =============================================================================
# Draft Endpoints
# =============================================================================


@router.get("/draft", response_model=DraftResponse)
async def get_draft(
    session: DraftSession = Depends(get_draft_session),
    is_japanese: bool = Depends(get_is_japanese),
) -> DraftResponse:
    """Current draft for the selected date."""
    return _draft_response(session, is_japanese)


@router.post("/date", response_model=SelectDateResponse)
async def select_date(
    request: SelectDateRequest,
    session: DraftSession = Depends(get_draft_session),
    store: WorkoutStore = Depends(get_workout_store),
    unit: WeightUnit = Depends(get_weight_unit),
    is_japanese: bool = Depends(get_is_japanese),
) -> SelectDateResponse:
    """
    Select a date and load its draft.

    The draft being left is kept in the session cache, so returning to a date
    shows the edits made there even if they were never committed.
    """
    session.select_date(request.day)
    result = session.sync(request.day, store, unit, is_japanese=is_japanese)
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Workout store unavailable: {result.error}",
        )
    return SelectDateResponse(source=result.source.value, draft=_draft_response(session, is_japanese))


@router.post("/new", response_model=DraftResponse)
async def start_new_workout(
    session: DraftSession = Depends(get_draft_session),
    is_japanese: bool = Depends(get_is_japanese),
) -> DraftResponse:
    """Empty the draft. Nothing is persisted until the next commit."""
    session.start_new_workout()
    return _draft_response(session, is_japanese)


# =============================================================================
# Exercise Endpoints
# =============================================================================


@router.post("/exercises", response_model=DraftResponse, status_code=201)
async def append_exercise(
    request: AppendExerciseRequest,
    session: DraftSession = Depends(get_draft_session),
    is_japanese: bool = Depends(get_is_japanese),
) -> DraftResponse:
    session.append_exercise(request.exercise_id, request.initial_set_count)
    return _draft_response(session, is_japanese)


@router.post("/exercises/move", response_model=DraftResponse)
async def move_exercises(
    request: MoveExercisesRequest,
    session: DraftSession = Depends(get_draft_session),
    is_japanese: bool = Depends(get_is_japanese),
) -> DraftResponse:
    session.move_exercises(request.offsets, request.destination)
    return _draft_response(session, is_japanese)


@router.delete("/exercises/{entry_id}", response_model=DraftResponse)
async def remove_exercise(
    entry_id: str,
    session: DraftSession = Depends(get_draft_session),
    is_japanese: bool = Depends(get_is_japanese),
) -> DraftResponse:
    _require_entry(session, entry_id)
    session.remove_exercise(entry_id)
    return _draft_response(session, is_japanese)


# =============================================================================
# Set Row Endpoints
# =============================================================================


@router.post("/exercises/{entry_id}/sets", response_model=DraftResponse, status_code=201)
async def add_set_row(
    entry_id: str,
    session: DraftSession = Depends(get_draft_session),
    is_japanese: bool = Depends(get_is_japanese),
) -> DraftResponse:
    _require_entry(session, entry_id)
    session.add_set_row(entry_id)
    return _draft_response(session, is_japanese)


@router.put("/exercises/{entry_id}/sets/{row_id}", response_model=DraftResponse)
async def update_set_row(
    entry_id: str,
    row_id: str,
    request: UpdateSetRowRequest,
    session: DraftSession = Depends(get_draft_session),
    is_japanese: bool = Depends(get_is_japanese),
) -> DraftResponse:
    """Replace a row's text. Text that does not parse is kept but the row is not committed."""
    _require_row(session, entry_id, row_id)
    session.update_set_row(entry_id, row_id, request.weight_text, request.reps_text)
    return _draft_response(session, is_japanese)


@router.delete("/exercises/{entry_id}/sets/{row_id}", response_model=DraftResponse)
async def remove_set_row(
    entry_id: str,
    row_id: str,
    session: DraftSession = Depends(get_draft_session),
    is_japanese: bool = Depends(get_is_japanese),
) -> DraftResponse:
    _require_row(session, entry_id, row_id)
    session.remove_set_row(entry_id, row_id)
    return _draft_response(session, is_japanese)


# =============================================================================
# Commit
# =============================================================================


@router.post("/commit", response_model=CommitResponse)
async def commit(
    session: DraftSession = Depends(get_draft_session),
    store: WorkoutStore = Depends(get_workout_store),
    unit: WeightUnit = Depends(get_weight_unit),
) -> CommitResponse:
    """
    Persist the draft for the selected date.

    Rows whose text does not parse are left out. A draft without valid rows
    deletes the stored workout for the date.
    """
    result = session.commit(store, unit)
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Failed to save workout: {result.error}",
        )
    return CommitResponse(
        success=True,
        day=result.day,
        outcome=result.outcome.value,
        set_count=result.set_count,
    )
