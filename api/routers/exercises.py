"""
Exercises router for catalog lookup and matching.

This router provides endpoints for:
- Listing catalog exercises, optionally by muscle group
- Resolving a typed name or alias to its exercise id
- Fuzzy search for the exercise picker
- Looking up one exercise by id
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import BaseModel, Field

from api.deps import get_catalog_loader, get_is_japanese
from backend.core.catalog import CatalogLoader
from domain.models import CatalogExercise

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


# =============================================================================
# Response Models
# =============================================================================


class ExerciseResponse(BaseModel):
    """Response model for a single exercise."""
    id: str
    name: str = Field(..., description="Name in the requested locale")
    name_ja: str
    name_en: Optional[str] = None
    muscle_group: str
    aliases: List[str] = Field(default_factory=list)
    equipment: Optional[str] = None
    pattern: Optional[str] = None

    @classmethod
    def from_exercise(cls, exercise: CatalogExercise, is_japanese: bool) -> "ExerciseResponse":
        return cls(
            id=exercise.id,
            name=exercise.display_name(is_japanese),
            name_ja=exercise.name,
            name_en=exercise.name_en,
            muscle_group=exercise.muscle_group,
            aliases=list(exercise.aliases),
            equipment=exercise.equipment,
            pattern=exercise.pattern,
        )


class ExerciseListResponse(BaseModel):
    """Response model for list of exercises."""
    exercises: List[ExerciseResponse]
    count: int
    load_failed: bool = Field(False, description="True if the catalog could not be loaded")


class ResolveResponse(BaseModel):
    query: str
    exercise_id: Optional[str] = Field(None, description="Matched exercise id, if any")


class SearchHitResponse(BaseModel):
    exercise: ExerciseResponse
    score: float = Field(..., description="Match score (0.0 to 1.0)")


class SearchResponse(BaseModel):
    query: str
    results: List[SearchHitResponse]


# =============================================================================
# Lookup Endpoints
# =============================================================================


@router.get("", response_model=ExerciseListResponse)
async def list_exercises(
    muscle_group: Optional[str] = Query(None, description="Filter by muscle group"),
    catalog: CatalogLoader = Depends(get_catalog_loader),
    is_japanese: bool = Depends(get_is_japanese),
) -> ExerciseListResponse:
    """All catalog exercises sorted by name."""
    index = catalog.index
    exercises = index.by_muscle_group(muscle_group) if muscle_group else list(index.exercises)
    return ExerciseListResponse(
        exercises=[ExerciseResponse.from_exercise(e, is_japanese) for e in exercises],
        count=len(exercises),
        load_failed=catalog.load_failed,
    )


@router.get("/resolve", response_model=ResolveResponse)
async def resolve_exercise(
    name: str = Query(..., min_length=1, description="Exercise id, display name or alias"),
    catalog: CatalogLoader = Depends(get_catalog_loader),
) -> ResolveResponse:
    """
    Map a typed name to its exercise id.

    Matching ignores case, width and punctuation. ``exercise_id`` is null when
    nothing matches.
    """
    return ResolveResponse(query=name, exercise_id=catalog.index.resolve(name))


@router.get("/search", response_model=SearchResponse)
async def search_exercises(
    q: str = Query(..., min_length=1, description="Free text from the exercise picker"),
    limit: int = Query(10, ge=1, le=50, description="Maximum results to return"),
    catalog: CatalogLoader = Depends(get_catalog_loader),
    is_japanese: bool = Depends(get_is_japanese),
) -> SearchResponse:
    """Ranked fuzzy matches, best first."""
    hits = catalog.index.search(q, limit=limit)
    return SearchResponse(
        query=q,
        results=[
            SearchHitResponse(exercise=ExerciseResponse.from_exercise(e, is_japanese), score=score)
            for e, score in hits
        ],
    )


@router.get("/{exercise_id}", response_model=ExerciseResponse)
async def get_exercise(
    exercise_id: str = Path(
        ...,
        description="Exercise id (e.g., 'bench_press')",
        min_length=1,
        max_length=100,
    ),
    catalog: CatalogLoader = Depends(get_catalog_loader),
    is_japanese: bool = Depends(get_is_japanese),
) -> ExerciseResponse:
    exercise = catalog.index.get(exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail=f"Exercise '{exercise_id}' not found")
    return ExerciseResponse.from_exercise(exercise, is_japanese)
