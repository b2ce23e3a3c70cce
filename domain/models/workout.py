"""
Persisted workout history - the records owned by the workout store.
"""

import datetime
from typing import List

from pydantic import BaseModel, Field

# Upper bound for reps in one set; larger values are treated as typos
MAX_REPS = 9999


class SetRecord(BaseModel):
    """
    Value object for one completed set.

    Weight is always kilograms regardless of the display unit, so changing the
    unit preference never rewrites stored values.

    Examples:
        >>> SetRecord(exercise_id="bench_press", weight=100, reps=5).volume
        500.0
    """

    exercise_id: str = Field(..., min_length=1, description="Catalog exercise identifier")
    weight: float = Field(..., ge=0, description="Weight in kilograms")
    reps: int = Field(..., gt=0, le=MAX_REPS, description="Completed repetitions")

    @property
    def volume(self) -> float:
        """Lifted volume of this set (kg x reps)."""
        return float(self.weight) * self.reps

    model_config = {"frozen": True}


class WorkoutRecord(BaseModel):
    """
    All sets logged for one calendar day.

    The normalized date is the natural key: a store holds at most one record
    per date. Sets are replaced wholesale on commit, never edited one by one.
    """

    date: datetime.date = Field(..., description="Normalized calendar day")
    sets: List[SetRecord] = Field(default_factory=list, description="Sets in logged order")

    def with_sets(self, sets: List[SetRecord]) -> "WorkoutRecord":
        """Return a copy of this record carrying ``sets``."""
        return self.model_copy(update={"sets": list(sets)})

    def sets_for(self, exercise_id: str) -> List[SetRecord]:
        return [s for s in self.sets if s.exercise_id == exercise_id]

    model_config = {"frozen": True}
