"""
Transient draft models for the workout log editor.

Drafts hold the raw text the user typed, not parsed numbers: whether a row
counts is derived on demand, and rows that do not parse are simply left out
when a draft is turned into SetRecords.
"""

import math
import re
import uuid
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.workout import MAX_REPS, SetRecord
from domain.units import WeightUnit, to_kg

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_RE = re.compile(r"[+-]?\d+")


def _new_id() -> str:
    return str(uuid.uuid4())


def parse_weight_text(text: str) -> Optional[float]:
    """Parse weight input, returning None when it is not a plain number."""
    if not text or not _DECIMAL_RE.fullmatch(text):
        return None
    value = float(text)
    return value if math.isfinite(value) else None


def parse_reps_text(text: str) -> Optional[int]:
    """Parse reps input, returning None when it is not a plain integer."""
    if not text or not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


class DraftSetRow(BaseModel):
    """One editable set row: raw weight and reps text."""

    id: str = Field(default_factory=_new_id)
    weight_text: str = ""
    reps_text: str = ""

    @property
    def is_valid(self) -> bool:
        weight = parse_weight_text(self.weight_text)
        reps = parse_reps_text(self.reps_text)
        return weight is not None and weight >= 0 and reps is not None and 0 < reps <= MAX_REPS

    def to_set_record(self, exercise_id: str, unit: WeightUnit) -> Optional[SetRecord]:
        """Materialize this row, or None if its text does not parse."""
        if not self.is_valid:
            return None
        weight = parse_weight_text(self.weight_text)
        reps = parse_reps_text(self.reps_text)
        return SetRecord(exercise_id=exercise_id, weight=to_kg(weight, unit), reps=reps)

    model_config = {"frozen": True}


class DraftExerciseEntry(BaseModel):
    """
    One exercise in the draft with its ordered set rows.

    ``id`` is independent of ``exercise_id`` so the same exercise may appear
    twice in one draft.
    """

    id: str = Field(default_factory=_new_id)
    exercise_id: str = Field(..., min_length=1)
    sets: List[DraftSetRow] = Field(default_factory=list)

    @classmethod
    def blank(cls, exercise_id: str, set_count: int = 2) -> "DraftExerciseEntry":
        """New entry with ``set_count`` empty rows."""
        return cls(exercise_id=exercise_id, sets=[DraftSetRow() for _ in range(set_count)])

    @property
    def completed_set_count(self) -> int:
        return sum(1 for row in self.sets if row.is_valid)

    def set_records(self, unit: WeightUnit) -> List[SetRecord]:
        records = []
        for row in self.sets:
            record = row.to_set_record(self.exercise_id, unit)
            if record is not None:
                records.append(record)
        return records

    def row(self, row_id: str) -> Optional[DraftSetRow]:
        return next((r for r in self.sets if r.id == row_id), None)

    model_config = {"frozen": True}
