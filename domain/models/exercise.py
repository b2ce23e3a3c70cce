"""
Exercise catalog entry - static display metadata for one exercise.
"""

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator


class CatalogExercise(BaseModel):
    """
    Display metadata for one exercise in the bundled catalog.

    ``name`` is the Japanese display name and ``name_en`` the English one;
    entries without an English name fall back to ``name``.

    Examples:
        >>> ex = CatalogExercise(id="bench_press", name="ベンチプレス",
        ...                      name_en="Bench Press", muscle_group="chest")
        >>> ex.display_name(is_japanese=False)
        'Bench Press'
    """

    id: str = Field(..., min_length=1, description="Stable exercise identifier")
    name: str = Field(..., min_length=1, description="Japanese display name")
    name_en: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("name_en", "nameEn"),
        description="English display name",
    )
    muscle_group: str = Field(
        default="other",
        validation_alias=AliasChoices("muscle_group", "muscleGroup"),
        description="Primary muscle group key",
    )
    aliases: List[str] = Field(default_factory=list, description="Alternative names")
    equipment: Optional[str] = Field(default=None, description="Equipment key, e.g. 'barbell'")
    pattern: Optional[str] = Field(default=None, description="Movement pattern key, e.g. 'squat'")

    @field_validator("aliases", mode="before")
    @classmethod
    def strip_aliases(cls, v):
        """Accept a missing alias list and drop blank aliases."""
        if v is None:
            return []
        return [str(a).strip() for a in v if a is not None and str(a).strip()]

    def display_name(self, is_japanese: bool) -> str:
        if is_japanese:
            return self.name
        return self.name_en or self.name

    model_config = {"frozen": True}
