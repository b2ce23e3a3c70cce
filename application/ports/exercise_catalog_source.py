"""
Exercise Catalog Source Interface (Port).

This module defines the abstract interface for loading the static exercise
catalog. Implementations may read a bundled YAML file or other sources.
"""
from typing import Any, Dict, List, Protocol


class ExerciseCatalogSource(Protocol):
    """
    Abstract interface for the bundled exercise list.

    The catalog is read once at startup; nothing is ever written back.
    """

    def load(self) -> List[Dict[str, Any]]:
        """
        Read every catalog entry.

        Each entry carries ``id``, ``name``, ``name_en`` (or ``nameEn``),
        ``muscle_group`` (or ``muscleGroup``), ``aliases``, ``equipment`` and
        ``pattern``.

        Returns:
            List of raw exercise dictionaries

        Raises:
            CatalogLoadError: If the source is missing or malformed
        """
        ...


class ExerciseNameLookup(Protocol):
    """
    The only view of the catalog the draft engine depends on.

    Unknown identifiers must be returned unchanged so drafts keep working
    when the catalog failed to load.
    """

    def display_name(self, exercise_id: str, is_japanese: bool) -> str:
        """
        Get the localized display name for an exercise.

        Args:
            exercise_id: Catalog exercise identifier
            is_japanese: Whether to return the Japanese name

        Returns:
            Display name, or ``exercise_id`` itself if unknown
        """
        ...
