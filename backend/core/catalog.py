"""
Exercise Catalog Index.

An immutable, load-once lookup from exercise identifier to display metadata.
Alias matching goes through tables precomputed at build time:
1. Exact identifier
2. Normalized id / Japanese name / English name / alias
3. Fuzzy search with rapidfuzz (exercise picker only)
"""
import asyncio
import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import ValidationError
from rapidfuzz import fuzz

from application.exceptions import CatalogLoadError
from application.ports import ExerciseCatalogSource
from backend.core.normalize import normalize
from domain.models import CatalogExercise

logger = logging.getLogger(__name__)


class ExerciseCatalogIndex:
    """
    Read-only catalog with precomputed alias tables.

    Usage:
        >>> index = ExerciseCatalogIndex.from_entries(source.load())
        >>> index.display_name("bench_press", is_japanese=False)
        'Bench Press'
        >>> index.resolve("BB Bench")
        'bench_press'
    """

    # Minimum rapidfuzz score (0-100) for a search hit
    SEARCH_THRESHOLD = 60

    def __init__(self, exercises: Iterable[CatalogExercise]):
        by_id: Dict[str, CatalogExercise] = {}
        for exercise in exercises:
            if exercise.id in by_id:
                logger.warning(f"Duplicate catalog id '{exercise.id}' ignored")
                continue
            by_id[exercise.id] = exercise

        aliases: Dict[str, str] = {}
        for exercise in sorted(by_id.values(), key=lambda e: e.id):
            for key in self._alias_keys(exercise):
                if key in aliases and aliases[key] != exercise.id:
                    logger.debug(
                        "Alias '%s' already maps to '%s', not '%s'",
                        key,
                        aliases[key],
                        exercise.id,
                    )
                    continue
                aliases[key] = exercise.id

        self._by_id: Mapping[str, CatalogExercise] = MappingProxyType(by_id)
        self._alias_index: Mapping[str, str] = MappingProxyType(aliases)
        self._sorted: Tuple[CatalogExercise, ...] = tuple(
            sorted(by_id.values(), key=lambda e: (e.name, e.id))
        )

    @classmethod
    def from_entries(cls, entries: Iterable[Dict[str, Any]]) -> "ExerciseCatalogIndex":
        """
        Build an index from raw source entries.

        Raises:
            CatalogLoadError: If an entry is not a valid catalog exercise
        """
        exercises = []
        for position, entry in enumerate(entries):
            try:
                exercises.append(CatalogExercise.model_validate(entry))
            except ValidationError as e:
                raise CatalogLoadError(f"Invalid catalog entry #{position}: {e}") from e
        return cls(exercises)

    @classmethod
    def empty(cls) -> "ExerciseCatalogIndex":
        return cls([])

    @staticmethod
    def _alias_keys(exercise: CatalogExercise) -> List[str]:
        names = [exercise.id, exercise.name, exercise.name_en or "", *exercise.aliases]
        return [key for key in (normalize(n) for n in names) if key]

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, exercise_id: str) -> bool:
        return exercise_id in self._by_id

    @property
    def exercises(self) -> Tuple[CatalogExercise, ...]:
        """All exercises sorted by (Japanese) name."""
        return self._sorted

    def get(self, exercise_id: str) -> Optional[CatalogExercise]:
        return self._by_id.get(exercise_id)

    def display_name(self, exercise_id: str, is_japanese: bool) -> str:
        """Localized name, or the raw identifier when the id is unknown."""
        exercise = self._by_id.get(exercise_id)
        if exercise is None:
            return exercise_id
        return exercise.display_name(is_japanese)

    def resolve(self, name: str) -> Optional[str]:
        """
        Map an identifier, display name or alias to its exercise id.

        Matching is case-, width- and punctuation-insensitive.
        """
        if name in self._by_id:
            return name
        key = normalize(name)
        if not key:
            return None
        return self._alias_index.get(key)

    def matches(self, exercise_id: str, name: str) -> bool:
        """True if ``name`` resolves to ``exercise_id``."""
        return self.resolve(name) == exercise_id

    def by_muscle_group(self, muscle_group: str) -> List[CatalogExercise]:
        return [e for e in self._sorted if e.muscle_group == muscle_group]

    @property
    def muscle_groups(self) -> List[str]:
        return sorted({e.muscle_group for e in self._sorted})

    def search(self, query: str, limit: int = 10) -> List[Tuple[CatalogExercise, float]]:
        """
        Rank exercises against free text for the exercise picker.

        An exact alias hit always ranks first with score 1.0; the rest are
        scored with rapidfuzz token_set_ratio over every alias key.

        Returns:
            (exercise, score 0.0-1.0) pairs, best first
        """
        normalized_query = normalize(query)
        if not normalized_query:
            return []

        scored: Dict[str, float] = {}
        exact = self._alias_index.get(normalized_query)
        if exact is not None:
            scored[exact] = 1.0

        for exercise in self._sorted:
            if exercise.id in scored:
                continue
            best = max(
                (fuzz.token_set_ratio(normalized_query, key) for key in self._alias_keys(exercise)),
                default=0.0,
            )
            if best >= self.SEARCH_THRESHOLD:
                scored[exercise.id] = best / 100.0

        ranked = sorted(scored.items(), key=lambda item: (-item[1], item[0]))
        return [(self._by_id[exercise_id], score) for exercise_id, score in ranked[:limit]]


# =============================================================================
# Loading
# =============================================================================


def load_catalog(source: ExerciseCatalogSource) -> ExerciseCatalogIndex:
    """
    Load and index the catalog synchronously.

    Raises:
        CatalogLoadError: If the source fails or an entry is malformed
    """
    entries = source.load()
    if not isinstance(entries, list):
        raise CatalogLoadError(f"Catalog must be a list, got {type(entries).__name__}")
    index = ExerciseCatalogIndex.from_entries(entries)
    logger.info(f"Loaded exercise catalog: {len(index)} exercises")
    return index


class CatalogLoader:
    """
    Holds the process-wide catalog and its loading state.

    Until a load succeeds the index is empty, so display names degrade to raw
    identifiers and name sorting falls back to identifier order.
    """

    def __init__(self, source: ExerciseCatalogSource):
        self._source = source
        self.index: ExerciseCatalogIndex = ExerciseCatalogIndex.empty()
        self.is_loading = False
        self.load_failed = False

    @property
    def is_loaded(self) -> bool:
        return len(self.index) > 0

    def display_name(self, exercise_id: str, is_japanese: bool) -> str:
        """Name from the current index, so callers see the catalog once loaded."""
        return self.index.display_name(exercise_id, is_japanese)

    def load_sync(self) -> ExerciseCatalogIndex:
        """Load on the calling thread (startup scripts and tests)."""
        self.is_loading = True
        self.load_failed = False
        try:
            self.index = load_catalog(self._source)
        except CatalogLoadError as e:
            logger.warning(f"Exercise catalog failed to load, using identifiers: {e}")
            self.load_failed = True
        finally:
            self.is_loading = False
        return self.index

    async def load(self) -> ExerciseCatalogIndex:
        """
        Load on a worker thread.

        Cancelling the awaiting task leaves the previous index in place.
        """
        self.is_loading = True
        self.load_failed = False
        try:
            index = await asyncio.to_thread(load_catalog, self._source)
        except CatalogLoadError as e:
            logger.warning(f"Exercise catalog failed to load, using identifiers: {e}")
            self.load_failed = True
        else:
            self.index = index
        finally:
            self.is_loading = False
        return self.index
