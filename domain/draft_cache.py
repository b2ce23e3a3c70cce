"""
Session-scoped cache of draft buffers keyed by normalized date.

The cache is the higher-priority tier of a two-tier read: a date that has been
visited in this session is served from here, never re-read from the store, so
uncommitted edits survive navigating between dates.

Eviction: none. Entries live for the whole session, one buffer per visited
date. ``evict``/``clear`` exist for explicit cold-cache reads only.
"""

from datetime import date
from typing import Dict, Iterator, Optional, Tuple

from domain.models.draft import DraftExerciseEntry

DraftBuffer = Tuple[DraftExerciseEntry, ...]


class DraftCache:
    """Unbounded mapping of normalized date -> draft buffer."""

    def __init__(self):
        self._buffers: Dict[date, DraftBuffer] = {}

    def get(self, day: date) -> Optional[DraftBuffer]:
        return self._buffers.get(day)

    def put(self, day: date, buffer: DraftBuffer) -> None:
        self._buffers[day] = tuple(buffer)

    def evict(self, day: date) -> None:
        self._buffers.pop(day, None)

    def clear(self) -> None:
        self._buffers.clear()

    def __contains__(self, day: date) -> bool:
        return day in self._buffers

    def __len__(self) -> int:
        return len(self._buffers)

    def __iter__(self) -> Iterator[date]:
        return iter(sorted(self._buffers))
