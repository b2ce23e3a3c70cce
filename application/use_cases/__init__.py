"""
Application Use Cases for TrainLog.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and store ports
- Dependencies are injected via constructors for testability
- Use cases return domain models and result objects, not API responses

Usage:
    from application.use_cases import DraftSession, CommitOutcome

    session = DraftSession(calendar=calendar, names=catalog_index)
    session.select_date(day)
    session.sync(day, store, WeightUnit.KG)
    entry = session.append_exercise("squat")
    session.update_set_row(entry.id, entry.sets[0].id, "100", "5")
    result = session.commit(store, WeightUnit.KG)
    if result.success and result.outcome == CommitOutcome.INSERTED:
        ...
"""

from application.use_cases.draft_session import (
    CommitOutcome,
    CommitResult,
    DraftSession,
    SyncResult,
    SyncSource,
)

__all__ = [
    "DraftSession",
    "SyncResult",
    "SyncSource",
    "CommitResult",
    "CommitOutcome",
]
