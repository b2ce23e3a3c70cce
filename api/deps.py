"""
FastAPI Dependency Providers for TrainLog.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings, the workout store, the catalog loader and the draft session are
  cached per-process (lru_cache); the app serves a single local user
- Request-scoped providers resolve the weight unit and locale

Usage in routers:
    from api.deps import get_workout_store, get_draft_session
    from application.ports import WorkoutStore

    @router.post("/log/commit")
    async def commit(
        session: DraftSession = Depends(get_draft_session),
        store: WorkoutStore = Depends(get_workout_store),
    ):
        return session.commit(store, WeightUnit.KG)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_workout_store] = lambda: FakeWorkoutStore()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Query

# Protocol types (interfaces)
from application.ports import WorkoutStore
from application.use_cases import DraftSession

# Concrete implementations
from infrastructure import YamlExerciseCatalogSource, open_workout_store

from backend.core.catalog import CatalogLoader
from backend.settings import Settings, get_settings as _get_settings
from domain.calendar import AppCalendar
from domain.units import WeightUnit, is_japanese_locale


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


def get_calendar(settings: Settings = Depends(get_settings)) -> AppCalendar:
    """Calendar built from the timezone and week start settings."""
    return settings.app_calendar()


# =============================================================================
# Store and Catalog Providers
# =============================================================================


@lru_cache
def get_workout_store() -> WorkoutStore:
    """
    Get the workout store (cached).

    Opens the SQLite database at ``settings.database_path``, recreating it if
    the file is unusable. The return type is the Protocol to enable easy
    faking.

    Returns:
        WorkoutStore: Persisted workout history
    """
    settings = _get_settings()
    return open_workout_store(settings.database_path)


@lru_cache
def get_catalog_loader() -> CatalogLoader:
    """
    Get the exercise catalog loader (cached).

    The loader starts with an empty index; the app lifespan triggers the
    actual load.
    """
    settings = _get_settings()
    return CatalogLoader(YamlExerciseCatalogSource(settings.catalog_path))


@lru_cache
def get_draft_session() -> DraftSession:
    """
    Get the process-wide draft session (cached).

    Display names come from the catalog loader, so they switch from raw
    identifiers to catalog names once the catalog has loaded.
    """
    settings = _get_settings()
    return DraftSession(settings.app_calendar(), names=get_catalog_loader())


# =============================================================================
# Request Preferences
# =============================================================================


def get_weight_unit(
    unit: Optional[WeightUnit] = Query(None, description="Display unit (kg or lb)"),
    settings: Settings = Depends(get_settings),
) -> WeightUnit:
    """Weight unit for this request, falling back to the configured default."""
    return unit or settings.default_weight_unit


def get_locale(
    locale: Optional[str] = Query(None, description="Locale, e.g. en or ja-JP"),
    settings: Settings = Depends(get_settings),
) -> str:
    return locale or settings.default_locale


def get_is_japanese(locale: str = Depends(get_locale)) -> bool:
    return is_japanese_locale(locale)
