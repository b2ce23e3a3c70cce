"""
API package for TrainLog.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_calendar,
    get_workout_store,
    get_catalog_loader,
    get_draft_session,
    get_weight_unit,
    get_locale,
    get_is_japanese,
)

__all__ = [
    # Settings
    "get_settings",
    "get_calendar",
    # Store and catalog
    "get_workout_store",
    "get_catalog_loader",
    # Draft engine
    "get_draft_session",
    # Request preferences
    "get_weight_unit",
    "get_locale",
    "get_is_japanese",
]
