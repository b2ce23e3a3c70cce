"""
Router package for TrainLog.

This package contains all API routers organized by domain:
- health: Health check endpoint
- log: Draft editor for the selected date and commits
- overview: Per-exercise volume charts and weekly totals
- exercises: Exercise catalog lookup, resolution and search
"""

from api.routers.health import router as health_router
from api.routers.log import router as log_router
from api.routers.overview import router as overview_router
from api.routers.exercises import router as exercises_router

__all__ = [
    "health_router",
    "log_router",
    "overview_router",
    "exercises_router",
]
