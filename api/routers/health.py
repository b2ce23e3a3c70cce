"""
Health check router.

This router provides health check endpoints for monitoring, including the
state of the exercise catalog load.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_catalog_loader
from backend.core.catalog import CatalogLoader

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


# =============================================================================
# Health Check Endpoints
# =============================================================================


@router.get("/health")
async def health(catalog: CatalogLoader = Depends(get_catalog_loader)):
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {
        "status": "ok",
        "catalog": {
            "exercises": len(catalog.index),
            "loading": catalog.is_loading,
            "load_failed": catalog.load_failed,
        },
    }
