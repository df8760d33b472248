"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from typing import Optional

from fastapi import APIRouter, Depends

from glassfit.catalog.store import CatalogStore
from glassfit.core.dependencies import get_catalog_store


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, store: Optional[CatalogStore]):
        self._store = store

    def check_catalog(self) -> dict:
        """Check catalog status."""
        if self._store is not None and self._store.is_loaded:
            return {"status": "healthy", **self._store.get_stats()}
        return {"status": "not_loaded", "total_models": 0, "total_products": 0}

    def get_health(self) -> dict:
        """Get full health status."""
        catalog_info = self.check_catalog()

        overall = "healthy" if catalog_info["status"] == "healthy" else "degraded"

        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "catalog": catalog_info["status"]
            },
            "details": {
                "models_loaded": catalog_info["total_models"],
                "products_loaded": catalog_info["total_products"]
            }
        }


@router.get("")
async def health_check(store: Optional[CatalogStore] = Depends(get_catalog_store)):
    """
    Health check endpoint.

    Returns system status including API and catalog.
    """
    return HealthController(store).get_health()


@router.get("/ready")
async def readiness_check(store: Optional[CatalogStore] = Depends(get_catalog_store)):
    """Readiness probe for container orchestration."""
    return {"ready": store is not None and store.is_loaded}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
