"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection helpers for API endpoints.

The catalog store lives on ``app.state.catalog`` and is set by the
application factory; endpoints receive a MatchingEngine built over it.

Usage:
------
    @router.get("/search")
    async def search(engine: MatchingEngine = Depends(get_engine)):
        ...

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Request

from glassfit.catalog.store import CatalogStore
from glassfit.config import get_settings
from glassfit.core import exceptions
from glassfit.matching.engine import MatchingEngine


# Module logger
logger = logging.getLogger(__name__)


def get_catalog_store(request: Request) -> Optional[CatalogStore]:
    """Get the catalog store attached to the running application."""
    return getattr(request.app.state, "catalog", None)


def get_engine(request: Request) -> MatchingEngine:
    """
    Build a matching engine over the application's catalog.

    Raises:
        AppException: CATALOG_NOT_LOADED if no catalog has been loaded
    """
    store = get_catalog_store(request)
    if store is None or not store.is_loaded:
        logger.warning("Catalog requested before it was loaded")
        raise exceptions.catalog_not_loaded()

    settings = get_settings()
    return MatchingEngine(
        store,
        default_category=settings.default_category,
        search_mobile_limit=settings.search_mobile_limit,
    )
