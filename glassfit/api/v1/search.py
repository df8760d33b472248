"""
==============================================================================
Search Endpoints
==============================================================================

Model-name autocomplete and combined keyword search.

==============================================================================
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from glassfit.config import get_settings
from glassfit.core.dependencies import get_engine
from glassfit.matching.engine import MatchingEngine


router = APIRouter(tags=["Search"])


class SearchController:
    """Controller for autocomplete and keyword search."""

    def __init__(self, engine: MatchingEngine):
        self._engine = engine

    def autocomplete(self, query: str, limit: int) -> dict:
        """Suggest mobile model names."""
        mobiles = self._engine.search_mobile_models(query, limit=limit)

        return {
            "success": True,
            "query": query,
            "total": len(mobiles),
            "mobiles": mobiles
        }

    def search(self, query: str) -> dict:
        """Search model names and products."""
        result = self._engine.search(query)

        return {
            "success": True,
            "query": query,
            **result.to_dict()
        }


@router.get("/mobiles")
async def autocomplete_mobiles(
    q: str = Query(""),
    limit: Optional[int] = Query(None, ge=1, le=500),
    engine: MatchingEngine = Depends(get_engine)
):
    """Autocomplete mobile model names."""
    if limit is None:
        limit = get_settings().autocomplete_limit
    return SearchController(engine).autocomplete(q, limit)


@router.get("/search")
async def search(
    q: str = Query(""),
    engine: MatchingEngine = Depends(get_engine)
):
    """Search mobile models and products by keyword."""
    return SearchController(engine).search(q)
