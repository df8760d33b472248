"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Endpoints for listing products, resolving products for a device and
looking up a single product by box code.

==============================================================================
"""

from fastapi import APIRouter, Depends, Query

from glassfit.core import exceptions
from glassfit.core.dependencies import get_engine
from glassfit.matching.engine import MatchingEngine


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, engine: MatchingEngine):
        self._engine = engine

    def list_products(self) -> dict:
        """List all products with mobile counts."""
        products = self._engine.get_all_products()

        return {
            "success": True,
            "total": len(products),
            "products": [p.to_dict() for p in products]
        }

    def for_mobile(self, model: str) -> dict:
        """Resolve products that fit a mobile model."""
        matches = self._engine.find_products_for_mobile(model)

        return {
            "success": True,
            "model": model,
            "total": len(matches),
            "products": [m.to_dict() for m in matches]
        }

    def get_by_box_code(self, box_code: str) -> dict:
        """Get product by box code."""
        product = self._engine.get_product_by_box_code(box_code)

        if product is None:
            raise exceptions.product_not_found(box_code)

        return {
            "success": True,
            "product": product.to_dict()
        }


@router.get("")
async def list_products(engine: MatchingEngine = Depends(get_engine)):
    """List every product in catalog order."""
    return ProductController(engine).list_products()


@router.get("/for-mobile")
async def products_for_mobile(
    model: str = Query(""),
    engine: MatchingEngine = Depends(get_engine)
):
    """Find products that support a mobile model."""
    return ProductController(engine).for_mobile(model)


@router.get("/{box_code}")
async def get_product(box_code: str, engine: MatchingEngine = Depends(get_engine)):
    """Get product by box code (case-insensitive)."""
    return ProductController(engine).get_by_box_code(box_code)
