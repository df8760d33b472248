"""
==============================================================================
Catalog Package - Model Names and Products
==============================================================================

In-memory catalog tables and the JSON loader that fills them.

Classes:
--------
- Product: Pydantic model for protective-glass products
- CatalogStore: Owner of the model-name and product tables

==============================================================================
"""

from .models import Product, ProductHit, ProductMatch, ProductSummary, SearchResult
from .store import CatalogStore
from .loader import load_catalog

__all__ = [
    "Product",
    "ProductHit",
    "ProductMatch",
    "ProductSummary",
    "SearchResult",
    "CatalogStore",
    "load_catalog",
]
