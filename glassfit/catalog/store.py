"""
==============================================================================
Catalog Store Module
==============================================================================

In-memory holder for the two catalog tables:

- models: mobile model names used for autocomplete
- products: protective-glass products with their supported mobiles

Both tables are replaced together by initialize() and are read-only
otherwise. Records are not validated on the way in; a malformed product
fails when the matching engine touches the broken field.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from .models import Product


# Module logger
logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Owner of the model-name and product tables.

    Attributes:
        models: Mobile model names in catalog order
        products: Products in catalog order

    Example:
        >>> store = CatalogStore()
        >>> store.initialize(["iPhone 13"], [{"boxCode": "UNIPRO H01",
        ...     "title": "Glass", "mobiles": ["iPhone 13"]}])
        >>> len(store.products)
        1
    """

    def __init__(
        self,
        models: Optional[Iterable[str]] = None,
        products: Optional[Iterable[Any]] = None,
    ) -> None:
        self._tables: Tuple[Tuple[str, ...], Tuple[Product, ...]] = ((), ())
        self._loaded = False

        if models is not None or products is not None:
            self.initialize(models, products)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def models(self) -> Tuple[str, ...]:
        """Mobile model names."""
        return self._tables[0]

    @property
    def products(self) -> Tuple[Product, ...]:
        """Catalog products."""
        return self._tables[1]

    @property
    def is_loaded(self) -> bool:
        """Whether initialize() has been called at least once."""
        return self._loaded

    # =========================================================================
    # LOADING
    # =========================================================================

    def initialize(
        self,
        models: Optional[Iterable[str]] = None,
        products: Optional[Iterable[Any]] = None,
    ) -> None:
        """
        Replace both tables.

        Args:
            models: Mobile model names (defaults to empty)
            products: Product instances or raw mapping records
                (defaults to empty)
        """
        new_models = tuple(models or ())
        new_products = tuple(Product.from_record(p) for p in (products or ()))

        # Single assignment so readers never see one table without the other
        self._tables = (new_models, new_products)
        self._loaded = True

        logger.info(
            f"Catalog initialized: {len(new_models)} models, "
            f"{len(new_products)} products"
        )

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def get_stats(self) -> Dict[str, int]:
        """Get table sizes."""
        models, products = self._tables
        return {
            "total_models": len(models),
            "total_products": len(products),
        }

    def __repr__(self) -> str:
        stats = self.get_stats()
        return (
            f"CatalogStore(models={stats['total_models']}, "
            f"products={stats['total_products']})"
        )
