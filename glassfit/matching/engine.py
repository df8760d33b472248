"""
==============================================================================
Matching Engine Module
==============================================================================

Read-only queries over a CatalogStore.

Operations:
-----------
- search_mobile_models: autocomplete over the model-name table
- find_products_for_mobile: products that fit a device name
- search: combined keyword search over model names and products
- get_all_products: catalog listing with mobile counts
- get_product_by_box_code: single product lookup

Matching Rules:
---------------
find_products_for_mobile compares upper-cased, trimmed strings and accepts a
product when any of its mobiles equals the query, contains it, or is
contained in it. "iPhone 13" therefore finds "iPhone 13 Pro" and
"iPhone 13 Pro Max" finds "iPhone 13 Pro".

search compares lower-cased strings in one direction only: a mobile or a
title must contain the keyword.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List, Optional

from glassfit.catalog.models import (
    Product,
    ProductHit,
    ProductMatch,
    ProductSummary,
    SearchResult,
)
from glassfit.catalog.store import CatalogStore
from glassfit.config.settings import DEFAULT_CATEGORY


# Module logger
logger = logging.getLogger(__name__)


DEFAULT_AUTOCOMPLETE_LIMIT = 10
SEARCH_MOBILE_LIMIT = 20


class MatchingEngine:
    """
    Device-to-product matching over a catalog store.

    The engine never mutates the store; every call reads the tables as they
    are at call time.

    Example:
        >>> engine = MatchingEngine(store)
        >>> engine.search_mobile_models("iphone 13", limit=5)
        ['iPhone 13', 'iPhone 13 mini', 'iPhone 13 Pro']
        >>> [m.box_code for m in engine.find_products_for_mobile("iPhone 13")]
        ['UNIPRO H01']
    """

    def __init__(
        self,
        store: CatalogStore,
        default_category: str = DEFAULT_CATEGORY,
        search_mobile_limit: int = SEARCH_MOBILE_LIMIT,
    ) -> None:
        self._store = store
        self._default_category = default_category
        self._search_mobile_limit = search_mobile_limit

    @property
    def store(self) -> CatalogStore:
        """The catalog store being queried."""
        return self._store

    # =========================================================================
    # MATCHING RULES (Static Methods)
    # =========================================================================

    @staticmethod
    def match_mobile_bidirectional(search_term: str, mobile: str) -> bool:
        """
        Check a catalog mobile against a normalized device query.

        Args:
            search_term: Upper-cased, trimmed query
            mobile: Catalog mobile name (normalized here)

        Returns:
            True if either string contains the other
        """
        normalized = mobile.upper().strip()
        return (
            normalized == search_term
            or search_term in normalized
            or normalized in search_term
        )

    # =========================================================================
    # AUTOCOMPLETE
    # =========================================================================

    def search_mobile_models(
        self,
        keyword: str,
        limit: int = DEFAULT_AUTOCOMPLETE_LIMIT,
    ) -> List[str]:
        """
        Suggest model names containing a keyword.

        Args:
            keyword: Partial model name, any case
            limit: Maximum suggestions

        Returns:
            Matching model names in table order, at most ``limit``
        """
        if not keyword or not keyword.strip():
            return []

        search_term = keyword.lower().strip()

        results = []
        for model in self._store.models:
            if len(results) >= limit:
                break
            if search_term in model.lower():
                results.append(model)

        return results

    # =========================================================================
    # PRODUCT RESOLUTION
    # =========================================================================

    def find_products_for_mobile(self, mobile_model: str) -> List[ProductMatch]:
        """
        Find products that support a mobile model.

        Args:
            mobile_model: Device name as typed or selected by the user

        Returns:
            One ProductMatch per matching product, in catalog order
        """
        if not mobile_model or not mobile_model.strip():
            return []

        search_term = mobile_model.upper().strip()

        results = []
        for product in self._store.products:
            if any(
                self.match_mobile_bidirectional(search_term, mobile)
                for mobile in product.mobiles
            ):
                results.append(
                    ProductMatch(
                        box_code=product.box_code,
                        title=product.title,
                        category=product.category or self._default_category,
                    )
                )

        logger.debug(f"Device '{mobile_model}' matched {len(results)} products")
        return results

    # =========================================================================
    # KEYWORD SEARCH
    # =========================================================================

    def search(self, keyword: str) -> SearchResult:
        """
        Search model names and products by keyword.

        A product is included when its title or any of its mobiles contains
        the keyword. ``matched_mobiles`` lists the mobiles that contain it and
        is empty for title-only hits.

        Args:
            keyword: Free-text keyword

        Returns:
            SearchResult with model suggestions and product hits
        """
        if not keyword or not keyword.strip():
            return SearchResult(mobiles=[], products=[])

        search_term = keyword.lower().strip()
        mobiles = self.search_mobile_models(keyword, self._search_mobile_limit)

        products = []
        for product in self._store.products:
            title_match = search_term in product.title.lower()
            matched_mobiles = [
                mobile for mobile in product.mobiles
                if search_term in mobile.lower()
            ]

            if title_match or matched_mobiles:
                products.append(
                    ProductHit(
                        box_code=product.box_code,
                        title=product.title,
                        matched_mobiles=matched_mobiles,
                    )
                )

        return SearchResult(mobiles=mobiles, products=products)

    # =========================================================================
    # CATALOG INTROSPECTION
    # =========================================================================

    def get_all_products(self) -> List[ProductSummary]:
        """List every product with its number of supported mobiles."""
        return [
            ProductSummary(
                box_code=product.box_code,
                title=product.title,
                mobile_count=len(product.mobiles),
            )
            for product in self._store.products
        ]

    def get_product_by_box_code(self, box_code: str) -> Optional[Product]:
        """Find product by box code (case-insensitive), first match wins."""
        wanted = box_code.upper()
        for product in self._store.products:
            if product.box_code.upper() == wanted:
                return product
        return None
