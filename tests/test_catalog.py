"""
==============================================================================
Catalog Store and Loader Tests
==============================================================================

Tests for table initialization and JSON file loading.

==============================================================================
"""

import json
from pathlib import Path
from typing import Dict

import pytest

from glassfit.catalog.loader import load_catalog, read_models, read_products
from glassfit.catalog.models import Product
from glassfit.catalog.store import CatalogStore
from glassfit.core.exceptions import CatalogLoadError

from .conftest import SAMPLE_MODELS, SAMPLE_PRODUCTS


class TestCatalogStore:
    """Tests for CatalogStore."""

    def test_new_store_is_empty_and_unloaded(self):
        store = CatalogStore()
        assert store.models == ()
        assert store.products == ()
        assert store.is_loaded is False

    def test_initialize_defaults_to_empty(self):
        """Missing arguments become empty tables."""
        store = CatalogStore()
        store.initialize()
        assert store.is_loaded is True
        assert store.get_stats() == {"total_models": 0, "total_products": 0}

    def test_initialize_wraps_records(self, store: CatalogStore):
        """Raw mapping records become Product instances."""
        assert store.models == tuple(SAMPLE_MODELS)
        assert all(isinstance(p, Product) for p in store.products)
        assert store.products[2].box_code == "UNIPRO P01"
        assert store.products[2].category == "UNIPRO PRIVACY GLASS"
        assert store.products[0].category is None

    def test_initialize_keeps_product_instances(self):
        product = Product(box_code="A1", title="Glass", mobiles=["iPhone 13"])
        store = CatalogStore([], [product])
        assert store.products[0] is product

    def test_reinitialize_replaces_both_tables(self, store: CatalogStore):
        store.initialize(["Pixel 8"], None)
        assert store.models == ("Pixel 8",)
        assert store.products == ()

    def test_initialize_does_not_validate(self):
        """Malformed records are accepted until they are read."""
        store = CatalogStore([], [{"title": "no code, no mobiles"}])
        assert len(store.products) == 1
        with pytest.raises(AttributeError):
            store.products[0].mobiles

    def test_extra_fields_are_kept(self):
        store = CatalogStore([], [
            {"boxCode": "A1", "title": "Glass", "mobiles": [], "sku": "X-1"},
        ])
        assert store.products[0].to_dict()["sku"] == "X-1"


class TestCatalogLoader:
    """Tests for reading catalog JSON files."""

    def test_load_catalog(self, catalog_files: Dict[str, Path]):
        store = load_catalog(catalog_files["models"], catalog_files["products"])

        assert store.is_loaded
        assert list(store.models) == SAMPLE_MODELS
        assert [p.box_code for p in store.products] == [p["boxCode"] for p in SAMPLE_PRODUCTS]

    def test_load_into_existing_store(self, catalog_files: Dict[str, Path]):
        store = CatalogStore(["old"], [])
        returned = load_catalog(catalog_files["models"], catalog_files["products"], store)

        assert returned is store
        assert "old" not in store.models

    def test_missing_file(self, tmp_path: Path, catalog_files: Dict[str, Path]):
        with pytest.raises(CatalogLoadError, match="file not found"):
            load_catalog(tmp_path / "nope.json", catalog_files["products"])

    def test_invalid_json(self, tmp_path: Path):
        broken = tmp_path / "broken.json"
        broken.write_text("[\"iPhone 13\",", encoding="utf-8")

        with pytest.raises(CatalogLoadError, match="invalid JSON"):
            read_models(broken)

    def test_models_must_be_strings(self, tmp_path: Path):
        path = tmp_path / "models.json"
        path.write_text(json.dumps([{"name": "iPhone 13"}]), encoding="utf-8")

        with pytest.raises(CatalogLoadError):
            read_models(path)

    def test_product_without_mobiles_is_rejected(self, tmp_path: Path):
        path = tmp_path / "products.json"
        path.write_text(json.dumps([{"boxCode": "A1", "title": "Glass"}]), encoding="utf-8")

        with pytest.raises(CatalogLoadError, match="malformed product records"):
            read_products(path)

    def test_store_untouched_on_failure(self, tmp_path: Path, store: CatalogStore):
        """A failed load leaves the previous tables in place."""
        broken = tmp_path / "broken.json"
        broken.write_text("{", encoding="utf-8")

        with pytest.raises(CatalogLoadError):
            load_catalog(broken, broken, store)

        assert list(store.models) == SAMPLE_MODELS
