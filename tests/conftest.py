"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides a sample catalog, a matching engine over it, and an API client.

==============================================================================
"""

import json
from pathlib import Path
from typing import Dict, Generator, List

import pytest
from fastapi.testclient import TestClient

from glassfit.catalog.store import CatalogStore
from glassfit.main import create_app
from glassfit.matching.engine import MatchingEngine


# ============================================================================
# SAMPLE DATA
# ============================================================================

SAMPLE_MODELS: List[str] = [
    "iPhone 13",
    "iPhone 13 mini",
    "iPhone 13 Pro",
    "iPhone 13 Pro Max",
    "iPhone 14",
    "Galaxy S23",
    "Galaxy S23 Ultra",
    "Redmi Note 12",
]

SAMPLE_PRODUCTS: List[Dict] = [
    {
        "boxCode": "UNIPRO H01",
        "title": "Tempered Glass for iPhone 13",
        "mobiles": ["iPhone 13", "iPhone 13 Pro"],
    },
    {
        "boxCode": "UNIPRO H02",
        "title": "Tempered Glass for iPhone 13 Pro Max",
        "mobiles": ["iPhone 13 Pro Max", "iPhone 14 Plus"],
    },
    {
        "boxCode": "UNIPRO P01",
        "title": "Privacy Glass",
        "category": "UNIPRO PRIVACY GLASS",
        "mobiles": ["iPhone 14"],
    },
    {
        "boxCode": "UNIPRO S10",
        "title": "Tempered Glass for Galaxy S23",
        "mobiles": ["Galaxy S23"],
    },
]


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def store() -> CatalogStore:
    """Catalog store initialized with the sample tables."""
    catalog = CatalogStore()
    catalog.initialize(SAMPLE_MODELS, SAMPLE_PRODUCTS)
    return catalog


@pytest.fixture
def engine(store: CatalogStore) -> MatchingEngine:
    """Matching engine over the sample catalog."""
    return MatchingEngine(store)


@pytest.fixture
def catalog_files(tmp_path: Path) -> Dict[str, Path]:
    """Sample catalog written to JSON files."""
    models_file = tmp_path / "mobileModels.json"
    products_file = tmp_path / "uniproProducts.json"
    models_file.write_text(json.dumps(SAMPLE_MODELS), encoding="utf-8")
    products_file.write_text(json.dumps(SAMPLE_PRODUCTS), encoding="utf-8")
    return {"models": models_file, "products": products_file}


# ============================================================================
# API FIXTURES
# ============================================================================

@pytest.fixture
def client(store: CatalogStore) -> Generator[TestClient, None, None]:
    """Test client for an app serving the sample catalog."""
    with TestClient(create_app(store)) as test_client:
        yield test_client


@pytest.fixture
def unloaded_client() -> Generator[TestClient, None, None]:
    """Test client for an app whose catalog was never initialized."""
    with TestClient(create_app(CatalogStore())) as test_client:
        yield test_client
