"""
==============================================================================
Catalog Loader Module
==============================================================================

Reads the catalog JSON files and initializes a CatalogStore.

JSON Structure:
--------------
mobileModels.json:
    ["iPhone 13", "iPhone 13 Pro", "Galaxy S23", ...]

uniproProducts.json:
    [
      {
        "boxCode": "UNIPRO H01",
        "title": "Tempered Glass for iPhone 13",
        "category": "UNIPRO TEMPERED GLASS",   (optional)
        "mobiles": ["iPhone 13", "iPhone 13 Pro"]
      },
      ...
    ]

Unlike CatalogStore.initialize(), the loader validates products with
pydantic, so a broken file fails here instead of at query time.

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from glassfit.core.exceptions import CatalogLoadError

from .models import Product
from .store import CatalogStore


# Module logger
logger = logging.getLogger(__name__)


PathLike = Union[str, Path]

_model_list = TypeAdapter(List[str])
_product_list = TypeAdapter(List[Product])


def read_json(path: PathLike) -> Any:
    """
    Read and parse a JSON file.

    Raises:
        CatalogLoadError: If the file is missing or not valid JSON
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"Catalog file not found: {path}")
        raise CatalogLoadError(path, "file not found")
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        raise CatalogLoadError(path, f"invalid JSON ({e})") from e


def read_models(path: PathLike) -> List[str]:
    """Read the mobile model list."""
    try:
        return _model_list.validate_python(read_json(path))
    except ValidationError as e:
        raise CatalogLoadError(path, f"expected an array of strings ({e.error_count()} errors)") from e


def read_products(path: PathLike) -> List[Product]:
    """Read and validate the product list."""
    try:
        return _product_list.validate_python(read_json(path))
    except ValidationError as e:
        raise CatalogLoadError(path, f"malformed product records ({e.error_count()} errors)") from e


def load_catalog(
    models_file: PathLike,
    products_file: PathLike,
    store: Optional[CatalogStore] = None,
) -> CatalogStore:
    """
    Load both catalog files into a store.

    Args:
        models_file: Path to mobileModels.json
        products_file: Path to uniproProducts.json
        store: Existing store to re-initialize (a new one is created if omitted)

    Returns:
        The initialized CatalogStore

    Raises:
        CatalogLoadError: If either file cannot be read or validated
    """
    models = read_models(models_file)
    products = read_products(products_file)

    if store is None:
        store = CatalogStore()
    store.initialize(models, products)

    logger.info(f"✅ Loaded {len(models)} models and {len(products)} products")
    return store
