"""
==============================================================================
Tools Package
==============================================================================

Build-time helpers around the catalog files.

Modules:
--------
- bundler: embed the catalog into a standalone offline page
- checker: verify a bundled page against the source product JSON

==============================================================================
"""

from .bundler import build_offline_page, bundle_page
from .checker import ConsistencyReport, check_products, compare_box_codes, extract_bundled_products

__all__ = [
    "build_offline_page",
    "bundle_page",
    "ConsistencyReport",
    "check_products",
    "compare_box_codes",
    "extract_bundled_products",
]
