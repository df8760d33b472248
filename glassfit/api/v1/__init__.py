"""
==============================================================================
API v1 Endpoints
==============================================================================

Version 1 of the REST API.

Routers:
--------
- health: Health check endpoints
- search: Model autocomplete and keyword search
- products: Product catalog and device resolution
- devices: Screen-resolution device detection

==============================================================================
"""

from . import health, search, products, devices

__all__ = ["health", "search", "products", "devices"]
