"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the application.

Modules:
--------
- exceptions: AppException class, tooling errors and error factory functions
- dependencies: FastAPI dependency injection functions

Usage:
------
    from glassfit.core import exceptions
    raise exceptions.product_not_found("UNIPRO H01")

==============================================================================
"""

from .exceptions import (
    AppException,
    BundleError,
    CatalogLoadError,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "BundleError",
    "CatalogLoadError",
    "register_exception_handlers",
]
