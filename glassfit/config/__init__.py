"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from glassfit.config import get_settings

    settings = get_settings()
    print(settings.products_path)

==============================================================================
"""

from .settings import DEFAULT_CATEGORY, Settings, get_settings

__all__ = [
    "DEFAULT_CATEGORY",
    "Settings",
    "get_settings",
]
