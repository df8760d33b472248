"""
==============================================================================
Matching Package
==============================================================================

Device-name matching and keyword search over the catalog.

Classes:
--------
- MatchingEngine: autocomplete, product resolution and keyword search

==============================================================================
"""

from .engine import MatchingEngine

__all__ = [
    "MatchingEngine",
]
