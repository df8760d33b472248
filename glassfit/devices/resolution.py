"""
==============================================================================
Device Resolution Module
==============================================================================

Candidate iPhone models for a physical screen resolution.

The browser reports CSS pixels and a device pixel ratio; multiplying both
dimensions by the ratio gives the physical resolution, written smaller side
first ("1170x2532"). Several models share a panel, so a hit returns every
candidate. Lookup is exact; anything else yields ["unknown"].

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


# Module logger
logger = logging.getLogger(__name__)


UNKNOWN_DEVICE = "unknown"


class DeviceResolution(BaseModel):
    """Screen resolution shared by one or more iPhone models."""

    model_config = ConfigDict(frozen=True)

    gpu: str
    resolution: str
    models: Tuple[str, ...]


IOS_DEVICES: Tuple[DeviceResolution, ...] = (
    DeviceResolution(gpu="a11", resolution="1125x2436",
                     models=("iPhone X", "iPhone Xs", "iPhone 11 Pro")),
    DeviceResolution(gpu="a12", resolution="828x1792",
                     models=("iPhone Xr", "iPhone 11")),
    DeviceResolution(gpu="a12", resolution="1242x2688",
                     models=("iPhone Xs Max", "iPhone 11 Pro Max")),
    DeviceResolution(gpu="a13", resolution="750x1334",
                     models=("iPhone SE 2", "iPhone SE 3")),
    DeviceResolution(gpu="a14", resolution="1080x2340",
                     models=("iPhone 12 mini", "iPhone 13 mini")),
    DeviceResolution(gpu="a14", resolution="1170x2532",
                     models=("iPhone 12", "iPhone 12 Pro", "iPhone 13",
                             "iPhone 13 Pro", "iPhone 14")),
    DeviceResolution(gpu="a14", resolution="1284x2778",
                     models=("iPhone 12 Pro Max", "iPhone 13 Pro Max",
                             "iPhone 14 Plus")),
    DeviceResolution(gpu="a16", resolution="1179x2556",
                     models=("iPhone 14 Pro", "iPhone 15", "iPhone 15 Pro",
                             "iPhone 16")),
    DeviceResolution(gpu="a16", resolution="1290x2796",
                     models=("iPhone 14 Pro Max", "iPhone 15 Plus",
                             "iPhone 15 Pro Max", "iPhone 16 Plus")),
    DeviceResolution(gpu="a17", resolution="1206x2622",
                     models=("iPhone 16 Pro",)),
    DeviceResolution(gpu="a17", resolution="1320x2868",
                     models=("iPhone 16 Pro Max",)),
)


def _format_dimension(value: float) -> str:
    """Render 1170.0 as "1170" and keep fractional values as-is."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def resolution_key(width: float, height: float, pixel_ratio: Optional[float] = None) -> str:
    """
    Build the physical resolution string for a screen.

    Args:
        width: Screen width in CSS pixels
        height: Screen height in CSS pixels
        pixel_ratio: Device pixel ratio (missing or 0 means 1)

    Returns:
        "<short>x<long>" in physical pixels
    """
    ratio = pixel_ratio or 1
    short_side = min(width, height) * ratio
    long_side = max(width, height) * ratio
    return f"{_format_dimension(short_side)}x{_format_dimension(long_side)}"


def lookup_resolution(resolution: str) -> List[str]:
    """Return candidate models for an exact resolution string."""
    for device in IOS_DEVICES:
        if device.resolution == resolution:
            return list(device.models)

    logger.debug(f"No device registered for resolution {resolution}")
    return [UNKNOWN_DEVICE]


def detect_ios_device(
    width: float,
    height: float,
    pixel_ratio: Optional[float] = None,
) -> List[str]:
    """
    Detect iPhone model candidates from reported screen metrics.

    Example:
        >>> detect_ios_device(390, 844, 3)
        ['iPhone 12', 'iPhone 12 Pro', 'iPhone 13', 'iPhone 13 Pro', 'iPhone 14']
    """
    return lookup_resolution(resolution_key(width, height, pixel_ratio))
