"""
==============================================================================
Devices Package
==============================================================================

Static screen-resolution table for guessing the visitor's iPhone model.

==============================================================================
"""

from .resolution import (
    IOS_DEVICES,
    UNKNOWN_DEVICE,
    DeviceResolution,
    detect_ios_device,
    lookup_resolution,
    resolution_key,
)

__all__ = [
    "IOS_DEVICES",
    "UNKNOWN_DEVICE",
    "DeviceResolution",
    "detect_ios_device",
    "lookup_resolution",
    "resolution_key",
]
