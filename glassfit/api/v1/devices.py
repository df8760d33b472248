"""
==============================================================================
Device Detection Endpoints
==============================================================================

Guess iPhone model candidates from screen metrics reported by the browser.

==============================================================================
"""

from fastapi import APIRouter, Query

from glassfit.devices import IOS_DEVICES, detect_ios_device, resolution_key


router = APIRouter(prefix="/devices", tags=["Devices"])


@router.get("")
async def list_devices():
    """List the resolution table."""
    return {
        "success": True,
        "devices": [device.model_dump() for device in IOS_DEVICES]
    }


@router.get("/detect")
async def detect_device(
    width: float = Query(..., gt=0),
    height: float = Query(..., gt=0),
    ratio: float = Query(1.0, gt=0)
):
    """Return candidate models for a screen of width x height CSS pixels."""
    return {
        "success": True,
        "resolution": resolution_key(width, height, ratio),
        "models": detect_ios_device(width, height, ratio)
    }
