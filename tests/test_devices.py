"""
==============================================================================
Device Resolution Tests
==============================================================================

Tests for the screen-resolution lookup table.

==============================================================================
"""

import pytest

from glassfit.devices import (
    IOS_DEVICES,
    UNKNOWN_DEVICE,
    detect_ios_device,
    lookup_resolution,
    resolution_key,
)


class TestResolutionKey:
    """Tests for building resolution strings."""

    def test_scaled_by_pixel_ratio(self):
        assert resolution_key(390, 844, 3) == "1170x2532"

    def test_smaller_dimension_first(self):
        """Landscape metrics give the same key as portrait."""
        assert resolution_key(844, 390, 3) == "1170x2532"

    @pytest.mark.parametrize("ratio", [None, 0, 1])
    def test_missing_ratio_means_one(self, ratio):
        assert resolution_key(1170, 2532, ratio) == "1170x2532"

    def test_fractional_result_kept(self):
        assert resolution_key(100, 200, 1.5) == "150x300"
        assert resolution_key(101, 200, 1.5) == "151.5x300"


class TestDeviceLookup:
    """Tests for resolution lookup and detection."""

    def test_shared_resolution_lists_every_model(self):
        assert detect_ios_device(390, 844, 3) == [
            "iPhone 12", "iPhone 12 Pro", "iPhone 13", "iPhone 13 Pro", "iPhone 14",
        ]

    def test_single_model_resolution(self):
        assert lookup_resolution("1320x2868") == ["iPhone 16 Pro Max"]

    def test_iphone_se(self):
        assert detect_ios_device(375, 667, 2) == ["iPhone SE 2", "iPhone SE 3"]

    def test_unknown_resolution(self):
        assert detect_ios_device(1080, 1920, 1) == [UNKNOWN_DEVICE]
        assert lookup_resolution("1170 x 2532") == ["unknown"]

    def test_lookup_returns_copy(self):
        """Callers cannot mutate the table through a result."""
        models = lookup_resolution("1206x2622")
        models.append("iPhone 99")
        assert lookup_resolution("1206x2622") == ["iPhone 16 Pro"]

    def test_table_resolutions_unique(self):
        resolutions = [device.resolution for device in IOS_DEVICES]
        assert len(resolutions) == len(set(resolutions)) == 11
