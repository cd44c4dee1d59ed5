"""Tests for device identity, info records and orientation helpers."""

from __future__ import annotations

import unittest

from deviceframe.devices import generic_phone
from deviceframe.geometry import EdgeInsets, Size
from deviceframe.info import DeviceIdentifier, DeviceType, TargetPlatform
from deviceframe.orientation import (
    Orientation,
    are_opposite,
    is_in_landscape,
    oriented_screen_size,
    rotate_size,
)


class DeviceIdentifierTests(unittest.TestCase):
    def test_string_form_is_lowercase_platform_type_name(self) -> None:
        identifier = DeviceIdentifier(
            name="Medium-Phone", type=DeviceType.PHONE, platform=TargetPlatform.ANDROID
        )
        self.assertEqual(str(identifier), "android_phone_medium-phone")

    def test_device_type_from_unknown_value(self) -> None:
        self.assertIs(DeviceType.from_value("Laptop"), DeviceType.LAPTOP)
        self.assertIs(DeviceType.from_value("watch"), DeviceType.UNKNOWN)

    def test_platform_from_unknown_value_raises(self) -> None:
        with self.assertRaises(ValueError) as context:
            TargetPlatform.from_value("beos")
        self.assertIn("unknown platform 'beos'", str(context.exception))


class DeviceInfoTests(unittest.TestCase):
    def test_safe_areas_follow_orientation_when_rotatable(self) -> None:
        device = generic_phone(
            TargetPlatform.ANDROID,
            "phone",
            "Phone",
            Size(360.0, 800.0),
            safe_areas=EdgeInsets(top=24.0),
            rotated_safe_areas=EdgeInsets(left=24.0),
        )
        self.assertTrue(device.can_rotate)
        self.assertEqual(device.safe_areas_for(Orientation.PORTRAIT), EdgeInsets(top=24.0))
        self.assertEqual(device.safe_areas_for(Orientation.LANDSCAPE), EdgeInsets(left=24.0))

    def test_non_rotatable_device_keeps_portrait_safe_areas(self) -> None:
        device = generic_phone(
            TargetPlatform.ANDROID,
            "phone",
            "Phone",
            Size(360.0, 800.0),
            safe_areas=EdgeInsets(top=24.0),
        )
        self.assertFalse(device.can_rotate)
        self.assertFalse(device.is_landscape(Orientation.LANDSCAPE))
        self.assertEqual(device.safe_areas_for(Orientation.LANDSCAPE), EdgeInsets(top=24.0))

    def test_content_size_is_screen_size_without_window(self) -> None:
        device = generic_phone(TargetPlatform.IOS, "phone", "Phone", Size(390.0, 844.0))
        self.assertIsNone(device.window_size)
        self.assertEqual(device.content_size, Size(390.0, 844.0))

    def test_pixel_ratio_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            generic_phone(
                TargetPlatform.IOS, "phone", "Phone", Size(390.0, 844.0), pixel_ratio=0.0
            )


class OrientationTests(unittest.TestCase):
    def test_from_size_prefers_portrait_on_ties(self) -> None:
        self.assertIs(Orientation.from_size(Size(100.0, 100.0)), Orientation.PORTRAIT)
        self.assertIs(Orientation.from_size(Size(200.0, 100.0)), Orientation.LANDSCAPE)

    def test_from_size_for_tall_and_wide_screens(self) -> None:
        self.assertIs(Orientation.from_size(Size(400.0, 800.0)), Orientation.PORTRAIT)
        self.assertIs(Orientation.from_size(Size(800.0, 400.0)), Orientation.LANDSCAPE)

    def test_from_value(self) -> None:
        self.assertIs(Orientation.from_value(" Landscape "), Orientation.LANDSCAPE)
        with self.assertRaises(ValueError):
            Orientation.from_value("sideways")

    def test_rotate_and_opposite(self) -> None:
        self.assertEqual(rotate_size(Size(390.0, 844.0)), Size(844.0, 390.0))
        self.assertTrue(are_opposite(Orientation.PORTRAIT, Orientation.LANDSCAPE))
        self.assertFalse(are_opposite(Orientation.PORTRAIT, Orientation.PORTRAIT))

    def test_oriented_screen_size_swaps_for_landscape(self) -> None:
        device = generic_phone(TargetPlatform.IOS, "phone", "Phone", Size(390.0, 844.0))
        self.assertEqual(
            oriented_screen_size(device, Orientation.LANDSCAPE), Size(844.0, 390.0)
        )
        self.assertEqual(oriented_screen_size(device, Orientation.PORTRAIT), Size(390.0, 844.0))
        self.assertFalse(is_in_landscape(device, Orientation.LANDSCAPE))
