"""Tests for the device registry, catalog and plugin loading."""

from __future__ import annotations

import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from deviceframe.devices import (
    DeviceRegistry,
    android_devices,
    builtin_devices,
    generic_phone,
    ios_devices,
    load_device_catalog,
    load_device_plugins,
)
from deviceframe.errors import DuplicateDeviceError
from deviceframe.geometry import Size
from deviceframe.info import DeviceType, TargetPlatform

_PLUGIN_SOURCE = """
from deviceframe.devices import generic_phone
from deviceframe.geometry import Size
from deviceframe.info import TargetPlatform

PLUGIN_API_VERSION = 1

def register_devices(registry):
    registry.register(
        generic_phone(TargetPlatform.ANDROID, "{name}", "{title}", Size(412.0, 915.0))
    )
"""


class BuiltinCatalogTests(unittest.TestCase):
    def setUp(self) -> None:
        self.catalog, self.warnings = load_device_catalog()

    def test_builtin_catalog_lists_every_model(self) -> None:
        self.assertEqual(self.warnings, ())
        self.assertEqual(len(self.catalog), len(builtin_devices()))
        self.assertIn("ios_phone_iphone-13", self.catalog.devices)
        self.assertIn("android_phone_oneplus-8-pro", self.catalog.devices)
        self.assertIn("macos_laptop_macbook-pro", self.catalog.devices)

    def test_lookup_by_identifier_or_short_name(self) -> None:
        by_id = self.catalog.get("IOS_PHONE_IPHONE-13")
        by_name = self.catalog.get("iphone-13")
        self.assertIs(by_id, by_name)
        self.assertEqual(by_name.screen_size, Size(390.0, 844.0))
        self.assertIn("iphone-13", self.catalog)

    def test_ambiguous_short_name_is_rejected(self) -> None:
        with self.assertRaises(ValueError) as context:
            self.catalog.get("wide-monitor")
        self.assertIn("ambiguous", str(context.exception))
        self.assertNotIn("wide-monitor", self.catalog)
        self.assertIsNotNone(self.catalog.get("linux_desktop_wide-monitor"))

    def test_unknown_device_is_rejected(self) -> None:
        with self.assertRaises(ValueError) as context:
            self.catalog.get("nokia-3310")
        self.assertIn("unknown device 'nokia-3310'", str(context.exception))

    def test_platform_and_type_filters(self) -> None:
        self.assertEqual(
            [str(device.identifier) for device in ios_devices(self.catalog)],
            ["ios_phone_iphone-13"],
        )
        self.assertTrue(
            all(device.platform is TargetPlatform.ANDROID for device in android_devices(self.catalog))
        )
        self.assertEqual(len(self.catalog.by_type(DeviceType.DESKTOP)), 2)
        self.assertEqual(
            self.catalog.platforms(),
            (
                TargetPlatform.ANDROID,
                TargetPlatform.IOS,
                TargetPlatform.MACOS,
                TargetPlatform.WINDOWS,
                TargetPlatform.LINUX,
            ),
        )

    def test_builtin_screen_paths_fit_their_frames(self) -> None:
        for device in self.catalog:
            with self.subTest(device=str(device.identifier)):
                frame = device.frame_size
                bounds = device.screen_path.bounds()
                self.assertGreaterEqual(bounds.left, 0.0)
                self.assertGreaterEqual(bounds.top, 0.0)
                self.assertLessEqual(bounds.right, frame.width)
                self.assertLessEqual(bounds.bottom, frame.height)


class DeviceRegistryTests(unittest.TestCase):
    def test_duplicate_identifier_is_rejected(self) -> None:
        registry = DeviceRegistry()
        registry.register(generic_phone(TargetPlatform.IOS, "dup", "First", Size(390.0, 844.0)))
        with self.assertRaises(DuplicateDeviceError):
            registry.register(
                generic_phone(TargetPlatform.IOS, "dup", "Second", Size(390.0, 844.0))
            )

    def test_same_name_on_other_platform_is_allowed(self) -> None:
        registry = DeviceRegistry()
        registry.register_many(
            (
                generic_phone(TargetPlatform.IOS, "phone", "iOS", Size(390.0, 844.0)),
                generic_phone(TargetPlatform.ANDROID, "phone", "Android", Size(360.0, 800.0)),
            )
        )
        self.assertEqual(registry.device_ids(), ("ios_phone_phone", "android_phone_phone"))
        catalog = registry.freeze()
        self.assertEqual(len(catalog), 2)

    def test_frozen_catalog_is_read_only(self) -> None:
        registry = DeviceRegistry()
        registry.register(generic_phone(TargetPlatform.IOS, "phone", "iOS", Size(390.0, 844.0)))
        catalog = registry.freeze()
        with self.assertRaises(TypeError):
            catalog.devices["other"] = None  # type: ignore[index]

    def test_short_name_lookup_ignores_case(self) -> None:
        registry = DeviceRegistry()
        registry.register(
            generic_phone(TargetPlatform.ANDROID, "Pixel7", "Pixel 7", Size(412.0, 915.0))
        )
        catalog = registry.freeze()
        self.assertEqual(catalog.resolve_id("Pixel7"), "android_phone_pixel7")
        self.assertEqual(catalog.get("pixel7").name, "Pixel 7")
        self.assertIn("PIXEL7", catalog)

    def test_merge_adds_nothing_when_one_id_collides(self) -> None:
        registry = DeviceRegistry()
        registry.register(generic_phone(TargetPlatform.IOS, "taken", "Old", Size(390.0, 844.0)))
        staged = DeviceRegistry()
        staged.register_many(
            (
                generic_phone(TargetPlatform.IOS, "fresh", "Fresh", Size(390.0, 844.0)),
                generic_phone(TargetPlatform.IOS, "taken", "New", Size(390.0, 844.0)),
            )
        )
        with self.assertRaises(DuplicateDeviceError):
            registry.merge(staged)
        self.assertEqual(registry.device_ids(), ("ios_phone_taken",))


class DevicePluginLoadingTests(unittest.TestCase):
    def _write_plugin(self, plugin_dir: Path, module: str, source: str) -> None:
        (plugin_dir / f"{module}.py").write_text(source, encoding="utf-8")

    def test_plugin_module_adds_devices(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            plugin_dir = Path(tmp_dir)
            self._write_plugin(
                plugin_dir,
                "demo_devices",
                _PLUGIN_SOURCE.format(name="pixel-7", title="Pixel 7"),
            )

            sys.path.insert(0, str(plugin_dir))
            try:
                catalog, warnings = load_device_catalog(("demo_devices",))
                self.assertEqual(warnings, ())
                self.assertEqual(catalog.get("pixel-7").name, "Pixel 7")
                self.assertEqual(len(catalog), len(builtin_devices()) + 1)
            finally:
                sys.path.remove(str(plugin_dir))
                sys.modules.pop("demo_devices", None)

    def test_colliding_plugin_device_becomes_warning(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            plugin_dir = Path(tmp_dir)
            self._write_plugin(
                plugin_dir,
                "colliding_devices",
                _PLUGIN_SOURCE.format(name="medium-phone", title="Clone"),
            )

            sys.path.insert(0, str(plugin_dir))
            try:
                catalog, warnings = load_device_catalog(("colliding_devices",))
                self.assertEqual(len(warnings), 1)
                self.assertIn("failed to load device plugin 'colliding_devices'", warnings[0])
                self.assertIn("already registered", warnings[0])
                self.assertEqual(catalog.get("medium-phone").name, "Android Phone")
            finally:
                sys.path.remove(str(plugin_dir))
                sys.modules.pop("colliding_devices", None)

    def test_failing_plugin_leaves_no_devices_behind(self) -> None:
        sources = {
            "collides_late": """
from deviceframe.devices import generic_phone
from deviceframe.geometry import Size
from deviceframe.info import TargetPlatform

def register_devices(registry):
    registry.register(generic_phone(TargetPlatform.ANDROID, "new-phone", "New", Size(360.0, 800.0)))
    registry.register(generic_phone(TargetPlatform.ANDROID, "medium-phone", "Clone", Size(360.0, 800.0)))
""",
            "raises_late": """
from deviceframe.devices import generic_phone
from deviceframe.geometry import Size
from deviceframe.info import TargetPlatform

def register_devices(registry):
    registry.register(generic_phone(TargetPlatform.ANDROID, "other-phone", "Other", Size(360.0, 800.0)))
    raise RuntimeError("broken plugin")
""",
        }
        with tempfile.TemporaryDirectory() as tmp_dir:
            plugin_dir = Path(tmp_dir)
            for module, source in sources.items():
                self._write_plugin(plugin_dir, module, source)

            sys.path.insert(0, str(plugin_dir))
            try:
                catalog, warnings = load_device_catalog(tuple(sources))
                self.assertEqual(len(warnings), 2)
                self.assertIn("already registered", warnings[0])
                self.assertIn("broken plugin", warnings[1])
                self.assertNotIn("android_phone_new-phone", catalog.devices)
                self.assertNotIn("android_phone_other-phone", catalog.devices)
                self.assertEqual(len(catalog), len(builtin_devices()))
            finally:
                sys.path.remove(str(plugin_dir))
                for module in sources:
                    sys.modules.pop(module, None)

    def test_module_without_register_function_reports_warning(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            plugin_dir = Path(tmp_dir)
            self._write_plugin(plugin_dir, "bad_devices", "x = 1\n")

            sys.path.insert(0, str(plugin_dir))
            try:
                registry = DeviceRegistry()
                warnings = load_device_plugins(registry=registry, module_paths=("bad_devices",))
                self.assertEqual(len(warnings), 1)
                self.assertIn("does not define register_devices", warnings[0])
            finally:
                sys.path.remove(str(plugin_dir))
                sys.modules.pop("bad_devices", None)

    def test_plugin_api_version_mismatch_reports_warning(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            plugin_dir = Path(tmp_dir)
            self._write_plugin(
                plugin_dir,
                "future_devices",
                "PLUGIN_API_VERSION = 2\n\ndef register_devices(registry):\n    pass\n",
            )

            sys.path.insert(0, str(plugin_dir))
            try:
                warnings = load_device_plugins(
                    registry=DeviceRegistry(), module_paths=("future_devices",)
                )
                self.assertEqual(len(warnings), 1)
                self.assertIn("plugin API version 2", warnings[0])
            finally:
                sys.path.remove(str(plugin_dir))
                sys.modules.pop("future_devices", None)

    def test_missing_module_reports_warning(self) -> None:
        warnings = load_device_plugins(
            registry=DeviceRegistry(), module_paths=("no_such_device_plugin",)
        )
        self.assertEqual(len(warnings), 1)
        self.assertIn("no_such_device_plugin", warnings[0])

    def test_entry_point_callable_is_loaded(self) -> None:
        def register(registry: DeviceRegistry) -> None:
            registry.register(
                generic_phone(TargetPlatform.ANDROID, "entry", "Entry Phone", Size(360.0, 800.0))
            )

        entry_point = MagicMock()
        entry_point.name = "entry"
        entry_point.value = "entry_pkg:register"
        entry_point.load.return_value = register

        registry = DeviceRegistry()
        with patch("importlib.metadata.entry_points", return_value=[entry_point]):
            warnings = load_device_plugins(registry=registry)
        self.assertEqual(warnings, ())
        self.assertEqual(registry.get("entry").name, "Entry Phone")
