"""Built-in devices and the catalog loader."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from deviceframe.config import PLUGIN_ENTRY_POINT_GROUP
from deviceframe.geometry import EdgeInsets, Rect, Size
from deviceframe.info import DeviceInfo, TargetPlatform

from .builders import generic_desktop_monitor, generic_laptop, generic_phone, generic_tablet
from .iphone_13 import iphone_13
from .oneplus_8_pro import oneplus_8_pro
from .plugins import load_device_plugins
from .registry import DeviceCatalog, DeviceRegistry

logger = logging.getLogger(__name__)


def builtin_devices() -> tuple[DeviceInfo, ...]:
    """Fixed-artwork models followed by generic reference devices."""
    return (
        iphone_13(),
        oneplus_8_pro(),
        generic_phone(
            TargetPlatform.ANDROID,
            "medium-phone",
            "Android Phone",
            Size(360.0, 800.0),
            safe_areas=EdgeInsets(top=24.0),
            rotated_safe_areas=EdgeInsets(left=24.0),
            pixel_ratio=3.0,
        ),
        generic_tablet(
            TargetPlatform.ANDROID,
            "medium-tablet",
            "Android Tablet",
            Size(800.0, 1280.0),
            safe_areas=EdgeInsets(top=24.0),
            rotated_safe_areas=EdgeInsets(top=24.0),
        ),
        generic_laptop(
            TargetPlatform.MACOS,
            "macbook-pro",
            "MacBook Pro",
            Size(1440.0, 900.0),
            Rect(left=120.0, top=60.0, right=1320.0, bottom=840.0),
        ),
        generic_desktop_monitor(
            TargetPlatform.WINDOWS,
            "wide-monitor",
            "Windows Monitor",
            Size(1920.0, 1080.0),
            Rect(left=160.0, top=90.0, right=1760.0, bottom=990.0),
        ),
        generic_desktop_monitor(
            TargetPlatform.LINUX,
            "wide-monitor",
            "Linux Monitor",
            Size(1920.0, 1080.0),
            Rect(left=160.0, top=90.0, right=1760.0, bottom=990.0),
        ),
    )


def android_devices(catalog: DeviceCatalog) -> tuple[DeviceInfo, ...]:
    return catalog.by_platform(TargetPlatform.ANDROID)


def ios_devices(catalog: DeviceCatalog) -> tuple[DeviceInfo, ...]:
    return catalog.by_platform(TargetPlatform.IOS)


def load_device_catalog(
    plugin_modules: Iterable[str] = (),
    *,
    entry_point_group: str = PLUGIN_ENTRY_POINT_GROUP,
) -> tuple[DeviceCatalog, tuple[str, ...]]:
    """Build the catalog: builtins first, then plugin devices.

    Builtin collisions raise `DuplicateDeviceError`; plugin failures,
    collisions included, come back as warning strings.
    """
    registry = DeviceRegistry()
    registry.register_many(builtin_devices())
    warnings = load_device_plugins(
        registry=registry,
        module_paths=plugin_modules,
        entry_point_group=entry_point_group,
    )
    catalog = registry.freeze()
    logger.debug("device catalog loaded with %d devices", len(catalog))
    return catalog, warnings
