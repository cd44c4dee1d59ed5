"""Device builders, built-in models and the device catalog."""

from .builders import (
    fixed_device,
    generic_desktop_monitor,
    generic_laptop,
    generic_phone,
    generic_tablet,
)
from .catalog import (
    android_devices,
    builtin_devices,
    ios_devices,
    load_device_catalog,
)
from .plugins import PLUGIN_API_VERSION, load_device_plugins
from .registry import DeviceCatalog, DeviceRegistry

__all__ = [
    "PLUGIN_API_VERSION",
    "DeviceCatalog",
    "DeviceRegistry",
    "android_devices",
    "builtin_devices",
    "fixed_device",
    "generic_desktop_monitor",
    "generic_laptop",
    "generic_phone",
    "generic_tablet",
    "ios_devices",
    "load_device_catalog",
    "load_device_plugins",
]
