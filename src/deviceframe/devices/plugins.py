"""External device definitions loaded from modules and entry points.

A plugin is a module exposing `register_devices(registry)` (optionally with
`PLUGIN_API_VERSION`), or an entry point resolving to such a module or to the
register callable itself. Each plugin registers into its own scratch
registry; its devices reach the target registry only if the whole plugin
succeeds and none of its identifiers collide.
"""

from __future__ import annotations

import importlib
import importlib.metadata
import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from types import ModuleType
from typing import Any

from deviceframe.config import PLUGIN_ENTRY_POINT_GROUP

from .registry import DeviceRegistry

PLUGIN_API_VERSION = 1

logger = logging.getLogger(__name__)

RegisterDevices = Callable[[DeviceRegistry], None]


@dataclass(frozen=True)
class PluginSource:
    """Where a plugin comes from and how to import it."""

    label: str
    load: Callable[[], Any]


def plugin_sources(
    module_paths: Iterable[str],
    entry_point_group: str,
) -> Iterator[PluginSource]:
    """Explicit module paths first, then installed entry points."""
    for module_path in module_paths:
        yield PluginSource(
            label=module_path,
            load=lambda module_path=module_path: importlib.import_module(module_path),
        )
    for entry_point in importlib.metadata.entry_points(group=entry_point_group):
        yield PluginSource(label=f"{entry_point.name} ({entry_point.value})", load=entry_point.load)


def _register_function(plugin: Any) -> RegisterDevices:
    if not isinstance(plugin, ModuleType):
        if callable(plugin):
            return plugin
        msg = "plugin must be a module or a register_devices callable."
        raise ValueError(msg)

    api_version = getattr(plugin, "PLUGIN_API_VERSION", PLUGIN_API_VERSION)
    if api_version != PLUGIN_API_VERSION:
        msg = (
            f"module '{plugin.__name__}' targets plugin API version {api_version}, "
            f"expected {PLUGIN_API_VERSION}."
        )
        raise ValueError(msg)

    register = getattr(plugin, "register_devices", None)
    if not callable(register):
        msg = f"module '{plugin.__name__}' does not define register_devices(registry)."
        raise ValueError(msg)
    return register


def install_plugin(registry: DeviceRegistry, source: PluginSource) -> int:
    """Load one plugin and merge its devices; returns how many were added."""
    staged = DeviceRegistry()
    _register_function(source.load())(staged)
    registry.merge(staged)
    added = len(staged.device_ids())
    logger.debug("device plugin %s added %d device(s)", source.label, added)
    return added


def load_device_plugins(
    *,
    registry: DeviceRegistry,
    module_paths: Iterable[str] = (),
    entry_point_group: str = PLUGIN_ENTRY_POINT_GROUP,
) -> tuple[str, ...]:
    """Install every plugin, turning each failure into a warning string."""
    warnings: list[str] = []
    for source in plugin_sources(module_paths, entry_point_group):
        try:
            install_plugin(registry, source)
        except Exception as exc:  # noqa: BLE001
            logger.warning("failed to load device plugin %s: %s", source.label, exc)
            warnings.append(f"warning: failed to load device plugin '{source.label}': {exc}")
    return tuple(warnings)
