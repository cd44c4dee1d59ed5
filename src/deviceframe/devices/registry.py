"""Device registry and the immutable catalog frozen from it."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from deviceframe.errors import DuplicateDeviceError
from deviceframe.info import DeviceInfo, DeviceType, TargetPlatform

logger = logging.getLogger(__name__)


def resolve_device_id(devices: Mapping[str, DeviceInfo], device: str) -> str:
    """Match a full identifier first, then a unique short name (both case-insensitive)."""
    key = device.strip().lower()
    if key in devices:
        return key
    matches = [
        device_id for device_id, info in devices.items() if info.identifier.name.lower() == key
    ]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        choices = ", ".join(sorted(matches))
        msg = f"device name '{device}' is ambiguous. Matching devices: {choices}."
        raise ValueError(msg)
    valid = ", ".join(sorted(devices))
    msg = f"unknown device '{device}'. Valid devices: {valid}."
    raise ValueError(msg)


def _duplicate_error(device_id: str, existing: DeviceInfo, new: DeviceInfo) -> DuplicateDeviceError:
    msg = (
        f"device '{device_id}' is already registered "
        f"(existing: '{existing.name}', new: '{new.name}')."
    )
    return DuplicateDeviceError(msg)


@dataclass
class DeviceRegistry:
    """Mutable registry used while a catalog is being assembled."""

    _devices: dict[str, DeviceInfo] = field(default_factory=dict)

    def register(self, device: DeviceInfo) -> None:
        device_id = str(device.identifier)
        existing = self._devices.get(device_id)
        if existing is not None:
            raise _duplicate_error(device_id, existing, device)
        self._devices[device_id] = device
        logger.debug("registered device %s", device_id)

    def register_many(self, devices: Iterable[DeviceInfo]) -> None:
        for device in devices:
            self.register(device)

    def merge(self, other: DeviceRegistry) -> None:
        """Add every device of `other`, or none of them when any id collides."""
        for device_id, device in other._devices.items():
            existing = self._devices.get(device_id)
            if existing is not None:
                raise _duplicate_error(device_id, existing, device)
        self.register_many(other._devices.values())

    def resolve_id(self, device: str) -> str:
        return resolve_device_id(self._devices, device)

    def get(self, device: str) -> DeviceInfo:
        return self._devices[self.resolve_id(device)]

    def list_devices(self) -> tuple[DeviceInfo, ...]:
        return tuple(self._devices.values())

    def device_ids(self) -> tuple[str, ...]:
        return tuple(self._devices)

    def freeze(self) -> DeviceCatalog:
        return DeviceCatalog(dict(self._devices))


class DeviceCatalog:
    """Read-only mapping of identifier strings to devices."""

    def __init__(self, devices: Mapping[str, DeviceInfo]) -> None:
        self._devices = MappingProxyType(dict(devices))

    def __len__(self) -> int:
        return len(self._devices)

    def __contains__(self, device: object) -> bool:
        if not isinstance(device, str):
            return False
        try:
            resolve_device_id(self._devices, device)
        except ValueError:
            return False
        return True

    def __iter__(self) -> Iterator[DeviceInfo]:
        return iter(self._devices.values())

    @property
    def devices(self) -> Mapping[str, DeviceInfo]:
        return self._devices

    def resolve_id(self, device: str) -> str:
        return resolve_device_id(self._devices, device)

    def get(self, device: str) -> DeviceInfo:
        return self._devices[self.resolve_id(device)]

    def all(self) -> tuple[DeviceInfo, ...]:
        return tuple(self._devices.values())

    def by_platform(self, platform: TargetPlatform) -> tuple[DeviceInfo, ...]:
        return tuple(device for device in self._devices.values() if device.platform is platform)

    def by_type(self, device_type: DeviceType) -> tuple[DeviceInfo, ...]:
        return tuple(device for device in self._devices.values() if device.type is device_type)

    def platforms(self) -> tuple[TargetPlatform, ...]:
        """Platforms present in the catalog, in declaration order."""
        present = {device.platform for device in self._devices.values()}
        return tuple(platform for platform in TargetPlatform if platform in present)
