"""Device identity and aggregated device info records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .geometry import EdgeInsets, Path, Size
from .orientation import Orientation

if TYPE_CHECKING:
    from .painters.contracts import FramePainter


class DeviceType(Enum):
    """Kind of device a frame represents."""

    UNKNOWN = "unknown"
    PHONE = "phone"
    TABLET = "tablet"
    TV = "tv"
    DESKTOP = "desktop"
    LAPTOP = "laptop"

    @classmethod
    def from_value(cls, value: str) -> DeviceType:
        """Match case-insensitively; anything unrecognised maps to UNKNOWN."""
        normalized = value.strip().lower()
        for device_type in cls:
            if device_type.value == normalized:
                return device_type
        return cls.UNKNOWN


class TargetPlatform(Enum):
    """Operating system family a device runs."""

    ANDROID = "android"
    IOS = "ios"
    MACOS = "macos"
    WINDOWS = "windows"
    LINUX = "linux"

    @classmethod
    def from_value(cls, value: str) -> TargetPlatform:
        normalized = value.strip().lower()
        for platform in cls:
            if platform.value == normalized:
                return platform
        valid = ", ".join(platform.value for platform in cls)
        msg = f"unknown platform '{value}'. Valid platforms: {valid}."
        raise ValueError(msg)


class SideButtonSide(Enum):
    """Frame edge that carries a row of physical buttons."""

    TOP = "top"
    LEFT = "left"
    RIGHT = "right"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class DeviceIdentifier:
    """Stable key for a device: `{platform}_{type}_{name}`."""

    name: str
    type: DeviceType
    platform: TargetPlatform

    def __str__(self) -> str:
        return f"{self.platform.value}_{self.type.value}_{self.name}".lower()


@dataclass(frozen=True)
class DeviceInfo:
    """Everything needed to draw one device and place content on its screen.

    `frame_size` is what `frame_painter.calculate_frame_size(screen_size)`
    returned and `screen_path` lies inside it. Window-emulating families
    (laptop, desktop monitor) also carry `window_size`, the content area of
    the simulated application window.
    """

    identifier: DeviceIdentifier
    name: str
    safe_areas: EdgeInsets
    rotated_safe_areas: EdgeInsets | None
    screen_path: Path
    pixel_ratio: float
    frame_painter: FramePainter
    frame_size: Size
    screen_size: Size
    window_size: Size | None = None

    def __post_init__(self) -> None:
        if self.pixel_ratio <= 0:
            msg = f"pixel_ratio must be positive for device '{self.identifier}'."
            raise ValueError(msg)

    @property
    def can_rotate(self) -> bool:
        return self.rotated_safe_areas is not None

    @property
    def content_size(self) -> Size:
        if self.window_size is not None:
            return self.window_size
        return self.screen_size

    @property
    def platform(self) -> TargetPlatform:
        return self.identifier.platform

    @property
    def type(self) -> DeviceType:
        return self.identifier.type

    def is_landscape(self, orientation: Orientation) -> bool:
        return self.can_rotate and orientation is Orientation.LANDSCAPE

    def safe_areas_for(self, orientation: Orientation) -> EdgeInsets:
        if self.is_landscape(orientation) and self.rotated_safe_areas is not None:
            return self.rotated_safe_areas
        return self.safe_areas
