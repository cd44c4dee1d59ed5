"""Orientation helpers for device screens."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .geometry import Size

if TYPE_CHECKING:
    from .info import DeviceInfo


class Orientation(Enum):
    """Screen orientation."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"

    @classmethod
    def from_size(cls, size: Size) -> Orientation:
        """Return PORTRAIT when height >= width (ties favour portrait)."""
        if size.height >= size.width:
            return cls.PORTRAIT
        return cls.LANDSCAPE

    @classmethod
    def from_value(cls, value: str) -> Orientation:
        normalized = value.strip().lower()
        for orientation in cls:
            if orientation.value == normalized:
                return orientation
        valid = ", ".join(orientation.value for orientation in cls)
        msg = f"unknown orientation '{value}'. Valid orientations: {valid}."
        raise ValueError(msg)

    @property
    def is_portrait(self) -> bool:
        return self is Orientation.PORTRAIT

    @property
    def is_landscape(self) -> bool:
        return self is Orientation.LANDSCAPE


def are_opposite(first: Orientation, second: Orientation) -> bool:
    return first is not second


def rotate_size(size: Size) -> Size:
    return Size(width=size.height, height=size.width)


def is_in_landscape(device: DeviceInfo, orientation: Orientation) -> bool:
    """True when the orientation is landscape and the screen is wider than tall."""
    return orientation.is_landscape and device.screen_size.width > device.screen_size.height


def oriented_screen_size(device: DeviceInfo, orientation: Orientation) -> Size:
    """Return the screen size with width and height swapped for landscape."""
    if orientation.is_landscape:
        return rotate_size(device.screen_size)
    return device.screen_size
