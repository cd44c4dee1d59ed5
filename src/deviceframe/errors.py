"""Typed errors raised while building devices and catalogs."""

from __future__ import annotations


class DeviceFrameError(ValueError):
    """Base error for invalid device configuration."""


class InvalidScreenSizeError(DeviceFrameError):
    """Screen size with a non-positive dimension."""


class WindowBoundsError(DeviceFrameError):
    """Window rect that does not fit inside its parent screen."""


class DeviceGeometryError(DeviceFrameError):
    """Painter output that is not self-consistent (screen path outside the frame)."""


class DuplicateDeviceError(DeviceFrameError):
    """Two devices registered under the same identifier."""
