"""Pure constructors that turn a painter plus screen data into a DeviceInfo."""

from __future__ import annotations

import logging

from deviceframe.config import DEFAULT_PIXEL_RATIO
from deviceframe.errors import DeviceGeometryError, WindowBoundsError
from deviceframe.geometry import EdgeInsets, Path, Rect, Size, validate_screen_size
from deviceframe.info import DeviceIdentifier, DeviceInfo, DeviceType, TargetPlatform
from deviceframe.painters.base import window_bar_height
from deviceframe.painters.contracts import FramePainter
from deviceframe.painters.desktop_monitor import GenericDesktopMonitorFramePainter
from deviceframe.painters.laptop import GenericLaptopFramePainter
from deviceframe.painters.phone import GenericPhoneFramePainter
from deviceframe.painters.tablet import GenericTabletFramePainter
from deviceframe.painters.window import WindowedFramePainter

logger = logging.getLogger(__name__)


def _check_path_fits(identifier: DeviceIdentifier, screen_path: Path, frame_size: Size) -> None:
    bounds = screen_path.bounds()
    if not Rect.from_size(frame_size).contains_rect(bounds):
        msg = (
            f"screen path of '{identifier}' spans ({bounds.left:g}, {bounds.top:g})-"
            f"({bounds.right:g}, {bounds.bottom:g}), outside the "
            f"{frame_size.width:g}x{frame_size.height:g} frame."
        )
        raise DeviceGeometryError(msg)


def _check_window(platform: TargetPlatform, screen_size: Size, window_position: Rect) -> None:
    if window_position.width <= 0:
        msg = "window width must be positive."
        raise WindowBoundsError(msg)
    if not Rect.from_size(screen_size).contains_rect(window_position):
        msg = (
            f"window ({window_position.left:g}, {window_position.top:g}, "
            f"{window_position.width:g}x{window_position.height:g}) does not fit the "
            f"{screen_size.width:g}x{screen_size.height:g} screen."
        )
        raise WindowBoundsError(msg)
    bar_height = window_bar_height(platform)
    if window_position.height <= bar_height:
        msg = (
            f"window height {window_position.height:g} must exceed the "
            f"{bar_height:g} title bar on {platform.value}."
        )
        raise WindowBoundsError(msg)


def _check_painter_window(
    painter: WindowedFramePainter, platform: TargetPlatform, window_position: Rect
) -> None:
    if painter.platform is not platform or painter.window_position != window_position:
        msg = (
            f"painter window ({painter.platform.value}, {painter.window_position}) does not match "
            f"the device window ({platform.value}, {window_position})."
        )
        raise WindowBoundsError(msg)


def _assemble(
    identifier: DeviceIdentifier,
    name: str,
    painter: FramePainter,
    screen_size: Size,
    *,
    safe_areas: EdgeInsets,
    rotated_safe_areas: EdgeInsets | None,
    pixel_ratio: float,
    screen_path: Path | None = None,
    window_size: Size | None = None,
) -> DeviceInfo:
    frame_size = painter.calculate_frame_size(screen_size)
    path = screen_path if screen_path is not None else painter.create_screen_path(screen_size)
    _check_path_fits(identifier, path, frame_size)

    device = DeviceInfo(
        identifier=identifier,
        name=name,
        safe_areas=safe_areas,
        rotated_safe_areas=rotated_safe_areas,
        screen_path=path,
        pixel_ratio=pixel_ratio,
        frame_painter=painter,
        frame_size=frame_size,
        screen_size=screen_size,
        window_size=window_size,
    )
    logger.debug(
        "built device %s: frame %gx%g, screen %gx%g",
        identifier,
        frame_size.width,
        frame_size.height,
        screen_size.width,
        screen_size.height,
    )
    return device


def generic_phone(
    platform: TargetPlatform,
    id: str,
    name: str,
    screen_size: Size,
    *,
    safe_areas: EdgeInsets = EdgeInsets.ZERO,
    pixel_ratio: float = DEFAULT_PIXEL_RATIO,
    rotated_safe_areas: EdgeInsets | None = None,
    painter: FramePainter | None = None,
) -> DeviceInfo:
    """Build a phone with the parametric phone frame unless `painter` is given."""
    validate_screen_size(screen_size)
    return _assemble(
        DeviceIdentifier(name=id, type=DeviceType.PHONE, platform=platform),
        name,
        painter or GenericPhoneFramePainter(),
        screen_size,
        safe_areas=safe_areas,
        rotated_safe_areas=rotated_safe_areas,
        pixel_ratio=pixel_ratio,
    )


def generic_tablet(
    platform: TargetPlatform,
    id: str,
    name: str,
    screen_size: Size,
    *,
    safe_areas: EdgeInsets = EdgeInsets.ZERO,
    pixel_ratio: float = DEFAULT_PIXEL_RATIO,
    rotated_safe_areas: EdgeInsets | None = None,
    painter: FramePainter | None = None,
) -> DeviceInfo:
    validate_screen_size(screen_size)
    return _assemble(
        DeviceIdentifier(name=id, type=DeviceType.TABLET, platform=platform),
        name,
        painter or GenericTabletFramePainter(),
        screen_size,
        safe_areas=safe_areas,
        rotated_safe_areas=rotated_safe_areas,
        pixel_ratio=pixel_ratio,
    )


def generic_laptop(
    platform: TargetPlatform,
    id: str,
    name: str,
    screen_size: Size,
    window_position: Rect,
    *,
    safe_areas: EdgeInsets = EdgeInsets.ZERO,
    pixel_ratio: float = DEFAULT_PIXEL_RATIO,
    rotated_safe_areas: EdgeInsets | None = None,
    painter: GenericLaptopFramePainter | None = None,
) -> DeviceInfo:
    """Build a laptop whose content area is a window placed on its screen.

    `window_position` is relative to the screen's top-left corner.
    """
    validate_screen_size(screen_size)
    _check_window(platform, screen_size, window_position)
    if painter is not None:
        _check_painter_window(painter, platform, window_position)
    effective_painter = painter or GenericLaptopFramePainter(platform, window_position)
    return _assemble(
        DeviceIdentifier(name=id, type=DeviceType.LAPTOP, platform=platform),
        name,
        effective_painter,
        screen_size,
        safe_areas=safe_areas,
        rotated_safe_areas=rotated_safe_areas,
        pixel_ratio=pixel_ratio,
        window_size=effective_painter.effective_window_size,
    )


def generic_desktop_monitor(
    platform: TargetPlatform,
    id: str,
    name: str,
    screen_size: Size,
    window_position: Rect,
    *,
    safe_areas: EdgeInsets = EdgeInsets.ZERO,
    pixel_ratio: float = DEFAULT_PIXEL_RATIO,
    rotated_safe_areas: EdgeInsets | None = None,
    painter: GenericDesktopMonitorFramePainter | None = None,
) -> DeviceInfo:
    """Build a desktop monitor whose content area is a window placed on its screen."""
    validate_screen_size(screen_size)
    _check_window(platform, screen_size, window_position)
    if painter is not None:
        _check_painter_window(painter, platform, window_position)
    effective_painter = painter or GenericDesktopMonitorFramePainter(platform, window_position)
    return _assemble(
        DeviceIdentifier(name=id, type=DeviceType.DESKTOP, platform=platform),
        name,
        effective_painter,
        screen_size,
        safe_areas=safe_areas,
        rotated_safe_areas=rotated_safe_areas,
        pixel_ratio=pixel_ratio,
        window_size=effective_painter.effective_window_size,
    )


def fixed_device(
    identifier: DeviceIdentifier,
    name: str,
    *,
    painter: FramePainter,
    screen_size: Size,
    screen_path: Path | None = None,
    pixel_ratio: float = DEFAULT_PIXEL_RATIO,
    safe_areas: EdgeInsets = EdgeInsets.ZERO,
    rotated_safe_areas: EdgeInsets | None = None,
) -> DeviceInfo:
    """Build a device around a painter with baked artwork.

    `screen_path` overrides the painter's own outline, e.g. to cut out a notch.
    """
    validate_screen_size(screen_size)
    return _assemble(
        identifier,
        name,
        painter,
        screen_size,
        safe_areas=safe_areas,
        rotated_safe_areas=rotated_safe_areas,
        pixel_ratio=pixel_ratio,
        screen_path=screen_path,
    )
