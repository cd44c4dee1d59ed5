"""Compose a device frame with content clipped to its screen."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .blocks import Block, RenderContext
from .geometry import Offset, Rect, Size
from .info import DeviceInfo
from .orientation import Orientation, rotate_size
from .painters.contracts import DrawContext

logger = logging.getLogger(__name__)

LANDSCAPE_ROTATION_DEGREES = -90.0


@dataclass(frozen=True)
class ScreenLayout:
    """Placement of frame and content for one device/orientation pair.

    Coordinates are container coordinates: frame space shifted by
    `origin_offset`, before any rotation.
    """

    container_size: Size
    page_size: Size
    rotated: bool
    rotation_degrees: float
    origin_offset: Offset
    screen_bounds: Rect
    frame_visible: bool

    @property
    def content_rect(self) -> Rect:
        """Local rect content is rendered into, at the screen origin."""
        return Rect.from_size(self.screen_bounds.size)

    @property
    def content_origin(self) -> Offset:
        return self.screen_bounds.top_left


def compute_screen_layout(
    device: DeviceInfo,
    orientation: Orientation,
    *,
    frame_visible: bool = True,
) -> ScreenLayout:
    bounds = device.screen_path.bounds()
    if frame_visible:
        container_size = device.frame_size
        origin_offset = Offset(0.0, 0.0)
    else:
        container_size = bounds.size
        origin_offset = -bounds.top_left

    rotated = device.is_landscape(orientation)
    return ScreenLayout(
        container_size=container_size,
        page_size=rotate_size(container_size) if rotated else container_size,
        rotated=rotated,
        rotation_degrees=LANDSCAPE_ROTATION_DEGREES if rotated else 0.0,
        origin_offset=origin_offset,
        screen_bounds=bounds.translate(origin_offset.x, origin_offset.y),
        frame_visible=frame_visible,
    )


@dataclass(frozen=True)
class DeviceScreenBlock:
    """Page-level block: frame, then content clipped to the screen path."""

    device: DeviceInfo
    orientation: Orientation
    content: Block | None = None
    frame_visible: bool = True

    @property
    def layout(self) -> ScreenLayout:
        return compute_screen_layout(
            self.device, self.orientation, frame_visible=self.frame_visible
        )

    def render(self, ctx: RenderContext, rect: Rect) -> None:  # noqa: ARG002
        pdf = ctx.pdf
        layout = self.layout
        logger.debug(
            "rendering %s %s (frame %s, rotated %s)",
            self.device.identifier,
            self.orientation.value,
            "shown" if layout.frame_visible else "hidden",
            layout.rotated,
        )

        pdf.save_state()
        if layout.rotated:
            pdf.translate(layout.page_size.width / 2, layout.page_size.height / 2)
            pdf.rotate(layout.rotation_degrees)
            pdf.translate(-layout.container_size.width / 2, -layout.container_size.height / 2)
        pdf.translate(layout.origin_offset.x, layout.origin_offset.y)

        if layout.frame_visible:
            self.device.frame_painter.render(DrawContext(pdf=pdf, size=self.device.frame_size))

        if self.content is not None:
            frame_bounds = self.device.screen_path.bounds()
            pdf.save_state()
            pdf.clip_path(self.device.screen_path)
            pdf.translate(frame_bounds.left, frame_bounds.top)
            self.content.render(ctx, layout.content_rect)
            pdf.restore_state()

        pdf.restore_state()
