"""Composable content blocks drawn inside a device screen."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path as FilePath
from typing import Any, Protocol

from .config import FrameColors
from .drawing import DrawingPrimitives
from .geometry import EdgeInsets, Rect
from .info import DeviceInfo
from .orientation import Orientation


@dataclass(frozen=True)
class RenderContext:
    """Context shared by all blocks during rendering."""

    pdf: DrawingPrimitives
    device: DeviceInfo
    orientation: Orientation
    extras: dict[str, Any] = field(default_factory=dict)

    @property
    def rotated(self) -> bool:
        return self.device.is_landscape(self.orientation)

    @property
    def safe_areas(self) -> EdgeInsets:
        return self.device.safe_areas_for(self.orientation)


class Block(Protocol):
    """Composable rendering unit."""

    def render(self, ctx: RenderContext, rect: Rect) -> None:
        """Draw into the target rectangle."""


@dataclass(frozen=True)
class CompositeBlock:
    """Render multiple blocks in order."""

    blocks: Sequence[Block]

    def render(self, ctx: RenderContext, rect: Rect) -> None:
        for block in self.blocks:
            block.render(ctx, rect)


@dataclass(frozen=True)
class CallbackBlock:
    """Wrap a callback as a block."""

    callback: Callable[[RenderContext, Rect], None]

    def render(self, ctx: RenderContext, rect: Rect) -> None:
        self.callback(ctx, rect)


@dataclass(frozen=True)
class SolidFillBlock:
    """Fill the whole target rect with one color."""

    color: Any

    def render(self, ctx: RenderContext, rect: Rect) -> None:
        ctx.pdf.set_fill_color(self.color)
        ctx.pdf.rect(rect.left, rect.top, rect.width, rect.height, fill=1, stroke=0)


@dataclass(frozen=True)
class ImageBlock:
    """Stretch an image file over the target rect."""

    image_path: str | FilePath

    def __post_init__(self) -> None:
        if not FilePath(self.image_path).is_file():
            msg = f"image file not found: {self.image_path}"
            raise ValueError(msg)

    def render(self, ctx: RenderContext, rect: Rect) -> None:
        ctx.pdf.draw_image(str(self.image_path), rect.left, rect.top, rect.width, rect.height)


def container_safe_areas(insets: EdgeInsets, *, rotated: bool) -> EdgeInsets:
    """Map landscape safe areas onto the unrotated screen.

    A rotated device is turned a quarter counter-clockwise, so its landscape
    left edge is the screen's top edge, landscape top is the right edge and
    so on.
    """
    if not rotated:
        return insets
    return EdgeInsets(
        left=insets.bottom,
        top=insets.left,
        right=insets.top,
        bottom=insets.right,
    )


@dataclass(frozen=True)
class SafeAreaOverlayBlock:
    """Tint the safe-area strips of the screen; a layout debugging aid."""

    color: Any = FrameColors.SAFE_AREA_TINT

    def strips(self, ctx: RenderContext, rect: Rect) -> list[Rect]:
        insets = container_safe_areas(ctx.safe_areas, rotated=ctx.rotated)
        logical = ctx.device.content_size
        # Safe areas are logical points; the screen rect is in frame units.
        sx = rect.width / logical.width
        sy = rect.height / logical.height
        candidates = [
            Rect(rect.left, rect.top, rect.right, rect.top + insets.top * sy),
            Rect(rect.left, rect.bottom - insets.bottom * sy, rect.right, rect.bottom),
            Rect(rect.left, rect.top, rect.left + insets.left * sx, rect.bottom),
            Rect(rect.right - insets.right * sx, rect.top, rect.right, rect.bottom),
        ]
        return [strip for strip in candidates if not strip.size.is_empty]

    def render(self, ctx: RenderContext, rect: Rect) -> None:
        ctx.pdf.set_fill_color(self.color)
        for strip in self.strips(ctx, rect):
            ctx.pdf.rect(strip.left, strip.top, strip.width, strip.height, fill=1, stroke=0)
