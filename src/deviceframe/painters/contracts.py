"""Core contracts shared by every frame painter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from deviceframe.drawing import DrawingPrimitives
from deviceframe.geometry import Path, Size


@dataclass(frozen=True)
class DrawContext:
    """Drawing target handed to `FramePainter.render`.

    `size` is the container the frame is drawn into, normally the frame size.
    """

    pdf: DrawingPrimitives
    size: Size


class FramePainter(Protocol):
    """Strategy that owns the artwork and geometry of one device frame."""

    def calculate_frame_size(self, screen_size: Size) -> Size:
        """Return the full frame size for a given screen size."""

    def create_screen_path(self, screen_size: Size) -> Path:
        """Return the screen outline in frame coordinates."""

    def render(self, ctx: DrawContext) -> None:
        """Draw the frame artwork into `ctx.size`."""
