"""Frame painter for devices drawn from baked vector artwork."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from deviceframe.geometry import CornerRadius, Path, Rect, Size

from .contracts import DrawContext


@dataclass(frozen=True)
class ArtworkLayer:
    """One filled shape of a device drawing.

    Either `path` (absolute frame coordinates) or `rect_fraction`
    (`left, top, width, height` as fractions of the container size) is set.
    """

    color: Any
    path: Path | None = None
    rect_fraction: tuple[float, float, float, float] | None = None

    def __post_init__(self) -> None:
        if (self.path is None) == (self.rect_fraction is None):
            msg = "artwork layer needs exactly one of path or rect_fraction."
            raise ValueError(msg)

    def scaled_rect(self, size: Size) -> Rect:
        if self.rect_fraction is None:
            msg = "layer has no rect_fraction."
            raise ValueError(msg)
        left, top, width, height = self.rect_fraction
        return Rect(
            left=size.width * left,
            top=size.height * top,
            right=size.width * (left + width),
            bottom=size.height * (top + height),
        )


class FixedArtworkPainter:
    """Painter with a fixed frame size, a fixed screen rect and layered artwork."""

    def __init__(
        self,
        frame_size: Size,
        screen_rect: Rect,
        screen_radius: CornerRadius,
        layers: Sequence[ArtworkLayer],
    ) -> None:
        self.frame_size = frame_size
        self.screen_rect = screen_rect
        self.screen_radius = screen_radius
        self.layers = tuple(layers)

    def calculate_frame_size(self, screen_size: Size) -> Size:  # noqa: ARG002
        return self.frame_size

    def create_screen_path(self, screen_size: Size) -> Path:  # noqa: ARG002
        return Path.round_rect(self.screen_rect, self.screen_radius)

    def render(self, ctx: DrawContext) -> None:
        pdf = ctx.pdf
        for layer in self.layers:
            pdf.set_fill_color(layer.color)
            if layer.path is not None:
                pdf.draw_path(layer.path, fill=1, stroke=0)
            else:
                rect = layer.scaled_rect(ctx.size)
                pdf.rect(rect.left, rect.top, rect.width, rect.height, fill=1, stroke=0)
