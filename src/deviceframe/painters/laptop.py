"""Parametric laptop frame."""

from __future__ import annotations

from typing import Any

from deviceframe.config import FrameColors
from deviceframe.drawing import DrawingPrimitives
from deviceframe.geometry import CornerRadius, EdgeInsets, Offset, Rect, Size
from deviceframe.info import TargetPlatform

from .base import draw_camera, fill_round_rect
from .contracts import DrawContext
from .window import WindowedFramePainter


class GenericLaptopFramePainter(WindowedFramePainter):
    """Lid with a webcam above a wider keyboard base."""

    STYLE_KEYS = (
        "outer_body_color",
        "inner_body_color",
        "camera_border_color",
        "camera_inner_color",
        "camera_reflect_color",
    )

    DEFAULT_INNER_BODY_INSETS = EdgeInsets(left=6.0, top=6.0, right=6.0, bottom=0.0)
    DEFAULT_SCREEN_INSETS = EdgeInsets(left=20.0, top=80.0, right=20.0, bottom=100.0)
    BODY_NOTCH_WIDTH = 300.0

    body_side_inset = 200.0

    def __init__(
        self,
        platform: TargetPlatform,
        window_position: Rect,
        *,
        outer_body_color: Any = FrameColors.OUTER_BODY,
        inner_body_color: Any = FrameColors.INNER_BODY,
        outer_body_radius: CornerRadius = CornerRadius(30.0),
        inner_body_radius: CornerRadius = CornerRadius(20.0),
        inner_body_insets: EdgeInsets | None = None,
        screen_insets: EdgeInsets | None = None,
        screen_radius: CornerRadius = CornerRadius(10.0),
        window_radius: CornerRadius = CornerRadius(6.0),
        body_height: float = 60.0,
        body_pad_height: float = 16.0,
        camera_border_color: Any = FrameColors.CAMERA_BORDER,
        camera_inner_color: Any = FrameColors.CAMERA_INNER,
        camera_reflect_color: Any = FrameColors.CAMERA_REFLECT,
        camera_radius: float = 8.0,
        camera_border_width: float = 5.0,
        base_top_color: Any = FrameColors.LAPTOP_BASE_TOP,
        base_bottom_color: Any = FrameColors.LAPTOP_BASE_BOTTOM,
        base_pad_color: Any = FrameColors.LAPTOP_BASE_PAD,
    ) -> None:
        super().__init__(
            platform,
            window_position,
            outer_body_color=outer_body_color,
            inner_body_color=inner_body_color,
            outer_body_radius=outer_body_radius,
            inner_body_radius=inner_body_radius,
            inner_body_insets=inner_body_insets,
            screen_insets=screen_insets,
            screen_radius=screen_radius,
            window_radius=window_radius,
        )
        self.body_height = body_height
        self.body_pad_height = body_pad_height
        self.camera_border_color = camera_border_color
        self.camera_inner_color = camera_inner_color
        self.camera_reflect_color = camera_reflect_color
        self.camera_radius = camera_radius
        self.camera_border_width = camera_border_width
        self.base_top_color = base_top_color
        self.base_bottom_color = base_bottom_color
        self.base_pad_color = base_pad_color

    def calculate_frame_size(self, screen_size: Size) -> Size:
        return Size(
            width=screen_size.width
            + self.inner_body_insets.horizontal
            + self.screen_insets.horizontal
            + self.body_side_inset * 2,
            height=screen_size.height
            + self.inner_body_insets.vertical
            + self.screen_insets.vertical
            + self.body_height
            + self.body_pad_height,
        )

    def render(self, ctx: DrawContext) -> None:
        pdf = ctx.pdf
        lid = Rect(
            left=self.body_side_inset,
            top=0.0,
            right=ctx.size.width - self.body_side_inset,
            bottom=ctx.size.height - self.body_pad_height - self.body_height,
        )

        fill_round_rect(pdf, lid, self.outer_body_radius, self.outer_body_color)
        fill_round_rect(
            pdf, lid.deflate(self.inner_body_insets), self.inner_body_radius, self.inner_body_color
        )
        draw_camera(
            pdf,
            Offset(lid.center.x, self.inner_body_insets.top + self.screen_insets.top / 2),
            radius=self.camera_radius,
            border_width=self.camera_border_width,
            border_color=self.camera_border_color,
            inner_color=self.camera_inner_color,
            reflect_color=self.camera_reflect_color,
        )
        self._draw_base(pdf, lid, ctx.size)
        self.draw_screen_content(pdf, lid)

    def _draw_base(self, pdf: DrawingPrimitives, lid: Rect, size: Size) -> None:
        body = self.body_height
        pad = self.body_pad_height
        outer_radius = self.outer_body_radius.x

        fill_round_rect(
            pdf,
            Rect.from_offset_size(
                Offset(outer_radius + pad * 4, lid.bottom + body - 1),
                Size(size.width - 2 * outer_radius - pad * 8, pad + 1),
            ),
            CornerRadius(pad),
            self.base_pad_color,
        )
        fill_round_rect(
            pdf,
            Rect.from_offset_size(
                Offset(0.0, lid.bottom + body * 0.2 - 1),
                Size(size.width, body * 0.8 + 1),
            ),
            self.outer_body_radius,
            self.base_bottom_color,
        )
        fill_round_rect(
            pdf,
            Rect.from_offset_size(Offset(0.0, lid.bottom), Size(size.width, body * 0.2)),
            CornerRadius(self.inner_body_radius.x * 0.5),
            self.base_top_color,
        )
        fill_round_rect(
            pdf,
            Rect.from_offset_size(
                Offset(lid.center.x - self.BODY_NOTCH_WIDTH * 0.5, lid.bottom + body * 0.2 - 1),
                Size(self.BODY_NOTCH_WIDTH, body * 0.2),
            ),
            CornerRadius(body * 0.2),
            self.base_top_color,
        )
