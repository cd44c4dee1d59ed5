"""Parametric phone frame."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from deviceframe.config import FrameColors
from deviceframe.geometry import CornerRadius, EdgeInsets, Offset, Path, Rect, Size
from deviceframe.info import SideButtonSide

from .base import draw_camera, draw_device_body, draw_side_buttons
from .contracts import DrawContext


class GenericPhoneFramePainter:
    """Rounded slab with a top camera and buttons on the top and right edges.

    The frame is `button_width` wider and taller than the body so the buttons
    poking out of the right and top edges stay inside it.
    """

    STYLE_KEYS = (
        "outer_body_color",
        "inner_body_color",
        "button_color",
        "camera_border_color",
        "camera_inner_color",
        "camera_reflect_color",
    )

    DEFAULT_INNER_BODY_INSETS = EdgeInsets.all(6.0)
    DEFAULT_SCREEN_INSETS = EdgeInsets(left=15.0, top=80.0, right=15.0, bottom=60.0)
    DEFAULT_CAMERA_RADIUS = 8.0
    DEFAULT_CAMERA_BORDER_WIDTH = 5.0

    def __init__(
        self,
        *,
        outer_body_color: Any = FrameColors.OUTER_BODY,
        inner_body_color: Any = FrameColors.INNER_BODY,
        outer_body_radius: CornerRadius = CornerRadius(40.0),
        inner_body_radius: CornerRadius = CornerRadius(35.0),
        inner_body_insets: EdgeInsets | None = None,
        screen_insets: EdgeInsets | None = None,
        button_width: float = 4.0,
        button_color: Any = FrameColors.BUTTON,
        screen_radius: CornerRadius = CornerRadius(10.0),
        right_side_buttons: Sequence[float] = (100.0, 80.0, 15.0, 80.0),
        top_side_buttons: Sequence[float] = (50.0, 80.0),
        camera_border_color: Any = FrameColors.CAMERA_BORDER,
        camera_inner_color: Any = FrameColors.CAMERA_INNER,
        camera_reflect_color: Any = FrameColors.CAMERA_REFLECT,
        camera_radius: float | None = None,
        camera_border_width: float | None = None,
    ) -> None:
        self.outer_body_color = outer_body_color
        self.inner_body_color = inner_body_color
        self.outer_body_radius = outer_body_radius
        self.inner_body_radius = inner_body_radius
        self.inner_body_insets = inner_body_insets or self.DEFAULT_INNER_BODY_INSETS
        self.screen_insets = screen_insets or self.DEFAULT_SCREEN_INSETS
        self.button_width = button_width
        self.button_color = button_color
        self.screen_radius = screen_radius
        self.right_side_buttons = tuple(right_side_buttons)
        self.top_side_buttons = tuple(top_side_buttons)
        self.camera_border_color = camera_border_color
        self.camera_inner_color = camera_inner_color
        self.camera_reflect_color = camera_reflect_color
        self.camera_radius = self.DEFAULT_CAMERA_RADIUS if camera_radius is None else camera_radius
        self.camera_border_width = (
            self.DEFAULT_CAMERA_BORDER_WIDTH if camera_border_width is None else camera_border_width
        )

    def calculate_frame_size(self, screen_size: Size) -> Size:
        return Size(
            width=screen_size.width
            + self.inner_body_insets.horizontal
            + self.screen_insets.horizontal
            + self.button_width,
            height=screen_size.height
            + self.inner_body_insets.vertical
            + self.screen_insets.vertical
            + self.button_width,
        )

    def screen_offset(self) -> Offset:
        return Offset(
            self.inner_body_insets.left + self.screen_insets.left,
            self.inner_body_insets.top + self.screen_insets.top,
        )

    def create_screen_path(self, screen_size: Size) -> Path:
        return Path.round_rect(
            Rect.from_offset_size(self.screen_offset(), screen_size),
            self.screen_radius,
        )

    def body_bounds(self, size: Size) -> Rect:
        """Body rect inside a container of `size`, leaving room for the buttons."""
        return Rect(
            left=0.0,
            top=self.button_width,
            right=size.width - self.button_width,
            bottom=size.height - self.button_width,
        )

    def camera_center(self, size: Size) -> Offset:
        return Offset(
            (size.width - self.button_width) * 0.5,
            self.button_width + self.inner_body_insets.top + self.screen_insets.top / 2,
        )

    def render(self, ctx: DrawContext) -> None:
        pdf = ctx.pdf
        bounds = self.body_bounds(ctx.size)

        draw_side_buttons(
            pdf,
            bounds,
            color=self.button_color,
            button_width=self.button_width,
            side=SideButtonSide.TOP,
            inverted=True,
            gaps_and_sizes=self.top_side_buttons,
        )
        draw_side_buttons(
            pdf,
            bounds,
            color=self.button_color,
            button_width=self.button_width,
            side=SideButtonSide.RIGHT,
            inverted=False,
            gaps_and_sizes=self.right_side_buttons,
        )
        draw_device_body(
            pdf,
            bounds,
            outer_body_color=self.outer_body_color,
            outer_body_radius=self.outer_body_radius,
            inner_body_color=self.inner_body_color,
            inner_body_radius=self.inner_body_radius,
            inner_body_insets=self.inner_body_insets,
        )
        draw_camera(
            pdf,
            self.camera_center(ctx.size),
            radius=self.camera_radius,
            border_width=self.camera_border_width,
            border_color=self.camera_border_color,
            inner_color=self.camera_inner_color,
            reflect_color=self.camera_reflect_color,
        )
