"""Parametric desktop monitor frame."""

from __future__ import annotations

from typing import Any

from deviceframe.config import FrameColors
from deviceframe.geometry import CornerRadius, EdgeInsets, Offset, Rect, Size
from deviceframe.info import TargetPlatform

from .base import draw_device_body, draw_monitor_foot
from .contracts import DrawContext
from .window import WindowedFramePainter


class GenericDesktopMonitorFramePainter(WindowedFramePainter):
    """Monitor panel standing on a centred foot."""

    STYLE_KEYS = ("outer_body_color", "inner_body_color")

    DEFAULT_INNER_BODY_INSETS = EdgeInsets.all(6.0)
    DEFAULT_SCREEN_INSETS = EdgeInsets(left=20.0, top=20.0, right=20.0, bottom=40.0)
    FOOT_PAD_HEIGHT = 6.0

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
        foot_size: Size = Size(920.0, 280.0),
        foot_bar_width: float = 60.0,
        foot_base_height: float = 40.0,
        window_radius: CornerRadius = CornerRadius(6.0),
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
        self.foot_size = foot_size
        self.foot_bar_width = foot_bar_width
        self.foot_base_height = foot_base_height

    def calculate_frame_size(self, screen_size: Size) -> Size:
        return Size(
            width=screen_size.width + self.inner_body_insets.horizontal + self.screen_insets.horizontal,
            height=screen_size.height
            + self.inner_body_insets.vertical
            + self.screen_insets.vertical
            + self.foot_size.height,
        )

    def foot_bounds(self, panel: Rect) -> Rect:
        center = panel.bottom_center + Offset(0.0, self.foot_size.height * 0.5)
        return Rect(
            left=center.x - self.foot_size.width / 2,
            top=center.y - self.foot_size.height / 2,
            right=center.x + self.foot_size.width / 2,
            bottom=center.y + self.foot_size.height / 2,
        )

    def render(self, ctx: DrawContext) -> None:
        pdf = ctx.pdf
        panel = Rect(0.0, 0.0, ctx.size.width, ctx.size.height - self.foot_size.height)

        draw_monitor_foot(
            pdf,
            self.foot_bounds(panel),
            outer_body_color=self.outer_body_color,
            inner_body_color=self.inner_body_color,
            foot_bar_width=self.foot_bar_width,
            foot_bar_space=self.foot_bar_width * 0.6,
            bottom_height=self.FOOT_PAD_HEIGHT,
            base_height=self.foot_base_height,
            base_top_radius=CornerRadius(self.foot_base_height * 0.3),
            base_bottom_radius=CornerRadius(self.foot_base_height * 0.1),
        )
        draw_device_body(
            pdf,
            panel,
            outer_body_color=self.outer_body_color,
            outer_body_radius=self.outer_body_radius,
            inner_body_color=self.inner_body_color,
            inner_body_radius=self.inner_body_radius,
            inner_body_insets=self.inner_body_insets,
        )
        self.draw_screen_content(pdf, panel)
