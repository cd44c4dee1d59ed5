"""Shared geometry for frames that simulate a desktop application window."""

from __future__ import annotations

from typing import Any

from deviceframe.drawing import DrawingPrimitives
from deviceframe.geometry import CornerRadius, EdgeInsets, Offset, Path, Rect, Size
from deviceframe.info import TargetPlatform

from .base import draw_default_wallpaper, draw_window_bar, draw_window_shadow, window_bar_height


class WindowedFramePainter:
    """Base for laptop and monitor frames.

    The device screen shows a wallpaper with one application window on top;
    the window's content area (below its title bar) is the screen path that
    user content is clipped to. `window_position` is relative to the
    physical screen.
    """

    DEFAULT_INNER_BODY_INSETS = EdgeInsets.all(6.0)
    DEFAULT_SCREEN_INSETS = EdgeInsets.all(20.0)

    # Horizontal room added on both sides of the body, e.g. for a laptop base.
    body_side_inset = 0.0

    def __init__(
        self,
        platform: TargetPlatform,
        window_position: Rect,
        *,
        outer_body_color: Any,
        inner_body_color: Any,
        outer_body_radius: CornerRadius,
        inner_body_radius: CornerRadius,
        inner_body_insets: EdgeInsets | None,
        screen_insets: EdgeInsets | None,
        screen_radius: CornerRadius,
        window_radius: CornerRadius,
    ) -> None:
        self.platform = platform
        self.window_position = window_position
        self.outer_body_color = outer_body_color
        self.inner_body_color = inner_body_color
        self.outer_body_radius = outer_body_radius
        self.inner_body_radius = inner_body_radius
        self.inner_body_insets = inner_body_insets or self.DEFAULT_INNER_BODY_INSETS
        self.screen_insets = screen_insets or self.DEFAULT_SCREEN_INSETS
        self.screen_radius = screen_radius
        self.window_radius = window_radius

    @property
    def bar_height(self) -> float:
        return window_bar_height(self.platform)

    @property
    def effective_window_size(self) -> Size:
        """Window content size, excluding the title bar."""
        return Size(self.window_position.width, self.window_position.height - self.bar_height)

    @property
    def screen_origin(self) -> Offset:
        return Offset(
            self.body_side_inset + self.inner_body_insets.left + self.screen_insets.left,
            self.inner_body_insets.top + self.screen_insets.top,
        )

    @property
    def window_location(self) -> Offset:
        return self.screen_origin + self.window_position.top_left

    def create_screen_path(self, screen_size: Size) -> Path:  # noqa: ARG002
        return Path.round_rect(
            Rect.from_offset_size(
                self.window_location + Offset(0.0, self.bar_height),
                self.effective_window_size,
            ),
            CornerRadius(self.window_radius.x),
        )

    def draw_screen_content(self, pdf: DrawingPrimitives, body: Rect) -> None:
        """Wallpaper, window shadow and title bar."""
        screen = Rect(
            left=self.screen_origin.x,
            top=self.screen_origin.y,
            right=body.right - self.inner_body_insets.right - self.screen_insets.right,
            bottom=body.bottom - self.inner_body_insets.bottom - self.screen_insets.bottom,
        )
        pdf.save_state()
        pdf.clip_path(Path.round_rect(screen, self.screen_radius))
        draw_default_wallpaper(pdf, self.platform, screen)
        pdf.restore_state()

        draw_window_shadow(
            pdf,
            Rect.from_offset_size(self.window_location, self.effective_window_size),
            self.window_radius,
        )
        draw_window_bar(
            pdf,
            self.platform,
            Rect.from_offset_size(
                self.window_location,
                Size(self.window_position.width, self.bar_height),
            ),
            self.window_radius,
        )
