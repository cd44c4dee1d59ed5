"""Drawing routines shared by the parametric frame painters."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from deviceframe.config import (
    DEFAULT_WINDOW_BAR_HEIGHT,
    MACOS_WINDOW_BAR_HEIGHT,
    WALLPAPER_COLORS,
    WINDOW_SHADOW_BLEND_MODE,
    WINDOW_SHADOW_COLOR,
    WindowBarColors,
)
from deviceframe.drawing import DrawingPrimitives
from deviceframe.geometry import CornerRadius, EdgeInsets, Offset, Path, Rect, Size
from deviceframe.info import SideButtonSide, TargetPlatform

GLYPH_STROKE_WIDTH = 2.0


def window_bar_height(platform: TargetPlatform) -> float:
    """Title bar height of the simulated application window."""
    if platform is TargetPlatform.MACOS:
        return MACOS_WINDOW_BAR_HEIGHT
    return DEFAULT_WINDOW_BAR_HEIGHT


def fill_round_rect(pdf: DrawingPrimitives, rect: Rect, radius: CornerRadius, color: Any) -> None:
    pdf.set_fill_color(color)
    pdf.round_rect(rect.left, rect.top, rect.width, rect.height, radius.x, fill=1, stroke=0)


def _fill_circle(pdf: DrawingPrimitives, center: Offset, radius: float, color: Any) -> None:
    pdf.set_fill_color(color)
    pdf.circle(center.x, center.y, radius, fill=1, stroke=0)


def draw_device_body(
    pdf: DrawingPrimitives,
    bounds: Rect,
    *,
    outer_body_color: Any,
    outer_body_radius: CornerRadius,
    inner_body_color: Any,
    inner_body_radius: CornerRadius,
    inner_body_insets: EdgeInsets,
) -> None:
    """Fill the outer shell, then the inner bezel deflated by `inner_body_insets`."""
    fill_round_rect(pdf, bounds, outer_body_radius, outer_body_color)
    fill_round_rect(pdf, bounds.deflate(inner_body_insets), inner_body_radius, inner_body_color)


def draw_camera(
    pdf: DrawingPrimitives,
    center: Offset,
    *,
    radius: float,
    border_width: float,
    border_color: Any,
    inner_color: Any,
    reflect_color: Any,
) -> None:
    """Draw a lens as three circles: border ring, body and a small highlight."""
    _fill_circle(pdf, center, radius + border_width, border_color)
    _fill_circle(pdf, center, radius, inner_color)
    _fill_circle(pdf, center - Offset(0.0, radius * 0.25), radius / 3, reflect_color)


def side_button_rects(
    bounds: Rect,
    button_width: float,
    side: SideButtonSide,
    inverted: bool,
    gaps_and_sizes: Sequence[float],
) -> list[Rect]:
    """Lay out physical buttons along one edge of `bounds`.

    Entries alternate gap, button, gap, button... Each value advances the
    position along the edge; odd entries produce a button of that length.
    Inverted layouts are mirrored from the far end of the edge.
    """
    if len(gaps_and_sizes) < 2:
        return []

    vertical_edge = side in (SideButtonSide.LEFT, SideButtonSide.RIGHT)
    if side is SideButtonSide.LEFT:
        edge = bounds.left
    elif side is SideButtonSide.RIGHT:
        edge = bounds.right
    elif side is SideButtonSide.TOP:
        edge = bounds.top
    else:
        edge = bounds.bottom

    position = bounds.top if vertical_edge else bounds.left
    rects: list[Rect] = []
    for index, value in enumerate(gaps_and_sizes):
        if index % 2 == 1:
            if vertical_edge:
                far = bounds.bottom
                start, end = (far - position - value, far - position) if inverted else (
                    position,
                    position + value,
                )
                rects.append(
                    Rect(left=edge - button_width, top=start, right=edge + button_width, bottom=end)
                )
            else:
                far = bounds.right
                start, end = (far - position - value, far - position) if inverted else (
                    position,
                    position + value,
                )
                rects.append(
                    Rect(left=start, top=edge - button_width, right=end, bottom=edge + button_width)
                )
        position += value
    return rects


def draw_side_buttons(
    pdf: DrawingPrimitives,
    bounds: Rect,
    *,
    color: Any,
    button_width: float,
    side: SideButtonSide,
    inverted: bool,
    gaps_and_sizes: Sequence[float],
) -> None:
    radius = CornerRadius(button_width)
    for rect in side_button_rects(bounds, button_width, side, inverted, gaps_and_sizes):
        fill_round_rect(pdf, rect, radius, color)


def wallpaper_colors(platform: TargetPlatform) -> tuple[Any, ...]:
    if platform is TargetPlatform.MACOS:
        return WALLPAPER_COLORS["macos"]
    if platform is TargetPlatform.LINUX:
        return WALLPAPER_COLORS["linux"]
    return WALLPAPER_COLORS["default"]


def draw_default_wallpaper(pdf: DrawingPrimitives, platform: TargetPlatform, bounds: Rect) -> None:
    """Paint a radial gradient over `bounds`, centred on its bottom-left corner."""
    pdf.save_state()
    pdf.clip_path(Path.round_rect(bounds, CornerRadius(0.0)))
    pdf.radial_gradient(bounds.left, bounds.bottom, bounds.width, wallpaper_colors(platform))
    pdf.restore_state()


def draw_window_shadow(pdf: DrawingPrimitives, rect: Rect, radius: CornerRadius) -> None:
    pdf.save_state()
    pdf.set_blend_mode(WINDOW_SHADOW_BLEND_MODE)
    fill_round_rect(pdf, rect, radius, WINDOW_SHADOW_COLOR)
    pdf.restore_state()


def _glyph_line(pdf: DrawingPrimitives, start: Offset, end: Offset) -> None:
    pdf.line(start.x, start.y, end.x, end.y)


def _glyph_cross(pdf: DrawingPrimitives, rect: Rect) -> None:
    _glyph_line(pdf, Offset(rect.left, rect.top), Offset(rect.right, rect.bottom))
    _glyph_line(pdf, Offset(rect.right, rect.top), Offset(rect.left, rect.bottom))


def _centered_rect(center: Offset, size: Size, *, dy: float = 0.0) -> Rect:
    return Rect(
        left=center.x - size.width / 2,
        top=center.y - size.height / 2 + dy,
        right=center.x + size.width / 2,
        bottom=center.y + size.height / 2 + dy,
    )


def _draw_linux_bar(pdf: DrawingPrimitives, bounds: Rect) -> None:
    icon = Size(22.0, 22.0)
    glyph = Size(8.0, 8.0)

    close = Rect(
        left=bounds.right - icon.width * 2.5,
        top=bounds.center.y - icon.height / 2,
        right=bounds.right - icon.width * 1.5,
        bottom=bounds.center.y + icon.height / 2,
    )
    _fill_circle(pdf, close.center, close.width * 0.5, WindowBarColors.LINUX_CLOSE)
    _glyph_cross(pdf, _centered_rect(close.center, glyph, dy=-1.0))

    maximize = close.translate(-icon.width * 2, 0.0)
    square = _centered_rect(maximize.center, glyph)
    pdf.rect(square.left, square.top, square.width, square.height, fill=0, stroke=1)

    minimize = maximize.translate(-icon.width * 2, 0.0)
    bar = _centered_rect(minimize.center, glyph)
    _glyph_line(pdf, Offset(bar.left, bar.bottom), Offset(bar.right, bar.bottom))


def _draw_windows_bar(pdf: DrawingPrimitives, bounds: Rect) -> None:
    icon = Size(12.0, 12.0)

    close = Rect(
        left=bounds.right - icon.width * 3.5,
        top=bounds.center.y - icon.height / 2,
        right=bounds.right - icon.width * 2.5,
        bottom=bounds.center.y + icon.height / 2,
    )
    _glyph_cross(pdf, close)

    maximize = close.translate(-icon.width * 3, 0.0)
    pdf.rect(maximize.left, maximize.top, maximize.width, maximize.height, fill=0, stroke=1)

    minimize = maximize.translate(-icon.width * 3, 0.0)
    _glyph_line(
        pdf,
        Offset(minimize.left, minimize.center.y),
        Offset(minimize.right, minimize.center.y),
    )


def _draw_macos_bar(pdf: DrawingPrimitives, bounds: Rect) -> None:
    icon = Size(12.0, 12.0)
    spacing = 8.0
    light = Rect.from_offset_size(Offset(bounds.left + spacing, bounds.top + spacing), icon)
    for color in (
        WindowBarColors.MACOS_CLOSE,
        WindowBarColors.MACOS_MINIMIZE,
        WindowBarColors.MACOS_MAXIMIZE,
    ):
        _fill_circle(pdf, light.center, light.width * 0.5, color)
        light = light.translate(icon.width + spacing, 0.0)


def draw_window_bar(
    pdf: DrawingPrimitives,
    platform: TargetPlatform,
    bounds: Rect,
    window_radius: CornerRadius,
) -> None:
    """Draw the title bar of a simulated window in the platform's style.

    Platforms without a desktop window style draw nothing.
    """
    if platform not in (TargetPlatform.LINUX, TargetPlatform.WINDOWS, TargetPlatform.MACOS):
        return

    radius = CornerRadius(window_radius.x)
    background = WindowBarColors.LINUX_BAR if platform is TargetPlatform.LINUX else WindowBarColors.DARK_BAR
    pdf.save_state()
    fill_round_rect(pdf, bounds, radius, background)
    pdf.set_stroke_color(WindowBarColors.GLYPH)
    pdf.set_line_width(GLYPH_STROKE_WIDTH)
    if platform is TargetPlatform.LINUX:
        _draw_linux_bar(pdf, bounds)
    elif platform is TargetPlatform.WINDOWS:
        _draw_windows_bar(pdf, bounds)
    else:
        _draw_macos_bar(pdf, bounds)
    pdf.restore_state()


def draw_monitor_foot(
    pdf: DrawingPrimitives,
    bounds: Rect,
    *,
    outer_body_color: Any,
    inner_body_color: Any,
    foot_bar_width: float,
    foot_bar_space: float,
    bottom_height: float,
    base_height: float,
    base_top_radius: CornerRadius,
    base_bottom_radius: CornerRadius,
) -> None:
    """Draw a monitor stand: two upright bars, a two-tone base and two pads."""
    bar_height = bounds.height - bottom_height
    pdf.set_fill_color(inner_body_color)
    pdf.rect(
        bounds.center.x - foot_bar_space / 2 - foot_bar_width,
        bounds.top,
        foot_bar_width,
        bar_height,
        fill=1,
        stroke=0,
    )
    pdf.rect(
        bounds.center.x + foot_bar_space / 2,
        bounds.top,
        foot_bar_width,
        bar_height,
        fill=1,
        stroke=0,
    )

    half_base = base_height * 0.5
    base_top = Rect.from_offset_size(
        Offset(bounds.left, bounds.bottom - bottom_height - base_height),
        Size(bounds.width, half_base),
    )
    fill_round_rect(pdf, base_top, CornerRadius(base_top_radius.x), outer_body_color)
    base_bottom = Rect.from_offset_size(
        Offset(bounds.left, bounds.bottom - bottom_height - half_base),
        Size(bounds.width, half_base),
    )
    fill_round_rect(pdf, base_bottom, CornerRadius(base_bottom_radius.x), inner_body_color)

    pad_width = bottom_height * 5
    pad_radius = CornerRadius(bottom_height)
    pad_size = Size(pad_width, bottom_height)
    pad_top = bounds.bottom - bottom_height
    fill_round_rect(
        pdf,
        Rect.from_offset_size(Offset(bounds.left + pad_width, pad_top), pad_size),
        pad_radius,
        inner_body_color,
    )
    fill_round_rect(
        pdf,
        Rect.from_offset_size(Offset(bounds.right - pad_width * 2, pad_top), pad_size),
        pad_radius,
        inner_body_color,
    )
