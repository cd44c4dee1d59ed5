"""Drawing primitives and backend adapters."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path as FilePath
from typing import Any, Protocol

from reportlab.pdfgen import canvas
from reportlab.pdfgen.canvas import FILL_EVEN_ODD, FILL_NON_ZERO

from .geometry import (
    AddOval,
    AddRoundRect,
    Close,
    CubicTo,
    FillRule,
    LineTo,
    MoveTo,
    Path,
)


class DrawingPrimitives(Protocol):
    """Backend-agnostic drawing primitives in y-down device units."""

    def set_fill_color(self, color: Any) -> None: ...
    def set_stroke_color(self, color: Any) -> None: ...
    def set_line_width(self, width: float) -> None: ...
    def set_blend_mode(self, mode: str) -> None: ...
    def line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...
    def rect(
        self, x: float, y: float, width: float, height: float, *, fill: int = 0, stroke: int = 1
    ) -> None: ...
    def round_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        radius: float,
        *,
        fill: int = 0,
        stroke: int = 1,
    ) -> None: ...
    def circle(
        self, x: float, y: float, radius: float, *, fill: int = 0, stroke: int = 1
    ) -> None: ...
    def draw_path(self, path: Path, *, fill: int = 1, stroke: int = 0) -> None: ...
    def clip_path(self, path: Path) -> None: ...
    def radial_gradient(
        self, x: float, y: float, radius: float, colors: Sequence[Any]
    ) -> None: ...
    def draw_image(
        self, image_path: str, x: float, y: float, width: float, height: float
    ) -> None: ...
    def save_state(self) -> None: ...
    def restore_state(self) -> None: ...
    def translate(self, x: float, y: float) -> None: ...
    def rotate(self, angle: float) -> None: ...
    def scale(self, x: float, y: float) -> None: ...
    def set_title(self, title: str) -> None: ...
    def show_page(self) -> None: ...
    def save(self) -> None: ...


def _fill_mode(fill_rule: FillRule) -> int:
    if fill_rule is FillRule.EVEN_ODD:
        return FILL_EVEN_ODD
    return FILL_NON_ZERO


class ReportLabPrimitives:
    """ReportLab-backed implementation of DrawingPrimitives.

    PDF space is y-up; every page is flipped once so callers can work in the
    y-down device space the painters use.
    """

    def __init__(self, target: canvas.Canvas, *, page_height: float) -> None:
        self._target = target
        self._page_height = page_height
        self._page_open = False

    def _ensure_page(self) -> None:
        if self._page_open:
            return
        self._target.translate(0, self._page_height)
        self._target.scale(1, -1)
        self._page_open = True

    def _build_path(self, path: Path) -> Any:
        pdf_path = self._target.beginPath()
        for command in path.commands:
            if isinstance(command, MoveTo):
                pdf_path.moveTo(command.x, command.y)
            elif isinstance(command, LineTo):
                pdf_path.lineTo(command.x, command.y)
            elif isinstance(command, CubicTo):
                pdf_path.curveTo(
                    command.x1, command.y1, command.x2, command.y2, command.x3, command.y3
                )
            elif isinstance(command, Close):
                pdf_path.close()
            elif isinstance(command, AddRoundRect):
                rect = command.rect
                pdf_path.roundRect(rect.left, rect.top, rect.width, rect.height, command.radius.x)
            elif isinstance(command, AddOval):
                rect = command.rect
                pdf_path.ellipse(rect.left, rect.top, rect.width, rect.height)
        return pdf_path

    def set_fill_color(self, color: Any) -> None:
        self._ensure_page()
        self._target.setFillColor(color)

    def set_stroke_color(self, color: Any) -> None:
        self._ensure_page()
        self._target.setStrokeColor(color)

    def set_line_width(self, width: float) -> None:
        self._ensure_page()
        self._target.setLineWidth(width)

    def set_blend_mode(self, mode: str) -> None:
        self._ensure_page()
        self._target.setBlendMode(mode)

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._ensure_page()
        self._target.line(x1, y1, x2, y2)

    def rect(
        self, x: float, y: float, width: float, height: float, *, fill: int = 0, stroke: int = 1
    ) -> None:
        self._ensure_page()
        self._target.rect(x, y, width, height, fill=fill, stroke=stroke)

    def round_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        radius: float,
        *,
        fill: int = 0,
        stroke: int = 1,
    ) -> None:
        self._ensure_page()
        self._target.roundRect(x, y, width, height, radius, fill=fill, stroke=stroke)

    def circle(self, x: float, y: float, radius: float, *, fill: int = 0, stroke: int = 1) -> None:
        self._ensure_page()
        self._target.circle(x, y, radius, fill=fill, stroke=stroke)

    def draw_path(self, path: Path, *, fill: int = 1, stroke: int = 0) -> None:
        self._ensure_page()
        self._target.drawPath(
            self._build_path(path),
            fill=fill,
            stroke=stroke,
            fillMode=_fill_mode(path.fill_rule),
        )

    def clip_path(self, path: Path) -> None:
        self._ensure_page()
        self._target.clipPath(
            self._build_path(path),
            stroke=0,
            fill=0,
            fillMode=_fill_mode(path.fill_rule),
        )

    def radial_gradient(self, x: float, y: float, radius: float, colors: Sequence[Any]) -> None:
        self._ensure_page()
        self._target.radialGradient(x, y, radius, list(colors), extend=True)

    def draw_image(self, image_path: str, x: float, y: float, width: float, height: float) -> None:
        self._ensure_page()
        # Images are placed y-up; undo the page flip locally.
        self._target.saveState()
        self._target.translate(x, y + height)
        self._target.scale(1, -1)
        self._target.drawImage(image_path, 0, 0, width=width, height=height, mask="auto")
        self._target.restoreState()

    def save_state(self) -> None:
        self._ensure_page()
        self._target.saveState()

    def restore_state(self) -> None:
        self._target.restoreState()

    def translate(self, x: float, y: float) -> None:
        self._ensure_page()
        self._target.translate(x, y)

    def rotate(self, angle: float) -> None:
        self._ensure_page()
        self._target.rotate(angle)

    def scale(self, x: float, y: float) -> None:
        self._ensure_page()
        self._target.scale(x, y)

    def set_title(self, title: str) -> None:
        self._target.setTitle(title)

    def show_page(self) -> None:
        self._target.showPage()
        self._page_open = False

    def save(self) -> None:
        self._target.save()


def create_reportlab_primitives(
    output_path: str | FilePath,
    *,
    pagesize: tuple[float, float],
) -> ReportLabPrimitives:
    """Create a ReportLab-backed primitives renderer."""
    return ReportLabPrimitives(
        canvas.Canvas(str(output_path), pagesize=pagesize),
        page_height=pagesize[1],
    )
