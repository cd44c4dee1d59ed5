"""Page rendering and PDF mockup output."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path as FilePath
from typing import Any

from .blocks import Block, RenderContext
from .config import DEFAULT_MOCKUP_FILENAME_TEMPLATE
from .drawing import DrawingPrimitives, create_reportlab_primitives
from .geometry import Rect
from .info import DeviceInfo
from .orientation import Orientation
from .screen import DeviceScreenBlock, ScreenLayout

logger = logging.getLogger(__name__)


def render_device_page(
    pdf: DrawingPrimitives,
    *,
    device: DeviceInfo,
    orientation: Orientation,
    content: Block | None = None,
    frame_visible: bool = True,
    extras: Mapping[str, Any] | None = None,
) -> ScreenLayout:
    """Render one device page and advance the PDF cursor."""
    screen = DeviceScreenBlock(
        device=device,
        orientation=orientation,
        content=content,
        frame_visible=frame_visible,
    )
    layout = screen.layout
    context = RenderContext(
        pdf=pdf,
        device=device,
        orientation=orientation,
        extras=dict(extras or {}),
    )
    screen.render(context, Rect.from_size(layout.page_size))
    pdf.show_page()
    return layout


def default_mockup_filename(device: DeviceInfo, orientation: Orientation) -> str:
    return DEFAULT_MOCKUP_FILENAME_TEMPLATE.format(
        device=device.identifier, orientation=orientation.value
    )


def generate_mockup(
    device: DeviceInfo,
    output_path: str | FilePath | None = None,
    *,
    orientation: Orientation = Orientation.PORTRAIT,
    frame_visible: bool = True,
    content: Block | None = None,
) -> FilePath:
    """Write a one-page PDF of the device and return its path.

    The page is sized to the (possibly rotated) container, one PDF unit per
    frame unit.
    """
    path = FilePath(output_path or default_mockup_filename(device, orientation))
    layout_page = DeviceScreenBlock(
        device=device, orientation=orientation, frame_visible=frame_visible
    ).layout.page_size

    pdf = create_reportlab_primitives(path, pagesize=(layout_page.width, layout_page.height))
    pdf.set_title(f"{device.name} ({orientation.value})")
    render_device_page(
        pdf,
        device=device,
        orientation=orientation,
        content=content,
        frame_visible=frame_visible,
    )
    pdf.save()
    logger.info("wrote %s", path)
    return path
