"""Parametric tablet frame."""

from __future__ import annotations

from deviceframe.geometry import EdgeInsets

from .phone import GenericPhoneFramePainter


class GenericTabletFramePainter(GenericPhoneFramePainter):
    """Phone layout with wider bezels and a smaller camera."""

    DEFAULT_SCREEN_INSETS = EdgeInsets(left=25.0, top=120.0, right=25.0, bottom=80.0)
    DEFAULT_CAMERA_RADIUS = 6.0
    DEFAULT_CAMERA_BORDER_WIDTH = 4.0
