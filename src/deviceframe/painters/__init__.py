"""Frame painters."""

from .artwork import ArtworkLayer, FixedArtworkPainter
from .contracts import DrawContext, FramePainter
from .desktop_monitor import GenericDesktopMonitorFramePainter
from .laptop import GenericLaptopFramePainter
from .phone import GenericPhoneFramePainter
from .tablet import GenericTabletFramePainter

__all__ = [
    "ArtworkLayer",
    "DrawContext",
    "FixedArtworkPainter",
    "FramePainter",
    "GenericDesktopMonitorFramePainter",
    "GenericLaptopFramePainter",
    "GenericPhoneFramePainter",
    "GenericTabletFramePainter",
]
