"""OnePlus 8 Pro."""

from __future__ import annotations

from deviceframe.config import argb
from deviceframe.geometry import CornerRadius, EdgeInsets, FillRule, Path, Rect, Size
from deviceframe.info import DeviceIdentifier, DeviceInfo, DeviceType, TargetPlatform
from deviceframe.painters.artwork import ArtworkLayer, FixedArtworkPainter

from .builders import fixed_device

FRAME = argb(0xFF3A4245)
INNER_FRAME = argb(0xFF121515)
CAMERA_OUTER = argb(0xFF262C2D)
CAMERA_INNER = argb(0xFF121515)
CAMERA_LENS = argb(0xFF636F73)
TOP_BAR = argb(0xFF262C2D)

FRAME_SIZE = Size(852.0, 1865.0)
SCREEN_SIZE = Size(360.0, 800.0)
SCREEN_RECT = Rect(left=10.87, top=142.36, right=841.13, bottom=1722.47)
SCREEN_RADIUS = CornerRadius(20.0)

BODY = (
    ("M", 6.52, 147.8),
    ("C", 6.52, 90.88, 6.52, 62.42, 19.33, 41.51),
    ("C", 26.5, 29.82, 36.34, 19.98, 48.03, 12.81),
    ("C", 68.94, 0, 97.4, 0, 154.32, 0),
    ("L", 697.68, 0),
    ("C", 754.6, 0, 783.06, 0, 803.97, 12.81),
    ("C", 815.66, 19.98, 825.5, 29.82, 832.67, 41.51),
    ("C", 845.48, 62.42, 845.48, 90.88, 845.48, 147.8),
    ("L", 845.48, 1717.04),
    ("C", 845.48, 1773.96, 845.48, 1802.42, 832.67, 1823.32),
    ("C", 825.5, 1835.02, 815.66, 1844.86, 803.97, 1852.03),
    ("C", 783.06, 1864.84, 754.6, 1864.84, 697.68, 1864.84),
    ("L", 154.32, 1864.84),
    ("C", 97.4, 1864.84, 68.94, 1864.84, 48.03, 1852.03),
    ("C", 36.34, 1844.86, 26.5, 1835.02, 19.33, 1823.32),
    ("C", 6.52, 1802.42, 6.52, 1773.96, 6.52, 1717.04),
    ("Z",),
)

BEZEL = (
    ("M", 10.87, 142.36),
    ("C", 10.87, 92.56, 10.87, 67.66, 22.08, 49.37),
    ("C", 28.35, 39.13, 36.96, 30.52, 47.19, 24.25),
    ("C", 65.48, 13.04, 90.39, 13.04, 140.19, 13.04),
    ("L", 711.81, 13.04),
    ("C", 761.61, 13.04, 786.52, 13.04, 804.81, 24.25),
    ("C", 815.04, 30.52, 823.65, 39.13, 829.92, 49.37),
    ("C", 841.13, 67.66, 841.13, 92.56, 841.13, 142.36),
    ("L", 841.13, 1722.47),
    ("C", 841.13, 1772.28, 841.13, 1797.18, 829.92, 1815.47),
    ("C", 823.65, 1825.71, 815.04, 1834.31, 804.81, 1840.59),
    ("C", 786.52, 1851.8, 761.61, 1851.8, 711.81, 1851.8),
    ("L", 140.19, 1851.8),
    ("C", 90.39, 1851.8, 65.48, 1851.8, 47.19, 1840.59),
    ("C", 36.96, 1834.31, 28.35, 1825.71, 22.08, 1815.47),
    ("C", 10.87, 1797.18, 10.87, 1772.28, 10.87, 1722.47),
    ("Z",),
)

CAMERA_OUTER_OVAL = Rect(86.94, 67.38, 130.41, 110.85)
CAMERA_INNER_OVAL = Rect(95.09, 75.53, 122.26, 102.7)
CAMERA_LENS_OVAL = Rect(105.96, 80.96, 111.39, 86.4)

EARPIECE = (
    ("M", 319.5, 26.08),
    ("C", 315.53, 26.08, 315.19, 20.64, 311.85, 19.7),
    ("C", 311.47, 19.59, 311.3, 19.11, 311.6, 18.88),
    ("C", 312.43, 18.24, 313.79, 17.39, 315.15, 17.39),
    ("L", 536.85, 17.39),
    ("C", 538.21, 17.39, 539.57, 18.24, 540.4, 18.88),
    ("C", 540.7, 19.11, 540.53, 19.59, 540.15, 19.7),
    ("C", 536.81, 20.64, 536.47, 26.08, 532.5, 26.08),
    ("Z",),
)

SCREEN_OUTLINE = (
    ("M", 30.3263, 75.7513),
    ("C", 21.7354, 91.0915, 21.7354, 111.551, 21.7354, 152.469),
    ("L", 21.7354, 1708.02),
    ("C", 21.7354, 1748.94, 21.7354, 1769.4, 30.3263, 1784.74),
    ("C", 36.3978, 1795.58, 45.3492, 1804.53, 56.1908, 1810.6),
    ("C", 71.531, 1819.19, 91.9901, 1819.19, 132.908, 1819.19),
    ("L", 719.093, 1819.19),
    ("C", 760.011, 1819.19, 780.47, 1819.19, 795.81, 1810.6),
    ("C", 806.652, 1804.53, 815.603, 1795.58, 821.675, 1784.74),
    ("C", 830.266, 1769.4, 830.266, 1748.94, 830.266, 1708.02),
    ("L", 830.266, 152.469),
    ("C", 830.266, 111.551, 830.266, 91.0915, 821.675, 75.7513),
    ("C", 815.603, 64.9098, 806.652, 55.9584, 795.81, 49.8868),
    ("C", 780.47, 41.2959, 760.011, 41.2959, 719.093, 41.2959),
    ("L", 132.908, 41.2959),
    ("C", 91.9901, 41.2959, 71.531, 41.2959, 56.1908, 49.8868),
    ("C", 45.3492, 55.9584, 36.3978, 64.9098, 30.3263, 75.7513),
    ("Z",),
    # hole-punch camera
    ("M", 130.47, 88.7347),
    ("C", 130.47, 100.738, 120.739, 110.469, 108.736, 110.469),
    ("C", 96.7319, 110.469, 87.001, 100.738, 87.001, 88.7347),
    ("C", 87.001, 76.731, 96.7319, 67, 108.736, 67),
    ("C", 120.739, 67, 130.47, 76.731, 130.47, 88.7347),
    ("Z",),
)


def oneplus_8_pro_screen_path() -> Path:
    """Screen outline with the camera hole punched out."""
    return Path.from_commands(SCREEN_OUTLINE, fill_rule=FillRule.EVEN_ODD)


def oneplus_8_pro_painter() -> FixedArtworkPainter:
    layers = (
        ArtworkLayer(FRAME, path=Path.from_commands(BODY)),
        ArtworkLayer(INNER_FRAME, path=Path.from_commands(BEZEL)),
        ArtworkLayer(CAMERA_OUTER, path=Path.oval(CAMERA_OUTER_OVAL)),
        ArtworkLayer(CAMERA_INNER, path=Path.oval(CAMERA_INNER_OVAL)),
        ArtworkLayer(CAMERA_LENS, path=Path.oval(CAMERA_LENS_OVAL)),
        ArtworkLayer(TOP_BAR, path=Path.from_commands(EARPIECE)),
    )
    return FixedArtworkPainter(FRAME_SIZE, SCREEN_RECT, SCREEN_RADIUS, layers)


def oneplus_8_pro() -> DeviceInfo:
    return fixed_device(
        DeviceIdentifier(
            name="oneplus-8-pro", type=DeviceType.PHONE, platform=TargetPlatform.ANDROID
        ),
        "OnePlus 8 Pro",
        painter=oneplus_8_pro_painter(),
        screen_size=SCREEN_SIZE,
        screen_path=oneplus_8_pro_screen_path(),
        pixel_ratio=4.0,
        safe_areas=EdgeInsets(left=0.0, top=40.0, right=0.0, bottom=20.0),
        rotated_safe_areas=EdgeInsets(left=40.0, top=24.0, right=40.0, bottom=0.0),
    )
