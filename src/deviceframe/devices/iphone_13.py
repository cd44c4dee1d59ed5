"""Apple iPhone 13."""

from __future__ import annotations

from deviceframe.config import argb
from deviceframe.geometry import CornerRadius, EdgeInsets, FillRule, Path, Rect, Size
from deviceframe.info import DeviceIdentifier, DeviceInfo, DeviceType, TargetPlatform
from deviceframe.painters.artwork import ArtworkLayer, FixedArtworkPainter

from .builders import fixed_device

DARK_FRAME = argb(0xFF1C3343)
MEDIUM_FRAME = argb(0xFF213744)
LIGHT_FRAME = argb(0xFF8EADC1)
SCREEN = argb(0xFF121515)
BUTTON = argb(0xFF262C2D)
DETAIL = argb(0xFF36454C)
LENS = argb(0xFF636F73)

FRAME_SIZE = Size(873.0, 1771.0)
SCREEN_SIZE = Size(390.0, 844.0)
SCREEN_RECT = Rect(left=45.0, top=129.973, right=828.0, bottom=1637.98)
SCREEN_RADIUS = CornerRadius(40.0)

BODY = (
    ("M", 6.19141, 187.809),
    ("C", 6.19141, 137.871, 6.19141, 112.902, 12.7571, 92.6946),
    ("C", 26.0269, 51.8546, 58.046, 19.8354, 98.886, 6.56572),
    ("C", 119.093, 0, 144.062, 0, 194, 0),
    ("L", 679, 0),
    ("C", 728.938, 0, 753.907, 0, 774.114, 6.56572),
    ("C", 814.954, 19.8354, 846.973, 51.8546, 860.243, 92.6946),
    ("C", 866.808, 112.902, 866.808, 137.871, 866.808, 187.809),
    ("L", 866.808, 1582.96),
    ("C", 866.808, 1632.9, 866.808, 1657.86, 860.243, 1678.07),
    ("C", 846.973, 1718.91, 814.954, 1750.93, 774.114, 1764.2),
    ("C", 753.907, 1770.77, 728.938, 1770.77, 679, 1770.77),
    ("L", 194, 1770.77),
    ("C", 144.062, 1770.77, 119.093, 1770.77, 98.886, 1764.2),
    ("C", 58.046, 1750.93, 26.0269, 1718.91, 12.7571, 1678.07),
    ("C", 6.19141, 1657.86, 6.19141, 1632.9, 6.19141, 1582.96),
    ("L", 6.19141, 187.809),
    ("Z",),
)

BEZEL_RING = (
    ("M", 679.825, 4.12755),
    ("L", 193.174, 4.12755),
    ("C", 143.844, 4.12755, 119.668, 4.15301, 100.161, 10.4912),
    ("C", 60.5778, 23.3527, 29.5438, 54.3866, 16.6824, 93.97),
    ("C", 10.3442, 113.477, 10.3187, 137.653, 10.3187, 186.983),
    ("L", 10.3187, 1583.78),
    ("C", 10.3187, 1633.11, 10.3442, 1657.29, 16.6824, 1676.8),
    ("C", 29.5438, 1716.38, 60.5778, 1747.41, 100.161, 1760.27),
    ("C", 119.668, 1766.61, 143.844, 1766.64, 193.174, 1766.64),
    ("L", 679.825, 1766.64),
    ("C", 729.155, 1766.64, 753.331, 1766.61, 772.838, 1760.27),
    ("C", 812.421, 1747.41, 843.455, 1716.38, 856.317, 1676.8),
    ("C", 862.655, 1657.29, 862.68, 1633.11, 862.68, 1583.78),
    ("L", 862.68, 186.983),
    ("C", 862.68, 137.653, 862.655, 113.477, 856.317, 93.97),
    ("C", 843.455, 54.3866, 812.421, 23.3527, 772.838, 10.4912),
    ("C", 753.331, 4.15301, 729.155, 4.12755, 679.825, 4.12755),
    ("Z",),
    ("M", 14.7196, 93.3323),
    ("C", 8.25488, 113.229, 8.25488, 137.813, 8.25488, 186.983),
    ("L", 8.25488, 1583.78),
    ("C", 8.25488, 1632.95, 8.25488, 1657.54, 14.7196, 1677.43),
    ("C", 27.7852, 1717.65, 59.3117, 1749.17, 99.5235, 1762.24),
    ("C", 119.42, 1768.7, 144.005, 1768.7, 193.174, 1768.7),
    ("L", 679.825, 1768.7),
    ("C", 728.995, 1768.7, 753.579, 1768.7, 773.476, 1762.24),
    ("C", 813.687, 1749.17, 845.214, 1717.65, 858.28, 1677.43),
    ("C", 864.744, 1657.54, 864.744, 1632.95, 864.744, 1583.78),
    ("L", 864.744, 186.983),
    ("C", 864.744, 137.813, 864.744, 113.229, 858.28, 93.3323),
    ("C", 845.214, 53.1206, 813.687, 21.594, 773.476, 8.52843),
    ("C", 753.579, 2.06372, 728.995, 2.06372, 679.825, 2.06372),
    ("L", 193.174, 2.06372),
    ("C", 144.005, 2.06372, 119.42, 2.06372, 99.5235, 8.52843),
    ("C", 59.3117, 21.594, 27.7852, 53.1206, 14.7196, 93.3323),
    ("Z",),
)

GLASS = (
    ("M", 16.5107, 183.681),
    ("C", 16.5107, 137.584, 16.5107, 114.536, 22.5714, 95.8834),
    ("C", 34.8204, 58.1849, 64.3765, 28.6287, 102.075, 16.3798),
    ("C", 120.728, 10.3191, 143.776, 10.3191, 189.872, 10.3191),
    ("L", 683.128, 10.3191),
    ("C", 729.224, 10.3191, 752.272, 10.3191, 770.925, 16.3798),
    ("C", 808.624, 28.6287, 838.18, 58.1849, 850.429, 95.8834),
    ("C", 856.49, 114.536, 856.49, 137.584, 856.49, 183.681),
    ("L", 856.49, 1587.09),
    ("C", 856.49, 1633.18, 856.49, 1656.23, 850.429, 1674.88),
    ("C", 838.18, 1712.58, 808.624, 1742.14, 770.925, 1754.39),
    ("C", 752.272, 1760.45, 729.224, 1760.45, 683.128, 1760.45),
    ("L", 189.872, 1760.45),
    ("C", 143.776, 1760.45, 120.728, 1760.45, 102.075, 1754.39),
    ("C", 64.3765, 1742.14, 34.8204, 1712.58, 22.5714, 1674.88),
    ("C", 16.5107, 1656.23, 16.5107, 1633.18, 16.5107, 1587.09),
    ("L", 16.5107, 183.681),
    ("Z",),
)

POWER_BUTTON = (
    ("M", 866.809, 454.042),
    ("L", 869.904, 454.042),
    ("C", 871.614, 454.042, 873, 455.428, 873, 457.138),
    ("L", 873, 659.394),
    ("C", 873, 661.103, 871.614, 662.489, 869.904, 662.489),
    ("L", 866.809, 662.489),
    ("L", 866.809, 454.042),
    ("Z",),
)


def _left_button(top: float, bottom: float) -> tuple[tuple[object, ...], ...]:
    """Left-edge button with rounded outer corners spanning `top..bottom`."""
    return (
        ("M", 6.19141, bottom),
        ("L", 3.09565, bottom),
        ("C", 1.38592, bottom, 0, bottom - 1.386, 0, bottom - 3.096),
        ("L", 0, top + 3.096),
        ("C", 0, top + 1.386, 1.38593, top, 3.09566, top),
        ("L", 6.19142, top),
        ("L", 6.19141, bottom),
        ("Z",),
    )


VOLUME_DOWN = _left_button(577.872, 705.83)
VOLUME_UP = _left_button(408.638, 536.596)
SILENT_SWITCH = _left_button(280.681, 346.723)

CAMERA_RING = (
    ("M", 328.511, 77.0213),
    ("C", 337.629, 77.0213, 345.021, 69.6292, 345.021, 60.5106),
    ("C", 345.021, 51.3921, 337.629, 44, 328.511, 44),
    ("C", 319.392, 44, 312, 51.3921, 312, 60.5106),
    ("C", 312, 69.6292, 319.392, 77.0213, 328.511, 77.0213),
    ("Z",),
)

CAMERA_BODY = (
    ("M", 328.511, 70.8297),
    ("C", 334.21, 70.8297, 338.83, 66.2097, 338.83, 60.5106),
    ("C", 338.83, 54.8114, 334.21, 50.1914, 328.511, 50.1914),
    ("C", 322.811, 50.1914, 318.191, 54.8114, 318.191, 60.5106),
    ("C", 318.191, 66.2097, 322.811, 70.8297, 328.511, 70.8297),
    ("Z",),
)

CAMERA_LENS = (
    ("M", 328.511, 58.4468),
    ("C", 329.651, 58.4468, 330.575, 57.5227, 330.575, 56.3829),
    ("C", 330.575, 55.2431, 329.651, 54.3191, 328.511, 54.3191),
    ("C", 327.371, 54.3191, 326.447, 55.2431, 326.447, 56.3829),
    ("C", 326.447, 57.5227, 327.371, 58.4468, 328.511, 58.4468),
    ("Z",),
)

SPEAKER = (
    ("M", 365, 10),
    ("L", 506, 10),
    ("L", 506, 14),
    ("C", 506, 18.4183, 502.418, 22, 498, 22),
    ("L", 373, 22),
    ("C", 368.582, 22, 365, 18.4183, 365, 14),
    ("L", 365, 10),
    ("Z",),
)

# Antenna bands as (left, top, width, height) fractions of the frame.
ANTENNA_BANDS = (
    (0.7825063, 0.0, 0.01418442, 0.005826708),
    (0.9810871, 0.1002196, 0.01182027, 0.006992095),
    (0.007092108, 0.1002196, 0.01182027, 0.006992095),
    (0.007092108, 0.8926539, 0.01182027, 0.006992095),
    (0.9810871, 0.8926539, 0.01182027, 0.006992095),
    (0.2033093, 0.9940429, 0.01418442, 0.005826708),
)

SCREEN_OUTLINE = (
    ("M", 45.1305, 129.973),
    ("C", 45.0439, 131.645, 45, 133.329, 45, 135.022),
    ("L", 45, 1637.98),
    ("C", 45, 1691.01, 88.002, 1734, 141.048, 1734),
    ("L", 731.952, 1734),
    ("C", 784.998, 1734, 828, 1691.01, 828, 1637.98),
    ("L", 828, 135.022),
    ("C", 828, 134.815, 827.999, 134.608, 827.998, 134.401),
    ("C", 827.664, 81.6555, 784.791, 39, 731.952, 39),
    ("L", 596.761, 39),
    ("C", 589.566, 41.5313, 584.408, 48.3863, 584.408, 56.4451),
    ("C", 584.408, 81.9729, 563.708, 102.667, 538.174, 102.667),
    ("L", 332.826, 102.667),
    ("C", 307.292, 102.667, 286.592, 81.9729, 286.592, 56.4451),
    ("C", 286.592, 48.3863, 281.434, 41.5313, 274.239, 39),
    ("L", 141.048, 39),
    ("C", 117.114, 39, 95.2253, 47.7516, 78.408, 62.2285),
    ("C", 71.9295, 67.8055, 66.2036, 74.2321, 61.4035, 81.3353),
    ("C", 51.9291, 95.3554, 46.0612, 112.011, 45.1305, 129.973),
    ("Z",),
)


def iphone_13_screen_path() -> Path:
    """Screen outline with the notch cut out of the top edge."""
    return Path.from_commands(SCREEN_OUTLINE, fill_rule=FillRule.EVEN_ODD)


def iphone_13_painter() -> FixedArtworkPainter:
    layers = [
        ArtworkLayer(MEDIUM_FRAME, path=Path.from_commands(BODY)),
        ArtworkLayer(LIGHT_FRAME, path=Path.from_commands(BEZEL_RING)),
        ArtworkLayer(SCREEN, path=Path.from_commands(GLASS)),
        ArtworkLayer(DARK_FRAME, path=Path.from_commands(POWER_BUTTON)),
        ArtworkLayer(DARK_FRAME, path=Path.from_commands(VOLUME_DOWN)),
        ArtworkLayer(MEDIUM_FRAME, path=Path.from_commands(VOLUME_UP)),
        ArtworkLayer(MEDIUM_FRAME, path=Path.from_commands(SILENT_SWITCH)),
        ArtworkLayer(BUTTON, path=Path.from_commands(CAMERA_RING)),
        ArtworkLayer(SCREEN, path=Path.from_commands(CAMERA_BODY)),
        ArtworkLayer(LENS, path=Path.from_commands(CAMERA_LENS)),
        ArtworkLayer(BUTTON, path=Path.from_commands(SPEAKER)),
    ]
    layers.extend(ArtworkLayer(DETAIL, rect_fraction=band) for band in ANTENNA_BANDS)
    return FixedArtworkPainter(FRAME_SIZE, SCREEN_RECT, SCREEN_RADIUS, layers)


def iphone_13() -> DeviceInfo:
    return fixed_device(
        DeviceIdentifier(name="iphone-13", type=DeviceType.PHONE, platform=TargetPlatform.IOS),
        "iPhone 13",
        painter=iphone_13_painter(),
        screen_size=SCREEN_SIZE,
        screen_path=iphone_13_screen_path(),
        pixel_ratio=3.0,
        safe_areas=EdgeInsets(left=0.0, top=47.0, right=0.0, bottom=34.0),
        rotated_safe_areas=EdgeInsets(left=47.0, top=0.0, right=47.0, bottom=21.0),
    )
