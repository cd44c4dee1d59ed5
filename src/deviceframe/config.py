"""Configuration constants for device frame rendering."""

from reportlab.lib import colors


def argb(value: int) -> colors.Color:
    """Convert a 0xAARRGGBB integer into a reportlab color with alpha."""
    alpha = ((value >> 24) & 0xFF) / 255
    red = ((value >> 16) & 0xFF) / 255
    green = ((value >> 8) & 0xFF) / 255
    blue = (value & 0xFF) / 255
    return colors.Color(red, green, blue, alpha=alpha)


# Builders
DEFAULT_PIXEL_RATIO = 2.0

# Window-emulating families
MACOS_WINDOW_BAR_HEIGHT = 30.0
DEFAULT_WINDOW_BAR_HEIGHT = 40.0
WINDOW_SHADOW_COLOR = argb(0x993F2548)
WINDOW_SHADOW_BLEND_MODE = "Multiply"

# File output
DEFAULT_MOCKUP_FILENAME_TEMPLATE = "mockup_{device}_{orientation}.pdf"
PLUGIN_ENTRY_POINT_GROUP = "deviceframe.devices"


class FrameColors:
    """Default colors shared by the generic device painters."""

    OUTER_BODY = argb(0xFF3A4245)
    INNER_BODY = argb(0xFF121515)
    BUTTON = argb(0xFF121515)
    CAMERA_BORDER = argb(0xFF262C2D)
    CAMERA_INNER = argb(0xFF121515)
    CAMERA_REFLECT = argb(0xFF465256)

    LAPTOP_BASE_TOP = argb(0xFF3A4245)
    LAPTOP_BASE_BOTTOM = argb(0xFF323434)
    LAPTOP_BASE_PAD = argb(0xFF222626)

    SAFE_AREA_TINT = argb(0x55FF0000)
    CONTENT_PLACEHOLDER = argb(0xFFFFFFFF)


class WindowBarColors:
    """Title bar palette per desktop platform."""

    LINUX_BAR = argb(0xFE323030)
    LINUX_CLOSE = argb(0xFFE95420)
    DARK_BAR = argb(0xBB000000)
    GLYPH = argb(0xFFFFFFFF)
    MACOS_CLOSE = argb(0xFFEE695E)
    MACOS_MINIMIZE = argb(0xFFF5BD4E)
    MACOS_MAXIMIZE = argb(0xFF61C354)


WALLPAPER_COLORS = {
    "macos": (argb(0xFF4817A6), argb(0xFFB236AF), argb(0xFFC7BDD6), argb(0xFFC870A2)),
    "linux": (argb(0xFFBE15DA), argb(0xFFE22888), argb(0xFFD84E00)),
    "default": (argb(0xFF1491F8), argb(0xFF0043D8)),
}
