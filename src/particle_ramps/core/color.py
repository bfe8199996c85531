"""
Color utilities for the gradient model.

Provides hex parsing/encoding and the per-channel linear blend used
between gradient stops.
"""

import math
import re

from .types import RGB

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+$")

# Returned by degenerate gradients (fewer than two stops)
DEFAULT_COLOR = "#ffffff"


def normalize_hex(hex_color: str) -> str:
    """
    Normalize a hex color string to lowercase "#rrggbb".

    Args:
        hex_color: Hex string like "#FF6B00", "#F60", "ff6b00"

    Returns:
        Hex string like "#ff6b00"

    Raises:
        ValueError: If hex format is invalid
    """
    if not isinstance(hex_color, str):
        raise ValueError(f"Invalid hex color: {hex_color!r}")

    hex_str = hex_color.strip().lstrip("#")

    # Expand shorthand (#RGB -> #RRGGBB)
    if len(hex_str) == 3:
        hex_str = "".join(c * 2 for c in hex_str)

    if len(hex_str) != 6 or not _HEX_DIGITS.match(hex_str):
        raise ValueError(f"Invalid hex color: {hex_color!r}")

    return "#" + hex_str.lower()


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Convert hex color string to 8-bit RGB.

    Raises:
        ValueError: If hex format is invalid
    """
    hex_str = normalize_hex(hex_color)[1:]
    return RGB(
        int(hex_str[0:2], 16),
        int(hex_str[2:4], 16),
        int(hex_str[4:6], 16),
    )


def rgb_to_hex(color: RGB) -> str:
    """
    Convert 8-bit RGB to hex string.

    Channels are clamped to 0-255.

    Returns:
        Hex string like "#ff6b00"
    """
    r, g, b = (max(0, min(255, int(c))) for c in color)
    return f"#{r:02x}{g:02x}{b:02x}"


def _round_channel(value: float) -> int:
    # Exact halves go down: 127.5 -> 127
    return math.ceil(value - 0.5)


def lerp_rgb(c1: RGB, c2: RGB, t: float) -> RGB:
    """
    Linearly interpolate each channel between two colors.

    Args:
        c1: Start color
        c2: End color
        t: Interpolation factor (0.0 = c1, 1.0 = c2)
    """
    return RGB(
        _round_channel(c1.r + (c2.r - c1.r) * t),
        _round_channel(c1.g + (c2.g - c1.g) * t),
        _round_channel(c1.b + (c2.b - c1.b) * t),
    )


def lerp_hex(c1: str, c2: str, t: float) -> str:
    """Blend two hex colors channel by channel and re-encode as hex."""
    return rgb_to_hex(lerp_rgb(hex_to_rgb(c1), hex_to_rgb(c2), t))
