"""
Low-level conversions between HSL, sRGB and relative luminance.

Conventions used throughout luma_springs:
- hue in degrees (0-360), saturation and lightness in percent (0-100)
- RGB channels as integers 0-255
- relative luminance in 0.0-1.0 (BT.709 weights on linearized sRGB)
"""

import colorsys
import math

from .types import RGB

# BT.709 luminance weights
LUMA_R = 0.2126
LUMA_G = 0.7152
LUMA_B = 0.0722

# sRGB linearization knee (WCAG variant)
SRGB_KNEE = 0.03928


def _round_channel(value: float) -> int:
    """Scale a 0.0-1.0 channel to 0-255, rounding half up and clamping."""
    scaled = math.floor(value * 255 + 0.5)
    return max(0, min(255, scaled))


def linearize(channel: float) -> float:
    """
    Convert a gamma-encoded sRGB channel (0.0-1.0) to linear light.

    Args:
        channel: Normalized sRGB channel value

    Returns:
        Linear channel value
    """
    if channel <= SRGB_KNEE:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def delinearize(channel: float) -> float:
    """Inverse of linearize(): linear light (0.0-1.0) back to sRGB encoding."""
    channel = max(0.0, min(1.0, channel))
    if channel <= SRGB_KNEE / 12.92:
        return channel * 12.92
    return 1.055 * channel ** (1 / 2.4) - 0.055


def calculate_luminance(r: float, g: float, b: float) -> float:
    """
    Relative luminance of an sRGB color.

    Args:
        r, g, b: Channels in 0-255

    Returns:
        Luminance in 0.0-1.0
    """
    return (
        LUMA_R * linearize(r / 255)
        + LUMA_G * linearize(g / 255)
        + LUMA_B * linearize(b / 255)
    )


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    Convert HSL to 8-bit RGB.

    Args:
        h: Hue in degrees (any value, wraps at 360)
        s: Saturation 0-100
        l: Lightness 0-100

    Returns:
        RGB with channels rounded to integers and clamped to 0-255
    """
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360, l / 100, s / 100)
    return RGB(_round_channel(r), _round_channel(g), _round_channel(b))


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB (0-255) to HSL.

    Returns:
        (hue 0-360, saturation 0-100, lightness 0-100)
    """
    r = max(0.0, min(255.0, r))
    g = max(0.0, min(255.0, g))
    b = max(0.0, min(255.0, b))
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return (h * 360) % 360, s * 100, l * 100


def hue_delta(from_hue: float, to_hue: float) -> float:
    """
    Shortest signed angular difference from one hue to another.

    The result lies in [-180, 180]: hue_delta(350, 10) == 20 and
    hue_delta(10, 350) == -20.
    """
    diff = to_hue - from_hue
    if diff > 180:
        diff -= 360
    if diff < -180:
        diff += 360
    return diff


def normalize_hue(h: float) -> float:
    """Wrap a hue into [0, 360)."""
    h = h % 360
    # Tiny negative inputs round up to exactly 360.0
    if h >= 360:
        h = 0.0
    return h
