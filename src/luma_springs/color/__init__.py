"""Color model: HSL/RGB/luminance conversion and luminance searches."""

from .types import RGB, Color
from .conversions import (
    calculate_luminance,
    hsl_to_rgb,
    rgb_to_hsl,
    hue_delta,
    normalize_hue,
    linearize,
    delinearize,
)
from .model import (
    SearchPolicy,
    create_color,
    color_from_rgb,
    estimate_lightness_delta,
    find_hsl_for_luminance,
    find_luminance_matched_color,
)
from .space import ColorSpaceIndex

__all__ = [
    # Types
    "RGB",
    "Color",
    # Conversions
    "calculate_luminance",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "hue_delta",
    "normalize_hue",
    "linearize",
    "delinearize",
    # Model
    "SearchPolicy",
    "create_color",
    "color_from_rgb",
    "estimate_lightness_delta",
    "find_hsl_for_luminance",
    "find_luminance_matched_color",
    # Index
    "ColorSpaceIndex",
]
