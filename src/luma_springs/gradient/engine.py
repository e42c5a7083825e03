"""
Gradient engine: interpolation sequences between two colors.

Three policies:
- LINEAR_HSL: hue along the shorter arc, saturation and lightness linear
- LUMINANCE_HSL: as LINEAR_HSL, but lightness is re-solved at every step
  so luminance moves linearly from start to end
- OPPONENT: mixing in a cube-root compressed cone space (OKLab-style),
  with a small chroma boost around the midpoint

Every sequence starts with the exact start color and ends with the exact
end color.
"""

import math
from enum import Enum
from typing import Callable

from ..color import (
    Color,
    color_from_rgb,
    create_color,
    delinearize,
    find_luminance_matched_color,
    linearize,
    normalize_hue,
)

DEFAULT_INTERMEDIATE_STEPS = 20

# Lightness search used by LUMINANCE_HSL
LIGHTNESS_SEARCH_STEP = 0.2
LUMINANCE_MATCH_WITHIN = 0.001

# Peak extra chroma at t=0.5 is MIDPOINT_GAIN / 4
MIDPOINT_GAIN = 0.2

# Linear sRGB -> cone response
RGB_TO_CONE = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# Cone response -> linear sRGB
CONE_TO_RGB = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)


class GradientPolicy(Enum):
    """Interpolation strategy."""

    LINEAR_HSL = "linear"
    LUMINANCE_HSL = "luminance"
    OPPONENT = "opponent"


def _mat_vec(matrix, vector) -> tuple[float, float, float]:
    return tuple(sum(m * v for m, v in zip(row, vector)) for row in matrix)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def shortest_hue_delta(start_h: float, end_h: float) -> float:
    """Signed hue change along the shorter arc, in [-180, 180)."""
    return ((end_h - start_h + 540) % 360) - 180


def _interpolate_hue_saturation(start: Color, end: Color, t: float) -> tuple[float, float]:
    h = normalize_hue(start.h + shortest_hue_delta(start.h, end.h) * t)
    return h, _lerp(start.s, end.s, t)


def _linear_hsl(start: Color, end: Color, t: float) -> Color:
    h, s = _interpolate_hue_saturation(start, end, t)
    return create_color(h, s, _lerp(start.l, end.l, t))


def _luminance_hsl(start: Color, end: Color, t: float) -> Color:
    h, s = _interpolate_hue_saturation(start, end, t)
    target = _lerp(start.luminance, end.luminance, t)
    return find_luminance_matched_color(
        h, s, target,
        step=LIGHTNESS_SEARCH_STEP,
        min_lightness=0.0,
        max_lightness=100.0,
        stop_within=LUMINANCE_MATCH_WITHIN,
    )


def to_opponent(color: Color) -> tuple[float, float, float]:
    """Compressed cone coordinates of a color."""
    linear = [linearize(c / 255) for c in color.rgb]
    return tuple(math.copysign(abs(c) ** (1 / 3), c) for c in _mat_vec(RGB_TO_CONE, linear))


def from_opponent(coords: tuple[float, float, float]) -> Color:
    """Inverse of to_opponent(), clamped into the sRGB gamut."""
    cone = [c ** 3 for c in coords]
    linear = _mat_vec(CONE_TO_RGB, cone)
    r, g, b = (max(0.0, min(255.0, delinearize(c) * 255)) for c in linear)
    return color_from_rgb(r, g, b)


def _opponent(start: Color, end: Color, t: float) -> Color:
    a = to_opponent(start)
    b = to_opponent(end)
    mixed = [_lerp(x, y, t) for x, y in zip(a, b)]

    # Spread cone channels about their mean, peaking at t=0.5
    gain = 1 + MIDPOINT_GAIN * t * (1 - t)
    mean = sum(mixed) / 3
    boosted = tuple(mean + (c - mean) * gain for c in mixed)
    return from_opponent(boosted)


_POLICIES: dict[GradientPolicy, Callable[[Color, Color, float], Color]] = {
    GradientPolicy.LINEAR_HSL: _linear_hsl,
    GradientPolicy.LUMINANCE_HSL: _luminance_hsl,
    GradientPolicy.OPPONENT: _opponent,
}


def gradient(
    start: Color | None,
    end: Color | None,
    policy: GradientPolicy = GradientPolicy.LINEAR_HSL,
    steps: int = DEFAULT_INTERMEDIATE_STEPS,
) -> list[Color]:
    """
    Interpolate from start to end.

    Args:
        start: First color (None gives an empty sequence)
        end: Last color (None gives an empty sequence)
        policy: Interpolation strategy
        steps: Number of intermediate colors between the endpoints

    Returns:
        steps + 2 colors; the first is start and the last is end
    """
    if start is None or end is None:
        return []
    mix = _POLICIES[policy]
    total = steps + 1
    sequence = [start]
    for i in range(1, total):
        sequence.append(mix(start, end, i / total))
    sequence.append(end)
    return sequence


def generate_gradients(
    start: Color | None,
    end: Color | None,
    steps: int = DEFAULT_INTERMEDIATE_STEPS,
) -> dict[GradientPolicy, list[Color]]:
    """One sequence per policy, keyed by policy."""
    return {policy: gradient(start, end, policy, steps) for policy in GradientPolicy}
