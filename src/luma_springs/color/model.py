"""
Color model: HSL construction and luminance-driven searches.

Forward direction (HSL -> RGB -> luminance) is exact. The inverse direction
(find an HSL color with a given luminance) is done by scanning, since the
luminance surface has no convenient closed-form inverse.
"""

import logging
import math
from enum import Enum, auto
from typing import Iterator

from .conversions import rgb_to_hsl
from .types import Color

logger = logging.getLogger(__name__)

# Searches stop early once a candidate is this close, whatever the policy
NEAR_PERFECT_DELTA = 0.001

# Smallest luminance-per-lightness slope used by estimate_lightness_delta
MIN_LUMINANCE_SLOPE = 0.001

# Damping on the first-order lightness estimate
LIGHTNESS_ESTIMATE_DAMPING = 0.5


class SearchPolicy(Enum):
    """How a luminance search picks its answer."""

    FIRST_ACCEPTABLE = auto()  # First candidate within tolerance wins
    CLOSEST = auto()  # Smallest delta over the whole scan wins


def create_color(h: float, s: float, l: float) -> Color:
    """
    Build a Color from HSL.

    Args:
        h: Hue in degrees (0-360)
        s: Saturation (0-100)
        l: Lightness (0-100)

    Returns:
        Color with derived RGB and luminance
    """
    return Color(h, s, l)


def color_from_rgb(r: float, g: float, b: float) -> Color:
    """Build a Color from RGB channels (0-255) via HSL."""
    return Color(*rgb_to_hsl(r, g, b))


def estimate_lightness_delta(color: Color, target_luminance: float) -> float:
    """
    Approximate the lightness change that moves color to target_luminance.

    Probes luminance one lightness unit up, treats the difference as the local
    slope, and halves the resulting step to avoid overshoot. The slope is
    floored at MIN_LUMINANCE_SLOPE in magnitude, which caps the step size
    where luminance barely responds to lightness (near black and white).
    """
    nudged = Color(color.h, color.s, color.l + 1)
    slope = nudged.luminance - color.luminance
    if abs(slope) < MIN_LUMINANCE_SLOPE:
        slope = -MIN_LUMINANCE_SLOPE if slope < 0 else MIN_LUMINANCE_SLOPE
    return LIGHTNESS_ESTIMATE_DAMPING * (target_luminance - color.luminance) / slope


def frange(start: float, stop: float, step: float) -> Iterator[float]:
    """
    Inclusive float range without accumulated drift.

    frange(0, 1, 0.2) yields 0.0, 0.2, 0.4, 0.6, 0.8, 1.0.
    """
    if stop < start:
        return
    count = int(math.floor((stop - start) / step + 1e-9))
    for i in range(count + 1):
        yield round(start + i * step, 6)


def find_hsl_for_luminance(
    h: float,
    target_luminance: float,
    tolerance: float = 0.005,
    start_saturation: float = 0.0,
    policy: SearchPolicy = SearchPolicy.FIRST_ACCEPTABLE,
) -> Color:
    """
    Find saturation and lightness at a fixed hue that hit a target luminance.

    Scans saturation upward from start_saturation and, for each saturation,
    lightness upward from 0, first on a 1-unit grid and then on a 0.2-unit
    grid around the best coarse candidate.

    With FIRST_ACCEPTABLE the first candidate within tolerance is returned.
    With CLOSEST the best candidate across the whole scan is kept and the scan
    only stops early on a near-perfect match (< NEAR_PERFECT_DELTA). A
    FIRST_ACCEPTABLE scan never stops short of tolerance. Either
    way, if nothing lands within tolerance the best candidate seen is
    returned; this never raises.

    Args:
        h: Hue in degrees
        target_luminance: Desired relative luminance (0.0-1.0)
        tolerance: Acceptable absolute luminance error
        start_saturation: Lowest saturation to scan (0-100)
        policy: How to choose among acceptable candidates

    Returns:
        Color at hue h with the chosen saturation and lightness
    """
    start_saturation = max(0.0, min(100.0, start_saturation))
    best: Color | None = None
    best_delta = math.inf

    def scan(saturations, lightnesses) -> Color | None:
        nonlocal best, best_delta
        for s in saturations:
            for l in lightnesses():
                candidate = Color(h, s, l)
                delta = abs(candidate.luminance - target_luminance)
                if delta < best_delta:
                    best, best_delta = candidate, delta
                if policy is SearchPolicy.FIRST_ACCEPTABLE and delta <= tolerance:
                    return candidate
                if policy is SearchPolicy.CLOSEST and best_delta < NEAR_PERFECT_DELTA:
                    return best
        return None

    found = scan(frange(start_saturation, 100, 1.0), lambda: frange(0, 100, 1.0))
    if found is not None:
        return found

    # Refine around the best coarse candidate
    center = best
    found = scan(
        frange(max(start_saturation, center.s - 1), min(100.0, center.s + 1), 0.2),
        lambda: frange(max(0.0, center.l - 1), min(100.0, center.l + 1), 0.2),
    )
    if found is not None:
        return found

    if best_delta > tolerance:
        logger.warning(
            "No color at hue %.1f within %.4f of luminance %.4f; best is %r (delta %.4f)",
            h, tolerance, target_luminance, best, best_delta,
        )
    return best


def find_luminance_matched_color(
    h: float,
    s: float,
    target_luminance: float,
    step: float = 1.0,
    min_lightness: float = 1.0,
    max_lightness: float = 99.0,
    stop_within: float | None = None,
) -> Color:
    """
    Closest-luminance color at a fixed hue and saturation.

    Only lightness is scanned, from min_lightness to max_lightness in the
    given step. On ties the lower lightness wins. If stop_within is set,
    the scan ends at the first candidate closer than that.
    """
    best: Color | None = None
    best_delta = math.inf
    for l in frange(min_lightness, max_lightness, step):
        candidate = Color(h, s, l)
        delta = abs(candidate.luminance - target_luminance)
        if delta < best_delta:
            best, best_delta = candidate, delta
        if stop_within is not None and best_delta < stop_within:
            break
    if best is None:
        # Empty range: fall back to the lower bound
        best = Color(h, s, min_lightness)
    return best
