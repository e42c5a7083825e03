"""
Palette generation.

Two strategies:
- Reference: slot 0 of each group is a fixed saturation/lightness ramp and
  the other five slots copy its luminance at their own hue.
- Targeted: every position aims at a configured luminance, interpolated
  from the mid target toward the high (group 0) or low (group 1) target.
"""

import logging
from typing import Sequence

from ..color import (
    Color,
    SearchPolicy,
    create_color,
    find_hsl_for_luminance,
    find_luminance_matched_color,
)
from ..config.schema import DEFAULT_HUES, GeneratorConfig, LuminanceTargets
from .layout import GROUPS, SLOTS, POSITIONS, PALETTE_SIZE, flat_index

logger = logging.getLogger(__name__)

# Lightness ramp end for slot 0 of each group (both start at 50)
REFERENCE_START_LIGHTNESS = 50.0
REFERENCE_END_LIGHTNESS = (85.0, 15.0)


def _check_hues(hues: Sequence[float]) -> None:
    if len(hues) != GROUPS * SLOTS:
        raise ValueError(f"Expected {GROUPS * SLOTS} hues, got {len(hues)}")


def _position_saturation(position: int) -> float:
    """Saturation ramp 0 -> 100 across the five positions."""
    return position / (POSITIONS - 1) * 100


def generate_reference_palette(hues: Sequence[float] = DEFAULT_HUES) -> list[Color]:
    """
    Build the default 60-color palette.

    Args:
        hues: 12 hues, indexed by group * 6 + slot

    Returns:
        List of 60 colors in flat-index order
    """
    _check_hues(hues)
    colors: list[Color | None] = [None] * PALETTE_SIZE

    # Reference slot of each group sets the luminance for its positions
    for group in range(GROUPS):
        h = hues[group * SLOTS]
        end_l = REFERENCE_END_LIGHTNESS[group]
        for position in range(POSITIONS):
            s = _position_saturation(position)
            l = REFERENCE_START_LIGHTNESS + position / (POSITIONS - 1) * (
                end_l - REFERENCE_START_LIGHTNESS
            )
            colors[flat_index(group, 0, position)] = create_color(h, s, l)

    for group in range(GROUPS):
        for slot in range(1, SLOTS):
            h = hues[group * SLOTS + slot]
            for position in range(POSITIONS):
                reference = colors[flat_index(group, 0, position)]
                colors[flat_index(group, slot, position)] = find_luminance_matched_color(
                    h, _position_saturation(position), reference.luminance
                )

    logger.debug("Generated reference palette from hues %s", list(hues))
    return colors


def position_target(targets: LuminanceTargets, group: int, position: int) -> float:
    """Target luminance for a position: mid -> high for group 0, mid -> low for group 1."""
    end = targets.high if group == 0 else targets.low
    return targets.mid + position / (POSITIONS - 1) * (end - targets.mid)


def generate_targeted_palette(
    hues: Sequence[float],
    targets: LuminanceTargets,
    tolerance: float = 0.005,
) -> list[Color]:
    """
    Build a palette whose positions hit configured luminance targets.

    Each color is found with find_hsl_for_luminance(), scanning saturation
    upward from the position's nominal saturation.
    """
    _check_hues(hues)
    colors = []
    for group in range(GROUPS):
        for slot in range(SLOTS):
            h = hues[group * SLOTS + slot]
            for position in range(POSITIONS):
                colors.append(find_hsl_for_luminance(
                    h,
                    position_target(targets, group, position),
                    tolerance=tolerance,
                    start_saturation=_position_saturation(position),
                    policy=SearchPolicy.FIRST_ACCEPTABLE,
                ))
    logger.debug("Generated targeted palette (targets=%s)", targets)
    return colors


def generate_palette(config: GeneratorConfig | None = None) -> list[Color]:
    """Generate a palette according to config (reference strategy by default)."""
    if config is None:
        config = GeneratorConfig()
    if config.target_luminance is None:
        return generate_reference_palette(config.hues)
    return generate_targeted_palette(config.hues, config.target_luminance, config.tolerance)
