"""
Human-readable palette listing.

Format:
    Group 1
      Palette 1
        1. HSL(0, 0, 50) RGB(128, 128, 128) L=0.216
        ...
      Palette 2
        ...
    Group 2
      ...

Colors are stored with rounded HSL, so a round trip reproduces each color's
rounded HSL exactly. Only the HSL triple is read back; RGB and luminance
are recomputed.
"""

import logging
import re
from pathlib import Path
from typing import Sequence

from ..color import Color, create_color, normalize_hue
from .layout import GROUPS, SLOTS, POSITIONS, PALETTE_SIZE, flat_index

logger = logging.getLogger(__name__)

_COLOR_LINE = re.compile(
    r"HSL\(\s*(-?\d+(?:\.\d+)?)\s*,\s*(-?\d+(?:\.\d+)?)\s*,\s*(-?\d+(?:\.\d+)?)\s*\)"
)


class PaletteFormatError(ValueError):
    """A palette listing could not be turned into exactly 60 colors."""


class MissingColorsError(PaletteFormatError):
    """A palette listing held fewer than 60 colors."""

    def __init__(self, found: int):
        super().__init__(f"Missing colors: found {found} of {PALETTE_SIZE}")
        self.found = found


def format_color(color: Color) -> str:
    """One color as 'HSL(h, s, l) RGB(r, g, b) L=0.000'."""
    r, g, b = color.rgb
    return (
        f"HSL({round(color.h)}, {round(color.s)}, {round(color.l)}) "
        f"RGB({r}, {g}, {b}) L={color.luminance:.3f}"
    )


def format_palette(colors: Sequence[Color]) -> str:
    """
    Render a 60-color palette as a grouped listing.

    Raises:
        ValueError: If colors does not hold exactly 60 entries
    """
    if len(colors) != PALETTE_SIZE:
        raise ValueError(f"Expected {PALETTE_SIZE} colors, got {len(colors)}")

    lines = []
    for group in range(GROUPS):
        lines.append(f"Group {group + 1}")
        for slot in range(SLOTS):
            lines.append(f"  Palette {slot + 1}")
            for position in range(POSITIONS):
                color = colors[flat_index(group, slot, position)]
                lines.append(f"    {position + 1}. {format_color(color)}")
    return "\n".join(lines) + "\n"


def parse_palette(text: str) -> list[Color]:
    """
    Parse a listing produced by format_palette().

    Lines without an HSL triple are ignored, so headers and blank lines
    are free-form.

    Raises:
        MissingColorsError: If fewer than 60 colors are found
        PaletteFormatError: If more than 60 colors are found
    """
    colors = []
    for line in text.splitlines():
        match = _COLOR_LINE.search(line)
        if match:
            h, s, l = (float(v) for v in match.groups())
            colors.append(create_color(normalize_hue(h), max(0.0, min(100.0, s)), max(0.0, min(100.0, l))))

    if len(colors) < PALETTE_SIZE:
        raise MissingColorsError(len(colors))
    if len(colors) > PALETTE_SIZE:
        raise PaletteFormatError(f"Too many colors: found {len(colors)} of {PALETTE_SIZE}")
    return colors


def save_palette(colors: Sequence[Color], path: Path) -> None:
    """Write a palette listing to a file."""
    Path(path).write_text(format_palette(colors), encoding="utf-8")
    logger.info("Saved palette to %s", path)


def load_palette(path: Path) -> list[Color]:
    """Read a palette listing from a file."""
    colors = parse_palette(Path(path).read_text(encoding="utf-8"))
    logger.info("Loaded palette from %s", path)
    return colors
