"""
Precomputed color-space index for luminance lookups.

The index enumerates hue in 5 degree steps, saturation in 5% steps and
lightness in 1% steps (1-99). It is built explicitly by its owner and
passed to whatever needs it; nothing is built at import time.

Usage:
    index = ColorSpaceIndex().build()
    grays = index.find_colors_with_luminance(0.216, tolerance=0.002)
    match = index.find_closest_by_luminance(120, 50, 0.3)
"""

import logging
import math

from .types import Color

logger = logging.getLogger(__name__)


class ColorSpaceIndex:
    """
    Grid of precomputed colors keyed by (hue, saturation).
    """

    def __init__(
        self,
        hue_step: int = 5,
        saturation_step: int = 5,
        lightness_step: int = 1,
    ):
        self.hue_step = hue_step
        self.saturation_step = saturation_step
        self.lightness_step = lightness_step
        self._columns: dict[tuple[int, int], list[Color]] = {}

    @property
    def is_built(self) -> bool:
        return bool(self._columns)

    def __len__(self) -> int:
        return sum(len(column) for column in self._columns.values())

    def build(self) -> "ColorSpaceIndex":
        """Enumerate the grid. Calling again on a built index is a no-op."""
        if self.is_built:
            return self
        for h in range(0, 360, self.hue_step):
            for s in range(0, 101, self.saturation_step):
                self._columns[(h, s)] = [
                    Color(h, s, l) for l in range(1, 100, self.lightness_step)
                ]
        logger.debug("Built color space index with %d colors", len(self))
        return self

    def _require_built(self) -> None:
        if not self.is_built:
            raise RuntimeError("ColorSpaceIndex.build() must be called before querying")

    def find_colors_with_luminance(
        self, target_luminance: float, tolerance: float = 0.001
    ) -> list[Color]:
        """All indexed colors whose luminance is within tolerance of target."""
        self._require_built()
        return [
            color
            for column in self._columns.values()
            for color in column
            if abs(color.luminance - target_luminance) <= tolerance
        ]

    def find_closest_by_luminance(
        self, h: float, s: float, target_luminance: float
    ) -> Color | None:
        """
        Closest-luminance indexed color at exactly (h, s).

        Returns None if (h, s) is not on the grid. On ties the first
        (lowest lightness) candidate wins.
        """
        self._require_built()
        column = self._columns.get((h, s))
        if not column:
            return None
        best = column[0]
        best_delta = math.inf
        for color in column:
            delta = abs(color.luminance - target_luminance)
            if delta < best_delta:
                best, best_delta = color, delta
        return best
