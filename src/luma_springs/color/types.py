"""
Core color value types.

- RGB: 8-bit sRGB triple
- Color: an HSL color with its derived RGB and relative luminance
"""

from dataclasses import dataclass, field
from typing import NamedTuple


class RGB(NamedTuple):
    """
    sRGB color with integer channels in 0-255.
    """
    r: int
    g: int
    b: int

    def to_hex(self) -> str:
        """Hex string like "#FF6B00"."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


@dataclass(frozen=True)
class Color:
    """
    An immutable HSL color.

    Only (h, s, l) are given; rgb and luminance are always derived from them
    at construction time. To "edit" a color, build a new one.

    Attributes:
        h: Hue in degrees (0-360)
        s: Saturation (0-100)
        l: Lightness (0-100)
        rgb: Derived sRGB value
        luminance: Derived relative luminance (0.0-1.0)
    """
    h: float
    s: float
    l: float
    rgb: RGB = field(init=False)
    luminance: float = field(init=False)

    def __post_init__(self):
        from .conversions import hsl_to_rgb, calculate_luminance

        rgb = hsl_to_rgb(self.h, self.s, self.l)
        object.__setattr__(self, 'rgb', rgb)
        object.__setattr__(self, 'luminance', calculate_luminance(*rgb))

    def with_lightness(self, l: float) -> "Color":
        """Return a new color at the same hue/saturation."""
        return Color(self.h, self.s, l)

    def __repr__(self) -> str:
        return (
            f"Color(h={self.h:.1f}, s={self.s:.1f}, l={self.l:.1f}, "
            f"rgb={self.rgb.to_hex()}, luminance={self.luminance:.3f})"
        )
