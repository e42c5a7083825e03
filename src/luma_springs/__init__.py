"""
luma-springs: a numeric color-space engine for a 60-color HSL palette.

- color: HSL -> RGB -> luminance conversion and luminance searches
- springs: spring relaxation of palette colors toward their neighbors
- gradient: interpolation sequences between two colors
- palette: layout, generation, text listing and explorer state
"""

from .color import Color, RGB, create_color
from .gradient import GradientPolicy, generate_gradients
from .palette import generate_palette
from .springs import SpringNetwork

__all__ = [
    "Color",
    "RGB",
    "create_color",
    "GradientPolicy",
    "generate_gradients",
    "generate_palette",
    "SpringNetwork",
]
