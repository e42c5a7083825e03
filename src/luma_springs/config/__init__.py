"""Configuration schema and loading."""

from .schema import (
    LumaSpringsConfig,
    SpringConfig,
    LuminanceTargets,
    GeneratorConfig,
    GradientConfig,
    DEFAULT_HUES,
)
from .loader import load_config, save_config

__all__ = [
    "LumaSpringsConfig",
    "SpringConfig",
    "LuminanceTargets",
    "GeneratorConfig",
    "GradientConfig",
    "DEFAULT_HUES",
    "load_config",
    "save_config",
]
