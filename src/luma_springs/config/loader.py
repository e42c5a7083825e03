"""Configuration file loading and saving."""

from pathlib import Path
from typing import Any
import yaml

from .schema import (
    LumaSpringsConfig,
    SpringConfig,
    LuminanceTargets,
    GeneratorConfig,
    GradientConfig,
    DEFAULT_HUES,
)


def load_config(config_path: Path) -> LumaSpringsConfig:
    """
    Load configuration from a YAML file.

    Missing keys take their defaults.

    Raises:
        ValueError: If a value is out of range
    """
    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    # Parse spring constants
    springs_data = data.get("springs", {})
    springs = SpringConfig(
        spring_constant=float(springs_data.get("spring_constant", 0.1)),
        damping=float(springs_data.get("damping", 0.2)),
        timestep=float(springs_data.get("timestep", 1.0)),
    )

    # Parse generator settings
    generator_data = data.get("generator", {})
    targets = None
    if generator_data.get("target_luminance"):
        targets_data = generator_data["target_luminance"]
        targets = LuminanceTargets(
            high=float(targets_data.get("high", 0.500)),
            mid=float(targets_data.get("mid", 0.216)),
            low=float(targets_data.get("low", 0.050)),
        )
    generator = GeneratorConfig(
        hues=[float(h) for h in generator_data.get("hues", DEFAULT_HUES)],
        target_luminance=targets,
        tolerance=float(generator_data.get("tolerance", 0.005)),
    )

    # Parse gradient settings
    gradient_data = data.get("gradient", {})
    gradient = GradientConfig(
        intermediate_steps=int(gradient_data.get("intermediate_steps", 20)),
    )

    config = LumaSpringsConfig(
        springs=springs,
        generator=generator,
        gradient=gradient,
        fps=int(data.get("fps", 30)),
    )
    config.validate()
    return config


def save_config(config: LumaSpringsConfig, config_path: Path) -> None:
    """Save configuration to a YAML file."""
    data: dict[str, Any] = {
        "springs": {
            "spring_constant": config.springs.spring_constant,
            "damping": config.springs.damping,
            "timestep": config.springs.timestep,
        },
        "generator": {
            "hues": list(config.generator.hues),
            "tolerance": config.generator.tolerance,
        },
        "gradient": {
            "intermediate_steps": config.gradient.intermediate_steps,
        },
        "fps": config.fps,
    }

    if config.generator.target_luminance:
        targets = config.generator.target_luminance
        data["generator"]["target_luminance"] = {
            "high": targets.high,
            "mid": targets.mid,
            "low": targets.low,
        }

    with open(config_path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
