"""Configuration dataclasses."""

from dataclasses import dataclass, field
from typing import Optional

# Group 0 hues then group 1 hues, six palette slots each
DEFAULT_HUES: tuple[float, ...] = (0, 60, 120, 180, 240, 300, 30, 90, 150, 210, 270, 330)


@dataclass
class SpringConfig:
    """Spring relaxation constants."""
    spring_constant: float = 0.1
    damping: float = 0.2  # Fraction of velocity lost per step (0.0-1.0)
    timestep: float = 1.0

    def validate(self) -> None:
        if not 0.0 <= self.damping <= 1.0:
            raise ValueError(f"damping must be within 0-1, got {self.damping}")
        if self.timestep <= 0:
            raise ValueError(f"timestep must be positive, got {self.timestep}")


@dataclass
class LuminanceTargets:
    """Target luminance for the light, middle and dark ends of the palette."""
    high: float = 0.500
    mid: float = 0.216  # Mid-gray, HSL(0, 0, 50)
    low: float = 0.050

    def validate(self) -> None:
        for name in ("high", "mid", "low"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"target luminance '{name}' must be within 0-1, got {value}")


@dataclass
class GeneratorConfig:
    """Palette generator settings."""
    hues: list[float] = field(default_factory=lambda: list(DEFAULT_HUES))
    target_luminance: Optional[LuminanceTargets] = None  # None = reference palette
    tolerance: float = 0.005

    def validate(self) -> None:
        if len(self.hues) != len(DEFAULT_HUES):
            raise ValueError(f"Expected {len(DEFAULT_HUES)} hues, got {len(self.hues)}")
        if self.target_luminance is not None:
            self.target_luminance.validate()


@dataclass
class GradientConfig:
    """Gradient engine settings."""
    intermediate_steps: int = 20  # Endpoints are added on top

    def validate(self) -> None:
        if self.intermediate_steps < 0:
            raise ValueError(
                f"intermediate_steps must not be negative, got {self.intermediate_steps}"
            )


@dataclass
class LumaSpringsConfig:
    """Main application configuration."""
    springs: SpringConfig = field(default_factory=SpringConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    gradient: GradientConfig = field(default_factory=GradientConfig)
    fps: int = 30  # Relaxation ticks per second in the CLI

    def validate(self) -> None:
        """Raise ValueError on out-of-range settings."""
        self.springs.validate()
        self.generator.validate()
        self.gradient.validate()
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

    @classmethod
    def with_defaults(cls) -> "LumaSpringsConfig":
        """Create config with the standard targets enabled."""
        return cls(generator=GeneratorConfig(target_luminance=LuminanceTargets()))
