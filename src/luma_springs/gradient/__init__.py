"""Gradient engine."""

from .engine import (
    GradientPolicy,
    gradient,
    generate_gradients,
    shortest_hue_delta,
    to_opponent,
    from_opponent,
    DEFAULT_INTERMEDIATE_STEPS,
)

__all__ = [
    "GradientPolicy",
    "gradient",
    "generate_gradients",
    "shortest_hue_delta",
    "to_opponent",
    "from_opponent",
    "DEFAULT_INTERMEDIATE_STEPS",
]
