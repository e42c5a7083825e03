"""Spring relaxation network."""

from .network import SpringConnection, SpringNetwork, Velocity, connect_all

__all__ = [
    "SpringConnection",
    "SpringNetwork",
    "Velocity",
    "connect_all",
]
