"""
Spring relaxation network over palette positions.

Palette entries behave like masses joined by springs. Each step pulls every
unlocked color toward its neighbors in hue (along the shorter way round the
color wheel), saturation and luminance, then integrates a damped velocity.

Usage:
    network = SpringNetwork()
    network.build_default_topology()

    # Once per animation tick:
    colors = network.step(colors, locked)

The velocity map is the only state kept between steps. One stepping loop
should drive a network at a time; there is no internal locking.
"""

import logging
from dataclasses import dataclass
from typing import AbstractSet, Iterable, Sequence

from ..color import Color, estimate_lightness_delta, hue_delta, normalize_hue
from ..config.schema import SpringConfig
from ..palette.layout import GROUPS, POSITIONS, slot_indices

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class SpringConnection:
    """
    Undirected spring between two palette indices.

    SpringConnection(1, 2) == SpringConnection(2, 1).
    """
    index1: int
    index2: int

    def __post_init__(self):
        if self.index1 == self.index2:
            raise ValueError(f"Cannot connect index {self.index1} to itself")

    @property
    def key(self) -> frozenset[int]:
        return frozenset((self.index1, self.index2))

    def involves(self, index: int) -> bool:
        return index == self.index1 or index == self.index2

    def other(self, index: int) -> int:
        """The peer of index on this connection."""
        return self.index2 if index == self.index1 else self.index1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpringConnection):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


@dataclass
class Velocity:
    """Per-channel velocity of one palette entry."""
    h: float = 0.0
    s: float = 0.0
    l: float = 0.0


class SpringNetwork:
    """
    Connection graph plus velocity state for spring relaxation.

    The connection set is a simple undirected graph: adding an existing edge
    in either orientation is a no-op.
    """

    def __init__(self, config: SpringConfig | None = None):
        self.config = config or SpringConfig()
        self._connections: list[SpringConnection] = []
        self._velocities: list[Velocity] = []

    # === Connections ===

    @property
    def connections(self) -> tuple[SpringConnection, ...]:
        return tuple(self._connections)

    def add_connection(self, index1: int, index2: int) -> bool:
        """
        Connect two indices.

        Returns:
            True if a new connection was added

        Raises:
            ValueError: If index1 == index2
        """
        connection = SpringConnection(index1, index2)
        if connection in self._connections:
            return False
        self._connections.append(connection)
        logger.debug("Added spring %d <-> %d", index1, index2)
        return True

    def remove_connection(self, index1: int, index2: int) -> bool:
        """
        Disconnect two indices (either orientation).

        Returns:
            True if a connection was removed
        """
        key = frozenset((index1, index2))
        before = len(self._connections)
        self._connections = [c for c in self._connections if c.key != key]
        removed = len(self._connections) != before
        if removed:
            logger.debug("Removed spring %d <-> %d", index1, index2)
        return removed

    def clear_connections(self) -> None:
        self._connections = []

    def has_connection(self, index1: int, index2: int) -> bool:
        key = frozenset((index1, index2))
        return any(c.key == key for c in self._connections)

    def create_circular_chain(self, indices: Sequence[int]) -> None:
        """Connect indices in order and close the loop back to the first."""
        for i, index in enumerate(indices):
            self.add_connection(index, indices[(i + 1) % len(indices)])

    def build_default_topology(self) -> None:
        """
        Replace all connections with the default chains.

        For every (group, position), the six slot colors are linked in a
        closed cycle: slot 0 -> 1 -> 2 -> 3 -> 4 -> 5 -> 0.
        """
        self.clear_connections()
        for position in range(POSITIONS):
            for group in range(GROUPS):
                self.create_circular_chain(slot_indices(group, position))
        logger.debug("Built default topology with %d springs", len(self._connections))

    def neighbors(self, index: int) -> list[int]:
        """Indices connected to index, in connection order."""
        return [c.other(index) for c in self._connections if c.involves(index)]

    # === Velocity state ===

    def reset(self, palette: Sequence[Color] | int | None = None) -> None:
        """
        Zero all velocities.

        Args:
            palette: Palette (or palette length) to track; defaults to the
                current length
        """
        if palette is None:
            size = len(self._velocities)
        elif isinstance(palette, int):
            size = palette
        else:
            size = len(palette)
        self._velocities = [Velocity() for _ in range(size)]
        logger.debug("Reset velocities for %d colors", size)

    def velocity(self, index: int) -> Velocity:
        """Current velocity of an index (zero if not yet tracked)."""
        if 0 <= index < len(self._velocities):
            return self._velocities[index]
        return Velocity()

    # === Simulation ===

    def _forces(
        self, colors: Sequence[Color], locked: AbstractSet[int]
    ) -> dict[int, tuple[float, float, float]]:
        """Net (hue, saturation, lightness) force on every unlocked index."""
        k = self.config.spring_constant
        forces = {}
        outside: set[tuple[int, int]] = set()
        for i, color in enumerate(colors):
            if i in locked:
                continue

            force_h = 0.0
            force_s = 0.0
            force_luminance = 0.0
            for j in self.neighbors(i):
                if not 0 <= j < len(colors):
                    outside.add((i, j))
                    continue
                other = colors[j]
                force_h += hue_delta(color.h, other.h) * k
                force_s += (other.s - color.s) * k
                force_luminance += (other.luminance - color.luminance) * k

            # Luminance force becomes a lightness force via the local slope
            force_l = estimate_lightness_delta(color, color.luminance + force_luminance)
            forces[i] = (force_h, force_s, force_l)

        if outside:
            logger.warning(
                "Ignoring %d spring(s) reaching outside the %d-color palette: %s",
                len(outside), len(colors), sorted(outside),
            )
        return forces

    def step(
        self, colors: Sequence[Color], locked: AbstractSet[int] = frozenset()
    ) -> list[Color]:
        """
        Advance the simulation by one tick.

        Forces are computed from the input palette for every unlocked index,
        then velocities and positions are integrated. Locked indices keep
        their color but still pull on their neighbors.

        Args:
            colors: Current palette (not modified)
            locked: Indices to hold fixed

        Returns:
            New palette
        """
        if len(self._velocities) != len(colors):
            self.reset(colors)

        forces = self._forces(colors, locked)
        dt = self.config.timestep
        keep = 1.0 - self.config.damping

        new_colors = list(colors)
        for i, (force_h, force_s, force_l) in forces.items():
            vel = self._velocities[i]
            vel.h = (vel.h + force_h * dt) * keep
            vel.s = (vel.s + force_s * dt) * keep
            vel.l = (vel.l + force_l * dt) * keep
            if vel.h == 0.0 and vel.s == 0.0 and vel.l == 0.0:
                continue

            color = colors[i]
            new_h = normalize_hue(color.h + vel.h * dt)
            new_s = max(0.0, min(100.0, color.s + vel.s * dt))
            new_l = max(0.0, min(100.0, color.l + vel.l * dt))
            new_colors[i] = Color(new_h, new_s, new_l)

        return new_colors

    def relax(
        self,
        colors: Sequence[Color],
        locked: AbstractSet[int] = frozenset(),
        steps: int = 1,
    ) -> list[Color]:
        """Run several steps back to back and return the final palette."""
        result = list(colors)
        for _ in range(steps):
            result = self.step(result, locked)
        return result


def connect_all(network: SpringNetwork, pairs: Iterable[tuple[int, int]]) -> int:
    """
    Add many connections at once.

    Returns:
        Number of connections actually added
    """
    return sum(1 for i, j in pairs if network.add_connection(i, j))
