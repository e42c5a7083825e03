"""
Palette layout: 2 groups x 6 palette slots x 5 positions = 60 colors.

A color's flat index is group * 30 + slot * 5 + position.
"""

from typing import NamedTuple

GROUPS = 2
SLOTS = 6
POSITIONS = 5
GROUP_SIZE = SLOTS * POSITIONS
PALETTE_SIZE = GROUPS * GROUP_SIZE


class PaletteIndex(NamedTuple):
    """Structured location of a color in the palette."""
    group: int
    slot: int
    position: int


def flat_index(group: int, slot: int, position: int) -> int:
    """
    Flat palette index for (group, slot, position).

    Raises:
        ValueError: If any coordinate is out of range
    """
    if not 0 <= group < GROUPS:
        raise ValueError(f"Group out of range: {group}")
    if not 0 <= slot < SLOTS:
        raise ValueError(f"Palette slot out of range: {slot}")
    if not 0 <= position < POSITIONS:
        raise ValueError(f"Position out of range: {position}")
    return group * GROUP_SIZE + slot * POSITIONS + position


def split_index(index: int) -> PaletteIndex:
    """
    Inverse of flat_index().

    Raises:
        ValueError: If index is outside the palette
    """
    if not 0 <= index < PALETTE_SIZE:
        raise ValueError(f"Palette index out of range: {index}")
    group, rest = divmod(index, GROUP_SIZE)
    slot, position = divmod(rest, POSITIONS)
    return PaletteIndex(group, slot, position)


def slot_indices(group: int, position: int) -> list[int]:
    """Indices of the colors at one position across every slot of a group."""
    return [flat_index(group, slot, position) for slot in range(SLOTS)]
