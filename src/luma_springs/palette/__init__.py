"""Palette layout, generation, text listing and explorer state."""

from .layout import (
    GROUPS,
    SLOTS,
    POSITIONS,
    PALETTE_SIZE,
    PaletteIndex,
    flat_index,
    split_index,
    slot_indices,
)
from .generator import (
    generate_palette,
    generate_reference_palette,
    generate_targeted_palette,
)
from .text_format import (
    PaletteFormatError,
    MissingColorsError,
    format_palette,
    parse_palette,
    save_palette,
    load_palette,
)
from .state import Store, ExplorerState

__all__ = [
    # Layout
    "GROUPS",
    "SLOTS",
    "POSITIONS",
    "PALETTE_SIZE",
    "PaletteIndex",
    "flat_index",
    "split_index",
    "slot_indices",
    # Generation
    "generate_palette",
    "generate_reference_palette",
    "generate_targeted_palette",
    # Text listing
    "PaletteFormatError",
    "MissingColorsError",
    "format_palette",
    "parse_palette",
    "save_palette",
    "load_palette",
    # State
    "Store",
    "ExplorerState",
]
