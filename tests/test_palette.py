import pytest

from luma_springs.color import create_color
from luma_springs.config import GeneratorConfig, LuminanceTargets
from luma_springs.palette import (
    PALETTE_SIZE,
    ExplorerState,
    MissingColorsError,
    PaletteFormatError,
    flat_index,
    format_palette,
    generate_palette,
    load_palette,
    parse_palette,
    save_palette,
    slot_indices,
    split_index,
)
from luma_springs.palette.generator import position_target


def _rounded(colors):
    return [(round(c.h), round(c.s), round(c.l)) for c in colors]


# === Layout ===

def test_flat_index_round_trip():
    assert flat_index(0, 0, 0) == 0
    assert flat_index(1, 5, 4) == 59
    assert split_index(37) == (1, 1, 2)
    for index in range(PALETTE_SIZE):
        assert flat_index(*split_index(index)) == index


def test_layout_bounds():
    with pytest.raises(ValueError):
        flat_index(2, 0, 0)
    with pytest.raises(ValueError):
        flat_index(0, 6, 0)
    with pytest.raises(ValueError):
        split_index(60)


def test_slot_indices():
    assert slot_indices(0, 2) == [2, 7, 12, 17, 22, 27]
    assert slot_indices(1, 0) == [30, 35, 40, 45, 50, 55]


# === Generation ===

def test_reference_palette_layout(reference_palette):
    assert len(reference_palette) == PALETTE_SIZE
    assert reference_palette[0] == create_color(0, 0, 50)
    assert reference_palette[4] == create_color(0, 100, 85)
    assert reference_palette[flat_index(1, 0, 4)] == create_color(30, 100, 15)


def test_reference_palette_matches_slot_luminance(reference_palette):
    for group in range(2):
        for slot in range(1, 6):
            for position in range(5):
                color = reference_palette[flat_index(group, slot, position)]
                reference = reference_palette[flat_index(group, 0, position)]
                assert color.s == position * 25
                assert abs(color.luminance - reference.luminance) < 0.03


def test_reference_palette_hues(reference_palette):
    assert reference_palette[flat_index(0, 3, 2)].h == 180
    assert reference_palette[flat_index(1, 2, 2)].h == 150


def test_generate_palette_rejects_wrong_hue_count():
    with pytest.raises(ValueError):
        generate_palette(GeneratorConfig(hues=[0, 60, 120]))


def test_position_targets():
    targets = LuminanceTargets()
    assert position_target(targets, 0, 0) == pytest.approx(0.216)
    assert position_target(targets, 0, 4) == pytest.approx(0.5)
    assert position_target(targets, 1, 4) == pytest.approx(0.05)


def test_targeted_palette_hits_targets():
    targets = LuminanceTargets()
    colors = generate_palette(GeneratorConfig(target_luminance=targets))
    assert len(colors) == PALETTE_SIZE
    for index, color in enumerate(colors):
        group, _, position = split_index(index)
        assert abs(color.luminance - position_target(targets, group, position)) < 0.01
        assert color.s >= position * 25


# === Text listing ===

def test_format_palette_listing(reference_palette):
    text = format_palette(reference_palette)
    lines = text.splitlines()
    assert lines[0] == "Group 1"
    assert lines[1] == "  Palette 1"
    assert lines[2] == "    1. HSL(0, 0, 50) RGB(128, 128, 128) L=0.216"
    assert "Group 2" in lines


def test_listing_round_trip(reference_palette):
    parsed = parse_palette(format_palette(reference_palette))
    assert _rounded(parsed) == _rounded(reference_palette)


def test_missing_colors_rejected(reference_palette):
    lines = format_palette(reference_palette).splitlines()
    del lines[5]
    with pytest.raises(MissingColorsError) as excinfo:
        parse_palette("\n".join(lines))
    assert excinfo.value.found == 59

    with pytest.raises(MissingColorsError):
        parse_palette("")


def test_extra_colors_rejected(reference_palette):
    text = format_palette(reference_palette) + "    6. HSL(1, 2, 3)\n"
    with pytest.raises(PaletteFormatError) as excinfo:
        parse_palette(text)
    assert not isinstance(excinfo.value, MissingColorsError)


def test_format_requires_full_palette():
    with pytest.raises(ValueError):
        format_palette([create_color(0, 0, 0)])


def test_save_and_load(tmp_path, reference_palette):
    path = tmp_path / "palette.txt"
    save_palette(reference_palette, path)
    assert _rounded(load_palette(path)) == _rounded(reference_palette)


# === Explorer state ===

def test_store_notifies_subscribers(reference_palette):
    state = ExplorerState(reference_palette)
    seen = []
    unsubscribe = state.active_index.subscribe(seen.append)
    state.select(3)
    unsubscribe()
    state.select(4)
    assert seen == [None, 3]


def test_active_color_is_tracked_by_index():
    colors = [create_color(0, 0, 50)] * 60
    state = ExplorerState(colors)
    state.select(7)
    state.replace_color(7, create_color(120, 50, 50))
    assert state.active_index.get() == 7
    assert state.active_color() == create_color(120, 50, 50)
    assert state.palette.get()[6] == create_color(0, 0, 50)
    # The input list is never modified
    assert colors[7] == create_color(0, 0, 50)


def test_toggle_lock(reference_palette):
    state = ExplorerState(reference_palette)
    assert state.toggle_lock(5)
    assert state.locked.get() == frozenset({5})
    assert not state.toggle_lock(5)
    assert state.locked.get() == frozenset()
    with pytest.raises(ValueError):
        state.toggle_lock(60)


def test_replace_palette_drops_stale_selection(reference_palette):
    state = ExplorerState(reference_palette)
    state.select(50)
    state.toggle_lock(2)
    state.toggle_lock(55)
    state.replace_palette(reference_palette[:10])
    assert state.active_index.get() is None
    assert state.locked.get() == frozenset({2})
