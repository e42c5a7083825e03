import pytest

from luma_springs.config import (
    DEFAULT_HUES,
    LumaSpringsConfig,
    LuminanceTargets,
    load_config,
    save_config,
)


def test_defaults():
    config = LumaSpringsConfig()
    assert config.springs.spring_constant == 0.1
    assert config.springs.damping == 0.2
    assert config.springs.timestep == 1.0
    assert config.generator.hues == list(DEFAULT_HUES)
    assert config.generator.target_luminance is None
    assert config.gradient.intermediate_steps == 20


def test_with_defaults_enables_targets():
    targets = LumaSpringsConfig.with_defaults().generator.target_luminance
    assert (targets.high, targets.mid, targets.low) == (0.500, 0.216, 0.050)


def test_save_load_round_trip(tmp_path):
    config = LumaSpringsConfig.with_defaults()
    config.springs.damping = 0.35
    config.fps = 60
    path = tmp_path / "config.yaml"
    save_config(config, path)
    assert load_config(path) == config


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path) == LumaSpringsConfig()


def test_partial_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("springs:\n  spring_constant: 0.05\ngenerator:\n  target_luminance:\n    mid: 0.2\n")
    config = load_config(path)
    assert config.springs.spring_constant == 0.05
    assert config.springs.damping == 0.2
    assert config.generator.target_luminance == LuminanceTargets(mid=0.2)


@pytest.mark.parametrize("text", [
    "springs:\n  damping: 1.5\n",
    "springs:\n  timestep: 0\n",
    "generator:\n  hues: [0, 60, 120]\n",
    "generator:\n  target_luminance:\n    high: 2.0\n",
    "gradient:\n  intermediate_steps: -1\n",
    "fps: 0\n",
])
def test_invalid_values_rejected(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text)
    with pytest.raises(ValueError):
        load_config(path)
