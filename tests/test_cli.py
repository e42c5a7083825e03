import logging

import pytest

from luma_springs.cli.explore import main
from luma_springs.logging_config import setup_logging
from luma_springs.palette import load_palette


@pytest.fixture(autouse=True)
def detach_cli_logging():
    yield
    # main() binds a handler to the captured stderr of the current test
    logging.getLogger("luma_springs").handlers.clear()


@pytest.fixture
def palette_file(tmp_path):
    path = tmp_path / "palette.txt"
    assert main(["generate", "--reference", "--output", str(path)]) == 0
    return path


def test_generate_to_stdout(capsys):
    assert main(["generate"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Group 1\n")
    assert "HSL(0, 0, 50) RGB(128, 128, 128) L=0.216" in out


def test_luminance_search(capsys):
    assert main(["luminance", "0", "0.216"]) == 0
    assert "HSL(0, 0, 50)" in capsys.readouterr().out


def test_gradient_command(palette_file, capsys):
    assert main(["gradient", "0", "4", "--input", str(palette_file),
                 "--steps", "3", "--policy", "linear"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "linear:"
    assert len(lines) == 1 + 5


def test_relax_command_keeps_locked_colors(palette_file, tmp_path):
    out = tmp_path / "relaxed.txt"
    assert main(["relax", "--input", str(palette_file), "--steps", "3",
                 "--lock", "0", "--output", str(out)]) == 0
    before = load_palette(palette_file)
    after = load_palette(out)
    assert after[0] == before[0]
    assert len(after) == 60


def test_config_command(tmp_path):
    path = tmp_path / "config.yaml"
    assert main(["config", str(path)]) == 0
    assert "target_luminance" in path.read_text()


def test_bad_index_reports_error(palette_file, capsys):
    assert main(["gradient", "0", "99", "--input", str(palette_file)]) == 1
    assert "Error:" in capsys.readouterr().err


def test_truncated_listing_reports_missing_colors(palette_file, capsys):
    lines = palette_file.read_text().splitlines()
    palette_file.write_text("\n".join(lines[:20]))
    assert main(["relax", "--input", str(palette_file), "--steps", "1"]) == 1
    assert "Missing colors" in capsys.readouterr().err


def test_relax_paced_by_config_fps(palette_file, tmp_path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("fps: 10\n")
    sleeps = []
    monkeypatch.setattr("luma_springs.cli.explore.time.sleep", sleeps.append)

    assert main(["relax", "--config", str(config_path), "--input", str(palette_file),
                 "--steps", "3", "--output", str(tmp_path / "out.txt")]) == 0
    assert len(sleeps) == 3
    assert all(0 <= s <= 0.1 for s in sleeps)
    assert max(sleeps) > 0.05

    sleeps.clear()
    assert main(["relax", "--config", str(config_path), "--input", str(palette_file),
                 "--steps", "3", "--fps", "0", "--output", str(tmp_path / "out.txt")]) == 0
    assert sleeps == []


def test_setup_logging_writes_file_without_duplicates(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging(logging.INFO, str(log_file))
    package_logger = setup_logging(logging.INFO, str(log_file))
    assert len(package_logger.handlers) == 2
    logging.getLogger("luma_springs.test").info("hello")
    for handler in package_logger.handlers:
        handler.flush()
    assert log_file.read_text().count("hello") == 1
    for handler in package_logger.handlers:
        handler.close()
