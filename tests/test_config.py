"""Tests for TOML configuration loading."""

from pathlib import Path

import pytest

from tileworld.config import find_config, list_configs, load_config
from tileworld.exceptions import ConfigurationError


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "world.toml"
    path.write_text(text)
    return path


class TestLoadConfig:
    """Tests for load_config."""

    def test_full_config(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            """
cols = 64
rows = 32
seed = 77

[thresholds]
ground_threshold = 0.25
mountain_range = [0.4, 0.42]
noise_scale = 8.0

[thresholds.density]
bones = 0.9

[style]
tree = { r = 0.1, g = 0.6, b = 0.1 }
""",
        )
        config = load_config(path)
        assert config.cols == 64
        assert config.rows == 32
        assert config.seed == 77
        assert config.thresholds.ground_threshold == 0.25
        assert config.thresholds.mountain_range.low == 0.4
        assert config.thresholds.mountain_range.high == 0.42
        assert config.thresholds.noise_scale == 8.0
        assert config.thresholds.density.bones == 0.9
        assert config.style.tree.g == 0.6
        # Unspecified values keep their defaults
        assert config.thresholds.forest_range.low == 0.35
        assert config.choice_seed is None

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_config(_write(tmp_path, ""))
        assert config.cols == 200
        assert config.thresholds.house_threshold == 0.7

    def test_inverted_range_names_field(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[thresholds]\nforest_range = [0.6, 0.35]\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path)
        assert exc_info.value.field == "forest_range"

    def test_wrong_type_names_field(self, tmp_path: Path) -> None:
        path = _write(tmp_path, 'cols = "wide"\n')
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path)
        assert exc_info.value.field == "cols"

    def test_malformed_toml(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "cols = = 3\n")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")


class TestFindConfig:
    """Tests for config discovery."""

    def test_bundled_configs_listed(self) -> None:
        names = list_configs()
        assert "default" in names
        assert "archipelago" in names

    def test_find_by_name(self) -> None:
        path = find_config("default")
        assert path.name == "default.toml"
        assert load_config(path).cols == 200

    def test_bundled_archipelago_loads(self) -> None:
        config = load_config(find_config("archipelago"))
        assert config.thresholds.noise_scale == 6.0
        assert config.thresholds.density.large_tree == 0.85

    def test_find_by_path(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "cols = 5\n")
        assert find_config(str(path)) == path

    def test_missing_name(self) -> None:
        with pytest.raises(FileNotFoundError):
            find_config("no_such_world")

    def test_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            find_config(str(tmp_path / "nope.toml"))
