"""Tests for threshold, style and generation configuration."""

import pytest
from pydantic import ValidationError

from tileworld.exceptions import ConfigurationError
from tileworld.terrain.config import (
    BandRange,
    FeatureDensityConfig,
    GenerationConfig,
    StyleConfig,
    ThresholdConfig,
)


class TestBandRange:
    """Tests for BandRange."""

    def test_from_pair(self) -> None:
        """A two-item list becomes low/high."""
        band = BandRange.model_validate([0.35, 0.6])
        assert band.low == 0.35
        assert band.high == 0.6

    def test_wrong_length_pair_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BandRange.model_validate([0.1, 0.2, 0.3])

    def test_contains_is_strict(self) -> None:
        band = BandRange(low=0.30, high=0.31)
        assert band.contains(0.305)
        assert not band.contains(0.30)
        assert not band.contains(0.31)


class TestThresholdConfig:
    """Tests for ThresholdConfig."""

    def test_defaults(self) -> None:
        config = ThresholdConfig()
        assert config.ground_threshold == 0.2
        assert (config.mountain_range.low, config.mountain_range.high) == (0.30, 0.31)
        assert (config.forest_range.low, config.forest_range.high) == (0.35, 0.6)
        assert (config.bone_range.low, config.bone_range.high) == (0.6, 0.7)
        assert config.house_threshold == 0.7
        assert config.noise_scale == 10.5

    def test_density_defaults(self) -> None:
        density = ThresholdConfig().density
        assert density.large_tree == 0.9
        assert density.small_tree == 0.8
        assert density.bones == 0.98
        assert density.house == 0.98
        assert density.large_house == 0.85

    @pytest.mark.parametrize("field", ["mountain_range", "forest_range", "bone_range"])
    def test_inverted_range_rejected(self, field: str) -> None:
        """A range with low > high names the field."""
        with pytest.raises(ConfigurationError) as exc_info:
            ThresholdConfig(**{field: BandRange(low=0.5, high=0.4)})
        assert exc_info.value.field == field
        assert field in str(exc_info.value)

    def test_empty_range_allowed(self) -> None:
        """low == high is valid; the band simply never matches."""
        config = ThresholdConfig(mountain_range=BandRange(low=0.3, high=0.3))
        assert not config.mountain_range.contains(0.3)

    @pytest.mark.parametrize("scale", [0.0, -1.0])
    def test_non_positive_noise_scale_rejected(self, scale: float) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ThresholdConfig(noise_scale=scale)
        assert exc_info.value.field == "noise_scale"

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_noise_scale_rejected(self, value: float) -> None:
        """NaN and infinite scales are rejected, not accepted silently."""
        with pytest.raises(ConfigurationError) as exc_info:
            ThresholdConfig(noise_scale=value)
        assert exc_info.value.field == "noise_scale"

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    @pytest.mark.parametrize("field", ["ground_threshold", "house_threshold"])
    def test_non_finite_threshold_rejected(self, field: str, value: float) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ThresholdConfig(**{field: value})
        assert exc_info.value.field == field

    @pytest.mark.parametrize(
        "bounds",
        [
            [float("nan"), 0.31],
            [0.30, float("nan")],
            [float("-inf"), 0.31],
            [0.30, float("inf")],
        ],
    )
    def test_non_finite_band_bound_rejected(self, bounds: list[float]) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ThresholdConfig(mountain_range=bounds)
        assert exc_info.value.field == "mountain_range"

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_density_rejected(self, value: float) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            FeatureDensityConfig(house=value)
        assert exc_info.value.field == "density.house"

    def test_density_out_of_range_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            FeatureDensityConfig(bones=1.5)
        assert exc_info.value.field == "density.bones"

    def test_nested_density_validated(self) -> None:
        with pytest.raises(ConfigurationError):
            ThresholdConfig.model_validate({"density": {"house": -0.1}})

    def test_frozen(self) -> None:
        """Validated configs cannot be mutated into an invalid state."""
        config = ThresholdConfig()
        with pytest.raises(ValidationError):
            config.ground_threshold = 0.9


class TestStyleConfig:
    """Tests for StyleConfig."""

    def test_default_palette(self) -> None:
        style = StyleConfig()
        assert style.tree.as_rgb8() == (128, 204, 128)
        assert style.background.as_rgb8() == (128, 204, 204)


class TestGenerationConfig:
    """Tests for GenerationConfig."""

    def test_defaults(self) -> None:
        config = GenerationConfig()
        assert config.cols == 200
        assert config.rows == 100
        assert config.seed is None
        assert config.choice_seed is None

    def test_zero_size_allowed(self) -> None:
        config = GenerationConfig(cols=0, rows=0)
        assert config.cols == 0

    @pytest.mark.parametrize("field", ["cols", "rows", "seed", "choice_seed"])
    def test_negative_rejected(self, field: str) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            GenerationConfig(**{field: -1})
        assert exc_info.value.field == field
