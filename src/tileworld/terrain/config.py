"""Terrain generation configuration models."""

import math
from collections.abc import Sequence

from pydantic import BaseModel, Field, model_validator

from ..exceptions import ConfigurationError
from ..types import Tint


class BandRange(BaseModel, frozen=True):
    """Open noise interval (low, high) gating a feature.

    Accepts either a mapping with ``low``/``high`` keys or a two-item
    sequence, so TOML files can write ``forest_range = [0.35, 0.6]``.
    """

    low: float
    high: float

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: object) -> object:
        if isinstance(data, Sequence) and not isinstance(data, str):
            if len(data) != 2:
                raise ValueError(f"expected [low, high], got {len(data)} values")
            return {"low": data[0], "high": data[1]}
        return data

    def contains(self, value: float) -> bool:
        """Whether value lies strictly inside the band."""
        return self.low < value < self.high


class FeatureDensityConfig(BaseModel, frozen=True):
    """Cut-offs on the per-cell choice value that decide feature density.

    A feature is placed when the choice value is strictly greater than its
    cut-off, so 0.98 means roughly a 2% chance inside the band.
    """

    large_tree: float = Field(default=0.9, description="Choice cut-off for large trees")
    small_tree: float = Field(default=0.8, description="Choice cut-off for small trees")
    bones: float = Field(default=0.98, description="Choice cut-off for bones")
    house: float = Field(default=0.98, description="Choice cut-off for houses")
    large_house: float = Field(
        default=0.85, description="Second-draw cut-off picking the large house"
    )

    @model_validator(mode="after")
    def _check_probabilities(self) -> "FeatureDensityConfig":
        for name in type(self).model_fields:
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(
                    f"density.{name}", f"{value} is outside [0, 1]"
                )
        return self


class ThresholdConfig(BaseModel, frozen=True, revalidate_instances="always"):
    """Noise thresholds and scale used to classify cells.

    Validated at construction and again whenever an instance is passed
    into another model; invalid values raise ConfigurationError naming
    the field and are never clamped.
    """

    ground_threshold: float = Field(
        default=0.2, description="Noise above this is solid ground"
    )
    mountain_range: BandRange = Field(
        default_factory=lambda: BandRange(low=0.30, high=0.31),
        description="Narrow band emitting mountain tiles",
    )
    forest_range: BandRange = Field(
        default_factory=lambda: BandRange(low=0.35, high=0.6),
        description="Band where trees may grow",
    )
    bone_range: BandRange = Field(
        default_factory=lambda: BandRange(low=0.6, high=0.7),
        description="Band where bones may lie",
    )
    house_threshold: float = Field(
        default=0.7, description="Noise above this may hold a house"
    )
    noise_scale: float = Field(
        default=10.5, description="Grid coordinates are divided by this before sampling"
    )
    density: FeatureDensityConfig = Field(default_factory=FeatureDensityConfig)

    @model_validator(mode="after")
    def _check_ranges(self) -> "ThresholdConfig":
        for name in ("ground_threshold", "house_threshold", "noise_scale"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ConfigurationError(name, f"must be finite, got {value}")
        for name in ("mountain_range", "forest_range", "bone_range"):
            band: BandRange = getattr(self, name)
            if not (math.isfinite(band.low) and math.isfinite(band.high)):
                raise ConfigurationError(
                    name, f"bounds must be finite, got ({band.low}, {band.high})"
                )
            if band.low > band.high:
                raise ConfigurationError(
                    name, f"low ({band.low}) is greater than high ({band.high})"
                )
        if self.noise_scale <= 0:
            raise ConfigurationError(
                "noise_scale", f"must be positive, got {self.noise_scale}"
            )
        return self


class StyleConfig(BaseModel, frozen=True):
    """Tint palette applied to each tile kind."""

    background: Tint = Field(default_factory=lambda: Tint.rgb(0.5, 0.8, 0.8))
    ground: Tint = Field(default_factory=lambda: Tint.rgb(0.96, 0.96, 0.86))
    mountain: Tint = Field(default_factory=lambda: Tint.rgb(0.96, 0.96, 0.86))
    tree: Tint = Field(default_factory=lambda: Tint.rgb(0.5, 0.8, 0.5))
    bones: Tint = Field(default_factory=lambda: Tint.rgb(0.5, 0.5, 0.5))
    house: Tint = Field(default_factory=lambda: Tint.rgb(0.4, 0.3, 0.25))


class GenerationConfig(BaseModel):
    """Complete world generation configuration.

    Seeds left as None are drawn from the process random source when a
    world is generated.
    """

    cols: int = Field(default=200, description="Grid width in cells")
    rows: int = Field(default=100, description="Grid height in cells")
    seed: int | None = Field(default=None, description="Noise field seed")
    choice_seed: int | None = Field(
        default=None, description="Seed for per-cell feature choices"
    )
    thresholds: ThresholdConfig = Field(default_factory=ThresholdConfig)
    style: StyleConfig = Field(default_factory=StyleConfig)

    @model_validator(mode="after")
    def _check_grid(self) -> "GenerationConfig":
        for name in ("cols", "rows"):
            value = getattr(self, name)
            if value < 0:
                raise ConfigurationError(name, f"must be >= 0, got {value}")
        for name in ("seed", "choice_seed"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ConfigurationError(name, f"must be >= 0, got {value}")
        return self
