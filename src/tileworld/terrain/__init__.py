"""Procedural terrain generation package.

Samples a coherent noise field over the grid, classifies cells into
ground and feature tiles by threshold bands, and autotiles the ground
from each cell's cardinal neighbors.
"""

from .autotile import AUTOTILE_TABLE, NeighborPattern, get_tile, neighbor_pattern
from .config import (
    BandRange,
    FeatureDensityConfig,
    GenerationConfig,
    StyleConfig,
    ThresholdConfig,
)
from .noise import NoiseField, random_seed
from .synthesizer import (
    GenerationResult,
    autotile,
    classify_cell,
    generate,
    generate_terrain,
)
from .validation import ValidationResult, validate_placements

__all__ = [
    "AUTOTILE_TABLE",
    "BandRange",
    "FeatureDensityConfig",
    "GenerationConfig",
    "GenerationResult",
    "NeighborPattern",
    "NoiseField",
    "StyleConfig",
    "ThresholdConfig",
    "ValidationResult",
    "autotile",
    "classify_cell",
    "generate",
    "generate_terrain",
    "get_tile",
    "neighbor_pattern",
    "random_seed",
    "validate_placements",
]
