"""Procedural tile world generation."""

from .config import find_config, load_config
from .exceptions import ConfigurationError, PlacementInvariantError, TileWorldError
from .layout import SpriteSheetLayout, draw_order
from .state import TileWorld
from .terrain import (
    GenerationConfig,
    GenerationResult,
    NoiseField,
    StyleConfig,
    ThresholdConfig,
    generate,
    generate_terrain,
)
from .types import Cardinal, GridCoordinate, TileKind, TilePlacement, Tint

__all__ = [
    # Types
    "Cardinal",
    "GridCoordinate",
    "TileKind",
    "TilePlacement",
    "Tint",
    # Generation
    "GenerationConfig",
    "GenerationResult",
    "NoiseField",
    "StyleConfig",
    "ThresholdConfig",
    "generate",
    "generate_terrain",
    # State
    "TileWorld",
    # Rendering helpers
    "SpriteSheetLayout",
    "draw_order",
    # Config
    "find_config",
    "load_config",
    # Exceptions
    "TileWorldError",
    "ConfigurationError",
    "PlacementInvariantError",
]
