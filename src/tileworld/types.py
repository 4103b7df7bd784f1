"""Core types for tile world generation."""

from enum import Enum, IntEnum
from typing import NamedTuple

from pydantic import BaseModel, Field


class Cardinal(IntEnum):
    """Cardinal neighbor directions, in autotile pattern order."""

    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3


# Coordinate system: +X is right, +Y is up (world space, y grows upward)
CARDINAL_DELTAS: dict[Cardinal, tuple[int, int]] = {
    Cardinal.TOP: (0, 1),
    Cardinal.RIGHT: (1, 0),
    Cardinal.BOTTOM: (0, -1),
    Cardinal.LEFT: (-1, 0),
}


class GridCoordinate(NamedTuple):
    """Cell address in the unbounded logical grid."""

    x: int
    y: int

    def offset(self, direction: Cardinal) -> "GridCoordinate":
        """Return the neighboring coordinate in the given direction."""
        dx, dy = CARDINAL_DELTAS[direction]
        return GridCoordinate(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class TileKind(str, Enum):
    """What a placed tile represents."""

    GROUND = "ground"
    MOUNTAIN = "mountain"
    TREE = "tree"
    BONES = "bones"
    HOUSE = "house"

    @property
    def is_feature(self) -> bool:
        """Whether this kind is a feature drawn above the ground layer."""
        return self is not TileKind.GROUND


class Tint(BaseModel, frozen=True):
    """Immutable RGBA color multiplied onto a sprite, channels in [0, 1]."""

    r: float = Field(ge=0.0, le=1.0)
    g: float = Field(ge=0.0, le=1.0)
    b: float = Field(ge=0.0, le=1.0)
    a: float = Field(default=1.0, ge=0.0, le=1.0)

    @classmethod
    def rgb(cls, r: float, g: float, b: float) -> "Tint":
        """Create an opaque tint."""
        return cls(r=r, g=g, b=b)

    def as_rgb8(self) -> tuple[int, int, int]:
        """Return the color as 8-bit RGB channels."""
        return (
            round(self.r * 255),
            round(self.g * 255),
            round(self.b * 255),
        )


class TilePlacement(BaseModel, frozen=True):
    """A single tile to draw: where, which sprite, what color, which layer."""

    position: GridCoordinate
    variant: int = Field(ge=0, description="Sprite-sheet index")
    tint: Tint
    layer: int = Field(description="Draw order; higher is drawn on top")
    kind: TileKind

    def key(self) -> tuple[GridCoordinate, int, int]:
        """Identity used for order-independent comparison of placements."""
        return (self.position, self.variant, self.layer)
