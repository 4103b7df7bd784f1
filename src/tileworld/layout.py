"""Sprite-sheet layout and grid-to-world placement for renderers."""

from pydantic import BaseModel, Field

from .types import TilePlacement


class SpriteSheetLayout(BaseModel, frozen=True):
    """Geometry of the tile sprite sheet and how it is scaled on screen."""

    tile_width: int = Field(default=6, gt=0, description="Sprite width in pixels")
    tile_height: int = Field(default=8, gt=0, description="Sprite height in pixels")
    columns: int = Field(default=6, gt=0, description="Sprites per sheet row")
    rows: int = Field(default=5, gt=0, description="Sprite rows on the sheet")
    scale_factor: int = Field(default=5, gt=0, description="On-screen magnification")

    @property
    def sprite_count(self) -> int:
        """Number of sprites on the sheet."""
        return self.columns * self.rows

    def region(self, variant: int) -> tuple[int, int, int, int]:
        """Pixel box (left, top, right, bottom) of a variant on the sheet.

        Sprites are numbered row-major from the top-left corner.

        Raises:
            ValueError: If the variant is not on the sheet.
        """
        if not 0 <= variant < self.sprite_count:
            raise ValueError(
                f"Variant {variant} is not on a {self.columns}x{self.rows} sheet"
            )
        row, col = divmod(variant, self.columns)
        left = col * self.tile_width
        top = row * self.tile_height
        return (left, top, left + self.tile_width, top + self.tile_height)

    def grid_to_world(self, x: int, y: int) -> tuple[float, float]:
        """World-space position of a grid cell."""
        return (
            float(x * self.tile_width * self.scale_factor),
            float(y * self.tile_height * self.scale_factor),
        )

    def world_size(self, cols: int, rows: int) -> tuple[int, int]:
        """World-space extent of a cols x rows grid."""
        return (
            cols * self.tile_width * self.scale_factor,
            rows * self.tile_height * self.scale_factor,
        )


def draw_order(placements: list[TilePlacement]) -> list[TilePlacement]:
    """Placements sorted so lower layers come first.

    The sort is stable, so tiles on the same layer keep their order.
    """
    return sorted(placements, key=lambda p: p.layer)
