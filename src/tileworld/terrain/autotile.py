"""Autotiling: pick a ground variant from a cell's cardinal neighbors."""

from collections.abc import Collection
from typing import NamedTuple

from .. import tiles
from ..types import Cardinal, GridCoordinate


class NeighborPattern(NamedTuple):
    """Which cardinal neighbors of a cell are occupied, as 0/1 flags."""

    top: int
    right: int
    bottom: int
    left: int

    @property
    def count(self) -> int:
        """Number of occupied neighbors."""
        return sum(self)


# Only four corner shapes are distinguished; every other pattern,
# including fully surrounded cells, falls back to GROUND_FILL.
AUTOTILE_TABLE: dict[NeighborPattern, int] = {
    NeighborPattern(0, 1, 1, 0): tiles.GROUND_CORNER_A,
    NeighborPattern(0, 0, 1, 1): tiles.GROUND_CORNER_B,
    NeighborPattern(1, 1, 0, 0): tiles.GROUND_CORNER_C,
    NeighborPattern(1, 0, 0, 1): tiles.GROUND_CORNER_D,
}


def neighbor_pattern(
    position: tuple[int, int],
    occupied: Collection[tuple[int, int]],
) -> NeighborPattern:
    """Compute the occupancy pattern of a cell's four cardinal neighbors.

    Args:
        position: Cell to inspect. The cell itself need not be occupied.
        occupied: Set of occupied coordinates.

    Returns:
        NeighborPattern in (top, right, bottom, left) order.
    """
    cell = GridCoordinate(*position)
    flags = [int(cell.offset(direction) in occupied) for direction in Cardinal]
    return NeighborPattern(*flags)


def variant_for(pattern: NeighborPattern) -> int:
    """Look up the ground variant for a neighbor pattern."""
    return AUTOTILE_TABLE.get(pattern, tiles.GROUND_FILL)


def get_tile(
    position: tuple[int, int],
    occupied: Collection[tuple[int, int]],
) -> tuple[int, int]:
    """Return (ground variant, occupied neighbor count) for a cell."""
    pattern = neighbor_pattern(position, occupied)
    return variant_for(pattern), pattern.count
