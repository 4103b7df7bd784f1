"""Post-generation validation of placement invariants."""

import logging

from .. import tiles
from ..exceptions import PlacementInvariantError
from ..types import TileKind, TilePlacement
from .autotile import get_tile
from .config import ThresholdConfig
from .synthesizer import GenerationResult, NoiseSampler

logger = logging.getLogger(__name__)

_KIND_VARIANTS: dict[TileKind, frozenset[int]] = {
    TileKind.GROUND: tiles.GROUND_VARIANTS,
    TileKind.MOUNTAIN: frozenset({tiles.MOUNTAIN}),
    TileKind.TREE: tiles.TREE_VARIANTS,
    TileKind.BONES: tiles.BONE_VARIANTS,
    TileKind.HOUSE: tiles.HOUSE_VARIANTS,
}


class ValidationResult:
    """Result of placement validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def raise_for_errors(self) -> None:
        """Raise PlacementInvariantError if any check failed."""
        if not self.passed:
            raise PlacementInvariantError(
                f"{len(self.errors)} placement errors; first: {self.errors[0]}"
            )


def validate_placements(
    result: GenerationResult,
    thresholds: ThresholdConfig,
    field: NoiseSampler | None = None,
) -> ValidationResult:
    """Check generated placements against the terrain invariants.

    Args:
        result: Generation output to check.
        thresholds: Band configuration the result was generated with.
        field: Noise sampler used for generation. When given, feature
            tiles are checked against their noise band.

    Returns:
        ValidationResult with any errors.
    """
    validation = ValidationResult()

    for placement in result.placements:
        _check_bounds(placement, result, validation)
        _check_layer(placement, validation)
        _check_variant(placement, validation)
        if placement.kind is TileKind.GROUND:
            _check_ground(placement, result, validation)
        elif field is not None:
            _check_feature_band(placement, field, thresholds, validation)

    if validation.passed:
        logger.info(f"Placement validation passed ({len(result.placements)} tiles)")
    else:
        logger.warning(
            f"Placement validation failed with {len(validation.errors)} errors"
        )
        for error in validation.errors:
            logger.error(f"  - {error}")

    return validation


def _check_bounds(
    placement: TilePlacement,
    result: GenerationResult,
    validation: ValidationResult,
) -> None:
    """Check that a tile lies inside the generated rectangle."""
    x, y = placement.position
    if not (0 <= x < result.cols and 0 <= y < result.rows):
        validation.add_error(
            f"{placement.kind.value} at {placement.position} is out of bounds"
        )


def _check_layer(placement: TilePlacement, validation: ValidationResult) -> None:
    """Check that ground sits below features."""
    if placement.kind.is_feature:
        expected = tiles.FEATURE_LAYER
    else:
        expected = tiles.GROUND_LAYER
    if placement.layer != expected:
        validation.add_error(
            f"{placement.kind.value} at {placement.position} on layer "
            f"{placement.layer}, expected {expected}"
        )


def _check_variant(placement: TilePlacement, validation: ValidationResult) -> None:
    """Check that the sprite belongs to the tile kind."""
    if placement.variant not in _KIND_VARIANTS[placement.kind]:
        validation.add_error(
            f"{placement.kind.value} at {placement.position} has unknown "
            f"variant {placement.variant}"
        )


def _check_ground(
    placement: TilePlacement,
    result: GenerationResult,
    validation: ValidationResult,
) -> None:
    """Check that a ground tile is occupied and has enough neighbors."""
    if placement.position not in result.occupied:
        validation.add_error(f"ground at {placement.position} is not occupied")
        return

    variant, neighbor_count = get_tile(placement.position, result.occupied)
    if neighbor_count <= 1:
        validation.add_error(
            f"ground at {placement.position} has only {neighbor_count} neighbors"
        )
    if variant != placement.variant:
        validation.add_error(
            f"ground at {placement.position} has variant {placement.variant}, "
            f"expected {variant}"
        )


def _check_feature_band(
    placement: TilePlacement,
    field: NoiseSampler,
    thresholds: ThresholdConfig,
    validation: ValidationResult,
) -> None:
    """Check that a feature tile's noise value lies in its band."""
    value = field.sample(*placement.position)
    kind = placement.kind

    if kind is TileKind.MOUNTAIN:
        in_band = thresholds.mountain_range.contains(value)
    elif kind is TileKind.TREE:
        in_band = thresholds.forest_range.contains(value)
    elif kind is TileKind.BONES:
        in_band = thresholds.bone_range.contains(value)
    else:
        in_band = value > thresholds.house_threshold

    if not in_band:
        validation.add_error(
            f"{kind.value} at {placement.position} has noise {value:.3f} "
            "outside its band"
        )
