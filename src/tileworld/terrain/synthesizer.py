"""Terrain synthesis: classify noise into features, then autotile ground."""

import logging
from collections import Counter
from typing import Protocol

import numpy as np

from .. import tiles
from ..types import GridCoordinate, TileKind, TilePlacement
from .autotile import get_tile
from .config import GenerationConfig, StyleConfig, ThresholdConfig
from .noise import NoiseField, random_seed

logger = logging.getLogger(__name__)

# Offset deriving the choice seed from the noise seed when only the latter is pinned
CHOICE_SEED_OFFSET = 100


class NoiseSampler(Protocol):
    """Anything that maps a grid coordinate to a noise value."""

    def sample(self, x: int, y: int) -> float: ...


class GenerationResult:
    """Result of one generation run with the data needed to check it."""

    def __init__(
        self,
        placements: list[TilePlacement],
        occupied: frozenset[GridCoordinate],
        cols: int,
        rows: int,
        seed: int,
        choice_seed: int,
    ):
        self.placements = placements
        self.occupied = occupied
        self.cols = cols
        self.rows = rows
        self.seed = seed
        self.choice_seed = choice_seed

    def counts(self) -> Counter[TileKind]:
        """Number of placements per tile kind."""
        return Counter(p.kind for p in self.placements)


def classify_cell(
    position: GridCoordinate,
    noise_value: float,
    choice: float,
    rng: np.random.Generator,
    thresholds: ThresholdConfig,
    style: StyleConfig,
) -> tuple[bool, list[TilePlacement]]:
    """Apply the threshold bands to a single cell.

    Bands are evaluated independently, so one cell may emit several
    features. Variant picks inside a band draw from rng.

    Args:
        position: Cell being classified.
        noise_value: Noise field value at the cell.
        choice: Per-cell uniform draw in [0, 1) deciding feature presence.
        rng: Source for variant picks.
        thresholds: Band configuration.
        style: Tint palette.

    Returns:
        Tuple of (cell is solid ground, feature placements).
    """
    density = thresholds.density
    features: list[TilePlacement] = []

    def feature(variant: int, kind: TileKind) -> None:
        features.append(
            TilePlacement(
                position=position,
                variant=variant,
                tint=getattr(style, kind.value),
                layer=tiles.FEATURE_LAYER,
                kind=kind,
            )
        )

    is_ground = noise_value > thresholds.ground_threshold

    if thresholds.mountain_range.contains(noise_value):
        feature(tiles.MOUNTAIN, TileKind.MOUNTAIN)

    if thresholds.forest_range.contains(noise_value):
        if choice > density.large_tree:
            feature(int(rng.choice(tiles.LARGE_TREES)), TileKind.TREE)
        elif choice > density.small_tree:
            feature(tiles.SMALL_TREE, TileKind.TREE)

    if thresholds.bone_range.contains(noise_value) and choice > density.bones:
        feature(int(rng.choice(tiles.BONES)), TileKind.BONES)

    if noise_value > thresholds.house_threshold and choice > density.house:
        if rng.random() > density.large_house:
            variant = tiles.HOUSE_LARGE
        else:
            variant = tiles.HOUSE_SMALL
        feature(variant, TileKind.HOUSE)

    return is_ground, features


def autotile(
    occupied: frozenset[GridCoordinate] | set[GridCoordinate],
    style: StyleConfig,
) -> list[TilePlacement]:
    """Emit ground tiles for occupied cells with at least two occupied neighbors.

    Cells with zero or one occupied cardinal neighbor are skipped.
    """
    ground: list[TilePlacement] = []
    for position in sorted(occupied):
        variant, neighbor_count = get_tile(position, occupied)
        if neighbor_count <= 1:
            continue
        ground.append(
            TilePlacement(
                position=position,
                variant=variant,
                tint=style.ground,
                layer=tiles.GROUND_LAYER,
                kind=TileKind.GROUND,
            )
        )
    return ground


def synthesize(
    field: NoiseSampler,
    cols: int,
    rows: int,
    rng: np.random.Generator,
    thresholds: ThresholdConfig,
    style: StyleConfig,
) -> tuple[list[TilePlacement], frozenset[GridCoordinate]]:
    """Run both passes over [0, cols) x [0, rows).

    Returns:
        Tuple of (placements, occupied set). Feature tiles come first,
        followed by ground tiles in sorted coordinate order.
    """
    placements: list[TilePlacement] = []
    occupied: set[GridCoordinate] = set()

    for x in range(cols):
        for y in range(rows):
            position = GridCoordinate(x, y)
            noise_value = field.sample(x, y)
            choice = rng.random()
            is_ground, features = classify_cell(
                position, noise_value, choice, rng, thresholds, style
            )
            if is_ground:
                occupied.add(position)
            placements.extend(features)

    logger.debug(f"Classified {cols * rows} cells, {len(occupied)} occupied")

    frozen = frozenset(occupied)
    placements.extend(autotile(frozen, style))
    return placements, frozen


def generate_terrain(
    config: GenerationConfig,
    field: NoiseSampler | None = None,
) -> GenerationResult:
    """Generate a world from configuration.

    Args:
        config: Generation configuration. A missing seed is drawn fresh;
            a missing choice seed is derived from the noise seed.
        field: Optional noise sampler overriding the seeded NoiseField.

    Returns:
        GenerationResult with placements and the occupied set.
    """
    seed = config.seed if config.seed is not None else random_seed()
    choice_seed = (
        config.choice_seed
        if config.choice_seed is not None
        else seed + CHOICE_SEED_OFFSET
    )

    logger.info(
        f"Generating {config.cols}x{config.rows} world "
        f"with seed {seed} (choice seed {choice_seed})"
    )

    if field is None:
        field = NoiseField(seed, scale=config.thresholds.noise_scale)
    rng = np.random.default_rng(choice_seed)

    placements, occupied = synthesize(
        field, config.cols, config.rows, rng, config.thresholds, config.style
    )

    result = GenerationResult(
        placements=placements,
        occupied=occupied,
        cols=config.cols,
        rows=config.rows,
        seed=seed,
        choice_seed=choice_seed,
    )
    _log_generation_stats(result)
    return result


def generate(
    cols: int,
    rows: int,
    seed: int,
    thresholds: ThresholdConfig | None = None,
    *,
    choice_seed: int | None = None,
    style: StyleConfig | None = None,
) -> list[TilePlacement]:
    """Generate the tile placements for a cols x rows world.

    Args:
        cols: Grid width in cells.
        rows: Grid height in cells.
        seed: Noise field seed.
        thresholds: Band configuration; defaults to ThresholdConfig().
        choice_seed: Seed for per-cell feature choices. Derived from seed
            if None, so a pinned seed alone reproduces the whole world.
        style: Tint palette; defaults to StyleConfig().

    Returns:
        Flat list of placements; draw order is given by each layer.

    Raises:
        ConfigurationError: If cols, rows or a seed is negative.
    """
    config = GenerationConfig(
        cols=cols,
        rows=rows,
        seed=seed,
        choice_seed=choice_seed,
        thresholds=thresholds if thresholds is not None else ThresholdConfig(),
        style=style if style is not None else StyleConfig(),
    )
    return generate_terrain(config).placements


def _log_generation_stats(result: GenerationResult) -> None:
    """Log placement statistics."""
    total = result.cols * result.rows
    logger.info(f"Generation stats ({total:,} cells):")
    logger.info(f"  occupied: {len(result.occupied):,}")
    counts = result.counts()
    for kind in TileKind:
        logger.info(f"  {kind.value}: {counts[kind]:,}")
