"""Caller-held world state with destructive regeneration."""

import structlog

from .terrain.config import GenerationConfig
from .terrain.noise import NoiseField, random_seed
from .terrain.synthesizer import GenerationResult, generate_terrain
from .types import GridCoordinate, TilePlacement

logger = structlog.get_logger()


class TileWorld:
    """The current generated world and the settings that produced it.

    Holds one placement list at a time. Regenerating discards it and runs
    a full new pass; nothing is carried over between runs.
    """

    def __init__(self, config: GenerationConfig | None = None):
        self.config = config if config is not None else GenerationConfig()
        self._result: GenerationResult | None = None

    @property
    def generated(self) -> bool:
        """Whether a world has been generated."""
        return self._result is not None

    @property
    def result(self) -> GenerationResult:
        """The current generation result.

        Raises:
            RuntimeError: If no world has been generated yet.
        """
        if self._result is None:
            raise RuntimeError("World has not been generated")
        return self._result

    @property
    def placements(self) -> list[TilePlacement]:
        """Current placements, empty before the first generation."""
        if self._result is None:
            return []
        return self._result.placements

    @property
    def seed(self) -> int | None:
        """Noise seed of the current world."""
        return self._result.seed if self._result is not None else None

    def generate(self) -> GenerationResult:
        """Generate from the configured seeds, replacing any current world."""
        self.clear()
        self._result = generate_terrain(self.config)
        logger.info(
            "world_generated",
            cols=self.config.cols,
            rows=self.config.rows,
            seed=self._result.seed,
            choice_seed=self._result.choice_seed,
            tiles=len(self._result.placements),
        )
        return self._result

    def regenerate(
        self,
        seed: int | None = None,
        choice_seed: int | None = None,
    ) -> GenerationResult:
        """Discard the current world and generate a new one.

        Args:
            seed: Noise seed for the new world. Drawn fresh if None.
            choice_seed: Feature choice seed. Derived from the noise seed
                if None.

        Returns:
            The new GenerationResult.
        """
        previous = self.seed
        self.config = self.config.model_copy(
            update={
                "seed": seed if seed is not None else random_seed(),
                "choice_seed": choice_seed,
            }
        )
        result = self.generate()
        logger.info("world_regenerated", previous_seed=previous, seed=result.seed)
        return result

    def clear(self) -> None:
        """Drop the current placements."""
        if self._result is not None:
            logger.debug("world_cleared", tiles=len(self._result.placements))
        self._result = None

    def noise_field(self) -> NoiseField:
        """Noise field of the current world."""
        return NoiseField(self.result.seed, scale=self.config.thresholds.noise_scale)

    def placements_at(self, x: int, y: int) -> list[TilePlacement]:
        """All placements on a cell, lowest layer first."""
        position = GridCoordinate(x, y)
        return sorted(
            (p for p in self.placements if p.position == position),
            key=lambda p: p.layer,
        )
