"""Coherent noise field sampled over the tile grid.

Wraps OpenSimplex gradient noise. Grid coordinates are divided by a
spatial scale before sampling, so larger scales give smoother terrain
with larger features.
"""

import math

import numpy as np
from numpy.typing import NDArray
from opensimplex import OpenSimplex

# Upper bound (exclusive) for generated seeds
SEED_LIMIT = 2**63

DEFAULT_NOISE_SCALE = 10.5


def random_seed(rng: np.random.Generator | None = None) -> int:
    """Draw a fresh seed from the process random source.

    Args:
        rng: Optional generator to draw from. Defaults to a freshly
            OS-seeded generator.

    Returns:
        Non-negative integer seed below SEED_LIMIT.
    """
    if rng is None:
        rng = np.random.default_rng()
    return int(rng.integers(SEED_LIMIT))


class NoiseField:
    """Deterministic 2D noise field for one generation run.

    Queries are stateless: the same (x, y) always returns the same value
    for a given seed and scale.
    """

    def __init__(self, seed: int, scale: float = DEFAULT_NOISE_SCALE):
        if not (math.isfinite(scale) and scale > 0):
            raise ValueError(f"Noise scale must be positive and finite, got {scale}")
        self.seed = seed
        self.scale = scale
        self._simplex = OpenSimplex(seed=seed)

    def sample(self, x: int, y: int) -> float:
        """Sample the field at a grid coordinate.

        Returns:
            Noise value in roughly [-1, 1].
        """
        return self._simplex.noise2(x / self.scale, y / self.scale)

    def sample_grid(self, cols: int, rows: int) -> NDArray[np.float64]:
        """Sample every cell of the [0, cols) x [0, rows) rectangle at once.

        Returns:
            Array of shape (cols, rows) where grid[x, y] == sample(x, y).
        """
        if cols == 0 or rows == 0:
            return np.zeros((cols, rows), dtype=np.float64)
        xs = np.arange(cols, dtype=np.float64) / self.scale
        ys = np.arange(rows, dtype=np.float64) / self.scale
        # noise2array returns shape (len(ys), len(xs))
        return self._simplex.noise2array(xs, ys).T

    def __repr__(self) -> str:
        return f"NoiseField(seed={self.seed}, scale={self.scale})"
