"""Shared test fixtures for tile world tests."""

from collections.abc import Callable, Sequence

import pytest

from tileworld.terrain.config import StyleConfig, ThresholdConfig
from tileworld.types import GridCoordinate


class FunctionField:
    """Noise sampler backed by a plain function, recording every query."""

    def __init__(self, fn: Callable[[int, int], float]):
        self.fn = fn
        self.calls: list[tuple[int, int]] = []

    def sample(self, x: int, y: int) -> float:
        self.calls.append((x, y))
        return self.fn(x, y)


class ScriptedRng:
    """Stand-in for numpy's Generator returning scripted values.

    random() pops from the given values; choice() always picks the first
    option so variant picks are predictable.
    """

    def __init__(self, values: Sequence[float] = ()):
        self.values = list(values)

    def random(self) -> float:
        return self.values.pop(0)

    def choice(self, options: Sequence[int]) -> int:
        return options[0]


@pytest.fixture
def thresholds() -> ThresholdConfig:
    """Default threshold configuration."""
    return ThresholdConfig()


@pytest.fixture
def style() -> StyleConfig:
    """Default palette."""
    return StyleConfig()


@pytest.fixture
def l_shape() -> frozenset[GridCoordinate]:
    """Three occupied cells forming an L with its corner at the origin.

        (0,1)
        (0,0) (1,0)
    """
    return frozenset({
        GridCoordinate(0, 0),
        GridCoordinate(0, 1),
        GridCoordinate(1, 0),
    })


@pytest.fixture
def block_3x3() -> frozenset[GridCoordinate]:
    """Solid 3x3 block of occupied cells anchored at the origin."""
    return frozenset(GridCoordinate(x, y) for x in range(3) for y in range(3))


@pytest.fixture
def make_field() -> type[FunctionField]:
    """Factory for noise samplers backed by a function."""
    return FunctionField


@pytest.fixture
def make_rng() -> type[ScriptedRng]:
    """Factory for scripted random sources."""
    return ScriptedRng
