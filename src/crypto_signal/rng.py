"""Random source abstraction shared by the simulator and the engine."""

from __future__ import annotations

import random
from typing import Protocol


class RandomSource(Protocol):
    """Anything that yields floats uniformly in [0, 1). ``random.Random`` fits."""

    def random(self) -> float: ...


def default_rng() -> RandomSource:
    """Unseeded generator; every call site gets fresh, non-reproducible data."""
    return random.Random()


def uniform(rng: RandomSource, low: float, high: float) -> float:
    """Draw from [low, high) using only ``rng.random()``."""
    return low + (high - low) * rng.random()
