"""
Seeded real distributions.

Each distribution owns a ``numpy.random.RandomState`` (Mersenne Twister) and
draws sample sequences from it. Passing an int seed builds a dedicated
generator; passing an existing ``RandomState`` shares it.

The factory helpers `uniform` and `normal` mirror how callers typically
build a distribution next to the weights that consume it:

    dist = uniform(123, -0.5, 0.5)
    w = init_weights((784, 10), WeightInit.DISTRIBUTION_SAMPLED, dist)
"""

from __future__ import annotations

from typing import Union

import numpy as np

RandomStateLike = Union[np.random.RandomState, int, None]


def _as_random_state(rng: RandomStateLike) -> np.random.RandomState:
    if isinstance(rng, np.random.RandomState):
        return rng
    return np.random.RandomState(rng)


class UniformRealDistribution:
    """
    Continuous uniform distribution on ``[low, high]``.

    Parameters
    ----------
    rng:
        Generator or seed.
    low, high:
        Support bounds; `low` must be strictly less than `high`.
    """

    def __init__(self, rng: RandomStateLike, low: float, high: float) -> None:
        if not low < high:
            raise ValueError(
                f"Lower bound must be below upper bound, got [{low}, {high}]"
            )
        self._rng = _as_random_state(rng)
        self.low = float(low)
        self.high = float(high)

    def sample(self, count: int) -> np.ndarray:
        return self._rng.uniform(self.low, self.high, size=int(count))

    def __repr__(self) -> str:
        return f"UniformRealDistribution(low={self.low}, high={self.high})"


class NormalDistribution:
    """
    Gaussian distribution with the given mean and standard deviation.

    Parameters
    ----------
    rng:
        Generator or seed.
    mean:
        Distribution mean.
    std:
        Standard deviation; must be positive.
    """

    def __init__(self, rng: RandomStateLike, mean: float = 0.0, std: float = 1.0):
        if not std > 0:
            raise ValueError(f"Standard deviation must be positive, got {std}")
        self._rng = _as_random_state(rng)
        self.mean = float(mean)
        self.std = float(std)

    def sample(self, count: int) -> np.ndarray:
        return self._rng.normal(self.mean, self.std, size=int(count))

    def __repr__(self) -> str:
        return f"NormalDistribution(mean={self.mean}, std={self.std})"


def uniform(rng: RandomStateLike, low: float, high: float) -> UniformRealDistribution:
    """Build a uniform distribution on ``[low, high]``."""
    return UniformRealDistribution(rng, low, high)


def normal(
    rng: RandomStateLike, mean: float = 0.0, std: float = 1.0
) -> NormalDistribution:
    """Build a normal distribution."""
    return NormalDistribution(rng, mean, std)
