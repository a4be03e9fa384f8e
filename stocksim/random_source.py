"""
Seeded source of standard normal draws.

Every simulation run owns exactly one RandomSource. Two sources built from the
same seed produce the same sequence of draws, which is what makes paths and
prices reproducible.
"""

from typing import Optional, Tuple, Union

import numpy as np

from .errors import InvalidParameterError


class RandomSource:
    """Standard normal generator backed by ``numpy.random.Generator``."""

    def __init__(self, generator: np.random.Generator, seed: Optional[int] = None):
        self._generator = generator
        self.seed = seed

    @classmethod
    def from_seed(cls, seed: int) -> "RandomSource":
        """Deterministic source: same seed, same draws."""
        if seed < 0:
            raise InvalidParameterError(f"Seed must be non-negative. Got {seed}")
        return cls(np.random.default_rng(seed), seed=seed)

    @classmethod
    def from_entropy(cls) -> "RandomSource":
        """Non-deterministic source seeded from OS entropy."""
        return cls(np.random.default_rng())

    @classmethod
    def create(cls, seed: Optional[int] = None) -> "RandomSource":
        """Seeded source if a seed is given, otherwise an entropy-seeded one."""
        if seed is None:
            return cls.from_entropy()
        return cls.from_seed(seed)

    def next_standard_normal(self) -> float:
        return float(self._generator.standard_normal())

    def standard_normal(self, shape: Union[int, Tuple[int, ...]]) -> np.ndarray:
        """
        Draw an array of standard normals.

        The array is filled in C order, so for a ``(n_paths, n_steps)`` shape
        row ``i`` holds the draws consumed after those of row ``i - 1``.
        """
        return self._generator.standard_normal(shape)
