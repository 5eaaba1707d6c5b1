"""
Reseedable uniform random source.

Two instances are used side by side: one seeded per tree for the parameter
table, and one left unseeded for per-draw cosmetic jitter (stroke widths,
ground texture, fresh seeds). They never share state.
"""

from typing import Optional
import numpy as np


class RandomSource:
    __slots__ = ('_seed', '_rng')

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def reseed(self, seed: Optional[int]):
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self, low: float, high: float) -> float:
        return float(self._rng.uniform(low, high))

    def uniform_int(self, low: int, high: int) -> int:
        """Integer drawn as floor(U(low, high)), so `high` itself is never returned."""
        return int(np.floor(self._rng.uniform(low, high)))

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed})"
