"""Equal-probability sampling from 1..N."""

from __future__ import annotations

import numpy as np

from ..draws import UniformSource


def scaled_index(length: int, draw: float) -> int:
    """Map a uniform draw onto 0..length-1 as ``floor(length * draw)``."""
    # length * draw can round up to length in double precision
    return min(int(length * draw), length - 1)


class UniformSampler:
    """Draw K members of {1..N} with equal probability.

    Without replacement the active array is swap-removed: the drawn slot is
    refilled from the end of the active region. Populations larger than
    ``dense_limit`` keep only the refilled slots in a dict, which replays
    the same sequence without allocating N integers.
    """

    def __init__(self, dense_limit: int = 10_000_000) -> None:
        if dense_limit <= 0:
            raise ValueError("dense_limit must be > 0.")
        self.dense_limit = dense_limit

    def sample_replace(self, population: int, size: int, source: UniformSource) -> list[int]:
        return [scaled_index(population, source()) + 1 for _ in range(size)]

    def sample_no_replace(self, population: int, size: int, source: UniformSource) -> list[int]:
        if size > population:
            raise ValueError("size must be <= population without replacement.")
        if population > self.dense_limit or size < 2:
            return self._sample_sparse(population, size, source)
        return self._sample_dense(population, size, source)

    @staticmethod
    def _sample_dense(population: int, size: int, source: UniformSource) -> list[int]:
        active = np.arange(1, population + 1, dtype=np.int64)
        remaining = population
        result: list[int] = []
        for _ in range(size):
            j = scaled_index(remaining, source())
            result.append(int(active[j]))
            remaining -= 1
            active[j] = active[remaining]
        return result

    @staticmethod
    def _sample_sparse(population: int, size: int, source: UniformSource) -> list[int]:
        moved: dict[int, int] = {}
        remaining = population
        result: list[int] = []
        for _ in range(size):
            j = scaled_index(remaining, source())
            result.append(moved.get(j, j + 1))
            remaining -= 1
            moved[j] = moved.pop(remaining, remaining + 1)
        return result
