"""Weighted sampling over heap-sorted normalized probabilities."""

from __future__ import annotations

import logging

import numpy as np

from ..draws import UniformSource
from ..errors import UnsupportedLargeWeightedSampling
from ..weights import ProbabilityNormalizer, heap_sort
from .alias import AliasTable

logger = logging.getLogger(__name__)


def sorted_probabilities(weights: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Normalize weights and heap-sort them ascending with their 1-based indices."""
    probabilities = ProbabilityNormalizer.normalize(weights)
    indices = np.arange(1, len(probabilities) + 1, dtype=np.int64)
    heap_sort(probabilities, indices)
    return probabilities, indices


class WeightedReplaceSampler:
    """Cumulative-distribution sampling with replacement.

    When more than ``alias_heavy_limit`` elements satisfy
    ``N * p > heavy_weight_threshold`` the linear scan is replaced by a
    Walker alias table, or refused when ``alias_method`` is off.
    """

    def __init__(
        self,
        heavy_weight_threshold: float = 0.1,
        alias_heavy_limit: int = 200,
        alias_method: bool = False,
    ) -> None:
        if heavy_weight_threshold < 0:
            raise ValueError("heavy_weight_threshold must be >= 0.")
        if alias_heavy_limit < 0:
            raise ValueError("alias_heavy_limit must be >= 0.")

        self.heavy_weight_threshold = float(heavy_weight_threshold)
        self.alias_heavy_limit = alias_heavy_limit
        self.alias_method = alias_method

    def heavy_count(self, probabilities: np.ndarray) -> int:
        """Count elements whose expected share of N draws exceeds the threshold."""
        population = len(probabilities)
        return int(np.count_nonzero(population * probabilities > self.heavy_weight_threshold))

    def sample(self, weights: np.ndarray, size: int, source: UniformSource) -> list[int]:
        probabilities = ProbabilityNormalizer.normalize(weights)
        heavy = self.heavy_count(probabilities)
        if heavy > self.alias_heavy_limit:
            if not self.alias_method:
                raise UnsupportedLargeWeightedSampling(
                    f"{heavy} heavy weights exceed the cumulative-sampling limit of "
                    f"{self.alias_heavy_limit} and the alias method is disabled."
                )
            logger.debug("Using alias table for %d heavy elements.", heavy)
            return AliasTable(probabilities).sample(size, source)

        indices = np.arange(1, len(probabilities) + 1, dtype=np.int64)
        heap_sort(probabilities, indices)
        cumulative = np.cumsum(probabilities, out=probabilities)

        last = len(cumulative) - 1
        scan = cumulative[:last]
        result: list[int] = []
        for _ in range(size):
            # first j in 0..n-2 with draw <= cumulative[j], else n-1
            j = int(np.searchsorted(scan, source(), side="left"))
            result.append(int(indices[j]))
        return result


class WeightedNoReplaceSampler:
    """Sequential removal sampling without replacement.

    Each draw scans the running mass of the surviving sorted weights, then
    closes the gap left by the chosen slot so survivors stay contiguous and
    in sorted order.
    """

    def sample(self, weights: np.ndarray, size: int, source: UniformSource) -> list[int]:
        probabilities, indices = sorted_probabilities(weights)
        if size > len(probabilities):
            raise ValueError("size must be <= population without replacement.")

        total_mass = 1.0
        active = len(probabilities)
        result: list[int] = []
        for _ in range(size):
            target = total_mass * source()
            mass = np.cumsum(probabilities[: active - 1])
            j = int(np.searchsorted(mass, target, side="left"))

            result.append(int(indices[j]))
            total_mass -= float(probabilities[j])
            probabilities[j : active - 1] = probabilities[j + 1 : active]
            indices[j : active - 1] = indices[j + 1 : active]
            active -= 1
        return result
