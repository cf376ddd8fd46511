"""Probability normalization utilities."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


class ProbabilityNormalizer:
    """Rescale validated weights so they sum to one."""

    @staticmethod
    def total(weights: Sequence[float] | np.ndarray) -> float:
        """Sum weights left to right in plain double arithmetic.

        ``np.sum`` is pairwise and the builtin ``sum`` compensates on
        Python 3.12+, so neither reproduces reference rounding.
        """
        total = 0.0
        for value in weights:
            total += float(value)
        return total

    @classmethod
    def normalize(cls, weights: Sequence[float] | np.ndarray) -> np.ndarray:
        """Return a new array of ``weights / total``; the input is left untouched."""
        values = np.array(weights, dtype=np.float64)
        if values.size == 0:
            raise ValueError("weights cannot be empty.")

        total = cls.total(values)
        if not total > 0:
            raise ValueError("Sum of weights must be > 0.")

        values /= total
        return values
