"""Weight preparation: normalization and heap reordering."""

from .heap import heap_sort
from .normalizer import ProbabilityNormalizer

__all__ = ["ProbabilityNormalizer", "heap_sort"]
