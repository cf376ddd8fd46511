"""Sampling algorithms selected by request shape."""

from .alias import AliasTable
from .uniform import UniformSampler
from .weighted import WeightedNoReplaceSampler, WeightedReplaceSampler

__all__ = [
    "AliasTable",
    "UniformSampler",
    "WeightedNoReplaceSampler",
    "WeightedReplaceSampler",
]
