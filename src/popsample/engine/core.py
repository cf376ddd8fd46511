"""Sampling engine: validate, classify, dispatch."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, TypeVar

import numpy as np

from ..config.schema import SamplerConfig
from .draws import UniformSource, numpy_source
from .sampler import UniformSampler, WeightedNoReplaceSampler, WeightedReplaceSampler
from .validation import ArgumentValidator, SampleRequest, SamplingMode

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SamplingEngine:
    """Draw ordered samples of 1..N from a uniform draw source.

    The engine holds configuration and an optional default source only;
    every working buffer is created inside a single call. A validation
    failure is raised before the source is called.
    """

    def __init__(
        self,
        config: SamplerConfig | None = None,
        source: UniformSource | None = None,
    ) -> None:
        self.config = config or SamplerConfig()
        self.source = source or numpy_source(self.config.seed)
        self.validator = ArgumentValidator(self.config)

        self._uniform = UniformSampler(dense_limit=self.config.dense_permutation_limit)
        self._weighted_replace = WeightedReplaceSampler(
            heavy_weight_threshold=self.config.heavy_weight_threshold,
            alias_heavy_limit=self.config.alias_heavy_limit,
            alias_method=self.config.alias_method,
        )
        self._weighted_no_replace = WeightedNoReplaceSampler()

    def sample(
        self,
        population: Any,
        size: Any,
        replace: Any = False,
        prob: Any = None,
        *,
        source: UniformSource | None = None,
    ) -> list[int]:
        """Return ``size`` members of 1..``population`` in draw order."""
        request = self.validator.validate(population, size, replace, prob)
        return self.run(request, source=source)

    def sample_array(
        self,
        population: Any,
        size: Any,
        replace: Any = False,
        prob: Any = None,
        *,
        source: UniformSource | None = None,
    ) -> np.ndarray:
        """Sample and return the result as an int64 ndarray."""
        sampled = self.sample(population, size, replace, prob, source=source)
        return np.array(sampled, dtype=np.int64)

    def choice(
        self,
        values: Sequence[T],
        size: Any,
        replace: Any = False,
        prob: Any = None,
        *,
        source: UniformSource | None = None,
    ) -> list[T]:
        """Sample elements of ``values`` by position."""
        positions = self.sample(len(values), size, replace, prob, source=source)
        return [values[position - 1] for position in positions]

    def run(self, request: SampleRequest, *, source: UniformSource | None = None) -> list[int]:
        """Dispatch an already validated request to its sampler."""
        draw = source or self.source
        logger.debug(
            "Sampling %d of %d (%s)", request.size, request.population, request.mode.value
        )
        mode = request.mode
        if mode is SamplingMode.UNWEIGHTED_REPLACE:
            return self._uniform.sample_replace(request.population, request.size, draw)
        if mode is SamplingMode.UNWEIGHTED_NO_REPLACE:
            return self._uniform.sample_no_replace(request.population, request.size, draw)
        if mode is SamplingMode.WEIGHTED_REPLACE:
            return self._weighted_replace.sample(request.prob, request.size, draw)
        if mode is SamplingMode.WEIGHTED_NO_REPLACE:
            return self._weighted_no_replace.sample(request.prob, request.size, draw)
        raise ValueError(f"Unknown sampling mode: {mode!r}")


def sample_int(
    population: Any,
    size: Any,
    replace: Any = False,
    prob: Any = None,
    *,
    source: UniformSource | None = None,
    config: SamplerConfig | None = None,
) -> list[int]:
    """One-shot sampling with a fresh engine."""
    return SamplingEngine(config=config, source=source).sample(population, size, replace, prob)
