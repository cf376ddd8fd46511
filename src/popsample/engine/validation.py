"""Argument validation and request classification."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import numpy as np

from ..config.schema import SamplerConfig
from .errors import (
    IncorrectProbabilityLength,
    InvalidFirstArgument,
    InvalidReplaceArgument,
    InvalidSizeArgument,
    NaInProbabilityVector,
    NegativeProbability,
    SampleLargerThanPopulation,
    TooFewPositiveProbability,
)


class SamplingMode(Enum):
    """The four algorithm families a validated request can select."""

    UNWEIGHTED_REPLACE = "unweighted_replace"
    UNWEIGHTED_NO_REPLACE = "unweighted_no_replace"
    WEIGHTED_REPLACE = "weighted_replace"
    WEIGHTED_NO_REPLACE = "weighted_no_replace"

    @classmethod
    def classify(cls, *, weighted: bool, replace: bool) -> SamplingMode:
        if weighted:
            return cls.WEIGHTED_REPLACE if replace else cls.WEIGHTED_NO_REPLACE
        return cls.UNWEIGHTED_REPLACE if replace else cls.UNWEIGHTED_NO_REPLACE


@dataclass(frozen=True)
class SampleRequest:
    """Arguments that passed validation, ready for a sampler.

    ``prob`` is a private float64 copy of the caller's weights, not yet
    normalized. It is ``None`` for unweighted requests.
    """

    population: int
    size: int
    replace: bool
    mode: SamplingMode
    prob: np.ndarray | None = field(default=None, compare=False)
    positive_count: int = 0


class ArgumentValidator:
    """Check sampling arguments in a fixed precedence order.

    The first failing check is raised. Validation only reads its inputs, so
    a rejected call never touches the draw source.
    """

    def __init__(self, config: SamplerConfig | None = None) -> None:
        self.config = config or SamplerConfig()

    def validate(
        self,
        population: Any,
        size: Any,
        replace: Any = False,
        prob: Any = None,
    ) -> SampleRequest:
        n = self._check_population(population)
        if prob is None and n == 0 and _is_positive(size):
            raise InvalidFirstArgument("Cannot take a positive-size sample from an empty population.")

        k = self._check_size(size)
        if not isinstance(replace, (bool, np.bool_)):
            raise InvalidReplaceArgument(f"Invalid 'replace' argument: {replace!r}")
        replace = bool(replace)

        if prob is None:
            if not replace and k > n:
                raise SampleLargerThanPopulation(
                    f"Cannot take a sample of size {k} larger than the population {n} without replacement."
                )
            return SampleRequest(
                population=n,
                size=k,
                replace=replace,
                mode=SamplingMode.classify(weighted=False, replace=replace),
            )

        weights = self._check_weights(prob, n)
        positive_count = int(np.count_nonzero(weights > 0))
        if positive_count == 0 or (not replace and k > positive_count):
            raise TooFewPositiveProbability(
                f"Too few positive probabilities: {positive_count} for a sample of size {k}."
            )

        return SampleRequest(
            population=n,
            size=k,
            replace=replace,
            mode=SamplingMode.classify(weighted=True, replace=replace),
            prob=weights,
            positive_count=positive_count,
        )

    def _check_population(self, population: Any) -> int:
        if not isinstance(population, numbers.Real):
            raise InvalidFirstArgument(f"Invalid first argument: {population!r}")

        if isinstance(population, numbers.Integral):
            value = int(population)
            if value < 0 or value > self.config.population_cap:
                raise InvalidFirstArgument(f"Invalid first argument: {value}")
            return value

        as_float = float(population)
        if not math.isfinite(as_float) or as_float < 0 or as_float > self.config.population_cap:
            raise InvalidFirstArgument(f"Invalid first argument: {population!r}")
        return int(as_float)

    @staticmethod
    def _check_size(size: Any) -> int:
        if size is None or not isinstance(size, numbers.Real):
            raise InvalidSizeArgument(f"Invalid 'size' argument: {size!r}")

        if isinstance(size, numbers.Integral):
            value = int(size)
        else:
            as_float = float(size)
            if not math.isfinite(as_float):
                raise InvalidSizeArgument(f"Invalid 'size' argument: {size!r}")
            value = int(as_float)

        if value < 0:
            raise InvalidSizeArgument(f"Invalid 'size' argument: {size!r}")
        return value

    @staticmethod
    def _check_weights(prob: Any, population: int) -> np.ndarray:
        try:
            weights = np.array(prob, dtype=np.float64).ravel()
        except (TypeError, ValueError) as exc:
            raise NaInProbabilityVector("NA in probability vector.") from exc

        if weights.size != population:
            raise IncorrectProbabilityLength(
                f"Incorrect number of probabilities: got {weights.size}, expected {population}."
            )

        # Element order decides which failure is reported.
        bad = ~np.isfinite(weights) | (weights < 0)
        if bad.any():
            first = int(np.argmax(bad))
            if not math.isfinite(weights[first]):
                raise NaInProbabilityVector(f"NA in probability vector at position {first + 1}.")
            raise NegativeProbability(f"Negative probability at position {first + 1}.")
        return weights


def _is_positive(size: Any) -> bool:
    if isinstance(size, numbers.Integral):
        return int(size) > 0
    if isinstance(size, numbers.Real):
        return float(size) > 0
    return False
