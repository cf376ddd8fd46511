"""Sampling engine modules."""

from .core import SamplingEngine, sample_int
from .draws import CountingSource, SequenceSource, UniformSource, numpy_source
from .errors import (
    DrawSourceExhausted,
    IncorrectProbabilityLength,
    InvalidFirstArgument,
    InvalidReplaceArgument,
    InvalidSizeArgument,
    NaInProbabilityVector,
    NegativeProbability,
    SampleLargerThanPopulation,
    SamplingError,
    TooFewPositiveProbability,
    UnsupportedLargeWeightedSampling,
)
from .validation import ArgumentValidator, SampleRequest, SamplingMode

__all__ = [
    "ArgumentValidator",
    "CountingSource",
    "DrawSourceExhausted",
    "IncorrectProbabilityLength",
    "InvalidFirstArgument",
    "InvalidReplaceArgument",
    "InvalidSizeArgument",
    "NaInProbabilityVector",
    "NegativeProbability",
    "SampleLargerThanPopulation",
    "SampleRequest",
    "SamplingEngine",
    "SamplingError",
    "SamplingMode",
    "SequenceSource",
    "TooFewPositiveProbability",
    "UniformSource",
    "UnsupportedLargeWeightedSampling",
    "numpy_source",
    "sample_int",
]
