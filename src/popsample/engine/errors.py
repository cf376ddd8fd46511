"""Error taxonomy for sampling calls."""

from __future__ import annotations


class SamplingError(ValueError):
    """Base class for arguments the engine refuses to sample from."""


class InvalidFirstArgument(SamplingError):
    """Population size is missing, negative, too large, or empty with a positive size."""


class InvalidSizeArgument(SamplingError):
    """Sample size is missing or negative."""


class InvalidReplaceArgument(SamplingError):
    """Replacement flag is not a boolean."""


class SampleLargerThanPopulation(SamplingError):
    """Cannot take a sample larger than the population without replacement."""


class IncorrectProbabilityLength(SamplingError):
    """Weight vector length differs from the population size."""


class NaInProbabilityVector(SamplingError):
    """Weight vector holds a non-finite value."""


class NegativeProbability(SamplingError):
    """Weight vector holds a negative value."""


class TooFewPositiveProbability(SamplingError):
    """Not enough strictly positive weights for the requested sample."""


class UnsupportedLargeWeightedSampling(SamplingError):
    """Too many heavy weights for cumulative sampling with the alias method disabled."""


class DrawSourceExhausted(RuntimeError):
    """A fixed draw sequence ran out of values."""
