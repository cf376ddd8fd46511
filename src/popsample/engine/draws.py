"""Uniform draw sources.

A draw source is any zero-argument callable returning a float in [0, 1).
The engine calls it exactly once per sampled element, in draw order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import numpy as np

from .errors import DrawSourceExhausted

UniformSource = Callable[[], float]


def numpy_source(
    seed: int | None = None, *, rng: np.random.Generator | None = None
) -> UniformSource:
    """Adapt a numpy Generator into a one-value-per-call draw source."""
    generator = rng or np.random.default_rng(seed)

    def draw() -> float:
        return float(generator.random())

    return draw


class SequenceSource:
    """Replay a fixed sequence of uniform draws."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = [float(value) for value in values]
        for value in self._values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Draws must lie in [0, 1), got {value}.")
        self.consumed = 0

    def __call__(self) -> float:
        if self.consumed >= len(self._values):
            raise DrawSourceExhausted(
                f"Draw sequence exhausted after {self.consumed} values."
            )
        value = self._values[self.consumed]
        self.consumed += 1
        return value

    @property
    def remaining(self) -> int:
        return len(self._values) - self.consumed


class CountingSource:
    """Wrap a draw source and count how many values were taken from it."""

    def __init__(self, source: UniformSource) -> None:
        self._source = source
        self.consumed = 0

    def __call__(self) -> float:
        value = self._source()
        self.consumed += 1
        return value
