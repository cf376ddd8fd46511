"""Walker alias tables for weighted sampling with replacement."""

from __future__ import annotations

import numpy as np

from ..draws import UniformSource


class AliasTable:
    """O(1)-per-draw sampler over normalized weights in their original order.

    Indices are partitioned into a small region filled from the front
    (``q < 1``) and a large region filled from the back. Each small slot
    borrows its deficit from the current large slot; a large slot that
    drops below one joins the small side by advancing the boundary. After
    pairing, ``threshold[k]`` holds ``q[k] + k`` so one scaled draw picks
    both the column and the side.
    """

    def __init__(self, probabilities: np.ndarray) -> None:
        size = len(probabilities)
        if size == 0:
            raise ValueError("probabilities cannot be empty.")

        scaled = np.array(probabilities, dtype=np.float64) * size
        slots = np.empty(size, dtype=np.int64)
        small_end = -1
        large_start = size
        for index in range(size):
            if scaled[index] < 1.0:
                small_end += 1
                slots[small_end] = index
            else:
                large_start -= 1
                slots[large_start] = index

        alias = np.zeros(size, dtype=np.int64)
        if small_end >= 0 and large_start < size:
            for k in range(size - 1):
                small = slots[k]
                large = slots[large_start]
                alias[small] = large
                scaled[large] += scaled[small] - 1.0
                if scaled[large] < 1.0:
                    large_start += 1
                if large_start >= size:
                    break

        scaled += np.arange(size, dtype=np.float64)
        self.size = size
        self.threshold = scaled
        self.alias = alias

    def draw(self, source: UniformSource) -> int:
        """Return one 1-based index, consuming exactly one draw."""
        scaled_draw = source() * self.size
        column = min(int(scaled_draw), self.size - 1)
        if scaled_draw < self.threshold[column]:
            return column + 1
        return int(self.alias[column]) + 1

    def sample(self, size: int, source: UniformSource) -> list[int]:
        return [self.draw(source) for _ in range(size)]
