"""In-place heapsort of parallel weight/index arrays.

Equal weights keep a fixed relative order determined by the heap traversal,
and downstream cumulative sampling depends on that order, so the sift-down
comparison sequence must not change.
"""

from __future__ import annotations

import numpy as np


def heap_sort(keys: np.ndarray, values: np.ndarray) -> None:
    """Sort ``keys`` ascending in place, carrying ``values`` along.

    A min-heap is built and drained by swapping the root to the end, which
    leaves the arrays descending; a final reversal makes them ascending.
    """
    size = len(keys)
    if len(values) != size:
        raise ValueError("keys and values must have the same length.")

    for index in range(size // 2 - 1, -1, -1):
        _sift_down(keys, values, index, size)

    for last in range(size - 1, 0, -1):
        _exchange(keys, values, 0, last)
        _sift_down(keys, values, 0, last)

    for low in range(size // 2):
        _exchange(keys, values, low, size - 1 - low)


def _sift_down(keys: np.ndarray, values: np.ndarray, index: int, heap_size: int) -> None:
    while True:
        left = 2 * index + 1
        right = left + 1
        smallest = index
        # strict <: ties leave the earlier-compared element in place
        if left < heap_size and keys[left] < keys[smallest]:
            smallest = left
        if right < heap_size and keys[right] < keys[smallest]:
            smallest = right
        if smallest == index:
            return
        _exchange(keys, values, index, smallest)
        index = smallest


def _exchange(keys: np.ndarray, values: np.ndarray, i: int, j: int) -> None:
    keys[i], keys[j] = keys[j], keys[i]
    values[i], values[j] = values[j], values[i]
