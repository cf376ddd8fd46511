from __future__ import annotations

import numpy as np
import pytest

from popsample.engine.draws import CountingSource, SequenceSource, numpy_source
from popsample.engine.sampler import UniformSampler
from popsample.engine.sampler.uniform import scaled_index


def test_t311_with_replacement_maps_draws_to_floor_plus_one():
    source = SequenceSource([0.0, 0.95, 0.5])
    result = UniformSampler().sample_replace(10, 3, source)

    assert result == [1, 10, 6]
    assert source.consumed == 3


def test_t312_without_replacement_swap_removes_from_active_array():
    source = SequenceSource([0.1, 0.9, 0.5])
    result = UniformSampler().sample_no_replace(5, 3, source)

    assert result == [1, 4, 2]
    assert source.consumed == 3


def test_t313_sparse_permutation_replays_dense_sequence():
    dense = UniformSampler()
    sparse = UniformSampler(dense_limit=1)

    for seed in range(5):
        expected = dense.sample_no_replace(200, 150, numpy_source(seed))
        assert sparse.sample_no_replace(200, 150, numpy_source(seed)) == expected


def test_t314_full_draw_is_a_permutation():
    result = UniformSampler().sample_no_replace(5, 5, SequenceSource([0.99, 0.0, 0.5, 0.3, 0.7]))
    assert sorted(result) == [1, 2, 3, 4, 5]


def test_t315_huge_population_without_replacement():
    population = 4_000_000_000_000_000
    source = CountingSource(numpy_source(3))
    result = UniformSampler().sample_no_replace(population, 20, source)

    assert len(set(result)) == 20
    assert all(1 <= value <= population for value in result)
    assert source.consumed == 20


def test_t316_scaled_index_clamps_to_last_slot():
    assert scaled_index(5, 0.0) == 0
    assert scaled_index(5, 0.999) == 4
    assert scaled_index(5, 1.0) == 4


def test_t317_without_replacement_rejects_oversized_request():
    with pytest.raises(ValueError, match="<= population"):
        UniformSampler().sample_no_replace(3, 4, numpy_source(0))


def test_t318_dense_limit_must_be_positive():
    with pytest.raises(ValueError):
        UniformSampler(dense_limit=0)


def test_t319_unweighted_replacement_frequencies_are_flat():
    result = np.array(UniformSampler().sample_replace(4, 40000, numpy_source(5)))
    frequencies = np.bincount(result, minlength=5)[1:] / len(result)

    assert np.allclose(frequencies, 0.25, atol=0.01)
