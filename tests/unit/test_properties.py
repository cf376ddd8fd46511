"""Property tests for the range, uniqueness and draw-count invariants."""

from __future__ import annotations

import hypothesis.strategies as st
from hypothesis import assume, given, settings

from popsample.engine import CountingSource, SamplingEngine, numpy_source

ENGINE = SamplingEngine()


@given(
    population=st.integers(min_value=1, max_value=60),
    data=st.data(),
    replace=st.booleans(),
    seed=st.integers(min_value=0, max_value=2**32 - 1),
)
def test_unweighted_results_are_in_range(population, data, replace, seed):
    max_size = 80 if replace else population
    size = data.draw(st.integers(min_value=0, max_value=max_size))
    source = CountingSource(numpy_source(seed))

    result = ENGINE.sample(population, size, replace, source=source)

    assert len(result) == size
    assert source.consumed == size
    assert all(1 <= value <= population for value in result)
    if not replace:
        assert len(set(result)) == size


@given(
    weights=st.lists(st.floats(min_value=0.0, max_value=100.0), min_size=1, max_size=40),
    data=st.data(),
    replace=st.booleans(),
    seed=st.integers(min_value=0, max_value=2**32 - 1),
)
@settings(max_examples=75)
def test_weighted_results_are_in_range(weights, data, replace, seed):
    positive = sum(1 for weight in weights if weight > 0)
    assume(positive > 0)
    max_size = 60 if replace else positive
    size = data.draw(st.integers(min_value=0, max_value=max_size))
    source = CountingSource(numpy_source(seed))

    result = ENGINE.sample(len(weights), size, replace, weights, source=source)

    assert len(result) == size
    assert source.consumed == size
    assert all(1 <= value <= len(weights) for value in result)
    if not replace:
        assert len(set(result)) == size


@given(
    population=st.integers(min_value=1, max_value=30),
    seed=st.integers(min_value=0, max_value=2**32 - 1),
)
def test_same_stream_same_sample(population, seed):
    first = ENGINE.sample(population, population, False, source=numpy_source(seed))
    second = ENGINE.sample(population, population, False, source=numpy_source(seed))

    assert first == second
    assert sorted(first) == list(range(1, population + 1))
