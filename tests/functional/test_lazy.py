import itertools
import numpy as np
import pytest
from fpkit.functional import lazy
from fpkit.functional.lazy import (
    infinite_random_sequence,
    random_stream,
    seed_random,
    take,
)


def test_first_pulls_within_default_range():
    values = take(1000, infinite_random_sequence())
    assert len(values) == 1000
    assert all(isinstance(v, float) for v in values)
    assert all(0.0 <= v < 1.0 for v in values)


def test_custom_range():
    values = take(200, infinite_random_sequence(low=-5.0, high=5.0))
    assert all(-5.0 <= v < 5.0 for v in values)


def test_values_vary():
    values = take(50, infinite_random_sequence())
    assert len(set(values)) > 1


def test_sequence_is_lazy_and_unbounded():
    seq = infinite_random_sequence()
    for _ in range(3):
        assert len(take(100, seq)) == 100


def test_invalid_bounds_raise_on_creation():
    with pytest.raises(ValueError):
        infinite_random_sequence(low=1.0, high=1.0)
    with pytest.raises(ValueError):
        infinite_random_sequence(low=2.0, high=1.0)


def test_seed_random_makes_draws_repeatable():
    seed_random(123)
    first = take(5, infinite_random_sequence())
    seed_random(123)
    second = take(5, infinite_random_sequence())
    assert first == second


def test_sequences_share_process_state():
    seed_random(5)
    a, b = infinite_random_sequence(), infinite_random_sequence()
    interleaved = [next(a), next(b), next(a)]
    seed_random(5)
    assert interleaved == take(3, infinite_random_sequence())


def test_seed_random_replaces_generator():
    before = lazy._generator
    seed_random(1)
    assert lazy._generator is not before


def test_random_stream_reproducible():
    assert take(5, random_stream(42)) == take(5, random_stream(42))
    assert take(5, random_stream(42)) != take(5, random_stream(43))


def test_random_stream_range():
    values = take(50, random_stream(0, low=10.0, high=20.0))
    assert all(10.0 <= v <= 20.0 for v in values)


def test_random_stream_invalid_bounds():
    with pytest.raises(ValueError):
        random_stream(0, low=1.0, high=0.0)


def test_take():
    assert take(3, itertools.count()) == [0, 1, 2]
    assert take(0, itertools.count()) == []
    assert take(5, [1, 2]) == [1, 2]
    with pytest.raises(ValueError):
        take(-1, [])


def test_random_stream_accepts_numpy_seed():
    assert take(3, random_stream(np.int64(42))) == take(3, random_stream(42))


def test_random_stream_defaults_to_settings_bounds(monkeypatch):
    monkeypatch.setattr(lazy.settings, "RANDOM_LOW", 100.0)
    monkeypatch.setattr(lazy.settings, "RANDOM_HIGH", 101.0)
    values = take(20, random_stream(0))
    assert all(100.0 <= v <= 101.0 for v in values)
