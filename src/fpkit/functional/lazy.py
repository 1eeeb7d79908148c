"""Lazy, infinite sequences.

Two sources of random numbers are provided, evaluated only when pulled:

    - :func:`infinite_random_sequence` draws from a process-wide
      ``numpy.random.Generator``. It is impure: every pull advances shared
      state, so two sequences created back to back interleave on the same
      stream. The generator is **not** safe for uncoordinated use from several
      threads.
    - :func:`random_stream` threads a ``jax.random`` key through the sequence.
      The same key always produces the same values, so the sequence can be
      recreated at will.

Neither sequence terminates; stop pulling to stop it. :func:`take` pulls a
finite prefix.

Example:
    >>> from fpkit.functional.lazy import infinite_random_sequence, take
    >>> values = take(3, infinite_random_sequence())
    >>> len(values)
    3
"""

import itertools
import numbers
import typing as tp

import jax
import numpy as np

from fpkit.core.config import settings
from fpkit.logger import get_logger

__all__ = [
    "infinite_random_sequence",
    "random_stream",
    "seed_random",
    "take",
]

log = get_logger("functional.lazy")

_generator = np.random.default_rng(settings.RANDOM_SEED)


def seed_random(seed: tp.Optional[int] = None) -> None:
    """Replace the process-wide generator with one seeded by ``seed``.

    Sequences already created pick up the new generator on their next pull.
    """
    global _generator
    log.debug("Reseeding process-wide generator with %r", seed)
    _generator = np.random.default_rng(seed)


def _check_bounds(low: float, high: float) -> None:
    if not low < high:
        raise ValueError(f"low ({low}) must be below high ({high})")


def infinite_random_sequence(
    low: tp.Optional[float] = None, high: tp.Optional[float] = None
) -> tp.Iterator[float]:
    """Return an infinite iterator of uniform floats in ``[low, high)``.

    Args:
        low: Lower bound, defaults to ``settings.RANDOM_LOW``.
        high: Upper bound, defaults to ``settings.RANDOM_HIGH``.

    Returns:
        A generator; each ``next`` draws one value from the process-wide
        generator.

    Raises:
        ValueError: If ``low >= high``. Raised here, not on the first pull.
    """
    low = settings.RANDOM_LOW if low is None else low
    high = settings.RANDOM_HIGH if high is None else high
    _check_bounds(low, high)
    return _draw_forever(low, high)


def _draw_forever(low: float, high: float) -> tp.Iterator[float]:
    while True:
        yield float(_generator.uniform(low, high))


def random_stream(
    key: tp.Union[int, jax.Array],
    low: tp.Optional[float] = None,
    high: tp.Optional[float] = None,
) -> tp.Iterator[float]:
    """Return a reproducible infinite iterator of uniform floats.

    Args:
        key: JAX PRNG key, or an integer seed (Python or numpy) used to
            create one with ``jax.random.PRNGKey``.
        low: Lower bound, defaults to ``settings.RANDOM_LOW``.
        high: Upper bound, defaults to ``settings.RANDOM_HIGH``.

    Raises:
        ValueError: If ``low >= high``.
    """
    low = settings.RANDOM_LOW if low is None else low
    high = settings.RANDOM_HIGH if high is None else high
    _check_bounds(low, high)
    if isinstance(key, numbers.Integral):
        key = jax.random.PRNGKey(int(key))
    return _split_forever(key, low, high)


def _split_forever(key: jax.Array, low: float, high: float) -> tp.Iterator[float]:
    while True:
        key, subkey = jax.random.split(key)
        yield float(jax.random.uniform(subkey, minval=low, maxval=high))


def take(n: int, iterable: tp.Iterable) -> list:
    """Pull the first ``n`` items of ``iterable`` into a list."""
    if n < 0:
        raise ValueError(f"Cannot take a negative number of items: {n}")
    return list(itertools.islice(iterable, n))
