"""Mapping as a functor.

:func:`map_all` lifts a unary function to a function over ordered sequences.
It satisfies the functor laws:

    - Identity: ``map_all(identity)(xs) == xs``
    - Composition: ``map_all(compose(f, g))(xs) == map_all(f)(map_all(g)(xs))``

:func:`vmap_all` is the same lifting for arrays, built on ``jax.vmap``; the
mapped function is applied to every slice along the leading axis.

Point-free style:
    ``increment_all`` is defined without naming the list it operates on::

        increment_all = map_all(add(1))
        increment_all([1, 2, 3, 4])  # [2, 3, 4, 5]
"""

import typing as tp

import jax
import jax.numpy as jnp

from fpkit.core.types import T, U, UnaryFn, ensure_callable

__all__ = [
    "map_all",
    "vmap_all",
    "add",
    "increment",
    "increment_all",
]


def map_all(fn: UnaryFn) -> tp.Callable[[tp.Iterable[T]], tp.List[U]]:
    """Lift ``fn`` to a function over sequences.

    Args:
        fn: Unary function applied to each element.

    Returns:
        A function taking an ordered sequence and returning a new list of the
        same length with ``fn`` applied element-wise, in order.

    Raises:
        TypeError: If ``fn`` is not callable.
    """
    ensure_callable(fn, "fn")

    def mapper(xs: tp.Iterable[T]) -> tp.List[U]:
        return [fn(x) for x in xs]

    mapper.__name__ = f"map_all({getattr(fn, '__name__', repr(fn))})"
    return mapper


def vmap_all(fn: UnaryFn) -> tp.Callable[[jax.Array], jax.Array]:
    """Lift ``fn`` to a function over the leading axis of an array.

    Args:
        fn: Unary function traceable by JAX (built from ``jnp`` operations).

    Returns:
        A function taking an array-like with at least one dimension and
        returning ``jax.vmap(fn)`` applied to it. An empty leading axis maps to
        an empty result with the shape and dtype ``fn`` would produce.

    Raises:
        TypeError: If ``fn`` is not callable.
        ValueError: If the mapped input is a scalar.
    """
    ensure_callable(fn, "fn")
    vectorized = jax.vmap(fn)

    def mapper(xs) -> jax.Array:
        arr = jnp.asarray(xs)
        if arr.ndim == 0:
            raise ValueError("vmap_all needs an array with at least one dimension")
        return vectorized(arr)

    return mapper


def add(a):
    """Curried addition: ``add(a)(b) == a + b``."""

    def add_to(b):
        return a + b

    return add_to


increment = add(1)

increment_all = map_all(increment)
