"""Functional primitives for fpkit.

This module provides small, stateless building blocks: arity introspection,
higher-order filtering, partial application, currying, composition and
functor mapping. Apart from the random sequences in :mod:`fpkit.functional.lazy`
every function here is pure, so the pieces compose freely.
"""

from fpkit.functional.arity import arity
from fpkit.functional.hof import filter, is_a, is_even, greater_than
from fpkit.functional.application import (
    identity,
    constant,
    partial,
    curry,
    curry2,
    compose,
    compose_all,
)
from fpkit.functional.functor import map_all, vmap_all, add, increment, increment_all
from fpkit.functional.lazy import (
    infinite_random_sequence,
    random_stream,
    seed_random,
    take,
)
from fpkit.functional.laws import (
    is_idempotent,
    preserves_identity,
    preserves_composition,
    is_referentially_transparent,
)

__all__ = [
    "arity",
    "filter",
    "is_a",
    "is_even",
    "greater_than",
    "identity",
    "constant",
    "partial",
    "curry",
    "curry2",
    "compose",
    "compose_all",
    "map_all",
    "vmap_all",
    "add",
    "increment",
    "increment_all",
    "infinite_random_sequence",
    "random_stream",
    "seed_random",
    "take",
    "is_idempotent",
    "preserves_identity",
    "preserves_composition",
    "is_referentially_transparent",
]
