"""fpkit: functional programming primitives and a guided tour of them."""

from fpkit.functional import (
    arity,
    filter,
    partial,
    curry,
    curry2,
    compose,
    map_all,
    infinite_random_sequence,
)

__all__ = [
    "arity",
    "filter",
    "partial",
    "curry",
    "curry2",
    "compose",
    "map_all",
    "infinite_random_sequence",
]
