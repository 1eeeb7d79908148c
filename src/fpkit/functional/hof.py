"""Higher-order functions and predicate factories."""

import typing as tp

from fpkit.core.types import T, Predicate, ensure_callable

__all__ = [
    "filter",
    "is_a",
    "is_even",
    "greater_than",
]


def filter(pred: Predicate, xs: tp.Iterable[T]) -> tp.List[T]:
    """Select the elements of ``xs`` for which ``pred`` is truthy.

    Args:
        pred: Unary predicate.
        xs: Ordered input; it is only read, never modified.

    Returns:
        A new list holding the selected elements in their original order.

    Raises:
        TypeError: If ``pred`` is not callable.
    """
    ensure_callable(pred, "pred")
    return [x for x in xs if pred(x)]


def is_a(kind: tp.Union[type, tp.Tuple[type, ...]]) -> Predicate:
    """Build a predicate checking that a value is an instance of ``kind``.

    ``bool`` is a subclass of ``int`` in Python; a predicate for ``int`` still
    rejects ``True``/``False`` unless ``bool`` is asked for explicitly.

    >>> filter(is_a(int), [0, "1", 2, None])
    [0, 2]
    """
    kinds = kind if isinstance(kind, tuple) else (kind,)
    if not kinds or not all(isinstance(k, type) for k in kinds):
        raise TypeError(f"is_a expects a type or a tuple of types, got {kind!r}")

    reject_bool = int in kinds and bool not in kinds

    def check(x) -> bool:
        if reject_bool and isinstance(x, bool):
            return False
        return isinstance(x, kinds)

    check.__name__ = f"is_a({', '.join(k.__name__ for k in kinds)})"
    return check


def is_even(n: int) -> bool:
    return n % 2 == 0


def greater_than(bound) -> Predicate:
    def check(x) -> bool:
        return x > bound

    check.__name__ = f"greater_than({bound!r})"
    return check
