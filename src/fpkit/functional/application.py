"""Partial application, currying and composition.

All combinators validate their function arguments eagerly and raise before
building anything, so a bad argument never yields a half-configured closure.
Arguments fixed by :func:`partial`, :func:`curry2` and :func:`curry` are
captured once, as tuples, when the combinator is called.

Examples:
    >>> add3 = lambda a, b, c: a + b + c
    >>> partial(add3, 2, 3)(4)
    9
    >>> curry2(lambda a, b: a + b)(40)(2)
    42
    >>> import math
    >>> compose(str, math.floor)(121.212121)
    '121'
"""

import functools
import inspect
import typing as tp

from fpkit.core.types import ensure_callable
from fpkit.functional.arity import (
    arity,
    signature_of,
    max_positional,
    accepts_varargs,
)
from fpkit.logger import get_logger

__all__ = [
    "identity",
    "constant",
    "partial",
    "curry2",
    "curry",
    "compose",
    "compose_all",
]

log = get_logger("functional.application")

_UNARY = inspect.Signature(
    [inspect.Parameter("x", inspect.Parameter.POSITIONAL_ONLY)]
)


def _name(f: tp.Callable) -> str:
    return getattr(f, "__name__", None) or repr(f)


def identity(x):
    return x


def constant(value):
    """Return a function that ignores its arguments and always yields ``value``."""

    def const(*_args, **_kwargs):
        return value

    const.__name__ = f"constant({value!r})"
    return const


def partial(f: tp.Callable, *args) -> tp.Callable:
    """Fix the leading positional arguments of ``f``.

    The returned function calls ``f(*args, *more_args)``. Its signature is the
    signature of ``f`` without the first ``len(args)`` positional parameters,
    so ``arity(partial(f, *args)) == arity(f) - len(args)``.

    Args:
        f: Function to partially apply.
        *args: Leading positional arguments to fix.

    Returns:
        A function taking the remaining arguments.

    Raises:
        TypeError: If ``f`` is not callable or more arguments are fixed than
            ``f`` accepts positionally.
    """
    ensure_callable(f)
    fixed = tuple(args)

    sig = signature_of(f)
    if sig is not None:
        limit = max_positional(sig)
        if limit is not None and len(fixed) > limit:
            log.debug(
                "partial(%s) given %d args, accepts %d", _name(f), len(fixed), limit
            )
            raise TypeError(
                f"{_name(f)} accepts at most {limit} positional arguments, "
                f"{len(fixed)} were fixed"
            )

    def applied(*more_args, **kwargs):
        return f(*fixed, *more_args, **kwargs)

    applied.__name__ = f"partial({_name(f)})"
    applied.__qualname__ = applied.__name__
    if sig is not None:
        applied.__signature__ = _drop_leading(sig, len(fixed))
    return applied


def _drop_leading(sig: inspect.Signature, count: int) -> inspect.Signature:
    """Remove ``count`` leading positional parameters from ``sig``.

    Arguments beyond the named positional parameters are absorbed by ``*args``,
    which is kept.
    """
    params = list(sig.parameters.values())
    remaining = []
    for p in params:
        if count and p.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count -= 1
            continue
        remaining.append(p)
    return sig.replace(parameters=remaining)


def curry(f: tp.Callable, n: tp.Optional[int] = None) -> tp.Callable:
    """Turn an ``n``-argument function into a chain of one-argument functions.

    Args:
        f: Function to curry.
        n: Number of arguments to collect before calling ``f``. Defaults to
            ``arity(f)``.

    Returns:
        A unary function. Each call returns another unary function until
        ``n`` arguments have been supplied, at which point ``f`` is invoked.

    Raises:
        TypeError: If ``f`` is not callable or cannot take ``n`` positional
            arguments.
        ValueError: If ``n`` is smaller than 1.
    """
    ensure_callable(f)
    if n is None:
        n = arity(f)
    if n < 1:
        raise ValueError(f"Cannot curry {_name(f)} over {n} arguments; need at least 1")

    sig = signature_of(f)
    if sig is not None and not accepts_varargs(sig):
        required = arity(f)
        limit = max_positional(sig)
        if not required <= n <= limit:
            raise TypeError(
                f"{_name(f)} takes {required}..{limit} positional arguments, "
                f"cannot curry over {n}"
            )

    def collect(collected: tuple) -> tp.Callable:
        def step(x):
            args = collected + (x,)
            if len(args) == n:
                return f(*args)
            return collect(args)

        step.__name__ = f"curry({_name(f)})"
        step.__qualname__ = step.__name__
        step.__signature__ = _UNARY
        return step

    return collect(())


def curry2(f: tp.Callable) -> tp.Callable:
    """Curry a two-argument function: ``curry2(f)(a)(b) == f(a, b)``."""
    return curry(f, 2)


def compose(f: tp.Callable, g: tp.Callable) -> tp.Callable:
    """Return ``h`` with ``h(x) == f(g(x))``.

    Raises:
        TypeError: If either argument is not callable.
    """
    ensure_callable(f, "f")
    ensure_callable(g, "g")

    def composed(x):
        return f(g(x))

    composed.__name__ = f"{_name(f)} . {_name(g)}"
    composed.__qualname__ = composed.__name__
    composed.__signature__ = _UNARY
    return composed


def compose_all(*funcs: tp.Callable) -> tp.Callable:
    """Compose any number of unary functions, right to left.

    ``compose_all(f, g, h)(x) == f(g(h(x)))``. With no functions the result is
    :func:`identity`; with one it is that function.
    """
    for i, func in enumerate(funcs):
        ensure_callable(func, f"funcs[{i}]")
    if not funcs:
        return identity
    return functools.reduce(compose, funcs)
