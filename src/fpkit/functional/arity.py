"""Function arity introspection.

Arity here means the number of *required positional* parameters a callable
declares. Parameters with defaults, ``*args``, ``**kwargs`` and keyword-only
parameters do not count, so ``arity(lambda a, b=1, *rest: ...) == 1``.

Callables built by :mod:`fpkit.functional.application` carry a
``__signature__`` describing what is left to supply, so the arity of a
partially applied function is the arity of the original minus the number of
fixed arguments.

Examples:
    >>> from fpkit.functional.arity import arity
    >>> arity(lambda a, b: a + b)
    2
"""

import inspect
import typing as tp

from fpkit.core.types import ensure_callable

__all__ = [
    "arity",
    "signature_of",
    "max_positional",
    "accepts_varargs",
]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def signature_of(f: tp.Callable) -> tp.Optional[inspect.Signature]:
    """Return the signature of ``f`` or ``None`` if it cannot be introspected."""
    try:
        return inspect.signature(f)
    except (ValueError, TypeError):
        return None


def arity(f: tp.Callable) -> int:
    """Count the required positional parameters of ``f``.

    Args:
        f: Any callable.

    Returns:
        Number of positional parameters without a default value.

    Raises:
        TypeError: If ``f`` is not callable.
        ValueError: If the signature of ``f`` cannot be introspected
            (some builtins implemented in C).
    """
    ensure_callable(f)
    sig = signature_of(f)
    if sig is None:
        raise ValueError(f"Cannot determine the signature of {f!r}")

    return sum(
        1
        for p in sig.parameters.values()
        if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )


def max_positional(sig: inspect.Signature) -> tp.Optional[int]:
    """Upper bound on positional arguments, ``None`` when ``*args`` is declared."""
    if accepts_varargs(sig):
        return None
    return sum(1 for p in sig.parameters.values() if p.kind in _POSITIONAL)


def accepts_varargs(sig: inspect.Signature) -> bool:
    return any(
        p.kind is inspect.Parameter.VAR_POSITIONAL for p in sig.parameters.values()
    )
