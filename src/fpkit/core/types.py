"""Reusable type definitions for fpkit.

Type Aliases:
    Predicate: A unary callable whose result is read as a boolean.
    UnaryFn: A callable taking exactly one argument.
    FunctionArg: A callable, checked with ``validate_function_arg`` when
        validated through pydantic.

The ``ensure_callable`` validator is also called directly by the functional
primitives so a non-callable argument fails before any work is done.
"""

import typing as tp
from typing import Annotated, Any, Callable
from pydantic.functional_validators import BeforeValidator

from fpkit.logger import get_logger

__all__ = [
    "T",
    "U",
    "V",
    "Predicate",
    "UnaryFn",
    "FunctionArg",
    "ensure_callable",
    "validate_function_arg",
]

log = get_logger("core.types")

T = tp.TypeVar("T")
U = tp.TypeVar("U")
V = tp.TypeVar("V")

Predicate = Callable[[Any], bool]
UnaryFn = Callable[[T], U]


def ensure_callable(value: Any, name: str = "f") -> Callable:
    """Validator to ensure a value can be called.

    Args:
        value: The object expected to be a function.
        name: Argument name used in the error message.
    Returns:
        The original value if validation passes.
    Raises:
        TypeError: If ``value`` is not callable.
    """
    if not callable(value):
        log.debug("Rejected non-callable argument %s=%r", name, value)
        raise TypeError(
            f"Expected '{name}' to be callable, got {type(value).__name__}: {value!r}"
        )
    return value


def validate_function_arg(value: Any) -> Callable:
    """Pydantic counterpart of ``ensure_callable``.

    Raises ``ValueError`` so pydantic reports the failure as a
    ``ValidationError`` on the offending field.
    """
    if not callable(value):
        raise ValueError(f"Expected a callable, got {type(value).__name__}: {value!r}")
    return value


FunctionArg = Annotated[Callable, BeforeValidator(validate_function_arg)]
