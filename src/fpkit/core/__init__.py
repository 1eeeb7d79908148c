"""Configuration and shared types."""

from fpkit.core.config import Settings, settings, configure
from fpkit.core.types import Predicate, UnaryFn, FunctionArg, ensure_callable

__all__ = [
    "Settings",
    "settings",
    "configure",
    "Predicate",
    "UnaryFn",
    "FunctionArg",
    "ensure_callable",
]
