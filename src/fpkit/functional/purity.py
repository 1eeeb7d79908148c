"""Pure and impure functions side by side.

A pure function's result depends only on its arguments and calling it has no
observable effect. :func:`greet` is pure. :func:`make_greeter` returns a
closure over ``name``; it behaves as a pure function only because the captured
``str`` cannot change for the closure's lifetime. A closure over a mutable
value (a list, a module global that is reassigned) is impure.

:func:`today` reads the clock and :func:`say` writes to stdout: both are side
effects, and neither can be replaced by its value.
"""

import datetime as dt
import typing as tp

__all__ = [
    "greet",
    "make_greeter",
    "today",
    "say",
    "hello_world",
]


def greet(name: str) -> str:
    return "Hi, " + name


def make_greeter(name: str) -> tp.Callable[[], str]:
    def greeter() -> str:
        return "Hi, " + name

    return greeter


def today() -> dt.date:
    """Impure: the result differs from one day to the next."""
    return dt.date.today()


def say(message: str) -> None:
    """Impure: writing to stdout is a side effect."""
    print(message)


def hello_world() -> str:
    """Referentially transparent: every call can be replaced by its value."""
    return "Hello World!"
