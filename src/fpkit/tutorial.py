"""Guided tour of the functional primitives.

Each :class:`Example` pairs a concept with the expression that illustrates it
and a zero-argument thunk producing the expression's value. Thunks are only
evaluated by :func:`run`, so building the list of examples has no effect.
"""

import math
import typing as tp

from pydantic import BaseModel, ConfigDict

from fpkit.core.types import FunctionArg
from fpkit.functional import (
    arity,
    filter,
    is_a,
    greater_than,
    partial,
    curry2,
    compose,
    map_all,
    add,
    increment_all,
    identity,
    infinite_random_sequence,
    take,
    is_idempotent,
    preserves_identity,
    preserves_composition,
    is_referentially_transparent,
)
from fpkit.functional.purity import greet, make_greeter, today, say, hello_world
from fpkit.logger import get_logger

__all__ = ["Example", "examples", "run"]

log = get_logger("tutorial")


class Example(BaseModel):
    model_config = ConfigDict(frozen=True)

    concept: str
    expression: str
    thunk: FunctionArg

    def evaluate(self) -> tp.Any:
        return self.thunk()


def _sum(a, b):
    return a + b


def _add3(a, b, c):
    return a + b + c


def examples() -> tp.List[Example]:
    """The tour, in the order it is presented."""
    curried_sum = curry2(_sum)
    add2 = curried_sum(2)
    floor_and_to_string = compose(str, math.floor)
    double = lambda x: x * 2  # noqa: E731

    return [
        Example(
            concept="Arity",
            expression="arity(lambda a, b: a + b)",
            thunk=lambda: arity(_sum),
        ),
        Example(
            concept="Higher-order functions",
            expression="filter(is_a(int), [0, '1', 2, None])",
            thunk=lambda: filter(is_a(int), [0, "1", 2, None]),
        ),
        Example(
            concept="Partial application",
            expression="partial(add3, 2, 3)(4)",
            thunk=lambda: partial(_add3, 2, 3)(4),
        ),
        Example(
            concept="Currying",
            expression="curry2(sum)(40)(2)",
            thunk=lambda: curried_sum(40)(2),
        ),
        Example(
            concept="Currying",
            expression="add2 = curry2(sum)(2); add2(10)",
            thunk=lambda: add2(10),
        ),
        Example(
            concept="Function composition",
            expression="compose(str, math.floor)(121.212121)",
            thunk=lambda: floor_and_to_string(121.212121),
        ),
        Example(
            concept="Purity",
            expression="greet('Brianne')",
            thunk=lambda: greet("Brianne"),
        ),
        Example(
            concept="Purity",
            expression="make_greeter('Brianne')()",
            thunk=lambda: make_greeter("Brianne")(),
        ),
        Example(concept="Side effects", expression="today()", thunk=today),
        Example(
            concept="Side effects",
            expression="say('IO is a side effect!')",
            thunk=lambda: say("IO is a side effect!"),
        ),
        Example(
            concept="Idempotence",
            expression="abs(abs(10))",
            thunk=lambda: abs(abs(10)),
        ),
        Example(
            concept="Idempotence",
            expression="is_idempotent(sorted, [2, 1])",
            thunk=lambda: is_idempotent(sorted, [2, 1]),
        ),
        Example(
            concept="Point-free style",
            expression="map_all(add(1))([1, 2, 3, 4])",
            thunk=lambda: map_all(add(1))([1, 2, 3, 4]),
        ),
        Example(
            concept="Point-free style",
            expression="increment_all([1, 2, 3, 4])",
            thunk=lambda: increment_all([1, 2, 3, 4]),
        ),
        Example(
            concept="Predicate",
            expression="filter(greater_than(2), [1, 2, 3, 4])",
            thunk=lambda: filter(greater_than(2), [1, 2, 3, 4]),
        ),
        Example(
            concept="Functor",
            expression="map_all(identity)([1, 2, 3]) == [1, 2, 3]",
            thunk=lambda: preserves_identity(map_all, [1, 2, 3]),
        ),
        Example(
            concept="Functor",
            expression="map_all(compose(add(1), double))([1, 2, 3])",
            thunk=lambda: map_all(compose(add(1), double))([1, 2, 3]),
        ),
        Example(
            concept="Functor",
            expression="map_all(add(1))(map_all(double)([1, 2, 3]))",
            thunk=lambda: map_all(add(1))(map_all(double)([1, 2, 3])),
        ),
        Example(
            concept="Functor",
            expression="composition law holds",
            thunk=lambda: preserves_composition(map_all, add(1), double, [1, 2, 3]),
        ),
        Example(
            concept="Referential transparency",
            expression="hello_world()",
            thunk=lambda: is_referentially_transparent(hello_world),
        ),
        Example(
            concept="Lambda",
            expression="map_all(lambda a: a + 1)([1, 2])",
            thunk=lambda: map_all(lambda a: a + 1)([1, 2]),
        ),
        Example(
            concept="Identity",
            expression="identity(5)",
            thunk=lambda: identity(5),
        ),
        Example(
            concept="Lazy evaluation",
            expression="next(infinite_random_sequence())",
            thunk=lambda: take(1, infinite_random_sequence())[0],
        ),
    ]


def run() -> tp.List[tp.Tuple[str, str, tp.Any]]:
    """Evaluate and print every example.

    Returns:
        ``(concept, expression, value)`` rows in presentation order.
    """
    rows = []
    for example in examples():
        value = example.evaluate()
        print(f"{example.concept:<26} {example.expression}  #=> {value!r}")
        rows.append((example.concept, example.expression, value))

    log.info("Evaluated %d examples", len(rows))
    return rows
