import pytest
from fpkit.functional.arity import arity, max_positional, accepts_varargs, signature_of
from fpkit.functional.application import partial, curry2, compose


def test_two_argument_lambda():
    assert arity(lambda a, b: a + b) == 2


def test_nullary_function():
    assert arity(lambda: None) == 0


def test_defaults_and_variadics_not_counted():
    def f(a, b=1, *args, c, **kwargs):
        return a

    assert arity(f) == 1


def test_positional_only_counted():
    def f(a, b, /, c):
        return a + b + c

    assert arity(f) == 3


def test_builtin_with_signature():
    assert arity(abs) == 1


def test_arity_of_derived_functions():
    def add3(a, b, c):
        return a + b + c

    assert arity(partial(add3, 2)) == 2
    assert arity(partial(add3, 2, 3)) == 1
    assert arity(partial(add3, 2, 3, 4)) == 0
    assert arity(curry2(lambda a, b: a + b)) == 1
    assert arity(compose(str, abs)) == 1


def test_non_callable_rejected():
    with pytest.raises(TypeError, match="callable"):
        arity(42)


def test_max_positional_and_varargs():
    def fixed(a, b=2):
        return a

    def variadic(a, *rest):
        return a

    assert max_positional(signature_of(fixed)) == 2
    assert max_positional(signature_of(variadic)) is None
    assert accepts_varargs(signature_of(variadic))
    assert not accepts_varargs(signature_of(fixed))
