import pytest
from fpkit.functional.hof import filter, is_a, is_even, greater_than


def test_filter_preserves_order():
    assert filter(is_even, [0, 1, 2, 3]) == [0, 2]


def test_filter_empty_input():
    assert filter(is_even, []) == []


def test_filter_does_not_mutate_input():
    xs = [4, 1, 2, 3]
    result = filter(is_even, xs)
    assert xs == [4, 1, 2, 3]
    assert result == [4, 2]
    assert result is not xs


def test_filter_accepts_tuple():
    assert filter(greater_than(2), (1, 2, 3, 4)) == [3, 4]


def test_filter_rejects_non_callable_predicate():
    with pytest.raises(TypeError, match="pred"):
        filter("not a function", [1, 2])


def test_is_a_selects_integers():
    assert filter(is_a(int), [0, "1", 2, None]) == [0, 2]


def test_is_a_int_excludes_bool():
    assert filter(is_a(int), [True, 1, False, 0]) == [1, 0]
    assert filter(is_a(bool), [True, 1, False, 0]) == [True, False]


def test_is_a_with_tuple_of_types():
    assert filter(is_a((str, type(None))), [0, "1", 2, None]) == ["1", None]


def test_is_a_rejects_non_types():
    with pytest.raises(TypeError):
        is_a("int")
    with pytest.raises(TypeError):
        is_a(())


def test_greater_than():
    assert filter(greater_than(2), [1, 2, 3, 4]) == [3, 4]
    assert greater_than(2).__name__ == "greater_than(2)"
