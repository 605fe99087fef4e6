import pytest

from linqpy.core import QueryBase
from linqpy.transform import TransformMixin


class _Query(QueryBase, TransformMixin):
    pass


def q(source):
    return _Query(lambda: source)


def test_append():
    assert list(TransformMixin.append(q([1, 2, 3, 4]), 5)) == [1, 2, 3, 4, 5]


def test_concat():
    assert list(TransformMixin.concat(q([1, 2, 3]), q([4, 5]))) == [1, 2, 3, 4, 5]


def test_prepend():
    assert list(TransformMixin.prepend(q([1, 2, 3, 4]), 0)) == [0, 1, 2, 3, 4]


def test_query_can_be_iterated_twice():
    query = TransformMixin.prepend(TransformMixin.append(q([1, 2]), 3), 0)
    assert list(query) == [0, 1, 2, 3]
    assert list(query) == [0, 1, 2, 3]


@pytest.mark.parametrize(
    "source, expected",
    [
        ([], [0]),
        ([1, 2, 3, 4, 5], [1, 2, 3, 4, 5]),
    ],
)
def test_default_if_empty(source, expected):
    assert list(TransformMixin.default_if_empty(q(source), 0)) == expected


def test_reverse():
    assert list(TransformMixin.reverse(q([1, 2, 3]))) == [3, 2, 1]


def test_reverse_empty():
    assert list(TransformMixin.reverse(q([]))) == []


@pytest.mark.parametrize(
    "source, selector, expected",
    [
        ([1, 2, 3], lambda i: i * 2, [2, 4, 6]),
        ("str", lambda c: c + "1", ["s1", "t1", "r1"]),
    ],
)
def test_select(source, selector, expected):
    assert list(TransformMixin.select(q(source), selector)) == expected


@pytest.mark.parametrize(
    "source, selector, expected",
    [
        ([1, 2, 3], lambda i, x: x * i, [0, 2, 6]),
        ("str", lambda i, x: x + str(i), ["s0", "t1", "r2"]),
    ],
)
def test_select_indexed(source, selector, expected):
    assert list(TransformMixin.select_indexed(q(source), selector)) == expected


def test_select_indexed_restarts_index_on_each_iteration():
    query = TransformMixin.select_indexed(q(["a", "b"]), lambda i, x: i)
    assert list(query) == [0, 1]
    assert list(query) == [0, 1]


@pytest.mark.parametrize(
    "source, predicate, expected",
    [
        ([1, 2, 3, 4, 5, 6, 7, 8, 9], lambda i: i == 3, 2),
        ("sstr", lambda c: c == "r", 3),
        ("gadsgsadgsda", lambda c: c == "z", -1),
    ],
)
def test_index_of(source, predicate, expected):
    assert TransformMixin.index_of(q(source), predicate) == expected