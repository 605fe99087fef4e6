from dataclasses import dataclass

import pytest

from linqpy.core import QueryBase
from linqpy.sets import SetMixin


class _Query(QueryBase, SetMixin):
    pass


def q(source):
    return _Query(lambda: source)


@dataclass(frozen=True)
class User:
    id: int
    name: str


@pytest.mark.parametrize(
    "source, expected",
    [
        ([1, 2, 2, 3, 1], [1, 2, 3]),
        ((1, 1, 1, 2, 1, 2, 3, 4, 2), [1, 2, 3, 4]),
        ("sstr", ["s", "t", "r"]),
    ],
)
def test_distinct(source, expected):
    assert list(SetMixin.distinct(q(source))) == expected


def test_distinct_by():
    users = [User(1, "Foo"), User(2, "Bar"), User(3, "Foo")]
    result = list(SetMixin.distinct_by(q(users), lambda u: u.name))
    assert result == [User(1, "Foo"), User(2, "Bar")]


def test_distinct_is_reiterable():
    query = SetMixin.distinct(q([1, 1, 2]))
    assert list(query) == [1, 2]
    assert list(query) == [1, 2]


def test_distinct_unhashable_raises():
    with pytest.raises(TypeError):
        list(SetMixin.distinct(q([[1], [1]])))


def test_except():
    result = list(SetMixin.except_(q([1, 2, 3, 4, 5, 1, 2, 5]), q([1, 2])))
    assert result == [3, 4, 5, 5]


def test_except_by():
    result = list(
        SetMixin.except_by(q([1, 2, 3, 4, 5, 1, 2, 5]), q([1]), lambda i: i % 2)
    )
    assert result == [2, 4, 2]


def test_intersect():
    result = list(SetMixin.intersect(q([1, 2, 3]), q([1, 4, 7, 9, 12, 3])))
    assert result == [1, 3]


def test_intersect_yields_each_match_once():
    result = list(SetMixin.intersect(q([1, 1, 3, 3]), q([1, 3])))
    assert result == [1, 3]


def test_intersect_by():
    result = list(
        SetMixin.intersect_by(q([5, 7, 8]), q([1, 4, 7, 9, 12, 3]), lambda i: i % 2)
    )
    assert result == [5, 8]


def test_intersect_is_reiterable():
    query = SetMixin.intersect(q([1, 2, 3]), q([3, 1]))
    assert list(query) == [1, 3]
    assert list(query) == [1, 3]