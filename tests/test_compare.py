import pytest

from linqpy.compare import Comparable, get_comparer


class Foo(Comparable):
    def __init__(self, f1):
        self.f1 = f1

    def compare_to(self, other):
        a, b = self.f1, other.f1
        if a < b:
            return -1
        if a > b:
            return 1
        return 0


@pytest.mark.parametrize(
    ("x", "y", "want"),
    [
        (100, 500, -1),
        (-100, -500, 1),
        (256, 256, 0),
        (100, -100, 1),
        (-100, 100, -1),
        (100, 100, 0),
        (100, 0, 1),
        (0, 100, -1),
        (5.0, 1.0, 1),
        (1.0, 5.0, -1),
        (0.0, 0.0, 0),
        (True, True, 0),
        (False, False, 0),
        (True, False, 1),
        (False, True, -1),
        ("foo", "foo", 0),
        ("foo", "bar", 1),
        ("bar", "foo", -1),
        ("FOO", "bar", -1),
    ],
)
def test_get_comparer_basic_types(x, y, want):
    assert get_comparer(x)(x, y) == want


@pytest.mark.parametrize(
    ("x", "y", "want"),
    [
        (1, 5, -1),
        (5, 1, 1),
        (1, 1, 0),
    ],
)
def test_get_comparer_comparable(x, y, want):
    a, b = Foo(x), Foo(y)
    assert get_comparer(a)(a, b) == want


def test_get_comparer_rejects_unorderable_values():
    value = object()
    comparer = get_comparer(value)
    with pytest.raises(TypeError):
        comparer(value, object())


def test_comparable_is_abstract():
    with pytest.raises(TypeError):
        Comparable()