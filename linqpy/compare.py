"""Three-way comparison of query elements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

Comparer = Callable[[Any, Any], int]


class Comparable(ABC):
    """Base class for custom elements that can be ordered by a query."""

    @abstractmethod
    def compare_to(self, other: Comparable) -> int:
        """Return a negative number, zero or a positive number when ``self``
        is less than, equal to or greater than ``other``."""


def _natural_compare(x: Any, y: Any) -> int:
    if x > y:
        return 1
    if y > x:
        return -1
    return 0


def _bool_compare(x: bool, y: bool) -> int:
    if x == y:
        return 0
    return 1 if x else -1


def _comparable_compare(x: Any, y: Any) -> int:
    if not isinstance(x, Comparable):
        raise TypeError(
            f"value of type {type(x).__name__!r} is neither a basic type "
            "nor a Comparable"
        )
    return x.compare_to(y)


def get_comparer(data: Any) -> Comparer:
    """Return a three-way comparison function suited to the type of ``data``.

    Numbers and strings compare by their natural order, booleans order
    ``False`` before ``True``, and anything else must be a :class:`Comparable`.
    """
    if isinstance(data, bool):
        return _bool_compare
    if isinstance(data, (int, float, str)):
        return _natural_compare
    return _comparable_compare