"""Operations that run a query and produce a single result."""

from __future__ import annotations

import math
from typing import Any, Callable, Iterator

from .compare import get_comparer
from .core import KeyValue

Predicate = Callable[[Any], bool]
Selector = Callable[[Any], Any]

_INT64_SPAN = 1 << 64
_INT64_LIMIT = 1 << 63
_MISSING = object()


def _wrap_int64(value: int) -> int:
    value %= _INT64_SPAN
    return value - _INT64_SPAN if value >= _INT64_LIMIT else value


def _wrap_uint64(value: int) -> int:
    return value % _INT64_SPAN


def _require_int(item: Any) -> int:
    if isinstance(item, bool) or not isinstance(item, int):
        raise TypeError(f"expected an integer, got {type(item).__name__!r}")
    return item


def _require_uint(item: Any) -> int:
    value = _require_int(item)
    if value < 0:
        raise ValueError(f"expected an unsigned integer, got {value}")
    return value


def _require_number(item: Any) -> float | int:
    if isinstance(item, bool) or not isinstance(item, (int, float)):
        raise TypeError(f"expected a number, got {type(item).__name__!r}")
    return item


def _extreme(items: Iterator[Any], wanted_sign: int) -> Any:
    result = next(items, _MISSING)
    if result is _MISSING:
        return None
    compare = get_comparer(result)
    for item in items:
        if compare(item, result) * wanted_sign > 0:
            result = item
    return result


class ResultsMixin:
    """Operations that consume a query."""

    def all(self, predicate: Predicate) -> bool:
        """Return True if every element satisfies ``predicate``."""
        return all(predicate(item) for item in self)

    def any(self) -> bool:
        """Return True if the query has at least one element."""
        return next(iter(self), _MISSING) is not _MISSING

    def any_with(self, predicate: Predicate) -> bool:
        """Return True if some element satisfies ``predicate``."""
        return any(predicate(item) for item in self)

    def average(self) -> float:
        """Return the mean of numeric elements, or NaN for an empty query."""
        values = [_require_number(item) for item in self]
        if not values:
            return math.nan
        return sum(values) / len(values)

    def contains(self, value: Any) -> bool:
        """Return True if some element equals ``value``."""
        return any(item == value for item in self)

    def count(self) -> int:
        """Return the number of elements."""
        return sum(1 for _ in self)

    def count_with(self, predicate: Predicate) -> int:
        """Return the number of elements satisfying ``predicate``."""
        return sum(1 for item in self if predicate(item))

    def first(self) -> Any:
        """Return the first element, or None if the query is empty."""
        return next(iter(self), None)

    def first_with(self, predicate: Predicate) -> Any:
        """Return the first element satisfying ``predicate``, or None."""
        return next((item for item in self if predicate(item)), None)

    def for_each(self, action: Callable[[Any], Any]) -> None:
        """Call ``action`` on every element."""
        for item in self:
            action(item)

    def for_each_indexed(self, action: Callable[[int, Any], Any]) -> None:
        """Call ``action(index, element)`` on every element, counting from zero."""
        for index, item in enumerate(self):
            action(index, item)

    def last(self) -> Any:
        """Return the last element, or None if the query is empty."""
        result = None
        for result in self:
            pass
        return result

    def last_with(self, predicate: Predicate) -> Any:
        """Return the last element satisfying ``predicate``, or None."""
        result = None
        for item in self:
            if predicate(item):
                result = item
        return result

    def max(self) -> Any:
        """Return the greatest element, or None if the query is empty."""
        return _extreme(iter(self), 1)

    def min(self) -> Any:
        """Return the smallest element, or None if the query is empty."""
        return _extreme(iter(self), -1)

    def results(self) -> list[Any]:
        """Return all elements as a list."""
        return list(self)

    def sequence_equal(self, other: Any) -> bool:
        """Return True if both sequences hold equal elements in the same order."""
        theirs = iter(other)
        for item in self:
            counterpart = next(theirs, _MISSING)
            if counterpart is _MISSING or item != counterpart:
                return False
        return next(theirs, _MISSING) is _MISSING

    def single(self) -> Any:
        """Return the only element, or None unless there is exactly one."""
        items = iter(self)
        item = next(items, None)
        if next(items, _MISSING) is not _MISSING:
            return None
        return item

    def single_with(self, predicate: Predicate) -> Any:
        """Return the only element satisfying ``predicate``, or None if there
        is none or more than one."""
        result = None
        found = False
        for item in self:
            if predicate(item):
                if found:
                    return None
                found = True
                result = item
        return result

    def sum_ints(self) -> int:
        """Return the sum of integer elements as a signed 64-bit value."""
        return _wrap_int64(sum(_require_int(item) for item in self))

    def sum_uints(self) -> int:
        """Return the sum of non-negative integer elements as an unsigned
        64-bit value."""
        return _wrap_uint64(sum(_require_uint(item) for item in self))

    def sum_floats(self) -> float:
        """Return the sum of numeric elements as a float."""
        return float(sum(float(_require_number(item)) for item in self))

    def to_map(self, result: dict | None = None) -> dict:
        """Put :class:`KeyValue` elements into ``result`` and return it.

        ``result`` is not emptied first; a new dict is used when it is None.
        """

        def key_of(item: Any) -> Any:
            if not isinstance(item, KeyValue):
                raise TypeError(
                    f"to_map needs KeyValue elements, got {type(item).__name__!r}"
                )
            return item.key

        return self.to_map_by(key_of, lambda item: item.value, result)

    def to_map_by(
        self,
        key_selector: Selector,
        value_selector: Selector,
        result: dict | None = None,
    ) -> dict:
        """Put ``key_selector(e): value_selector(e)`` for every element into
        ``result`` and return it.

        ``result`` is not emptied first; a new dict is used when it is None.
        """
        target = {} if result is None else result
        for item in self:
            target[key_selector(item)] = value_selector(item)
        return target

    def to_list(self) -> list[Any]:
        """Return a new list holding all elements."""
        return list(self)