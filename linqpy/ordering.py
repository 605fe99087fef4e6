"""Sorting of queries by keys or by a less-than function."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, Iterator

from .compare import get_comparer

Selector = Callable[[Any], Any]
Less = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class Order:
    """One sort criterion: a key selector and its direction."""

    selector: Selector
    descending: bool = False


def _sort_by_orders(source: Any, orders: tuple[Order, ...]) -> list[Any]:
    items = list(source)
    if not items:
        return items
    comparers = [get_comparer(order.selector(items[0])) for order in orders]

    def compare(a: Any, b: Any) -> int:
        for order, comparer in zip(orders, comparers):
            result = comparer(order.selector(a), order.selector(b))
            if result < 0:
                return 1 if order.descending else -1
            if result > 0:
                return -1 if order.descending else 1
        return 0

    items.sort(key=cmp_to_key(compare))
    return items


def _sort_by_less(source: Any, less: Less) -> list[Any]:
    def compare(a: Any, b: Any) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return sorted(source, key=cmp_to_key(compare))


class OrderedMixin:
    """Operations available on a query that has been ordered by keys."""

    _original: Any = None
    _orders: tuple[Order, ...] = ()

    @classmethod
    def _create(cls, original: Any, orders: tuple[Order, ...]):
        orders = tuple(orders)
        query = cls(lambda: _sort_by_orders(original, orders))
        query._original = original
        query._orders = orders
        return query

    def _derive(self, iterate):
        # Operations other than further ordering yield a plain query.
        if self._original is None:
            return super()._derive(iterate)
        return self._original._derive(iterate)

    def then_by(self, selector: Selector):
        """Return a query ordered additionally by ``selector``, ascending."""
        return type(self)._create(self._original, self._orders + (Order(selector),))

    def then_by_descending(self, selector: Selector):
        """Return a query ordered additionally by ``selector``, descending."""
        return type(self)._create(
            self._original, self._orders + (Order(selector, descending=True),)
        )

    def distinct(self):
        """Return the ordered query without repeated adjacent elements.

        As the elements are sorted, equal ones are adjacent, so this removes
        every duplicate.
        """
        source = self

        def iterate() -> Iterator[Any]:
            previous = None
            for item in source:
                if item != previous:
                    previous = item
                    yield item

        query = type(self)(iterate)
        query._original = self._original
        query._orders = self._orders
        return query


class OrderingMixin:
    """Sorting operations for queries.

    A concrete query class sets ``_ordered_type`` to the class, built on
    :class:`OrderedMixin`, that ``order_by`` returns.
    """

    _ordered_type: type | None = None

    def _ordered(self, order: Order):
        ordered_type = type(self)._ordered_type
        if ordered_type is None:
            raise TypeError(f"{type(self).__name__} does not support ordering")
        return ordered_type._create(self, (order,))

    def order_by(self, selector: Selector):
        """Return a query sorted ascending by the key ``selector`` produces."""
        return self._ordered(Order(selector))

    def order_by_descending(self, selector: Selector):
        """Return a query sorted descending by the key ``selector`` produces."""
        return self._ordered(Order(selector, descending=True))

    def sort(self, less: Less):
        """Return a query sorted ascending according to ``less(a, b)``, which
        is true when ``a`` comes before ``b``."""

        def iterate() -> list[Any]:
            return _sort_by_less(self, less)

        return self._derive(iterate)