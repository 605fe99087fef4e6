"""Set operations over queries."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional

Selector = Callable[[Any], Any]


def _keys(items: Iterable[Any], selector: Optional[Selector]) -> set:
    """Collect the keys of ``items``, or the items themselves without a selector."""
    if selector is None:
        return set(items)
    return {selector(item) for item in items}


def _unique(items: Iterable[Any], selector: Optional[Selector]) -> Iterator[Any]:
    seen = set()
    for item in items:
        key = item if selector is None else selector(item)
        if key not in seen:
            seen.add(key)
            yield item


def _without(
    items: Iterable[Any], excluded: set, selector: Optional[Selector]
) -> Iterator[Any]:
    for item in items:
        key = item if selector is None else selector(item)
        if key not in excluded:
            yield item


def _matching(
    items: Iterable[Any], wanted: set, selector: Optional[Selector]
) -> Iterator[Any]:
    for item in items:
        key = item if selector is None else selector(item)
        if key in wanted:
            wanted.discard(key)
            yield item


class SetMixin:
    """Distinct, difference and intersection operations for queries."""

    def distinct(self):
        """Return a query without duplicate elements, keeping first occurrences."""
        return self._derive(lambda: _unique(self, None))

    def distinct_by(self, selector: Selector):
        """Return a query keeping only the first element for each value of
        ``selector``."""
        return self._derive(lambda: _unique(self, selector))

    def except_(self, other: Any):
        """Return the elements of this query that do not appear in ``other``."""

        def iterate() -> Iterator[Any]:
            return _without(self, _keys(other, None), None)

        return self._derive(iterate)

    def except_by(self, other: Any, selector: Selector):
        """Return the elements whose ``selector`` value matches that of no
        element of ``other``."""

        def iterate() -> Iterator[Any]:
            return _without(self, _keys(other, selector), selector)

        return self._derive(iterate)

    def intersect(self, other: Any):
        """Return the distinct elements of this query that also appear in
        ``other``."""

        def iterate() -> Iterator[Any]:
            return _matching(self, _keys(other, None), None)

        return self._derive(iterate)

    def intersect_by(self, other: Any, selector: Selector):
        """Return the first element of this query for each ``selector`` value
        that is also produced by an element of ``other``."""

        def iterate() -> Iterator[Any]:
            return _matching(self, _keys(other, selector), selector)

        return self._derive(iterate)