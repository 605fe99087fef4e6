"""Element-wise transformations of a query."""

from __future__ import annotations

from typing import Any, Callable, Iterator


class TransformMixin:
    """Operations that reshape, extend or project a query."""

    def append(self, item: Any):
        """Return a query with ``item`` added after the last element."""

        def iterate() -> Iterator[Any]:
            yield from self
            yield item

        return self._derive(iterate)

    def concat(self, other: Any):
        """Return a query over the elements of this query, then those of ``other``.

        Unlike a union, every element of both sequences is kept.
        """

        def iterate() -> Iterator[Any]:
            yield from self
            yield from other

        return self._derive(iterate)

    def prepend(self, item: Any):
        """Return a query with ``item`` placed before the first element."""

        def iterate() -> Iterator[Any]:
            yield item
            yield from self

        return self._derive(iterate)

    def default_if_empty(self, default_value: Any):
        """Return the elements of this query, or only ``default_value`` if it
        is empty."""

        def iterate() -> Iterator[Any]:
            empty = True
            for item in self:
                empty = False
                yield item
            if empty:
                yield default_value

        return self._derive(iterate)

    def reverse(self):
        """Return a query over the elements in reverse order of production."""

        def iterate() -> Iterator[Any]:
            return reversed(list(self))

        return self._derive(iterate)

    def select(self, selector: Callable[[Any], Any]):
        """Return a query with ``selector`` applied to every element."""

        def iterate() -> Iterator[Any]:
            return (selector(item) for item in self)

        return self._derive(iterate)

    def select_indexed(self, selector: Callable[[int, Any], Any]):
        """Return a query with ``selector(index, element)`` applied to every
        element, the index counting from zero."""

        def iterate() -> Iterator[Any]:
            return (selector(index, item) for index, item in enumerate(self))

        return self._derive(iterate)

    def index_of(self, predicate: Callable[[Any], bool]) -> int:
        """Return the zero-based index of the first element matching
        ``predicate``, or -1 if none does."""
        return next(
            (index for index, item in enumerate(self) if predicate(item)), -1
        )