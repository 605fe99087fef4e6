"""Grouping and joining of queries by key."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from .core import Group

Selector = Callable[[Any], Any]


def _lookup(items: Any, key_selector: Selector) -> dict[Any, list[Any]]:
    """Collect ``items`` into lists keyed by ``key_selector``, keeping order."""
    table: dict[Any, list[Any]] = {}
    for item in items:
        table.setdefault(key_selector(item), []).append(item)
    return table


class GroupingMixin:
    """Group-by and join operations for queries."""

    def group_by(self, key_selector: Selector, element_selector: Selector):
        """Return a query of :class:`Group` values, one for each key that
        ``key_selector`` produces, holding the projected elements that share
        that key."""

        def iterate() -> Iterator[Any]:
            groups: dict[Any, list[Any]] = {}
            for item in self:
                groups.setdefault(key_selector(item), []).append(
                    element_selector(item)
                )
            return (Group(key, members) for key, members in groups.items())

        return self._derive(iterate)

    def group_join(
        self,
        inner: Any,
        outer_key_selector: Selector,
        inner_key_selector: Selector,
        result_selector: Callable[[Any, list[Any]], Any],
    ):
        """Return one result per outer element, built by ``result_selector``
        from that element and the list of inner elements with a matching key.

        The order of the outer elements, and of the inner elements within
        each list, is preserved. Outer elements without matches receive an
        empty list.
        """

        def iterate() -> Iterator[Any]:
            table = _lookup(inner, inner_key_selector)
            return (
                result_selector(outer, list(table.get(outer_key_selector(outer), [])))
                for outer in self
            )

        return self._derive(iterate)

    def join(
        self,
        inner: Any,
        outer_key_selector: Selector,
        inner_key_selector: Selector,
        result_selector: Callable[[Any, Any], Any],
    ):
        """Return ``result_selector(outer, inner)`` for every pair of outer
        and inner elements whose keys match.

        Outer order is preserved, and for each outer element the matching
        inner elements follow their original order.
        """

        def iterate() -> Iterator[Any]:
            table = _lookup(inner, inner_key_selector)
            for outer in self:
                for match in table.get(outer_key_selector(outer), ()):
                    yield result_selector(outer, match)

        return self._derive(iterate)