"""Query types and the functions that start a query from a data source."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from .aggregate import AggregateMixin
from .core import KeyValue, QueryBase
from .grouping import GroupingMixin
from .ordering import OrderedMixin, OrderingMixin
from .results import ResultsMixin
from .sets import SetMixin
from .transform import TransformMixin


class Query(
    AggregateMixin,
    TransformMixin,
    SetMixin,
    GroupingMixin,
    OrderingMixin,
    ResultsMixin,
    QueryBase,
):
    """A lazily evaluated sequence supporting the full set of query operations."""


class OrderedQuery(OrderedMixin, Query):
    """A query sorted by one or more keys, which can be refined with
    ``then_by`` and ``then_by_descending``."""


Query._ordered_type = OrderedQuery


def _has_iterate(source: Any) -> bool:
    return callable(getattr(source, "iterate", None))


def from_(source: Any) -> Query:
    """Start a query over ``source``.

    Strings yield their characters, mappings yield :class:`KeyValue` pairs,
    objects with an ``iterate()`` method are delegated to
    :func:`from_iterable`, and any other iterable yields its items. A one-shot
    iterator, such as a generator, is consumed by the first iteration.
    """
    if isinstance(source, str):
        return from_string(source)
    if isinstance(source, Mapping):

        def pairs() -> Iterator[KeyValue]:
            return (KeyValue(key, value) for key, value in source.items())

        return Query(pairs)
    if _has_iterate(source):
        return from_iterable(source)
    if isinstance(source, Iterable):
        return Query(lambda: source)
    raise TypeError(f"cannot query a value of type {type(source).__name__!r}")


def from_string(source: str) -> Query:
    """Start a query over the characters of ``source``."""
    characters = tuple(source)
    return Query(lambda: characters)


def from_iterable(source: Any) -> Query:
    """Start a query over a custom collection.

    ``source`` is either an object whose ``iterate()`` method returns an
    iterable of its elements, or a plain iterable.
    """
    if _has_iterate(source):
        return Query(source.iterate)
    if isinstance(source, Iterable):
        return Query(lambda: source)
    raise TypeError(
        f"value of type {type(source).__name__!r} is not an iterable collection"
    )


def range_(start: int, count: int) -> Query:
    """Return a query of ``count`` consecutive integers beginning at ``start``."""
    return Query(lambda: range(start, start + count))


def repeat(value: Any, count: int) -> Query:
    """Return a query that yields ``value`` ``count`` times."""
    return Query(lambda: itertools.repeat(value, max(count, 0)))