"""Core data types shared by every query operation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator

Iterate = Callable[[], Iterable[Any]]


@dataclass(frozen=True)
class KeyValue:
    """A key and its value, as produced when a query iterates over a mapping."""

    key: Any
    value: Any


@dataclass
class Group:
    """The elements that share a key, as produced by grouping."""

    key: Any
    group: list[Any] = field(default_factory=list)


class QueryBase:
    """A lazily evaluated, re-iterable sequence.

    ``iterate`` is called afresh every time the query is iterated and must
    return an iterable over the elements.
    """

    def __init__(self, iterate: Iterate) -> None:
        self.iterate = iterate

    def __iter__(self) -> Iterator[Any]:
        return iter(self.iterate())

    def _derive(self, iterate: Iterate) -> QueryBase:
        """Build a new query of the same kind over ``iterate``."""
        return type(self)(iterate)