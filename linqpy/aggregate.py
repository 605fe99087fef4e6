"""Accumulating a query into a single value."""

from __future__ import annotations

from typing import Any, Callable

Accumulator = Callable[[Any, Any], Any]


class AggregateMixin:
    """Aggregation operations for queries."""

    def aggregate(self, f: Accumulator) -> Any:
        """Fold the elements with ``f``, starting from the first element.

        ``f(accumulated, current)`` is called for every element but the first.
        Returns ``None`` for an empty query.
        """
        items = iter(self)
        sentinel = object()
        result = next(items, sentinel)
        if result is sentinel:
            return None
        for current in items:
            result = f(result, current)
        return result

    def aggregate_with_seed(self, seed: Any, f: Accumulator) -> Any:
        """Fold the elements with ``f``, starting from ``seed``."""
        result = seed
        for current in self:
            result = f(result, current)
        return result

    def aggregate_with_seed_by(
        self,
        seed: Any,
        f: Accumulator,
        result_selector: Callable[[Any], Any],
    ) -> Any:
        """Fold the elements from ``seed`` and pass the outcome through
        ``result_selector``."""
        return result_selector(self.aggregate_with_seed(seed, f))