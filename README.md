# linqpy

Lazy, chainable query operators for Python iterables: projection, set
operations, grouping, joins, ordering and aggregation, in the style of
language-integrated queries.

Queries are lazy and re-iterable: each time you iterate a query (or call a
result method on it), it walks its source again from the beginning. A
one-shot source such as a generator is used up by the first walk.

## Installation

```
pip install linqpy
```

## Building queries

The functions that start a query live in `linqpy.query`:

```python
from linqpy.query import from_, from_string, from_iterable, range_, repeat

from_([1, 2, 3])          # lists, tuples and other iterables
from_({"a": 1})           # mappings yield KeyValue(key, value) pairs
from_("str")              # strings yield their characters
from_string("str")
from_iterable(my_object)  # an object with an iterate() method, or any iterable
range_(-2, 5)             # -2, -1, 0, 1, 2
repeat("x", 3)            # "x", "x", "x"
```

Each returns a `linqpy.query.Query`. A `Query` is itself iterable, so it can
be used in a `for` loop or passed wherever an iterable is expected, including
as the second sequence of `concat`, `join` and the set operations.

`KeyValue` and `Group` are frozen/plain dataclasses in `linqpy.core`, with
fields `key`/`value` and `key`/`group` respectively.

## Chaining operators

```python
from linqpy.query import from_

q = (
    from_([5, 3, 8, 3, 1])
    .distinct()
    .select(lambda x: x * 10)
    .order_by(lambda x: x)
)
print(q.to_list())    # [10, 30, 50, 80]
```

Operators that return a new query:

- Projection and shaping: `select(selector)`, `select_indexed(selector)`
  (called as `selector(index, item)`), `append(item)`, `prepend(item)`,
  `concat(other)`, `default_if_empty(default_value)`, `reverse()`.
- Sets: `distinct()`, `distinct_by(selector)`, `except_(other)`,
  `except_by(other, selector)`, `intersect(other)`,
  `intersect_by(other, selector)`. Elements (or selected keys) must be
  hashable. `except_` keeps duplicates from the first sequence; `intersect`
  yields each matching value once.
- Grouping and joins: `group_by(key_selector, element_selector)` yields
  `Group(key, group)` values in order of first appearance of each key;
  `join(inner, outer_key_selector, inner_key_selector, result_selector)`
  yields one result per matching pair; `group_join(...)` calls
  `result_selector(outer, matching_inners)` once per outer element, with an
  empty list when nothing matches.
- Ordering: `order_by(selector)` and `order_by_descending(selector)` return
  an `OrderedQuery`, which adds `then_by(selector)` and
  `then_by_descending(selector)` for further keys. `sort(less)` sorts by a
  `less(a, b)` function. On an `OrderedQuery`, `distinct()` drops adjacent
  equal elements, which, the elements being sorted, removes all duplicates.

## Getting results

```python
from linqpy.query import from_

q = from_([1, 2, 2, 3, 1])

q.count()                          # 5
q.count_with(lambda x: x <= 2)     # 4
q.first(), q.last()                # 1, 1
q.first_with(lambda x: x > 2)      # 3
q.max(), q.min()                   # 3, 1
q.sum_ints()                       # 9
q.average()                        # 1.8
q.any(), q.all(lambda x: x > 0)    # True, True
q.contains(3)                      # True
q.index_of(lambda x: x == 3)       # 3
q.single_with(lambda x: x > 2)     # 3
q.aggregate(lambda acc, x: acc + x)                # 9
q.aggregate_with_seed(10, lambda acc, x: acc + x)  # 19
q.to_list()                        # [1, 2, 2, 3, 1]
```

Other result methods: `any_with(predicate)`, `last_with(predicate)`,
`single()`, `sequence_equal(other)`, `results()` (same as `to_list()`),
`for_each(action)`, `for_each_indexed(action)`,
`aggregate_with_seed_by(seed, f, result_selector)`, `sum_uints()` and
`sum_floats()`.

Methods that look for one element (`first`, `last`, `single`, `max`, `min`,
`aggregate` and the `_with` forms) return `None` when there is no such
element; `single` and `single_with` also return `None` when there is more
than one. `index_of` returns `-1` when nothing matches. `average` of an
empty query is `nan`.

`sum_ints` wraps its result to a signed 64-bit integer and `sum_uints` to an
unsigned one; `sum_uints` raises `ValueError` for negative elements. The sum
and average methods raise `TypeError` for non-numeric elements.

Dictionaries are built with `to_map(result=None)`, from `KeyValue` elements,
or `to_map_by(key_selector, value_selector, result=None)`. An existing dict
passed as `result` is filled without being emptied first, and returned.

## Custom ordering

Values compared by `order_by`, `max` and `min` may be numbers, strings,
booleans (`False` before `True`), or instances of a subclass of
`linqpy.compare.Comparable` that implements `compare_to(other)`, returning a
negative number, zero or a positive number. `linqpy.compare.get_comparer(value)`
returns the three-way comparison function used for a given value. Other
values raise `TypeError` when compared.

## What is not included

There is no filtering operator (such as `where`), no skipping or taking of a
number of elements, no union, and no flattening projection. Filter with a
generator expression before building the query when you need it.