# iterkit

Iterator adaptors and helpers that work on any Python iterable. They are lazy
wherever that is possible. The package uses only the standard library.

## Installation

```
pip install iterkit
```

To run the test suite, install the test extra and then run pytest:

```
pip install "iterkit[test]"
pytest
```

## Modules

- `iterkit.either_or_both`: the value types `Left(value)`, `Right(value)` and
  `Both(a, b)`, which share the base class `EitherOrBoth`. Their methods are
  `has_left`, `has_right`, `is_left`, `is_right`, `is_both`, `left`, `right`,
  `both`, `flip`, `map_left`, `map_right`, `map_any`, `left_and_then`,
  `right_and_then`, `or_values`, `or_default` (a missing side becomes `None`),
  `or_else` and `reduce`.
- `iterkit.exactly_one`: `exactly_one(iterable)` returns the single element of
  the iterable. Otherwise it raises `ExactlyOneError`, which is a `ValueError`.
  The error is also an iterator over every element of the input, including the
  ones that were consumed during the check.
- `iterkit.extrema`: `min_set(iterable, key=None)` and
  `max_set(iterable, key=None)` return every element that ties for the minimum
  or the maximum, in input order. `min_set_by` and `max_set_by` do the same
  with a comparison function that returns a negative number, zero or a
  positive number.
- `iterkit.collect`:
  - `concat(iterable)` joins the items with `+=`, starting from a copy of the
    first item. An empty input gives `[]`.
  - `into_group_map(pairs)` builds a dict that maps each key to the list of its
    values.
  - `into_group_map_by(iterable, key)` groups the items by `key(item)`.
- `iterkit.adaptors`:
  - `put_back` returns a `PutBack` iterator. It has one slot, filled with
    `put_back(value)` or `with_value(value)`, and `into_parts()` returns the
    slot and the inner iterator.
  - `interleave` and `interleave_shortest` alternate the elements of two
    iterables.
  - `cartesian_product` yields pairs.
  - `batching(iterable, f)` yields the results of `f(it)` until `f` returns
    `None`.
  - `step(iterable, n)` yields every `n`-th element. It raises `ValueError`
    when `n` is not positive.
  - `merge` and `merge_by` merge two iterables in order.
- `iterkit.diff`: `diff_with(i, j, is_equal=operator.eq)` compares two
  iterables in lock step. It returns `FirstMismatch`, `Shorter` or `Longer`,
  each holding the index and `PutBack` iterators over what remains. It returns
  `None` when the two are equal.
- `iterkit.combinations`:
  - `combinations(iterable, k)` returns a `Combinations` iterator that yields
    lists and reads its input only as needed. `k()` gives the combination
    length and `n()` the number of elements read so far.
  - `combinations_with_replacement(iterable, k)` yields lists in which elements
    may repeat.
- `iterkit.filters`:
  - `take_while_ref(put_back_iter, predicate)` takes elements from a `PutBack`
    iterator and puts back the first element that fails the predicate.
  - `while_some` stops at the first `None`.
  - `tuple_combinations(iterable, k)` yields tuples and raises `ValueError` for
    `k < 1`.
  - `positions` yields the indices of the elements that match a predicate.
  - `update` calls a function on each element before yielding it.
- `iterkit.products`:
  - `multi_cartesian_product(iterables)` yields lists, with the rightmost
    iterable varying fastest. It yields nothing when there are no iterables.
  - `cons_tuples` turns items such as `((a, b), c)` into `(a, b, c)`.
- `iterkit.groupby`:
  - `group_by(iterable, key)` returns a `GroupBy` that yields `(key, Group)`
    pairs for runs of consecutive elements with equal keys.
  - `chunks(iterable, size)` returns an `IntoChunks` that yields `Chunk`
    iterators of at most `size` elements. It raises `ValueError` for
    `size < 1`.

  Elements are buffered only when a later group is requested while an earlier
  group still has unread elements.
- `iterkit.duplicates`: `duplicates(iterable)` and `duplicates_by(iterable, key)`
  yield each repeated element once, at its second occurrence.

## Examples

```python
from iterkit.groupby import group_by, chunks
from iterkit.combinations import combinations
from iterkit.exactly_one import exactly_one, ExactlyOneError
from iterkit.extrema import max_set

for key, group in group_by([1, 3, 2, 4, 5], key=lambda x: x % 2):
    print(key, list(group))              # 1 [1, 3] / 0 [2, 4] / 1 [5]

print([list(c) for c in chunks(range(5), 2)])   # [[0, 1], [2, 3], [4]]
print(list(combinations(range(3), 2)))          # [[0, 1], [0, 2], [1, 2]]
print(max_set(["a", "bb", "cc"], key=len))      # ['bb', 'cc']

try:
    exactly_one([1, 2, 3])
except ExactlyOneError as err:
    print(list(err))                     # [1, 2, 3]
```

## What the package does not do

iterkit has no lazy formatting or string-joining helpers. It has no `Ok`/`Err`
result types and no adaptors that map, filter or flatten such results. It does
not coalesce or deduplicate runs of consecutive elements. It has no command
line: it is a library only.