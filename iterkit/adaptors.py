"""Basic iterator adaptors: put-back, interleaving, products, stepping and merging."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from itertools import islice
from typing import Any

_MISSING = object()


class PutBack:
    """An iterator with a single slot for putting one value back in front."""

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._top: Any = _MISSING
        self._iter = iter(iterable)

    def with_value(self, value: Any) -> PutBack:
        """Put ``value`` back and return this iterator."""
        self.put_back(value)
        return self

    def into_parts(self) -> tuple[Any, Iterator[Any]]:
        """The put-back value (None when the slot is empty) and the inner iterator."""
        top = None if self._top is _MISSING else self._top
        return top, self._iter

    def put_back(self, value: Any) -> None:
        """Put ``value`` in front; a value already in the slot is overwritten."""
        self._top = value

    def __iter__(self) -> PutBack:
        return self

    def __next__(self) -> Any:
        if self._top is not _MISSING:
            value, self._top = self._top, _MISSING
            return value
        return next(self._iter)

    def __repr__(self) -> str:
        top = "<empty>" if self._top is _MISSING else repr(self._top)
        return f"PutBack(top={top}, iter={self._iter!r})"


def put_back(iterable: Iterable[Any]) -> PutBack:
    """A :class:`PutBack` over ``iterable``."""
    return PutBack(iterable)


def interleave(a: Iterable[Any], b: Iterable[Any]) -> Iterator[Any]:
    """Alternate elements of ``a`` and ``b`` until both run out."""
    current, other = iter(a), iter(b)
    while True:
        value = next(current, _MISSING)
        if value is _MISSING:
            yield from other
            return
        yield value
        current, other = other, current


def interleave_shortest(a: Iterable[Any], b: Iterable[Any]) -> Iterator[Any]:
    """Alternate elements of ``a`` and ``b`` until the next one to draw from runs out."""
    current, other = iter(a), iter(b)
    while True:
        value = next(current, _MISSING)
        if value is _MISSING:
            return
        yield value
        current, other = other, current


def cartesian_product(a: Iterable[Any], b: Iterable[Any]) -> Iterator[tuple[Any, Any]]:
    """Every pair ``(x, y)`` with ``x`` from ``a`` and ``y`` from ``b``, ``a`` varying slowest."""
    pool = tuple(b)
    if not pool:
        return
    for x in a:
        for y in pool:
            yield (x, y)


def batching(
    iterable: Iterable[Any], f: Callable[[Iterator[Any]], Any]
) -> Iterator[Any]:
    """Yield ``f(it)`` repeatedly, where ``f`` may take any number of elements from ``it``.

    Iteration stops when ``f`` returns None.
    """
    it = iter(iterable)
    while (value := f(it)) is not None:
        yield value


def step(iterable: Iterable[Any], n: int) -> Iterator[Any]:
    """Yield the first element, then every ``n``-th one after it.

    Raises ValueError if ``n`` is 0.
    """
    if n <= 0:
        raise ValueError("step must be positive")
    return islice(iterable, 0, None, n)


def merge_by(
    a: Iterable[Any], b: Iterable[Any], is_first: Callable[[Any, Any], bool]
) -> Iterator[Any]:
    """Merge two iterables, taking from ``a`` whenever ``is_first(x, y)`` holds."""
    it_a, it_b = iter(a), iter(b)
    x = next(it_a, _MISSING)
    y = next(it_b, _MISSING)
    while True:
        if x is _MISSING:
            if y is not _MISSING:
                yield y
                yield from it_b
            return
        if y is _MISSING:
            yield x
            yield from it_a
            return
        if is_first(x, y):
            yield x
            x = next(it_a, _MISSING)
        else:
            yield y
            y = next(it_b, _MISSING)


def merge(a: Iterable[Any], b: Iterable[Any]) -> Iterator[Any]:
    """Merge two ascending iterables into one ascending sequence; ties come from ``a`` first."""
    return merge_by(a, b, lambda x, y: x <= y)