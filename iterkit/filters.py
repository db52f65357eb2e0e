"""Filtering and element-wise adaptors: take-while with put-back, positions and more."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from itertools import combinations as _combinations
from typing import Any

from iterkit.adaptors import PutBack

_MISSING = object()


def take_while_ref(
    put_back_iter: PutBack, predicate: Callable[[Any], bool]
) -> Iterator[Any]:
    """Yield elements of ``put_back_iter`` while ``predicate`` holds.

    The first element that fails the predicate is put back, so the
    underlying iterator still yields it afterwards.
    """
    if not isinstance(put_back_iter, PutBack):
        raise TypeError("take_while_ref needs a PutBack iterator")
    return _take_while_ref(put_back_iter, predicate)


def _take_while_ref(
    it: PutBack, predicate: Callable[[Any], bool]
) -> Iterator[Any]:
    while True:
        value = next(it, _MISSING)
        if value is _MISSING:
            return
        if not predicate(value):
            it.put_back(value)
            return
        yield value


def while_some(iterable: Iterable[Any]) -> Iterator[Any]:
    """Yield elements until the first None, which is consumed but not yielded."""
    for value in iterable:
        if value is None:
            return
        yield value


def tuple_combinations(iterable: Iterable[Any], k: int) -> Iterator[tuple[Any, ...]]:
    """All ``k``-element combinations of ``iterable`` as tuples, in lexicographic order.

    Raises ValueError if ``k`` is less than 1.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    return _combinations(tuple(iterable), k)


def positions(
    iterable: Iterable[Any], predicate: Callable[[Any], bool]
) -> Iterator[int]:
    """Indices of the elements for which ``predicate`` holds."""
    for index, value in enumerate(iterable):
        if predicate(value):
            yield index


def update(iterable: Iterable[Any], f: Callable[[Any], Any]) -> Iterator[Any]:
    """Call ``f`` on each element (to mutate it in place), then yield the element."""
    for value in iterable:
        f(value)
        yield value