"""Lazy k-length combinations, with and without replacement."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any

_MISSING = object()


class _LazyBuffer:
    """Elements drawn so far from an iterator, drawn on demand."""

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._it = iter(iterable)
        self.items: list[Any] = []

    def __len__(self) -> int:
        return len(self.items)

    def get_next(self) -> bool:
        value = next(self._it, _MISSING)
        if value is _MISSING:
            return False
        self.items.append(value)
        return True

    def prefill(self, count: int) -> None:
        missing = count - len(self.items)
        if missing > 0:
            self.items.extend(islice(self._it, missing))

    def pick(self, indices: list[int]) -> list[Any]:
        return [self.items[i] for i in indices]


class Combinations:
    """Iterator over all ``k``-length combinations, drawing input only as needed."""

    def __init__(self, iterable: Iterable[Any], k: int) -> None:
        if k < 0:
            raise ValueError("k must not be negative")
        self._pool = _LazyBuffer(iterable)
        self._pool.prefill(k)
        self._indices = list(range(k))
        self._first = True

    def k(self) -> int:
        """Length of each combination."""
        return len(self._indices)

    def n(self) -> int:
        """Number of input elements drawn so far; grows during iteration."""
        return len(self._pool)

    def __iter__(self) -> Combinations:
        return self

    def __next__(self) -> list[Any]:
        indices = self._indices
        if self._first:
            if self.k() > self.n():
                raise StopIteration
            self._first = False
        elif not indices:
            raise StopIteration
        else:
            i = len(indices) - 1
            if indices[i] == len(self._pool) - 1:
                self._pool.get_next()
            while indices[i] == i + len(self._pool) - len(indices):
                if i == 0:
                    raise StopIteration
                i -= 1
            indices[i] += 1
            for j in range(i + 1, len(indices)):
                indices[j] = indices[j - 1] + 1
        return self._pool.pick(indices)


def combinations(iterable: Iterable[Any], k: int) -> Combinations:
    """All ``k``-length combinations of ``iterable`` as lists, in lexicographic index order."""
    return Combinations(iterable, k)


def combinations_with_replacement(iterable: Iterable[Any], k: int) -> Iterator[list[Any]]:
    """All ``k``-length combinations with repeated elements allowed, as lists."""
    if k < 0:
        raise ValueError("k must not be negative")
    pool = _LazyBuffer(iterable)
    indices = [0] * k
    if indices and not pool.get_next():
        return
    yield pool.pick(indices)
    while True:
        pool.get_next()
        last = len(pool) - 1
        position = next(
            (i for i in reversed(range(len(indices))) if indices[i] < last), None
        )
        if position is None:
            return
        value = indices[position] + 1
        indices[position:] = [value] * (len(indices) - position)
        yield pool.pick(indices)