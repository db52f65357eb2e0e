"""Cartesian products of many iterables and flattening of nested product tuples."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import product
from typing import Any


def multi_cartesian_product(iterables: Iterable[Iterable[Any]]) -> Iterator[list[Any]]:
    """Every combination taking one element from each iterable, as lists.

    The rightmost iterable varies fastest. An empty collection of iterables,
    or any empty iterable among them, gives no items at all.
    """
    pools = [tuple(it) for it in iterables]
    if not pools:
        return
    for combo in product(*pools):
        yield list(combo)


def cons_tuples(iterable: Iterable[tuple[tuple[Any, ...], Any]]) -> Iterator[tuple[Any, ...]]:
    """Turn items shaped like ``((a, b), c)`` into flat tuples ``(a, b, c)``."""
    for head, last in iterable:
        yield (*head, last)