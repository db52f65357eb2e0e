"""Yield elements that occur more than once."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any


def duplicates_by(
    iterable: Iterable[Any], key: Callable[[Any], Hashable]
) -> Iterator[Any]:
    """Yield each element whose ``key`` has been seen exactly once before.

    Every duplicated key is reported once, with the element of its second
    occurrence. Keys must be hashable.
    """
    produced: dict[Hashable, bool] = {}
    for item in iterable:
        k = key(item)
        seen = produced.get(k)
        if seen is None:
            produced[k] = False
        elif not seen:
            produced[k] = True
            yield item


def duplicates(iterable: Iterable[Hashable]) -> Iterator[Any]:
    """Yield each element that occurs more than once, at its second occurrence."""
    return duplicates_by(iterable, lambda item: item)