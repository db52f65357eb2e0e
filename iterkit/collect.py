"""Collect an iterable into a single value or a grouped mapping."""

from __future__ import annotations

import copy
from collections import defaultdict
from collections.abc import Callable, Hashable, Iterable
from typing import Any


def concat(iterable: Iterable[Any]) -> Any:
    """Join all items by extending the first with each of the rest.

    Works for lists, tuples, strings, bytes and anything supporting ``+=``.
    The first item is not modified. An empty input gives an empty list.
    """
    it = iter(iterable)
    missing = object()
    first = next(it, missing)
    if first is missing:
        return []
    result = copy.copy(first)
    for item in it:
        result += item
    return result


def into_group_map(pairs: Iterable[tuple[Hashable, Any]]) -> dict[Any, list[Any]]:
    """Map each key to the list of its values, in the order they appear."""
    lookup: defaultdict[Any, list[Any]] = defaultdict(list)
    for key, value in pairs:
        lookup[key].append(value)
    return dict(lookup)


def into_group_map_by(
    iterable: Iterable[Any], key: Callable[[Any], Hashable]
) -> dict[Any, list[Any]]:
    """Group the items of ``iterable`` by ``key(item)``."""
    return into_group_map((key(value), value) for value in iterable)