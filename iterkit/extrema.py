"""All minimal or maximal elements of an iterable."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _identity(value: Any) -> Any:
    return value


def _min_set_impl(
    iterable: Iterable[Any],
    key_for: Callable[[Any], Any],
    compare: Callable[[Any, Any, Any, Any], int],
) -> list[Any]:
    it = iter(iterable)
    missing = object()
    first = next(it, missing)
    if first is missing:
        return []
    current_key = key_for(first)
    result = [first]
    for element in it:
        key = key_for(element)
        order = compare(element, result[0], key, current_key)
        if order < 0:
            result = [element]
            current_key = key
        elif order == 0:
            result.append(element)
    return result


def _max_set_impl(
    iterable: Iterable[Any],
    key_for: Callable[[Any], Any],
    compare: Callable[[Any, Any, Any, Any], int],
) -> list[Any]:
    return _min_set_impl(
        iterable, key_for, lambda e1, e2, k1, k2: compare(e2, e1, k2, k1)
    )


def min_set(iterable: Iterable[Any], key: Callable[[Any], Any] | None = None) -> list[Any]:
    """Every element whose key is minimal, in their original order."""
    return _min_set_impl(iterable, key or _identity, lambda _a, _b, k1, k2: _cmp(k1, k2))


def max_set(iterable: Iterable[Any], key: Callable[[Any], Any] | None = None) -> list[Any]:
    """Every element whose key is maximal, in their original order."""
    return _max_set_impl(iterable, key or _identity, lambda _a, _b, k1, k2: _cmp(k1, k2))


def min_set_by(iterable: Iterable[Any], compare: Callable[[Any, Any], int]) -> list[Any]:
    """Every minimal element under ``compare``, a function returning <0, 0 or >0."""
    return _min_set_impl(iterable, _identity, lambda a, b, _k1, _k2: compare(a, b))


def max_set_by(iterable: Iterable[Any], compare: Callable[[Any, Any], int]) -> list[Any]:
    """Every maximal element under ``compare``, a function returning <0, 0 or >0."""
    return _max_set_impl(iterable, _identity, lambda a, b, _k1, _k2: compare(a, b))