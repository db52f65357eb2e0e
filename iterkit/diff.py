"""Compare two iterables in lock-step and report how they first differ."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from iterkit.adaptors import PutBack, put_back

_MISSING = object()


@dataclass
class FirstMismatch:
    """Elements at ``index`` differ; both remainders start with the mismatching elements."""

    index: int
    remaining_i: PutBack
    remaining_j: PutBack


@dataclass
class Shorter:
    """``j`` held only ``index`` elements; ``remaining_i`` holds the rest of ``i``."""

    index: int
    remaining_i: PutBack


@dataclass
class Longer:
    """``i`` held only ``index`` elements; ``remaining_j`` holds the rest of ``j``."""

    index: int
    remaining_j: PutBack


def diff_with(
    i: Iterable[Any],
    j: Iterable[Any],
    is_equal: Callable[[Any, Any], bool] = operator.eq,
) -> FirstMismatch | Shorter | Longer | None:
    """Describe how ``j`` differs from ``i``, or return None if they are equal."""
    it_i, it_j = iter(i), iter(j)
    index = 0
    for a in it_i:
        b = next(it_j, _MISSING)
        if b is _MISSING:
            return Shorter(index, put_back(it_i).with_value(a))
        if not is_equal(a, b):
            return FirstMismatch(
                index,
                put_back(it_i).with_value(a),
                put_back(it_j).with_value(b),
            )
        index += 1
    b = next(it_j, _MISSING)
    if b is _MISSING:
        return None
    return Longer(index, put_back(it_j).with_value(b))