"""Take the single element of an iterable, or fail with the elements kept."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class ExactlyOneError(ValueError):
    """Raised when an iterable does not hold exactly one element.

    The error is itself an iterator over every element of the original
    iterable, including the ones already consumed while checking.
    """

    def __init__(self, first_two: tuple[Any, ...], rest: Iterator[Any]) -> None:
        if first_two:
            message = "got at least 2 elements when exactly one was expected"
        else:
            message = "got zero elements when exactly one was expected"
        super().__init__(message)
        self._pending = list(first_two)
        self._rest = rest

    def __iter__(self) -> ExactlyOneError:
        return self

    def __next__(self) -> Any:
        if self._pending:
            return self._pending.pop(0)
        return next(self._rest)

    def __repr__(self) -> str:
        return f"ExactlyOneError(pending={self._pending!r}, rest={self._rest!r})"


def exactly_one(iterable: Iterable[Any]) -> Any:
    """Return the only element of ``iterable``; raise :class:`ExactlyOneError` otherwise."""
    it = iter(iterable)
    missing = object()
    first = next(it, missing)
    if first is missing:
        raise ExactlyOneError((), it)
    second = next(it, missing)
    if second is missing:
        return first
    raise ExactlyOneError((first, second), it)