"""Lazy grouping of consecutive elements by key, and lazy fixed-size chunking.

Groups share one underlying iterator. Elements are buffered only when a
later group is requested while an earlier group still has unread elements;
groups that are consumed in order, or discarded unread, need no buffering.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any

_MISSING = object()


class _ChunkIndex:
    """Key function that numbers consecutive runs of ``size`` elements."""

    def __init__(self, size: int) -> None:
        self._size = size
        self._index = 0
        self._key = 0

    def __call__(self, _element: Any) -> int:
        if self._index == self._size:
            self._key += 1
            self._index = 0
        self._index += 1
        return self._key


class _GroupInner:
    """Shared state driving every group iterator of one grouping."""

    def __init__(self, iterable: Iterable[Any], key: Callable[[Any], Any]) -> None:
        self._key = key
        self._iter = iter(iterable)
        self._current_key: Any = _MISSING
        self._current_elt: Any = _MISSING
        self._done = False
        # Index of the group being buffered or visited.
        self._top_group = 0
        # Least group index that still has buffered elements.
        self._oldest_buffered_group = 0
        # Group index held by ``_buffer[0]``.
        self._bottom_group = 0
        self._buffer: list[deque[Any]] = []
        # Highest index of a group that was discarded, or None.
        self._dropped_group: int | None = None

    def step(self, client: int) -> Any:
        """Next element of group ``client``, or ``_MISSING`` when it is finished."""
        if client < self._oldest_buffered_group:
            return _MISSING
        if client < self._top_group or (
            client == self._top_group
            and len(self._buffer) > self._top_group - self._bottom_group
        ):
            return self._lookup_buffer(client)
        if self._done:
            return _MISSING
        if self._top_group == client:
            return self._step_current()
        return self._step_buffering()

    def _lookup_buffer(self, client: int) -> Any:
        if client < self._oldest_buffered_group:
            return _MISSING
        bufidx = client - self._bottom_group
        elt: Any = _MISSING
        if bufidx < len(self._buffer) and self._buffer[bufidx]:
            elt = self._buffer[bufidx].popleft()
        if elt is _MISSING and client == self._oldest_buffered_group:
            self._oldest_buffered_group += 1
            while True:
                idx = self._oldest_buffered_group - self._bottom_group
                if idx < len(self._buffer) and not self._buffer[idx]:
                    self._oldest_buffered_group += 1
                else:
                    break
            nclear = self._oldest_buffered_group - self._bottom_group
            if nclear > 0 and nclear >= len(self._buffer) // 2:
                del self._buffer[:nclear]
                self._bottom_group = self._oldest_buffered_group
        return elt

    def _next_element(self) -> Any:
        elt = next(self._iter, _MISSING)
        if elt is _MISSING:
            self._done = True
        return elt

    def _keeps_top_group(self) -> bool:
        return self._top_group != self._dropped_group

    def _step_buffering(self) -> Any:
        # A later group was requested: read the rest of the current group
        # into the buffer (unless it was discarded) up to the next group.
        group: list[Any] = []
        if self._current_elt is not _MISSING:
            if self._keeps_top_group():
                group.append(self._current_elt)
            self._current_elt = _MISSING

        first_elt: Any = _MISSING
        while (elt := self._next_element()) is not _MISSING:
            key = self._key(elt)
            if self._current_key is not _MISSING and self._current_key != key:
                self._current_key = key
                first_elt = elt
                break
            self._current_key = key
            if self._keeps_top_group():
                group.append(elt)

        if self._keeps_top_group():
            self._push_next_group(group)
        if first_elt is not _MISSING:
            self._top_group += 1
        return first_elt

    def _push_next_group(self, group: list[Any]) -> None:
        while self._top_group - self._bottom_group > len(self._buffer):
            if not self._buffer:
                self._bottom_group += 1
                self._oldest_buffered_group += 1
            else:
                self._buffer.append(deque())
        self._buffer.append(deque(group))

    def _step_current(self) -> Any:
        if self._current_elt is not _MISSING:
            elt, self._current_elt = self._current_elt, _MISSING
            return elt
        elt = self._next_element()
        if elt is _MISSING:
            return _MISSING
        key = self._key(elt)
        if self._current_key is not _MISSING and self._current_key != key:
            self._current_key = key
            self._current_elt = elt
            self._top_group += 1
            return _MISSING
        self._current_key = key
        return elt

    def group_key(self) -> Any:
        """Key of the group whose first element was just returned."""
        old_key = self._current_key
        self._current_key = _MISSING
        elt = self._next_element()
        if elt is not _MISSING:
            key = self._key(elt)
            if old_key != key:
                self._top_group += 1
            self._current_key = key
            self._current_elt = elt
        return old_key

    def drop_group(self, client: int) -> None:
        """Record that group ``client`` can no longer be read."""
        if self._dropped_group is None or client > self._dropped_group:
            self._dropped_group = client


class _GroupIter:
    """Iterator over the elements of one group or chunk."""

    def __init__(self, inner: _GroupInner, index: int, first: Any) -> None:
        self._inner = inner
        self._index = index
        self._first = first

    def __iter__(self) -> _GroupIter:
        return self

    def __next__(self) -> Any:
        if self._first is not _MISSING:
            elt, self._first = self._first, _MISSING
            return elt
        elt = self._inner.step(self._index)
        if elt is _MISSING:
            raise StopIteration
        return elt

    def __del__(self) -> None:
        inner = getattr(self, "_inner", None)
        if inner is not None:
            inner.drop_group(self._index)


class Group(_GroupIter):
    """Iterator over the elements of a single group."""

    def __iter__(self) -> Group:
        return self

    def __next__(self) -> Any:
        return super().__next__()


class Chunk(_GroupIter):
    """Iterator over the elements of a single chunk."""

    def __iter__(self) -> Chunk:
        return self

    def __next__(self) -> Any:
        return super().__next__()


class GroupBy:
    """Lazy grouping of consecutive elements with equal keys.

    Iterating yields ``(key, group)`` pairs. Every iteration shares the same
    position, so a second ``for`` loop continues where the first stopped.
    """

    def __init__(self, iterable: Iterable[Any], key: Callable[[Any], Any]) -> None:
        self._inner = _GroupInner(iterable, key)
        self._index = 0

    def __iter__(self) -> Iterator[tuple[Any, Group]]:
        while True:
            index = self._index
            self._index += 1
            elt = self._inner.step(index)
            if elt is _MISSING:
                return
            key = self._inner.group_key()
            yield key, Group(self._inner, index, elt)


class IntoChunks:
    """Lazy splitting into consecutive chunks of at most ``size`` elements.

    Iterating yields :class:`Chunk` iterators; every iteration shares the
    same position.
    """

    def __init__(self, iterable: Iterable[Any], size: int) -> None:
        if size < 1:
            raise ValueError("chunk size must be at least 1")
        self._inner = _GroupInner(iterable, _ChunkIndex(size))
        self._index = 0

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            index = self._index
            self._index += 1
            elt = self._inner.step(index)
            if elt is _MISSING:
                return
            yield Chunk(self._inner, index, elt)


def group_by(iterable: Iterable[Any], key: Callable[[Any], Any]) -> GroupBy:
    """Group consecutive elements of ``iterable`` for which ``key`` gives equal values."""
    return GroupBy(iterable, key)


def chunks(iterable: Iterable[Any], size: int) -> IntoChunks:
    """Split ``iterable`` lazily into chunks of ``size`` elements; the last may be shorter.

    Raises ValueError if ``size`` is less than 1.
    """
    return IntoChunks(iterable, size)