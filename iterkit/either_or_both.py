"""A value holding a left value, a right value, or both."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


class EitherOrBoth:
    """Base of :class:`Left`, :class:`Right` and :class:`Both`."""

    __slots__ = ()

    def has_left(self) -> bool:
        """True for ``Left`` and ``Both``."""
        return isinstance(self, (Left, Both))

    def has_right(self) -> bool:
        """True for ``Right`` and ``Both``."""
        return isinstance(self, (Right, Both))

    def is_left(self) -> bool:
        """True only for ``Left``."""
        return isinstance(self, Left)

    def is_right(self) -> bool:
        """True only for ``Right``."""
        return isinstance(self, Right)

    def is_both(self) -> bool:
        """True only for ``Both``."""
        return isinstance(self, Both)

    def left(self) -> Any:
        """The left value of ``Left`` or ``Both``, otherwise None."""
        match self:
            case Left(value) | Both(value, _):
                return value
        return None

    def right(self) -> Any:
        """The right value of ``Right`` or ``Both``, otherwise None."""
        match self:
            case Right(value) | Both(_, value):
                return value
        return None

    def both(self) -> tuple[Any, Any] | None:
        """The pair held by ``Both``, otherwise None."""
        match self:
            case Both(a, b):
                return (a, b)
        return None

    def flip(self) -> EitherOrBoth:
        """Swap the left and right sides."""
        match self:
            case Left(a):
                return Right(a)
            case Right(b):
                return Left(b)
            case Both(a, b):
                return Both(b, a)
        raise TypeError(f"unexpected variant {self!r}")

    def map_left(self, f: Callable[[Any], Any]) -> EitherOrBoth:
        """Apply ``f`` to the left value, keeping the variant."""
        match self:
            case Both(a, b):
                return Both(f(a), b)
            case Left(a):
                return Left(f(a))
        return self

    def map_right(self, f: Callable[[Any], Any]) -> EitherOrBoth:
        """Apply ``f`` to the right value, keeping the variant."""
        match self:
            case Both(a, b):
                return Both(a, f(b))
            case Right(b):
                return Right(f(b))
        return self

    def map_any(self, f: Callable[[Any], Any], g: Callable[[Any], Any]) -> EitherOrBoth:
        """Apply ``f`` to the left value and ``g`` to the right value."""
        match self:
            case Left(a):
                return Left(f(a))
            case Right(b):
                return Right(g(b))
            case Both(a, b):
                return Both(f(a), g(b))
        raise TypeError(f"unexpected variant {self!r}")

    def left_and_then(self, f: Callable[[Any], EitherOrBoth]) -> EitherOrBoth:
        """Replace the whole value by ``f(left)`` when a left value is present."""
        match self:
            case Left(a) | Both(a, _):
                return f(a)
        return self

    def right_and_then(self, f: Callable[[Any], EitherOrBoth]) -> EitherOrBoth:
        """Replace the whole value by ``f(right)`` when a right value is present."""
        match self:
            case Right(b) | Both(_, b):
                return f(b)
        return self

    def or_values(self, left_default: Any, right_default: Any) -> tuple[Any, Any]:
        """A pair, filling a missing side with the given default."""
        match self:
            case Left(a):
                return (a, right_default)
            case Right(b):
                return (left_default, b)
            case Both(a, b):
                return (a, b)
        raise TypeError(f"unexpected variant {self!r}")

    def or_default(self) -> tuple[Any, Any]:
        """A pair, filling a missing side with None."""
        return self.or_values(None, None)

    def or_else(
        self,
        left_factory: Callable[[], Any],
        right_factory: Callable[[], Any],
    ) -> tuple[Any, Any]:
        """A pair, computing a missing side lazily with its factory."""
        match self:
            case Left(a):
                return (a, right_factory())
            case Right(b):
                return (left_factory(), b)
            case Both(a, b):
                return (a, b)
        raise TypeError(f"unexpected variant {self!r}")

    def reduce(self, f: Callable[[Any, Any], Any]) -> Any:
        """The single value held, or ``f(left, right)`` for ``Both``."""
        match self:
            case Left(a):
                return a
            case Right(b):
                return b
            case Both(a, b):
                return f(a, b)
        raise TypeError(f"unexpected variant {self!r}")


@dataclass(frozen=True)
class Left(EitherOrBoth):
    """Only a left value is present."""

    value: Any


@dataclass(frozen=True)
class Right(EitherOrBoth):
    """Only a right value is present."""

    value: Any


@dataclass(frozen=True)
class Both(EitherOrBoth):
    """Both a left value ``a`` and a right value ``b`` are present."""

    a: Any
    b: Any