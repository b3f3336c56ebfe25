"""A value that is one of two alternatives, left (A) or right (B)."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


class Either(Generic[A, B]):
    """Holds either a left value or a right value."""

    __slots__ = ("_left", "_value")

    def __init__(self, value: Any, left: bool) -> None:
        self._value = value
        self._left = left

    @classmethod
    def new_left(cls, value: A) -> "Either[A, B]":
        """Wrap ``value`` as the left alternative."""
        return cls(value, True)

    @classmethod
    def new_right(cls, value: B) -> "Either[A, B]":
        """Wrap ``value`` as the right alternative."""
        return cls(value, False)

    def is_left(self) -> bool:
        return self._left

    def is_right(self) -> bool:
        return not self._left

    def map(self, f1: Callable[[A], C], f2: Callable[[B], D]) -> "Either[C, D]":
        """Apply ``f1`` to a left value or ``f2`` to a right one, keeping the side."""
        if self._left:
            return Either(f1(self._value), True)
        return Either(f2(self._value), False)

    def convert(self, f1: Callable[[A], C], f2: Callable[[B], C]) -> C:
        """Collapse to a single value with ``f1`` or ``f2``."""
        return f1(self._value) if self._left else f2(self._value)

    def left_map(self, f: Callable[[A], C]) -> "Either[C, B]":
        """Apply ``f`` to a left value; a right value is kept as is."""
        if self._left:
            return Either(f(self._value), True)
        return Either(self._value, False)

    def right_map(self, f: Callable[[B], C]) -> "Either[A, C]":
        """Apply ``f`` to a right value; a left value is kept as is."""
        if self._left:
            return Either(self._value, True)
        return Either(f(self._value), False)

    def transpose(self) -> "Either[B, A]":
        """Swap the sides."""
        return Either(self._value, not self._left)

    def get_left(self) -> Optional[A]:
        """Return the left value, or ``None`` for a right one."""
        return self._value if self._left else None

    def get_right(self) -> Optional[B]:
        """Return the right value, or ``None`` for a left one."""
        return None if self._left else self._value

    def get(self) -> Any:
        """Return the held value whichever side it is on."""
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return self._left == other._left and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._left, self._value))

    def __repr__(self) -> str:
        side = "A" if self._left else "B"
        return f"Either.{side}(value={self._value!r})"