"""A slot that holds at most one value, written under a lock."""

from __future__ import annotations

import threading
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class AssignOnce(Generic[T]):
    """A value cell that starts empty and is filled by :meth:`set`.

    Reads take no lock. Writes are serialised, and a later write
    replaces an earlier one.
    """

    __slots__ = ("_value", "_lock")

    def __init__(self) -> None:
        self._value: Optional[T] = None
        self._lock = threading.Lock()

    def get(self) -> Optional[T]:
        """Return the stored value, or ``None`` if nothing was set yet."""
        return self._value

    def set(self, value: T) -> None:
        """Store ``value``."""
        with self._lock:
            self._value = value

    def __repr__(self) -> str:
        return f"AssignOnce({self._value!r})"