"""A fixed-size bitmap backed by a byte array, least significant bit first."""

from __future__ import annotations

from itertools import groupby
from typing import Callable, Optional


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


class Bitmap:
    """A bitmap of ``size`` bits stored in little-endian bit order."""

    __slots__ = ("_size", "_data")

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("bitmap size must not be negative")
        self._size = size
        self._data = bytearray(_ceil_div(size, 8))

    @classmethod
    def _build(cls, size: int, data: bytearray) -> "Bitmap":
        bitmap = cls.__new__(cls)
        bitmap._size = size
        bitmap._data = data
        return bitmap

    @classmethod
    def with_size_multiple(cls, size: int, multiple: int) -> "Bitmap":
        """Create a cleared bitmap whose byte storage is a multiple of ``multiple``."""
        if size < 0:
            raise ValueError("bitmap size must not be negative")
        if multiple <= 0:
            raise ValueError("multiple must be positive")
        needed = _ceil_div(size, 8)
        length = _ceil_div(needed, multiple) * multiple
        return cls._build(size, bytearray(length))

    @classmethod
    def from_data(cls, size: int, data: bytes) -> "Bitmap":
        """Create a bitmap of ``size`` bits over a copy of ``data``."""
        if size < 0:
            raise ValueError("bitmap size must not be negative")
        buffer = bytearray(data)
        if len(buffer) * 8 < size:
            raise ValueError(
                f"{len(buffer)} bytes cannot hold a bitmap of {size} bits"
            )
        return cls._build(size, buffer)

    def get_bit(self, idx: int) -> Optional[bool]:
        """Return the bit at ``idx``, or ``None`` if it lies outside the bitmap."""
        if not 0 <= idx < self._size:
            return None
        return bool(self._data[idx // 8] & (1 << (idx % 8)))

    def set_bit(self, idx: int, enabled: bool) -> None:
        """Set or clear the bit at ``idx``; indices outside the bitmap are ignored."""
        if not 0 <= idx < self._size:
            return
        mask = 1 << (idx % 8)
        if enabled:
            self._data[idx // 8] |= mask
        else:
            self._data[idx // 8] &= ~mask & 0xFF

    def toggle_bit(self, idx: int) -> None:
        """Flip the bit at ``idx``; indices outside the bitmap are ignored."""
        if 0 <= idx < self._size:
            self._data[idx // 8] ^= 1 << (idx % 8)

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return True if the bitmap holds no bits at all."""
        return self._size == 0

    def as_bytes(self) -> bytes:
        """Return a copy of the backing storage."""
        return bytes(self._data)

    def clear(self) -> None:
        """Clear every bit of the storage."""
        self._data[:] = bytes(len(self._data))

    def _find_first(self, skip: int, candidates: Callable[[int], int]) -> Optional[int]:
        for byte_index, byte in enumerate(self._data):
            if byte == skip:
                continue
            bits = candidates(byte)
            position = byte_index * 8 + (bits & -bits).bit_length() - 1
            return position if position < self._size else None
        return None

    def find_first_unset(self) -> Optional[int]:
        """Return the index of the lowest clear bit, or ``None`` if all are set."""
        return self._find_first(0xFF, lambda byte: ~byte & 0xFF)

    def find_first_set(self) -> Optional[int]:
        """Return the index of the lowest set bit, or ``None`` if none is set."""
        return self._find_first(0x00, lambda byte: byte)

    def __repr__(self) -> str:
        runs = []
        for enabled, group in groupby(range(self._size), key=self.get_bit):
            if not enabled:
                continue
            indices = list(group)
            first, last = indices[0], indices[-1]
            runs.append(f"{first}," if first == last else f"{first}-{last},")
        return f"Bitmap {{ size: {self._size}, data: {''.join(runs)} }}"