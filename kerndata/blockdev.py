"""Block devices, sector ranges and byte-level reads across blocks."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BlockDeviceRange:
    """A run of sectors: ``start`` is the first sector, ``end`` is not included."""

    start: int
    end: int

    def __len__(self) -> int:
        return max(self.end - self.start, 0)


class BlockDevice(abc.ABC):
    """A device addressed in fixed-size blocks."""

    @property
    @abc.abstractmethod
    def block_size(self) -> int:
        """Size of one block in bytes."""

    @property
    @abc.abstractmethod
    def block_count(self) -> int:
        """Number of blocks on the device."""

    @property
    def generation(self) -> int:
        """A counter that changes when the device contents are committed."""
        return 0

    @abc.abstractmethod
    def read_block(self, lba: int) -> bytes:
        """Return the contents of block ``lba``."""

    @abc.abstractmethod
    def write_block(self, lba: int, data: bytes) -> None:
        """Replace the contents of block ``lba`` with ``data``."""


class MemoryBlockDevice(BlockDevice):
    """A block device held entirely in memory."""

    def __init__(
        self, block_count: int, block_size: int = 512, data: Optional[bytes] = None
    ) -> None:
        if block_count < 0:
            raise ValueError("block count must not be negative")
        if block_size <= 0:
            raise ValueError("block size must be positive")
        capacity = block_count * block_size
        buffer = bytearray(data or b"")
        if len(buffer) > capacity:
            raise ValueError(
                f"{len(buffer)} bytes do not fit in {block_count} blocks of {block_size}"
            )
        buffer.extend(bytes(capacity - len(buffer)))
        self._data = buffer
        self._block_size = block_size
        self._block_count = block_count
        self._generation = 0

    @property
    def block_size(self) -> int:
        return self._block_size

    @property
    def block_count(self) -> int:
        return self._block_count

    @property
    def generation(self) -> int:
        return self._generation

    @generation.setter
    def generation(self, value: int) -> None:
        self._generation = value

    def _span(self, lba: int) -> slice:
        if not 0 <= lba < self._block_count:
            raise IndexError(f"block {lba} is outside the device")
        start = lba * self._block_size
        return slice(start, start + self._block_size)

    def read_block(self, lba: int) -> bytes:
        return bytes(self._data[self._span(lba)])

    def write_block(self, lba: int, data: bytes) -> None:
        span = self._span(lba)
        if len(data) != self._block_size:
            raise ValueError(
                f"block data must be {self._block_size} bytes, got {len(data)}"
            )
        self._data[span] = data

    def __bytes__(self) -> bytes:
        return bytes(self._data)


def read_bytes(device: BlockDevice, offset: int, size: int) -> bytes:
    """Read ``size`` bytes starting at byte ``offset`` of ``device``."""
    if offset < 0 or size < 0:
        raise ValueError("offset and size must not be negative")
    block_size = device.block_size
    if offset + size > block_size * device.block_count:
        raise IndexError("read extends past the end of the device")
    if size == 0:
        return b""
    first = offset // block_size
    last = -(-(offset + size) // block_size)
    chunk = b"".join(device.read_block(lba) for lba in range(first, last))
    start = offset - first * block_size
    return chunk[start : start + size]