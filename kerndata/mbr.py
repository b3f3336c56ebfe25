"""The classic master boot record and its four partition slots."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Tuple

BOOT_SIGNATURE = b"\x55\xaa"
BOOT_CODE_SIZE = 446
PARTITION_COUNT = 4

_PARTITION = struct.Struct("<B3sB3sII")
PARTITION_SIZE = _PARTITION.size
RECORD_SIZE = BOOT_CODE_SIZE + PARTITION_COUNT * PARTITION_SIZE + len(BOOT_SIGNATURE)

_NO_CHS = b"\x00\x00\x00"


@dataclass
class MBRPartition:
    """One 16-byte partition slot of a master boot record."""

    bootable: int = 0
    start_chs: bytes = _NO_CHS
    os_type: int = 0
    end_chs: bytes = _NO_CHS
    start_lba: int = 0
    sector_count: int = 0

    def __post_init__(self) -> None:
        self.start_chs = bytes(self.start_chs)
        self.end_chs = bytes(self.end_chs)
        if len(self.start_chs) != 3 or len(self.end_chs) != 3:
            raise ValueError("CHS addresses are three bytes long")

    def is_null(self) -> bool:
        """Return True if every field of the slot is zero."""
        return (
            self.bootable == 0
            and self.start_chs == _NO_CHS
            and self.os_type == 0
            and self.end_chs == _NO_CHS
            and self.start_lba == 0
            and self.sector_count == 0
        )

    @classmethod
    def parse(cls, data: bytes) -> "MBRPartition":
        """Decode a slot from the first 16 bytes of ``data``."""
        if len(data) < PARTITION_SIZE:
            raise ValueError(f"a partition slot needs {PARTITION_SIZE} bytes")
        return cls(*_PARTITION.unpack_from(data))

    def to_bytes(self) -> bytes:
        """Encode the slot as 16 bytes."""
        return _PARTITION.pack(
            self.bootable,
            self.start_chs,
            self.os_type,
            self.end_chs,
            self.start_lba,
            self.sector_count,
        )


def _empty_partitions() -> Tuple[MBRPartition, ...]:
    return tuple(MBRPartition() for _ in range(PARTITION_COUNT))


@dataclass
class MasterBootRecord:
    """A 512-byte master boot record."""

    boot_code: bytes = bytes(BOOT_CODE_SIZE)
    partitions: Tuple[MBRPartition, ...] = field(default_factory=_empty_partitions)
    signature: bytes = BOOT_SIGNATURE

    def __post_init__(self) -> None:
        self.boot_code = bytes(self.boot_code)
        self.signature = bytes(self.signature)
        self.partitions = tuple(self.partitions)
        if len(self.boot_code) != BOOT_CODE_SIZE:
            raise ValueError(f"boot code is {BOOT_CODE_SIZE} bytes long")
        if len(self.partitions) != PARTITION_COUNT:
            raise ValueError(f"a boot record has {PARTITION_COUNT} partition slots")
        if len(self.signature) != len(BOOT_SIGNATURE):
            raise ValueError("the boot signature is two bytes long")

    @classmethod
    def parse(cls, data: bytes) -> "MasterBootRecord":
        """Decode a record from the first 512 bytes of ``data``."""
        if len(data) < RECORD_SIZE:
            raise ValueError(f"a boot record needs {RECORD_SIZE} bytes")
        table_end = BOOT_CODE_SIZE + PARTITION_COUNT * PARTITION_SIZE
        partitions = tuple(
            MBRPartition.parse(data[offset : offset + PARTITION_SIZE])
            for offset in range(BOOT_CODE_SIZE, table_end, PARTITION_SIZE)
        )
        return cls(
            boot_code=data[:BOOT_CODE_SIZE],
            partitions=partitions,
            signature=data[table_end:RECORD_SIZE],
        )

    def to_bytes(self) -> bytes:
        """Encode the record as 512 bytes."""
        return (
            self.boot_code
            + b"".join(partition.to_bytes() for partition in self.partitions)
            + self.signature
        )

    def has_signature(self) -> bool:
        """Return True if the record ends with the 0x55 0xAA boot signature."""
        return self.signature == BOOT_SIGNATURE