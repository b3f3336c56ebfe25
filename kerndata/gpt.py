"""GUID partition tables behind a protective master boot record."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import List, Optional

from .blockdev import BlockDevice, BlockDeviceRange, read_bytes
from .either import Either
from .mbr import MasterBootRecord, MBRPartition

GPT_SIGNATURE = b"EFI PART"
PROTECTIVE_OS_TYPE = 0xEE
_PROTECTIVE_START_CHS = b"\x00\x02\x00"
_U32_MAX = 0xFFFFFFFF

_HEADER = struct.Struct("<8sIIIIQQQQ16sQIII")
_ENTRY = struct.Struct("<16s16sQQQ")


@dataclass
class GPTHeader:
    """The header found in the sector after the protective boot record."""

    signature: bytes = GPT_SIGNATURE
    revision: int = 0x00010000
    header_size: int = _HEADER.size
    header_crc32: int = 0
    reserved: int = 0
    current_lba: int = 0
    backup_lba: int = 0
    first_usable_lba: int = 0
    last_usable_lba: int = 0
    disk_guid: bytes = bytes(16)
    partition_table_lba: int = 0
    partition_entry_count: int = 0
    partition_entry_size: int = 0
    partition_entries_crc32: int = 0

    @classmethod
    def parse(cls, data: bytes) -> "GPTHeader":
        """Decode a header from the start of ``data``."""
        if len(data) < _HEADER.size:
            raise ValueError(f"a GPT header needs {_HEADER.size} bytes")
        return cls(*_HEADER.unpack_from(data))

    def to_bytes(self) -> bytes:
        """Encode the header in its packed on-disk layout."""
        return _HEADER.pack(
            self.signature,
            self.revision,
            self.header_size,
            self.header_crc32,
            self.reserved,
            self.current_lba,
            self.backup_lba,
            self.first_usable_lba,
            self.last_usable_lba,
            self.disk_guid,
            self.partition_table_lba,
            self.partition_entry_count,
            self.partition_entry_size,
            self.partition_entries_crc32,
        )


@dataclass
class GUIDPartitionTableEntry:
    """One used entry of the partition table.

    ``name`` holds the raw bytes after the fixed fields, one character per byte.
    """

    type_guid: bytes
    unique_guid: bytes
    first_lba: int
    last_lba: int
    flags: int
    name: str

    def as_device_range(self) -> BlockDeviceRange:
        """Return the sectors of the partition; ``last_lba`` is inclusive on disk."""
        return BlockDeviceRange(self.first_lba, self.last_lba + 1)


def _is_protective(partition: MBRPartition, max_lba: int) -> bool:
    return (
        partition.bootable == 0
        and partition.os_type == PROTECTIVE_OS_TYPE
        and partition.start_chs == _PROTECTIVE_START_CHS
        and partition.start_lba == 1
        and partition.sector_count == min(max_lba, _U32_MAX)
    )


def _parse_entry(raw: bytes) -> Optional[GUIDPartitionTableEntry]:
    type_guid, unique_guid, first_lba, last_lba, flags = _ENTRY.unpack_from(raw)
    if type_guid == bytes(16):
        return None
    return GUIDPartitionTableEntry(
        type_guid=type_guid,
        unique_guid=unique_guid,
        first_lba=first_lba,
        last_lba=last_lba,
        flags=flags,
        name=raw[_ENTRY.size :].decode("latin-1"),
    )


@dataclass
class GUIDPartitionTable:
    """A protective boot record, the GPT header and the used table entries."""

    mbr: MasterBootRecord
    header: GPTHeader
    partitions: List[GUIDPartitionTableEntry] = field(default_factory=list)

    def as_disk_range(self) -> BlockDeviceRange:
        """Return the usable sectors as recorded in the header."""
        return BlockDeviceRange(self.header.first_usable_lba, self.header.last_usable_lba)

    @classmethod
    def read(
        cls, device: BlockDevice
    ) -> Optional[Either["GUIDPartitionTable", MasterBootRecord]]:
        """Read the partitioning of ``device``.

        Returns a left GUID partition table, a right boot record when the disk
        is partitioned the classic way, or ``None`` when neither is found.
        """
        sector_size = device.block_size
        max_lba = device.block_count - 1
        try:
            data = read_bytes(device, 0, 2 * sector_size)
            mbr = MasterBootRecord.parse(data)
        except (IndexError, ValueError):
            return None

        if not mbr.has_signature():
            return None

        first, *others = mbr.partitions
        if not _is_protective(first, max_lba) or not all(p.is_null() for p in others):
            return Either.new_right(mbr)

        try:
            header = GPTHeader.parse(data[sector_size:])
        except ValueError:
            return None
        if header.signature != GPT_SIGNATURE:
            return None

        entry_size = header.partition_entry_size
        count = header.partition_entry_count
        if count and entry_size < _ENTRY.size:
            return None
        try:
            raw_table = read_bytes(
                device, header.partition_table_lba * sector_size, entry_size * count
            )
        except (IndexError, ValueError):
            return None

        entries = (
            _parse_entry(raw_table[offset : offset + entry_size])
            for offset in range(0, len(raw_table), entry_size or 1)
        )
        table = cls(mbr, header, [entry for entry in entries if entry is not None])
        return Either.new_left(table)