"""Partitions of a block device as found by its partitioning scheme."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional, Union

from .blockdev import BlockDevice, BlockDeviceRange
from .gpt import GUIDPartitionTable, GUIDPartitionTableEntry
from .mbr import MasterBootRecord, MBRPartition

_NO_GENERATION = (1 << 64) - 1


class PartitionKind(enum.Enum):
    """The scheme a partition was described by."""

    MBR = "mbr"
    GPT = "gpt"
    UNKNOWN = "unknown"


@dataclass
class Partition:
    """A partition: its kind, the sectors it covers and its table entry."""

    kind: PartitionKind
    device_range: BlockDeviceRange
    entry: Union[MBRPartition, GUIDPartitionTableEntry, None] = None


class PartitionManager:
    """Keeps the partitioning last read from a device."""

    def __init__(self) -> None:
        self._scheme: Union[MasterBootRecord, GUIDPartitionTable, None] = None
        self.generation = _NO_GENERATION

    @property
    def scheme(self) -> Union[MasterBootRecord, GUIDPartitionTable, None]:
        """The boot record or GUID table last read, or ``None``."""
        return self._scheme

    def get_partitions(self) -> List[Partition]:
        """Return the partitions of the current scheme."""
        scheme = self._scheme
        if isinstance(scheme, MasterBootRecord):
            return [
                Partition(
                    PartitionKind.MBR,
                    BlockDeviceRange(p.start_lba, p.start_lba + p.sector_count),
                    p,
                )
                for p in scheme.partitions
                if not p.is_null()
            ]
        if isinstance(scheme, GUIDPartitionTable):
            return [
                Partition(PartitionKind.GPT, entry.as_device_range(), entry)
                for entry in scheme.partitions
            ]
        return []

    def get_partition(self, index: int) -> Optional[Partition]:
        """Return partition ``index``, or ``None`` if there is none."""
        partitions = self.get_partitions()
        return partitions[index] if 0 <= index < len(partitions) else None

    def reload_partitions(self, device: BlockDevice) -> None:
        """Read the partitioning of ``device`` and remember its generation."""
        self.generation = device.generation
        table = GUIDPartitionTable.read(device)
        self._scheme = None if table is None else table.get()