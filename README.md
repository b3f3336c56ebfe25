# kerndata

Small data structures and partition-table readers for systems work. Pure Python, no
dependencies.

## Modules

- `kerndata.assign_once`: `AssignOnce`, a cell that starts empty. `get()` returns the value
  or `None`; `set(value)` stores a value under a lock (a later `set` replaces the earlier one).
- `kerndata.bitmap`: `Bitmap`, a fixed number of bits stored in bytes, least significant bit
  first. `Bitmap(size)` is cleared; `Bitmap.with_size_multiple(size, multiple)` pads the byte
  storage to a multiple; `Bitmap.from_data(size, data)` wraps a copy of existing bytes.
  `get_bit` returns `None` outside the bitmap; `set_bit` and `toggle_bit` ignore such indices.
  `find_first_set` and `find_first_unset` return the lowest matching index or `None`.
  `as_bytes`, `clear`, `is_empty` and `len()` are also provided.
- `kerndata.bitset`: `BitSet`, a mutable set of flags from an `IntEnum`, held in a
  fixed-width integer. Subclass it with `flag_type=` and `bits=`. It supports `set`, `unset`,
  `toggle`, `clear`, `has`, `is_empty`, `flags`, `empty()`, and the `|`, `&`, `^`, `~`
  operators with other sets or with single flags.
- `kerndata.either`: `Either`, a left or right value, with `new_left`, `new_right`, `map`,
  `convert`, `left_map`, `right_map`, `transpose`, `get_left`, `get_right`, `get`,
  `is_left` and `is_right`.
- `kerndata.permissions`: owner/group/other permission bits as constants, the enums
  `PermissionLevel` and `PermissionType`, the `Permissions` mask (`can`, `set`, `to_int`,
  `from_int`), and `permissions(...)`, which builds a mask from specs such as
  `"owner:read"` or `(PermissionLevel.OWNER, PermissionType.READ)` pairs.
- `kerndata.rflags`: the x86-64 RFLAGS bits as the `RFlag` enum and the 64-bit flag set
  `RFlags`.
- `kerndata.blockdev`: `BlockDeviceRange` (a start sector and an exclusive end sector), the
  abstract `BlockDevice`, the in-memory `MemoryBlockDevice`, and `read_bytes(device, offset,
  size)` for reads that cross block boundaries.
- `kerndata.mbr`: `MBRPartition` and `MasterBootRecord`, parsed from and encoded to their
  16- and 512-byte layouts.
- `kerndata.gpt`: `GPTHeader`, `GUIDPartitionTableEntry` and `GUIDPartitionTable`.
  `GUIDPartitionTable.read(device)` returns a left `Either` holding the GUID table when a
  protective boot record and an `EFI PART` header are found, a right `Either` holding the
  boot record for a classic MBR disk, or `None` when neither is present. Unused table entries
  (all-zero type GUID) are skipped.
- `kerndata.partition`: `PartitionManager` reads a device's scheme with
  `reload_partitions(device)` and lists `Partition` objects (kind, sector range, table entry)
  with `get_partitions()` and `get_partition(index)`.

## Installation

```
pip install .
```

## Examples

```python
from kerndata.bitmap import Bitmap

bits = Bitmap(20)
bits.set_bit(0, True)
bits.set_bit(1, True)
assert bits.find_first_unset() == 2
assert bits.get_bit(25) is None   # out of range
```

```python
from kerndata.permissions import PermissionLevel, PermissionType, permissions

perms = permissions("owner:read", "owner:write")
assert perms.can(PermissionLevel.OWNER, PermissionType.WRITE)
assert not perms.can(PermissionLevel.OTHER, PermissionType.READ)
```

```python
from kerndata.rflags import RFlag, RFlags

flags = RFlags(RFlag.CARRY | RFlag.ZERO)
assert flags.has(RFlag.ZERO)
flags.unset(RFlag.CARRY)
assert flags.flags() == [RFlag.ZERO]
```

```python
from kerndata.blockdev import MemoryBlockDevice
from kerndata.partition import PartitionManager

image = open("disk.img", "rb").read()
device = MemoryBlockDevice(len(image) // 512, block_size=512, data=image)
manager = PartitionManager()
manager.reload_partitions(device)
for partition in manager.get_partitions():
    print(partition.kind, partition.device_range)
```

## What it does not do

- It does not access real disks. Block devices are whatever implements `BlockDevice`;
  the package ships only the in-memory `MemoryBlockDevice`.
- It does not check GPT CRC32 fields, read the backup GPT header, or write partition tables
  back to a device (the structures can be encoded with `to_bytes`, but nothing writes them).
- It has no file system layer: partitions are listed as sector ranges, not mounted or read
  as files.
- `RFlags` is a value type only; nothing reads or writes a CPU register.
- It provides no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```