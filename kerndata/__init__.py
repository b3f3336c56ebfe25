"""Bitmaps, flag sets, an either type, permission bits, and MBR/GPT partition reading."""

__version__ = "0.1.0"

__all__ = [
    "assign_once",
    "bitmap",
    "bitset",
    "either",
    "permissions",
    "rflags",
    "blockdev",
    "mbr",
    "gpt",
    "partition",
]