"""The x86-64 RFLAGS register bits."""

from __future__ import annotations

import enum

from .bitset import BitSet


class RFlag(enum.IntEnum):
    """A flag of the RFLAGS register."""

    CARRY = 1 << 0
    PARITY = 1 << 2
    ADJUST = 1 << 4
    ZERO = 1 << 6
    SIGN = 1 << 7
    TRAP = 1 << 8
    INTERRUPT = 1 << 9
    DIRECTION = 1 << 10
    OVERFLOW = 1 << 11
    IOPL0 = 0 << 12
    IOPL1 = 1 << 12
    IOPL2 = 2 << 12
    IOPL3 = 3 << 12
    NESTED_TASK = 1 << 14
    RESUME = 1 << 16
    VM8086 = 1 << 17
    ALIGNMENT_CHECK = 1 << 18
    VIRTUAL_INTERRUPT = 1 << 19
    VIRTUAL_INTERRUPT_PENDING = 1 << 20
    IDENTIFICATION = 1 << 21


class RFlags(BitSet, flag_type=RFlag, bits=64):
    """A 64-bit RFLAGS value."""