"""Sets of integer flags drawn from an enumeration, stored as one integer."""

from __future__ import annotations

import enum
from functools import total_ordering
from typing import ClassVar, List, Optional, Union


@total_ordering
class BitSet:
    """A mutable set of flags stored in a fixed-width integer.

    Subclasses name their flag enumeration and width::

        class Colors(BitSet, flag_type=Color, bits=8):
            ...
    """

    flag_type: ClassVar[Optional[type]] = None
    bits: ClassVar[int] = 64

    def __init_subclass__(cls, flag_type=None, bits=None, **kwargs):
        super().__init_subclass__(**kwargs)
        if flag_type is not None:
            if not (isinstance(flag_type, type) and issubclass(flag_type, enum.IntEnum)):
                raise TypeError("flag_type must be an IntEnum")
            cls.flag_type = flag_type
        if bits is not None:
            if bits <= 0:
                raise ValueError("bits must be positive")
            cls.bits = bits

    def __init__(self, value: Union[int, enum.IntEnum] = 0) -> None:
        if self.flag_type is None:
            raise TypeError(f"{type(self).__name__} has no flag type")
        self.value = int(value) & self._mask()

    @classmethod
    def _mask(cls) -> int:
        return (1 << cls.bits) - 1

    @classmethod
    def empty(cls) -> "BitSet":
        """Return a set with no flags."""
        return cls(0)

    def _coerce(self, other) -> Optional[int]:
        if isinstance(other, type(self)):
            return other.value
        if isinstance(other, self.flag_type):
            return int(other)
        return None

    def _flag_bits(self, flag) -> int:
        if not isinstance(flag, self.flag_type):
            raise TypeError(f"expected a {self.flag_type.__name__}, got {flag!r}")
        return int(flag)

    def set(self, flag) -> "BitSet":
        """Add ``flag`` and return this set."""
        self.value |= self._flag_bits(flag)
        return self

    def unset(self, flag) -> "BitSet":
        """Remove ``flag`` and return this set."""
        self.value &= ~self._flag_bits(flag) & self._mask()
        return self

    def clear(self) -> "BitSet":
        """Remove every flag and return this set."""
        self.value = 0
        return self

    def toggle(self, flag) -> "BitSet":
        """Flip ``flag`` and return this set."""
        self.value ^= self._flag_bits(flag)
        return self

    def has(self, flag) -> bool:
        """Return True if any bit of ``flag`` is set."""
        return self.value & self._flag_bits(flag) != 0

    def is_empty(self) -> bool:
        """Return True if no bit is set."""
        return self.value == 0

    def flags(self) -> List[Union[enum.IntEnum, int]]:
        """Return the declared flags that overlap this set, in declaration order.

        Each entry is the set's value masked by the flag's bits; where that
        masked value is not itself a declared flag it is given as an int.
        """
        found = []
        for member in self.flag_type.__members__.values():
            masked = self.value & int(member)
            if masked == 0:
                continue
            try:
                found.append(self.flag_type(masked))
            except ValueError:
                found.append(masked)
        return found

    def __int__(self) -> int:
        return self.value

    __index__ = __int__

    def __or__(self, other):
        bits = self._coerce(other)
        if bits is None:
            return NotImplemented
        return type(self)(self.value | bits)

    __ror__ = __or__

    def __ior__(self, other):
        bits = self._coerce(other)
        if bits is None:
            return NotImplemented
        self.value |= bits
        return self

    def __and__(self, other):
        bits = self._coerce(other)
        if bits is None:
            return NotImplemented
        return type(self)(self.value & bits)

    __rand__ = __and__

    def __iand__(self, other):
        bits = self._coerce(other)
        if bits is None:
            return NotImplemented
        self.value &= bits
        return self

    def __xor__(self, other):
        bits = self._coerce(other)
        if bits is None:
            return NotImplemented
        return type(self)(self.value ^ bits)

    __rxor__ = __xor__

    def __ixor__(self, other):
        bits = self._coerce(other)
        if bits is None:
            return NotImplemented
        self.value ^= bits
        return self

    def __invert__(self):
        return type(self)(~self.value & self._mask())

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.value < other.value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        names = ", ".join(
            flag.name if isinstance(flag, enum.Enum) else str(flag)
            for flag in self.flags()
        )
        return f"{self.value:#x} [{names}]"