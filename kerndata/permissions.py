"""Unix-style file permission bits."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Tuple, Union

OWNER_READ = 1 << 0
OWNER_WRITE = 1 << 1
OWNER_EXECUTE = 1 << 2
GROUP_READ = 1 << 3
GROUP_WRITE = 1 << 4
GROUP_EXECUTE = 1 << 5
OTHER_READ = 1 << 6
OTHER_WRITE = 1 << 7
OTHER_EXECUTE = 1 << 8
STICKY_BIT = 1 << 9
SETUID_BIT = 1 << 10
SETGID_BIT = 1 << 11

EXTENDED_PERMISSIONS = 1 << 63


class PermissionLevel(enum.Enum):
    """Who a permission applies to."""

    OWNER = 0
    GROUP = 3
    OTHER = 6

    def standard_shift(self) -> int:
        """Return how far the owner bits are shifted for this level."""
        return self.value


class PermissionType(enum.Enum):
    """What a permission allows."""

    READ = OWNER_READ
    WRITE = OWNER_WRITE
    EXECUTE = OWNER_EXECUTE

    def standard_value(self) -> int:
        """Return the owner bit for this permission."""
        return self.value


def _bit(level: PermissionLevel, permission: PermissionType) -> int:
    return permission.standard_value() << level.standard_shift()


@dataclass
class Permissions:
    """A permission mask."""

    value: int = 0

    def to_int(self) -> int:
        return self.value

    @classmethod
    def from_int(cls, value: int) -> "Permissions":
        return cls(value)

    def can(self, level: PermissionLevel, permission: PermissionType) -> bool:
        """Return True if ``level`` holds ``permission``."""
        return self.value & _bit(level, permission) != 0

    def set(self, level: PermissionLevel, permission: PermissionType) -> None:
        """Grant ``permission`` to ``level``."""
        self.value |= _bit(level, permission)


PermissionSpec = Union[str, Tuple[PermissionLevel, PermissionType]]


def _parse_spec(spec: PermissionSpec) -> Tuple[PermissionLevel, PermissionType]:
    if isinstance(spec, str):
        level_name, sep, type_name = spec.partition(":")
        if not sep:
            raise ValueError(f"expected 'level:permission', got {spec!r}")
        try:
            return (
                PermissionLevel[level_name.strip().upper()],
                PermissionType[type_name.strip().upper()],
            )
        except KeyError:
            raise ValueError(f"unknown permission {spec!r}") from None
    level, permission = spec
    if not isinstance(level, PermissionLevel) or not isinstance(permission, PermissionType):
        raise TypeError(f"expected (PermissionLevel, PermissionType), got {spec!r}")
    return level, permission


def permissions(*args: PermissionSpec) -> Permissions:
    """Build a :class:`Permissions` from specs like ``"owner:read"``.

    Each spec may also be a ``(PermissionLevel, PermissionType)`` pair.
    """
    result = Permissions()
    for spec in args:
        result.set(*_parse_spec(spec))
    return result