"""Shared storage for user-defined board devices and its per-device layout."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

__all__ = [
    "DeviceSpecification",
    "BoardDevice",
    "AllocationBases",
    "DeviceAllocation",
    "RAW_SIZES",
]

RAW_SIZES = {"r8": 1, "r16": 2, "r32": 4, "r64": 8}

_ATOMIC_KINDS = ("a8", "a16", "a32", "a64")


@dataclass(frozen=True)
class DeviceSpecification:
    """Describes one device type: its name and how many fields of each storage kind it has."""

    full_string: str
    name: str
    r8_count: int = 0
    r16_count: int = 0
    r32_count: int = 0
    r64_count: int = 0
    a8_count: int = 0
    a16_count: int = 0
    a32_count: int = 0
    a64_count: int = 0
    mtx_count: int = 0

    def __post_init__(self) -> None:
        for kind in (*RAW_SIZES, *_ATOMIC_KINDS, "mtx"):
            if getattr(self, f"{kind}_count") < 0:
                raise ValueError(f"{kind}_count must not be negative")


@dataclass(frozen=True)
class BoardDevice:
    """A number of instances of one device type attached to a board."""

    spec: DeviceSpecification
    count: int = 1

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("count must not be negative")


@dataclass(frozen=True)
class AllocationBases:
    """Where a device type's storage begins in each bank.

    Raw offsets are byte offsets into the raw bank; the others are element
    indices into their own banks.
    """

    count: int = 0
    r8: int = 0
    r16: int = 0
    r32: int = 0
    r64: int = 0
    a8: int = 0
    a16: int = 0
    a32: int = 0
    a64: int = 0
    mtx: int = 0


@dataclass
class _Cursor:
    r8: int = 0
    r16: int = 0
    r32: int = 0
    r64: int = 0
    a8: int = 0
    a16: int = 0
    a32: int = 0
    a64: int = 0
    mtx: int = 0


class DeviceAllocation:
    """Storage banks for all board devices, laid out by device type.

    The raw bank holds 64-bit fields first, then 32-, 16- and 8-bit ones.
    Atomic fields live in their own banks as integers and mutexes as locks.
    """

    def __init__(self, board_devices=()) -> None:
        devices = list(board_devices)

        def needed(kind: str) -> int:
            return sum(getattr(bd.spec, f"{kind}_count") * bd.count for bd in devices)

        cursor = _Cursor()
        cursor.r64 = 0
        cursor.r32 = cursor.r64 + needed("r64") * RAW_SIZES["r64"]
        cursor.r16 = cursor.r32 + needed("r32") * RAW_SIZES["r32"]
        cursor.r8 = cursor.r16 + needed("r16") * RAW_SIZES["r16"]

        self.raw_bank = bytearray(cursor.r8 + needed("r8") * RAW_SIZES["r8"])
        self.a8_bank = [0] * needed("a8")
        self.a16_bank = [0] * needed("a16")
        self.a32_bank = [0] * needed("a32")
        self.a64_bank = [0] * needed("a64")
        self.mtx_bank = [threading.Lock() for _ in range(needed("mtx"))]

        self._bases: dict[str, AllocationBases] = {}
        for bd in devices:
            spec = bd.spec
            self._bases.setdefault(
                spec.name,
                AllocationBases(
                    count=bd.count,
                    r8=cursor.r8,
                    r16=cursor.r16,
                    r32=cursor.r32,
                    r64=cursor.r64,
                    a8=cursor.a8,
                    a16=cursor.a16,
                    a32=cursor.a32,
                    a64=cursor.a64,
                    mtx=cursor.mtx,
                ),
            )
            for kind, size in RAW_SIZES.items():
                setattr(cursor, kind, getattr(cursor, kind) + getattr(spec, f"{kind}_count") * size)
            for kind in (*_ATOMIC_KINDS, "mtx"):
                setattr(cursor, kind, getattr(cursor, kind) + getattr(spec, f"{kind}_count"))

    @property
    def device_names(self) -> list[str]:
        """Names of the allocated device types, sorted."""
        return sorted(self._bases)

    def get_bases(self, name: str) -> AllocationBases:
        """Storage bases of the device type ``name``; KeyError if it is unknown."""
        try:
            return self._bases[name]
        except KeyError:
            raise KeyError(f"no device named {name!r}") from None