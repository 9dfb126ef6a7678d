"""Allocation bookkeeping and container index sizes."""

from __future__ import annotations

import enum
import threading
from dataclasses import dataclass

_UINT64_MOD = 1 << 64


class AllocationType(enum.IntEnum):
    """Category an allocation is counted under."""

    OBJECT = 0
    CONTAINER = 1


class AllocationStats:
    """Thread-safe running totals of allocated bytes and live allocations.

    Counters behave like unsigned 64-bit integers and wrap around.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._bytes = {kind: 0 for kind in AllocationType}
        self._counts = {kind: 0 for kind in AllocationType}

    def record_alloc(self, kind: AllocationType, size: int) -> None:
        """Count an allocation of ``size`` bytes."""
        kind = AllocationType(kind)
        with self._lock:
            self._bytes[kind] = (self._bytes[kind] + size) % _UINT64_MOD
            self._counts[kind] = (self._counts[kind] + 1) % _UINT64_MOD

    def record_free(self, kind: AllocationType, size: int) -> None:
        """Count the release of an allocation of ``size`` bytes."""
        kind = AllocationType(kind)
        with self._lock:
            self._bytes[kind] = (self._bytes[kind] - size) % _UINT64_MOD
            self._counts[kind] = (self._counts[kind] - 1) % _UINT64_MOD

    def allocation_bytes(self, kind: AllocationType) -> int:
        """Bytes currently counted as allocated for ``kind``."""
        with self._lock:
            return self._bytes[AllocationType(kind)]

    def allocation_count(self, kind: AllocationType) -> int:
        """Number of allocations currently counted for ``kind``."""
        with self._lock:
            return self._counts[AllocationType(kind)]


PLATFORM_MEMORY = AllocationStats()


@dataclass(frozen=True)
class SizeType:
    """A signed integer type of a given bit width used for container indices."""

    bits: int

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def contains(self, value: int) -> bool:
        """Whether ``value`` fits in this type."""
        return self.min_value <= value <= self.max_value


_SUPPORTED_INDEX_BITS = (8, 16, 32, 64)

DEFAULT_INDEX_BITS = 32
DEFAULT_INDEX_BITS_64 = 64


def size_type_for_bits(index_size: int) -> SizeType:
    """Return the signed index type for ``index_size`` bits (8, 16, 32 or 64)."""
    if index_size not in _SUPPORTED_INDEX_BITS:
        raise ValueError(f"unsupported allocator index size: {index_size}")
    return SizeType(index_size)