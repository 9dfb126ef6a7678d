"""Interned, case-insensitively compared names."""

from __future__ import annotations

import threading
from dataclasses import dataclass

NAME_SIZE = 256
NONE_TEXT = "None"

_UINT32_MOD = 1 << 32
_DJB2_SEED = 5381


def _signed_chars(data: bytes):
    for byte in data:
        if byte == 0:
            return
        yield byte - 256 if byte >= 128 else byte


def _ascii_lower_bytes(data: bytes) -> bytes:
    return bytes(b + 32 if 65 <= b <= 90 else b for b in data)


def _djb2(data: bytes) -> int:
    value = _DJB2_SEED
    for char in _signed_chars(data):
        value = (value * 33 + char) % _UINT32_MOD
    return value


def hash_string(text: str) -> int:
    """32-bit djb2 hash of the UTF-8 text, stopping at the first NUL."""
    return _djb2(text.encode("utf-8"))


def hash_string_lower(text: str) -> int:
    """Like :func:`hash_string` on the text with ASCII letters lowered."""
    return _djb2(_ascii_lower_bytes(text.encode("utf-8")))


@dataclass(frozen=True, slots=True)
class NameEntry:
    """A stored name and the comparison hash it belongs to."""

    comparison_id: int
    name: str


class NamePool:
    """Stores every name once, keyed by its case-sensitive hash."""

    _default: NamePool | None = None
    _default_lock = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._display: dict[int, NameEntry] = {}
        self._comparison: dict[int, NameEntry] = {}

    @classmethod
    def get(cls) -> NamePool:
        """The process-wide pool."""
        with cls._default_lock:
            if cls._default is None:
                cls._default = cls()
            return cls._default

    def resolve(self, hash_value: int) -> NameEntry:
        """The entry stored under a display hash; ``KeyError`` if unknown."""
        with self._lock:
            try:
                return self._display[hash_value]
            except KeyError:
                raise KeyError(f"no name stored under hash {hash_value}") from None

    def find_or_store(self, text: str) -> int:
        """Store ``text`` if its display hash is new; return the display hash."""
        display_hash = hash_string(text)
        with self._lock:
            if display_hash in self._display:
                return display_hash
            comparison_hash = hash_string_lower(text)
            self._comparison.setdefault(comparison_hash, NameEntry(0, text))
            self._display[display_hash] = NameEntry(comparison_hash, text)
        return display_hash

    def __len__(self) -> int:
        with self._lock:
            return len(self._display)


class Name:
    """A pooled name; names are equal when they match ignoring ASCII case."""

    __slots__ = ("_display_index", "_comparison_index", "_pool")

    def __init__(self, text: str | None = None, *, pool: NamePool | None = None) -> None:
        self._pool = pool if pool is not None else NamePool.get()
        self._display_index = 0
        self._comparison_index = 0
        if text is None or len(text.encode("utf-8")) >= NAME_SIZE:
            return
        display = self._pool.find_or_store(text)
        self._display_index = display
        self._comparison_index = self._pool.resolve(display).comparison_id if display else 0

    @property
    def display_index(self) -> int:
        """Hash of the name as written."""
        return self._display_index

    @property
    def comparison_index(self) -> int:
        """Hash used for comparison."""
        return self._comparison_index

    def is_none(self) -> bool:
        """Whether this is the empty name."""
        return self._display_index == 0 and self._comparison_index == 0

    def __str__(self) -> str:
        if self.is_none():
            return NONE_TEXT
        return self._pool.resolve(self._display_index).name

    def __repr__(self) -> str:
        return f"Name({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._comparison_index == other._comparison_index

    def __hash__(self) -> int:
        return hash(self._comparison_index)