"""A list with engine-style helpers for adding and removing elements."""

from __future__ import annotations

import copy
from typing import Callable, TypeVar

T = TypeVar("T")

INDEX_NONE = -1


class Array(list):
    """A ``list`` with index-returning add and bulk-removal helpers."""

    def add(self, item) -> int:
        """Append ``item`` and return its index."""
        self.append(item)
        return len(self) - 1

    def add_unique(self, item) -> int:
        """Return the index of ``item``, appending it first if it is absent."""
        index = self.find(item)
        if index != INDEX_NONE:
            return index
        return self.add(item)

    def init(self, element, number: int) -> None:
        """Replace the contents with ``number`` copies of ``element``."""
        if number < 0:
            raise ValueError(f"element count must not be negative: {number}")
        self[:] = [copy.copy(element) for _ in range(number)]

    def discard(self, item) -> int:
        """Remove every element equal to ``item``; return how many were removed."""
        return self.remove_if(lambda element: element == item)

    def remove_single(self, item) -> bool:
        """Remove the first element equal to ``item``; return whether one was found."""
        index = self.find(item)
        if index == INDEX_NONE:
            return False
        del self[index]
        return True

    def remove_at(self, index: int) -> None:
        """Remove the element at ``index``; indices outside the array are ignored."""
        if 0 <= index < len(self):
            del self[index]

    def remove_if(self, predicate: Callable[[object], bool]) -> int:
        """Remove every element matching ``predicate``; return how many were removed."""
        old_size = len(self)
        self[:] = [element for element in self if not predicate(element)]
        return old_size - len(self)

    def find(self, item) -> int:
        """Index of the first element equal to ``item``, or -1."""
        return next((i for i, element in enumerate(self) if element == item), INDEX_NONE)

    def set_num(self, number: int, fill=None) -> None:
        """Resize to ``number`` elements, padding with copies of ``fill``."""
        if number < 0:
            raise ValueError(f"element count must not be negative: {number}")
        if number < len(self):
            del self[number:]
        else:
            self.extend(copy.copy(fill) for _ in range(number - len(self)))

    def is_valid_index(self, index: int) -> bool:
        """Whether ``index`` addresses an existing element."""
        return 0 <= index < len(self)