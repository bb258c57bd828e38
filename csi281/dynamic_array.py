"""A growable array backed by a fixed-capacity store."""

from __future__ import annotations

from itertools import islice
from typing import Any, List, TypeVar

from csi281.collection import Collection

T = TypeVar("T")

DEFAULT_CAPACITY = 10
GROWTH_FACTOR = 2


class DynamicArray(Collection[T]):
    """An array that doubles its capacity whenever it is full."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        super().__init__()
        self._store: List[Any] = [None] * capacity

    @property
    def capacity(self) -> int:
        """Number of slots in the backing store."""
        return len(self._store)

    def find(self, item: T) -> int:
        return next(
            (index for index, value in enumerate(islice(self._store, self._count)) if value == item),
            -1,
        )

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._store[index]

    def insert_at_beginning(self, item: T) -> None:
        self.insert(item, 0)

    def insert_at_end(self, item: T) -> None:
        self.insert(item, self._count)

    def insert(self, item: T, index: int) -> None:
        self._check_index(index, allow_end=True)
        if self._count == self.capacity:
            self.set_capacity(max(self._count * GROWTH_FACTOR, 1))
        count = self._count
        self._store[index + 1 : count + 1] = self._store[index:count]
        self._store[index] = item
        self._count += 1

    def remove_at_beginning(self) -> None:
        self._check_not_empty()
        self.remove_at(0)

    def remove_at_end(self) -> None:
        self._check_not_empty()
        self.remove_at(self._count - 1)

    def remove_at(self, index: int) -> None:
        self._check_index(index)
        count = self._count
        self._store[index : count - 1] = self._store[index + 1 : count]
        self._store[count - 1] = None
        self._count -= 1

    def set_capacity(self, capacity: int) -> None:
        """Resize the backing store, discarding items that no longer fit."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if capacity == self.capacity:
            return
        keep = min(capacity, self._count)
        self._store = self._store[:keep] + [None] * (capacity - keep)
        self._count = keep