"""Abstract base class shared by the index-addressable collections."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Collection(ABC, Generic[T]):
    """An ordered collection whose items can be found, read, inserted and removed by index."""

    def __init__(self) -> None:
        self._count = 0

    @abstractmethod
    def find(self, item: T) -> int:
        """Return the index of the first ``item``, or -1 if it is not present."""

    def __contains__(self, item: object) -> bool:
        return self.find(item) != -1  # type: ignore[arg-type]

    @abstractmethod
    def get(self, index: int) -> T:
        """Return the item at ``index``."""

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    @abstractmethod
    def insert_at_beginning(self, item: T) -> None:
        """Insert ``item`` before every other item."""

    @abstractmethod
    def insert_at_end(self, item: T) -> None:
        """Insert ``item`` after every other item."""

    @abstractmethod
    def insert(self, item: T, index: int) -> None:
        """Insert ``item`` so that it ends up at ``index``."""

    @abstractmethod
    def remove_at_beginning(self) -> None:
        """Remove the first item."""

    @abstractmethod
    def remove_at_end(self) -> None:
        """Remove the last item."""

    @abstractmethod
    def remove_at(self, index: int) -> None:
        """Remove the item at ``index``."""

    def remove(self, item: T) -> None:
        """Remove the first occurrence of ``item``; do nothing if it is absent."""
        location = self.find(item)
        if location != -1:
            self.remove_at(location)

    def __len__(self) -> int:
        return self._count

    def _check_index(self, index: int, *, allow_end: bool = False) -> None:
        upper = self._count if allow_end else self._count - 1
        if not 0 <= index <= upper:
            raise IndexError(f"index {index} out of range for collection of {self._count} items")

    def _check_not_empty(self) -> None:
        if self._count == 0:
            raise IndexError("cannot remove from an empty collection")