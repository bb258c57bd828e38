"""A singly linked list with head and tail pointers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, TypeVar

from csi281.collection import Collection

T = TypeVar("T")


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList(Collection[T]):
    """A singly linked list."""

    def __init__(self) -> None:
        super().__init__()
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next  # type: ignore[union-attr]
        return node  # type: ignore[return-value]

    def find(self, item: T) -> int:
        return next((index for index, data in enumerate(self) if data == item), -1)

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._node_at(index).data

    def insert_at_beginning(self, item: T) -> None:
        node = _Node(item, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._count += 1

    def insert_at_end(self, item: T) -> None:
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1

    def insert(self, item: T, index: int) -> None:
        self._check_index(index, allow_end=True)
        if index == 0:
            self.insert_at_beginning(item)
        elif index == self._count:
            self.insert_at_end(item)
        else:
            previous = self._node_at(index - 1)
            previous.next = _Node(item, previous.next)
            self._count += 1

    def remove_at_beginning(self) -> None:
        self._check_not_empty()
        self._head = self._head.next  # type: ignore[union-attr]
        if self._head is None:
            self._tail = None
        self._count -= 1

    def remove_at_end(self) -> None:
        self._check_not_empty()
        if self._count == 1:
            self._head = self._tail = None
        else:
            previous = self._node_at(self._count - 2)
            previous.next = None
            self._tail = previous
        self._count -= 1

    def remove_at(self, index: int) -> None:
        self._check_index(index)
        if index == 0:
            self.remove_at_beginning()
        elif index == self._count - 1:
            self.remove_at_end()
        else:
            previous = self._node_at(index - 1)
            previous.next = previous.next.next  # type: ignore[union-attr]
            self._count -= 1