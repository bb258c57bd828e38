"""Quadratic in-place sorts: bubble, selection and insertion."""

from __future__ import annotations

from typing import Any, MutableSequence


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` ascending in place by repeatedly swapping adjacent pairs."""
    for unsorted_end in range(len(items), 0, -1):
        for j in range(unsorted_end - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` ascending in place by selecting the minimum of the unsorted tail."""
    length = len(items)
    for i in range(length):
        smallest = min(range(i, length), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` ascending in place by inserting each item into the sorted prefix."""
    for i in range(1, len(items)):
        value = items[i]
        placement = i
        while placement > 0 and value < items[placement - 1]:
            items[placement] = items[placement - 1]
            placement -= 1
        items[placement] = value