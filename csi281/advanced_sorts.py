"""Merge sort, quicksort, ranged insertion sort and a merge/insertion hybrid.

Every sort works in place on the inclusive range ``start``..``end`` of a
mutable sequence; by default the whole sequence is sorted.
"""

from __future__ import annotations

import heapq
import random
from typing import Any, MutableSequence, Optional

HYBRID_THRESHOLD = 10

_rng = random.Random()


def _resolve_range(items: MutableSequence[Any], start: int, end: Optional[int]) -> int:
    if end is None:
        end = len(items) - 1
    if end >= start and (start < 0 or end >= len(items)):
        raise IndexError(f"range {start}..{end} out of bounds for {len(items)} items")
    return end


def merge(items: MutableSequence[Any], start: int, mid: int, end: int) -> None:
    """Merge the sorted runs ``start..mid`` and ``mid+1..end`` of ``items`` in place."""
    if not start <= mid + 1 <= end + 1:
        raise ValueError("mid must lie between start - 1 and end")
    _resolve_range(items, start, end)
    left = list(items[start : mid + 1])
    right = list(items[mid + 1 : end + 1])
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    items[start : end + 1] = merged


def merge_sort(items: MutableSequence[Any], start: int = 0, end: Optional[int] = None) -> None:
    """Stable merge sort of ``items[start..end]``."""
    end = _resolve_range(items, start, end)
    if end - start > 0:
        mid = (start + end) // 2
        merge_sort(items, start, mid)
        merge_sort(items, mid + 1, end)
        items[start : end + 1] = list(
            heapq.merge(items[start : mid + 1], items[mid + 1 : end + 1])
        )


def _partition(items: MutableSequence[Any], start: int, end: int) -> int:
    pivot = _rng.randint(start, end)
    items[pivot], items[start] = items[start], items[pivot]
    pivot_value = items[start]
    boundary = start + 1
    for i in range(start + 1, end + 1):
        if items[i] < pivot_value:
            items[i], items[boundary] = items[boundary], items[i]
            boundary += 1
    items[start], items[boundary - 1] = items[boundary - 1], items[start]
    return boundary - 1


def quick_sort(items: MutableSequence[Any], start: int = 0, end: Optional[int] = None) -> None:
    """Quicksort of ``items[start..end]`` with a random pivot."""
    end = _resolve_range(items, start, end)
    while end - start > 0:
        pivot = _partition(items, start, end)
        # Recurse into the smaller side and loop over the larger to bound the stack depth.
        if pivot - start < end - pivot:
            quick_sort(items, start, pivot - 1)
            start = pivot + 1
        else:
            quick_sort(items, pivot + 1, end)
            end = pivot - 1


def insertion_sort(items: MutableSequence[Any], start: int = 0, end: Optional[int] = None) -> None:
    """Insertion sort of ``items[start..end]``, leaving the rest untouched."""
    end = _resolve_range(items, start, end)
    for i in range(start + 1, end + 1):
        value = items[i]
        placement = i
        while placement > start and value < items[placement - 1]:
            items[placement] = items[placement - 1]
            placement -= 1
        items[placement] = value


def hybrid_sort(items: MutableSequence[Any], start: int = 0, end: Optional[int] = None) -> None:
    """Merge sort that hands ranges of fewer than ten items to insertion sort."""
    end = _resolve_range(items, start, end)
    if end - start + 1 >= HYBRID_THRESHOLD:
        mid = (start + end) // 2
        hybrid_sort(items, start, mid)
        hybrid_sort(items, mid + 1, end)
        merge(items, start, mid, end)
    else:
        insertion_sort(items, start, end)