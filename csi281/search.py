"""Linear and binary search, with a timing comparison of the two."""

from __future__ import annotations

import random
import time
from bisect import bisect_left
from typing import Any, Sequence


def linear_search(items: Sequence[Any], key: Any) -> int:
    """Return the first index of ``key`` in ``items``, or -1 if it is absent."""
    return next((index for index, item in enumerate(items) if item == key), -1)


def binary_search(items: Sequence[Any], key: Any) -> int:
    """Return the first index of ``key`` in sorted ``items``, or -1 if it is absent."""
    index = bisect_left(items, key)
    if index < len(items) and items[index] == key:
        return index
    return -1


def random_int_array(length: int, minimum: int, maximum: int) -> list[int]:
    """Return a sorted list of ``length`` random ints between ``minimum`` and ``maximum`` inclusive."""
    if length < 0:
        raise ValueError("length must not be negative")
    if minimum > maximum:
        raise ValueError("minimum must not exceed maximum")
    return sorted(random.randint(minimum, maximum) for _ in range(length))


def array_search_speed(length: int, num_tests: int) -> tuple[int, int]:
    """Average nanoseconds per search as (linear, binary) over ``num_tests`` random keys."""
    if num_tests <= 0:
        raise ValueError("num_tests must be positive")
    items = random_int_array(length, 0, length)
    keys = random_int_array(num_tests, 0, length)

    start = time.perf_counter_ns()
    for key in keys:
        linear_search(items, key)
    linear_speed = (time.perf_counter_ns() - start) // num_tests

    start = time.perf_counter_ns()
    for key in keys:
        binary_search(items, key)
    binary_speed = (time.perf_counter_ns() - start) // num_tests

    return linear_speed, binary_speed