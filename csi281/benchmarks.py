"""Timing comparisons of the collections and sorts, printed as tables."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Callable, Iterable, List, NamedTuple, Optional, Sequence

from csi281 import advanced_sorts, basic_sorts
from csi281.dynamic_array import DynamicArray
from csi281.linked_list import LinkedList

SEARCH_TESTS = 1000
SEARCH_SIZES = (1000, 2000, 4000, 8000)
SORT_SIZES = (16, 32, 64, 128, 256, 512, 1024, 2048)


class SearchTimes(NamedTuple):
    """Average nanoseconds per search in each collection."""

    linked_list: int
    dynamic_array: int


class BasicSortTimes(NamedTuple):
    """Microseconds taken by each quadratic sort and the built-in sort."""

    bubble: int
    selection: int
    insertion: int
    builtin: int


class AdvancedSortTimes(NamedTuple):
    """Microseconds taken by each advanced sort and the built-in sort."""

    merge: int
    quick: int
    insertion: int
    hybrid: int
    builtin: int


def _check_length(length: int) -> None:
    if length < 0:
        raise ValueError("length must not be negative")


def _random_ints(length: int) -> List[int]:
    return [random.randint(0, length) for _ in range(length)]


def _time_us(action: Callable[[], object]) -> int:
    start = time.perf_counter_ns()
    action()
    return (time.perf_counter_ns() - start) // 1000


def _time_searches_ns(contains: Callable[[int], bool], keys: Sequence[int]) -> int:
    start = time.perf_counter_ns()
    for key in keys:
        contains(key)
    return (time.perf_counter_ns() - start) // len(keys)


def collection_search_speed(length: int, num_tests: int) -> SearchTimes:
    """Average time of ``num_tests`` membership tests in a linked list and a dynamic array."""
    _check_length(length)
    if num_tests <= 0:
        raise ValueError("num_tests must be positive")
    linked: LinkedList[int] = LinkedList()
    array: DynamicArray[int] = DynamicArray()
    for value in _random_ints(length):
        linked.insert_at_end(value)
        array.insert_at_end(value)
    keys = [random.randint(0, length) for _ in range(num_tests)]
    return SearchTimes(
        linked_list=_time_searches_ns(linked.__contains__, keys),
        dynamic_array=_time_searches_ns(array.__contains__, keys),
    )


def basic_sort_speed(length: int) -> BasicSortTimes:
    """Time bubble, selection, insertion and built-in sorts on the same random data."""
    _check_length(length)
    data = _random_ints(length)
    copies = [list(data) for _ in range(4)]
    return BasicSortTimes(
        bubble=_time_us(lambda: basic_sorts.bubble_sort(copies[0])),
        selection=_time_us(lambda: basic_sorts.selection_sort(copies[1])),
        insertion=_time_us(lambda: basic_sorts.insertion_sort(copies[2])),
        builtin=_time_us(copies[3].sort),
    )


def advanced_sort_speed(length: int) -> AdvancedSortTimes:
    """Time merge, quick, insertion, hybrid and built-in sorts on the same random data."""
    _check_length(length)
    data = _random_ints(length)
    copies = [list(data) for _ in range(5)]
    last = length - 1
    return AdvancedSortTimes(
        merge=_time_us(lambda: advanced_sorts.merge_sort(copies[0], 0, last)),
        quick=_time_us(lambda: advanced_sorts.quick_sort(copies[1], 0, last)),
        insertion=_time_us(lambda: advanced_sorts.insertion_sort(copies[2], 0, last)),
        hybrid=_time_us(lambda: advanced_sorts.hybrid_sort(copies[3], 0, last)),
        builtin=_time_us(copies[4].sort),
    )


def _print_table(title: str, unit: str, columns: Sequence[str], rows: Iterable[tuple]) -> None:
    print(f"{title} ({unit})")
    header = ["N", *columns]
    widths = [max(len(name), 10) for name in header]
    print("  ".join(name.rjust(width) for name, width in zip(header, widths)))
    for row in rows:
        print("  ".join(str(cell).rjust(width) for cell, width in zip(row, widths)))
    print()


def _sizes(sizes: Sequence[int], max_size: Optional[int]) -> List[int]:
    return [size for size in sizes if max_size is None or size <= max_size]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen benchmarks and print their timings."""
    parser = argparse.ArgumentParser(description="Compare collection searches and sorts.")
    parser.add_argument(
        "benchmark",
        nargs="?",
        choices=("search", "basic", "advanced", "all"),
        default="all",
        help="which comparison to run",
    )
    parser.add_argument("--max-size", type=int, default=None, help="largest N to time")
    args = parser.parse_args(argv)

    if args.benchmark in ("search", "all"):
        _print_table(
            f"Number of Elements Searched Versus Time ({SEARCH_TESTS} samples at each N)",
            "nanoseconds",
            SearchTimes._fields,
            (
                (size, *collection_search_speed(size, SEARCH_TESTS))
                for size in _sizes(SEARCH_SIZES, args.max_size)
            ),
        )
    if args.benchmark in ("basic", "all"):
        _print_table(
            "Number of Elements Sorted Versus Time",
            "microseconds",
            BasicSortTimes._fields,
            ((size, *basic_sort_speed(size)) for size in _sizes(SORT_SIZES, args.max_size)),
        )
    if args.benchmark in ("advanced", "all"):
        _print_table(
            "Number of Elements Sorted Versus Time",
            "microseconds",
            AdvancedSortTimes._fields,
            ((size, *advanced_sort_speed(size)) for size in _sizes(SORT_SIZES, args.max_size)),
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())