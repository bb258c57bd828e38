# csi281

Classic data structures, searches and sorts in plain Python, with simple
timing benchmarks that compare them, and a reader for yearly city
temperature data stored as CSV.

## Modules

- `csi281.temperature`: the frozen `CityYear` dataclass (`year`,
  `num_days_below_32`, `num_days_above_90`, `average_temperature`,
  `average_max`, `average_min`) and `CityTemperatureData`, which holds a
  city's `name` and its years. `len()` and iteration work on it;
  `data[year]` returns that year's record, or an all-zero `CityYear` if the
  year is missing. It also has the `first_year` property and the methods
  `all_time_average()`, `total_days_below_32()` and `total_days_above_90()`.
  `parse_line()` turns one CSV line (station, name, year, days below 32,
  days above 90, average, max, min) into a `CityYear`; `clean()` strips
  quotes and whitespace from a cell; `read_city()` reads lines
  `start_line` to `end_line` (zero-based, inclusive) of a file.
- `csi281.search`: `linear_search()` and `binary_search()` (both return
  the first index of the key, or -1), `random_int_array()` (a sorted list
  of random ints in an inclusive range) and `array_search_speed()` (average
  nanoseconds per search, linear then binary).
- `csi281.collection`: the abstract `Collection` base class. Subclasses
  get `in`, `len()`, indexing with `[]` and `remove(item)` on top of
  `find`, `get`, `insert_at_beginning`, `insert_at_end`, `insert`,
  `remove_at_beginning`, `remove_at_end` and `remove_at`. Out-of-range
  indexes and removing from an empty collection raise `IndexError`.
- `csi281.dynamic_array`: `DynamicArray(capacity=10)`, which doubles its
  capacity when full. The `capacity` property reports the store size and
  `set_capacity()` resizes it, discarding items that no longer fit.
- `csi281.linked_list`: `LinkedList`, a singly linked list that can also be
  iterated.
- `csi281.basic_sorts`: in-place `bubble_sort()`, `selection_sort()` and
  `insertion_sort()` of a whole list.
- `csi281.advanced_sorts`: in-place `merge()`, `merge_sort()`,
  `quick_sort()` (random pivot), `insertion_sort()` and `hybrid_sort()`
  (merge sort that switches to insertion sort below ten items). The sorts
  take an inclusive `start`..`end` range and sort the whole list by default.
- `csi281.benchmarks`: `collection_search_speed()`, `basic_sort_speed()`
  and `advanced_sort_speed()`, which return named tuples of timings, and the
  `main()` behind the `csi281-benchmarks` command.

## Installation

```
pip install .
```

## Usage

```python
from csi281.advanced_sorts import hybrid_sort
from csi281.dynamic_array import DynamicArray
from csi281.search import binary_search

values = [23, -3, -2, 4, 11, 4, 7, 8, 0, 0, -3]
hybrid_sort(values)
print(values)                     # [-3, -3, -2, 0, 0, 4, 4, 7, 8, 11, 23]
print(binary_search(values, 11))  # 9

array = DynamicArray(5)
for n in range(11):
    array.insert_at_end(n)
print(len(array), array.capacity)  # 11 20
print(7 in array, array[2])        # True 2
```

Reading temperature data from a CSV file you supply:

```python
from csi281.temperature import read_city

nyc = read_city("NYC", "tempdata.csv", 1, 51)
print(nyc.first_year, nyc.all_time_average(), nyc.total_days_below_32())
print(nyc[2011].average_temperature)
```

## Benchmarks

```
csi281-benchmarks [search|basic|advanced|all] [--max-size N]
```

`search` times membership tests in a `LinkedList` and a `DynamicArray`
(nanoseconds per search), `basic` times the quadratic sorts and `advanced`
the merge, quick, insertion and hybrid sorts (microseconds), each against
the built-in `list.sort`. The default is `all`; `--max-size` skips sizes
above N.

## What it does not do

The benchmarks print plain text tables; the package draws no charts and
writes no image files. No temperature data ships with the package:
`read_city()` needs a CSV file of your own.

## Tests

```
pip install .[test]
pytest
```