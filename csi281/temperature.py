"""Yearly temperature records for a city, read from CSV data."""

from __future__ import annotations

import csv
import os
import re
from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, Union

_UNWANTED = "\"' \t\n"
_LEADING_INT = re.compile(r"[+-]?\d+")
_LEADING_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_FIELD_COUNT = 8


@dataclass(frozen=True)
class CityYear:
    """One year of a city's temperature data."""

    year: int = 0
    num_days_below_32: int = 0
    num_days_above_90: int = 0
    average_temperature: float = 0.0
    average_max: float = 0.0
    average_min: float = 0.0


class CityTemperatureData:
    """All of the yearly data for one city."""

    def __init__(self, name: str, data: Iterable[CityYear]) -> None:
        self.name = name
        self._data = tuple(data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[CityYear]:
        return iter(self._data)

    def __getitem__(self, year: int) -> CityYear:
        """Return the record for ``year``, or an all-zero record if there is none."""
        return next((record for record in self._data if record.year == year), CityYear())

    @property
    def first_year(self) -> int:
        """The year of the first record."""
        if not self._data:
            raise ValueError(f"{self.name} has no yearly data")
        return self._data[0].year

    def all_time_average(self) -> float:
        """Mean of the yearly average temperatures."""
        if not self._data:
            raise ValueError(f"{self.name} has no yearly data")
        return sum(record.average_temperature for record in self._data) / len(self._data)

    def total_days_below_32(self) -> int:
        """Sum of the days below 32 over all years."""
        return sum(record.num_days_below_32 for record in self._data)

    def total_days_above_90(self) -> int:
        """Sum of the days above 90 over all years."""
        return sum(record.num_days_above_90 for record in self._data)


def clean(text: str) -> str:
    """Remove quotes and whitespace so the text can be read as a number."""
    return "".join(ch for ch in text if ch not in _UNWANTED)


def _leading_number(pattern: re.Pattern[str], text: str, kind: str) -> str:
    cleaned = clean(text)
    match = pattern.match(cleaned)
    if match is None:
        raise ValueError(f"cannot read {kind} from {text!r}")
    return match.group()


def _int_cell(text: str) -> int:
    return int(_leading_number(_LEADING_INT, text, "an integer"))


def _float_cell(text: str) -> float:
    return float(_leading_number(_LEADING_FLOAT, text, "a number"))


def parse_line(line: str) -> CityYear:
    """Turn one CSV line (station, name, year, dx32, dx90, tavg, tmax, tmin) into a CityYear."""
    cells = next(csv.reader([line]), [])
    if len(cells) < _FIELD_COUNT:
        raise ValueError(f"expected {_FIELD_COUNT} cells, got {len(cells)}: {line!r}")
    _station, _name, year, dx32, dx90, tavg, tmax, tmin = cells[:_FIELD_COUNT]
    return CityYear(
        year=_int_cell(year),
        num_days_below_32=_int_cell(dx32),
        num_days_above_90=_int_cell(dx90),
        average_temperature=_float_cell(tavg),
        average_max=_float_cell(tmax),
        average_min=_float_cell(tmin),
    )


def read_city(
    city_name: str,
    file_name: Union[str, os.PathLike],
    start_line: int,
    end_line: int,
) -> CityTemperatureData:
    """Read lines ``start_line`` to ``end_line`` (zero-based, inclusive) of a CSV file."""
    if start_line < 0:
        raise ValueError("start_line must not be negative")
    count = end_line - start_line + 1
    if count <= 0:
        raise ValueError("end_line must not come before start_line")
    with open(file_name, newline="", encoding="utf-8") as handle:
        lines = list(islice(handle, start_line, end_line + 1))
    if len(lines) < count:
        raise ValueError(
            f"{file_name} has only {start_line + len(lines)} lines, need {end_line + 1}"
        )
    return CityTemperatureData(city_name, (parse_line(line) for line in lines))