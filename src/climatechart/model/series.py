"""
Temperature Series (Data Preparation)
=====================================
Loads the yearly global surface temperature table and derives its statistics.

Why is this file needed?
------------------------
1. Decoding: Rows are parsed into typed records once, at load time, so the
   draw loop never touches raw CSV strings.
2. Statistics: Min/max year and min/max/mean temperature are computed once
   and reused for every frame.

Classes:
    YearTemperature: A single (year, temperature) record.
    Series: The ordered, immutable collection of records.
    SeriesStatistics: Summary values derived from a Series.
"""
from __future__ import annotations

import csv
import logging
import os
from dataclasses import dataclass
from typing import Iterator, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

YEAR_COLUMN = "date"
TEMPERATURE_COLUMN = "temperature"


class SeriesLoadError(IOError):
    """Raised when the temperature table is missing or malformed."""


@dataclass(frozen=True)
class YearTemperature:
    year: int
    temperature: float


class Series:
    """
    Ordered sequence of yearly temperatures, sorted ascending by year.
    Immutable after construction.
    """

    def __init__(self, records: list[YearTemperature] | tuple[YearTemperature, ...]) -> None:
        if not records:
            raise ValueError("Series must contain at least one record.")

        for previous, current in zip(records, records[1:]):
            if current.year <= previous.year:
                raise ValueError(
                    f"Years must be strictly increasing, got {previous.year} followed by {current.year}."
                )

        self._records: tuple[YearTemperature, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[YearTemperature]:
        return iter(self._records)

    def __getitem__(self, index: int) -> YearTemperature:
        return self._records[index]

    def __repr__(self) -> str:
        return f"Series({len(self)} records, {self.first.year}-{self.last.year})"

    @property
    def first(self) -> YearTemperature:
        return self._records[0]

    @property
    def last(self) -> YearTemperature:
        return self._records[-1]

    @property
    def temperatures(self) -> npt.NDArray[np.float64]:
        return np.array([r.temperature for r in self._records], dtype=np.float64)


@dataclass(frozen=True)
class SeriesStatistics:
    min_year: int
    max_year: int
    min_temperature: float
    max_temperature: float
    mean_temperature: float

    @classmethod
    def from_series(cls, series: Series) -> SeriesStatistics:
        """
        Min and max year come from the first and last record (the series is
        sorted), temperatures from a scan of the full column.
        """
        temps = series.temperatures
        return cls(
            min_year=series.first.year,
            max_year=series.last.year,
            min_temperature=float(np.min(temps)),
            max_temperature=float(np.max(temps)),
            mean_temperature=float(np.mean(temps)),
        )


def _parse_number(cell: str) -> float:
    return float(cell.strip().replace(',', '.'))


def _parse_year(cell: str) -> int:
    value = _parse_number(cell)
    if not value.is_integer():
        raise ValueError(f"year must be a whole number, got '{cell.strip()}'")
    return int(value)


def load_series(filepath: str) -> Series:
    """
    Read a CSV table with a header row containing `date` and `temperature`.

    Args:
        filepath: Path to the CSV file. Rows must already be sorted by date.

    Returns:
        The decoded Series.

    Raises:
        SeriesLoadError: If the file is missing, a column is absent, a cell is
            not numeric, the table is empty or the years are not increasing.
    """
    if not os.path.exists(filepath):
        raise SeriesLoadError(f"Data file not found: {filepath}")

    records: list[YearTemperature] = []

    try:
        with open(filepath, mode='r', encoding='utf-8-sig', newline='') as f:
            # Detect delimiter
            first_line = f.readline()
            delimiter = ';' if ';' in first_line else ','
            f.seek(0)

            reader = csv.DictReader(f, delimiter=delimiter)
            headers = [h.strip() for h in (reader.fieldnames or [])]
            reader.fieldnames = headers
            for column in (YEAR_COLUMN, TEMPERATURE_COLUMN):
                if column not in headers:
                    raise SeriesLoadError(f"Column '{column}' missing in {filepath}")

            for line_no, row in enumerate(reader, start=2):
                year_cell = row.get(YEAR_COLUMN) or ""
                temp_cell = row.get(TEMPERATURE_COLUMN) or ""
                if not year_cell.strip() and not temp_cell.strip():
                    continue
                try:
                    year = _parse_year(year_cell)
                    temperature = _parse_number(temp_cell)
                except ValueError as e:
                    raise SeriesLoadError(f"Invalid value on line {line_no} of {filepath}: {e}") from e
                records.append(YearTemperature(year=year, temperature=temperature))

    except OSError as e:
        if isinstance(e, SeriesLoadError):
            raise
        raise SeriesLoadError(f"Failed to read {filepath}: {e}") from e

    if not records:
        raise SeriesLoadError(f"No data rows in {filepath}")

    try:
        series = Series(records)
    except ValueError as e:
        raise SeriesLoadError(f"{filepath}: {e}") from e

    logger.info(f"Loaded {len(series)} yearly temperatures from {filepath}")
    return series
