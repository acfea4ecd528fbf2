from __future__ import annotations

import pytest

from climatechart.model.geometry import PlotGeometry
from climatechart.model.series import Series, SeriesStatistics, YearTemperature


class FakeControl:
    """Stands in for a slider: integer value clamped to [minimum, maximum]."""

    def __init__(self, label: str, minimum: int, maximum: int, initial: int, step: int = 1) -> None:
        self.label = label
        self.minimum = minimum
        self.maximum = maximum
        self.step = step
        self._value = initial
        self.removed = False
        self.writes: list[int] = []

    def value(self) -> int:
        return self._value

    def set_value(self, value: int) -> None:
        self.writes.append(value)
        self._value = max(self.minimum, min(self.maximum, value))

    def remove(self) -> None:
        self.removed = True


class RecordingSurface:
    def __init__(self) -> None:
        self.frames = []
        self.messages: list[str] = []

    def draw_frame(self, frame) -> None:
        self.frames.append(frame)

    def show_message(self, text: str) -> None:
        self.messages.append(text)


def make_series(pairs) -> Series:
    return Series([YearTemperature(year, temp) for year, temp in pairs])


@pytest.fixture
def geometry() -> PlotGeometry:
    return PlotGeometry.from_canvas(1024, 576)


@pytest.fixture
def three_years() -> Series:
    return make_series([(1900, 10.0), (1901, 10.5), (1902, 11.0)])


@pytest.fixture
def three_years_stats(three_years) -> SeriesStatistics:
    return SeriesStatistics.from_series(three_years)


@pytest.fixture
def write_csv(tmp_path):
    def _write(text: str, name: str = "temps.csv") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
