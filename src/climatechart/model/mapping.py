from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, TYPE_CHECKING

if TYPE_CHECKING:
    from climatechart.model.geometry import PlotGeometry
    from climatechart.model.series import SeriesStatistics
    from climatechart.model.state import ViewWindow

BAND_ALPHA = 100


class Rgba(NamedTuple):
    red: float
    green: float
    blue: float
    alpha: float = 255


def remap(value: float, start1: float, stop1: float, start2: float, stop2: float) -> float:
    """
    Linearly map value from [start1, stop1] onto [start2, stop2].

    Values outside the input range extrapolate. An empty input range maps
    everything to the middle of the output range.
    """
    if stop1 == start1:
        return (start2 + stop2) / 2
    return start2 + (stop2 - start2) * ((value - start1) / (stop1 - start1))


@dataclass(frozen=True)
class CoordinateMapper:
    """Maps years and temperatures to canvas pixels and colours for one tick."""
    window: ViewWindow
    statistics: SeriesStatistics
    geometry: PlotGeometry

    def year_to_x(self, year: float) -> float:
        # Draw left-to-right from margin
        return remap(year,
                     self.window.start_year,
                     self.window.end_year,
                     self.geometry.left_margin,
                     self.geometry.right_margin)

    def temperature_to_y(self, temperature: float) -> float:
        # Lower temperature at bottom, higher at top
        return remap(temperature,
                     self.statistics.min_temperature,
                     self.statistics.max_temperature,
                     self.geometry.bottom_margin,
                     self.geometry.top_margin)

    def temperature_to_color(self, temperature: float) -> Rgba:
        """Blue for the coldest year in the whole series, red for the hottest."""
        red = remap(temperature,
                    self.statistics.min_temperature,
                    self.statistics.max_temperature,
                    0,
                    255)
        return Rgba(red, 0, 255 - red, BAND_ALPHA)
