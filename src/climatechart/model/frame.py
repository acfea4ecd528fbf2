"""
Frame Builder (Progressive Reveal)
==================================
Turns the series plus the selected view window into the draw commands of a
single animation tick.

Why is this file needed?
------------------------
1. Testability: Building the frame is a pure function of its inputs, so the
   reveal can be checked without a window or a drawing surface.
2. Animation: The number of revealed segments is capped by the number of
   frames drawn so far, which grows by one per tick.

Classes:
    LineCommand, RectCommand, TextCommand: Surface-independent primitives.
    AxisLabels: Axis titles and tick label counts.
    Frame: Everything to draw for one tick.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from math import ceil
from typing import TYPE_CHECKING

from climatechart.model.mapping import CoordinateMapper, Rgba

if TYPE_CHECKING:
    from climatechart.model.geometry import PlotGeometry
    from climatechart.model.series import Series, SeriesStatistics
    from climatechart.model.state import ViewWindow

BLACK = Rgba(0, 0, 0)
MEAN_LINE_COLOR = Rgba(200, 200, 200)

# When this many years or fewer are displayed the final year is always labelled
SHORT_WINDOW_YEARS = 6


@dataclass(frozen=True)
class LineCommand:
    x1: float
    y1: float
    x2: float
    y2: float
    color: Rgba = BLACK
    width: float = 1.0


@dataclass(frozen=True)
class RectCommand:
    x: float
    y: float
    width: float
    height: float
    color: Rgba


@dataclass(frozen=True)
class TextCommand:
    """
    Text positioned by its anchor: (0.5, 0.5) centres the text on (x, y).
    The angle is in degrees, counter-clockwise.
    """
    text: str
    x: float
    y: float
    anchor: tuple[float, float] = (0.5, 0.5)
    angle: float = 0.0
    color: Rgba = BLACK


@dataclass(frozen=True)
class AxisLabels:
    x_axis_label: str = "year"
    y_axis_label: str = "℃"
    # Number of tick labels so that they are not drawn on top of one another
    num_x_tick_labels: int = 8
    num_y_tick_labels: int = 8


@dataclass
class Frame:
    bands: list[RectCommand] = field(default_factory=list)
    lines: list[LineCommand] = field(default_factory=list)
    labels: list[TextCommand] = field(default_factory=list)
    x_ticks: list[TextCommand] = field(default_factory=list)
    mean_line: LineCommand | None = None
    segments: int = 0

    @property
    def texts(self) -> list[TextCommand]:
        return self.labels + self.x_ticks


def axis_label_commands(geometry: PlotGeometry, labels: AxisLabels) -> list[TextCommand]:
    margin = geometry.margin_size
    x_label = TextCommand(
        labels.x_axis_label,
        geometry.plot_width / 2 + geometry.left_margin,
        geometry.bottom_margin + margin * 1.5,
    )
    y_label = TextCommand(
        labels.y_axis_label,
        geometry.left_margin - margin * 1.5,
        geometry.bottom_margin / 2,
        angle=90.0,
    )
    return [x_label, y_label]


def y_tick_label_commands(mapper: CoordinateMapper, labels: AxisLabels) -> list[TextCommand]:
    stats = mapper.statistics
    geometry = mapper.geometry
    y_label_step = (stats.max_temperature - stats.min_temperature) / labels.num_y_tick_labels

    commands = []
    for i in range(labels.num_y_tick_labels + 1):
        temperature = stats.min_temperature + i * y_label_step
        commands.append(TextCommand(
            f"{temperature:.1f}",
            geometry.left_margin - geometry.margin_size / 2,
            mapper.temperature_to_y(temperature),
        ))
    return commands


def x_tick_label_command(mapper: CoordinateMapper, year: int) -> TextCommand:
    geometry = mapper.geometry
    return TextCommand(
        str(year),
        mapper.year_to_x(year),
        geometry.bottom_margin + geometry.margin_size / 2,
    )


def build_frame(
    series: Series,
    statistics: SeriesStatistics,
    geometry: PlotGeometry,
    window: ViewWindow,
    frames_drawn: int,
    labels: AxisLabels = AxisLabels(),
) -> Frame:
    """
    Build the draw commands for one tick.

    Args:
        series: The full, sorted temperature series.
        statistics: Statistics of the full series (fixes the Y and colour scales).
        geometry: Pixel layout of the plot.
        window: Years to display; must span at least one year.
        frames_drawn: Ticks drawn before this one; caps the revealed segments.
        labels: Axis titles and tick label counts.

    Returns:
        Frame with at most `frames_drawn` segments.
    """
    if window.num_years < 1:
        raise ValueError(f"View window must span at least one year, got {window}.")

    mapper = CoordinateMapper(window=window, statistics=statistics, geometry=geometry)
    frame = Frame()

    frame.labels.extend(axis_label_commands(geometry, labels))
    frame.labels.extend(y_tick_label_commands(mapper, labels))

    mean_y = mapper.temperature_to_y(statistics.mean_temperature)
    frame.mean_line = LineCommand(geometry.left_margin, mean_y, geometry.right_margin, mean_y,
                                  color=MEAN_LINE_COLOR)

    num_years = window.num_years
    # The number of x-axis labels to skip so that only num_x_tick_labels are drawn
    x_label_skip = ceil(num_years / labels.num_x_tick_labels)

    previous = None
    year_count = 0
    for current in series:
        if previous is not None and window.start_year < current.year <= window.end_year:
            x_prev = mapper.year_to_x(previous.year)
            x_curr = mapper.year_to_x(current.year)

            frame.bands.append(RectCommand(
                x_prev,
                geometry.top_margin,
                x_curr - x_prev,
                geometry.plot_height,
                mapper.temperature_to_color(current.temperature),
            ))
            frame.lines.append(LineCommand(
                x_prev,
                mapper.temperature_to_y(previous.temperature),
                x_curr,
                mapper.temperature_to_y(current.temperature),
            ))

            if year_count % x_label_skip == 0:
                frame.x_ticks.append(x_tick_label_command(mapper, previous.year))

            if num_years <= SHORT_WINDOW_YEARS and year_count == num_years - 1:
                frame.x_ticks.append(x_tick_label_command(mapper, current.year))

            year_count += 1

        # Stop once as many segments as frames drawn are revealed
        if year_count >= frames_drawn:
            break

        previous = current

    frame.segments = year_count
    return frame
