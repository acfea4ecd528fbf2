"""
Chart State
===========
This module defines the state owned by one mounted chart.

Why is this file needed?
------------------------
1. State Management: The loaded series, its statistics, the load status and
   the animation counter live in one record instead of loose attributes.
2. View Window: The start/end year pair is resolved from the two range
   controls once per tick and validated here.

Classes:
    ViewWindow: The selected [start_year, end_year] range.
    ChartStatus: States of the progressive reveal.
    AnimationState: Number of frames drawn so far.
    ChartState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from climatechart.model.geometry import PlotGeometry
    from climatechart.model.series import Series, SeriesStatistics

logger = logging.getLogger(__name__)


class RangeControl(Protocol):
    """A numeric input owned by the host (e.g. a slider)."""

    def value(self) -> int: ...

    def set_value(self, value: int) -> None: ...

    def remove(self) -> None: ...


@dataclass(frozen=True)
class ViewWindow:
    start_year: int
    end_year: int

    @property
    def num_years(self) -> int:
        return self.end_year - self.start_year


def resolve_view_window(start_control: RangeControl, end_control: RangeControl) -> ViewWindow:
    """
    Read both controls and prevent the ranges from crossing.

    When start >= end the start control is pushed back to end - 1, so the
    returned window always spans at least one year.
    """
    start = int(start_control.value())
    end = int(end_control.value())

    if start >= end:
        logger.debug(f"Start year {start} >= end year {end}, clamping start to {end - 1}")
        start = end - 1
        start_control.set_value(start)

    return ViewWindow(start_year=start, end_year=end)


class ChartStatus(Enum):
    NOT_LOADED = "not_loaded"
    READY = "ready"
    ANIMATING = "animating"
    SETTLED = "settled"
    FAILED = "failed"


@dataclass
class AnimationState:
    frames_drawn: int = 0


@dataclass
class ChartState:
    """
    Everything a mounted chart owns across ticks.
    Series and statistics are read-only once set.
    """
    status: ChartStatus = ChartStatus.NOT_LOADED
    series: Optional[Series] = None
    statistics: Optional[SeriesStatistics] = None
    geometry: Optional[PlotGeometry] = None
    animation: AnimationState = field(default_factory=AnimationState)
    window: Optional[ViewWindow] = None
    error_message: Optional[str] = None

    @property
    def loaded(self) -> bool:
        return self.status not in (ChartStatus.NOT_LOADED, ChartStatus.FAILED)

    def reset(self) -> None:
        """Forget the loaded data, e.g. when the chart is unmounted."""
        self.status = ChartStatus.NOT_LOADED
        self.series = None
        self.statistics = None
        self.geometry = None
        self.animation = AnimationState()
        self.window = None
        self.error_message = None
        logger.debug("Chart state has been reset.")
