"""
Climate Change Visualisation
============================
Line chart of global surface temperature by year, drawn in one segment per
tick, with start/end year range controls.

The gallery drives it through four hooks:
    preload  - begin loading the CSV in the background,
    setup    - one-time initialisation once the data is loaded,
    draw     - called once per frame,
    destroy  - release the range controls.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol, TYPE_CHECKING

from climatechart.config import CANVAS_HEIGHT, CANVAS_WIDTH, DEFAULT_DATA_PATH
from climatechart.model.frame import AxisLabels, Frame, build_frame
from climatechart.model.geometry import PlotGeometry
from climatechart.model.series import SeriesStatistics
from climatechart.model.state import ChartState, ChartStatus, RangeControl, resolve_view_window
from climatechart.visualisations.registry import register_visualisation

if TYPE_CHECKING:
    from climatechart.model.series import Series

logger = logging.getLogger(__name__)

# (path, on_loaded, on_failed) -> handle of the running load
StartLoad = Callable[[str, Callable[["Series"], None], Callable[[str], None]], object]
# (label, minimum, maximum, initial, step) -> control
CreateControl = Callable[[str, int, int, int, int], RangeControl]


class Surface(Protocol):
    def draw_frame(self, frame: Frame) -> None: ...

    def show_message(self, text: str) -> None: ...


@register_visualisation
class ClimateChange:
    # Name for the visualisation to appear in the menu bar
    name = "Climate Change"

    # Unique ID with no special characters
    id = "climate-change"

    def __init__(
        self,
        data_path: str = DEFAULT_DATA_PATH,
        width: float = CANVAS_WIDTH,
        height: float = CANVAS_HEIGHT,
        labels: AxisLabels = AxisLabels(),
    ) -> None:
        self.data_path = data_path
        self.width = width
        self.height = height
        self.labels = labels

        self.state = ChartState()
        self.start_control: Optional[RangeControl] = None
        self.end_control: Optional[RangeControl] = None
        self._load_handle: object = None

    @property
    def loaded(self) -> bool:
        return self.state.loaded

    # ------------------------------------------------------------------------------
    # Lifecycle hooks
    # ------------------------------------------------------------------------------

    def preload(self, start_load: StartLoad) -> None:
        """Begin loading the data; completion arrives via on_series_loaded / on_load_failed."""
        self.state.reset()
        self._load_handle = start_load(self.data_path, self.on_series_loaded, self.on_load_failed)

    def on_series_loaded(self, series: Series) -> None:
        self.state.series = series
        self.state.statistics = SeriesStatistics.from_series(series)
        self.state.status = ChartStatus.READY
        self._load_handle = None
        logger.info(f"{self.name}: data ready ({series.first.year}-{series.last.year})")

    def on_load_failed(self, message: str) -> None:
        self.state.status = ChartStatus.FAILED
        self.state.error_message = message
        self._load_handle = None
        logger.error(f"{self.name}: data failed to load: {message}")

    def setup(self, create_control: CreateControl) -> None:
        """Create the start/end year controls, defaulting to the full range."""
        if not self.loaded:
            raise RuntimeError(f"{self.name}: setup() called before the data was loaded.")

        stats = self.state.statistics
        self.state.geometry = PlotGeometry.from_canvas(self.width, self.height)
        self.state.animation.frames_drawn = 0

        self.start_control = create_control("Start year", stats.min_year, stats.max_year - 1, stats.min_year, 1)
        self.end_control = create_control("End year", stats.min_year + 1, stats.max_year, stats.max_year, 1)

    def draw(self, surface: Surface) -> Optional[Frame]:
        state = self.state

        if state.status == ChartStatus.FAILED:
            surface.show_message(f"Failed to load data: {state.error_message}")
            return None

        if not self.loaded:
            logger.debug("Data not yet loaded")
            return None

        if self.start_control is None or self.end_control is None:
            logger.debug("Controls not yet created")
            return None

        state.window = resolve_view_window(self.start_control, self.end_control)

        frame = build_frame(
            state.series,
            state.statistics,
            state.geometry,
            state.window,
            state.animation.frames_drawn,
            self.labels,
        )
        surface.draw_frame(frame)

        state.animation.frames_drawn += 1

        # Rendering continues after the last segment so window changes show up
        if state.animation.frames_drawn >= state.window.num_years:
            state.status = ChartStatus.SETTLED
        else:
            state.status = ChartStatus.ANIMATING

        return frame

    def destroy(self) -> None:
        for control in (self.start_control, self.end_control):
            if control is not None:
                control.remove()
        self.start_control = None
        self.end_control = None

    # ------------------------------------------------------------------------------
    # Extras
    # ------------------------------------------------------------------------------

    def replay(self) -> None:
        """Restart the draw-in animation from the first segment."""
        if not self.loaded:
            return
        self.state.animation.frames_drawn = 0
        self.state.status = ChartStatus.READY
