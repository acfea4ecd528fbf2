"""Fixed-size pixel canvas that draws chart frames with pyqtgraph."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import pyqtgraph as pg
from PySide6.QtGui import QColor, QFont
from PySide6.QtWidgets import QGraphicsRectItem, QWidget

if TYPE_CHECKING:
    from climatechart.model.frame import Frame, LineCommand
    from climatechart.model.mapping import Rgba

logger = logging.getLogger(__name__)

TEXT_PIXEL_SIZE = 16


def to_qcolor(color: Rgba) -> QColor:
    r, g, b, a = (int(round(min(255.0, max(0.0, c)))) for c in color)
    return QColor(r, g, b, a)


class ChartCanvas(pg.PlotWidget):
    """
    PlotWidget used as an immediate-mode drawing surface:
      - view range locked to [0, width] x [0, height] canvas pixels,
      - Y axis pointing down (origin top-left),
      - no axes, mouse interaction or context menu.
    """
    def __init__(self, width: int, height: int, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)
        self.canvas_width = width
        self.canvas_height = height

        self.setBackground('w')
        self.hideAxis('bottom')
        self.hideAxis('left')
        self.hideButtons()
        self.setMenuEnabled(False)
        self.setMouseEnabled(x=False, y=False)

        view_box = self.getViewBox()
        view_box.invertY(True)
        view_box.setAspectLocked(True)
        self.setXRange(0, width, padding=0)
        self.setYRange(0, height, padding=0)
        view_box.disableAutoRange()

        self.setMinimumSize(width // 2, height // 2)

        self._font = QFont()
        self._font.setPixelSize(TEXT_PIXEL_SIZE)

    # ------------------------------------------------------------------------------
    # Surface API
    # ------------------------------------------------------------------------------

    def draw_frame(self, frame: Frame) -> None:
        """Replace the canvas contents with the given frame."""
        self.clear()

        # Background bands first so the lines stay visible on top
        for band in frame.bands:
            item = QGraphicsRectItem(band.x, band.y, band.width, band.height)
            item.setBrush(to_qcolor(band.color))
            item.setPen(pg.mkPen(None))
            self.addItem(item)

        if frame.mean_line is not None:
            self._add_lines([frame.mean_line])

        if frame.lines:
            self._add_lines(frame.lines)

        for cmd in frame.texts:
            item = pg.TextItem(cmd.text, color=to_qcolor(cmd.color), anchor=cmd.anchor, angle=cmd.angle)
            item.setFont(self._font)
            item.setPos(cmd.x, cmd.y)
            self.addItem(item)

    def show_message(self, text: str) -> None:
        self.clear()
        item = pg.TextItem(text, color='r', anchor=(0.5, 0.5))
        item.setFont(self._font)
        item.setPos(self.canvas_width / 2, self.canvas_height / 2)
        self.addItem(item)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _add_lines(self, lines: list[LineCommand]) -> None:
        """Draw lines sharing the first line's pen as one disconnected curve."""
        xs = np.empty(len(lines) * 2, dtype=np.float64)
        ys = np.empty(len(lines) * 2, dtype=np.float64)
        for i, line in enumerate(lines):
            xs[2 * i], xs[2 * i + 1] = line.x1, line.x2
            ys[2 * i], ys[2 * i + 1] = line.y1, line.y2

        pen = pg.mkPen(color=to_qcolor(lines[0].color), width=lines[0].width)
        self.addItem(pg.PlotCurveItem(x=xs, y=ys, pen=pen, connect='pairs'))
