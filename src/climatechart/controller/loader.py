"""
Background Loading (Threading)
==============================
This module contains the QThread subclass that reads the temperature table.

Why is this file needed?
------------------------
1. Responsiveness: The draw loop keeps ticking (and reporting "not loaded")
   while the CSV is parsed on a background thread.
2. Signals: The result is delivered through Qt Signals, which are queued to
   the GUI thread, so chart state is only ever mutated there.

Classes:
    SeriesLoadWorker: Runs load_series() once.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, QThread, Signal

from climatechart.model.series import Series, load_series

logger = logging.getLogger(__name__)


class SeriesLoadWorker(QThread):
    # Signals to update the UI from the background
    loaded = Signal(object)  # Series
    error_occurred = Signal(str)

    def __init__(self, filepath: str, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.filepath = filepath

    def run(self) -> None:
        try:
            logger.info(f"Loading temperature data from: {self.filepath}")
            series = load_series(self.filepath)
            self.loaded.emit(series)
        except Exception as e:
            logger.exception("Loading temperature data failed")
            self.error_occurred.emit(str(e))


def start_series_load(
    filepath: str,
    on_loaded: Callable[[Series], None],
    on_failed: Callable[[str], None],
    parent: Optional[QObject] = None,
) -> SeriesLoadWorker:
    """
    Start loading in the background and return the running worker.
    Keep a reference to it until it finishes.
    """
    worker = SeriesLoadWorker(filepath, parent)
    worker.loaded.connect(on_loaded)
    worker.error_occurred.connect(on_failed)
    worker.finished.connect(worker.deleteLater)
    worker.start()
    return worker
