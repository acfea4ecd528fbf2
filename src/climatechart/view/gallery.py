"""
Gallery Window
==============
The primary GUI container: a navigation list of visualisations on the left,
the range controls and playback settings on top, the chart canvas below.

Why is this file needed?
------------------------
1. Lifecycle: It mounts the selected visualisation (preload -> setup) and
   unmounts the previous one (destroy).
2. Frame loop: A QTimer calls draw() on the mounted visualisation once per
   frame.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QSplitter, QListWidget, QListWidgetItem,
    QLabel, QPushButton, QSpinBox
)

from climatechart.app.application import VISIBLE_APP_NAME
from climatechart.config import CANVAS_HEIGHT, CANVAS_WIDTH, DEFAULT_DATA_PATH, DEFAULT_FPS
from climatechart.controller.loader import SeriesLoadWorker, start_series_load
from climatechart.view.canvas import ChartCanvas
from climatechart.view.controls import SliderControl
from climatechart.visualisations import registry

logger = logging.getLogger(__name__)


class GalleryWindow(QMainWindow):
    def __init__(self, data_path: str = DEFAULT_DATA_PATH, fps: int = DEFAULT_FPS) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1300, 720)

        self.data_path = data_path
        self.current: Optional[Any] = None
        self._load_worker: Optional[SeriesLoadWorker] = None

        # Animation Timer
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.on_tick)

        # --- SPLITTER (Nav | Content) ---
        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Visualisation list ---
        self.nav = QListWidget()
        self.nav.setMaximumWidth(220)
        for key in registry.list_ids():
            item = QListWidgetItem(registry.visualisation_name(key))
            item.setData(Qt.UserRole, key)
            self.nav.addItem(item)
        splitter.addWidget(self.nav)

        # --- RIGHT SIDE: Controls + Canvas ---
        content = QWidget()
        content_layout = QVBoxLayout(content)

        top_bar = QHBoxLayout()

        # Visualisations add their range controls here
        self.controls_box = QWidget()
        self.controls_layout = QHBoxLayout(self.controls_box)
        self.controls_layout.setContentsMargins(0, 0, 0, 0)
        top_bar.addWidget(self.controls_box, 1)

        top_bar.addWidget(QLabel("Speed:"))
        self.spin_fps = QSpinBox()
        self.spin_fps.setRange(1, 60)
        self.spin_fps.setValue(fps)
        self.spin_fps.setSuffix(" FPS")
        self.spin_fps.valueChanged.connect(self.on_fps_changed)
        top_bar.addWidget(self.spin_fps)

        self.btn_replay = QPushButton("Replay")
        self.btn_replay.clicked.connect(self.on_replay_clicked)
        top_bar.addWidget(self.btn_replay)

        content_layout.addLayout(top_bar)

        self.canvas = ChartCanvas(CANVAS_WIDTH, CANVAS_HEIGHT)
        content_layout.addWidget(self.canvas, 1)

        splitter.addWidget(content)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)

        self.statusBar().showMessage("Ready")

        # Apply initial FPS
        self.on_fps_changed(self.spin_fps.value())

        self.nav.currentRowChanged.connect(self.on_nav_changed)
        if self.nav.count() > 0:
            self.nav.setCurrentRow(0)

    # ------------------------------------------------------------------------------
    # Mounting
    # ------------------------------------------------------------------------------

    def on_nav_changed(self, row: int) -> None:
        if row < 0:
            return
        key = self.nav.item(row).data(Qt.UserRole)
        self.mount(key)

    def mount(self, key: str) -> None:
        """Replace the current visualisation with the one registered under key."""
        self.unmount()

        vis = registry.create_visualisation(
            key, data_path=self.data_path, width=CANVAS_WIDTH, height=CANVAS_HEIGHT
        )
        self.current = vis
        logger.info(f"Mounting visualisation '{key}'")

        vis.preload(self._start_load)
        self.timer.start()

    def unmount(self) -> None:
        if self.current is None:
            return
        logger.info(f"Unmounting visualisation '{self.current.id}'")
        self.current.destroy()
        self.current = None
        self.canvas.clear()

    def _start_load(
        self,
        path: str,
        on_loaded: Callable[[Any], None],
        on_failed: Callable[[str], None],
    ) -> SeriesLoadWorker:
        vis = self.current

        def loaded(series: Any) -> None:
            on_loaded(series)
            # Setup runs once the data is in, and only if still mounted
            if vis is self.current:
                vis.setup(self._create_control)

        worker = start_series_load(path, loaded, on_failed, parent=self)
        worker.finished.connect(self._on_load_finished)
        self._load_worker = worker
        return worker

    def _on_load_finished(self) -> None:
        self._load_worker = None

    def _create_control(self, label: str, minimum: int, maximum: int, initial: int, step: int) -> SliderControl:
        control = SliderControl(label, minimum, maximum, initial, step, parent=self.controls_box)
        self.controls_layout.addWidget(control)
        return control

    # ------------------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------------------

    def on_tick(self) -> None:
        if self.current is None:
            return
        frame = self.current.draw(self.canvas)
        self._update_status(frame.segments if frame is not None else 0)

    def on_fps_changed(self, value: int) -> None:
        """Update timer interval based on FPS."""
        if value > 0:
            interval = 1000 // value
            self.timer.setInterval(interval)

    def on_replay_clicked(self) -> None:
        if self.current is not None:
            self.current.replay()

    def _update_status(self, segments: int) -> None:
        state = self.current.state
        text = f"{self.current.name}: {state.status.value.replace('_', ' ')}"
        if state.window is not None:
            text += f" ({segments}/{state.window.num_years} years, "
            text += f"{state.window.start_year}-{state.window.end_year})"
        self.statusBar().showMessage(text)

    def closeEvent(self, e) -> None:
        self.timer.stop()
        self.unmount()
        if self._load_worker is not None:
            self._load_worker.wait()
        super().closeEvent(e)
