from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

pytest.importorskip("PySide6.QtWidgets")
pytest.importorskip("pyqtgraph")

from PySide6.QtCore import QCoreApplication

from climatechart.app.application import create_app
from climatechart.model.state import ChartStatus
from climatechart.view.gallery import GalleryWindow


def wait_until_loaded(window: GalleryWindow) -> None:
    worker = window._load_worker
    if worker is not None:
        worker.wait(5000)
    for _ in range(50):
        QCoreApplication.processEvents()
        if window.current.state.status != ChartStatus.NOT_LOADED:
            return
    raise AssertionError("data never finished loading")


@pytest.fixture
def app():
    return create_app()


def test_gallery_mounts_and_animates(app, write_csv):
    path = write_csv("date,temperature\n1900,10.0\n1901,10.5\n1902,11.0\n1903,10.8\n")
    window = GalleryWindow(data_path=path, fps=30)
    window.show()
    window.timer.stop()
    try:
        assert window.nav.count() == 1
        assert window.nav.item(0).text() == "Climate Change"

        wait_until_loaded(window)
        vis = window.current
        assert vis.state.status == ChartStatus.READY
        assert vis.start_control.value() == 1900
        assert vis.end_control.value() == 1903

        window.on_tick()
        assert "(0/3 years, 1900-1903)" in window.statusBar().currentMessage()

        window.on_tick()
        assert "(1/3 years, 1900-1903)" in window.statusBar().currentMessage()

        for _ in range(3):
            window.on_tick()

        assert vis.state.status == ChartStatus.SETTLED
        assert len(window.canvas.getPlotItem().items) > 0
        assert "settled" in window.statusBar().currentMessage()
        assert "(3/3 years, 1900-1903)" in window.statusBar().currentMessage()

        window.on_replay_clicked()
        assert vis.state.animation.frames_drawn == 0
    finally:
        window.close()

    assert window.current is None


def test_gallery_reports_load_failure(app, tmp_path):
    window = GalleryWindow(data_path=str(tmp_path / "missing.csv"))
    window.show()
    window.timer.stop()
    try:
        wait_until_loaded(window)
        window.on_tick()

        assert window.current.state.status == ChartStatus.FAILED
        assert window.current.start_control is None
        assert "failed" in window.statusBar().currentMessage()
    finally:
        window.close()
