from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QSlider

logger = logging.getLogger(__name__)


class SliderControl(QWidget):
    """Labelled integer slider used as a start/end year range control."""

    def __init__(
        self,
        label: str,
        minimum: int,
        maximum: int,
        initial: int,
        step: int = 1,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        layout.addWidget(QLabel(f"{label}:"))

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(int(minimum), int(maximum))
        self.slider.setSingleStep(int(step))
        self.slider.setPageStep(int(step) * 10)
        self.slider.setValue(int(initial))
        self.slider.setMinimumWidth(160)
        layout.addWidget(self.slider)

        self.lbl_value = QLabel(str(self.slider.value()))
        self.lbl_value.setMinimumWidth(40)
        layout.addWidget(self.lbl_value)

        self.slider.valueChanged.connect(lambda v: self.lbl_value.setText(str(v)))

    # RangeControl API
    def value(self) -> int:
        return self.slider.value()

    def set_value(self, value: int) -> None:
        self.slider.setValue(int(value))

    def remove(self) -> None:
        """Detach from the parent layout and schedule deletion."""
        self.setParent(None)
        self.deleteLater()
