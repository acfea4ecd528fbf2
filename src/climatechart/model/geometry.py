from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MARGIN_SIZE = 35.0


@dataclass(frozen=True)
class PlotGeometry:
    """
    Fixed pixel layout of the plot area.
    Left and bottom margins are doubled to leave room for axis and tick labels.
    """
    width: float
    height: float
    margin_size: float
    left_margin: float
    right_margin: float
    top_margin: float
    bottom_margin: float

    @classmethod
    def from_canvas(cls, width: float, height: float, margin_size: float = DEFAULT_MARGIN_SIZE) -> PlotGeometry:
        if width <= 3 * margin_size or height <= 3 * margin_size:
            raise ValueError(f"Canvas {width}x{height} is too small for margin {margin_size}.")

        return cls(
            width=float(width),
            height=float(height),
            margin_size=float(margin_size),
            left_margin=margin_size * 2,
            right_margin=width - margin_size,
            top_margin=float(margin_size),
            bottom_margin=height - margin_size * 2,
        )

    @property
    def plot_width(self) -> float:
        return self.right_margin - self.left_margin

    @property
    def plot_height(self) -> float:
        return self.bottom_margin - self.top_margin
