from __future__ import annotations

import pytest

from climatechart.model.frame import AxisLabels, build_frame
from climatechart.model.series import SeriesStatistics
from climatechart.model.state import ViewWindow

from conftest import make_series


def reveal(series, geometry, window, ticks):
    stats = SeriesStatistics.from_series(series)
    return [build_frame(series, stats, geometry, window, frames_drawn) for frames_drawn in range(ticks)]


def tick_labels(frame):
    return [t.text for t in frame.x_ticks]


def test_three_year_scenario_reveals_one_segment_per_tick(three_years, geometry):
    frames = reveal(three_years, geometry, ViewWindow(1900, 1902), ticks=5)

    assert [f.segments for f in frames] == [0, 1, 2, 2, 2]
    assert frames[0].bands == [] and frames[0].lines == []

    first_line = frames[1].lines[0]
    assert first_line.x1 == pytest.approx(geometry.left_margin)
    assert first_line.y1 == pytest.approx(geometry.bottom_margin)
    assert first_line.x2 == pytest.approx((geometry.left_margin + geometry.right_margin) / 2)


def test_settled_frames_are_identical(three_years, geometry):
    frames = reveal(three_years, geometry, ViewWindow(1900, 1902), ticks=6)
    assert frames[3] == frames[4] == frames[5]


def test_bands_span_adjacent_years_and_use_current_year_color(three_years, geometry):
    frame = reveal(three_years, geometry, ViewWindow(1900, 1902), ticks=3)[-1]

    first, second = frame.bands
    assert first.x == pytest.approx(geometry.left_margin)
    assert first.x + first.width == pytest.approx(second.x)
    assert second.x + second.width == pytest.approx(geometry.right_margin)
    assert first.y == geometry.top_margin
    assert first.height == pytest.approx(geometry.plot_height)
    # 1901 is the middle temperature, 1902 the hottest
    assert first.color.red == pytest.approx(127.5)
    assert second.color.red == pytest.approx(255)


def test_only_years_inside_window_are_drawn(geometry):
    series = make_series([(y, 10.0 + (y - 1900) * 0.1) for y in range(1900, 1911)])
    frame = reveal(series, geometry, ViewWindow(1903, 1906), ticks=20)[-1]

    assert frame.segments == 3
    xs = [line.x1 for line in frame.lines] + [frame.lines[-1].x2]
    assert xs[0] == pytest.approx(geometry.left_margin)
    assert xs[-1] == pytest.approx(geometry.right_margin)


def test_short_window_labels_the_final_year(geometry):
    series = make_series([(y, 14.0 + (y % 3) * 0.1) for y in range(1998, 2006)])
    frames = reveal(series, geometry, ViewWindow(2000, 2003), ticks=4)

    assert tick_labels(frames[2]) == ["2000", "2001"]
    assert tick_labels(frames[3]) == ["2000", "2001", "2002", "2003"]


def test_three_year_scenario_labels(three_years, geometry):
    frames = reveal(three_years, geometry, ViewWindow(1900, 1902), ticks=3)

    assert tick_labels(frames[1]) == ["1900"]
    assert tick_labels(frames[2]) == ["1900", "1901", "1902"]


def test_long_window_spaces_out_tick_labels(geometry):
    series = make_series([(y, 14.0) for y in range(1880, 2017)])
    series_stats = SeriesStatistics.from_series(series)
    frame = build_frame(series, series_stats, geometry, ViewWindow(1880, 2016), frames_drawn=1000)

    # ceil(136 / 8) == 17 years between labels
    assert tick_labels(frame) == [str(y) for y in range(1880, 2016, 17)]
    assert "2016" not in tick_labels(frame)


def test_x_tick_labels_sit_below_the_plot(three_years, geometry):
    frame = reveal(three_years, geometry, ViewWindow(1900, 1902), ticks=3)[-1]

    for tick in frame.x_ticks:
        assert tick.y == pytest.approx(geometry.bottom_margin + geometry.margin_size / 2)
        assert tick.anchor == (0.5, 0.5)


def test_axis_and_y_tick_labels(three_years, three_years_stats, geometry):
    frame = build_frame(three_years, three_years_stats, geometry, ViewWindow(1900, 1902), frames_drawn=0)

    texts = [t.text for t in frame.labels]
    assert texts[:2] == ["year", "℃"]
    assert frame.labels[1].angle == 90.0

    y_ticks = texts[2:]
    assert len(y_ticks) == 9
    assert y_ticks[0] == "10.0"
    assert y_ticks[-1] == "11.0"
    assert frame.labels[2].y == pytest.approx(geometry.bottom_margin)
    assert frame.labels[-1].y == pytest.approx(geometry.top_margin)


def test_custom_label_counts(three_years, three_years_stats, geometry):
    labels = AxisLabels(x_axis_label="Year", y_axis_label="deg C", num_y_tick_labels=4)
    frame = build_frame(three_years, three_years_stats, geometry, ViewWindow(1900, 1902), 0, labels)

    assert [t.text for t in frame.labels[:2]] == ["Year", "deg C"]
    assert len(frame.labels) == 2 + 5


def test_mean_line_spans_plot_width(three_years, three_years_stats, geometry):
    frame = build_frame(three_years, three_years_stats, geometry, ViewWindow(1900, 1902), frames_drawn=0)
    mean = frame.mean_line

    assert mean.x1 == geometry.left_margin
    assert mean.x2 == geometry.right_margin
    assert mean.y1 == mean.y2 == pytest.approx((geometry.top_margin + geometry.bottom_margin) / 2)
    assert mean.color == (200, 200, 200, 255)


def test_empty_window_is_rejected(three_years, three_years_stats, geometry):
    with pytest.raises(ValueError):
        build_frame(three_years, three_years_stats, geometry, ViewWindow(1901, 1901), frames_drawn=0)
