import numpy as np
import pytest

from statscard.config import Settings
from statscard.core.geometry import (
    ChartLayout,
    bar_height,
    bar_x,
    line_x_bounds,
    map_point,
    map_series,
    plot_height,
    x_label_position,
)

LAYOUT = ChartLayout()


def test_layout_defaults_and_settings():
    assert LAYOUT.line_offset == 45
    settings = Settings()
    settings.layout.plot_padding = 20
    assert ChartLayout.from_settings(settings).plot_padding == 20
    assert ChartLayout.from_settings(settings.layout).plot_padding == 20


def test_plot_height():
    assert plot_height(LAYOUT, 4) == pytest.approx(154 * 3 / 4)
    assert plot_height(LAYOUT, 7) == pytest.approx(132)


@pytest.mark.parametrize("width", [200.0, 600.0, 1234.5])
def test_line_endpoints_inside_insets(width):
    n = 5
    first = map_point(0, 1.0, n, 6.0, width, tick_count=7, marker_radius=8)
    last = map_point(n - 1, 1.0, n, 6.0, width, tick_count=7, marker_radius=8)
    left_inset = LAYOUT.line_offset + LAYOUT.plot_padding
    right_inset = LAYOUT.plot_padding + 8
    assert first[0] == pytest.approx(left_inset)
    assert last[0] == pytest.approx(width - right_inset)
    assert line_x_bounds(width, marker_radius=8) == pytest.approx((left_inset, width - right_inset))


def test_x_monotonic_in_index():
    xs = [map_point(i, 0.0, 6, 6.0, 500.0, tick_count=7)[0] for i in range(6)]
    assert all(a < b for a, b in zip(xs, xs[1:]))


def test_y_inverted_and_stroke_compensated():
    top = map_point(0, 6.0, 2, 6.0, 500.0, tick_count=7)[1]
    bottom = map_point(0, 0.0, 2, 6.0, 500.0, tick_count=7)[1]
    assert top == pytest.approx(LAYOUT.y_offset - LAYOUT.plot_stroke_width / 2)
    assert bottom == pytest.approx(top + plot_height(LAYOUT, 7))
    mid = map_point(0, 3.0, 2, 6.0, 500.0, tick_count=7)[1]
    assert top < mid < bottom


def test_map_point_guards():
    with pytest.raises(ValueError):
        map_point(0, 1.0, 1, 6.0, 500.0, tick_count=7)
    with pytest.raises(ValueError):
        map_point(0, 1.0, 3, 0.0, 500.0, tick_count=7)


def test_map_series_matches_map_point():
    values = [1.0, 4.0, 2.5, 6.0]
    points = map_series(values, 6.0, 480.0, tick_count=7, marker_radius=8)
    assert points.shape == (4, 2)
    for i, value in enumerate(values):
        np.testing.assert_allclose(
            points[i], map_point(i, value, 4, 6.0, 480.0, tick_count=7, marker_radius=8)
        )


@pytest.mark.parametrize("values", [[], [3.0]])
def test_map_series_needs_two_samples(values):
    points = map_series(values, 6.0, 480.0, tick_count=7)
    assert points.shape == (0, 2)
    assert not np.isnan(points).any()


def test_bar_grid_is_fixed():
    width = 415.0
    step = (width - LAYOUT.plot_padding - LAYOUT.text_offset) / 10
    x0 = bar_x(0, width, bar_count=10, bar_width=15)
    assert x0 == pytest.approx(LAYOUT.line_offset + LAYOUT.plot_padding - 7.5)
    assert bar_x(9, width, bar_count=10, bar_width=15) == pytest.approx(x0 + 9 * step)


def test_bar_height_zero_max():
    assert bar_height(10, 0, 115.5) == 0.0
    assert bar_height(0, 0, 115.5) == 0.0
    assert bar_height(3, 6, 115.5) == pytest.approx(57.75)


def test_x_label_position():
    x, y = x_label_position(2, 4, 453.0)
    assert x == pytest.approx(45 + 2 * 100)
    assert y == pytest.approx(164)
