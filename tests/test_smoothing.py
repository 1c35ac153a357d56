import numpy as np
import pytest
from matplotlib.path import Path as MplPath

from statscard.core.smoothing import (
    SMOOTHING,
    CurveTo,
    MoveTo,
    points_to_bezier,
    to_mpl_path,
    to_svg_path,
)


def test_single_point_has_no_curves():
    commands = points_to_bezier([(3.0, 4.0)])
    assert commands == [MoveTo((3.0, 4.0))]


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        points_to_bezier([])


@pytest.mark.parametrize("n", [2, 3, 7])
def test_one_curve_per_segment_through_every_point(n):
    points = [(float(i * 10), float((i * 7) % 5)) for i in range(n)]
    commands = points_to_bezier(points)
    assert isinstance(commands[0], MoveTo)
    assert commands[0].point == points[0]
    curves = commands[1:]
    assert len(curves) == n - 1
    assert all(isinstance(c, CurveTo) for c in curves)
    assert [c.end for c in curves] == points[1:]
    assert curves[-1].end == points[-1]


def test_control_points_use_neighbours():
    points = [(0.0, 0.0), (10.0, 10.0), (20.0, 0.0)]
    first, second = points_to_bezier(points)[1:]
    # No point before the start: the start itself stands in.
    assert first.control1 == pytest.approx((0 + SMOOTHING * 10, 0 + SMOOTHING * 10))
    assert first.control2 == pytest.approx((10 - SMOOTHING * 20, 10 - SMOOTHING * 0))
    assert second.control1 == pytest.approx((10 + SMOOTHING * 20, 10 + SMOOTHING * 0))
    # No point after the end: the end itself stands in.
    assert second.control2 == pytest.approx((20 - SMOOTHING * 10, 0 + SMOOTHING * 10))


def test_slope_is_continuous_at_interior_points():
    points = [(0.0, 5.0), (10.0, 1.0), (20.0, 8.0), (30.0, 3.0)]
    commands = points_to_bezier(points)
    for k in range(1, len(points) - 1):
        incoming = np.subtract(points[k], commands[k].control2)
        outgoing = np.subtract(commands[k + 1].control1, points[k])
        assert incoming[0] * outgoing[1] - incoming[1] * outgoing[0] == pytest.approx(0.0)
        assert np.dot(incoming, outgoing) > 0


def test_collinear_points_stay_on_the_line():
    points = [(0.0, 0.0), (1.0, 2.0), (2.0, 4.0), (3.0, 6.0)]
    for cmd in points_to_bezier(points)[1:]:
        for x, y in cmd:
            assert y == pytest.approx(2 * x)


def test_deterministic():
    points = [(0.0, 1.0), (5.0, 3.0), (9.0, 2.0)]
    assert points_to_bezier(points) == points_to_bezier(list(points))


def test_svg_serialisation():
    d = to_svg_path(points_to_bezier([(0.0, 0.0), (10.0, 0.0)]))
    assert d == "M 0,0 C 2,0 8,0 10,0"
    assert to_svg_path(points_to_bezier([(1.5, 2.25)])) == "M 1.5,2.25"


def test_matplotlib_path_codes():
    path = to_mpl_path(points_to_bezier([(0.0, 0.0), (10.0, 0.0), (20.0, 5.0)]))
    assert list(path.codes) == [MplPath.MOVETO] + [MplPath.CURVE4] * 6
    np.testing.assert_allclose(path.vertices[-1], [20.0, 5.0])
