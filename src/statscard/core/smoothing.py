"""Curve smoothing for line charts.

:func:`points_to_bezier` turns an ordered list of points into a path made of
one move-to followed by a cubic Bézier segment per subsequent point.  The
control points follow a Catmull-Rom style rule: the tangent at ``p[i]`` is
parallel to ``p[i+1] - p[i-1]`` and scaled by :data:`SMOOTHING`, so the path
passes through every input point with a continuous slope.  At either end the
missing neighbour is replaced by the end point itself, which keeps the curve
inside the data range.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence, Union

import numpy as np
from matplotlib.path import Path as MplPath

from ..types import Point

SMOOTHING = 0.2


class MoveTo(NamedTuple):
    point: Point


class CurveTo(NamedTuple):
    control1: Point
    control2: Point
    end: Point


PathCommand = Union[MoveTo, CurveTo]


def _as_point(arr: np.ndarray) -> Point:
    return (float(arr[0]), float(arr[1]))


def points_to_bezier(
    points: Sequence[Point], smoothing: float = SMOOTHING
) -> list[PathCommand]:
    """Return drawing commands for a smooth curve through ``points``.

    Parameters
    ----------
    points:
        Ordered ``(x, y)`` pairs.  At least one point is required.
    smoothing:
        Tension factor applied to the neighbour difference when placing
        control points.

    Returns
    -------
    list
        ``[MoveTo(p0), CurveTo(...), ...]`` with exactly ``len(points) - 1``
        curve commands.
    """

    if len(points) == 0:
        raise ValueError("points_to_bezier requires at least one point")

    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    n = len(pts)
    commands: list[PathCommand] = [MoveTo(tuple(points[0]))]  # type: ignore[arg-type]
    for i in range(1, n):
        before = pts[i - 2] if i >= 2 else pts[i - 1]
        after = pts[i + 1] if i + 1 < n else pts[i]
        control1 = pts[i - 1] + smoothing * (pts[i] - before)
        control2 = pts[i] - smoothing * (after - pts[i - 1])
        commands.append(
            CurveTo(_as_point(control1), _as_point(control2), tuple(points[i]))  # type: ignore[arg-type]
        )
    return commands


def _fmt(value: float) -> str:
    return f"{value:.3f}".rstrip("0").rstrip(".")


def to_svg_path(commands: Sequence[PathCommand]) -> str:
    """Serialise ``commands`` using SVG path ``d`` syntax."""

    parts = []
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            x, y = cmd.point
            parts.append(f"M {_fmt(x)},{_fmt(y)}")
        else:
            coords = " ".join(f"{_fmt(x)},{_fmt(y)}" for x, y in cmd)
            parts.append(f"C {coords}")
    return " ".join(parts)


def to_mpl_path(commands: Sequence[PathCommand]) -> MplPath:
    """Convert ``commands`` into a :class:`matplotlib.path.Path`."""

    vertices: list[Point] = []
    codes: list[int] = []
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            vertices.append(cmd.point)
            codes.append(MplPath.MOVETO)
        else:
            vertices.extend(cmd)
            codes.extend([MplPath.CURVE4] * 3)
    return MplPath(vertices, codes)
