"""Data to pixel coordinate transforms shared by both charts.

All positions are expressed in the coordinate system of the drawing surface:
``x`` grows to the right and ``y`` grows downwards, so larger values map to
smaller ``y``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..config import LayoutSettings, Settings
from ..types import Point


@dataclass(frozen=True)
class ChartLayout:
    """Fixed insets and offsets of a chart card, in pixels."""

    y_offset: float = 10
    total_line_margin: float = 154
    text_offset: float = 40
    plot_padding: float = 13
    plot_stroke_width: float = 2

    @property
    def line_offset(self) -> float:
        """Left edge of the grid lines, just past the tick labels."""

        return self.text_offset + 5

    @classmethod
    def from_settings(cls, settings: Settings | LayoutSettings | None = None) -> "ChartLayout":
        if settings is None:
            settings = Settings()
        section = settings.layout if isinstance(settings, Settings) else settings
        return cls(**section.model_dump())


DEFAULT_LAYOUT = ChartLayout()


def plot_height(layout: ChartLayout, tick_count: int) -> float:
    """Height of the band between the top and the bottom grid line."""

    return layout.total_line_margin * (tick_count - 1) / tick_count


def line_x_bounds(plot_width: float, *, layout: ChartLayout = DEFAULT_LAYOUT, marker_radius: float = 0.0) -> tuple[float, float]:
    """Return the ``x`` of the first and of the last line chart sample."""

    left = layout.line_offset + layout.plot_padding
    right = plot_width - layout.plot_padding - marker_radius
    return left, right


def map_point(
    index: int,
    value: float,
    series_length: int,
    max_value: float,
    plot_width: float,
    *,
    layout: ChartLayout = DEFAULT_LAYOUT,
    tick_count: int,
    marker_radius: float = 0.0,
) -> Point:
    """Map sample ``index`` with ``value`` to a line chart pixel position.

    Samples are spread evenly over ``series_length - 1`` intervals between the
    bounds given by :func:`line_x_bounds`.  ``y`` is inverted and shifted up by
    half the stroke width so the topmost stroke is not clipped.
    """

    if series_length < 2:
        raise ValueError("series_length must be at least 2 to map a line chart")
    if max_value <= 0:
        raise ValueError("max_value must be positive")
    left, right = line_x_bounds(plot_width, layout=layout, marker_radius=marker_radius)
    x = left + index * (right - left) / (series_length - 1)
    y = (
        layout.y_offset
        - layout.plot_stroke_width / 2
        + (1 - value / max_value) * plot_height(layout, tick_count)
    )
    return (x, y)


def map_series(
    values: Sequence[float],
    max_value: float,
    plot_width: float,
    *,
    layout: ChartLayout = DEFAULT_LAYOUT,
    tick_count: int,
    marker_radius: float = 0.0,
) -> np.ndarray:
    """Vectorised :func:`map_point` over a whole series.

    Returns an ``(n, 2)`` array, or an empty ``(0, 2)`` array when fewer than
    two values are given since no line can be drawn through them.
    """

    arr = np.asarray(values, dtype=float)
    n = arr.size
    if n < 2 or max_value <= 0:
        return np.empty((0, 2), dtype=float)
    left, right = line_x_bounds(plot_width, layout=layout, marker_radius=marker_radius)
    xs = left + np.arange(n) * (right - left) / (n - 1)
    ys = (
        layout.y_offset
        - layout.plot_stroke_width / 2
        + (1 - arr / max_value) * plot_height(layout, tick_count)
    )
    return np.column_stack([xs, ys])


def bar_x(
    index: int,
    plot_width: float,
    *,
    layout: ChartLayout = DEFAULT_LAYOUT,
    bar_count: int,
    bar_width: float,
) -> float:
    """Left edge of bar slot ``index`` on a fixed ``bar_count`` grid."""

    step = (plot_width - layout.plot_padding - layout.text_offset) / bar_count
    return layout.line_offset + layout.plot_padding - bar_width / 2 + index * step


def bar_height(value: float, max_value: float, band: float) -> float:
    """Height of a bar for ``value``; ``0.0`` when ``max_value`` is zero."""

    if max_value <= 0:
        return 0.0
    return max(value * band / max_value, 0.0)


def x_label_position(
    index: int, count: int, plot_width: float, *, layout: ChartLayout = DEFAULT_LAYOUT
) -> Point:
    """Anchor of the ``index``-th of ``count`` x-axis labels."""

    step = (plot_width - layout.plot_padding - layout.text_offset) / count
    return (layout.line_offset + index * step, layout.y_offset + layout.total_line_margin)
