"""Core algorithms: curve smoothing, coordinate mapping and tick planning."""

from .geometry import ChartLayout, bar_height, bar_x, map_point, map_series, plot_height
from .smoothing import CurveTo, MoveTo, points_to_bezier, to_mpl_path, to_svg_path
from .ticks import Tick, plan_ticks, round_half_up, round_max

__all__ = [
    "ChartLayout",
    "bar_height",
    "bar_x",
    "map_point",
    "map_series",
    "plot_height",
    "CurveTo",
    "MoveTo",
    "points_to_bezier",
    "to_mpl_path",
    "to_svg_path",
    "Tick",
    "plan_ticks",
    "round_half_up",
    "round_max",
]
