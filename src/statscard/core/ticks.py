"""Horizontal grid planning.

The top of a chart is rounded up to a multiple of ``tick_count - 1`` so that
every tick label is an integer.  Note that the grid lines are spaced by
``total_line_margin / tick_count``: the lowest line sits one slot above the
bottom of the card and the x-axis labels use the remaining slot.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .geometry import DEFAULT_LAYOUT, ChartLayout


@dataclass(frozen=True)
class Tick:
    """A grid line at ``y`` labelled with ``value``."""

    index: int
    value: int
    y: float


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going up."""

    return int(math.floor(value + 0.5))


def _check_tick_count(tick_count: int) -> None:
    if tick_count < 2:
        raise ValueError("tick_count must be at least 2")


def floor_max(tick_count: int) -> int:
    """Chart maximum used before any data is available."""

    _check_tick_count(tick_count)
    return tick_count - 1


def round_max(actual_max: float, tick_count: int) -> float:
    """Round ``actual_max`` up to the next multiple of ``tick_count - 1``.

    A value that already is a multiple still gains one full step, so the
    result is always strictly greater than ``actual_max``.
    """

    _check_tick_count(tick_count)
    steps = tick_count - 1
    return actual_max + (steps - actual_max % steps)


def plan_ticks(
    tick_count: int, max_value: float, *, layout: ChartLayout = DEFAULT_LAYOUT
) -> list[Tick]:
    """Return ``tick_count`` ticks from ``max_value`` (top) down to ``0``."""

    _check_tick_count(tick_count)
    steps = tick_count - 1
    return [
        Tick(
            index=i,
            value=round_half_up((steps - i) * max_value / steps),
            y=i * layout.total_line_margin / tick_count + layout.y_offset,
        )
        for i in range(tick_count)
    ]
