"""Recorded and validated hours: two smoothed lines with endpoint markers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..config import Settings
from ..core.geometry import ChartLayout, map_series
from ..core.smoothing import points_to_bezier
from ..ingest.client import StatsSource
from ..types import Circle, ClipsSample, Curve, Element, Header, Metric, RenderState
from ..utils.labels import format_date_label, to_precision
from .base import register_variant

ATTRIBUTES = ("valid", "total")


def format_seconds(total_seconds: float) -> str:
    """Format a duration as ``"Hh Mm Ss"``.

    * ``1000`` hours or more collapse to thousands of hours with two
      significant digits, e.g. ``"1.0k"``.
    * Minutes are only shown below ten hours, seconds only below ten minutes
      of a duration under one hour.
    * Zero parts are dropped; nothing left renders as ``"0"``.
    """

    total_seconds = int(total_seconds)
    seconds = total_seconds % 60
    minutes = (total_seconds // 60) % 60
    hours = total_seconds // 3600

    if hours >= 1000:
        return to_precision(hours / 1000, 2) + "k"

    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if hours < 10 and minutes > 0:
        parts.append(f"{minutes}m")
    if hours == 0 and minutes < 10 and seconds > 0:
        parts.append(f"{seconds}s")
    return " ".join(parts) or "0"


@dataclass
class ClipsChart:
    name: str = "clips"
    tick_count: int = 7
    circle_radius: float = 8
    timezone: str = "UTC"

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClipsChart":
        return cls(
            tick_count=settings.clips.tick_count,
            circle_radius=settings.clips.circle_radius,
            timezone=settings.labels.timezone,
        )

    async def fetch(self, source: StatsSource, locale: Optional[str]) -> Sequence[ClipsSample]:
        return await source.fetch_clips_stats(locale)

    def get_max(self, data: Sequence[ClipsSample]) -> float:
        return max((max(d.total, d.valid) for d in data), default=0)

    def format_number(self, value: float) -> str:
        return format_seconds(value)

    def render_header(self, state: RenderState) -> Header:
        latest = state.latest
        metrics = tuple(
            Metric(
                label_id=label_id,
                value=format_seconds(getattr(latest, attribute)) if latest is not None else "?",
                attribute=attribute,
            )
            for label_id, attribute in (("hours-recorded", "total"), ("hours-validated", "valid"))
        )
        return Header(metrics=metrics)

    def render_x_label(self, datum: ClipsSample) -> str:
        return format_date_label(datum.date, self.timezone)

    def _line(self, state: RenderState, attribute: str, layout: ChartLayout) -> tuple[Element, ...]:
        points = map_series(
            [getattr(d, attribute) for d in state.data],
            state.max_value,
            state.plot_width,
            layout=layout,
            tick_count=self.tick_count,
            marker_radius=self.circle_radius,
        )
        if len(points) == 0:
            return ()
        x, y = (float(v) for v in points[-1])
        return (
            Curve(
                commands=tuple(points_to_bezier([tuple(p) for p in points.tolist()])),
                css_class=attribute,
                stroke_width=layout.plot_stroke_width,
            ),
            Circle(x, y, self.circle_radius, css_class=f"outer {attribute}", fill="white"),
            Circle(x, y, self.circle_radius - 2, css_class=f"inner {attribute}"),
        )

    def render_plot(self, state: RenderState, layout: ChartLayout) -> tuple[Element, ...]:
        elements: tuple[Element, ...] = ()
        for attribute in ATTRIBUTES:
            elements += self._line(state, attribute, layout)
        return elements


register_variant("clips", ClipsChart.from_settings)
