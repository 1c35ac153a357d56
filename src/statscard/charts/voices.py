"""Voices online: a bar histogram over a fixed number of slots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..config import Settings
from ..core.geometry import ChartLayout, bar_height, bar_x, plot_height
from ..core.ticks import round_half_up
from ..ingest.client import StatsSource
from ..types import Element, Header, Metric, Rect, RenderState, VoicesSample
from ..utils.labels import format_grouped, format_time_label
from .base import register_variant

BAR_FILL = "#88d1f1"


def format_compact(value: float) -> str:
    """Abbreviate values above one thousand as ``"Nk"``."""

    if value > 1000:
        return f"{round_half_up(value / 1000)}k"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


@dataclass
class VoicesChart:
    name: str = "voices"
    tick_count: int = 4
    bar_count: int = 10
    bar_width: float = 15
    timezone: str = "UTC"

    @classmethod
    def from_settings(cls, settings: Settings) -> "VoicesChart":
        return cls(
            tick_count=settings.voices.tick_count,
            bar_count=settings.voices.bar_count,
            bar_width=settings.voices.bar_width,
            timezone=settings.labels.timezone,
        )

    async def fetch(self, source: StatsSource, locale: Optional[str]) -> Sequence[VoicesSample]:
        return await source.fetch_clip_voices(locale)

    def get_max(self, data: Sequence[VoicesSample]) -> float:
        return max((d.voices for d in data), default=0)

    def format_number(self, value: float) -> str:
        return format_compact(value)

    def render_header(self, state: RenderState) -> Header:
        latest = state.latest
        value = format_grouped(latest.voices) if latest is not None else "?"
        return Header(title_id="voices-online", metrics=(Metric("voices-online", value, "voices"),))

    def render_x_label(self, datum: VoicesSample) -> str:
        return format_time_label(datum.date, self.timezone)

    def render_plot(self, state: RenderState, layout: ChartLayout) -> tuple[Element, ...]:
        band = plot_height(layout, self.tick_count)

        def slot_x(i: int) -> float:
            return bar_x(i, state.plot_width, layout=layout, bar_count=self.bar_count, bar_width=self.bar_width)

        slots = tuple(
            Rect(slot_x(i), layout.y_offset, self.bar_width, band, css_class="bg")
            for i in range(self.bar_count)
        )
        bars = []
        for i, datum in enumerate(state.data):
            height = bar_height(datum.voices, state.max_value, band)
            bars.append(
                Rect(
                    slot_x(i),
                    layout.y_offset + band - height,
                    self.bar_width,
                    height,
                    css_class="current" if i + 1 == self.bar_count else "",
                    fill=BAR_FILL,
                )
            )
        return slots + tuple(bars)


register_variant("voices", VoicesChart.from_settings)
