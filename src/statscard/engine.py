"""The statistics card engine.

:class:`StatsEngine` owns the state of one chart card: the selected locale,
the fetched series, the rounded chart maximum and the measured width of the
drawing surface.  It reacts to discrete events only (start, fetch
completion, locale selection, resize, stop) and replaces its
:class:`~statscard.types.RenderState` wholesale on each of them.

Only one fetch result is ever live.  The locale captured when a fetch is
dispatched is compared with the selected locale when it completes; a
mismatch means the user moved on and the result is dropped.  Requests are
never cancelled.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from typing import Callable, Iterable, List, Optional, Protocol, Sequence, runtime_checkable

from .charts.base import ChartVariant
from .config import Settings
from .core.geometry import ChartLayout, x_label_position
from .core.ticks import floor_max, plan_ticks, round_max
from .ingest.client import StatsSource
from .ingest.locales import category_options, load_locales
from .types import ALL_LOCALES, Element, Line, RenderState, Scene, Text

logger = logging.getLogger(__name__)

Listener = Callable[[], None]
Subscriber = Callable[[RenderState], None]


class Status(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"


@runtime_checkable
class Surface(Protocol):
    """A measurable drawing area that reports when it is resized."""

    def measure_width(self) -> float:
        """Return the current rendered width in pixels."""

    def add_resize_listener(self, listener: Listener) -> None:
        """Call ``listener`` after every resize."""

    def remove_resize_listener(self, listener: Listener) -> None:
        """Stop calling ``listener``."""


class FixedSurface:
    """Headless surface whose width only changes through :meth:`resize`."""

    def __init__(self, width: float) -> None:
        self.width = float(width)
        self._listeners: List[Listener] = []

    def measure_width(self) -> float:
        return self.width

    def add_resize_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_resize_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def resize(self, width: float) -> None:
        self.width = float(width)
        for listener in list(self._listeners):
            listener()


class StatsEngine:
    """Polls a data source for one chart variant and lays out its card."""

    def __init__(
        self,
        variant: ChartVariant,
        source: StatsSource,
        surface: Surface,
        *,
        locales: Optional[Sequence[str]] = None,
        layout: Optional[ChartLayout] = None,
        settings: Optional[Settings] = None,
        category: str = ALL_LOCALES,
    ) -> None:
        if settings is None:
            settings = Settings()
        self.variant = variant
        self.source = source
        self.surface = surface
        self.layout = layout or ChartLayout.from_settings(settings)
        self.options = category_options(
            list(locales) if locales is not None else load_locales(settings=settings)
        )
        if category not in self.options:
            raise ValueError(f"unknown category: {category}")
        self._floor = floor_max(variant.tick_count)
        self._state = RenderState(data=(), category=category, max_value=self._floor, plot_width=0.0)
        self._status = Status.IDLE
        self._stopped = False
        self._subscribers: List[Subscriber] = []

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def state(self) -> RenderState:
        return self._state

    @property
    def status(self) -> Status:
        return self._status

    def subscribe(self, subscriber: Subscriber) -> None:
        """Call ``subscriber`` with every new :class:`RenderState`."""
        self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: Subscriber) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    def _set_state(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        for subscriber in list(self._subscribers):
            subscriber(self._state)

    def _set_status(self, status: Status) -> None:
        if status is not self._status:
            logger.info("%s chart: %s -> %s", self.variant.name, self._status.value, status.value)
            self._status = status

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Observe the surface, measure it and load the current locale."""

        self.surface.add_resize_listener(self.update_size)
        self._stopped = False
        self.update_size()
        await self.update_data()

    def stop(self) -> None:
        """Stop observing the surface; pending fetch results are ignored."""

        self.surface.remove_resize_listener(self.update_size)
        self._stopped = True

    def update_size(self) -> None:
        self._set_state(plot_width=float(self.surface.measure_width()))

    async def update_data(self) -> None:
        """Fetch data for the selected locale and publish it if still wanted."""

        locale = self._state.category
        self._set_status(Status.LOADING)
        logger.debug("%s chart: fetching locale %s", self.variant.name, locale)
        data = await self.variant.fetch(self.source, None if locale == ALL_LOCALES else locale)
        if locale != self._state.category or self._stopped:
            logger.debug(
                "%s chart: discarding result for %s (selected %s)",
                self.variant.name,
                locale,
                self._state.category,
            )
            return
        data = tuple(data)
        max_value = round_max(self.variant.get_max(data), self.variant.tick_count)
        self._set_state(data=data, max_value=max_value)
        self._set_status(Status.READY)

    async def change_category(self, category: str) -> None:
        """Select ``category``, clear the chart and load its data."""

        if category not in self.options:
            raise ValueError(f"unknown category: {category}")
        self._set_state(data=(), max_value=self._floor, category=category)
        await self.update_data()

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def _grid(self, state: RenderState) -> Iterable[Element]:
        layout = self.layout
        for tick in plan_ticks(self.variant.tick_count, state.max_value, layout=layout):
            yield Text(
                layout.text_offset,
                tick.y,
                self.variant.format_number(tick.value),
                anchor="end",
                baseline="middle",
            )
            yield Line(layout.line_offset, tick.y, state.plot_width + layout.plot_padding, tick.y)

    def _x_labels(self, state: RenderState) -> Iterable[Element]:
        count = len(state.data)
        for i, datum in enumerate(state.data):
            x, y = x_label_position(i, count, state.plot_width, layout=self.layout)
            yield Text(x, y, self.variant.render_x_label(datum))

    def render(self) -> Scene:
        """Lay out the card for the current state."""

        state = self._state
        elements = (
            *self._grid(state),
            *self._x_labels(state),
            *self.variant.render_plot(state, self.layout),
        )
        return Scene(
            header=self.variant.render_header(state),
            category=state.category,
            options=tuple(self.options),
            elements=tuple(elements),
        )
