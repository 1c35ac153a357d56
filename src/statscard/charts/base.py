from __future__ import annotations

"""Chart variant protocol and registry.

A variant supplies everything chart specific to the shared
:class:`~statscard.engine.StatsEngine`: how to fetch its series, how to
derive the raw maximum, how to format axis numbers and labels, and which
elements to draw inside the plot area.
"""

from typing import Callable, Dict, List, Optional, Protocol, Sequence, runtime_checkable

from ..config import Settings
from ..core.geometry import ChartLayout
from ..ingest.client import StatsSource
from ..types import DataPoint, Element, Header, RenderState


@runtime_checkable
class ChartVariant(Protocol):
    """Protocol describing a chart variant."""

    name: str
    tick_count: int

    async def fetch(self, source: StatsSource, locale: Optional[str]) -> Sequence[DataPoint]:
        """Fetch the series, unfiltered when ``locale`` is ``None``."""

    def get_max(self, data: Sequence[DataPoint]) -> float:
        """Return the largest plotted value in ``data`` (``0`` when empty)."""

    def format_number(self, value: float) -> str:
        """Format a y-axis tick value."""

    def render_header(self, state: RenderState) -> Header:
        """Summarise ``state`` above the chart."""

    def render_x_label(self, datum: DataPoint) -> str:
        """Return the x-axis label for ``datum``."""

    def render_plot(self, state: RenderState, layout: ChartLayout) -> tuple[Element, ...]:
        """Return the elements drawn inside the plot area."""


VariantFactory = Callable[[Settings], ChartVariant]

_registry: Dict[str, VariantFactory] = {}


def register_variant(name: str, factory: VariantFactory) -> None:
    """Register ``factory`` under ``name`` in the global registry."""
    _registry[name] = factory


def get_variant(name: str, settings: Settings | None = None) -> ChartVariant:
    """Build the variant registered as ``name``."""
    if settings is None:
        settings = Settings()
    variant = _registry[name](settings)
    validate_variant(variant)
    return variant


def available_variants() -> List[str]:
    """Return the list of registered variant names."""
    return list(_registry)


def validate_variant(variant: object) -> None:
    """Validate that ``variant`` satisfies the :class:`ChartVariant` protocol."""
    if not isinstance(variant, ChartVariant):
        raise TypeError("Variant does not implement the required protocol")
