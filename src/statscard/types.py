"""Common type helpers for statscard.

This module defines the records returned by the statistics API, the render
state snapshot owned by :class:`~statscard.engine.StatsEngine` and the small
scene primitives handed to renderers.  The structures are intentionally
minimal but add clarity around frequently exchanged data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Sequence, Union

from pydantic import BaseModel, ConfigDict

ALL_LOCALES = "all"

Point = tuple[float, float]


class ClipsSample(BaseModel):
    """Recorded and validated clip durations, in seconds, at ``date``."""

    model_config = ConfigDict(frozen=True)

    date: datetime
    total: float
    valid: float


class VoicesSample(BaseModel):
    """Number of contributors online at ``date``."""

    model_config = ConfigDict(frozen=True)

    date: datetime
    voices: int


DataPoint = Union[ClipsSample, VoicesSample]


@dataclass(frozen=True)
class RenderState:
    """Snapshot of everything a chart needs to draw itself."""

    data: tuple[DataPoint, ...]
    category: str
    max_value: float
    plot_width: float

    @property
    def latest(self) -> DataPoint | None:
        """Return the most recent sample, if any."""

        return self.data[-1] if self.data else None


# ---------------------------------------------------------------------------
# Scene primitives
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    text: str
    css_class: str = "tick-label"
    anchor: str = "start"
    baseline: str = "auto"


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str = "rgba(0,0,0,0.2)"


@dataclass(frozen=True)
class Curve:
    """A stroked path built from :mod:`statscard.core.smoothing` commands."""

    commands: tuple
    css_class: str
    stroke_width: float


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    css_class: str
    fill: str | None = None


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    css_class: str = ""
    fill: str | None = None


Element = Union[Text, Line, Curve, Circle, Rect]


@dataclass(frozen=True)
class Metric:
    """One labelled value in a chart header."""

    label_id: str
    value: str
    attribute: str = ""


@dataclass(frozen=True)
class Header:
    title_id: str | None = None
    metrics: tuple[Metric, ...] = ()


@dataclass(frozen=True)
class Scene:
    """Everything a renderer paints for one chart card."""

    header: Header
    category: str
    options: Sequence[str]
    elements: tuple[Element, ...] = field(default_factory=tuple)
