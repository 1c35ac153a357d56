"""Draw :class:`~statscard.types.Scene` objects with matplotlib.

The axes use surface pixels as data coordinates with ``y`` pointing down,
so the positions computed by the engine can be drawn unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Mapping

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle as CirclePatch
from matplotlib.patches import PathPatch, Rectangle

from ..core.smoothing import to_mpl_path
from ..types import Circle, Curve, Header, Line, Rect, Scene, Text
from .styles import CLASS_COLORS, apply_style, color_for

_HA = {"start": "left", "middle": "center", "end": "right"}
_VA = {"auto": "baseline", "middle": "center", "hanging": "top"}


class FigureSurface:
    """Exposes the pixel width of a matplotlib figure as a surface."""

    def __init__(self, figure: Figure) -> None:
        self.figure = figure
        self._connections: Dict[Callable[[], None], int] = {}

    def measure_width(self) -> float:
        return float(self.figure.get_figwidth() * self.figure.dpi)

    def add_resize_listener(self, listener: Callable[[], None]) -> None:
        cid = self.figure.canvas.mpl_connect("resize_event", lambda _event: listener())
        self._connections[listener] = cid

    def remove_resize_listener(self, listener: Callable[[], None]) -> None:
        cid = self._connections.pop(listener, None)
        if cid is not None:
            self.figure.canvas.mpl_disconnect(cid)


def new_figure(width: float, height: float, dpi: float = 100) -> tuple[Figure, Axes]:
    """Create a figure of ``width`` x ``height`` pixels with pixel axes."""

    apply_style()
    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    ax = fig.add_axes((0, 0, 1, 0.85))
    return fig, ax


def header_text(header: Header, messages: Mapping[str, str]) -> str:
    """Render ``header`` as one line, translating message ids."""

    parts = [
        f"{messages.get(metric.label_id, metric.label_id)}: {metric.value}"
        for metric in header.metrics
    ]
    return "   ".join(parts)


def draw_scene(
    scene: Scene,
    ax: Axes,
    *,
    width: float,
    height: float,
    messages: Mapping[str, str] | None = None,
) -> None:
    """Paint every element of ``scene`` on ``ax``."""

    messages = messages or {}
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_axis_off()

    for element in scene.elements:
        if isinstance(element, Text):
            ax.text(
                element.x,
                element.y,
                element.text,
                ha=_HA.get(element.anchor, "left"),
                va=_VA.get(element.baseline, "baseline"),
                color=color_for(element.css_class),
            )
        elif isinstance(element, Line):
            ax.plot([element.x1, element.x2], [element.y1, element.y2], color="black", alpha=0.2, lw=0.8)
        elif isinstance(element, Curve):
            ax.add_patch(
                PathPatch(
                    to_mpl_path(element.commands),
                    fill=False,
                    edgecolor=color_for(element.css_class),
                    lw=element.stroke_width,
                )
            )
        elif isinstance(element, Circle):
            color = color_for(element.css_class)
            ax.add_patch(
                CirclePatch(
                    (element.cx, element.cy),
                    element.r,
                    facecolor=element.fill or color,
                    edgecolor=color,
                    lw=2,
                )
            )
        elif isinstance(element, Rect):
            if "current" in element.css_class.split():
                face = CLASS_COLORS["current"]
            else:
                face = element.fill or color_for(element.css_class, default="none")
            ax.add_patch(Rectangle((element.x, element.y), element.width, element.height, facecolor=face))
        else:  # pragma: no cover - closed set of element types
            raise TypeError(f"cannot draw {type(element).__name__}")

    title = header_text(scene.header, messages)
    if scene.header.title_id and not scene.header.metrics:
        title = messages.get(scene.header.title_id, scene.header.title_id)
    category = messages.get("all-locales", "All Languages") if scene.category == "all" else scene.category
    ax.figure.suptitle(f"{title}   [{category}]")


def save_or_show(fig: Figure, save: str | Path | None = None, show: bool = False) -> None:
    """Save ``fig`` to ``save`` or display it interactively.

    If ``save`` is ``None`` the figure will only be shown when ``show`` is
    True.  When both are unset the figure is shown by default to give quick
    feedback during inspection.
    """
    if save:
        fig.savefig(save)
    if show or not save:
        plt.show()
