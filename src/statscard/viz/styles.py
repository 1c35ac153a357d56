"""Matplotlib styles for statscard charts."""

from __future__ import annotations

import matplotlib.pyplot as plt

# Base style configuration used across all charts.  The values can be
# overridden by supplying a different style mapping to :func:`apply_style`.
BASE_STYLE = {
    "font.size": 8,
    "axes.titlesize": "medium",
    "figure.titlesize": "medium",
    "lines.linewidth": 1.0,
    "savefig.transparent": False,
}

# Colours keyed by the css class of a scene element.
CLASS_COLORS = {
    "total": "#59cbb7",
    "valid": "#ff4f5e",
    "bg": "#f3f2f0",
    "current": "#4a8de3",
    "tick-label": "#757575",
}


def apply_style(extra: dict | None = None) -> None:
    """Apply a consistent matplotlib style.

    Parameters
    ----------
    extra:
        Optional dictionary of rcParams that override the base style.
    """
    style = BASE_STYLE.copy()
    if extra:
        style.update(extra)
    plt.rcParams.update(style)


def color_for(css_class: str, default: str = "black") -> str:
    """Return the colour of the last known class in ``css_class``."""
    for name in reversed(css_class.split()):
        if name in CLASS_COLORS:
            return CLASS_COLORS[name]
    return default
