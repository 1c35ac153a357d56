"""Live statistics cards for the clip and voice dashboards."""

from .engine import FixedSurface, StatsEngine, Status
from .types import ALL_LOCALES, ClipsSample, RenderState, Scene, VoicesSample

__version__ = "0.1.0"

__all__ = [
    "ALL_LOCALES",
    "ClipsSample",
    "FixedSurface",
    "RenderState",
    "Scene",
    "StatsEngine",
    "Status",
    "VoicesSample",
]
