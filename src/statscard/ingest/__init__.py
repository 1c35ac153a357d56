"""Data sources feeding the statistics charts."""

from .client import StatsClient, StatsSource
from .locales import category_options, load_locales

__all__ = [
    "StatsClient",
    "StatsSource",
    "category_options",
    "load_locales",
]
