"""Chart variants and their registry."""

from .base import ChartVariant, available_variants, get_variant, register_variant
from .clips import ClipsChart, format_seconds
from .voices import VoicesChart, format_compact

__all__ = [
    "ChartVariant",
    "available_variants",
    "get_variant",
    "register_variant",
    "ClipsChart",
    "VoicesChart",
    "format_seconds",
    "format_compact",
]
