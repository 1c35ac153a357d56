"""Loading the list of selectable locales."""

from __future__ import annotations

import json
from pathlib import Path

from ..config import Settings
from ..types import ALL_LOCALES


def load_locales(path: str | Path | None = None, *, settings: Settings | None = None) -> list[str]:
    """Return the locale codes a chart can be filtered by.

    ``path`` (or ``settings.locales.path``) points to a JSON array of codes.
    Without a file the inline ``settings.locales.codes`` list is used.  The
    ``"all"`` sentinel is never part of the result.
    """

    if settings is None:
        settings = Settings()
    if path is None and settings.locales.path:
        path = settings.locales.path
    if path is None:
        codes = list(settings.locales.codes)
    else:
        with open(path, "r", encoding="utf8") as fh:
            codes = json.load(fh)
        if not isinstance(codes, list):
            raise TypeError("Locale file must contain a JSON array")
        codes = [str(code) for code in codes]
    return [code for code in codes if code != ALL_LOCALES]


def category_options(locales: list[str]) -> list[str]:
    """Selectable categories, with the ``"all"`` sentinel first."""

    return [ALL_LOCALES, *locales]
