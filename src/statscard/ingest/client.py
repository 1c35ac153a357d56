"""HTTP client for the clip statistics API.

The API exposes two endpoints returning JSON arrays ordered by ascending
``date``:

``GET {base}/clips/stats``
    ``[{"date": ..., "total": seconds, "valid": seconds}, ...]``

``GET {base}/clips/voices``
    ``[{"date": ..., "voices": count}, ...]``

Filtering by locale inserts the locale code as a path segment,
``{base}/{locale}/clips/...``.  Records are returned unchanged in order; the
client never sorts.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, Sequence, runtime_checkable

import httpx
from pydantic import TypeAdapter

from ..config import Settings
from ..types import ClipsSample, VoicesSample

logger = logging.getLogger(__name__)

_CLIPS = TypeAdapter(list[ClipsSample])
_VOICES = TypeAdapter(list[VoicesSample])


@runtime_checkable
class StatsSource(Protocol):
    """Anything able to fetch both statistics series."""

    async def fetch_clips_stats(self, locale: Optional[str] = None) -> Sequence[ClipsSample]:
        """Return recorded/validated totals, optionally for one ``locale``."""

    async def fetch_clip_voices(self, locale: Optional[str] = None) -> Sequence[VoicesSample]:
        """Return online voice counts, optionally for one ``locale``."""


class StatsClient:
    """Fetches statistics series over HTTP using :mod:`httpx`."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if settings is None:
            settings = Settings()
        self._base_url = (base_url or settings.api.base_url).rstrip("/")
        self._timeout = settings.api.timeout if timeout is None else timeout
        self._transport = transport

    def url_for(self, path: str, locale: Optional[str] = None) -> str:
        """Return the absolute URL of ``path``, scoped to ``locale`` if given."""

        prefix = f"{self._base_url}/{locale}" if locale else self._base_url
        return f"{prefix}/{path.lstrip('/')}"

    async def _get_json(self, url: str) -> object:
        logger.debug("GET %s", url)
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.get(url, headers={"Accept": "application/json"})
        response.raise_for_status()
        return response.json()

    async def fetch_clips_stats(self, locale: Optional[str] = None) -> list[ClipsSample]:
        payload = await self._get_json(self.url_for("clips/stats", locale))
        return _CLIPS.validate_python(payload)

    async def fetch_clip_voices(self, locale: Optional[str] = None) -> list[VoicesSample]:
        payload = await self._get_json(self.url_for("clips/voices", locale))
        return _VOICES.validate_python(payload)
