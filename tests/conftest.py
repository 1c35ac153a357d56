import asyncio
from datetime import datetime, timedelta, timezone

import matplotlib

matplotlib.use("Agg")

import pytest

from statscard.types import ClipsSample, VoicesSample

START = datetime(2024, 3, 1, 13, 0, tzinfo=timezone.utc)


def make_clips(values):
    return [
        ClipsSample(date=START + timedelta(days=i), total=total, valid=valid)
        for i, (total, valid) in enumerate(values)
    ]


def make_voices(counts):
    return [
        VoicesSample(date=START + timedelta(hours=i), voices=count)
        for i, count in enumerate(counts)
    ]


class FakeSource:
    """In-memory data source keyed by locale (``None`` for all locales)."""

    def __init__(self, clips=None, voices=None):
        self.clips = clips or {}
        self.voices = voices or {}
        self.calls = []

    async def fetch_clips_stats(self, locale=None):
        self.calls.append(("clips", locale))
        return list(self.clips.get(locale, []))

    async def fetch_clip_voices(self, locale=None):
        self.calls.append(("voices", locale))
        return list(self.voices.get(locale, []))


class GatedSource(FakeSource):
    """Fake source whose responses are held until released per locale."""

    def __init__(self, clips=None, voices=None):
        super().__init__(clips, voices)
        self.gates = {}

    def gate(self, locale):
        if locale not in self.gates:
            self.gates[locale] = asyncio.Event()
        return self.gates[locale]

    async def fetch_clips_stats(self, locale=None):
        self.calls.append(("clips", locale))
        await self.gate(locale).wait()
        return list(self.clips.get(locale, []))


@pytest.fixture
def fake_source():
    return FakeSource(
        clips={
            None: make_clips([(3600, 1800), (7200, 3600), (10800, 5400)]),
            "en": make_clips([(60, 30), (120, 90)]),
        },
        voices={
            None: make_voices([5, 12, 40, 7]),
            "de": make_voices([1500, 2500]),
        },
    )
