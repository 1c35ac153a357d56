from __future__ import annotations

"""Configuration utilities for statscard.

This module defines a hierarchical configuration schema using Pydantic models.
The :class:`Settings` container groups the API endpoint, the chart layout
constants, the per-chart options and the renderer options.  Instances can be
populated from environment variables or from YAML/JSON files with matching
nested keys.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import EnvSettingsSource

try:  # pragma: no cover - optional dependency
    import yaml  # type: ignore
except Exception:  # pragma: no cover
    yaml = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _split_strings(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class SectionModel(BaseModel):
    """Base model for configuration subsections that ignores unknown fields."""

    model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Settings schema
# ---------------------------------------------------------------------------


class ApiSettings(SectionModel):
    """Location of the statistics API."""

    base_url: str = "https://voice.mozilla.org/api/v1"
    timeout: float = 30.0


class LayoutSettings(SectionModel):
    """Pixel constants shared by both charts."""

    y_offset: float = 10
    total_line_margin: float = 154
    text_offset: float = 40
    plot_padding: float = 13
    plot_stroke_width: float = 2


class ClipsSettings(SectionModel):
    """Options for the recorded/validated hours chart."""

    tick_count: int = 7
    circle_radius: float = 8


class VoicesSettings(SectionModel):
    """Options for the online voices bar chart."""

    tick_count: int = 4
    bar_count: int = 10
    bar_width: float = 15


class LocalesSettings(SectionModel):
    """Selectable locales, either inline or from a JSON file."""

    path: str | None = None
    codes: list[str] = Field(default_factory=lambda: ["en", "de", "fr", "cy", "es", "it"])

    @field_validator("codes", mode="before")
    @classmethod
    def _coerce_codes(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _split_strings(value)
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value]
        return value


class LabelSettings(SectionModel):
    """Controls for axis label text."""

    timezone: str = "UTC"


class VizSettings(SectionModel):
    """Configuration for the matplotlib renderer."""

    width: float = 600
    height: float = 200
    dpi: float = 100
    save: str | None = None
    messages: dict[str, str] = Field(
        default_factory=lambda: {
            "hours-recorded": "Hours Recorded",
            "hours-validated": "Hours Validated",
            "voices-online": "Voices Online Now",
            "all-locales": "All Languages",
        }
    )


class Settings(BaseSettings):
    """Container for all runtime configuration sections."""

    api: ApiSettings = Field(default_factory=ApiSettings)
    layout: LayoutSettings = Field(default_factory=LayoutSettings)
    clips: ClipsSettings = Field(default_factory=ClipsSettings)
    voices: VoicesSettings = Field(default_factory=VoicesSettings)
    locales: LocalesSettings = Field(default_factory=LocalesSettings)
    labels: LabelSettings = Field(default_factory=LabelSettings)
    viz: VizSettings = Field(default_factory=VizSettings)

    model_config = SettingsConfigDict(
        env_prefix="STATSCARD_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``STATSCARD_*`` environment variables only."""

        return cls()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        class LegacyEnvSettingsSource(EnvSettingsSource):
            def decode_complex_value(self, field_name, target_field, value):  # type: ignore[override]
                try:
                    return super().decode_complex_value(field_name, target_field, value)
                except json.JSONDecodeError:
                    return value

        env_settings.__class__ = LegacyEnvSettingsSource
        return init_settings, env_settings, dotenv_settings, file_secret_settings


# ---------------------------------------------------------------------------
# Loading utilities
# ---------------------------------------------------------------------------


def load_settings(path: str | Path) -> Settings:
    """Load settings from a JSON or YAML file."""

    p = Path(path)
    text = p.read_text()
    if p.suffix.lower() in {".yaml", ".yml"}:
        if yaml is None:
            raise RuntimeError("PyYAML is required to load YAML files")
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError("Configuration file must define a mapping")
    return Settings.model_validate(data)
