import json
import pytest

from statscard.config import Settings, load_settings


def test_defaults():
    s = Settings()
    assert s.clips.tick_count == 7
    assert s.voices.bar_count == 10
    assert s.layout.total_line_margin == 154


def test_from_env(monkeypatch):
    monkeypatch.setenv("STATSCARD_API__BASE_URL", "http://localhost:9000/api/v1")
    monkeypatch.setenv("STATSCARD_VOICES__BAR_COUNT", "12")
    s = Settings.from_env()
    assert s.api.base_url == "http://localhost:9000/api/v1"
    assert s.voices.bar_count == 12


def test_from_env_locale_codes(monkeypatch):
    monkeypatch.setenv("STATSCARD_LOCALES__CODES", "en,ga-IE, ka")
    s = Settings.from_env()
    assert s.locales.codes == ["en", "ga-IE", "ka"]


def test_load_settings_json(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"clips": {"tick_count": 5}, "labels": {"timezone": "Europe/Berlin"}}))
    s = load_settings(p)
    assert s.clips.tick_count == 5
    assert s.labels.timezone == "Europe/Berlin"


def test_load_settings_rejects_non_mapping(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text("[1, 2]")
    with pytest.raises(TypeError):
        load_settings(p)


try:
    import yaml  # type: ignore
except Exception:  # pragma: no cover
    yaml = None


@pytest.mark.skipif(yaml is None, reason="PyYAML not installed")
def test_load_settings_yaml(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("voices:\n  bar_width: 20\nlocales:\n  codes: [en, de]\n")
    s = load_settings(p)
    assert s.voices.bar_width == 20
    assert s.locales.codes == ["en", "de"]
