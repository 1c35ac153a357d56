import json

from omegaconf import OmegaConf
from typer.testing import CliRunner

from statscard import cli
from statscard.cli import app
from statscard.config import Settings

from conftest import FakeSource, make_clips, make_voices


def make_settings(**overrides):
    base = OmegaConf.create(
        {
            "api": {"base_url": "http://stats.invalid/api/v1"},
            "locales": {"codes": ["en", "de"]},
            "viz": {"width": 480, "height": 200, "dpi": 100},
        }
    )
    cfg = OmegaConf.merge(base, OmegaConf.from_dotlist([f"{k}={v}" for k, v in overrides.items()]))
    return Settings.model_validate(OmegaConf.to_container(cfg, resolve=True))


def fake_client(monkeypatch):
    source = FakeSource(
        clips={None: make_clips([(3600, 1800), (7200, 3600)])},
        voices={"de": make_voices([4, 9, 2])},
    )
    monkeypatch.setattr(cli, "StatsClient", lambda settings=None: source)
    return source


def test_render_clips(tmp_path, monkeypatch):
    source = fake_client(monkeypatch)
    out = tmp_path / "clips.svg"
    runner = CliRunner()
    result = runner.invoke(app, ["render", "clips", "--save", str(out)], obj=make_settings())
    assert result.exit_code == 0, result.output
    assert "2 samples, max 7206" in result.stdout
    assert source.calls == [("clips", None)]
    assert out.exists()


def test_render_voices_for_locale(tmp_path, monkeypatch):
    source = fake_client(monkeypatch)
    out = tmp_path / "voices.png"
    runner = CliRunner()
    result = runner.invoke(
        app, ["render", "voices", "--locale", "de", "--width", "600", "--save", str(out)], obj=make_settings()
    )
    assert result.exit_code == 0, result.output
    assert source.calls == [("voices", "de")]
    assert "3 samples, max 12" in result.stdout


def test_render_rejects_unknown_locale_and_chart(monkeypatch):
    fake_client(monkeypatch)
    runner = CliRunner()
    result = runner.invoke(app, ["render", "clips", "--locale", "xx"], obj=make_settings())
    assert result.exit_code != 0
    result = runner.invoke(app, ["render", "pie"], obj=make_settings())
    assert result.exit_code != 0


def test_ticks_command():
    runner = CliRunner()
    result = runner.invoke(app, ["ticks", "--tick-count", "4", "--max", "40"], obj=make_settings())
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "max=42"
    assert [line.split("\t")[1] for line in lines[1:]] == ["42", "28", "14", "0"]


def test_locales_command_with_overrides():
    runner = CliRunner()
    result = runner.invoke(app, ["--set", "locales.codes=[\"fr\", \"it\"]", "locales"], obj=make_settings())
    assert result.exit_code == 0
    assert result.stdout.split() == ["all", "fr", "it"]


def test_locales_from_config_file(tmp_path):
    locales_path = tmp_path / "contributable.json"
    locales_path.write_text(json.dumps(["cy", "eu"]))
    cfg_path = tmp_path / "cfg.json"
    cfg_path.write_text(json.dumps({"locales": {"path": str(locales_path)}}))
    runner = CliRunner()
    result = runner.invoke(app, ["--config", str(cfg_path), "locales"])
    assert result.exit_code == 0
    assert result.stdout.split() == ["all", "cy", "eu"]


def test_unknown_override_key():
    runner = CliRunner()
    result = runner.invoke(app, ["--set", "nope.key=1", "locales"], obj=make_settings())
    assert result.exit_code != 0


def test_format_seconds_command():
    runner = CliRunner()
    result = runner.invoke(app, ["format-seconds", "3661"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "1h 1m"
