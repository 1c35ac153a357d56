from __future__ import annotations

"""Command line interface for statscard using Typer."""

from pathlib import Path
from typing import Dict, List, Optional

import asyncio
import json
import logging

import httpx
import typer
from pydantic import ValidationError

from ._typer import bad_parameter
from .charts import available_variants, get_variant
from .charts.clips import format_seconds
from .config import Settings, load_settings
from .core.geometry import ChartLayout
from .core.ticks import plan_ticks, round_max
from .engine import StatsEngine
from .ingest import StatsClient, category_options, load_locales
from .utils.logging import get_logger
from .viz.render import FigureSurface, draw_scene, new_figure, save_or_show

app = typer.Typer(help="Render the clip and voice statistics cards")
logger = logging.getLogger(__name__)


def _parse_override_value(raw: str) -> object:
    lower = raw.lower()
    if lower in {"true", "false"}:
        return lower == "true"
    if lower in {"null", "none"}:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        pass
    if raw.startswith("[") or raw.startswith("{"):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            bad_parameter(f"invalid JSON override value: {raw}")
    return raw


def _ensure_path(settings: Settings, keys: List[str]) -> None:
    current: object = settings
    for key in keys:
        if isinstance(current, dict):
            if key not in current:
                bad_parameter(f"unknown configuration key: {'.'.join(keys)}")
            current = current[key]
        else:
            if not hasattr(current, key):
                bad_parameter(f"unknown configuration key: {'.'.join(keys)}")
            current = getattr(current, key)


def _apply_override(data: Dict[str, object], keys: List[str], value: object) -> None:
    target = data
    for key in keys[:-1]:
        existing = target.get(key)
        if not isinstance(existing, dict):
            existing = {}
            target[key] = existing
        target = existing
    target[keys[-1]] = value


@app.callback()
def init(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        dir_okay=False,
        file_okay=True,
        exists=False,
        help="Path to a YAML or JSON configuration file.",
    ),
    set_overrides: List[str] = typer.Option(
        [],
        "--set",
        help="Override configuration values using dotted paths, e.g. api.base_url=http://localhost:9000/api/v1",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine events"),
) -> None:
    """Initialise the Typer context with validated settings."""

    get_logger("statscard", level=logging.DEBUG if verbose else logging.WARNING)

    if isinstance(ctx.obj, Settings) and config is None and not set_overrides:
        return

    if config is not None and not config.exists():
        bad_parameter(f"configuration file not found: {config}")

    try:
        if config is not None:
            settings = load_settings(config)
        elif isinstance(ctx.obj, Settings):
            settings = ctx.obj
        else:
            settings = Settings()
    except (FileNotFoundError, RuntimeError, TypeError, json.JSONDecodeError, ValidationError) as exc:
        bad_parameter(f"failed to load configuration: {exc}", cause=exc)

    if set_overrides:
        data = settings.model_dump()
        for override in set_overrides:
            if "=" not in override:
                bad_parameter("overrides must be of the form --set section.key=value")
            key, raw_value = override.split("=", 1)
            if not key:
                bad_parameter("override key cannot be empty")
            keys = key.split(".")
            _ensure_path(settings, keys)
            _apply_override(data, keys, _parse_override_value(raw_value))
        try:
            settings = Settings.model_validate(data)
        except ValidationError as exc:
            bad_parameter(f"invalid configuration override: {exc}", cause=exc)

    ctx.obj = settings


async def _load(engine: StatsEngine) -> None:
    await engine.start()
    engine.stop()


@app.command()
def render(
    ctx: typer.Context,
    chart: str = typer.Argument(..., help="Chart to render: clips or voices"),
    locale: str = typer.Option("all", "--locale", "-l", help="Locale code or 'all'"),
    width: Optional[float] = typer.Option(None, "--width", help="Surface width in pixels"),
    save: Optional[Path] = typer.Option(None, "--save", "-o", help="Write the chart to this file"),
    show: bool = typer.Option(False, "--show", help="Display the chart interactively"),
    debug: bool = typer.Option(False, "--debug", help="Show tracebacks on failure"),
) -> None:
    """Fetch live statistics and draw one chart card.

    The chart is laid out exactly as the dashboard does it: the engine
    measures the figure width, loads the selected locale and the resulting
    scene is painted with matplotlib.
    """

    cfg: Settings = ctx.obj
    if chart not in available_variants():
        bad_parameter(f"unknown chart {chart!r}, expected one of {available_variants()}", param_hint="CHART")
    locales = load_locales(settings=cfg)
    if locale not in category_options(locales):
        bad_parameter(f"unknown locale: {locale}", param_hint="--locale")

    variant = get_variant(chart, cfg)
    fig, ax = new_figure(width or cfg.viz.width, cfg.viz.height, cfg.viz.dpi)
    engine = StatsEngine(
        variant,
        StatsClient(settings=cfg),
        FigureSurface(fig),
        locales=locales,
        settings=cfg,
        category=locale,
    )

    try:
        asyncio.run(_load(engine))
    except (httpx.HTTPError, ValidationError) as exc:
        msg = f"Failed to load {chart} statistics for {locale}: {exc}"
        if debug:
            logger.exception(msg)
            raise
        typer.secho(msg, err=True)
        raise typer.Exit(code=1) from exc

    state = engine.state
    draw_scene(
        engine.render(),
        ax,
        width=state.plot_width,
        height=cfg.viz.height,
        messages=cfg.viz.messages,
    )
    save_path = save or cfg.viz.save
    save_or_show(fig, save_path, show)
    typer.echo(
        f"Rendered {chart} chart for {locale}: {len(state.data)} samples, max {state.max_value:g}"
        + (f", saved to {save_path}" if save_path else "")
    )


@app.command()
def ticks(
    ctx: typer.Context,
    tick_count: int = typer.Option(..., "--tick-count", "-n", min=2),
    max_value: float = typer.Option(..., "--max", help="Largest value in the series"),
) -> None:
    """Print the grid lines planned for a series maximum."""

    cfg: Settings = ctx.obj
    top = round_max(max_value, tick_count)
    typer.echo(f"max={top:g}")
    for tick in plan_ticks(tick_count, top, layout=ChartLayout.from_settings(cfg)):
        typer.echo(f"{tick.index}\t{tick.value}\ty={tick.y:g}")


@app.command()
def locales(ctx: typer.Context) -> None:
    """List the selectable locales, ``all`` first."""

    cfg: Settings = ctx.obj
    try:
        codes = load_locales(settings=cfg)
    except (OSError, TypeError, json.JSONDecodeError) as exc:
        bad_parameter(f"failed to load locales: {exc}", cause=exc)
    for code in category_options(codes):
        typer.echo(code)


@app.command("format-seconds")
def format_seconds_cmd(seconds: float) -> None:
    """Print ``seconds`` the way the clips chart labels durations."""

    typer.echo(format_seconds(seconds))


def main() -> None:
    """Execute the Typer application."""

    app()


if __name__ == "__main__":
    main()
