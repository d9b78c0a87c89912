from __future__ import annotations

import logging
import sys
from typing import Optional

import click
from pydantic import ValidationError

from tinywx import __version__
from tinywx.config import WeatherConfig, config_error, resolve_config
from tinywx.errors import TinyWxError
from tinywx.openweathermap_client import fetch
from tinywx.render import FIELDS, render_line
from tinywx.settings import Settings, get_settings


logger = logging.getLogger(__name__)

# "time" can only be requested from a config file
FLAG_FIELDS = tuple(field for field in FIELDS if field != "time")


def run(cfg: WeatherConfig, *, settings: Optional[Settings] = None) -> str:
    """Fetch the current weather for ``cfg`` and return the rendered line."""
    current = fetch(cfg.location(), cfg.units(), cfg.api_key, settings=settings)
    return render_line(current, cfg.data)


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        raise config_error(e, "environment") from e


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="tinywx")
@click.option("-c", "--city", metavar="CITY", help="City name (quote it if it contains spaces).")
@click.option("-s", "--state", metavar="STATE", help="State abbreviation.")
@click.option("-C", "--country", metavar="COUNTRY_CODE", help="Country code.")
@click.option(
    "-d",
    "--data",
    multiple=True,
    type=click.Choice(FLAG_FIELDS),
    help="Weather data to display; repeat for more than one.",
)
@click.option("-i", "--imperial", is_flag=True, help="Display imperial units instead of metric.")
@click.option("-k", "--api-key", metavar="API_KEY", help="OpenWeatherMap API key.")
@click.option(
    "-f",
    "--file",
    "file",
    type=click.Path(dir_okay=False),
    help="Read configuration from a TOML file instead of the options above.",
)
def cli(
    city: Optional[str],
    state: Optional[str],
    country: Optional[str],
    data: tuple[str, ...],
    imperial: bool,
    api_key: Optional[str],
    file: Optional[str],
) -> None:
    """Fetch current weather from OpenWeatherMap and print it on one line."""
    try:
        settings = _load_settings()
        _configure_logging(settings)
        cfg = resolve_config(
            file=file,
            city=city,
            state=state,
            country=country,
            data=data,
            imperial=imperial,
            api_key=api_key,
        )
        line = run(cfg, settings=settings)
    except TinyWxError as e:
        logger.debug("aborting: %r", e)
        click.echo(str(e), err=True)
        sys.exit(1)

    click.echo(line)
