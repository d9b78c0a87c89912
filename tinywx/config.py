"""Resolve what to fetch and print, from command-line flags or a TOML file.

The two sources are mutually exclusive. Both end up as a validated
:class:`WeatherConfig`; nothing here touches the network.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from tinywx.errors import ConfigError
from tinywx.render import FIELDS
from tinywx.schemas import Location, Units


logger = logging.getLogger(__name__)


class WeatherConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    city: str
    state: str = ""
    country: str
    api_key: str
    imperial: bool = False
    data: list[str] = []

    @field_validator("city", "country", "api_key")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("state")
    @classmethod
    def _strip_state(cls, value: str) -> str:
        return value.strip()

    @model_validator(mode="after")
    def _check_data(self) -> "WeatherConfig":
        if not self.data:
            raise ValueError("at least one data field is required")
        unknown = [item for item in self.data if item not in FIELDS]
        if unknown:
            raise ValueError(
                f"unknown data field(s) {', '.join(unknown)}; choose from {', '.join(FIELDS)}"
            )
        return self

    def location(self) -> Location:
        return Location(city=self.city, state=self.state, country=self.country)

    def units(self) -> Units:
        return Units.IMPERIAL if self.imperial else Units.METRIC


def config_error(err: ValidationError, source: str) -> ConfigError:
    problems = []
    for item in err.errors():
        where = ".".join(str(part) for part in item["loc"])
        message = item["msg"].removeprefix("Value error, ")
        problems.append(f"{where}: {message}" if where else message)
    return ConfigError(f"invalid configuration in {source}: {'; '.join(problems)}")


def load_config_file(path: str | Path) -> WeatherConfig:
    path = Path(path)
    try:
        raw = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e.strerror or e}") from e
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"malformed config file {path}: {e}") from e

    try:
        return WeatherConfig.model_validate(raw)
    except ValidationError as e:
        raise config_error(e, str(path)) from e


def resolve_config(
    *,
    file: Optional[str | Path] = None,
    city: Optional[str] = None,
    state: Optional[str] = None,
    country: Optional[str] = None,
    data: Sequence[str] = (),
    imperial: bool = False,
    api_key: Optional[str] = None,
) -> WeatherConfig:
    flags = {
        "--city": city is not None,
        "--state": state is not None,
        "--country": country is not None,
        "--data": bool(data),
        "--imperial": imperial,
        "--api-key": api_key is not None,
    }

    if file is not None:
        given = [name for name, present in flags.items() if present]
        if given:
            raise ConfigError(f"--file cannot be combined with {', '.join(given)}")
        logger.debug("reading configuration from %s", file)
        return load_config_file(file)

    missing = [
        name
        for name, value in (("--city", city), ("--country", country), ("--api-key", api_key))
        if value is None
    ]
    if not data:
        missing.append("--data")
    if missing:
        raise ConfigError(f"missing required option(s): {', '.join(missing)} (or use --file)")

    try:
        return WeatherConfig(
            city=city,
            state=state or "",
            country=country,
            api_key=api_key,
            imperial=imperial,
            data=list(data),
        )
    except ValidationError as e:
        raise config_error(e, "command-line options") from e
