from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Units(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class Location(BaseModel):
    city: str
    state: str = ""
    country: str

    def query(self) -> str:
        # "city,country" when no state was given
        if not self.state:
            return f"{self.city},{self.country}"
        return f"{self.city},{self.state},{self.country}"


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Coord(_Payload):
    lon: float
    lat: float


class WeatherCondition(_Payload):
    id: int
    main: str
    description: str
    icon: str


class MainMeasurements(_Payload):
    temp: float
    feels_like: float
    pressure: int
    humidity: int
    temp_min: float
    temp_max: float


class Wind(_Payload):
    speed: float
    deg: int
    gust: Optional[float] = None


class Clouds(_Payload):
    all: int


class Sys(_Payload):
    type: Optional[int] = None
    id: Optional[int] = None
    message: Optional[str] = None
    country: str
    sunrise: int
    sunset: int


class CurrentWeatherResponse(_Payload):
    """Current conditions as returned by the provider.

    Only a handful of fields are rendered; the rest is kept so callers can
    reach it without touching the raw payload.
    """

    coord: Optional[Coord] = None
    weather: list[WeatherCondition] = Field(min_length=1)
    base: Optional[str] = None
    main: MainMeasurements
    visibility: Optional[int] = None
    wind: Wind
    clouds: Clouds
    rain: Optional[dict[str, float]] = None
    snow: Optional[dict[str, float]] = None
    dt: int
    sys: Sys
    timezone: int
    id: int
    name: str
    cod: int
