from __future__ import annotations

import logging
import time
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from tinywx.errors import NetworkError, ProviderRejectedError, ResponseShapeError
from tinywx.schemas import CurrentWeatherResponse, Location, Units
from tinywx.settings import Settings, get_settings


logger = logging.getLogger(__name__)


def _safe_int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _is_error_envelope(data: Any) -> bool:
    # {"cod": "404", "message": "city not found"}
    if not isinstance(data, dict) or "weather" in data or "message" not in data:
        return False
    return _safe_int(data.get("cod")) != 200


class OpenWeatherMapClient:
    def __init__(
        self,
        *,
        http: httpx.Client,
        api_key: str,
        base_url: str,
    ) -> None:
        self._http = http
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    def get_current(self, *, location: Location, units: Units) -> CurrentWeatherResponse:
        url = f"{self._base_url}/weather"
        params = {"q": location.query(), "units": units.value, "appid": self._api_key}

        start = time.perf_counter()
        try:
            resp = self._http.get(url, params=params)
        except httpx.TimeoutException as e:
            raise NetworkError(f"request to weather provider timed out ({type(e).__name__})") from e
        except httpx.RequestError as e:
            raise NetworkError(f"weather provider network error ({type(e).__name__}): {e}") from e
        finally:
            logger.info(
                "openweathermap request q=%s units=%s duration_ms=%.2f",
                location.query(),
                units.value,
                (time.perf_counter() - start) * 1000,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise ResponseShapeError(
                f"weather provider returned a non-JSON body (status {resp.status_code})"
            ) from e

        if _is_error_envelope(data):
            code = _safe_int(data.get("cod"))
            err = ProviderRejectedError(
                code=code if code is not None else resp.status_code,
                message=str(data.get("message") or ""),
            )
            logger.warning("openweathermap rejected request code=%s message=%s", err.code, err.message)
            raise err

        try:
            return CurrentWeatherResponse.model_validate(data)
        except ValidationError as e:
            raise ResponseShapeError(
                f"unexpected response from weather provider (status {resp.status_code}): "
                f"{e.error_count()} invalid field(s)"
            ) from e


def fetch(
    location: Location,
    units: Units,
    api_key: str,
    *,
    settings: Optional[Settings] = None,
) -> CurrentWeatherResponse:
    settings = settings or get_settings()

    with httpx.Client(timeout=httpx.Timeout(settings.http_timeout_seconds)) as http:
        client = OpenWeatherMapClient(
            http=http,
            api_key=api_key,
            base_url=settings.base_url,
        )
        return client.get_current(location=location, units=units)
