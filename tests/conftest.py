import copy

import pytest

from tinywx.schemas import CurrentWeatherResponse


LONDON_PAYLOAD = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
    "base": "stations",
    "main": {
        "temp": 15.0,
        "feels_like": 14.2,
        "temp_min": 13.9,
        "temp_max": 16.1,
        "pressure": 1021,
        "humidity": 72,
    },
    "visibility": 10000,
    "wind": {"speed": 4.12, "deg": 250},
    "clouds": {"all": 0},
    "dt": 1697716800,
    "sys": {"type": 2, "id": 2075535, "country": "GB", "sunrise": 1697697356, "sunset": 1697735153},
    "timezone": 3600,
    "id": 2643743,
    "name": "London",
    "cod": 200,
}


@pytest.fixture
def payload():
    return copy.deepcopy(LONDON_PAYLOAD)


@pytest.fixture
def make_response(payload):
    def _make(**main_overrides):
        data = copy.deepcopy(payload)
        for key, value in main_overrides.items():
            if key in data["main"]:
                data["main"][key] = value
            else:
                data[key] = value
        return CurrentWeatherResponse.model_validate(data)

    return _make
