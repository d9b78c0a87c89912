import pytest
from pydantic import ValidationError

from tinywx.settings import Settings


def test_defaults():
    settings = Settings()
    assert settings.base_url == "https://api.openweathermap.org/data/2.5"
    assert settings.http_timeout_seconds == 5.0
    assert settings.log_level == "ERROR"


def test_log_level_is_case_insensitive():
    assert Settings(TINYWX_LOG_LEVEL=" info ").log_level == "INFO"


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("TINYWX_LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"


@pytest.mark.parametrize("level", ["verbose", "", "20"])
def test_unknown_log_level_is_rejected(level):
    with pytest.raises(ValidationError):
        Settings(TINYWX_LOG_LEVEL=level)


@pytest.mark.parametrize("timeout", ["soon", "0", "-1"])
def test_timeout_must_be_a_positive_number(timeout):
    with pytest.raises(ValidationError):
        Settings(TINYWX_HTTP_TIMEOUT_SECONDS=timeout)
