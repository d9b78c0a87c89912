from __future__ import annotations

from dataclasses import dataclass


class TinyWxError(Exception):
    """Base class for every error reported to the user."""


class ConfigError(TinyWxError):
    pass


class NetworkError(TinyWxError):
    pass


class ResponseShapeError(TinyWxError):
    pass


@dataclass
class ProviderRejectedError(TinyWxError):
    code: int | None
    message: str

    def __str__(self) -> str:
        return f"provider rejected request ({self.code}): {self.message}"
