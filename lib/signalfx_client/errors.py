from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config_types import ConfigRecord


class SignalFxClientError(Exception):
    """Base client error."""


class ConfigError(SignalFxClientError):
    """Configuration could not be resolved."""


class ReadError(ConfigError):
    """A configuration file exists but could not be read."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class DecodeError(ConfigError):
    """A configuration file has malformed content."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class ParseError(ConfigError):
    """The netrc file could not be parsed."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class MissingCredentialError(ConfigError):
    def __init__(self, field: str, config: ConfigRecord | None = None):
        super().__init__(f"{field}: required field is not set")
        self.field = field
        self.config = config


class OptionsError(ConfigError):
    """Caller-supplied options are malformed."""


class ClientInitError(SignalFxClientError):
    """The HTTP client could not be built from the resolved configuration."""


class NetworkError(SignalFxClientError):
    """Transport/network layer error."""


class ApiError(SignalFxClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""
