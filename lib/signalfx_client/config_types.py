from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .client import SignalFxClient

DEFAULT_API_URL = "https://api.signalfx.com"
DEFAULT_APP_URL = "https://app.signalfx.com"
DEFAULT_TIMEOUT_SECONDS = 120

RECORD_FIELDS = ("auth_token", "api_url", "custom_app_url")


@dataclass(frozen=True)
class PartialConfig:
    """Values contributed by a single configuration source.

    ``None`` means the source did not supply the field.
    """

    auth_token: str | None = None
    api_url: str | None = None
    custom_app_url: str | None = None

    def __post_init__(self) -> None:
        # empty strings never count as supplied
        for f in fields(self):
            if getattr(self, f.name) == "":
                object.__setattr__(self, f.name, None)

    def present(self) -> dict[str, str]:
        out: dict[str, str] = {}
        for name in RECORD_FIELDS:
            value = getattr(self, name)
            if value is not None:
                out[name] = value
        return out


@dataclass
class ConfigRecord:
    auth_token: str = ""
    api_url: str = DEFAULT_API_URL
    custom_app_url: str = DEFAULT_APP_URL
    client: SignalFxClient | None = None

    def values(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in RECORD_FIELDS}


def overlay(record: ConfigRecord, partial: PartialConfig | None) -> list[str]:
    """Copy the fields ``partial`` supplies onto ``record``.

    Returns the names of the fields that were applied.
    """
    if partial is None:
        return []
    applied = partial.present()
    for name, value in applied.items():
        setattr(record, name, value)
    return list(applied)
