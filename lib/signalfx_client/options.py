from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from .config_types import DEFAULT_API_URL, DEFAULT_APP_URL, DEFAULT_TIMEOUT_SECONDS, PartialConfig
from .errors import OptionsError

ENV_AUTH_TOKEN = "SFX_AUTH_TOKEN"
ENV_API_URL = "SFX_API_URL"
ENV_CUSTOM_APP_URL = "SFX_CUSTOM_APP_URL"


@dataclass(frozen=True)
class OptionSpec:
    name: str
    type: type
    env_var: str | None
    default: Any
    description: str


OPTION_SCHEMA: tuple[OptionSpec, ...] = (
    OptionSpec("auth_token", str, ENV_AUTH_TOKEN, None, "SignalFx auth token"),
    OptionSpec(
        "api_url",
        str,
        ENV_API_URL,
        DEFAULT_API_URL,
        "API URL for your SignalFx org, may include a realm",
    ),
    OptionSpec(
        "custom_app_url",
        str,
        ENV_CUSTOM_APP_URL,
        DEFAULT_APP_URL,
        "Application URL for your SignalFx org, often customized for organizations using SSO",
    ),
    OptionSpec(
        "timeout_seconds",
        int,
        None,
        DEFAULT_TIMEOUT_SECONDS,
        f"Timeout duration for a single HTTP call in seconds. Defaults to {DEFAULT_TIMEOUT_SECONDS}",
    ),
)

_SCHEMA_BY_NAME = {spec.name: spec for spec in OPTION_SCHEMA}


def parse_timeout_seconds(value: Any) -> int:
    if isinstance(value, bool):
        raise OptionsError(f"timeout_seconds must be a positive integer, got {value!r}")
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if not isinstance(value, int) or value <= 0:
        raise OptionsError(f"timeout_seconds must be a positive integer, got {value!r}")
    return value


@dataclass(frozen=True)
class CallerOptions:
    """Options supplied explicitly by the embedding caller.

    String options are ``None`` unless the caller (or its env default)
    actually provided a value. Static defaults live on ``ConfigRecord``.
    """

    auth_token: str | None = None
    api_url: str | None = None
    custom_app_url: str | None = None
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_mapping(
            cls,
            raw: Mapping[str, Any] | None = None,
            environ: Mapping[str, str] | None = None,
    ) -> "CallerOptions":
        raw = dict(raw or {})
        env = os.environ if environ is None else environ

        unknown = sorted(set(raw) - set(_SCHEMA_BY_NAME))
        if unknown:
            raise OptionsError(f"Unknown option(s): {', '.join(unknown)}")

        values: dict[str, Any] = {}
        for spec in OPTION_SCHEMA:
            if spec.type is int:
                value = raw.get(spec.name)
                values[spec.name] = spec.default if value is None else parse_timeout_seconds(value)
                continue

            value = raw.get(spec.name)
            if value is not None and not isinstance(value, str):
                raise OptionsError(f"{spec.name} must be a string, got {type(value).__name__}")
            if not value and spec.env_var:
                value = env.get(spec.env_var) or None
            values[spec.name] = value or None

        return cls(**values)

    def as_partial(self) -> PartialConfig:
        return PartialConfig(
            auth_token=self.auth_token,
            api_url=self.api_url,
            custom_app_url=self.custom_app_url,
        )
