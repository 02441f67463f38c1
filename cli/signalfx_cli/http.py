from __future__ import annotations

from typing import Any

from signalfx_client import ConfigRecord, ResolverPaths, configure
from signalfx_client.resolve import SYSTEM_CONFIG_PATH

from .compat import CLI_PRODUCT, cli_version


def build_paths(system_config: str | None, home_config: str | None) -> ResolverPaths:
    return ResolverPaths(
        system_config_path=system_config or SYSTEM_CONFIG_PATH,
        home_config_path=home_config or None,
    )


def collect_options(
        *,
        auth_token: str | None,
        api_url: str | None,
        custom_app_url: str | None,
        timeout_seconds: int | None,
) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "auth_token": auth_token,
        "api_url": api_url,
        "custom_app_url": custom_app_url,
        "timeout_seconds": timeout_seconds,
    }
    return {k: v for k, v in raw.items() if v is not None}


def make_client(options: dict[str, Any], paths: ResolverPaths) -> ConfigRecord:
    return configure(
        options,
        paths=paths,
        host_product=CLI_PRODUCT,
        host_version=cli_version(),
    )
