from __future__ import annotations

import typer

from signalfx_client import ClientInitError, ConfigError

from .. import console
from ..http import build_paths, collect_options, make_client


def check(
        auth_token: str | None = typer.Option(None, "--auth-token", help="SignalFx auth token."),
        api_url: str | None = typer.Option(None, "--api-url", help="API URL for your SignalFx org."),
        custom_app_url: str | None = typer.Option(None, "--custom-app-url", help="Application URL for your org."),
        timeout_seconds: int | None = typer.Option(None, "--timeout-seconds", help="HTTP timeout in seconds."),
        system_config: str | None = typer.Option(None, "--system-config", help="Override the system config path."),
        home_config: str | None = typer.Option(None, "--home-config", help="Override the user config path."),
) -> None:
    """Resolve configuration and build a client without contacting the API."""
    options = collect_options(
        auth_token=auth_token,
        api_url=api_url,
        custom_app_url=custom_app_url,
        timeout_seconds=timeout_seconds,
    )
    try:
        record = make_client(options, build_paths(system_config, home_config))
    except (ConfigError, ClientInitError) as exc:
        console.err(str(exc))
        raise typer.Exit(code=2)

    client = record.client
    try:
        console.ok(f"Client ready for {client.base_url}")
        console.info(f"User-Agent: {client.user_agent}")
        console.info(f"Timeout: {client.timeout_seconds:g}s")
    finally:
        client.close()
