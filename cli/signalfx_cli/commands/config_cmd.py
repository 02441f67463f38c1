from __future__ import annotations

import os

import typer
from rich.markup import escape

from signalfx_client import ConfigError, ConfigResolver
from signalfx_client.netrc_reader import netrc_path

from .. import console
from ..http import build_paths, collect_options

app = typer.Typer(help="Inspect how SignalFx credentials are resolved.")


def _token_state(token: str) -> str:
    return "(set)" if token else "(empty)"


@app.command("show")
def show_config(
        auth_token: str | None = typer.Option(None, "--auth-token", help="SignalFx auth token."),
        api_url: str | None = typer.Option(None, "--api-url", help="API URL for your SignalFx org."),
        custom_app_url: str | None = typer.Option(None, "--custom-app-url", help="Application URL for your org."),
        timeout_seconds: int | None = typer.Option(None, "--timeout-seconds", help="HTTP timeout in seconds."),
        system_config: str | None = typer.Option(None, "--system-config", help="Override the system config path."),
        home_config: str | None = typer.Option(None, "--home-config", help="Override the user config path."),
        json_output: bool = typer.Option(False, "--json", help="Output JSON only."),
):
    resolver = ConfigResolver(build_paths(system_config, home_config))
    options = collect_options(
        auth_token=auth_token,
        api_url=api_url,
        custom_app_url=custom_app_url,
        timeout_seconds=timeout_seconds,
    )
    try:
        record, origins = resolver.resolve_with_origins(options)
    except ConfigError as exc:
        console.err(str(exc))
        raise typer.Exit(code=2)

    values = record.values()
    values["auth_token"] = _token_state(record.auth_token)
    if json_output:
        console.print_json({"config": values, "sources": origins})
        return
    for name, value in values.items():
        console.console.print(f"{name}={escape(value)} [dim](from {origins[name]})[/]", highlight=False)


@app.command("sources")
def list_sources(
        system_config: str | None = typer.Option(None, "--system-config", help="Override the system config path."),
        home_config: str | None = typer.Option(None, "--home-config", help="Override the user config path."),
):
    paths = build_paths(system_config, home_config)
    try:
        home_path = paths.resolved_home_config_path()
    except ConfigError as exc:
        console.err(str(exc))
        raise typer.Exit(code=2)

    for name, path in (
            ("system", paths.system_config_path),
            ("home", home_path),
            ("netrc", netrc_path()),
    ):
        state = "present" if os.path.exists(path) else "missing"
        console.console.print(f"{name}: {path} ({state})", markup=False, highlight=False)
