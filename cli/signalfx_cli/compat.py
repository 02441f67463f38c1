from __future__ import annotations

from importlib import metadata

CLI_PRODUCT = "signalfx-cli"


def cli_version() -> str:
    try:
        return metadata.version("signalfx-client")
    except metadata.PackageNotFoundError:
        return "0.0.0"
