from __future__ import annotations

import typer

from .commands import config_cmd
from .commands.check_cmd import check
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="signalfx",
        help="SignalFx client configuration tools",
        no_args_is_help=True,
    )

    app.add_typer(config_cmd.app, name="config")
    app.command("check")(check)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
