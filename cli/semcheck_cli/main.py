from __future__ import annotations

import typer

from .commands import query_cmd, ranges_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="semcheck",
        help="semcheck: validate and compare semantic versions",
        no_args_is_help=True,
    )

    app.command("valid")(query_cmd.valid)
    app.command("parse")(query_cmd.parse)
    app.command("gte")(query_cmd.gte)
    app.command("lte")(query_cmd.lte)
    app.command("in-range")(query_cmd.in_range)
    app.command("check")(query_cmd.check)
    app.add_typer(ranges_cmd.app, name="ranges")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
