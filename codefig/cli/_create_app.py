"""Create the main Typer CLI app."""

from pathlib import Path
from typing import Annotated

import typer

from codefig.api.config.CodefigConfig import CodefigConfig
from codefig.cli.css import css
from codefig.cli.render import render
from codefig.logging_config import setup_logging

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Render captioned, highlighted code figures",
        context_settings={"help_option_names": ["-h", "--help"]},
        no_args_is_help=True,
    )

    app.command(name="render")(render)
    app.command(name="css")(css)

    @app.callback()
    def main_callback(
        ctx: typer.Context,
        config: Annotated[Path | None, typer.Option("--config", "-c", help="Config file (JSON)")] = None,
        log_level: Annotated[str | None, typer.Option("--log-level", "-l", help="Override the configured log level")] = None,
    ) -> None:
        try:
            loaded = CodefigConfig.load(config)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from None

        level = (log_level or loaded.log.level).upper()
        if level not in _LOG_LEVELS:
            typer.echo(f"Error: --log-level must be one of {', '.join(_LOG_LEVELS)}, got '{log_level}'", err=True)
            raise typer.Exit(1)
        setup_logging(level, loaded.log.file)

        ctx.ensure_object(dict)
        ctx.obj["config_path"] = config

    return app
