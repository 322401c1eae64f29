"""CSS command."""

from typing import Annotated

import typer

from codefig.api.highlight.cmd_css import cmd_css
from codefig.cli._run_single_execution import _run_single_execution


def css(
    ctx: typer.Context,
    style: Annotated[str | None, typer.Option("--style", "-s", help="Pygments style name")] = None,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only print the stylesheet")] = False,
) -> None:
    """Print the stylesheet for highlighted code figures."""
    _run_single_execution(
        cmd_css,
        {"style": style, "config_path": (ctx.obj or {}).get("config_path")},
        output_key="css",
        quiet=quiet,
    )
