"""Render command."""

from pathlib import Path
from typing import Annotated

import typer

from codefig.api.render.cmd_render import cmd_render
from codefig.cli._run_single_execution import _run_single_execution


def render(
    ctx: typer.Context,
    template: Annotated[Path, typer.Argument(help="Template file to render", exists=True, dir_okay=False)],
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write the result here instead of stdout")] = None,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only print the rendered document")] = False,
) -> None:
    """Render a template whose code is written in {% codeblock %} tags."""
    _run_single_execution(
        cmd_render,
        {"template": template, "output_path": output, "config_path": (ctx.obj or {}).get("config_path")},
        output_key="content" if output is None else None,
        quiet=quiet,
    )
