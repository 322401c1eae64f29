"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from typing import Any

from rich.console import Console
from rich.markup import escape

from codefig.api.StageResult import StageResult


def _run_single_execution(
    func: Callable[..., StageResult],
    kwargs: dict[str, Any],
    output_key: str | None,
    quiet: bool = False,
) -> None:
    """Run command once and display result.

    Announce, progress and result go to stderr; ``output[output_key]`` goes
    to stdout. Errors are always shown. Exits 0 on success, 1 on failure.
    """
    console = Console(stderr=True, soft_wrap=True)

    # Stage 1: Announce
    result = func(**kwargs)
    if not quiet:
        console.print(f"[bold]{escape(result.announce)}[/bold]", highlight=False)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        if not quiet:
            console.print(f"[dim]Progress: {message} ({progress_percent:.1%})[/dim]", highlight=False)

    # Stage 3: Result
    if not result.success:
        console.print(f"[red]Error: {escape(result.result)}[/red]", highlight=False)
    elif not quiet:
        console.print(f"[green]{escape(result.result)}[/green]", highlight=False)

    # Stage 4: Output
    if output_key is not None and result.success:
        sys.stdout.write(result.output[output_key])

    sys.exit(0 if result.success else 1)
