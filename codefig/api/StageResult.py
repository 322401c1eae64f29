"""Result of a codefig command (render, css)."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class StageResult:
    """Outcome of one command run.

    ``announce`` is shown before any work starts. ``progress_callback`` does
    the work: it yields ``(fraction, message)`` pairs and fills in ``result``,
    ``output`` and ``success`` on the object it is given. ``output`` carries
    the command payload (``content`` for render, ``css`` for css) even on
    failure, so callers can index it without checking ``success`` first.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict[str, Any] = field(default_factory=dict)
    success: bool = False
