"""Tag arguments dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TagArguments:
    """Raw tag arguments split into the ``lang:`` marker and the caption text."""

    explicit_language: str | None
    remainder: str
