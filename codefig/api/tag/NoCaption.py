"""Caption variant: nothing to show."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NoCaption:
    """The tag carries no caption."""
