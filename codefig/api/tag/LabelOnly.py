"""Caption variant: a label without a link."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LabelOnly:
    """Caption showing only a label (often a filename)."""

    label: str
