"""Caption variant: a label followed by a link."""

from dataclasses import dataclass

DEFAULT_LINK_TITLE = "link"


@dataclass(frozen=True)
class LabelWithLink:
    """Caption showing a label and a link to ``url``."""

    label: str
    url: str
    link_title: str = DEFAULT_LINK_TITLE
