"""Render a caption variant as a figcaption element."""

from markupsafe import escape

from .CaptionSpec import CaptionSpec
from .LabelOnly import LabelOnly
from .LabelWithLink import LabelWithLink


def render_caption(caption: CaptionSpec) -> str | None:
    """Build the ``<figcaption>`` HTML for ``caption``, or None for NoCaption."""
    if isinstance(caption, LabelWithLink):
        return (
            f"<figcaption><span>{escape(caption.label)}</span>"
            f"<a href='{escape(caption.url)}'>{escape(caption.link_title)}</a></figcaption>"
        )
    if isinstance(caption, LabelOnly):
        return f"<figcaption><span>{escape(caption.label)}</span></figcaption>\n"
    return None
