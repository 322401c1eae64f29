"""Assemble the code figure for one codeblock tag."""

from ..highlight.Highlighter import Highlighter

FIGURE_CLASS = "code"


def render_codeblock(body: str, filetype: str | None, caption_html: str | None, highlighter: Highlighter) -> str:
    """Highlight ``body`` and wrap it in ``<figure class='code'>``.

    The body is stripped at both ends; internal lines are kept as-is.
    Errors from the highlighter propagate.
    """
    highlighted = highlighter.highlight(body.strip(), filetype)

    source = f"<figure class='{FIGURE_CLASS}'>"
    if caption_html:
        source += caption_html
    source += highlighted
    source += "</figure>"
    return source
